"""Domain event contracts for forwarded GraphQL executions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True, slots=True)
class GraphQLOperationEvent:
    """An approved execution, ready to be handed to a transport."""

    name: str
    data: dict[str, Any]
    occurred_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    @property
    def timestamp_ms(self) -> int:
        return int(self.occurred_at.timestamp() * 1000)

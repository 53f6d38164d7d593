"""Simple logging-backed implementation of the event publisher."""

from __future__ import annotations

import logging

from graphql_events.domain.events import GraphQLOperationEvent

LOGGER = logging.getLogger("graphql_events.events")


class LoggingEventPublisher:
    """Emit event summaries to structured logs."""

    def publish(self, event: GraphQLOperationEvent) -> None:
        LOGGER.info(
            "graphql_event_emitted",
            extra={
                "event_name": event.name,
                "operation": event.data.get("operation"),
                "types": event.data.get("types"),
                "identifier_count": len(event.data.get("identifiers", [])),
                "occurred_at": event.occurred_at.isoformat(),
            },
        )

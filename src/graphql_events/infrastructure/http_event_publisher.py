"""HTTP adapter sending events to an event-key authenticated ingest endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from graphql_events.application.event_publisher import EventDeliveryError
from graphql_events.domain.events import GraphQLOperationEvent

logger = logging.getLogger(__name__)

DEFAULT_EVENT_URL = "https://inn.gs"


@dataclass(frozen=True, slots=True)
class HttpEventPublisher:
    """POST each event as ``{name, data, ts}`` to ``{base_url}/e/{event_key}``."""

    event_key: str
    base_url: str = DEFAULT_EVENT_URL
    timeout_seconds: float = 5.0

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/e/{self.event_key}"

    def publish(self, event: GraphQLOperationEvent) -> None:
        body = {"name": event.name, "data": event.data, "ts": event.timestamp_ms}
        try:
            response = requests.post(self.endpoint, json=body, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise EventDeliveryError(f"Failed to send event {event.name}: {exc}") from exc

        logger.debug("Delivered event", extra={"event_name": event.name, "status_code": response.status_code})

"""Application-level event publishing contracts."""

from __future__ import annotations

from typing import Protocol

from graphql_events.domain.events import GraphQLOperationEvent


class EventPublisher(Protocol):
    """Port for handing approved events to a transport."""

    def publish(self, event: GraphQLOperationEvent) -> None:
        """Publish a single event."""


class NullEventPublisher:
    """No-op publisher used when event forwarding is disabled."""

    def publish(self, event: GraphQLOperationEvent) -> None:  # noqa: ARG002
        return


class EventDeliveryError(RuntimeError):
    """Raised by transports when an event could not be handed off."""

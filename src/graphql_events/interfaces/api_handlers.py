"""API-facing handlers that delegate to application services."""

from __future__ import annotations

import os
from pathlib import Path

from graphql_events.application.event_publisher import EventPublisher
from graphql_events.application.forwarding_service import ForwardOperationEvents
from graphql_events.infrastructure.http_event_publisher import DEFAULT_EVENT_URL, HttpEventPublisher
from graphql_events.infrastructure.logging_event_publisher import LoggingEventPublisher
from graphql_events.utils.config import EmissionConfig, load_emission_config


def build_event_publisher() -> EventPublisher:
    """HTTP delivery when an event key is configured, structured logs otherwise."""

    event_key = os.getenv("GRAPHQL_EVENTS_EVENT_KEY")
    if event_key:
        return HttpEventPublisher(
            event_key=event_key,
            base_url=os.getenv("GRAPHQL_EVENTS_EVENT_URL", DEFAULT_EVENT_URL),
        )
    return LoggingEventPublisher()


def build_forwarder(config_path: Path | None = None) -> ForwardOperationEvents:
    config = load_emission_config(config_path) if config_path else EmissionConfig()
    return ForwardOperationEvents(config=config, event_publisher=build_event_publisher())


def config_path_from_env() -> Path | None:
    raw = os.getenv("GRAPHQL_EVENTS_CONFIG_PATH")
    return Path(raw) if raw else None


def schema_path_from_env() -> Path:
    raw = os.getenv("GRAPHQL_EVENTS_SCHEMA_PATH")
    if not raw:
        raise RuntimeError("GRAPHQL_EVENTS_SCHEMA_PATH must point at a schema SDL file.")
    return Path(raw)


__all__ = ["build_event_publisher", "build_forwarder", "config_path_from_env", "schema_path_from_env"]

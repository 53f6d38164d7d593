"""Public package exports for graphql-events with lazy imports."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "EmissionConfig",
    "DenyList",
    "RedactionRule",
    "ExecutionContext",
    "OperationKind",
    "EntityIdentifier",
    "EventPayload",
    "document_hash",
    "event_identifier",
    "event_name",
    "extract_entities",
    "should_send_event",
    "decide_emission",
    "build_event_payload",
    "ForwardOperationEvents",
]

_EXPORT_MODULES: dict[str, str] = {
    "EmissionConfig": "graphql_events.utils.config",
    "DenyList": "graphql_events.utils.config",
    "RedactionRule": "graphql_events.utils.config",
    "ExecutionContext": "graphql_events.domain.models",
    "OperationKind": "graphql_events.domain.models",
    "EntityIdentifier": "graphql_events.domain.models",
    "EventPayload": "graphql_events.domain.models",
    "document_hash": "graphql_events.identity",
    "event_identifier": "graphql_events.identity",
    "event_name": "graphql_events.identity",
    "extract_entities": "graphql_events.entities",
    "should_send_event": "graphql_events.policy",
    "decide_emission": "graphql_events.policy",
    "build_event_payload": "graphql_events.payload",
    "ForwardOperationEvents": "graphql_events.application.forwarding_service",
}


def __getattr__(name: str) -> Any:
    if name not in _EXPORT_MODULES:
        raise AttributeError(f"module 'graphql_events' has no attribute {name!r}")

    module = import_module(_EXPORT_MODULES[name])
    value = getattr(module, name)
    globals()[name] = value
    return value

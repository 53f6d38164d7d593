"""DDD domain layer."""

from .events import GraphQLOperationEvent
from .models import (
    EntityIdentifier,
    EventPayload,
    ExecutionContext,
    ExtractedEntities,
    OperationDescriptor,
    OperationKind,
)

__all__ = [
    "GraphQLOperationEvent",
    "EntityIdentifier",
    "EventPayload",
    "ExecutionContext",
    "ExtractedEntities",
    "OperationDescriptor",
    "OperationKind",
]

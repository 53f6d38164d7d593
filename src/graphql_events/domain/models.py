"""Domain models describing an observed GraphQL execution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from graphql import DocumentNode, GraphQLSchema


class OperationKind(str, Enum):
    """Kinds of executable operations, plus the unresolvable case."""

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    """Inputs supplied by the execution framework for a single operation."""

    document: DocumentNode
    schema: GraphQLSchema
    operation_name: str | None = None
    variable_values: Mapping[str, Any] | None = None
    context_value: Any = None


@dataclass(frozen=True, slots=True)
class OperationDescriptor:
    """Deterministic identity of an operation document."""

    kind: OperationKind
    name: str | None
    document_hash: str

    @property
    def is_anonymous(self) -> bool:
        return self.name is None


@dataclass(frozen=True, slots=True)
class EntityIdentifier:
    """A concrete record touched by a result."""

    typename: str
    id: Any

    def as_dict(self) -> dict[str, Any]:
        return {"typename": self.typename, "id": self.id}


@dataclass(frozen=True, slots=True)
class ExtractedEntities:
    """Identifiers and typenames collected from one result tree."""

    identifiers: tuple[EntityIdentifier, ...] = ()
    types: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class EventPayload:
    """Event body describing one approved execution."""

    operation_type: OperationKind
    operation_id: str
    operation_name: str
    identifiers: tuple[EntityIdentifier, ...]
    types: tuple[str, ...]
    variables: Mapping[str, Any] = field(default_factory=dict)
    result: Mapping[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "operation": {
                "type": self.operation_type.value,
                "id": self.operation_id,
                "name": self.operation_name,
            },
        }
        if self.result is not None:
            payload["result"] = dict(self.result)
        payload["identifiers"] = [identifier.as_dict() for identifier in self.identifiers]
        payload["types"] = list(self.types)
        payload["variables"] = dict(self.variables)
        return payload

"""Typed depth-first walk over the fields of a GraphQL document.

Every field of the document is visited once, in document order, with the
schema's type information resolved for it: the parent type the field is
selected on and the named output type it resolves to. Fields inside inline
fragments and fragment definitions are visited against their type
conditions, so each visit reports a concrete ``(parent type, field)`` pair.
The callback decides whether the walk continues or stops early.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from graphql import (
    BREAK,
    DocumentNode,
    FieldNode,
    GraphQLNamedType,
    GraphQLSchema,
    TypeInfo,
    TypeInfoVisitor,
    Visitor,
    get_named_type,
    visit,
)


class Walk(Enum):
    """Callback verdict for typed walks."""

    CONTINUE = "continue"
    STOP = "stop"


@dataclass(frozen=True, slots=True)
class FieldVisit:
    """A document field with its resolved schema types."""

    node: FieldNode
    parent_type: GraphQLNamedType | None
    field_type: GraphQLNamedType | None

    @property
    def field_name(self) -> str:
        return self.node.name.value

    @property
    def schema_coordinate(self) -> str | None:
        if self.parent_type is None:
            return None
        return f"{self.parent_type.name}.{self.field_name}"


FieldCallback = Callable[[FieldVisit], Walk]


class _FieldVisitor(Visitor):
    def __init__(self, type_info: TypeInfo, on_field: FieldCallback) -> None:
        super().__init__()
        self._type_info = type_info
        self._on_field = on_field
        self.stopped = False

    def enter_field(self, node: FieldNode, *_args: Any) -> Any:
        field_visit = FieldVisit(
            node=node,
            parent_type=self._type_info.get_parent_type(),
            field_type=get_named_type(self._type_info.get_type()),
        )
        if self._on_field(field_visit) is Walk.STOP:
            self.stopped = True
            return BREAK
        return None


def walk_fields(document: DocumentNode, schema: GraphQLSchema, on_field: FieldCallback) -> bool:
    """Visit every field of ``document``; return True when the callback stopped the walk."""

    type_info = TypeInfo(schema)
    visitor = _FieldVisitor(type_info, on_field)
    visit(document, TypeInfoVisitor(type_info, visitor))
    return visitor.stopped

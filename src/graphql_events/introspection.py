"""Questions answered from a parsed operation document and its schema."""

from __future__ import annotations

from typing import Collection

from graphql import (
    DocumentNode,
    GraphQLSchema,
    OperationDefinitionNode,
    get_operation_ast,
    is_introspection_type,
)

from graphql_events.domain.models import OperationKind
from graphql_events.traversal import FieldVisit, Walk, walk_fields


def operation_kind_of(document: DocumentNode, operation_name: str | None = None) -> OperationKind:
    """Return the kind of the selected operation, or ``UNKNOWN`` when none resolves."""

    operation = get_operation_ast(document, operation_name)
    if operation is None:
        return OperationKind.UNKNOWN
    return OperationKind(operation.operation.value)


def operation_name_of(document: DocumentNode, operation_name: str | None = None) -> str | None:
    """Return the supplied name, else the declared one; ``None`` means anonymous."""

    if operation_name:
        return operation_name

    operation = next(
        (
            definition
            for definition in document.definitions
            if isinstance(definition, OperationDefinitionNode)
        ),
        None,
    )
    if operation is None or operation.name is None:
        return None
    return operation.name.value or None


def touches_introspection(document: DocumentNode, schema: GraphQLSchema) -> bool:
    def on_field(field_visit: FieldVisit) -> Walk:
        if field_visit.field_type is not None and is_introspection_type(field_visit.field_type):
            return Walk.STOP
        return Walk.CONTINUE

    return walk_fields(document, schema, on_field)


def touches_denied_type(
    document: DocumentNode, schema: GraphQLSchema, deny_types: Collection[str]
) -> bool:
    if not deny_types:
        return False

    def on_field(field_visit: FieldVisit) -> Walk:
        if field_visit.field_type is not None and field_visit.field_type.name in deny_types:
            return Walk.STOP
        return Walk.CONTINUE

    return walk_fields(document, schema, on_field)


def touches_denied_coordinate(
    document: DocumentNode, schema: GraphQLSchema, deny_coordinates: Collection[str]
) -> bool:
    """Check ``Parent.field`` coordinates rather than output types."""

    if not deny_coordinates:
        return False

    def on_field(field_visit: FieldVisit) -> Walk:
        if field_visit.schema_coordinate in deny_coordinates:
            return Walk.STOP
        return Walk.CONTINUE

    return walk_fields(document, schema, on_field)

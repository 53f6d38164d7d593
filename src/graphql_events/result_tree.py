"""Walk an execution result in lock-step with the operation and schema.

Each value in the result is classified against the schema type of the field
that produced it: objects become ``CompositeNode``, arrays ``ListNode`` and
scalars/enums ``LeafNode``. Response keys are resolved back to field
definitions through the operation's selection sets, which takes care of
aliases and of fragments applied by type condition. Values whose shape does
not match their schema type are skipped together with everything below them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence, Union

from graphql import (
    ExecutionResult,
    FieldNode,
    FragmentDefinitionNode,
    GraphQLCompositeType,
    GraphQLError,
    GraphQLLeafType,
    GraphQLOutputType,
    get_operation_ast,
    is_composite_type,
    is_interface_type,
    is_leaf_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
)
from graphql.execution.collect_fields import collect_fields
from graphql.execution.values import get_variable_values

from graphql_events.domain.models import ExecutionContext
from graphql_events.traversal import Walk

ResultPath = tuple[Union[str, int], ...]


@dataclass(frozen=True, slots=True)
class CompositeNode:
    value: Mapping[str, Any]
    typename: str | None
    type_: GraphQLCompositeType
    path: ResultPath


@dataclass(frozen=True, slots=True)
class ListNode:
    value: Sequence[Any]
    path: ResultPath


@dataclass(frozen=True, slots=True)
class LeafNode:
    value: Any
    field_name: str
    parent_typename: str | None
    type_: GraphQLLeafType
    path: ResultPath


ResultNode = Union[CompositeNode, ListNode, LeafNode]
NodeCallback = Callable[[ResultNode], Walk]


def result_data(result: ExecutionResult | Mapping[str, Any] | None) -> Any:
    if result is None:
        return None
    if isinstance(result, Mapping):
        return result.get("data")
    return result.data


def result_errors(result: ExecutionResult | Mapping[str, Any] | None) -> list[Any]:
    if result is None:
        return []
    errors = result.get("errors") if isinstance(result, Mapping) else result.errors
    return list(errors or [])


def format_error(error: Any) -> Any:
    if isinstance(error, GraphQLError):
        return error.formatted
    return error


class _ResultWalker:
    def __init__(self, context: ExecutionContext, on_node: NodeCallback) -> None:
        self._schema = context.schema
        self._raw_variable_values = dict(context.variable_values or {})
        self._variable_values: dict[str, Any] = {}
        self._fragments = {
            definition.name.value: definition
            for definition in context.document.definitions
            if isinstance(definition, FragmentDefinitionNode)
        }
        self._on_node = on_node

    def walk_root(self, data: Mapping[str, Any], context: ExecutionContext) -> bool:
        operation = get_operation_ast(context.document, context.operation_name)
        if operation is None:
            return False
        root_type = self._schema.get_root_type(operation.operation)
        if root_type is None:
            return False

        # Directives read coerced values, so unsupplied variables take their defaults.
        coerced = get_variable_values(
            self._schema, operation.variable_definitions or (), self._raw_variable_values
        )
        if isinstance(coerced, list):
            return False
        self._variable_values = coerced

        fields = collect_fields(
            self._schema, self._fragments, self._variable_values, root_type, operation.selection_set
        )
        return self._walk_object(data, root_type, fields, ())

    def _walk_value(
        self,
        value: Any,
        type_: GraphQLOutputType,
        field_nodes: list[FieldNode],
        path: ResultPath,
        parent_typename: str | None,
    ) -> bool:
        if value is None:
            return False
        if is_non_null_type(type_):
            type_ = type_.of_type

        if is_list_type(type_):
            if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
                return False
            if self._on_node(ListNode(value=value, path=path)) is Walk.STOP:
                return True
            return any(
                self._walk_value(item, type_.of_type, field_nodes, path + (index,), parent_typename)
                for index, item in enumerate(value)
            )

        if is_leaf_type(type_):
            if isinstance(value, Mapping) or (isinstance(value, Sequence) and not isinstance(value, str)):
                return False
            leaf = LeafNode(
                value=value,
                field_name=field_nodes[0].name.value,
                parent_typename=parent_typename,
                type_=type_,
                path=path,
            )
            return self._on_node(leaf) is Walk.STOP

        if is_composite_type(type_) and isinstance(value, Mapping):
            runtime_type = self._runtime_type(value, type_)
            fields = self._collect_subfields(runtime_type, field_nodes)
            return self._walk_object(value, runtime_type, fields, path)

        return False

    def _collect_subfields(
        self, runtime_type: GraphQLCompositeType, field_nodes: list[FieldNode]
    ) -> dict[str, list[FieldNode]]:
        subfields: dict[str, list[FieldNode]] = {}
        for field_node in field_nodes:
            if field_node.selection_set is None:
                continue
            collected = collect_fields(
                self._schema,
                self._fragments,
                self._variable_values,
                runtime_type,
                field_node.selection_set,
            )
            for response_key, nodes in collected.items():
                subfields.setdefault(response_key, []).extend(nodes)
        return subfields

    def _walk_object(
        self,
        value: Mapping[str, Any],
        runtime_type: GraphQLCompositeType,
        fields: Mapping[str, list[FieldNode]],
        path: ResultPath,
    ) -> bool:
        typename = _reported_typename(value)
        if typename is None and is_object_type(runtime_type):
            typename = runtime_type.name

        node = CompositeNode(value=value, typename=typename, type_=runtime_type, path=path)
        if self._on_node(node) is Walk.STOP:
            return True

        for response_key, child in value.items():
            field_nodes = fields.get(response_key)
            if not field_nodes:
                continue
            field_definition = _field_definition(runtime_type, field_nodes[0].name.value)
            if field_definition is None:
                continue
            if self._walk_value(child, field_definition.type, field_nodes, path + (response_key,), typename):
                return True
        return False

    def _runtime_type(self, value: Mapping[str, Any], static_type: GraphQLCompositeType) -> GraphQLCompositeType:
        typename = _reported_typename(value)
        if typename is None:
            return static_type
        reported_type = self._schema.get_type(typename)
        if reported_type is not None and is_composite_type(reported_type):
            return reported_type
        return static_type


def _reported_typename(value: Mapping[str, Any]) -> str | None:
    typename = value.get("__typename")
    return typename if isinstance(typename, str) and typename else None


def _field_definition(type_: GraphQLCompositeType, field_name: str):
    if is_object_type(type_) or is_interface_type(type_):
        return type_.fields.get(field_name)
    return None


def walk_result(
    result: ExecutionResult | Mapping[str, Any] | None,
    context: ExecutionContext,
    on_node: NodeCallback,
) -> bool:
    """Visit every node of the result's ``data``; return True when stopped early."""

    data = result_data(result)
    if not isinstance(data, Mapping):
        return False
    return _ResultWalker(context, on_node).walk_root(data, context)

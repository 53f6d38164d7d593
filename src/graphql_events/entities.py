"""Collect the typed entities a result touched."""

from __future__ import annotations

from typing import Any, Collection, Mapping

from graphql import ExecutionResult

from graphql_events.domain.models import EntityIdentifier, ExecutionContext, ExtractedEntities
from graphql_events.result_tree import LeafNode, ResultNode, walk_result
from graphql_events.traversal import Walk
from graphql_events.utils.ordered import OrderedSet

DEFAULT_ID_FIELDS: tuple[str, ...] = ("id",)


def extract_entities(
    result: ExecutionResult | Mapping[str, Any] | None,
    context: ExecutionContext,
    id_fields: Collection[str] = DEFAULT_ID_FIELDS,
) -> ExtractedEntities:
    """Return each distinct ``(typename, id)`` pair and typename, in discovery order.

    Ids are compared by their string form, so ``5`` and ``"5"`` on the same
    type are one entity; the first value seen is the one reported.

    Example: ``{posts: [{__typename: "Post", id: 1}]}`` yields identifiers
    ``[EntityIdentifier("Post", 1)]`` and types ``["Post"]``.
    """

    seen: OrderedSet[tuple[str, str]] = OrderedSet()
    identifiers: list[EntityIdentifier] = []
    types: OrderedSet[str] = OrderedSet()

    def on_node(node: ResultNode) -> Walk:
        if not isinstance(node, LeafNode) or node.field_name not in id_fields:
            return Walk.CONTINUE
        if node.parent_typename is None:
            return Walk.CONTINUE
        if seen.add((node.parent_typename, str(node.value))):
            identifiers.append(EntityIdentifier(typename=node.parent_typename, id=node.value))
            types.add(node.parent_typename)
        return Walk.CONTINUE

    walk_result(result, context, on_node)

    return ExtractedEntities(identifiers=tuple(identifiers), types=tuple(types))


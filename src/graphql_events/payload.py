"""Composing the event payload for an approved execution."""

from __future__ import annotations

from typing import Any, Mapping

from graphql import ExecutionResult

from graphql_events.domain.models import EventPayload, ExecutionContext
from graphql_events.entities import extract_entities
from graphql_events.identity import event_identifier
from graphql_events.introspection import operation_kind_of, operation_name_of
from graphql_events.redaction import Censor, redact_paths
from graphql_events.result_tree import format_error, result_data, result_errors
from graphql_events.utils.config import EmissionConfig


def build_event_payload(
    context: ExecutionContext,
    result: ExecutionResult | Mapping[str, Any] | None,
    config: EmissionConfig,
    censor: Censor = redact_paths,
) -> EventPayload:
    """Build the payload; emission is assumed to be approved already."""

    document, operation_name = context.document, context.operation_name
    entities = extract_entities(result, context, id_fields=config.id_fields)

    included_result: dict[str, Any] | None = None
    if config.include_result_data:
        included_result = {
            "data": result_data(result),
            "errors": [format_error(error) for error in result_errors(result)],
        }
        if config.redaction is not None:
            included_result = censor(included_result, config.redaction.paths, config.redaction.censor)

    return EventPayload(
        operation_type=operation_kind_of(document, operation_name),
        operation_id=event_identifier(document, operation_name),
        operation_name=operation_name_of(document, operation_name) or "",
        identifiers=entities.identifiers,
        types=entities.types,
        variables=dict(context.variable_values or {}),
        result=included_result,
    )

"""Deciding whether an execution is forwarded as an event."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from graphql import ExecutionResult

from graphql_events.domain.models import ExecutionContext, OperationKind
from graphql_events.introspection import (
    operation_kind_of,
    operation_name_of,
    touches_denied_coordinate,
    touches_denied_type,
    touches_introspection,
)
from graphql_events.result_tree import result_errors
from graphql_events.utils.config import EmissionConfig

logger = logging.getLogger(__name__)


class EmissionRule(str, Enum):
    """Cascade rules, in evaluation order."""

    OPERATION_NOT_ALLOWED = "operation-not-allowed"
    DENIED_TYPE = "denied-type"
    DENIED_SCHEMA_COORDINATE = "denied-schema-coordinate"
    ANONYMOUS_ALLOWED = "anonymous-allowed"
    INTROSPECTION_ALLOWED = "introspection-allowed"
    ERRORS_ALLOWED = "errors-allowed"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class EmissionDecision:
    send: bool
    rule: EmissionRule
    rationale: str


def operation_allowed(
    context: ExecutionContext,
    config: EmissionConfig,
    log: logging.Logger | None = None,
) -> bool:
    """Check the operation kind against the configured allow-set."""

    log = log or logger
    if not config.send_operations:
        log.warning("No operations are allowed.")
        return False

    kind = operation_kind_of(context.document, context.operation_name)
    if kind is OperationKind.UNKNOWN:
        log.warning("Unknown operation")
        return False

    if kind not in config.send_operations:
        name = operation_name_of(context.document, context.operation_name)
        log.warning(f"Operation {kind.value} named {name} is not allowed")
        return False
    return True


def decide_emission(
    context: ExecutionContext,
    result: ExecutionResult | Mapping[str, Any] | None,
    config: EmissionConfig,
    event_name: str,
    log: logging.Logger | None = None,
) -> EmissionDecision:
    """Run the allow/deny cascade; the first matching rule decides."""

    log = log or logger

    def decided(send: bool, rule: EmissionRule, rationale: str) -> EmissionDecision:
        log.warning(rationale)
        return EmissionDecision(send=send, rule=rule, rationale=rationale)

    if not operation_allowed(context, config, log):
        return decided(
            False,
            EmissionRule.OPERATION_NOT_ALLOWED,
            f"Blocking event {event_name} because it is not a configured operation.",
        )

    document, schema = context.document, context.schema
    if touches_denied_type(document, schema, config.denylist.types):
        return decided(
            False,
            EmissionRule.DENIED_TYPE,
            f"Blocking event {event_name} because it is present in the denylist of types.",
        )

    if touches_denied_coordinate(document, schema, config.denylist.schema_coordinates):
        return decided(
            False,
            EmissionRule.DENIED_SCHEMA_COORDINATE,
            f"Blocking event {event_name} because it is present in the denylist of schema coordinates.",
        )

    is_anonymous = operation_name_of(document, context.operation_name) is None
    if is_anonymous and config.send_anonymous_operations:
        return decided(
            True,
            EmissionRule.ANONYMOUS_ALLOWED,
            f"Sending event {event_name} because anonymous operations are configured.",
        )

    is_introspection = touches_introspection(document, schema)
    if is_introspection and config.send_introspection:
        return decided(
            True,
            EmissionRule.INTROSPECTION_ALLOWED,
            f"Sending event {event_name} because introspection queries are configured.",
        )

    has_errors = bool(result_errors(result))
    if has_errors and config.send_errors:
        return decided(
            True,
            EmissionRule.ERRORS_ALLOWED,
            f"Sending event {event_name} because sending errors is configured.",
        )

    send = not is_introspection and not has_errors
    verb = "Sending" if send else "Blocking"
    return decided(
        send,
        EmissionRule.DEFAULT,
        f"{verb} event {event_name} (introspection={is_introspection}, errors={has_errors}).",
    )


def should_send_event(
    context: ExecutionContext,
    result: ExecutionResult | Mapping[str, Any] | None,
    config: EmissionConfig,
    event_name: str,
    log: logging.Logger | None = None,
) -> bool:
    return decide_emission(context, result, config, event_name, log).send

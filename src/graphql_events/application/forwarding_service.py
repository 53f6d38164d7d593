"""Application services forwarding executed operations as events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from graphql import ExecutionResult, GraphQLError, GraphQLSchema, execute_sync, parse, validate

from graphql_events.application.event_publisher import EventDeliveryError, EventPublisher, NullEventPublisher
from graphql_events.domain.events import GraphQLOperationEvent
from graphql_events.domain.models import ExecutionContext
from graphql_events.identity import event_name
from graphql_events.payload import build_event_payload
from graphql_events.policy import decide_emission
from graphql_events.redaction import Censor, redact_paths
from graphql_events.utils.config import EmissionConfig
from graphql_events.utils.log import build_logger


@dataclass(slots=True)
class ForwardOperationEvents:
    """Use case that decides on, builds and publishes one event per execution."""

    config: EmissionConfig = field(default_factory=EmissionConfig)
    event_publisher: EventPublisher = field(default_factory=NullEventPublisher)
    censor: Censor = redact_paths

    def handle(
        self,
        context: ExecutionContext,
        result: ExecutionResult | Mapping[str, Any],
    ) -> GraphQLOperationEvent | None:
        """Forward ``result`` if policy allows; return the published event."""

        log = build_logger(self.config.logging)
        name = event_name(context.document, self.config.event_name_prefix, context.operation_name)
        decision = decide_emission(context, result, self.config, name, log)
        if not decision.send:
            return None

        try:
            payload = build_event_payload(context, result, self.config, censor=self.censor)
        except GraphQLError:
            log.exception(f"Failed to build payload for event {name}")
            return None

        event = GraphQLOperationEvent(name=name, data=payload.as_dict())
        try:
            self.event_publisher.publish(event)
        except EventDeliveryError:
            log.exception(f"Failed to deliver event {name}")
            return None
        return event

    def execute(
        self,
        schema: GraphQLSchema,
        source: str,
        variable_values: Mapping[str, Any] | None = None,
        operation_name: str | None = None,
        context_value: Any = None,
    ) -> ExecutionResult:
        """Parse, validate and execute ``source``, then forward the outcome.

        Raises ``GraphQLSyntaxError`` for unparsable sources. Validation
        failures are returned as errors without executing or forwarding.
        """

        document = parse(source)
        validation_errors = validate(schema, document)
        if validation_errors:
            return ExecutionResult(data=None, errors=validation_errors)

        result = execute_sync(
            schema,
            document,
            context_value=context_value,
            variable_values=variable_values,
            operation_name=operation_name,
        )
        context = ExecutionContext(
            document=document,
            schema=schema,
            operation_name=operation_name,
            variable_values=variable_values,
            context_value=context_value,
        )
        self.handle(context, result)
        return result

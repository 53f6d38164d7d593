"""CLI-facing handlers that evaluate saved executions offline."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from graphql_events.domain.models import ExecutionContext
from graphql_events.identity import event_name
from graphql_events.interfaces.sources import load_document, load_json, load_schema
from graphql_events.payload import build_event_payload
from graphql_events.policy import decide_emission
from graphql_events.utils.config import EmissionConfig, load_emission_config
from graphql_events.utils.log import build_logger


def resolve_config(config_path: Path | None, prefix: str | None = None) -> EmissionConfig:
    config = load_emission_config(config_path) if config_path else EmissionConfig()
    if prefix:
        config = config.model_copy(update={"event_name_prefix": prefix})
    return config


def describe_event_name(query_path: Path, prefix: str, operation_name: str | None = None) -> str:
    return event_name(load_document(query_path), prefix, operation_name)


def inspect_execution(
    schema_path: Path,
    query_path: Path,
    result_path: Path,
    config_path: Path | None = None,
    operation_name: str | None = None,
    variables_path: Path | None = None,
) -> dict[str, Any]:
    """Evaluate policy for a saved execution and build the payload it would send."""

    config = resolve_config(config_path)
    context = ExecutionContext(
        document=load_document(query_path),
        schema=load_schema(schema_path),
        operation_name=operation_name,
        variable_values=load_json(variables_path) if variables_path else None,
    )
    result = load_json(result_path)
    name = event_name(context.document, config.event_name_prefix, operation_name)
    decision = decide_emission(context, result, config, name, build_logger(config.logging))

    report: dict[str, Any] = {
        "event_name": name,
        "send": decision.send,
        "rule": decision.rule.value,
        "rationale": decision.rationale,
        "payload": None,
    }
    if decision.send:
        report["payload"] = build_event_payload(context, result, config).as_dict()
    return report

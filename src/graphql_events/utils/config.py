from __future__ import annotations

from pathlib import Path
from typing import Any

import json

from pydantic import BaseModel, ConfigDict, Field, field_validator

from graphql_events.domain.models import OperationKind


class DenyList(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    types: tuple[str, ...] = ()
    schema_coordinates: tuple[str, ...] = Field((), alias="schemaCoordinates")

    @field_validator("schema_coordinates")
    @classmethod
    def _validate_schema_coordinates(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for coordinate in value:
            parent, _, field_name = coordinate.partition(".")
            if not parent or not field_name:
                raise ValueError(
                    f"Schema coordinate '{coordinate}' must look like 'ParentType.fieldName'."
                )
        return value


class RedactionRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    paths: tuple[str, ...]
    censor: Any = "[REDACTED]"


class EmissionConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # None means no operation kinds were configured at all.
    send_operations: frozenset[OperationKind] | None = Field(
        frozenset({OperationKind.QUERY, OperationKind.MUTATION}),
        alias="sendOperations",
    )
    send_anonymous_operations: bool = Field(False, alias="sendAnonymousOperations")
    send_introspection: bool = Field(False, alias="sendIntrospection")
    send_errors: bool = Field(False, alias="sendErrors")
    denylist: DenyList = Field(default_factory=DenyList)
    include_result_data: bool = Field(False, alias="includeResultData")
    redaction: RedactionRule | None = None
    id_fields: tuple[str, ...] = Field(("id",), alias="idFields")
    event_name_prefix: str = Field("graphql", alias="eventNamePrefix", min_length=1)
    logging: bool = True

    @field_validator("send_operations")
    @classmethod
    def _validate_send_operations(
        cls, value: frozenset[OperationKind] | None
    ) -> frozenset[OperationKind] | None:
        if value is not None and OperationKind.UNKNOWN in value:
            raise ValueError("sendOperations cannot include 'unknown'.")
        return value


def load_emission_config(path: Path) -> EmissionConfig:
    """Load emission options from a JSON or YAML file using camelCase keys."""

    data = _read_emission_options(path)
    if not isinstance(data, dict):
        raise ValueError(f"Emission config {path} must contain a mapping of options.")
    return EmissionConfig.model_validate(data)


def _read_emission_options(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        if path.suffix.lower() not in {".yaml", ".yml"}:
            return json.load(handle)
        try:
            import yaml
        except ImportError as exc:
            raise ImportError(
                "PyYAML is required for YAML emission configs; install graphql-events[yaml]."
            ) from exc
        return yaml.safe_load(handle) or {}

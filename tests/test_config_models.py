import json

import pytest

from graphql_events.domain.models import OperationKind
from graphql_events.utils.config import EmissionConfig, load_emission_config


def test_emission_config_defaults():
    config = EmissionConfig()

    assert config.send_operations == frozenset({OperationKind.QUERY, OperationKind.MUTATION})
    assert not config.send_anonymous_operations
    assert not config.send_introspection
    assert not config.send_errors
    assert not config.include_result_data
    assert config.redaction is None
    assert config.id_fields == ("id",)
    assert config.denylist.types == ()


def test_emission_config_parses_camel_case_keys():
    data = {
        "sendOperations": ["query", "subscription"],
        "sendAnonymousOperations": True,
        "sendIntrospection": True,
        "sendErrors": True,
        "includeResultData": True,
        "eventNamePrefix": "graphql-test",
        "denylist": {"types": ["User"], "schemaCoordinates": ["Query.me"]},
        "redaction": {"paths": ["*.test"], "censor": "***"},
        "idFields": ["id", "uuid"],
    }

    config = EmissionConfig.model_validate(data)

    assert config.send_operations == frozenset({OperationKind.QUERY, OperationKind.SUBSCRIPTION})
    assert config.send_anonymous_operations and config.send_introspection and config.send_errors
    assert config.denylist.schema_coordinates == ("Query.me",)
    assert config.redaction.paths == ("*.test",)
    assert config.redaction.censor == "***"
    assert config.id_fields == ("id", "uuid")
    assert config.event_name_prefix == "graphql-test"


def test_emission_config_accepts_explicitly_empty_allow_set():
    assert EmissionConfig.model_validate({"sendOperations": None}).send_operations is None
    assert EmissionConfig.model_validate({"sendOperations": []}).send_operations == frozenset()


def test_emission_config_rejects_unknown_operation_kind():
    with pytest.raises(ValueError):
        EmissionConfig.model_validate({"sendOperations": ["unknown"]})

    with pytest.raises(ValueError):
        EmissionConfig.model_validate({"sendOperations": ["fetch"]})


def test_emission_config_rejects_malformed_schema_coordinate():
    with pytest.raises(ValueError):
        EmissionConfig.model_validate({"denylist": {"schemaCoordinates": ["Query"]}})


def test_emission_config_is_immutable():
    config = EmissionConfig()

    with pytest.raises(ValueError):
        config.send_errors = True


def test_load_emission_config_from_json(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"sendErrors": True, "eventNamePrefix": "svc"}), encoding="utf-8")

    config = load_emission_config(path)

    assert config.send_errors
    assert config.event_name_prefix == "svc"


def test_load_emission_config_from_yaml(tmp_path):
    path = tmp_path / "events.yaml"
    path.write_text(
        "sendOperations:\n  - mutation\ndenylist:\n  types:\n    - User\n",
        encoding="utf-8",
    )

    config = load_emission_config(path)

    assert config.send_operations == frozenset({OperationKind.MUTATION})
    assert config.denylist.types == ("User",)


def test_load_emission_config_rejects_non_mapping(tmp_path):
    config_path = tmp_path / "events.json"
    config_path.write_text(json.dumps(["query"]), encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a mapping"):
        load_emission_config(config_path)

from __future__ import annotations

import json

import runpy

import pytest
from typer.testing import CliRunner

from graphql_events import cli

runner = CliRunner()


def test_event_name_command(tmp_path):
    query = tmp_path / "query.graphql"
    query.write_text("query TestQuery { test }", encoding="utf-8")

    result = runner.invoke(cli.app, ["event-name", "--query", str(query), "--prefix", "graphql-test"])

    assert result.exit_code == 0
    assert result.output.strip() == "graphql-test/test-query.query"


def test_inspect_command_dispatches_to_handler(monkeypatch, tmp_path):
    captured = {}

    def fake_inspect(**kwargs):
        captured.update(kwargs)
        return {"event_name": "graphql/q.query", "send": True, "rule": "default", "rationale": "", "payload": {}}

    monkeypatch.setattr(cli, "inspect_execution", fake_inspect)

    result = runner.invoke(
        cli.app,
        ["inspect", "--schema", "schema.graphql", "--query", "q.graphql", "--result", "result.json"],
    )

    assert result.exit_code == 0
    assert json.loads(result.output)["event_name"] == "graphql/q.query"
    assert captured["schema_path"].name == "schema.graphql"
    assert captured["config_path"] is None
    assert captured["operation_name"] is None


def test_inspect_command_exits_non_zero_when_blocked(monkeypatch):
    monkeypatch.setattr(
        cli,
        "inspect_execution",
        lambda **kwargs: {"event_name": "e", "send": False, "rule": "default", "rationale": "", "payload": None},
    )

    result = runner.invoke(
        cli.app,
        ["inspect", "--schema", "s.graphql", "--query", "q.graphql", "--result", "r.json"],
    )

    assert result.exit_code == 1


def test_module_entrypoint_runs_cli(monkeypatch, tmp_path):
    query = tmp_path / "query.graphql"
    query.write_text('mutation Create { createPost(title: "x") { id } }', encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["graphql_events", "event-name", "--query", str(query)])

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("graphql_events", run_name="__main__")

    assert excinfo.value.code == 0

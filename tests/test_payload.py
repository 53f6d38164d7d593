from __future__ import annotations

from graphql import ExecutionResult, GraphQLError

from graphql_events.identity import document_hash
from graphql_events.payload import build_event_payload
from graphql_events.utils.config import EmissionConfig, RedactionRule

WITH_DATA = EmissionConfig(include_result_data=True)


def test_builds_named_query_with_data(make_context) -> None:
    context = make_context("query TestQuery { test }")
    result = {"errors": [], "data": {"test": "hello"}}

    payload = build_event_payload(context, result, WITH_DATA)

    assert payload.as_dict() == {
        "operation": {"type": "query", "id": "test-query", "name": "TestQuery"},
        "result": {"data": {"test": "hello"}, "errors": []},
        "identifiers": [],
        "types": [],
        "variables": {},
    }


def test_builds_named_query_with_types_and_identifiers(make_context) -> None:
    context = make_context("query FindPosts { posts { id } }")
    posts = [
        {"id": 5, "__typename": "Post"},
        {"id": 7, "__typename": "Post"},
        {"id": 11, "__typename": "Post"},
    ]
    result = {"errors": [], "data": {"posts": posts}}

    payload = build_event_payload(context, result, WITH_DATA)

    assert payload.as_dict() == {
        "operation": {"type": "query", "id": "find-posts", "name": "FindPosts"},
        "result": {"data": {"posts": posts}, "errors": []},
        "identifiers": [
            {"typename": "Post", "id": 5},
            {"typename": "Post", "id": 7},
            {"typename": "Post", "id": 11},
        ],
        "types": ["Post"],
        "variables": {},
    }


def test_builds_anonymous_query(make_context) -> None:
    context = make_context("query { test }")
    result = {"errors": [], "data": {"test": "hello"}}

    payload = build_event_payload(context, result, WITH_DATA.model_copy(update={"send_anonymous_operations": True}))

    assert payload.as_dict()["operation"] == {
        "type": "query",
        "id": f"anonymous-{document_hash(context.document)}",
        "name": "",
    }
    assert payload.identifiers == ()
    assert payload.types == ()


def test_result_is_omitted_unless_configured(make_context) -> None:
    context = make_context("query TestQuery { test }")

    payload = build_event_payload(context, {"data": {"test": "hello"}}, EmissionConfig())

    assert payload.result is None
    assert "result" not in payload.as_dict()


def test_redaction_censors_result_paths(make_context) -> None:
    context = make_context("query TestRedactedQuery { test }")
    result = {"errors": [], "data": {"test": "hello"}}
    config = EmissionConfig(include_result_data=True, redaction=RedactionRule(paths=["*.test"], censor="***"))

    payload = build_event_payload(context, result, config)

    assert payload.as_dict() == {
        "operation": {"type": "query", "id": "test-redacted-query", "name": "TestRedactedQuery"},
        "result": {"data": {"test": "***"}, "errors": []},
        "identifiers": [],
        "types": [],
        "variables": {},
    }
    assert result["data"] == {"test": "hello"}


def test_redaction_does_not_affect_identifiers(make_context) -> None:
    context = make_context("query FindPosts { posts { id title } }")
    result = {"data": {"posts": [{"id": "1", "title": "a"}, {"id": "2", "title": "b"}]}}
    config = EmissionConfig(
        include_result_data=True,
        redaction=RedactionRule(paths=["data.posts.*.id"], censor="[hidden]"),
    )

    payload = build_event_payload(context, result, config).as_dict()

    assert payload["result"]["data"]["posts"] == [
        {"id": "[hidden]", "title": "a"},
        {"id": "[hidden]", "title": "b"},
    ]
    assert payload["identifiers"] == [{"typename": "Post", "id": "1"}, {"typename": "Post", "id": "2"}]


def test_custom_censor_is_used(make_context) -> None:
    context = make_context("query TestQuery { test }")
    config = EmissionConfig(include_result_data=True, redaction=RedactionRule(paths=["data.test"]))
    calls = []

    def censor(data, paths, replacement):
        calls.append((tuple(paths), replacement))
        return {"data": None, "errors": []}

    payload = build_event_payload(context, {"data": {"test": "hello"}}, config, censor=censor)

    assert calls == [(("data.test",), "[REDACTED]")]
    assert payload.result == {"data": None, "errors": []}


def test_variables_pass_through(make_context) -> None:
    context = make_context(
        'query FindNode($id: ID!) { node(id: $id) { __typename id } }',
        variables={"id": "4"},
    )
    result = {"data": {"node": {"__typename": "User", "id": "4"}}}

    payload = build_event_payload(context, result, EmissionConfig())

    assert payload.variables == {"id": "4"}
    assert payload.as_dict()["identifiers"] == [{"typename": "User", "id": "4"}]


def test_graphql_errors_are_formatted(make_context) -> None:
    context = make_context("query TestQuery { test }")
    result = ExecutionResult(data=None, errors=[GraphQLError("boom", path=["test"])])

    payload = build_event_payload(context, result, WITH_DATA)

    assert payload.result["data"] is None
    [error] = payload.result["errors"]
    assert error["message"] == "boom"
    assert error["path"] == ["test"]

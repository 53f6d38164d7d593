from __future__ import annotations

import pytest
from graphql import build_schema, parse

from graphql_events.domain.models import ExecutionContext

SCHEMA_SDL = """
interface Node {
  id: ID!
}

type Post implements Node {
  id: ID!
  title: String!
  comments: [Comment!]!
  author: User
}

type Comment implements Node {
  id: ID!
  body: String!
}

type User implements Node {
  id: ID!
  name: String!
  email: String!
}

union SearchResult = Post | User

type Query {
  test: String!
  post: Post!
  posts: [Post!]!
  node(id: ID!): Node
  search(term: String!): [SearchResult!]!
  me: User
}

type Mutation {
  createPost(title: String!): Post!
}

type Subscription {
  postAdded: Post!
}
"""


def _build_schema():
    schema = build_schema(SCHEMA_SDL)
    query_fields = schema.query_type.fields
    query_fields["test"].resolve = lambda *_args, **_kwargs: "hello"
    query_fields["post"].resolve = lambda *_args, **_kwargs: {
        "id": "1",
        "title": "hello",
        "comments": [{"id": "1", "body": "message"}],
    }
    query_fields["posts"].resolve = lambda *_args, **_kwargs: [
        {"id": "1", "title": "hello", "comments": []},
        {"id": "2", "title": "world", "comments": []},
    ]
    schema.mutation_type.fields["createPost"].resolve = lambda _root, _info, title: {
        "id": "3",
        "title": title,
        "comments": [],
    }
    return schema


@pytest.fixture
def schema_sdl():
    return SCHEMA_SDL


@pytest.fixture
def schema():
    return _build_schema()


@pytest.fixture
def make_context(schema):
    def _make(query: str, operation_name: str | None = None, variables: dict | None = None) -> ExecutionContext:
        return ExecutionContext(
            document=parse(query),
            schema=schema,
            operation_name=operation_name,
            variable_values=variables,
        )

    return _make

"""Loading schemas, documents and results from files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from graphql import DocumentNode, GraphQLSchema, build_schema, parse


def load_schema(path: Path) -> GraphQLSchema:
    return build_schema(path.read_text(encoding="utf-8"))


def load_document(path: Path) -> DocumentNode:
    return parse(path.read_text(encoding="utf-8"))


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)

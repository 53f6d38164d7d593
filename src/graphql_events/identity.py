"""Deterministic identity and event naming for operation documents."""

from __future__ import annotations

import hashlib
import json
import re
from typing import Any, Mapping

from graphql import DocumentNode, print_ast

from graphql_events.domain.models import OperationDescriptor
from graphql_events.introspection import operation_kind_of, operation_name_of

ANONYMOUS_PREFIX = "anonymous"

_WORD_PATTERN = re.compile(r"[A-Z]{2,}(?=[A-Z][a-z]+[0-9]*|\b|_)|[A-Z]?[a-z]+[0-9]*|[A-Z]|[0-9]+")


def document_hash(document: DocumentNode, contextual_values: Mapping[str, Any] | None = None) -> str:
    """SHA-256 of the canonical document text.

    The printed document carries variable references, never their runtime
    values, so executions of one query shape share a hash.
    """

    hash_input = print_ast(document)
    if contextual_values:
        hash_input += "\n" + json.dumps(contextual_values, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(hash_input.encode("utf-8")).hexdigest()


def kebab_case(value: str) -> str:
    return "-".join(word.lower() for word in _WORD_PATTERN.findall(value))


def describe_operation(document: DocumentNode, operation_name: str | None = None) -> OperationDescriptor:
    return OperationDescriptor(
        kind=operation_kind_of(document, operation_name),
        name=operation_name_of(document, operation_name),
        document_hash=document_hash(document),
    )


def event_identifier(document: DocumentNode, operation_name: str | None = None) -> str:
    """Kebab-cased operation name, or ``anonymous-<hash>`` for unnamed operations."""

    name = operation_name_of(document, operation_name)
    if name is None:
        return f"{ANONYMOUS_PREFIX}-{document_hash(document)}"
    return kebab_case(name)


def event_name(document: DocumentNode, prefix: str, operation_name: str | None = None) -> str:
    kind = operation_kind_of(document, operation_name)
    return f"{prefix}/{event_identifier(document, operation_name)}.{kind.value}"

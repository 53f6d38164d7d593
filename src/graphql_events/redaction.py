"""Path-based censoring of payload values.

Paths are dot-separated keys rooted at the censored mapping. ``*`` matches
any key (or list index) at its level and numeric segments address list
indices, so ``*.test`` censors ``{"data": {"test": ...}}`` and
``data.users.*.email`` censors every user's email. Paths that do not exist
are ignored; the input is never mutated.
"""

from __future__ import annotations

import copy
from typing import Any, Iterable, MutableMapping, MutableSequence, Protocol

WILDCARD = "*"


class Censor(Protocol):
    def __call__(self, data: Any, paths: Iterable[str], replacement: Any) -> Any:
        """Return a copy of ``data`` with every matching path replaced."""


def redact_paths(data: Any, paths: Iterable[str], replacement: Any) -> Any:
    redacted = copy.deepcopy(data)
    for path in paths:
        segments = [segment for segment in path.split(".") if segment]
        if segments:
            _redact(redacted, segments, replacement)
    return redacted


def _redact(node: Any, segments: list[str], replacement: Any) -> None:
    head, rest = segments[0], segments[1:]
    for key in _matching_keys(node, head):
        if rest:
            _redact(node[key], rest, replacement)
        else:
            node[key] = replacement


def _matching_keys(node: Any, segment: str) -> list[Any]:
    if isinstance(node, MutableMapping):
        if segment == WILDCARD:
            return list(node.keys())
        return [segment] if segment in node else []
    if isinstance(node, MutableSequence):
        if segment == WILDCARD:
            return list(range(len(node)))
        if segment.isdigit() and int(segment) < len(node):
            return [int(segment)]
    return []

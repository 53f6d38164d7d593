"""Logger construction for policy rationale and delivery diagnostics."""

from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "graphql_events"


def build_logger(enabled: bool = True, name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Return the package logger, or a silenced one when ``enabled`` is False.

    The silenced logger is disabled outright, so handlers attached to it
    directly receive nothing either.
    """

    if enabled:
        return logging.getLogger(name)

    silenced = logging.getLogger(f"{name}.silenced")
    silenced.disabled = True
    silenced.propagate = False
    return silenced

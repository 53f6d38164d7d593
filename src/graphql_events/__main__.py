"""Run the graphql-events CLI with ``python -m graphql_events``."""

from __future__ import annotations

import sys

from .cli import app


def _entrypoint() -> int:
    app(prog_name="graphql-events")
    return 0


if __name__ == "__main__":
    sys.exit(_entrypoint())

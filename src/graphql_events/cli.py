"""CLI interface for graphql-events."""

import json
from pathlib import Path

import typer

from .interfaces.cli_handlers import describe_event_name, inspect_execution

app = typer.Typer(help="graphql-events command line interface")


@app.command("event-name")
def event_name_command(
    query: Path = typer.Option(..., "--query", "-q", help="Path to the GraphQL operation document"),
    prefix: str = typer.Option("graphql", "--prefix", "-p", help="Event name prefix."),
    operation_name: str | None = typer.Option(
        None,
        "--operation-name",
        help="Operation to select when the document holds several.",
    ),
) -> None:
    """Print the event name an operation document would be sent under."""

    typer.echo(describe_event_name(query, prefix, operation_name))


@app.command("inspect")
def inspect_command(
    schema: Path = typer.Option(..., "--schema", "-s", help="Path to the schema SDL file"),
    query: Path = typer.Option(..., "--query", "-q", help="Path to the GraphQL operation document"),
    result: Path = typer.Option(..., "--result", "-r", help="Path to the execution result JSON"),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Optional emission config (JSON or YAML).",
    ),
    operation_name: str | None = typer.Option(
        None,
        "--operation-name",
        help="Operation to select when the document holds several.",
    ),
    variables: Path | None = typer.Option(
        None,
        "--variables",
        help="Optional path to the variable values JSON.",
    ),
) -> None:
    """Decide whether a saved execution would be sent and show its payload."""

    report = inspect_execution(
        schema_path=schema,
        query_path=query,
        result_path=result,
        config_path=config,
        operation_name=operation_name,
        variables_path=variables,
    )
    typer.echo(json.dumps(report, indent=2, default=str))
    if not report["send"]:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

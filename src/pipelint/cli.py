"""CLI interface for pipelint using Typer framework."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from pipelint import __description__, __version__
from pipelint.api import validate_loaded
from pipelint.catalog import ComponentCatalog
from pipelint.config import LogLevel, OutputFormat, load_config
from pipelint.loader import load

app = typer.Typer(
    name="pipelint",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"pipelint version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """pipelint - validation engine for visual pipeline documents."""


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS.get(level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def validate(
    pipeline: Annotated[
        Path,
        typer.Argument(help="Path to the pipeline document (JSON)")
    ],
    specs: Annotated[
        Optional[list[Path]],
        typer.Option("--specs", "-s", help="Component spec file or directory (repeatable)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = OutputFormat.TABLE.value,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .pipelint.json)")
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level: error, warn, info, debug")
    ] = None,
) -> None:
    """Validate a pipeline document against component specs."""
    valid_formats = [f.value for f in OutputFormat]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    if log_level is not None and log_level not in _LOG_LEVELS:
        console.print(f"[red]Error:[/red] Invalid log level '{log_level}'. Must be one of: {', '.join(_LOG_LEVELS)}")
        raise typer.Exit(1)

    try:
        pipelint_config = load_config(config)
        _configure_logging(log_level or pipelint_config.logging.level)

        if not pipeline.exists():
            raise FileNotFoundError(f"Pipeline file not found: {pipeline}")
        raw = pipeline.read_text(encoding="utf-8")

        catalog = ComponentCatalog.load(specs or [])
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    loaded = load(raw)
    if not loaded.ok and format != OutputFormat.JSON.value:
        console.print(f"[yellow]Warning:[/yellow] Nothing to validate in {pipeline} ({loaded.outcome.value})")

    result = validate_loaded(loaded, catalog, pipelint_config)

    if format == OutputFormat.JSON.value:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        raise typer.Exit(result.exit_code)

    if result.counters:
        counter_table = Table(title="Counters")
        counter_table.add_column("Metric", style="cyan")
        counter_table.add_column("Count", style="white", justify="right")

        for key, value in sorted(result.counters.items()):
            counter_table.add_row(key.replace("_", " ").title(), str(value))

        console.print(counter_table)

    if result.problems:
        console.print(f"\n[red]{len(result.problems)} problems found:[/red]")
        problems_table = Table()
        problems_table.add_column("Type", style="cyan")
        problems_table.add_column("Node", style="white")
        problems_table.add_column("Message", style="white")
        problems_table.add_column("Location", style="dim")

        for problem in result.problems:
            problems_table.add_row(
                problem.info.type.value,
                problem.info.node_id,
                problem.message,
                "/".join(str(part) for part in problem.path),
            )

        console.print(problems_table)
    else:
        console.print("\n[green]No problems found![/green]")

    raise typer.Exit(result.exit_code)


if __name__ == "__main__":
    app()

from __future__ import annotations

"""CLI entrypoint for seqalign."""

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import LOG_LEVEL_ENV_VAR, resolve_log_level
from .engine import AlignmentEngine
from .errors import InputReadError
from .io import build_report, iter_text_report, read_sequences
from .utils.edit_distance import weighted_distance

app = typer.Typer(help="Edit distance and optimal global alignment of two sequences.")
console = Console()
err_console = Console(stderr=True)

LOG_LEVEL_HELP = f"Logging level (defaults to ${LOG_LEVEL_ENV_VAR} or WARNING)."


def configure_logging(level: Optional[str] = None) -> None:
    try:
        resolved = resolve_log_level(level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _read_or_exit() -> tuple[str, str]:
    try:
        return read_sequences(sys.stdin)
    except InputReadError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)


def matrix_table(engine: AlignmentEngine) -> Table:
    table = Table(title="Cost Matrix")
    table.add_column("")
    for symbol in engine.second:
        table.add_column(escape(symbol), justify="right")
    table.add_column("-", justify="right")
    labels = engine.first + ["-"]
    for label, row in zip(labels, engine.matrix):
        table.add_row(escape(label), *(str(value) for value in row))
    return table


@app.command()
def align(
    json_output: bool = typer.Option(
        False, "--json", help="Print a JSON report instead of the text output."
    ),
    table: bool = typer.Option(
        False, "--table", help="Also render the filled matrix as a table."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help=LOG_LEVEL_HELP),
) -> None:
    """Read two lines from stdin and print the matrix, distance and alignment."""

    configure_logging(log_level)
    first, second = _read_or_exit()
    engine = AlignmentEngine(first, second)

    if json_output:
        typer.echo(build_report(engine).model_dump_json(indent=2))
        return

    for block in iter_text_report(engine):
        typer.echo(block)
    if table:
        console.print(matrix_table(engine))


@app.command()
def distance(
    log_level: Optional[str] = typer.Option(None, "--log-level", help=LOG_LEVEL_HELP),
) -> None:
    """Read two lines from stdin and print only the edit distance."""

    configure_logging(log_level)
    first, second = _read_or_exit()
    typer.echo(weighted_distance(first.strip(), second.strip()))


if __name__ == "__main__":  # pragma: no cover
    app()

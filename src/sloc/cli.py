"""Command-line interface for sloc"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import MAX_WORKERS, load_config
from .counting import LineCounter
from .exceptions import SlocError
from .formatters import TableFormatter, get_formatter
from .logging_config import LOG_LEVELS, setup_logging

app = typer.Typer(
    name="sloc",
    help="sloc - count blank, comment and code lines",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]sloc[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.command()
def main(
    paths: List[str] = typer.Argument(
        ...,
        help="Files or directories to scan",
        show_default=False,
    ),
    loglevel: Optional[str] = typer.Option(
        None,
        "--loglevel",
        "-l",
        help=f"Log level: {', '.join(LOG_LEVELS)} (default: INFO)",
    ),
    suffix: Optional[List[str]] = typer.Option(
        None,
        "--suffix",
        "-s",
        help="Eligible file suffix, repeatable (default: .go)",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Number of threads scanning files (default: 1, discovery order)",
        min=1,
        max=MAX_WORKERS,
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: table (default), json, csv",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        dir_okay=False,
    ),
    follow_symlinks: bool = typer.Option(
        False,
        "--follow-symlinks",
        help="Descend into symlinked directories",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Count blank, comment and code lines of source files.

    [bold cyan]Examples:[/bold cyan]

      sloc .

      sloc cmd/ internal/ main.go --loglevel DEBUG

      sloc src --suffix .c --suffix .h --workers 8

      sloc . --format json | jq .total
    """
    try:
        settings = load_config(
            config_file=config,
            log_level=loglevel,
            suffixes=tuple(suffix) if suffix else None,
            workers=workers,
            output_format=fmt.lower() if fmt else None,
            follow_symlinks=True if follow_symlinks else None,
        )
    except SlocError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logger = setup_logging(settings.log_level)
    logger.debug(f"Loaded settings: {settings}")

    try:
        report = LineCounter(settings).count(paths)

        formatter = get_formatter(settings.output_format)
        if isinstance(formatter, TableFormatter):
            formatter.console = console
        formatter.render(report)

    except SlocError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Count interrupted by user")
        err_console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error while counting")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()

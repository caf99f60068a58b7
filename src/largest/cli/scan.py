"""The scan command: walk a directory and print its largest files."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..api import find_largest
from ..exceptions import LargestError
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from . import app
from ._common import CONTEXT_SETTINGS, console, err_console, prepare_stdout, resolve_config
from .progress import ProgressReporter

logger = get_logger(__name__)


@app.command(context_settings=CONTEXT_SETTINGS)
def scan(
    path: Optional[Path] = typer.Argument(
        None,
        help="Directory to scan (default: current directory)",
        show_default=False,
    ),
    mask: Optional[str] = typer.Argument(
        None,
        help="File mask with * and ? wildcards (default: *)",
        show_default=False,
    ),
    limit: Optional[str] = typer.Option(
        None,
        "-n",
        "--limit",
        metavar="NUM",
        help="Number of largest files to list (default: 50, -1 lists all files)",
    ),
    depth: Optional[str] = typer.Option(
        None,
        "-d",
        "--depth",
        metavar="NUM",
        help="Depth of subdirectories to consider (default: -1, infinite depth)",
    ),
    bare: bool = typer.Option(
        False,
        "-b",
        "--bare",
        help="Display only file paths without file sizes",
    ),
    relative: bool = typer.Option(
        False,
        "-r",
        "--relative",
        help="Display paths relative to the scanned directory",
    ),
    progress: bool = typer.Option(
        False,
        "-p",
        "--progress",
        help="Show scan progress on stderr",
    ),
    verbose: bool = typer.Option(
        False,
        "-v",
        "--verbose",
        help="Report inaccessible files and directories",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        hidden=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    List the largest files under a directory, biggest first.

    [bold cyan]Examples:[/bold cyan]

      largest

      largest /var/log "*.log" -n 10

      largest ~/Downloads -d 0 -b -r

      largest / -n -1 -p -v
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]largest[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    try:
        settings = resolve_config(
            path=path,
            mask=mask,
            limit=limit,
            depth=depth,
            bare=bare,
            relative=relative,
            progress=progress,
            verbose=verbose,
            json_output=json_output,
            config=config,
        )
        setup_logging(verbose=settings.verbose)

        reporter = ProgressReporter(
            console=err_console,
            enabled=settings.show_progress,
            interval=settings.progress_interval,
        )
        with reporter:
            result = find_largest(settings, on_progress=reporter.notify)

        prepare_stdout()
        get_formatter(settings.output_format).render(result, settings)

        skipped = result.stats.inaccessible_count
        if settings.verbose and skipped > 0:
            err_console.print(f"[yellow]skipped {skipped} inaccessible[/yellow]")

    except typer.Exit:
        raise

    except LargestError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        err_console.print("\n[yellow]Scan interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during scan")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

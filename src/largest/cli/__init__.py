"""CLI entry point."""

import typer

from ._common import CONTEXT_SETTINGS

app = typer.Typer(
    name="largest",
    help="List the largest files under a directory.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings=CONTEXT_SETTINGS,
)


# Import commands to register them
from .scan import scan as _scan  # noqa: F401, E402

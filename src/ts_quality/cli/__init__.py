"""CLI entry point."""

import typer

app = typer.Typer(
    name="ts-quality",
    help="Score TypeScript code for best practices and simplicity",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .score import main as _main  # noqa: F401, E402

"""Score command: analyze a file or directory and print the report."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis import QualityAnalyzer
from ..exceptions import TsQualityError
from ..formatters import get_formatter
from ..logging_config import setup_logging, verbosity_from_flags
from . import app
from ._common import console, resolve_config


def _version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        console.print(f"[bold cyan]ts-quality[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="Path to TypeScript file or directory",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
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
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Score TypeScript code for best practices and simplicity.

    Every .ts/.tsx file under PATH gets a 0-100 score from ten metrics
    (any usage, return types, access modifiers, complexity, nesting,
    const usage, assertions, readonly, var usage, optional chaining)
    plus suggestions for each metric that is not perfect.

    [bold cyan]Examples:[/bold cyan]

      ts-quality src/

      ts-quality src/index.ts --json
    """
    logger = setup_logging(verbosity_from_flags(verbose, quiet))

    try:
        settings = resolve_config(config=config, verbose=verbose, quiet=quiet)
        # Config files and env vars may change verbosity when no flag was given
        logger = setup_logging(settings.verbosity)

        results = QualityAnalyzer(settings).analyze_path(path)
        get_formatter("json" if json_output else "text").render(results)

    except TsQualityError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

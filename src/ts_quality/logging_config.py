"""
Logging configuration for ts-quality.

Logs go to stderr through a rich handler so the report on stdout stays
machine-readable. All loggers live under the ``ts_quality`` namespace.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "ts_quality"

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def verbosity_from_flags(verbose: bool = False, quiet: bool = False) -> str:
    """Collapse the CLI's -v/-q flags into a verbosity name; quiet wins."""
    if quiet:
        return "quiet"
    if verbose:
        return "verbose"
    return "normal"


def setup_logging(verbosity: str = "normal") -> logging.Logger:
    """
    Install a rich stderr handler at the level for ``verbosity``.

    Safe to call more than once; each call replaces the previous handler,
    so the CLI can re-run it after the configuration files are loaded.

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings) or
            "verbose" (debug, with source paths)

    Returns:
        The ts_quality root logger
    """
    level = _LEVELS.get(verbosity, logging.WARNING)
    detailed = level == logging.DEBUG

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=detailed,
        markup=False,
        show_time=detailed,
        show_path=detailed,
    )
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a module, placed under the ts_quality namespace."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)

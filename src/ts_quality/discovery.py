"""Find TypeScript source files under a path."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .config import AnalysisConfig
from .exceptions import InvalidPathError
from .logging_config import get_logger
from .scanning import get_supported_extensions

logger = get_logger(__name__)


def is_typescript_file(path: Path) -> bool:
    return path.suffix.lower() in get_supported_extensions()


def find_typescript_files(path: Path, config: Optional[AnalysisConfig] = None) -> list[Path]:
    """Collect .ts/.tsx files under ``path``, sorted for reproducible output.

    A file path is returned as-is if it has a TypeScript extension. A
    directory is walked recursively; directories named in
    ``config.exclude_dirs`` are pruned.

    Raises:
        InvalidPathError: If the path does not exist, or is a file without
            a TypeScript extension
    """
    config = config or AnalysisConfig()

    if not path.exists():
        raise InvalidPathError(path, "path does not exist")

    if path.is_file():
        if not is_typescript_file(path):
            raise InvalidPathError(path, "not a TypeScript (.ts/.tsx) file")
        return [path]

    excluded = set(config.exclude_dirs)
    files: list[Path] = []
    # Track visited directories to break symlink loops
    visited: set[tuple[int, int]] = set()

    for dirpath, dirnames, filenames in os.walk(path, followlinks=config.follow_symlinks):
        if config.follow_symlinks:
            st = os.stat(dirpath)
            key = (st.st_dev, st.st_ino)
            if key in visited:
                logger.debug(f"Symlink loop at {dirpath}, not descending")
                dirnames[:] = []
                continue
            visited.add(key)

        dirnames[:] = [d for d in dirnames if d not in excluded]

        for name in filenames:
            candidate = Path(dirpath) / name
            if is_typescript_file(candidate):
                files.append(candidate)

    files.sort()
    logger.debug(f"Discovered {len(files)} TypeScript file(s) under {path}")
    return files

"""Configuration loading and management for ts-quality.

Configuration only controls how files are found and how the run reacts to
problems. Metric rules and weights are fixed and cannot be configured.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.ts-quality.toml)
    3. Project config (./ts-quality.toml)
    4. Explicit config file (--config)
    5. Environment variables (TS_QUALITY_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True)
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
ParseErrorPolicy = Literal["warn", "skip", "abort"]

_VERBOSITIES = ("quiet", "normal", "verbose")
_PARSE_ERROR_POLICIES = ("warn", "skip", "abort")

ENV_PREFIX = "TS_QUALITY_"
GLOBAL_CONFIG_NAME = ".ts-quality.toml"
PROJECT_CONFIG_NAME = "ts-quality.toml"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for an analysis run.

    Attributes:
        verbosity: Logging verbosity level
        on_parse_error: What to do with a file whose tree contains syntax
            errors: "warn" scores it anyway, "skip" leaves it out of the
            report, "abort" stops the run with ParsingError
        exclude_dirs: Directory names pruned during discovery
        follow_symlinks: Follow symbolic links to directories during discovery
        max_file_size_mb: Files larger than this are skipped (MB)
    """

    verbosity: Verbosity = "normal"
    on_parse_error: ParseErrorPolicy = "warn"
    exclude_dirs: list[str] = field(default_factory=list)
    follow_symlinks: bool = False
    max_file_size_mb: float = 10.0

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(_VERBOSITIES)}"
            )
        if self.on_parse_error not in _PARSE_ERROR_POLICIES:
            raise InvalidConfigError(
                "on_parse_error",
                self.on_parse_error,
                f"expected one of {', '.join(_PARSE_ERROR_POLICIES)}",
            )
        if not isinstance(self.exclude_dirs, (list, tuple)) or not all(
            isinstance(d, str) for d in self.exclude_dirs
        ):
            raise InvalidConfigError("exclude_dirs", self.exclude_dirs, "expected a list of names")
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError(
                "max_file_size_mb", self.max_file_size_mb, "must be positive"
            )

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). The
            booleans ``verbose`` and ``quiet`` are mapped onto ``verbosity``.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from TS_QUALITY_* environment variables.

    Supported environment variables:
        TS_QUALITY_VERBOSITY: quiet/normal/verbose
        TS_QUALITY_ON_PARSE_ERROR: warn/skip/abort
        TS_QUALITY_EXCLUDE_DIRS: comma-separated directory names
        TS_QUALITY_FOLLOW_SYMLINKS: bool (true/false/1/0)
        TS_QUALITY_MAX_FILE_SIZE_MB: float

    Returns:
        Dict of field_name -> parsed_value for any TS_QUALITY_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is list:
        return [part.strip() for part in value.split(",") if part.strip()]

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

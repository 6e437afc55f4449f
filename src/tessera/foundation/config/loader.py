"""Tessera configuration management.

Loads configuration from .tessera/config.yaml with sensible defaults.
All settings can be overridden via environment variables (TESSERA_*).

Config locations (in priority order):
1. Explicit path passed to load_config()
2. .tessera/config.yaml (project-local)
3. ~/.tessera/config.yaml (user-global)
4. Built-in defaults

Thread Safety:
    Uses threading.Lock for lazy initialization of the global config.
"""


import os
import threading
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

from tessera.foundation.errors import ErrorCode, config_error

CONFIG_FILENAME = "config.yaml"
CONFIG_DIRNAME = ".tessera"
ENV_PREFIX = "TESSERA_"


def _is_int(value: Any) -> bool:
    """True for ints, but not for bools (which YAML yields for yes/no)."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class ProgressConfig:
    """Defaults for progress bar layouts built from configuration."""

    spacing: int = 2
    """Blank columns between adjacent cells."""

    align_columns: bool = True
    """Line up equivalent cells of every task in a grid."""

    spinner: str = "dots"
    """Name of the spinner frame set (see tessera.progress.theme.SPINNERS)."""

    bar_width: int | None = None
    """Fixed bar width in columns, or None to fill the available width."""

    def __post_init__(self) -> None:
        if not _is_int(self.spacing) or self.spacing < 0:
            raise config_error(
                ErrorCode.CONFIG_INVALID,
                key="progress.spacing",
                detail=f"expected a non-negative integer, got {self.spacing!r}",
                env="PROGRESS_SPACING",
            )
        if self.bar_width is not None and (
            not _is_int(self.bar_width) or self.bar_width < 1
        ):
            raise config_error(
                ErrorCode.CONFIG_INVALID,
                key="progress.bar_width",
                detail=f"expected a positive integer, got {self.bar_width!r}",
                env="PROGRESS_BAR_WIDTH",
            )
        if not isinstance(self.align_columns, bool):
            raise config_error(
                ErrorCode.CONFIG_INVALID,
                key="progress.align_columns",
                detail=f"expected true or false, got {self.align_columns!r}",
                env="PROGRESS_ALIGN_COLUMNS",
            )
        if not isinstance(self.spinner, str):
            raise config_error(
                ErrorCode.CONFIG_INVALID,
                key="progress.spinner",
                detail=f"expected a spinner name, got {self.spinner!r}",
                env="PROGRESS_SPINNER",
            )


@dataclass(frozen=True, slots=True)
class TesseraConfig:
    """Root configuration for Tessera."""

    progress: ProgressConfig = field(default_factory=ProgressConfig)
    """Progress layout defaults."""

    verbose: bool = False
    """Enable verbose output by default."""

    def __post_init__(self) -> None:
        if not isinstance(self.verbose, bool):
            raise config_error(
                ErrorCode.CONFIG_INVALID,
                key="verbose",
                detail=f"expected true or false, got {self.verbose!r}",
                env="VERBOSE",
            )


# Global config instance (lazy-loaded, thread-safe)
_config: TesseraConfig | None = None
_config_lock = threading.Lock()


def _deep_update(base: dict, updates: dict) -> dict:
    """Recursively update a dict with another dict."""
    for key, value in updates.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_update(base[key], value)
        else:
            base[key] = value
    return base


def _coerce(value: str) -> Any:
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.lower() in ("none", "null", ""):
        return None
    if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
        return int(value)
    return value


def _apply_env_overrides(config_dict: dict, environ: dict[str, str] | None = None) -> dict:
    """Apply environment variable overrides.

    Environment variables follow pattern: TESSERA_SECTION_KEY

    Examples:
        TESSERA_PROGRESS_SPACING=1
        TESSERA_PROGRESS_ALIGN_COLUMNS=false
        TESSERA_VERBOSE=true
    """
    environ = os.environ if environ is None else environ
    sections = {
        "progress": {f.name for f in ProgressConfig.__dataclass_fields__.values()},
    }

    for key, value in environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        path_str = key[len(ENV_PREFIX):].lower()

        if path_str == "verbose":
            config_dict["verbose"] = _coerce(value)
            continue

        for section, keys in sections.items():
            if not path_str.startswith(section + "_"):
                continue
            remaining = path_str[len(section) + 1:]
            if remaining in keys:
                config_dict.setdefault(section, {})[remaining] = _coerce(value)
            break

    return config_dict


def _dict_to_config(data: dict) -> TesseraConfig:
    """Convert a dict to TesseraConfig."""
    progress_data = data.get("progress") or {}
    if not isinstance(progress_data, dict):
        raise config_error(
            ErrorCode.CONFIG_INVALID,
            key="progress",
            detail="expected a mapping",
        )
    known = ProgressConfig.__dataclass_fields__.keys()
    unknown = sorted(set(progress_data) - set(known))
    if unknown:
        raise config_error(
            ErrorCode.CONFIG_INVALID,
            key="progress",
            detail=f"unknown keys: {', '.join(unknown)}",
        )
    return TesseraConfig(
        progress=ProgressConfig(**progress_data),
        verbose=data.get("verbose", False),
    )


def config_paths(path: str | Path | None = None) -> list[Path]:
    """Candidate config files in priority order."""
    paths = []
    if path:
        paths.append(Path(path))
    paths.extend([
        Path(CONFIG_DIRNAME) / CONFIG_FILENAME,
        Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME,
    ])
    return paths


def load_config(path: str | Path | None = None) -> TesseraConfig:
    """Load configuration from file with defaults and env overrides.

    Priority (highest to lowest):
    1. Environment variables (TESSERA_*)
    2. Explicit path if provided
    3. .tessera/config.yaml (project-local)
    4. ~/.tessera/config.yaml (user-global)
    5. Built-in defaults

    Args:
        path: Optional explicit config file path.

    Returns:
        Merged TesseraConfig instance.

    Raises:
        TesseraError: If a config file cannot be parsed or holds invalid values.
    """
    global _config

    config_dict: dict[str, Any] = asdict(TesseraConfig())

    for config_path in config_paths(path):
        if not config_path.exists():
            continue
        try:
            with open(config_path) as f:
                file_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise config_error(
                ErrorCode.CONFIG_INVALID,
                key=str(config_path),
                detail=str(e),
                cause=e,
            ) from e
        if not isinstance(file_config, dict):
            raise config_error(
                ErrorCode.CONFIG_INVALID,
                key=str(config_path),
                detail="expected a mapping at the top level",
            )
        _deep_update(config_dict, file_config)
        break  # Use first found config

    config_dict = _apply_env_overrides(config_dict)

    _config = _dict_to_config(config_dict)
    return _config


def get_config() -> TesseraConfig:
    """Get the current configuration, loading if needed."""
    global _config

    if _config is not None:
        return _config

    with _config_lock:
        if _config is None:
            _config = load_config()
        return _config


def reset_config() -> None:
    """Reset the global config (useful for testing)."""
    global _config
    with _config_lock:
        _config = None


def get_value(cfg: TesseraConfig, key: str) -> Any:
    """Look up a dotted key such as 'progress.spacing'.

    Raises:
        TesseraError: If the key does not exist.
    """
    current: Any = cfg
    for part in key.split("."):
        if part and hasattr(current, "__dataclass_fields__") and part in current.__dataclass_fields__:
            current = getattr(current, part)
        else:
            raise config_error(ErrorCode.CONFIG_KEY_NOT_FOUND, key=key)
    return current

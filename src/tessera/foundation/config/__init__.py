"""Configuration loading for Tessera."""

from tessera.foundation.config.loader import (
    ProgressConfig,
    TesseraConfig,
    get_config,
    get_value,
    load_config,
    reset_config,
)

__all__ = [
    "ProgressConfig",
    "TesseraConfig",
    "get_config",
    "get_value",
    "load_config",
    "reset_config",
]

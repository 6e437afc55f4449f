"""Foundation layer: errors, logging and configuration."""

from tessera.foundation.errors import (
    ERROR_MESSAGES,
    RECOVERY_HINTS,
    ErrorCode,
    TesseraError,
    config_error,
    definition_error,
)

__all__ = [
    "ERROR_MESSAGES",
    "RECOVERY_HINTS",
    "ErrorCode",
    "TesseraError",
    "config_error",
    "definition_error",
]

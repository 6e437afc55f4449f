"""Tessera Error System.

Provides structured error handling with:
- Numeric error codes for programmatic handling
- User-friendly messages
- Recovery hints
- Context for debugging
"""


from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Numeric error codes organized by category.

    Format: XYYY where X = category, YYY = specific error

    Categories:
        1xxx - Definition errors
        2xxx - Configuration errors
        3xxx - Runtime errors
    """

    # 1xxx - Definition Errors
    DEFINITION_INVALID_SPACING = 1001
    DEFINITION_INVALID_WIDTH = 1002
    DEFINITION_INVALID_CELL = 1003

    # 2xxx - Configuration Errors
    CONFIG_INVALID = 2001
    CONFIG_KEY_NOT_FOUND = 2002

    # 3xxx - Runtime Errors
    RUNTIME_STATE_INVALID = 3001

    @property
    def category(self) -> str:
        """Get the error category name."""
        prefix = self.value // 1000
        return {
            1: "definition",
            2: "config",
            3: "runtime",
        }.get(prefix, "unknown")

    @property
    def is_recoverable(self) -> bool:
        """Whether this error type is typically recoverable."""
        return self is not ErrorCode.RUNTIME_STATE_INVALID


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DEFINITION_INVALID_SPACING: "Cell spacing must be non-negative, got {spacing}.",
    ErrorCode.DEFINITION_INVALID_WIDTH: "Fixed column width must be non-negative, got {width}.",
    ErrorCode.DEFINITION_INVALID_CELL: "Cell content must provide render(state) or be callable: {detail}",
    ErrorCode.CONFIG_INVALID: "Invalid configuration for '{key}': {detail}",
    ErrorCode.CONFIG_KEY_NOT_FOUND: "Configuration key '{key}' not found.",
    ErrorCode.RUNTIME_STATE_INVALID: "Invalid runtime state: {detail}",
}


RECOVERY_HINTS: dict[ErrorCode, list[str]] = {
    ErrorCode.DEFINITION_INVALID_SPACING: [
        "Use spacing=0 for cells that touch",
    ],
    ErrorCode.DEFINITION_INVALID_WIDTH: [
        "Use Flexible() to size the column from its content",
    ],
    ErrorCode.CONFIG_INVALID: [
        "Check .tessera/config.yaml for typos",
        "Unset the TESSERA_{env} environment variable",
    ],
    ErrorCode.CONFIG_KEY_NOT_FOUND: [
        "Use 'tessera config show' to list available keys",
    ],
}


class TesseraError(Exception):
    """Base error type for all Tessera errors.

    Example:
        >>> err = TesseraError(
        ...     code=ErrorCode.DEFINITION_INVALID_SPACING,
        ...     context={"spacing": -1},
        ... )
        >>> print(err)
        [TS-1001] Cell spacing must be non-negative, got -1.
    """

    def __init__(
        self,
        code: ErrorCode,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.code = code
        self.context = context or {}
        self.cause = cause
        super().__init__(str(self))

    @property
    def message(self) -> str:
        """Get the formatted user-friendly message."""
        template = ERROR_MESSAGES.get(self.code, "An error occurred: {detail}")
        try:
            return template.format(**self.context)
        except KeyError:
            return template

    @property
    def recovery_hints(self) -> list[str]:
        """Get recovery suggestions for this error."""
        formatted = []
        for hint in RECOVERY_HINTS.get(self.code, []):
            try:
                formatted.append(hint.format(**self.context))
            except KeyError:
                formatted.append(hint)
        return formatted

    @property
    def is_recoverable(self) -> bool:
        return self.code.is_recoverable

    @property
    def category(self) -> str:
        return self.code.category

    @property
    def error_id(self) -> str:
        """Get the error ID string (e.g., 'TS-1001')."""
        return f"TS-{self.code.value}"

    def __str__(self) -> str:
        return f"[{self.error_id}] {self.message}"

    def __repr__(self) -> str:
        return f"TesseraError(code={self.code!r}, context={self.context!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict for logging/JSON output."""
        return {
            "error_id": self.error_id,
            "code": self.code.value,
            "category": self.category,
            "message": self.message,
            "recoverable": self.is_recoverable,
            "recovery_hints": self.recovery_hints,
            "context": self.context,
        }


# Convenience factory functions

def definition_error(
    code: ErrorCode,
    detail: str = "",
    **extra: Any,
) -> TesseraError:
    """Create a definition-related error."""
    return TesseraError(code=code, context={"detail": detail, **extra})


def config_error(
    code: ErrorCode,
    key: str = "",
    detail: str = "",
    env: str = "",
    cause: Exception | None = None,
) -> TesseraError:
    """Create a configuration error."""
    return TesseraError(
        code=code,
        context={"key": key, "detail": detail, "env": env},
        cause=cause,
    )

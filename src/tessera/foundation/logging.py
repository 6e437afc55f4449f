"""Logging configuration for Tessera.

Library modules only create module loggers; handlers are installed by the
command line entrypoint (or by the embedding application).

- Default: WARNING level (quiet operation)
- --debug flag: DEBUG level with full context
- TESSERA_DEBUG=true or TESSERA_LOG_LEVEL=DEBUG env vars: Override for CI/scripting

Usage:
    from tessera.foundation.logging import configure_logging
    configure_logging(debug=args.debug)

Priority for level resolution (highest to lowest):
    1. Explicit `level` parameter (programmatic override)
    2. TESSERA_LOG_LEVEL env var (any level: DEBUG, INFO, WARNING, etc.)
    3. TESSERA_DEBUG=true env var (simple boolean)
    4. `debug=True` parameter (--debug flag)
    5. WARNING (default)
"""

import logging
import os
import sys
from pathlib import Path

_DEBUG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"
_DEFAULT_FORMAT = "%(name)s: %(message)s"


def configure_logging(
    *,
    debug: bool = False,
    level: int | str | None = None,
    stream: object = None,
    log_file: str | Path | None = None,
) -> int:
    """Configure logging for the Tessera CLI.

    Args:
        debug: Enable DEBUG level with detailed format
        level: Override log level (int or string like "DEBUG", "INFO")
        stream: Output stream (default: stderr)
        log_file: Optional file that receives every record at DEBUG level

    Returns:
        The resolved console log level.
    """
    resolved_level: int
    if level is not None:
        resolved_level = _parse_level(level)
    elif env_level := os.environ.get("TESSERA_LOG_LEVEL"):
        resolved_level = _parse_level(env_level)
    elif os.environ.get("TESSERA_DEBUG", "").lower() in ("true", "1", "yes"):
        resolved_level = logging.DEBUG
    elif debug:
        resolved_level = logging.DEBUG
    else:
        resolved_level = logging.WARNING

    console_format = _DEBUG_FORMAT if resolved_level <= logging.DEBUG else _DEFAULT_FORMAT

    root_logger = logging.getLogger()
    # File handler needs DEBUG records even when the console is quieter
    root_logger.setLevel(logging.DEBUG if log_file else resolved_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(logging.Formatter(console_format))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_DEBUG_FORMAT))
        root_logger.addHandler(file_handler)

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s, debug=%s, log_file=%s",
        logging.getLevelName(resolved_level),
        debug,
        log_file,
    )
    return resolved_level


def _parse_level(level: int | str) -> int:
    """Parse log level from int or string."""
    if isinstance(level, int):
        return level
    numeric = getattr(logging, level.upper(), None)
    if isinstance(numeric, int):
        return numeric
    try:
        return int(level)
    except ValueError:
        return logging.WARNING

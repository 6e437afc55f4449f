"""CLI Error Handler.

Provides unified error handling for the CLI with support for:
- Human-readable output (default)
- JSON output for machine consumption
"""

import json
import sys
from typing import NoReturn

from rich.console import Console
from rich.text import Text

from tessera.foundation.errors import ErrorCode, TesseraError


def _as_tessera_error(error: TesseraError | Exception) -> TesseraError:
    if isinstance(error, TesseraError):
        return error
    return TesseraError(
        code=ErrorCode.RUNTIME_STATE_INVALID,
        context={"detail": str(error)},
        cause=error,
    )


def handle_error(
    error: TesseraError | Exception,
    json_output: bool = False,
    console: Console | None = None,
) -> NoReturn:
    """Report an error and exit.

    Args:
        error: The error to handle (TesseraError or generic Exception)
        json_output: If True, output JSON to stderr
        console: Console for human-readable output (default: stderr console)

    Raises:
        SystemExit: Always exits with code 1
    """
    error = _as_tessera_error(error)

    if json_output:
        print(format_error_for_json(error), file=sys.stderr)
        sys.exit(1)

    _print_human_error(error, console or Console(stderr=True))
    sys.exit(1)


def _print_human_error(error: TesseraError, console: Console) -> None:
    header = Text()
    header.append(f"{error.error_id}", style="bold red")
    header.append(f" {error.message}")
    console.print(header)

    if error.recovery_hints:
        console.print("\n[bold]What you can do:[/]")
        for i, hint in enumerate(error.recovery_hints, 1):
            console.print(f"  {i}. {hint}")


def format_error_for_json(error: TesseraError | Exception) -> str:
    """Format an error as a JSON string."""
    error = _as_tessera_error(error)
    error_dict = error.to_dict()
    if error.cause:
        error_dict["cause"] = str(error.cause)
    return json.dumps(error_dict)

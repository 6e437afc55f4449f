"""Tests for the Tessera error system."""

import json

import pytest

from tessera.foundation.errors import (
    ERROR_MESSAGES,
    ErrorCode,
    TesseraError,
    config_error,
    definition_error,
)
from tessera.interface.cli.error_handler import format_error_for_json, handle_error


class TestErrorCode:
    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (ErrorCode.DEFINITION_INVALID_SPACING, "definition"),
            (ErrorCode.CONFIG_INVALID, "config"),
            (ErrorCode.RUNTIME_STATE_INVALID, "runtime"),
        ],
    )
    def test_category(self, code: ErrorCode, category: str) -> None:
        assert code.category == category

    def test_every_code_has_message(self) -> None:
        assert set(ERROR_MESSAGES) == set(ErrorCode)

    def test_runtime_errors_not_recoverable(self) -> None:
        assert not ErrorCode.RUNTIME_STATE_INVALID.is_recoverable
        assert ErrorCode.CONFIG_INVALID.is_recoverable


class TestTesseraError:
    def test_str_includes_id_and_message(self) -> None:
        err = TesseraError(code=ErrorCode.DEFINITION_INVALID_SPACING, context={"spacing": -1})

        assert str(err) == "[TS-1001] Cell spacing must be non-negative, got -1."

    def test_missing_context_falls_back_to_template(self) -> None:
        err = TesseraError(code=ErrorCode.DEFINITION_INVALID_WIDTH)

        assert "{width}" in err.message

    def test_to_dict(self) -> None:
        err = config_error(ErrorCode.CONFIG_INVALID, key="progress.spacing", detail="bad")

        data = err.to_dict()

        assert data["error_id"] == "TS-2001"
        assert data["category"] == "config"
        assert data["message"] == "Invalid configuration for 'progress.spacing': bad"
        assert data["recoverable"] is True

    def test_definition_error_factory(self) -> None:
        err = definition_error(ErrorCode.DEFINITION_INVALID_CELL, detail="42")

        assert err.context["detail"] == "42"
        assert err.category == "definition"


class TestHandleError:
    def test_json_output(self, capsys) -> None:
        err = TesseraError(code=ErrorCode.CONFIG_KEY_NOT_FOUND, context={"key": "x"})

        with pytest.raises(SystemExit) as exc_info:
            handle_error(err, json_output=True)

        assert exc_info.value.code == 1
        data = json.loads(capsys.readouterr().err)
        assert data["code"] == ErrorCode.CONFIG_KEY_NOT_FOUND.value

    def test_wraps_generic_exceptions(self) -> None:
        data = json.loads(format_error_for_json(RuntimeError("boom")))

        assert data["code"] == ErrorCode.RUNTIME_STATE_INVALID.value
        assert data["cause"] == "boom"

    def test_human_output(self, console) -> None:
        err = TesseraError(code=ErrorCode.DEFINITION_INVALID_SPACING, context={"spacing": -3})

        with console.capture() as capture, pytest.raises(SystemExit):
            handle_error(err, console=console)

        output = capture.get()
        assert "TS-1001" in output
        assert "What you can do" in output

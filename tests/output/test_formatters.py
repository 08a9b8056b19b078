"""Tests for the format_result dispatcher and OutputSettings."""

import json

import pytest
from pydantic import ValidationError

from alphabetic.output.formatters import OutputSettings, format_result
from alphabetic.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False

    def test_frozen(self) -> None:
        s = OutputSettings(json_output=True)
        with pytest.raises(ValidationError):
            s.quiet = True  # type: ignore[misc]


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("shift", output="F")
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "shift"
        assert data["data"]["output"] == "F"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("shift", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_output_kwarg(self) -> None:
        data = json.loads(format_result(_ok("test", key="val"), json_output=True))
        assert data["ok"] is True

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(
            _ok("test", key="val"),
            settings=OutputSettings(json_output=False),
            json_output=True,
        )
        assert output.startswith("{") is False


class TestFormatResultQuiet:
    def test_quiet_shift_prints_output_char(self) -> None:
        result = _ok("shift", input="A", amount=5, output="F")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "F"

    def test_quiet_describe_joins_chars(self) -> None:
        result = _ok(
            "describe",
            letters=[{"char": "H", "position": 7}, {"char": "i", "position": 8}],
        )
        assert format_result(result, settings=OutputSettings(quiet=True)) == "Hi"

    def test_quiet_unknown_op(self) -> None:
        assert format_result(_ok("other"), settings=OutputSettings(quiet=True)) == "OK: other"

    def test_quiet_error(self) -> None:
        output = format_result(_err("shift", "Bad input"), settings=OutputSettings(quiet=True))
        assert "ERROR" in output
        assert "Bad input" in output


class TestFormatResultDefault:
    def test_default_success_contains_ok(self) -> None:
        output = format_result(_ok("letter", char="a", position=0, case="lowercase"))
        assert "OK" in output
        assert "letter" in output

    def test_default_error_contains_error(self) -> None:
        output = format_result(_err("letter", "Bad"))
        assert "ERROR" in output
        assert "Bad" in output

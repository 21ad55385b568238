"""Tests for output mode selection."""

import json

from valuespace.output.formatters import OutputSettings, format_result
from valuespace.services.result import ServiceError, ServiceResult


class TestFormatResult:
    def test_json_mode(self) -> None:
        result = ServiceResult(ok=True, op="validate", data={"valid": True})
        parsed = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert parsed["ok"] is True
        assert parsed["data"]["valid"] is True

    def test_json_takes_precedence_over_quiet(self) -> None:
        result = ServiceResult(ok=True, op="validate")
        output = format_result(result, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "validate"

    def test_quiet_success(self) -> None:
        result = ServiceResult(ok=True, op="validate")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: validate"

    def test_quiet_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="validate",
            error=ServiceError(code="VALUE_SPACE_VIOLATION", message="Value must be positive"),
        )
        output = format_result(result, settings=OutputSettings(quiet=True))
        assert output == "ERROR: validate: Value must be positive"

    def test_default_is_rich(self) -> None:
        result = ServiceResult(ok=True, op="validate", data={"identifier": "x", "valid": True})
        output = format_result(result)
        assert output.startswith("OK")
        assert "valid: True" in output

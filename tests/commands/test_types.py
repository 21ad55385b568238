"""Tests for the types command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from valuespace.cli import cli


@pytest.mark.usefixtures("_isolated_config")
class TestTypesCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["types"])
        assert result.exit_code == 0
        assert "positiveInteger" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "types"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "list_types"
        assert data["data"]["count"] == 11

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["types", "--examples"])
        assert result.exit_code == 0
        assert "valuespace types" in result.output

"""Tests for the zone command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from rangectl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestZoneCommands:
    def test_list(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "zone", "list"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["count"] == 39

    def test_list_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "zone", "list"])
        lines = result.output.splitlines()
        assert lines[0] == "UTC"
        assert "Pacific/Fiji" in lines

    def test_info(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "zone", "info", "-z", "America/New_York", "--at", "2025-07-15T12:00:00Z"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["offset_minutes"] == -240
        assert data["is_dst"] is True
        assert data["abbreviation"] == "EDT"

    def test_info_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zone", "info", "-z", "Asia/Kolkata", "--at", "2025-01-15T12:00:00Z"])
        assert result.exit_code == 0
        assert "UTC+05:30" in result.output

    def test_to_utc(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "zone", "to-utc", "2025-01-15T09:00", "-z", "America/New_York"])
        assert result.exit_code == 0
        assert result.output.strip() == "2025-01-15T14:00:00.000Z"

    def test_to_utc_gap_warning_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zone", "to-utc", "2025-03-09T02:30", "-z", "America/New_York"])
        assert result.exit_code == 0
        assert "WARNING:" in result.output
        assert "does not exist" in result.output

    def test_to_utc_gap_warning_in_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "zone", "to-utc", "2025-03-09T02:30", "-z", "America/New_York"]
        )
        data = json.loads(result.output)
        assert len(data["warnings"]) == 1
        assert "WARNING:" not in result.output

    def test_to_utc_rejects_offset(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zone", "to-utc", "2025-01-15T09:00Z"])
        assert result.exit_code == 2
        assert "not a civil date-time" in result.output

    def test_from_utc(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "zone", "from-utc", "2025-01-15T12:00:00Z", "-z", "Asia/Tokyo"])
        assert result.output.strip() == "2025-01-15T21:00:00"

    def test_format(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["zone", "format", "2025-01-15T12:00:00Z", "-z", "America/New_York", "--style", "long"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "January 15, 2025 at 07:00:00"

    def test_unknown_zone(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "zone", "from-utc", "2025-01-15T12:00:00Z", "-z", "Nowhere"])
        assert result.exit_code == 1
        error = json.loads(result.output)["error"]
        assert error["code"] == "UNKNOWN_TIMEZONE"
        assert error["detail"] == {"zone": "Nowhere"}

    def test_bad_instant(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zone", "from-utc", "yesterday"])
        assert result.exit_code == 2

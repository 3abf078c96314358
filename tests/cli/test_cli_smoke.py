from __future__ import annotations

import pytest
from click.testing import CliRunner

from unitcalc.cli.main import cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ("UNITCALC_DISPLAY_LIMIT", "UNITCALC_EXPONENT_LIMIT", "UNITCALC_SHOW_CONTINUATION"):
        monkeypatch.delenv(name, raising=False)


def test_cli_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("convert", "calc", "fn", "format"):
        assert command in result.output


def test_cli_convert() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["convert", "1btu", "J"], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.strip() == "1055J"


def test_cli_convert_temperature() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["convert", "0°C", "°F"], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.strip() == "32°F"


def test_cli_convert_g_to_acceleration_uses_gforce() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["convert", "1g", "m/s^2"], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.strip() == "9.80665m/s²"


def test_cli_calc() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["calc", "add", "1m", "1cm"], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.strip() == "1.01m"


def test_cli_calc_reports_errors() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["calc", "add", "1m", "1s"])
    assert result.exit_code == 1
    assert "illegal operation" in result.output


def test_cli_fn() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["fn", "round", "3.14159", "2"], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.strip() == "3.14"


def test_cli_format_with_limit() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--limit", "8", "format", "0.000706713780918727915194"])
    assert result.exit_code == 0
    assert result.output.strip() == "0.00070671378…"


def test_cli_format_exact() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--exact", "format", "1.1234e-10"])
    assert result.exit_code == 0
    assert result.output.strip() == "5617/50000000000000"


def test_cli_format_rejects_bad_number() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["format", "1.2.3"])
    assert result.exit_code == 1
    assert "illegal numeric value" in result.output

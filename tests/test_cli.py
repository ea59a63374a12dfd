"""Tests for go_dep_report.cli."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from go_dep_report.cli import USAGE, cli
from go_dep_report.config import Settings
from go_dep_report.errors import FetchError
from go_dep_report.platforms import detect_platform

URL = "https://example.com/foo.git"


@patch("go_dep_report.cli.run_report")
def test_missing_url_prints_usage(mock_run_report: MagicMock) -> None:
    result = CliRunner().invoke(cli, [])

    assert result.exit_code == 1
    assert USAGE in result.output
    mock_run_report.assert_not_called()


@patch("go_dep_report.cli.run_report")
def test_runs_report_with_defaults(mock_run_report: MagicMock) -> None:
    result = CliRunner().invoke(cli, [URL])

    assert result.exit_code == 0, result.output
    mock_run_report.assert_called_once_with(URL, Settings(), detect_platform())


@patch("go_dep_report.cli.run_report")
def test_config_option(mock_run_report: MagicMock, tmp_path: Path) -> None:
    config = tmp_path / "pyproject.toml"
    config.write_text('[tool.go-dep-report]\ngo = "go1.22"\n')

    result = CliRunner().invoke(cli, ["--config", str(config), URL])

    assert result.exit_code == 0, result.output
    settings = mock_run_report.call_args.args[1]
    assert settings.go == "go1.22"


@patch("go_dep_report.cli.run_report")
def test_invalid_config_is_fatal(mock_run_report: MagicMock, tmp_path: Path) -> None:
    config = tmp_path / "pyproject.toml"
    config.write_text("[tool.go-dep-report]\nunknown = 1\n")

    result = CliRunner().invoke(cli, ["--config", str(config), URL])

    assert result.exit_code == 1
    assert "ERROR: invalid [tool.go-dep-report]" in result.output
    mock_run_report.assert_not_called()


@patch("go_dep_report.cli.run_report")
def test_pipeline_error_is_fatal(mock_run_report: MagicMock) -> None:
    mock_run_report.side_effect = FetchError("error cloning repository: boom")

    result = CliRunner().invoke(cli, [URL])

    assert result.exit_code == 1
    assert "ERROR: error cloning repository: boom" in result.output


@patch("go_dep_report.cli.run_report")
def test_empty_url_is_passed_through(mock_run_report: MagicMock) -> None:
    result = CliRunner().invoke(cli, [""])

    assert USAGE not in result.output
    mock_run_report.assert_called_once_with("", Settings(), detect_platform())


@patch("go_dep_report.cli.run_report")
def test_non_table_config_is_fatal(mock_run_report: MagicMock, tmp_path: Path) -> None:
    config = tmp_path / "pyproject.toml"
    config.write_text("tool = 1\n")

    result = CliRunner().invoke(cli, ["--config", str(config), URL])

    assert result.exit_code == 1
    assert "must be a table" in result.output
    mock_run_report.assert_not_called()

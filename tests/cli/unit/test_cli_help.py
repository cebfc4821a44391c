"""CLI smoke tests."""

from click.testing import CliRunner
from robot_acceptance_runner.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "run" in result.output


def test_run_help_lists_command_line_overrides() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--help"])

    assert result.exit_code == 0
    for option in ("--tests", "--suites", "--variables", "--rerun-failed", "--skip-ats"):
        assert option in result.output

"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from robot_acceptance_runner.configuration import (
    DEFAULT_CONFIG_FILENAME,
    CommandLineOverrides,
    write_placeholder_configuration,
)
from robot_acceptance_runner.run_execution import (
    AcceptanceRunRequest,
    RunExecutionError,
    execute_acceptance_run,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="robot-acceptance-runner")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Threshold for diagnostic log messages written to stderr",
)
def cli(log_level: str) -> None:
    """Run Robot Framework acceptance tests from a run configuration."""
    _configure_logging(log_level.upper())


class _ClickEchoHandler(logging.Handler):
    """Writes log records to the stderr click currently targets."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # pylint: disable=broad-exception-caught
            self.handleError(record)


def _configure_logging(level: str) -> None:
    package_logger = logging.getLogger("robot_acceptance_runner")
    for handler in list(package_logger.handlers):
        if isinstance(handler, _ClickEchoHandler):
            package_logger.removeHandler(handler)
    handler = _ClickEchoHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML run configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML run configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


# pylint: disable=too-many-arguments
@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON run configuration file",
)
@click.option("--tests", default=None, help="Comma separated test names replacing `tests`")
@click.option("--tasks", default=None, help="Comma separated task names replacing `tasks`")
@click.option("--suites", default=None, help="Comma separated suite names replacing `suites`")
@click.option("--includes", default=None, help="Comma separated tags replacing `includes`")
@click.option("--excludes", default=None, help="Comma separated tags replacing `excludes`")
@click.option(
    "--variables",
    default=None,
    help="Comma separated name:value pairs added after the configured `variables`",
)
@click.option("--listener", default=None, help="Listener replacing the configured `listener`")
@click.option(
    "--argument-file",
    default=None,
    type=click.Path(path_type=str),
    help="Text file to read more engine arguments from",
)
@click.option("--rerun-failed", is_flag=True, default=False, help="Run only failed tests")
@click.option("--skip-tests", is_flag=True, default=False, help="Skip all tests")
@click.option("--skip-its", is_flag=True, default=False, help="Skip integration tests")
@click.option("--skip-ats", is_flag=True, default=False, help="Skip acceptance tests")
@click.option("--skip", is_flag=True, default=False, help="Skip test execution entirely")
def run_tests(  # pylint: disable=too-many-positional-arguments
    config_path: str,
    tests: str | None,
    tasks: str | None,
    suites: str | None,
    includes: str | None,
    excludes: str | None,
    variables: str | None,
    listener: str | None,
    argument_file: str | None,
    rerun_failed: bool,
    skip_tests: bool,
    skip_its: bool,
    skip_ats: bool,
    skip: bool,
) -> None:
    """Execute the acceptance tests described by the run configuration.

    Failing tests do not fail this command; the xUnit report carries them.
    """
    overrides = CommandLineOverrides(
        tests=tests,
        tasks=tasks,
        suites=suites,
        includes=includes,
        excludes=excludes,
        variables=variables,
        listener=listener,
        argument_file=argument_file,
        rerun_failed=rerun_failed,
        skip_tests=skip_tests,
        skip_its=skip_its,
        skip_ats=skip_ats,
        skip=skip,
    )
    try:
        outcome = execute_acceptance_run(
            AcceptanceRunRequest(config_path=config_path, overrides=overrides)
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    if outcome.skipped or outcome.outcome is None:
        click.echo("Robot Framework tests are skipped.")
        return
    click.echo(f"Robot Framework return code {outcome.exit_code}: {outcome.outcome.value}")
    if outcome.fallback_report is not None:
        click.echo(f"Fallback xUnit report written: {outcome.fallback_report}")


# pylint: enable=too-many-arguments


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

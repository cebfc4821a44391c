"""Acceptance run use-case service."""

from __future__ import annotations

import logging

from robot_acceptance_runner.argument_building import (
    build_run_arguments,
    derive_suite_name,
    resolve_xunit_file,
)
from robot_acceptance_runner.configuration import ConfigurationError, load_run_configuration
from robot_acceptance_runner.engine_execution import (
    ClasspathResolver,
    EmbeddedEngine,
    LaunchError,
    ProcessLauncher,
    describe_mode,
    run_engine,
    select_execution_mode,
)
from robot_acceptance_runner.outcome_handling import (
    evaluate_return_code,
    interpret_exit_code,
    resolve_report_path,
)

from .run_contracts import AcceptanceRunRequest, RunOutcome

logger = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_acceptance_run(
    request: AcceptanceRunRequest,
    *,
    embedded_engine: EmbeddedEngine | None = None,
    launcher: ProcessLauncher | None = None,
    classpath_resolver: ClasspathResolver | None = None,
) -> RunOutcome:
    """Run the acceptance tests once and reconcile the engine's return code.

    Test failures are not errors here; they are left in the engine's report
    for the verification step. Only configuration, launch and fallback
    report failures raise :class:`RunExecutionError`.
    """
    try:
        configuration = load_run_configuration(request.config_path, request.overrides)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc

    if configuration.should_skip:
        logger.info("Robot Framework tests are skipped.")
        return RunOutcome(exit_code=None, outcome=None)

    arguments = build_run_arguments(configuration)
    logger.debug("robotframework arguments: %s", " ".join(arguments))
    mode = select_execution_mode(configuration)
    logger.info("Running Robot Framework (%s)", describe_mode(mode))

    try:
        exit_code = run_engine(
            arguments,
            mode,
            embedded_engine=embedded_engine,
            launcher=launcher,
            classpath_resolver=classpath_resolver,
        )
    except LaunchError as exc:
        raise RunExecutionError(str(exc)) from exc

    report_path = resolve_report_path(
        configuration.output_directory, resolve_xunit_file(configuration)
    )
    try:
        fallback_report = evaluate_return_code(
            exit_code,
            report_path=report_path,
            suite_name=derive_suite_name(configuration),
        )
    except OSError as exc:
        raise RunExecutionError(f"Failed to write fallback report {report_path}: {exc}") from exc

    return RunOutcome(
        exit_code=exit_code,
        outcome=interpret_exit_code(exit_code),
        arguments=arguments,
        fallback_report=fallback_report,
    )

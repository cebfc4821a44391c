"""Execution mode selection."""

from __future__ import annotations

from dataclasses import dataclass

from robot_acceptance_runner.configuration.run_settings import (
    ExternalRunnerSettings,
    RunConfiguration,
)


@dataclass(frozen=True)
class EmbeddedExecution:
    """Run the engine in-process."""


@dataclass(frozen=True)
class ExternalProcessExecution:
    """Run the engine in a child process."""

    settings: ExternalRunnerSettings


ExecutionMode = EmbeddedExecution | ExternalProcessExecution


def select_execution_mode(configuration: RunConfiguration) -> ExecutionMode:
    """Pick the external process mode exactly when an external runner is configured."""
    if configuration.external_runner is None:
        return EmbeddedExecution()
    return ExternalProcessExecution(settings=configuration.external_runner)

"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from robot_acceptance_runner.configuration.run_settings import CommandLineOverrides
from robot_acceptance_runner.outcome_handling.exit_codes import OutcomeCode


@dataclass(frozen=True)
class AcceptanceRunRequest:
    """Input contract for executing one run."""

    config_path: str
    overrides: CommandLineOverrides = field(default_factory=CommandLineOverrides)


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed or skipped run."""

    exit_code: int | None
    outcome: OutcomeCode | None
    arguments: tuple[str, ...] = ()
    fallback_report: Path | None = None

    @property
    def skipped(self) -> bool:
        return self.exit_code is None

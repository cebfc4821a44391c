"""Run execution domain exports."""

from .acceptance_run_use_case import RunExecutionError, execute_acceptance_run
from .run_contracts import AcceptanceRunRequest, RunOutcome

__all__ = [
    "AcceptanceRunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_acceptance_run",
]

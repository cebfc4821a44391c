"""Outcome handling domain exports."""

from .exit_codes import OutcomeCode, fallback_message, interpret_exit_code
from .fallback_report import evaluate_return_code, resolve_report_path, write_error_report

__all__ = [
    "OutcomeCode",
    "fallback_message",
    "interpret_exit_code",
    "evaluate_return_code",
    "resolve_report_path",
    "write_error_report",
]

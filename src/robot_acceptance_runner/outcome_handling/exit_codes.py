"""Robot Framework return code taxonomy."""

from __future__ import annotations

from enum import Enum


class OutcomeCode(str, Enum):
    """Meaning of a Robot Framework return code.

    ======== =========================================
    RC       Explanation
    ======== =========================================
    0        All critical tests passed.
    1-249    Returned number of critical tests failed.
    250      250 or more critical failures.
    251      Help or version information printed.
    252      Invalid test data or command line options.
    253      Test execution stopped by user.
    255      Unexpected internal error.
    ======== =========================================
    """

    ALL_PASSED = "all critical tests passed"
    CRITICAL_FAILURES = "critical tests failed"
    TOO_MANY_FAILURES = "250 or more critical tests failed"
    HELP_OR_VERSION = "help or version information printed"
    INVALID_DATA = "invalid test data or command line options"
    STOPPED_BY_USER = "test execution stopped by user"
    INTERNAL_ERROR = "unexpected internal error"
    UNRECOGNIZED = "unrecognized return code"


_FIXED_CODES = {
    0: OutcomeCode.ALL_PASSED,
    250: OutcomeCode.TOO_MANY_FAILURES,
    251: OutcomeCode.HELP_OR_VERSION,
    252: OutcomeCode.INVALID_DATA,
    253: OutcomeCode.STOPPED_BY_USER,
    255: OutcomeCode.INTERNAL_ERROR,
}

# 250, 251 and 253 are deliberately left without a fallback report.
_FALLBACK_MESSAGES = {
    OutcomeCode.INVALID_DATA: "Invalid test data or command line options (Returncode 252).",
    OutcomeCode.INTERNAL_ERROR: "Unexpected internal error (Returncode 255).",
}


def interpret_exit_code(exit_code: int) -> OutcomeCode:
    if exit_code in _FIXED_CODES:
        return _FIXED_CODES[exit_code]
    if 1 <= exit_code <= 249:
        return OutcomeCode.CRITICAL_FAILURES
    return OutcomeCode.UNRECOGNIZED


def fallback_message(outcome: OutcomeCode) -> str | None:
    """Return the error report message for outcomes the engine cannot report itself."""
    return _FALLBACK_MESSAGES.get(outcome)

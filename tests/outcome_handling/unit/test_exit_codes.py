"""Robot Framework return code taxonomy tests."""

from __future__ import annotations

import pytest
from robot_acceptance_runner.outcome_handling.exit_codes import (
    OutcomeCode,
    fallback_message,
    interpret_exit_code,
)


@pytest.mark.parametrize(
    ("exit_code", "expected"),
    [
        (0, OutcomeCode.ALL_PASSED),
        (1, OutcomeCode.CRITICAL_FAILURES),
        (249, OutcomeCode.CRITICAL_FAILURES),
        (250, OutcomeCode.TOO_MANY_FAILURES),
        (251, OutcomeCode.HELP_OR_VERSION),
        (252, OutcomeCode.INVALID_DATA),
        (253, OutcomeCode.STOPPED_BY_USER),
        (254, OutcomeCode.UNRECOGNIZED),
        (255, OutcomeCode.INTERNAL_ERROR),
        (-15, OutcomeCode.UNRECOGNIZED),
        (300, OutcomeCode.UNRECOGNIZED),
    ],
)
def test_interpret_exit_code(exit_code: int, expected: OutcomeCode) -> None:
    assert interpret_exit_code(exit_code) is expected


def test_only_invalid_data_and_internal_error_have_fallback_messages() -> None:
    with_message = {outcome for outcome in OutcomeCode if fallback_message(outcome) is not None}

    assert with_message == {OutcomeCode.INVALID_DATA, OutcomeCode.INTERNAL_ERROR}
    assert "252" in (fallback_message(OutcomeCode.INVALID_DATA) or "")
    assert "255" in (fallback_message(OutcomeCode.INTERNAL_ERROR) or "")

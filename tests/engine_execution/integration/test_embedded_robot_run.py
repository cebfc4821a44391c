"""Acceptance runs against the installed Robot Framework engine."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from robot_acceptance_runner.engine_execution.engine_runner import run_embedded_robot
from robot_acceptance_runner.engine_execution.process_launcher import ProcessLauncher
from robot_acceptance_runner.outcome_handling.exit_codes import OutcomeCode
from robot_acceptance_runner.run_execution.acceptance_run_use_case import execute_acceptance_run
from robot_acceptance_runner.run_execution.run_contracts import AcceptanceRunRequest

_PASSING_SUITE = """*** Test Cases ***
Greeting Is Logged
    Log    hello
    Should Be Equal    ${1}    ${1}
"""

_FAILING_SUITE = """*** Test Cases ***
Numbers Differ
    Should Be Equal    ${1}    ${2}
"""


def _write_project(tmp_path: Path, suite_text: str, extra: str = "") -> Path:
    suite_dir = tmp_path / "acceptance"
    suite_dir.mkdir()
    (suite_dir / "greeting.robot").write_text(suite_text, encoding="utf-8")
    config_path = tmp_path / "robot-acceptance.yaml"
    config_path.write_text(
        "test_cases_directory: acceptance\n"
        "output_directory: reports\n"
        "console: dotted\n"
        f"{extra}",
        encoding="utf-8",
    )
    return config_path


def _xunit_root(tmp_path: Path) -> ET.Element:
    return ET.parse(tmp_path / "reports" / "TEST-acceptance.xml").getroot()


def test_embedded_run_of_passing_suite_writes_engine_xunit_file(tmp_path: Path) -> None:
    config_path = _write_project(tmp_path, _PASSING_SUITE)

    outcome = execute_acceptance_run(AcceptanceRunRequest(config_path=str(config_path)))

    assert outcome.exit_code == 0
    assert outcome.outcome is OutcomeCode.ALL_PASSED
    assert outcome.fallback_report is None
    root = _xunit_root(tmp_path)
    assert root.get("tests") == "1"
    assert root.get("failures") == "0"
    assert root.find("testcase").get("name") == "Greeting Is Logged"


def test_embedded_run_of_failing_suite_keeps_engine_xunit_file(tmp_path: Path) -> None:
    config_path = _write_project(tmp_path, _FAILING_SUITE)

    outcome = execute_acceptance_run(AcceptanceRunRequest(config_path=str(config_path)))

    assert outcome.exit_code == 1
    assert outcome.outcome is OutcomeCode.CRITICAL_FAILURES
    assert outcome.fallback_report is None
    assert _xunit_root(tmp_path).get("failures") == "1"


def test_unknown_option_in_argument_file_writes_fallback_report(tmp_path: Path) -> None:
    (tmp_path / "extra-args.txt").write_text("--no-such-engine-option\n", encoding="utf-8")
    config_path = _write_project(tmp_path, _PASSING_SUITE, "argument_file: extra-args.txt\n")

    outcome = execute_acceptance_run(AcceptanceRunRequest(config_path=str(config_path)))

    assert outcome.exit_code == 252
    assert outcome.outcome is OutcomeCode.INVALID_DATA
    assert outcome.fallback_report == tmp_path.resolve() / "reports" / "TEST-acceptance.xml"
    root = _xunit_root(tmp_path)
    assert root.get("errors") == "1"
    assert "252" in root.find("testcase/error").get("message")


def test_embedded_engine_reports_unknown_option_as_return_code(tmp_path: Path) -> None:
    assert run_embedded_robot(["--no-such-engine-option", str(tmp_path)]) == 252


def test_external_robot_module_runs_passing_suite(tmp_path: Path) -> None:
    config_path = _write_project(tmp_path, _PASSING_SUITE, "external_runner: true\n")
    stdout_lines: list[str] = []

    outcome = execute_acceptance_run(
        AcceptanceRunRequest(config_path=str(config_path)),
        launcher=ProcessLauncher(stdout_sink=stdout_lines.append, stderr_sink=lambda line: None),
    )

    assert outcome.exit_code == 0
    assert outcome.fallback_report is None
    assert _xunit_root(tmp_path).get("tests") == "1"
    assert stdout_lines

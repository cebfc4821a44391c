"""Fallback xUnit report writer tests."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from robot_acceptance_runner.outcome_handling.fallback_report import (
    evaluate_return_code,
    resolve_report_path,
    write_error_report,
)


def test_write_error_report_creates_parseable_single_error_document(tmp_path: Path) -> None:
    report_path = tmp_path / "nested" / "reports" / "TEST-acceptance.xml"

    written = write_error_report(report_path, "Acceptance", "Something broke")

    assert written == report_path
    suite = ET.parse(report_path).getroot()
    assert suite.tag == "testsuite"
    assert suite.attrib == {
        "errors": "1",
        "failures": "0",
        "tests": "0",
        "skip": "0",
        "name": "Acceptance",
    }
    cases = suite.findall("testcase")
    assert len(cases) == 1
    assert cases[0].attrib == {"classname": "ExecutionError", "name": "Something broke"}
    errors = cases[0].findall("error")
    assert len(errors) == 1
    assert errors[0].attrib == {"message": "Something broke"}


def test_write_error_report_overwrites_existing_file(tmp_path: Path) -> None:
    report_path = tmp_path / "TEST-acceptance.xml"
    report_path.write_text("<testsuite tests='12'/>", encoding="utf-8")

    write_error_report(report_path, "Acceptance", "replaced")

    assert ET.parse(report_path).getroot().attrib["tests"] == "0"


@pytest.mark.parametrize("exit_code", [252, 255])
def test_infrastructure_codes_write_fallback_report(tmp_path: Path, exit_code: int) -> None:
    report_path = tmp_path / "TEST-acceptance.xml"

    written = evaluate_return_code(exit_code, report_path=report_path, suite_name="Acceptance")

    assert written == report_path
    suite = ET.parse(report_path).getroot()
    error = suite.find("testcase/error")
    assert error is not None
    assert f"Returncode {exit_code}" in error.attrib["message"]
    assert len(suite.findall("testcase")) == 1


@pytest.mark.parametrize("exit_code", [0, 1, 42, 249, 250, 251, 253, 254, 256, -9])
def test_other_codes_leave_existing_report_untouched(tmp_path: Path, exit_code: int) -> None:
    report_path = tmp_path / "TEST-acceptance.xml"
    report_path.write_text("engine report", encoding="utf-8")

    written = evaluate_return_code(exit_code, report_path=report_path, suite_name="Acceptance")

    assert written is None
    assert report_path.read_text(encoding="utf-8") == "engine report"


def test_other_codes_do_not_create_a_report(tmp_path: Path) -> None:
    report_path = tmp_path / "TEST-acceptance.xml"

    evaluate_return_code(0, report_path=report_path, suite_name="Acceptance")

    assert not report_path.exists()


def test_report_path_is_resolved_against_output_directory() -> None:
    assert resolve_report_path(Path("/out"), Path("TEST-a.xml")) == Path("/out/TEST-a.xml")
    assert resolve_report_path(Path("/out"), Path("/abs/TEST-a.xml")) == Path("/abs/TEST-a.xml")


def test_report_synthesis_errors_propagate(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("file", encoding="utf-8")

    with pytest.raises(OSError):
        write_error_report(blocker / "TEST-a.xml", "Acceptance", "message")

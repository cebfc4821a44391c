"""Fallback xUnit report writer for engine infrastructure errors."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from .exit_codes import fallback_message, interpret_exit_code

ERROR_CLASSNAME = "ExecutionError"

logger = logging.getLogger(__name__)


def resolve_report_path(output_directory: Path, xunit_file: Path) -> Path:
    """Resolve the xUnit file the way the engine does: relative to the output directory."""
    if xunit_file.is_absolute():
        return xunit_file
    return output_directory / xunit_file


def write_error_report(report_path: Path | str, suite_name: str, message: str) -> Path:
    """Write an xUnit document with a single execution error, replacing any existing file."""
    testsuite = ET.Element(
        "testsuite",
        {
            "errors": "1",
            "failures": "0",
            "tests": "0",
            "skip": "0",
            "name": suite_name,
        },
    )
    testcase = ET.SubElement(testsuite, "testcase", {"classname": ERROR_CLASSNAME, "name": message})
    ET.SubElement(testcase, "error", {"message": message})

    output = Path(report_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    ET.ElementTree(testsuite).write(output, encoding="UTF-8", xml_declaration=True)
    return output


def evaluate_return_code(exit_code: int, *, report_path: Path, suite_name: str) -> Path | None:
    """Write a fallback report when the return code means the engine produced none.

    Returns the written report path, or ``None`` when the engine's own
    report is relied upon.
    """
    message = fallback_message(interpret_exit_code(exit_code))
    if message is None:
        return None
    logger.warning("Writing fallback xUnit report to %s: %s", report_path, message)
    return write_error_report(report_path, suite_name, message)

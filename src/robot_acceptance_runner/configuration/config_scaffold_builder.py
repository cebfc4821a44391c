"""Run configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "robot-acceptance.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Run configuration template for robot-acceptance-runner.
# Relative project paths are resolved against the directory holding this file.
# Remove the keys you do not need; unset keys are not passed to Robot Framework.

# File or directory holding the test cases (default shown).
test_cases_directory: "src/test/robotframework/acceptance"
# Where Robot Framework writes output.xml, log, report and the xUnit file.
output_directory: "target/robotframework-reports"

# Output files, resolved by Robot Framework against output_directory.
# output: "output.xml"
# log: "log.html"
# report: "report.html"
# xunit_file: "TEST-acceptance.xml"

# Top-level suite name. Derived from the test cases path when unset.
# name: "<OPTIONAL>"

# Selection. Command-line --tests/--suites/--includes/--excludes/--tasks
# values replace these lists; --variables values are added after them.
tests: []
suites: []
includes: []
excludes: []
variables: []
# extra_path_directories:
#   - "src/test/resources/robotframework/libraries"

console: "verbose"
dryrun: false
rerun_failed: false

# Run Robot Framework in a child process instead of in-process.
# external_runner:
#   runner_module: "robot"
#   run_with_console_script: false
#   runtime_args:
#     - "-X"
#     - "utf8"
#   environment:
#     PYTHONPATH: "<OPTIONAL>"
#   exclude_dependencies: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML run configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder run configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Run configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()

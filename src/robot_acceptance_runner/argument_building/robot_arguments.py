"""Translation of a run configuration into Robot Framework command-line arguments."""

from __future__ import annotations

import re
from pathlib import Path

from robot_acceptance_runner.configuration.run_settings import RunConfiguration

from .argument_list import ArgumentList

_SUITE_NAME_DELIMITERS = re.compile(r"([ \-_])")


def build_run_arguments(configuration: RunConfiguration) -> tuple[str, ...]:
    """Build the ordered argument tokens; the test cases path is always last."""
    arguments = ArgumentList()

    arguments.add_path(configuration.output_directory, "-d")
    arguments.add_path(configuration.output, "-o")
    arguments.add_path(configuration.log, "-l")
    arguments.add_path(configuration.report, "-r")
    arguments.add_path(configuration.debug_file, "-b")
    arguments.add_path(configuration.argument_file, "-A")

    arguments.add_non_empty(configuration.console, "--console")
    arguments.add_non_empty(configuration.name, "-N")
    arguments.add_non_empty(configuration.document, "-D")
    arguments.add_non_empty(configuration.run_mode, "--runmode")
    arguments.add_flag(configuration.rpa, "--rpa")
    arguments.add_flag(configuration.dryrun, "--dryrun")
    arguments.add_flag(configuration.exit_on_failure, "--exitonfailure")
    arguments.add_flag(configuration.skip_teardown_on_exit, "--skipteardownonexit")
    arguments.add_non_empty(configuration.randomize, "--randomize")
    arguments.add_non_empty(configuration.split_outputs, "--splitoutputs")
    arguments.add_non_empty(configuration.log_title, "--logtitle")
    arguments.add_non_empty(configuration.report_title, "--reporttitle")
    arguments.add_non_empty(configuration.report_background, "--reportbackground")
    arguments.add_non_empty(configuration.summary_title, "--summarytitle")
    arguments.add_non_empty(configuration.log_level, "-L")
    arguments.add_non_empty(configuration.suite_stat_level, "--suitestatlevel")
    arguments.add_non_empty(configuration.console_width, "--consolewidth")
    arguments.add_non_empty(configuration.console_colors, "--consolecolors")
    arguments.add_non_empty(configuration.listener, "--listener")

    arguments.add_flag(configuration.run_empty_suite, "--runemptysuite")
    arguments.add_flag(configuration.no_status_return_code, "--nostatusrc")
    arguments.add_flag(configuration.timestamp_outputs, "-T")
    arguments.add_flag(configuration.warn_on_skipped_files, "--warnonskippedfiles")

    arguments.add_list(configuration.metadata, "-M")
    arguments.add_list(configuration.tags, "-G")
    arguments.add_list(configuration.remove_keywords, "--removekeywords")
    arguments.add_list(configuration.flatten_keywords, "--flattenkeywords")
    arguments.add_list(configuration.tests.resolve(), "-t")
    arguments.add_list(configuration.tasks.resolve(), "--task")
    arguments.add_list(configuration.suites.resolve(), "-s")
    arguments.add_list(configuration.includes.resolve(), "-i")
    arguments.add_list(configuration.excludes.resolve(), "-e")
    arguments.add_list(configuration.critical_tags, "-c")
    arguments.add_list(configuration.non_critical_tags, "-n")
    arguments.add_list(configuration.variables.resolve(), "-v")
    arguments.add_list(configuration.variable_files, "-V")
    arguments.add_list(configuration.tag_stat_includes, "--tagstatinclude")
    arguments.add_list(configuration.tag_stat_excludes, "--tagstatexclude")
    arguments.add_list(configuration.combined_tag_stats, "--tagstatcombine")
    arguments.add_list(configuration.tag_docs, "--tagdoc")
    arguments.add_list(configuration.tag_stat_links, "--tagstatlink")
    arguments.add_list(configuration.listeners, "--listener")

    if configuration.extra_path_directories is None:
        arguments.add_path(configuration.default_extra_path, "-P")
    else:
        arguments.add_path_list(configuration.extra_path_directories, "-P")

    arguments.add_path(resolve_xunit_file(configuration), "-x")
    arguments.add_flag(True, "--xunitskipnoncritical")
    if configuration.rerun_failed:
        # Robot Framework reads the previous output.xml back to pick failed tests.
        arguments.add_path(configuration.output, "--rerunfailed")
    arguments.add_positional(str(configuration.test_cases_directory))

    return arguments.to_tuple()


def resolve_xunit_file(configuration: RunConfiguration) -> Path:
    """Return the configured xUnit file or the one derived from the test cases path."""
    if configuration.xunit_file is not None:
        return configuration.xunit_file
    folder_name = configuration.test_cases_directory.name
    return Path(f"TEST-{folder_name.replace(' ', '_')}.xml")


def derive_suite_name(configuration: RunConfiguration) -> str:
    """Return the top-level suite name Robot Framework gives the run.

    An explicit name wins. Otherwise every space, hyphen or underscore
    separated segment of the test cases path name gets its first letter
    upper-cased and the separators are kept, so ``my_test-suite 1`` becomes
    ``My_Test-Suite 1``.
    """
    if configuration.name is not None:
        return configuration.name
    segments = _SUITE_NAME_DELIMITERS.split(configuration.test_cases_directory.name)
    return "".join(segment[:1].upper() + segment[1:] for segment in segments)

"""Run configuration entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class OverridableList:
    """List option whose command-line value takes precedence over the configured one."""

    base: tuple[str, ...] = ()
    override: tuple[str, ...] | None = None
    append_override: bool = False

    def resolve(self) -> tuple[str, ...]:
        if self.override is None:
            return self.base
        if self.append_override:
            return self.base + self.override
        return self.override


@dataclass(frozen=True)
class ExternalRunnerSettings:
    """Settings for running the engine in a child process."""

    runner_module: str | None = None
    run_with_console_script: bool = False
    runtime_args: tuple[str, ...] = ()
    environment: Mapping[str, str] = field(default_factory=dict)
    exclude_dependencies: bool = False


@dataclass(frozen=True)
class CommandLineOverrides:  # pylint: disable=too-many-instance-attributes
    """Values given on the command line that replace configured ones."""

    tests: str | None = None
    tasks: str | None = None
    suites: str | None = None
    includes: str | None = None
    excludes: str | None = None
    variables: str | None = None
    listener: str | None = None
    argument_file: str | None = None
    rerun_failed: bool = False
    skip_tests: bool = False
    skip_its: bool = False
    skip_ats: bool = False
    skip: bool = False


@dataclass(frozen=True)
class RunConfiguration:  # pylint: disable=too-many-instance-attributes
    """All options of one acceptance test run."""

    test_cases_directory: Path
    output_directory: Path
    default_extra_path: Path
    output: Path | None = None
    log: Path | None = None
    report: Path | None = None
    debug_file: Path | None = None
    argument_file: Path | None = None
    xunit_file: Path | None = None
    extra_path_directories: tuple[Path, ...] | None = None

    name: str | None = None
    document: str | None = None
    console: str | None = "verbose"
    run_mode: str | None = None
    randomize: str | None = None
    split_outputs: str | None = None
    log_title: str | None = None
    report_title: str | None = None
    report_background: str | None = None
    summary_title: str | None = None
    log_level: str | None = None
    suite_stat_level: str | None = None
    console_width: str | None = None
    console_colors: str | None = None
    listener: str | None = None

    rpa: bool = False
    dryrun: bool = False
    exit_on_failure: bool = False
    skip_teardown_on_exit: bool = False
    run_empty_suite: bool = False
    no_status_return_code: bool = False
    timestamp_outputs: bool = False
    warn_on_skipped_files: bool = False
    rerun_failed: bool = False

    metadata: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    remove_keywords: tuple[str, ...] = ()
    flatten_keywords: tuple[str, ...] = ()
    tests: OverridableList = OverridableList()
    tasks: OverridableList = OverridableList()
    suites: OverridableList = OverridableList()
    includes: OverridableList = OverridableList()
    excludes: OverridableList = OverridableList()
    critical_tags: tuple[str, ...] = ()
    non_critical_tags: tuple[str, ...] = ()
    variables: OverridableList = OverridableList(append_override=True)
    variable_files: tuple[str, ...] = ()
    tag_stat_includes: tuple[str, ...] = ()
    tag_stat_excludes: tuple[str, ...] = ()
    combined_tag_stats: tuple[str, ...] = ()
    tag_docs: tuple[str, ...] = ()
    tag_stat_links: tuple[str, ...] = ()
    listeners: tuple[str, ...] = ()

    skip_tests: bool = False
    skip_its: bool = False
    skip_ats: bool = False
    skip: bool = False

    external_runner: ExternalRunnerSettings | None = None

    @property
    def should_skip(self) -> bool:
        return self.skip_tests or self.skip_its or self.skip_ats or self.skip

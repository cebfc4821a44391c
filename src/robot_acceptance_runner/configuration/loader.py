"""Run configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from .run_settings import (
    CommandLineOverrides,
    ExternalRunnerSettings,
    OverridableList,
    RunConfiguration,
)

DEFAULT_TEST_CASES_DIRECTORY = Path("src", "test", "robotframework", "acceptance")
DEFAULT_OUTPUT_DIRECTORY = Path("target", "robotframework-reports")
DEFAULT_EXTRA_PATH = Path("src", "test", "resources", "robotframework", "libraries")

_PROJECT_PATH_KEYS = ("output_directory", "argument_file")
_OUTPUT_PATH_KEYS = ("output", "log", "report", "debug_file", "xunit_file")
_STRING_KEYS = (
    "name",
    "document",
    "console",
    "run_mode",
    "randomize",
    "split_outputs",
    "log_title",
    "report_title",
    "report_background",
    "summary_title",
    "log_level",
    "suite_stat_level",
    "console_width",
    "console_colors",
    "listener",
)
_FLAG_KEYS = (
    "rpa",
    "dryrun",
    "exit_on_failure",
    "skip_teardown_on_exit",
    "run_empty_suite",
    "no_status_return_code",
    "timestamp_outputs",
    "warn_on_skipped_files",
    "rerun_failed",
    "skip_tests",
    "skip_its",
    "skip_ats",
    "skip",
)
_LIST_KEYS = (
    "metadata",
    "tags",
    "remove_keywords",
    "flatten_keywords",
    "critical_tags",
    "non_critical_tags",
    "variable_files",
    "tag_stat_includes",
    "tag_stat_excludes",
    "combined_tag_stats",
    "tag_docs",
    "tag_stat_links",
    "listeners",
)
_OVERRIDABLE_KEYS = ("tests", "tasks", "suites", "includes", "excludes", "variables")
_APPENDED_OVERRIDE_KEYS = frozenset({"variables"})
_OTHER_KEYS = ("test_cases_directory", "extra_path_directories", "external_runner")
_EXTERNAL_RUNNER_KEYS = frozenset(
    {
        "runner_module",
        "run_with_console_script",
        "runtime_args",
        "environment",
        "exclude_dependencies",
    }
)
_KNOWN_KEYS = frozenset(
    _PROJECT_PATH_KEYS
    + _OUTPUT_PATH_KEYS
    + _STRING_KEYS
    + _FLAG_KEYS
    + _LIST_KEYS
    + _OVERRIDABLE_KEYS
    + _OTHER_KEYS
)


class ConfigurationError(Exception):
    """Raised when the run configuration is invalid."""


def load_run_configuration(
    config_path: Path | str, overrides: CommandLineOverrides | None = None
) -> RunConfiguration:
    """Load the run configuration file and apply command-line overrides.

    Relative project paths are resolved against the directory holding the
    configuration file. Output file paths are kept as written because the
    engine resolves them against the output directory itself.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    base_path = path.resolve().parent
    return _apply_overrides(_build_configuration(parsed, base_path), overrides)


def split_comma_separated(value: str) -> tuple[str, ...]:
    """Split a command-line list value such as ``foo,successful*,bar``."""
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _build_configuration(section: Mapping[str, Any], base_path: Path) -> RunConfiguration:
    test_cases_directory = _resolve_path(
        base_path,
        _optional_string(section.get("test_cases_directory"), "test_cases_directory")
        or str(DEFAULT_TEST_CASES_DIRECTORY),
    )
    if not test_cases_directory.exists():
        raise ConfigurationError(f"Test cases path not found: {test_cases_directory}")

    values: dict[str, Any] = {
        "test_cases_directory": test_cases_directory,
        "output_directory": _resolve_path(base_path, str(DEFAULT_OUTPUT_DIRECTORY)),
        "default_extra_path": _resolve_path(base_path, str(DEFAULT_EXTRA_PATH)),
    }
    for key in _PROJECT_PATH_KEYS:
        raw = _optional_string(section.get(key), key)
        if raw:
            values[key] = _resolve_path(base_path, raw)
    for key in _OUTPUT_PATH_KEYS:
        raw = _optional_string(section.get(key), key)
        values[key] = Path(raw) if raw else None
    for key in _STRING_KEYS:
        if key in section:
            values[key] = _optional_scalar_string(section[key], key)
    for key in _FLAG_KEYS:
        values[key] = _optional_bool(section.get(key), key)
    for key in _LIST_KEYS:
        values[key] = _normalize_string_sequence(section.get(key), key)
    for key in _OVERRIDABLE_KEYS:
        values[key] = OverridableList(
            base=_normalize_string_sequence(section.get(key), key),
            append_override=key in _APPENDED_OVERRIDE_KEYS,
        )

    extra_paths = section.get("extra_path_directories")
    if extra_paths is not None:
        values["extra_path_directories"] = tuple(
            _resolve_path(base_path, item)
            for item in _normalize_string_sequence(extra_paths, "extra_path_directories")
        )
    values["external_runner"] = _parse_external_runner(section.get("external_runner"))
    return RunConfiguration(**values)


def _parse_external_runner(value: Any) -> ExternalRunnerSettings | None:
    if value is None:
        return None
    if value is True:
        return ExternalRunnerSettings()
    if not isinstance(value, Mapping):
        raise ConfigurationError("external_runner must be a mapping.")
    unknown = sorted(str(key) for key in value if key not in _EXTERNAL_RUNNER_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown external_runner keys: {', '.join(unknown)}")

    environment = value.get("environment") or {}
    if not isinstance(environment, Mapping):
        raise ConfigurationError("external_runner.environment must be a mapping.")
    return ExternalRunnerSettings(
        runner_module=_optional_string(
            value.get("runner_module"), "external_runner.runner_module"
        ),
        run_with_console_script=_optional_bool(
            value.get("run_with_console_script"), "external_runner.run_with_console_script"
        ),
        runtime_args=_normalize_string_sequence(
            value.get("runtime_args"), "external_runner.runtime_args"
        ),
        environment={
            str(name): _require_scalar_string(item, f"external_runner.environment.{name}")
            for name, item in environment.items()
        },
        exclude_dependencies=_optional_bool(
            value.get("exclude_dependencies"), "external_runner.exclude_dependencies"
        ),
    )


def _apply_overrides(
    configuration: RunConfiguration, overrides: CommandLineOverrides | None
) -> RunConfiguration:
    if overrides is None:
        return configuration

    changes: dict[str, Any] = {}
    for key in _OVERRIDABLE_KEYS:
        raw = getattr(overrides, key)
        if raw is not None:
            current: OverridableList = getattr(configuration, key)
            changes[key] = OverridableList(
                base=current.base,
                override=split_comma_separated(raw),
                append_override=current.append_override,
            )
    if overrides.listener:
        changes["listener"] = overrides.listener
    if overrides.argument_file:
        changes["argument_file"] = Path(overrides.argument_file).resolve()
    for key in ("rerun_failed", "skip_tests", "skip_its", "skip_ats", "skip"):
        if getattr(overrides, key):
            changes[key] = True
    return replace(configuration, **changes)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            normalized.append(_require_scalar_string(item, f"{field_name} entries"))
        return tuple(item for item in normalized if item)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_scalar_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    return _require_scalar_string(value, field_name) or None


def _require_scalar_string(value: Any, field_name: str) -> str:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a string.")
    if isinstance(value, (int, float)):
        return str(value)
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    return value.strip()


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value

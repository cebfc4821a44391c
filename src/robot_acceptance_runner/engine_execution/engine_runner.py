"""Engine invocation for both execution modes."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Mapping, Sequence

from .classpath import CLASSPATH_VARIABLE, ClasspathResolver, InterpreterPathResolver
from .execution_modes import EmbeddedExecution, ExecutionMode, ExternalProcessExecution
from .process_launcher import ProcessLauncher

EmbeddedEngine = Callable[[Sequence[str]], int]

DEFAULT_RUNNER_MODULE = "robot"
CONSOLE_SCRIPT_COMMAND = "robot"


def run_embedded_robot(arguments: Sequence[str]) -> int:
    """Run Robot Framework in this interpreter and return its return code."""
    import robot  # pylint: disable=import-outside-toplevel

    try:
        return robot.run_cli(list(arguments), exit=False)
    except SystemExit as exc:
        # Invalid options make Robot exit even when run with exit=False.
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 255


def run_engine(
    arguments: Sequence[str],
    mode: ExecutionMode,
    *,
    embedded_engine: EmbeddedEngine | None = None,
    launcher: ProcessLauncher | None = None,
    classpath_resolver: ClasspathResolver | None = None,
) -> int:
    """Run the engine with the given arguments and return its raw exit status."""
    if isinstance(mode, EmbeddedExecution):
        return (embedded_engine or run_embedded_robot)(list(arguments))

    resolved_launcher = launcher or ProcessLauncher()
    settings = mode.settings
    if settings.run_with_console_script:
        command = [CONSOLE_SCRIPT_COMMAND, *arguments]
        environment = build_process_environment(settings.environment)
    else:
        command = build_external_command(settings.runner_module, arguments, settings.runtime_args)
        classpath = (classpath_resolver or InterpreterPathResolver()).resolve(
            exclude_host_dependencies=settings.exclude_dependencies
        )
        environment = build_process_environment(settings.environment, classpath=classpath)
    return resolved_launcher.run(command, environment).exit_code


def build_external_command(
    runner_module: str | None,
    arguments: Sequence[str],
    runtime_args: Sequence[str] = (),
) -> list[str]:
    """Build ``python [runtime args] -m <runner> <arguments>``."""
    return [
        sys.executable,
        *runtime_args,
        "-m",
        runner_module or DEFAULT_RUNNER_MODULE,
        *arguments,
    ]


def build_process_environment(
    overrides: Mapping[str, str],
    *,
    classpath: str | None = None,
    base_environment: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Merge the current environment, caller overrides and the resolved search path.

    A search path given in the overrides is put in front of the resolved one.
    """
    environment = dict(os.environ if base_environment is None else base_environment)
    environment.update(overrides)
    if classpath is not None:
        if CLASSPATH_VARIABLE in overrides:
            classpath = overrides[CLASSPATH_VARIABLE] + os.pathsep + classpath
        environment[CLASSPATH_VARIABLE] = classpath
    return environment


def describe_mode(mode: ExecutionMode) -> str:
    """Return a short human readable name of the execution mode for logging."""
    if isinstance(mode, ExternalProcessExecution):
        if mode.settings.run_with_console_script:
            return f"external console script '{CONSOLE_SCRIPT_COMMAND}'"
        return f"external module '{mode.settings.runner_module or DEFAULT_RUNNER_MODULE}'"
    return "embedded"

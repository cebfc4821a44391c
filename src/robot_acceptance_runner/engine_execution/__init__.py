"""Engine execution domain exports."""

from .classpath import CLASSPATH_VARIABLE, ClasspathResolver, InterpreterPathResolver
from .engine_runner import (
    EmbeddedEngine,
    build_external_command,
    build_process_environment,
    describe_mode,
    run_embedded_robot,
    run_engine,
)
from .execution_modes import (
    EmbeddedExecution,
    ExecutionMode,
    ExternalProcessExecution,
    select_execution_mode,
)
from .process_launcher import LaunchError, ProcessLauncher, ProcessResult, RunningProcess

__all__ = [
    "CLASSPATH_VARIABLE",
    "ClasspathResolver",
    "InterpreterPathResolver",
    "EmbeddedEngine",
    "build_external_command",
    "build_process_environment",
    "describe_mode",
    "run_embedded_robot",
    "run_engine",
    "EmbeddedExecution",
    "ExecutionMode",
    "ExternalProcessExecution",
    "select_execution_mode",
    "LaunchError",
    "ProcessLauncher",
    "ProcessResult",
    "RunningProcess",
]

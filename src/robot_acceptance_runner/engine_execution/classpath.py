"""Module search path resolution for the engine child process."""

from __future__ import annotations

import importlib.util
import os
import sys
from pathlib import Path
from typing import Protocol

from .process_launcher import LaunchError

CLASSPATH_VARIABLE = "PYTHONPATH"


class ClasspathResolver(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for resolving the search path handed to the engine process."""

    def resolve(self, *, exclude_host_dependencies: bool) -> str: ...


class InterpreterPathResolver:  # pylint: disable=too-few-public-methods
    """Resolves search paths from the running interpreter."""

    def __init__(self, runner_package: str = "robot") -> None:
        self._runner_package = runner_package

    def resolve(self, *, exclude_host_dependencies: bool) -> str:
        if exclude_host_dependencies:
            return self._runner_location()
        return os.pathsep.join(entry for entry in sys.path if entry)

    def _runner_location(self) -> str:
        spec = importlib.util.find_spec(self._runner_package)
        if spec is None or spec.origin is None:
            raise LaunchError(f"Runner package '{self._runner_package}' is not installed.")
        # The package's parent directory is the entry that makes it importable.
        return str(Path(spec.origin).resolve().parent.parent)

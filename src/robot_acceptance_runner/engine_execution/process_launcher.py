"""Child process launching with concurrent output draining."""

from __future__ import annotations

import logging
import shlex
import subprocess
import threading
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import IO

import click

LineSink = Callable[[str], None]

logger = logging.getLogger(__name__)


class LaunchError(Exception):
    """Raised when the engine process cannot be started, read or waited for."""


@dataclass(frozen=True)
class ProcessResult:
    """Exit status of a finished child whose output streams were fully drained."""

    exit_code: int
    stdout_lines: int
    stderr_lines: int


def echo_stdout(line: str) -> None:
    click.echo(line)


def echo_stderr(line: str) -> None:
    click.echo(line, err=True)


class _StreamDrain(threading.Thread):
    """Thread forwarding one stream, line by line, until it closes."""

    def __init__(self, stream: IO[str], sink: LineSink, name: str) -> None:
        super().__init__(name=name)
        self._stream = stream
        self._sink = sink
        self.line_count = 0
        self.error: BaseException | None = None

    def run(self) -> None:
        try:
            with self._stream:
                for line in self._stream:
                    self._sink(line.rstrip("\r\n"))
                    self.line_count += 1
        except (OSError, ValueError) as exc:
            self.error = exc


class RunningProcess:
    """A started child process owned by a single run."""

    def __init__(
        self,
        process: subprocess.Popen[str],
        stdout: IO[str],
        stderr: IO[str],
        *,
        stdout_sink: LineSink,
        stderr_sink: LineSink,
    ) -> None:
        self._process = process
        self._stdout_drain = _StreamDrain(stdout, stdout_sink, f"stdout-{process.pid}")
        self._stderr_drain = _StreamDrain(stderr, stderr_sink, f"stderr-{process.pid}")
        self._stdout_drain.start()
        self._stderr_drain.start()

    @property
    def pid(self) -> int:
        return self._process.pid

    def terminate(self) -> None:
        """Stop the child; a pending :meth:`wait` then returns promptly."""
        if self._process.poll() is None:
            self._process.terminate()

    def wait(self) -> ProcessResult:
        """Wait without a time limit and join both drains before returning."""
        try:
            exit_code = self._process.wait()
        except KeyboardInterrupt as exc:
            self._process.kill()
            self._process.wait()
            self._join_drains()
            raise LaunchError("Interrupted while waiting for the engine process.") from exc
        self._join_drains()
        for drain in (self._stdout_drain, self._stderr_drain):
            if drain.error is not None:
                raise LaunchError(
                    f"Failed to read engine output ({drain.name}): {drain.error}"
                ) from drain.error
        return ProcessResult(
            exit_code=exit_code,
            stdout_lines=self._stdout_drain.line_count,
            stderr_lines=self._stderr_drain.line_count,
        )

    def _join_drains(self) -> None:
        self._stdout_drain.join()
        self._stderr_drain.join()


class ProcessLauncher:
    """Starts child processes whose output is forwarded to line sinks."""

    def __init__(
        self,
        stdout_sink: LineSink | None = None,
        stderr_sink: LineSink | None = None,
    ) -> None:
        self._stdout_sink = stdout_sink or echo_stdout
        self._stderr_sink = stderr_sink or echo_stderr

    def start(self, command: Sequence[str], environment: Mapping[str, str]) -> RunningProcess:
        logger.info("Executing Robot with command: %s", shlex.join(command))
        try:
            process = subprocess.Popen(  # pylint: disable=consider-using-with
                list(command),
                env=dict(environment),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            raise LaunchError(f"Executing external robot failed: {exc}") from exc
        if process.stdout is None or process.stderr is None:  # pragma: no cover
            process.kill()
            raise LaunchError("Engine process output streams are not available.")
        return RunningProcess(
            process,
            process.stdout,
            process.stderr,
            stdout_sink=self._stdout_sink,
            stderr_sink=self._stderr_sink,
        )

    def run(self, command: Sequence[str], environment: Mapping[str, str]) -> ProcessResult:
        return self.start(command, environment).wait()

"""Incremental builder for engine command-line tokens."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class ArgumentList:
    """Ordered command-line tokens; unset values never produce a flag."""

    def __init__(self) -> None:
        self._tokens: list[str] = []

    def add_path(self, path: Path | None, flag: str) -> None:
        if path is not None:
            self._tokens.extend((flag, str(path)))

    def add_non_empty(self, value: str | None, flag: str) -> None:
        if value:
            self._tokens.extend((flag, value))

    def add_flag(self, enabled: bool, flag: str) -> None:
        if enabled:
            self._tokens.append(flag)

    def add_list(self, values: Iterable[str] | None, flag: str) -> None:
        for value in values or ():
            self._tokens.extend((flag, value))

    def add_path_list(self, paths: Iterable[Path] | None, flag: str) -> None:
        for path in paths or ():
            self.add_path(path, flag)

    def add_positional(self, value: str) -> None:
        self._tokens.append(value)

    def to_tuple(self) -> tuple[str, ...]:
        return tuple(self._tokens)

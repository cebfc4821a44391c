"""Argument building domain exports."""

from .argument_list import ArgumentList
from .robot_arguments import build_run_arguments, derive_suite_name, resolve_xunit_file

__all__ = [
    "ArgumentList",
    "build_run_arguments",
    "derive_suite_name",
    "resolve_xunit_file",
]

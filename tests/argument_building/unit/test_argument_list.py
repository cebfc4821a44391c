"""Argument list builder tests."""

from __future__ import annotations

from pathlib import Path

from robot_acceptance_runner.argument_building.argument_list import ArgumentList


def test_argument_list_ignores_unset_values() -> None:
    arguments = ArgumentList()

    arguments.add_path(None, "-o")
    arguments.add_non_empty(None, "-N")
    arguments.add_non_empty("", "-D")
    arguments.add_flag(False, "--dryrun")
    arguments.add_list(None, "-t")
    arguments.add_list([], "-i")
    arguments.add_path_list(None, "-P")

    assert arguments.to_tuple() == ()


def test_argument_list_keeps_insertion_order() -> None:
    arguments = ArgumentList()

    arguments.add_flag(True, "--dryrun")
    arguments.add_list(["a", "b"], "-t")
    arguments.add_path_list([Path("x"), Path("y")], "-P")
    arguments.add_non_empty("value with spaces", "-N")
    arguments.add_positional("tests")

    assert arguments.to_tuple() == (
        "--dryrun",
        "-t",
        "a",
        "-t",
        "b",
        "-P",
        "x",
        "-P",
        "y",
        "-N",
        "value with spaces",
        "tests",
    )

"""Run configuration entity tests."""

from __future__ import annotations

from robot_acceptance_runner.configuration.run_settings import OverridableList


def test_overridable_list_uses_base_without_override() -> None:
    assert OverridableList(base=("a", "b")).resolve() == ("a", "b")


def test_overridable_list_override_replaces_base_entirely() -> None:
    values = OverridableList(base=("a", "b"), override=("c",))

    assert values.resolve() == ("c",)


def test_overridable_list_empty_override_still_replaces_base() -> None:
    assert OverridableList(base=("a",), override=()).resolve() == ()


def test_appending_overridable_list_keeps_base_first() -> None:
    values = OverridableList(base=("X:1",), override=("X:2",), append_override=True)

    assert values.resolve() == ("X:1", "X:2")

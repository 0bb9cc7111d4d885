"""Tests for shallow structural equality."""

from dataclasses import dataclass
from typing import Annotated, ClassVar

import pytest

from structcopy import CopyDisabled, structurally_equal


@dataclass(eq=False)
class Box:
    value: str | None = None


@dataclass(eq=False)
class IntHaver:
    value: int = 0


class Empty:
    pass


class Exploding:
    def __eq__(self, other: object) -> bool:
        raise AssertionError("should not be compared")

    __hash__ = object.__hash__


@dataclass(eq=False)
class Pair:
    first: str | None = None
    second: object = None


@dataclass(eq=False)
class Tagged:
    name: str = ""
    revision: Annotated[int, CopyDisabled()] = 0


class Doubler:
    def __init__(self, n: int) -> None:
        self._n = n

    @property
    def doubled(self) -> int:
        return self._n * 2


class Tally:
    total: ClassVar[int] = 0


class Node:
    def __init__(self) -> None:
        self.payload = "x"


@dataclass(eq=False)
class Holder:
    child: object = None


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (None, None, True),
        (None, "x", False),
        ("x", None, False),
        ("a", "b", False),
        ("a", "a", True),
    ],
)
def test_null_handling(a, b, expected):
    assert structurally_equal(Box(a), Box(b)) is expected


def test_equal_values():
    assert structurally_equal(IntHaver(2), IntHaver(2))
    assert not structurally_equal(IntHaver(2), IntHaver(3))


def test_empty_member_set_is_vacuously_equal():
    assert structurally_equal(Empty(), Empty())


def test_different_classes_are_not_equal():
    assert not structurally_equal(Box("a"), IntHaver(0))


def test_one_sided_none_short_circuits():
    """Exactly one None stops the comparison before later members."""
    a = Pair(first=None, second=Exploding())
    b = Pair(first="x", second=Exploding())

    assert not structurally_equal(a, b)


def test_disabled_members_are_not_inspected():
    assert structurally_equal(Tagged("a", revision=1), Tagged("a", revision=2))


def test_properties_participate():
    assert structurally_equal(Doubler(2), Doubler(2))
    assert not structurally_equal(Doubler(2), Doubler(3))


def test_private_members_compared_only_when_requested():
    @dataclass(eq=False)
    class Secretive:
        name: str = ""
        _salt: str = ""

    a, b = Secretive("n", "x"), Secretive("n", "y")

    assert structurally_equal(a, b)
    assert not structurally_equal(a, b, compare_private=True)


def test_static_members_participate():
    """Static members are read from the class, so both sides always agree."""
    Tally.total = 5

    assert structurally_equal(Tally(), Tally())


def test_equality_is_shallow():
    shared = Node()

    assert structurally_equal(Holder(shared), Holder(shared))
    assert not structurally_equal(Holder(Node()), Holder(Node()))


def test_class_default_overridden_on_instance_is_compared():
    class Knob:
        level = 1

    turned = Knob()
    turned.level = 99

    assert not structurally_equal(Knob(), turned)
    assert structurally_equal(Knob(), Knob())

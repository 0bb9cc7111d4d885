"""Tests for same-type copy, clone, and cross-type copy."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Annotated, ClassVar

import pytest

from structcopy import (
    CopyDisabled,
    CopyEngine,
    CopyRequest,
    EngineSettings,
    MemberRegistry,
    TypeMismatchError,
    UninstantiableTypeError,
    clone,
    copy_disabled,
    copy_from,
    copy_similar_from,
    copy_similar_to,
    copy_to,
    ignore_case,
    new_instance,
    structurally_equal,
)


@dataclass
class Foo:
    a: str = "A"
    b: str = "B"
    c: int = 100


@dataclass
class Bar(Foo):
    d: float = 200.0
    e: Foo | None = None
    f: float = 300.0


@dataclass
class FooNotImplemented(Foo):
    e: str = "EE"

    @property
    @copy_disabled
    def d(self) -> str:
        raise NotImplementedError

    @d.setter
    def d(self, value: str) -> None:
        raise NotImplementedError


@dataclass
class Basket:
    owner: str = ""
    items: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FrozenPoint:
    x: int = 0
    y: int = 0


@dataclass(frozen=True, slots=True)
class FrozenSlottedPoint:
    x: int = 0
    y: int = 0


@dataclass
class NeedsArgs:
    value: int


class AbstractJob(ABC):
    @abstractmethod
    def run(self) -> None: ...


@dataclass
class Animal:
    name: str = ""


@dataclass
class Dog(Animal):
    breed: str = ""


# Same-type copy


def test_clone_copies_members():
    foo = Foo(a="apple", b="bismuth", c=2)

    bar = clone(foo)

    assert bar is not foo
    assert (bar.a, bar.b, bar.c) == ("apple", "bismuth", 2)


def test_clone_skips_disabled_property():
    """A disabled property is never read, even though its getter would raise."""
    foo = FooNotImplemented(a="apple", b="bismuth", c=2)

    bar = clone(foo)

    assert (bar.a, bar.b, bar.c, bar.e) == (foo.a, foo.b, foo.c, foo.e)


def test_copy_to_subclass_instance():
    foo = Foo(a="apple", b="bismuth", c=2)
    bar = Bar()

    copy_to(foo, bar)

    assert (bar.a, bar.b, bar.c) == ("apple", "bismuth", 2)
    assert bar.d == 200.0


def test_copy_to_rejects_other_class():
    with pytest.raises(TypeMismatchError, match="copy_similar_to"):
        copy_to(Bar(), Foo())


def test_copy_from_is_copy_to_reversed():
    target = Foo()

    copy_from(target, Foo(a="x", b="y", c=3))

    assert target == Foo(a="x", b="y", c=3)


def test_copy_is_shallow():
    basket = Basket(owner="ada", items=["tea"])

    duplicate = clone(basket)

    assert duplicate.items is basket.items


def test_same_type_copy_checks_runtime_values():
    foo = Foo(c="not a number")  # type: ignore[arg-type]

    with pytest.raises(TypeMismatchError, match="Foo.c"):
        clone(foo)


def test_mismatch_is_a_type_error():
    with pytest.raises(TypeError):
        clone(Foo(a=42))  # type: ignore[arg-type]


def test_none_fits_any_declared_type_by_default(engine):
    duplicate = engine.clone(Foo(a=None))  # type: ignore[arg-type]

    assert duplicate.a is None


def test_none_rejected_when_configured(registry):
    engine = CopyEngine(EngineSettings(none_fits_any=False), registry)

    with pytest.raises(TypeMismatchError):
        engine.clone(Foo(a=None))  # type: ignore[arg-type]


def test_private_members_copied_only_when_requested():
    @dataclass
    class Session:
        user: str = ""
        _token: str = ""

    source = Session(user="ada", _token="s3cr3t")

    assert clone(source)._token == ""
    assert clone(source, include_private=True)._token == "s3cr3t"


def test_static_members_are_copied_to_declaring_class():
    class Source:
        mode: ClassVar[str] = "fast"

    class Target:
        mode: ClassVar[str] = "slow"

    copy_similar_to(Source(), Target())

    assert Target.mode == "fast"


def test_class_default_overridden_by_instance():
    """A class-level default assigned on an instance is copied per instance."""

    class Config:
        level = 1

    a, b = Config(), Config()
    a.level = 7

    assert clone(a).level == 7

    copy_to(a, b)
    assert b.level == 7
    assert Config.level == 1
    assert not structurally_equal(Config(), a)


def test_clone_frozen_dataclass():
    """CRITICAL: Frozen instance fields are restored on clone."""
    point = FrozenPoint(3, 4)

    duplicate = clone(point)

    assert duplicate == point
    assert duplicate is not point
    assert structurally_equal(point, duplicate)


def test_clone_frozen_slotted_dataclass():
    assert clone(FrozenSlottedPoint(1, 2)) == FrozenSlottedPoint(1, 2)


def test_copy_to_frozen_instance():
    target = FrozenPoint()

    copy_to(FrozenPoint(5, 6), target)

    assert (target.x, target.y) == (5, 6)


def test_cross_type_never_writes_frozen_fields():
    @dataclass
    class Draft:
        x: int = 9
        y: int = 9

    target = FrozenPoint(1, 2)
    copy_similar_to(Draft(), target)

    assert target == FrozenPoint(1, 2)


# Clone construction


def test_clone_requires_zero_argument_constructor():
    with pytest.raises(UninstantiableTypeError, match="NeedsArgs"):
        clone(NeedsArgs(1))


def test_new_instance_rejects_abstract_class():
    with pytest.raises(UninstantiableTypeError, match="abstract"):
        new_instance(AbstractJob)


def test_new_instance_builds_defaults():
    assert new_instance(Foo) == Foo()


# Cross-type copy


def test_cross_type_copies_matching_name_and_type_only():
    """Target {a:int} from source {a:int, b:str}: only a is copied."""

    @dataclass
    class Target:
        a: int = 0

    @dataclass
    class Source:
        a: int = 5
        b: str = "x"

    target = Target()
    copy_similar_to(Source(), target)

    assert target.a == 5
    assert not hasattr(target, "b")


def test_cross_type_skips_incompatible_types():
    @dataclass
    class Target:
        a: int = 0

    @dataclass
    class Source:
        a: str = "five"

    target = Target()
    copy_similar_to(Source(), target)

    assert target.a == 0


def test_cross_type_target_must_accept_source_type():
    @dataclass
    class Kennel:
        resident: Animal | None = None

    @dataclass
    class DogHouse:
        resident: Dog | None = None

    kennel = Kennel()
    copy_similar_to(DogHouse(resident=Dog("rex")), kennel)
    assert kennel.resident == Dog("rex")

    dog_house = DogHouse()
    copy_similar_to(Kennel(resident=Animal("tom")), dog_house)
    assert dog_house.resident is None


def test_cross_type_numeric_promotion(registry):
    @dataclass
    class Counted:
        total: int = 3

    @dataclass
    class Measured:
        total: float = 0.0

    measured = Measured()
    copy_similar_to(Counted(), measured)
    assert measured.total == 3

    strict = CopyEngine(EngineSettings(numeric_promotion=False), registry)
    measured = Measured()
    strict.copy_similar_to(Counted(), measured)
    assert measured.total == 0.0


def test_cross_type_matches_across_member_kinds():
    class Invoice:
        name: str = "march"

        @property
        def total(self) -> int:
            return 42

    class Ledger:
        total: int = 0

        def __init__(self) -> None:
            self._name = ""

        @property
        def name(self) -> str:
            return self._name

        @name.setter
        def name(self, value: str) -> None:
            self._name = value.upper()

    ledger = Ledger()
    copy_similar_to(Invoice(), ledger)

    assert ledger.total == 42
    assert ledger.name == "MARCH"


def test_cross_type_never_touches_read_only_or_write_only():
    class Source:
        def _set_hidden(self, value: int) -> None:
            raise AssertionError("write-only property must not be read")

        hidden = property(None, _set_hidden)
        level: int = 7

    class Target:
        hidden: int = 0

        @property
        def level(self) -> int:
            return 0

    target = Target()
    copy_similar_to(Source(), target)

    assert target.hidden == 0
    assert target.level == 0


def test_cross_type_respects_opt_out_on_both_sides():
    @dataclass
    class Source:
        a: int = 1
        b: Annotated[int, CopyDisabled()] = 2

    @dataclass
    class Target:
        a: Annotated[int, CopyDisabled()] = 0
        b: int = 0

    target = Target()
    copy_similar_to(Source(), target, include_private=True)

    assert (target.a, target.b) == (0, 0)


def test_cross_type_private_members_need_opt_in():
    @dataclass
    class Source:
        _token: str = "s"

    @dataclass
    class Target:
        _token: str = ""

    target = Target()
    copy_similar_to(Source(), target)
    assert target._token == ""

    copy_similar_to(Source(), target, include_private=True)
    assert target._token == "s"


def test_last_match_wins_with_custom_matcher(engine):
    """CRITICAL: Several sources matching one target are all applied, last wins."""

    @dataclass
    class Source:
        first: int = 1
        second: int = 2

    @dataclass
    class Target:
        value: int = 0

    def to_value(source_name: str, target_name: str) -> bool:
        return target_name == "value"

    target = Target()
    engine.copy_similar_to(Source(), target, name_matcher=to_value)

    assert target.value == 2
    pairs = engine.plan(CopyRequest(Source, Target, name_matcher=to_value))
    assert [p.source.name for p in pairs] == ["first", "second"]
    assert {p.target.name for p in pairs} == {"value"}


def test_ignore_case_matcher():
    @dataclass
    class Source:
        Name: str = "ada"

    @dataclass
    class Target:
        name: str = ""

    target = Target()
    copy_similar_to(Source(), target)
    assert target.name == ""

    copy_similar_to(Source(), target, name_matcher=ignore_case)
    assert target.name == "ada"


def test_copy_similar_from_is_reversed():
    @dataclass
    class Target:
        a: int = 0

    @dataclass
    class Source:
        a: int = 9

    target = Target()
    copy_similar_from(target, Source())

    assert target.a == 9


def test_failed_copy_leaves_earlier_members_written():
    """No rollback: members processed before the failure stay written."""

    @dataclass
    class Source:
        a: int = 1
        value: int = 2
        z: int = 3

    @dataclass
    class Target:
        a: int = 0
        value: int = 0
        z: int = 0

    source = Source(a=10, value="oops", z=30)  # type: ignore[arg-type]
    target = Target()

    with pytest.raises(TypeMismatchError):
        copy_similar_to(source, target)

    assert (target.a, target.value, target.z) == (10, 0, 0)


def test_same_type_plan_pairs_members_with_themselves(engine):
    pairs = engine.plan(CopyRequest(Foo, Foo))

    assert [(p.source.name, p.target.name) for p in pairs] == [
        ("a", "a"),
        ("b", "b"),
        ("c", "c"),
    ]


def test_engine_uses_its_own_registry(settings):
    registry = MemberRegistry()
    engine = CopyEngine(settings, registry)

    engine.clone(Foo())

    assert registry.is_cached(Foo)


def test_structurally_equal_after_clone():
    foo = Foo(a="apple", b="bismuth", c=2)

    assert structurally_equal(foo, clone(foo))

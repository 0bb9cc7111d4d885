"""Member models: descriptors for fields and properties, grouped per class."""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class MemberKind(Enum):
    """Whether a member is plain data or accessor-backed."""

    FIELD = auto()
    PROPERTY = auto()


class Scope(Enum):
    """Visibility of a member, derived from its name."""

    PUBLIC = auto()
    NON_PUBLIC = auto()  # Leading underscore


class Binding(Enum):
    """Whether a member lives on instances or on the class."""

    INSTANCE = auto()
    STATIC = auto()


def _dead_class() -> type:
    raise ReferenceError("The inspected class no longer exists")


@dataclass(slots=True, frozen=True)
class MemberDescriptor:
    """One field or property of a class.

    The declaring class is held through a weak reference so that cached
    tables never keep a class alive.

    Attributes:
        name: Attribute name, unique within a MemberTable.
        kind: FIELD or PROPERTY.
        declared_type: Resolved annotation, ``object`` when unannotated.
        readable: Value can be read.
        writable: Value can be written through normal assignment.
        scope: PUBLIC or NON_PUBLIC.
        binding: INSTANCE or STATIC.
        disabled: Opt-out marker present; never selected.
        owner_ref: Weak reference to the class in the MRO declaring the member.
        frozen: Instance field of a frozen dataclass or pydantic model. Only
            same-type copy writes it, bypassing the class's ``__setattr__``.
    """

    name: str
    kind: MemberKind
    declared_type: Any
    readable: bool
    writable: bool
    scope: Scope
    binding: Binding
    disabled: bool
    owner_ref: weakref.ReferenceType[type]
    frozen: bool = False

    @property
    def owner(self) -> type:
        return self.owner_ref() or _dead_class()

    @property
    def is_static(self) -> bool:
        return self.binding is Binding.STATIC

    @property
    def is_public(self) -> bool:
        return self.scope is Scope.PUBLIC

    def get(self, obj: Any) -> Any:
        """Read this member's value from ``obj`` (or from its class if static)."""
        if self.is_static:
            return getattr(type(obj), self.name)
        return getattr(obj, self.name)

    def set(self, obj: Any, value: Any, *, bypass_frozen: bool = False) -> None:
        """Write ``value`` into this member of ``obj`` (or its declaring class if static).

        Args:
            obj: Instance written to.
            value: New member value.
            bypass_frozen: Write a frozen instance field with
                ``object.__setattr__`` instead of normal assignment.
        """
        if self.is_static:
            setattr(self.owner, self.name, value)
        elif bypass_frozen and self.frozen:
            object.__setattr__(obj, self.name, value)
        else:
            setattr(obj, self.name, value)


@dataclass(slots=True, frozen=True)
class MemberTable:
    """Ordered fields and properties of one class under one visibility setting.

    Disabled descriptors stay in the table for introspection; every selection
    helper drops them before applying its own filter.
    """

    cls_ref: weakref.ReferenceType[type]
    include_private: bool
    fields: tuple[MemberDescriptor, ...]
    properties: tuple[MemberDescriptor, ...]

    @property
    def cls(self) -> type:
        return self.cls_ref() or _dead_class()

    @property
    def members(self) -> tuple[MemberDescriptor, ...]:
        """All descriptors, properties first."""
        return self.properties + self.fields

    def __iter__(self) -> Iterator[MemberDescriptor]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.fields) + len(self.properties)

    def names(self) -> frozenset[str]:
        return frozenset(d.name for d in self.members)

    def find(self, name: str) -> MemberDescriptor | None:
        """Look up a descriptor by name, disabled or not."""
        for d in self.members:
            if d.name == name:
                return d
        return None

    def enabled(self) -> tuple[MemberDescriptor, ...]:
        return tuple(d for d in self.members if not d.disabled)

    def readable(self) -> tuple[MemberDescriptor, ...]:
        """Members a copy may read from, or equality may compare."""
        return tuple(d for d in self.enabled() if d.readable)

    def writable(self) -> tuple[MemberDescriptor, ...]:
        """Members a copy may write into."""
        return tuple(d for d in self.enabled() if d.writable)

    def copyable(
        self, kind: MemberKind | None = None, include_frozen: bool = False
    ) -> tuple[MemberDescriptor, ...]:
        """Members both readable and writable, optionally of one kind.

        Args:
            kind: Restrict to fields or properties.
            include_frozen: Also select frozen instance fields, for copies
                between instances of the same class.
        """
        return tuple(
            d
            for d in self.enabled()
            if d.readable
            and (d.writable or (include_frozen and d.frozen))
            and (kind is None or d.kind is kind)
        )

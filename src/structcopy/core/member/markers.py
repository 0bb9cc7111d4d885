"""Opt-out marker excluding members from copy and equality.

A member carrying the marker is never written by a copy and never inspected by
equality, whatever its visibility or type. Attach it in whichever form suits
the class:

    @dataclass
    class Account:
        owner: str
        token: Annotated[str, CopyDisabled()] = ""       # annotation metadata
        cache: dict = disabled_field(default_factory=dict)  # dataclass field

        @property
        @copy_disabled                                    # property
        def summary(self) -> str: ...

    class Legacy:
        __copy_disabled__ = ("handle",)                   # exclusion list
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from typing import Any, ClassVar, TypeVar, get_args, get_origin

F = TypeVar("F")

COPY_DISABLED_KEY = "structcopy.copy_disabled"
"""Key marking a dataclass field as disabled in ``Field.metadata``."""

EXCLUSION_LIST_ATTR = "__copy_disabled__"
"""Class attribute listing member names excluded from copy."""

_FUNCTION_FLAG = "__structcopy_disabled__"


@dataclasses.dataclass(slots=True, frozen=True)
class CopyDisabled:
    """Marker carrying no data; its presence disables the member."""


def copy_disabled(member: F) -> F:
    """Mark a property (or its getter function) as excluded from copy.

    Works above or below ``@property``:

        @property
        @copy_disabled
        def value(self) -> int: ...

    Args:
        member: Property object or plain function.

    Returns:
        The same object, marked.

    Raises:
        TypeError: If member is neither a property nor a function.
    """
    target: Any = member.fget if isinstance(member, property) else member
    if target is None or not callable(target):
        raise TypeError(f"copy_disabled cannot mark {member!r}")
    setattr(target, _FUNCTION_FLAG, True)
    return member


def disabled_field(**kwargs: Any) -> Any:
    """Create a ``dataclasses.field`` that is excluded from copy.

    Args:
        **kwargs: Forwarded to ``dataclasses.field``.

    Returns:
        Dataclass field with the opt-out marker in its metadata.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[COPY_DISABLED_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def has_marker(annotation: Any) -> bool:
    """Check whether an ``Annotated[...]`` annotation carries the marker."""
    # Nested Annotated is flattened by typing, so one level of metadata suffices
    metadata = getattr(annotation, "__metadata__", ())
    if any(m is CopyDisabled or isinstance(m, CopyDisabled) for m in metadata):
        return True
    if get_origin(annotation) is ClassVar:
        return any(has_marker(arg) for arg in get_args(annotation))
    return False


def is_function_disabled(func: Callable[..., Any] | None) -> bool:
    """Check whether a getter function was marked with ``copy_disabled``."""
    return func is not None and bool(getattr(func, _FUNCTION_FLAG, False))


def is_property_disabled(prop: property) -> bool:
    """Check whether a property was marked with ``copy_disabled``."""
    return is_function_disabled(prop.fget)


def is_dataclass_field_disabled(cls: type, name: str) -> bool:
    """Check whether a dataclass field of ``cls`` carries the marker in metadata."""
    if not dataclasses.is_dataclass(cls):
        return False
    # fields() hides ClassVar pseudo-fields; they cannot carry field metadata anyway
    for f in dataclasses.fields(cls):
        if f.name == name:
            return bool(f.metadata.get(COPY_DISABLED_KEY, False))
    return False


def exclusion_list(cls: type) -> frozenset[str]:
    """Collect ``__copy_disabled__`` names declared anywhere in the MRO."""
    names: set[str] = set()
    for klass in cls.__mro__:
        declared = klass.__dict__.get(EXCLUSION_LIST_ATTR)
        if isinstance(declared, str):
            names.add(declared)
        elif isinstance(declared, Iterable):
            names.update(declared)
    return frozenset(names)

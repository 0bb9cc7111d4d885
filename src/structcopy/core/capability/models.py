"""Capability protocols a class may implement to advertise copy-style operations.

The engine never requires any of them. They let calling code be polymorphic
over "things that can be copied", and ``isinstance`` works on all of them.
"""

from __future__ import annotations

from typing import Any, Protocol, Self, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class CopyableTo(Protocol):
    """Instance → pushes its state into another instance."""

    def copy_to(self, target: Any) -> None: ...


@runtime_checkable
class CopyableFrom(Protocol):
    """Instance ← pulls its state from another instance."""

    def copy_from(self, source: Any) -> None: ...


@runtime_checkable
class Cloneable(Protocol):
    """Instance → new instance with the same state."""

    def clone(self) -> Self: ...


@runtime_checkable
class DeepCopyable(Protocol):
    """Instance → new instance sharing no mutable state (for isolation)."""

    def deep_copy(self) -> Self: ...


@runtime_checkable
class ShallowCopyable(Protocol):
    """Instance → new instance sharing member values (for cheap snapshots)."""

    def shallow_copy(self) -> Self: ...


def copy_from_copyable(this: T, that: CopyableTo) -> T:
    """Fill ``this`` from ``that`` by delegating to ``that.copy_to(this)``.

    Args:
        this: Instance receiving the state.
        that: Instance implementing CopyableTo.

    Returns:
        ``this``, for chaining.

    Raises:
        TypeError: If that doesn't implement CopyableTo.
    """
    if not isinstance(that, CopyableTo):
        raise TypeError(f"{type(that).__name__} does not implement CopyableTo protocol")
    that.copy_to(this)
    return this

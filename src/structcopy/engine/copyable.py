"""Mixin giving a class copy-style methods backed by the default engine.

Usage:
    @dataclass
    class Settings(StructCopyable):
        host: str = "localhost"
        port: int = 8080

    a = Settings(port=9000)
    b = a.clone()
    isinstance(b, Cloneable)     # True
    a.structurally_equals(b)     # True
"""

from __future__ import annotations

from typing import Any, Self

from structcopy.core.types import NameMatcher
from structcopy.engine.core import get_engine


class StructCopyable:
    """Implements CopyableTo, CopyableFrom, Cloneable and ShallowCopyable structurally."""

    __slots__ = ()

    def copy_to(self, target: Self, include_private: bool = False) -> None:
        get_engine().copy_to(self, target, include_private)

    def copy_from(self, source: Self, include_private: bool = False) -> None:
        get_engine().copy_from(self, source, include_private)

    def clone(self, include_private: bool = False) -> Self:
        return get_engine().clone(self, include_private)

    def shallow_copy(self) -> Self:
        """Clone including non-public members; member values are shared, not copied."""
        return get_engine().clone(self, include_private=True)

    def copy_similar_to(
        self,
        target: Any,
        include_private: bool = False,
        name_matcher: NameMatcher | None = None,
    ) -> None:
        get_engine().copy_similar_to(self, target, include_private, name_matcher)

    def copy_similar_from(
        self,
        source: Any,
        include_private: bool = False,
        name_matcher: NameMatcher | None = None,
    ) -> None:
        get_engine().copy_similar_from(self, source, include_private, name_matcher)

    def structurally_equals(self, other: Any, compare_private: bool = False) -> bool:
        return get_engine().equals(self, other, compare_private)

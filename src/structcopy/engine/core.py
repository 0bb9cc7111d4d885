"""Copy engine and module-level entry points.

Usage:
    @dataclass
    class UserRow:
        id: int = 0
        name: str = ""
        password_hash: Annotated[str, CopyDisabled()] = ""

    @dataclass
    class UserView:
        id: int = 0
        name: str = ""

    row = UserRow(1, "ada", "x")
    backup = clone(row)                  # same type, password_hash left default
    view = UserView()
    copy_similar_to(row, view)           # id and name projected onto the view
    structurally_equal(row, backup)      # True, disabled members are ignored
"""

from __future__ import annotations

from typing import Any, TypeVar

from structcopy.config import EngineSettings
from structcopy.core.errors import TypeMismatchError
from structcopy.core.member import MemberRegistry, MemberTable, get_registry
from structcopy.core.types import NameMatcher
from structcopy.engine.equality import members_equal
from structcopy.engine.models import CopyPair, CopyRequest
from structcopy.engine.operations import (
    apply_pairs,
    copy_same_type,
    match_members,
    new_instance,
)

T = TypeVar("T")


class CopyEngine:
    """Structural copy and equality over member tables.

    The engine keeps no per-call state. Its only shared state is the member
    registry, whose entries are immutable once built.

    Args:
        settings: Engine configuration; read from the environment when None.
        registry: Member table registry; a new one honoring
            ``settings.cache_members`` when None.
    """

    def __init__(
        self,
        settings: EngineSettings | None = None,
        registry: MemberRegistry | None = None,
    ) -> None:
        self._settings = settings if settings is not None else EngineSettings()
        self._registry = (
            registry if registry is not None else MemberRegistry(self._settings.cache_members)
        )

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def registry(self) -> MemberRegistry:
        return self._registry

    def members(self, cls: type, include_private: bool = False) -> MemberTable:
        """Get the member table the engine uses for ``cls``."""
        return self._registry.get_members(cls, include_private)

    def plan(self, request: CopyRequest) -> list[CopyPair]:
        """Resolve a request into the ordered member pairs a copy would apply.

        Same-type requests pair every copyable member with itself (properties
        first, then fields); other requests go through name and type matching.

        Args:
            request: Copy request to resolve.

        Returns:
            Ordered list of member pairs.
        """
        if request.same_type:
            table = self.members(request.source_type, request.include_private)
            return [CopyPair(source=d, target=d) for d in table.copyable(include_frozen=True)]
        return match_members(
            self.members(request.source_type, request.include_private),
            self.members(request.target_type, request.include_private),
            request.name_matcher,
            numeric_promotion=self._settings.numeric_promotion,
        )

    def copy_to(self, source: T, target: T, include_private: bool = False) -> None:
        """Copy every member of ``source`` into ``target`` of the same class.

        Args:
            source: Instance read from.
            target: Instance of source's class (or a subclass) written to.
            include_private: Include non-public members.

        Raises:
            TypeMismatchError: If target is not an instance of source's class,
                or a value does not fit a member.
        """
        cls = type(source)
        if not isinstance(target, cls):
            raise TypeMismatchError(
                f"Cannot copy {cls.__qualname__} into {type(target).__qualname__}; "
                f"use copy_similar_to for different classes"
            )
        copy_same_type(
            source,
            target,
            self.members(cls, include_private),
            none_fits_any=self._settings.none_fits_any,
            numeric_promotion=self._settings.numeric_promotion,
        )

    def copy_from(self, target: T, source: T, include_private: bool = False) -> None:
        """Fill ``target`` from ``source`` of the same class."""
        self.copy_to(source, target, include_private)

    def clone(self, instance: T, include_private: bool = False) -> T:
        """Create a new instance of the same class holding the same member values.

        Args:
            instance: Instance to clone.
            include_private: Include non-public members.

        Returns:
            New, shallowly copied instance.

        Raises:
            UninstantiableTypeError: If the class cannot be built without arguments.
            TypeMismatchError: If a value does not fit a member.
        """
        duplicate = new_instance(type(instance))
        self.copy_to(instance, duplicate, include_private)
        return duplicate

    def copy_similar_to(
        self,
        source: Any,
        target: Any,
        include_private: bool = False,
        name_matcher: NameMatcher | None = None,
    ) -> None:
        """Project matching members of ``source`` onto ``target`` of another class.

        Args:
            source: Instance read from.
            target: Instance written to.
            include_private: Include non-public members on both sides.
            name_matcher: Pairs members by ``(source_name, target_name)``.

        Raises:
            TypeMismatchError: If a value does not fit a matched member.
        """
        request = CopyRequest(
            source_type=type(source),
            target_type=type(target),
            include_private=include_private,
            name_matcher=name_matcher,
        )
        apply_pairs(
            source,
            target,
            self.plan(request),
            none_fits_any=self._settings.none_fits_any,
            numeric_promotion=self._settings.numeric_promotion,
        )

    def copy_similar_from(
        self,
        target: Any,
        source: Any,
        include_private: bool = False,
        name_matcher: NameMatcher | None = None,
    ) -> None:
        """Fill ``target`` from matching members of ``source`` of another class."""
        self.copy_similar_to(source, target, include_private, name_matcher)

    def equals(self, a: Any, b: Any, compare_private: bool = False) -> bool:
        """Shallow structural equality of two instances of one class.

        Args:
            a: First instance.
            b: Second instance.
            compare_private: Include non-public members.

        Returns:
            True if both share a class and every readable member compares equal.
        """
        if type(a) is not type(b):
            return False
        return members_equal(a, b, self.members(type(a), compare_private).readable())


# Module-level engine, created on first use
_engine: CopyEngine | None = None


def get_engine() -> CopyEngine:
    """Access the default engine used by the module-level functions.

    Returns:
        The process-local CopyEngine, configured from the environment.
    """
    global _engine
    if _engine is None:
        settings = EngineSettings()
        registry = get_registry() if settings.cache_members else MemberRegistry(cache=False)
        _engine = CopyEngine(settings, registry)
    return _engine


def set_engine(engine: CopyEngine | None) -> None:
    """Replace the default engine; None resets it to be rebuilt on next use."""
    global _engine
    _engine = engine


def clone(instance: T, include_private: bool = False) -> T:
    """Clone ``instance`` with the default engine. See CopyEngine.clone."""
    return get_engine().clone(instance, include_private)


def copy_to(source: T, target: T, include_private: bool = False) -> None:
    """Same-type copy with the default engine. See CopyEngine.copy_to."""
    get_engine().copy_to(source, target, include_private)


def copy_from(target: T, source: T, include_private: bool = False) -> None:
    """Same-type copy with the default engine. See CopyEngine.copy_from."""
    get_engine().copy_from(target, source, include_private)


def copy_similar_to(
    source: Any,
    target: Any,
    include_private: bool = False,
    name_matcher: NameMatcher | None = None,
) -> None:
    """Cross-type copy with the default engine. See CopyEngine.copy_similar_to."""
    get_engine().copy_similar_to(source, target, include_private, name_matcher)


def copy_similar_from(
    target: Any,
    source: Any,
    include_private: bool = False,
    name_matcher: NameMatcher | None = None,
) -> None:
    """Cross-type copy with the default engine. See CopyEngine.copy_similar_from."""
    get_engine().copy_similar_from(target, source, include_private, name_matcher)


def structurally_equal(a: Any, b: Any, compare_private: bool = False) -> bool:
    """Structural equality with the default engine. See CopyEngine.equals."""
    return get_engine().equals(a, b, compare_private)

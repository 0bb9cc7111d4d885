"""Pure functions moving member values between instances.

These functions operate on member tables that have already been resolved; they
hold no state and never log. Failures propagate to the caller, and members
written before a failure stay written.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable
from typing import Any, TypeVar

from structcopy.core.compat import CompatibilityMode, is_compatible, value_fits
from structcopy.core.errors import TypeMismatchError, UninstantiableTypeError
from structcopy.core.member import MemberDescriptor, MemberKind, MemberTable
from structcopy.core.types import NameMatcher
from structcopy.engine.matchers import exact_names
from structcopy.engine.models import CopyPair

T = TypeVar("T")


def _describe(member: MemberDescriptor) -> str:
    declared = getattr(member.declared_type, "__name__", None) or repr(member.declared_type)
    return f"{member.owner.__qualname__}.{member.name} ({declared})"


def write_member(
    target: Any,
    member: MemberDescriptor,
    value: Any,
    *,
    none_fits_any: bool = True,
    numeric_promotion: bool = True,
    bypass_frozen: bool = False,
) -> None:
    """Store ``value`` into ``member`` of ``target`` after a runtime type check.

    Args:
        target: Instance being written.
        member: Writable member of the target's class.
        value: Value read from the source.
        none_fits_any: Treat None as assignable to every declared type.
        numeric_promotion: Accept int for float/complex and float for complex.
        bypass_frozen: Write frozen instance fields, for same-type copies.

    Raises:
        TypeMismatchError: If the value does not fit the declared type, or the
            assignment itself rejects it.
    """
    if not value_fits(
        value,
        member.declared_type,
        none_fits_any=none_fits_any,
        numeric_promotion=numeric_promotion,
    ):
        raise TypeMismatchError(
            f"Cannot store {type(value).__name__} value in {_describe(member)}"
        )
    try:
        member.set(target, value, bypass_frozen=bypass_frozen)
    except (TypeError, ValueError) as e:
        # Validating setters (e.g. pydantic validate_assignment) reject here
        raise TypeMismatchError(f"Assignment to {_describe(member)} rejected: {e}") from e


def copy_members(
    source: Any,
    target: Any,
    members: Iterable[MemberDescriptor],
    *,
    none_fits_any: bool = True,
    numeric_promotion: bool = True,
    bypass_frozen: bool = False,
) -> None:
    """Copy each member's value from ``source`` into the same member of ``target``.

    Args:
        source: Instance read from.
        target: Instance written to.
        members: Readable and writable members shared by both instances.
        none_fits_any: Treat None as assignable to every declared type.
        numeric_promotion: Accept int for float/complex and float for complex.
        bypass_frozen: Write frozen instance fields, for same-type copies.
    """
    for member in members:
        write_member(
            target,
            member,
            member.get(source),
            none_fits_any=none_fits_any,
            numeric_promotion=numeric_promotion,
            bypass_frozen=bypass_frozen,
        )


def copy_same_type(
    source: Any,
    target: Any,
    table: MemberTable,
    *,
    none_fits_any: bool = True,
    numeric_promotion: bool = True,
) -> None:
    """Copy every enabled, readable and writable member, properties then fields.

    Instance fields of frozen dataclasses and pydantic models are written too,
    through ``object.__setattr__``, so a clone holds the source's values.

    Args:
        source: Instance read from.
        target: Instance of the same class written to.
        table: Member table of the shared class.
        none_fits_any: Treat None as assignable to every declared type.
        numeric_promotion: Accept int for float/complex and float for complex.
    """
    for kind in (MemberKind.PROPERTY, MemberKind.FIELD):
        copy_members(
            source,
            target,
            table.copyable(kind, include_frozen=True),
            none_fits_any=none_fits_any,
            numeric_promotion=numeric_promotion,
            bypass_frozen=True,
        )


def match_members(
    source_table: MemberTable,
    target_table: MemberTable,
    name_matcher: NameMatcher | None = None,
    *,
    numeric_promotion: bool = True,
) -> list[CopyPair]:
    """Pair readable source members with writable target members.

    A pair is formed when the names match and the target's declared type
    accepts the source's declared type. Member kind is ignored, so a field may
    feed a property and vice versa. Pairs are ordered by target member, then by
    source member; several pairs may share one target, the last one wins.

    Args:
        source_table: Member table of the source class.
        target_table: Member table of the target class.
        name_matcher: Name predicate, exact equality when None.
        numeric_promotion: Accept int for float/complex and float for complex.

    Returns:
        Ordered list of member pairs to apply.
    """
    matcher = name_matcher or exact_names
    sources = source_table.readable()
    pairs: list[CopyPair] = []
    for target_member in target_table.writable():
        for source_member in sources:
            if not matcher(source_member.name, target_member.name):
                continue
            if is_compatible(
                source_member.declared_type,
                target_member.declared_type,
                CompatibilityMode.DEFAULT,
                numeric_promotion=numeric_promotion,
            ):
                pairs.append(CopyPair(source=source_member, target=target_member))
    return pairs


def apply_pairs(
    source: Any,
    target: Any,
    pairs: Iterable[CopyPair],
    *,
    none_fits_any: bool = True,
    numeric_promotion: bool = True,
) -> None:
    """Write each pair's source value into its target member, in order.

    Args:
        source: Instance read from.
        target: Instance written to.
        pairs: Member pairs from match_members.
        none_fits_any: Treat None as assignable to every declared type.
        numeric_promotion: Accept int for float/complex and float for complex.
    """
    for pair in pairs:
        write_member(
            target,
            pair.target,
            pair.source.get(source),
            none_fits_any=none_fits_any,
            numeric_promotion=numeric_promotion,
        )


def new_instance(cls: type[T]) -> T:
    """Construct a default-initialized instance of ``cls``.

    Args:
        cls: Class to instantiate.

    Returns:
        New instance built with no arguments.

    Raises:
        UninstantiableTypeError: If the class is abstract or its constructor
            requires arguments.
    """
    if inspect.isabstract(cls):
        raise UninstantiableTypeError(f"{cls.__qualname__} is abstract")
    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        # No introspectable signature (some builtins); let the call decide
        signature = None

    if signature is not None:
        try:
            signature.bind()
        except TypeError as e:
            raise UninstantiableTypeError(
                f"{cls.__qualname__} cannot be constructed without arguments: {e}"
            ) from e
        return cls()

    try:
        return cls()
    except TypeError as e:
        raise UninstantiableTypeError(
            f"{cls.__qualname__} cannot be constructed without arguments: {e}"
        ) from e

"""Pure functions deciding type and value compatibility.

Type-level checks work on annotations as returned by ``typing.get_type_hints``:
plain classes, ``None``, unions, parameterised generics, ``Literal``,
``Annotated``, ``NewType`` and ``TypeVar``. Value-level checks answer the same
question for a concrete runtime value.

Usage:
    is_compatible(bool, int)                              # True
    is_compatible(bool, int, CompatibilityMode.STRICT)    # False
    is_compatible(int, float)                             # True (PEP 484 promotion)
    is_compatible(int | None, int | str | None)           # True
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import NoneType, UnionType
from typing import (
    Annotated,
    Any,
    ForwardRef,
    Literal,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

from structcopy.core.compat.models import CompatibilityMode
from structcopy.core.errors import InvalidArgumentError

T = TypeVar("T")

# PEP 484 numeric tower: required type -> types implicitly accepted for it
_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}


def strip_annotated(tp: Any) -> Any:
    """Remove any ``Annotated[...]`` wrappers, returning the underlying type.

    Args:
        tp: Type annotation, possibly wrapped in ``Annotated``.

    Returns:
        The innermost annotated type.
    """
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def normalize_type(tp: Any) -> Any:
    """Bring an annotation into the canonical form used for comparison.

    ``None`` becomes ``NoneType``, ``NewType`` becomes its supertype, a
    ``TypeVar`` becomes its bound, and unresolved forward references become
    ``object``.

    Args:
        tp: Type annotation to normalize.

    Returns:
        Normalized annotation.
    """
    tp = strip_annotated(tp)
    while True:
        if tp is None:
            return NoneType
        if isinstance(tp, (str, ForwardRef)):
            return object
        if isinstance(tp, TypeVar):
            tp = tp.__bound__ if tp.__bound__ is not None else object
            continue
        supertype = getattr(tp, "__supertype__", None)
        if supertype is not None:
            tp = strip_annotated(supertype)
            continue
        return tp


def _nominal(tp: Any) -> Any:
    tp = strip_annotated(tp)
    return NoneType if tp is None else tp


def _is_union(tp: Any) -> bool:
    return get_origin(tp) in (Union, UnionType)


def _is_class(tp: Any) -> bool:
    return isinstance(tp, type)


def _subclass(candidate: type, required: type, numeric_promotion: bool) -> bool:
    try:
        if issubclass(candidate, required):
            return True
    except TypeError:
        # Non-runtime protocols and other classes refusing issubclass
        return False
    if numeric_promotion:
        return any(issubclass(candidate, p) for p in _PROMOTIONS.get(required, ()))
    return False


def _instance(value: Any, tp: Any, numeric_promotion: bool) -> bool:
    tp = normalize_type(tp)
    if tp is Any or tp is object:
        return True
    if _is_union(tp):
        return any(_instance(value, arg, numeric_promotion) for arg in get_args(tp))
    origin = get_origin(tp)
    if origin is Literal:
        return any(value == lit and type(value) is type(lit) for lit in get_args(tp))
    if origin is not None:
        # Parameterised generics are checked by their origin only
        tp = origin
    if not _is_class(tp):
        # Special forms without a runtime representation are not checked
        return True
    try:
        if isinstance(value, tp):
            return True
    except TypeError:
        return False
    if numeric_promotion:
        return any(isinstance(value, p) for p in _PROMOTIONS.get(tp, ()))
    return False


# Type-level checks


def check_default(candidate: Any, required: Any, *, numeric_promotion: bool = True) -> bool:
    """Check whether ``candidate`` may be used wherever ``required`` is expected.

    Args:
        candidate: Type of the value being offered.
        required: Type the value must satisfy.
        numeric_promotion: Accept int for float/complex and float for complex.

    Returns:
        True if candidate is the same type as, or a subtype of, required.
    """
    candidate = normalize_type(candidate)
    required = normalize_type(required)

    if required is Any or required is object or candidate is Any:
        return True
    if candidate == required:
        return True
    if _is_union(candidate):
        return all(
            check_default(arg, required, numeric_promotion=numeric_promotion)
            for arg in get_args(candidate)
        )
    if _is_union(required):
        return any(
            check_default(candidate, arg, numeric_promotion=numeric_promotion)
            for arg in get_args(required)
        )
    if get_origin(candidate) is Literal:
        return all(_instance(v, required, numeric_promotion) for v in get_args(candidate))
    if get_origin(required) is Literal:
        return False

    candidate_origin = get_origin(candidate) or candidate
    required_origin = get_origin(required) or required
    if not (_is_class(candidate_origin) and _is_class(required_origin)):
        return False
    if not _subclass(candidate_origin, required_origin, numeric_promotion):
        return False

    candidate_args, required_args = get_args(candidate), get_args(required)
    if candidate_args and required_args:
        # Generic parameters are invariant
        if len(candidate_args) != len(required_args):
            return False
        return all(
            c is Any or r is Any or normalize_type(c) == normalize_type(r)
            for c, r in zip(candidate_args, required_args, strict=True)
        )
    return True


def check_strict(candidate: Any, required: Any, *, numeric_promotion: bool = True) -> bool:
    """Check whether two types are exactly the same type.

    Args:
        candidate: Type of the value being offered.
        required: Type the value must satisfy.
        numeric_promotion: Ignored; strict checks never promote.

    Returns:
        True only if both annotations denote the identical type. ``NewType``
        and ``TypeVar`` are compared by identity, not by what they stand for.
    """
    return bool(_nominal(candidate) == _nominal(required))


def check_derived(candidate: Any, required: Any, *, numeric_promotion: bool = True) -> bool:
    """Check whether ``candidate`` is a proper subtype of ``required``.

    Args:
        candidate: Type of the value being offered.
        required: Type the value must satisfy.
        numeric_promotion: Forwarded to the default check.

    Returns:
        True if candidate is compatible with required but not the same type.
    """
    return not check_strict(candidate, required) and check_default(
        candidate, required, numeric_promotion=numeric_promotion
    )


# Value-level checks


def instance_default(value: Any, required: Any) -> bool:
    """``isinstance`` extended to typing forms (unions, generics, Literal, Any)."""
    return _instance(value, required, numeric_promotion=False)


def instance_strict(value: Any, required: Any) -> bool:
    """True if the value's own type is exactly ``required``."""
    return type(value) is normalize_type(required)


def instance_derived(value: Any, required: Any) -> bool:
    """True if the value is an instance of a proper subtype of ``required``."""
    return not instance_strict(value, required) and instance_default(value, required)


# Public entry points


def _check_mode(mode: Any) -> CompatibilityMode:
    if not isinstance(mode, CompatibilityMode):
        raise InvalidArgumentError(f"Unrecognized compatibility mode: {mode!r}")
    return mode


def is_compatible(
    candidate: Any,
    required: Any,
    mode: CompatibilityMode = CompatibilityMode.DEFAULT,
    *,
    numeric_promotion: bool = True,
) -> bool:
    """Decide whether a value of type ``candidate`` may be assigned to ``required``.

    Args:
        candidate: Type of the value being offered.
        required: Type the receiving slot declares.
        mode: Strictness of the comparison.
        numeric_promotion: Apply PEP 484 numeric promotion (DEFAULT/DERIVED only).

    Returns:
        True if compatible under the given mode.

    Raises:
        InvalidArgumentError: If mode is not a CompatibilityMode.
    """
    check = _check_mode(mode).get_check()
    return check(candidate, required, numeric_promotion=numeric_promotion)


def is_instance(
    value: Any, required: Any, mode: CompatibilityMode = CompatibilityMode.DEFAULT
) -> bool:
    """Decide whether ``value`` is an instance of ``required`` under ``mode``.

    Args:
        value: Runtime value to test.
        required: Type annotation to test against.
        mode: Strictness of the comparison.

    Returns:
        True if the value satisfies the type under the given mode.

    Raises:
        InvalidArgumentError: If mode is not a CompatibilityMode.
    """
    return _check_mode(mode).get_instance_check()(value, required)


def of_type(
    items: Iterable[Any] | None,
    required: type[T],
    mode: CompatibilityMode = CompatibilityMode.DEFAULT,
) -> Iterator[T]:
    """Lazily filter ``items`` down to values that are instances of ``required``.

    Arguments are validated eagerly; filtering happens on iteration.

    Args:
        items: Values to filter.
        required: Type the yielded values must satisfy.
        mode: Strictness of the comparison.

    Returns:
        Iterator over matching items, in input order.

    Raises:
        InvalidArgumentError: If items is None or mode is not a CompatibilityMode.
    """
    if items is None:
        raise InvalidArgumentError("items must not be None")
    check = _check_mode(mode).get_instance_check()
    return (item for item in items if check(item, required))


def type_match(
    types: Iterable[Any],
    candidate: Any,
    mode: CompatibilityMode = CompatibilityMode.DEFAULT,
) -> bool:
    """Check whether ``candidate`` is compatible with any of ``types``.

    Args:
        types: Required types to test against.
        candidate: Type being offered.
        mode: Strictness of the comparison.

    Returns:
        True if at least one of types accepts candidate.
    """
    _check_mode(mode)
    return any(is_compatible(candidate, required, mode) for required in types)


def value_fits(
    value: Any,
    declared: Any,
    *,
    none_fits_any: bool = True,
    numeric_promotion: bool = True,
) -> bool:
    """Check whether ``value`` may be stored in a slot declared as ``declared``.

    Args:
        value: Value about to be written.
        declared: Declared type of the receiving member.
        none_fits_any: Treat None as assignable to every declared type.
        numeric_promotion: Accept int for float/complex and float for complex.

    Returns:
        True if the write is type-correct.
    """
    if value is None and none_fits_any:
        return True
    return _instance(value, declared, numeric_promotion)

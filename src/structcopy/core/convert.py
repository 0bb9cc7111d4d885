"""Value conversion into a requested type.

Backed by pydantic's ``TypeAdapter`` in lax mode, so strings such as ``"42"``,
``"1.5"``, ``"true"``, a UUID or an ISO date convert to the matching type.

Usage:
    convert("42", int)                          # 42
    convert("2024-05-22", datetime.date)        # date(2024, 5, 22)
    convert_or_default("nope", int, default=0)  # 0
"""

from __future__ import annotations

from typing import Any, TypeVar, overload

from pydantic import TypeAdapter, ValidationError

from structcopy.core.errors import ConversionError

T = TypeVar("T")


def convert(value: Any, target_type: type[T]) -> T:
    """Convert ``value`` into ``target_type``.

    Args:
        value: Value to convert, typically a string.
        target_type: Requested type (any annotation pydantic understands).

    Returns:
        Converted value.

    Raises:
        ConversionError: If the value cannot be converted.
    """
    try:
        adapter: TypeAdapter[T] = TypeAdapter(target_type)
    except TypeError as e:
        # pydantic schema generation errors are TypeErrors
        raise ConversionError(f"Cannot convert to {target_type!r}: {e}") from e
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        raise ConversionError(
            f"Cannot convert {value!r} to {getattr(target_type, '__name__', target_type)}"
        ) from e


@overload
def convert_or_default(value: Any, target_type: type[T]) -> T | None: ...


@overload
def convert_or_default(value: Any, target_type: type[T], default: T) -> T: ...


def convert_or_default(value: Any, target_type: type[T], default: T | None = None) -> T | None:
    """Convert ``value`` into ``target_type``, returning ``default`` on failure.

    Args:
        value: Value to convert.
        target_type: Requested type.
        default: Returned when conversion fails.

    Returns:
        Converted value, or default.
    """
    try:
        return convert(value, target_type)
    except ConversionError:
        return default

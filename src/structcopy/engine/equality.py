"""Shallow structural equality over member tables."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from structcopy.core.member import MemberDescriptor


def members_equal(a: Any, b: Any, members: Iterable[MemberDescriptor]) -> bool:
    """Compare two instances member by member.

    For each member: both None is equal; exactly one None is unequal and stops
    the comparison; otherwise the values' own ``==`` decides. No recursion into
    nested objects. An empty member set is vacuously equal.

    Args:
        a: First instance.
        b: Second instance of the same class.
        members: Readable members to compare.

    Returns:
        True if every member compares equal.
    """
    for member in members:
        a_value = member.get(a)
        b_value = member.get(b)
        if a_value is None and b_value is None:
            continue
        if a_value is None or b_value is None:
            return False
        if not a_value == b_value:
            return False
    return True

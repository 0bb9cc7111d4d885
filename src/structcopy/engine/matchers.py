"""Name matchers for cross-type copies.

A matcher is any ``(source_name, target_name) -> bool`` callable.
"""

from __future__ import annotations


def exact_names(source_name: str, target_name: str) -> bool:
    """Default pairing: names must be identical."""
    return source_name == target_name


def ignore_case(source_name: str, target_name: str) -> bool:
    """Pair names that differ only by letter case."""
    return source_name.casefold() == target_name.casefold()


def ignore_underscores(source_name: str, target_name: str) -> bool:
    """Pair names that differ only by underscores and case (``user_id`` ~ ``userId``)."""
    return source_name.replace("_", "").casefold() == target_name.replace("_", "").casefold()

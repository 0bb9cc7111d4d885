"""Core type definitions for structcopy."""

from collections.abc import Callable
from typing import TypeAlias

NameMatcher: TypeAlias = Callable[[str, str], bool]
"""Predicate over ``(source_name, target_name)`` pairing members across classes.

Used by cross-type copies instead of exact name equality. Several source
members may match one target member; all are applied and the last one wins.
"""

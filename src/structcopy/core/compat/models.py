"""Compatibility models: the strictness modes used by type checks."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import Any


class CompatibilityMode(Enum):
    """How strictly a candidate type must match a required type."""

    DEFAULT = auto()  # Subtype-inclusive, reflexive
    STRICT = auto()  # Exactly the same type
    DERIVED = auto()  # A proper subtype, never the type itself

    def get_check(self) -> Callable[..., bool]:
        """Get the type-level check function for this mode.

        Returns:
            Pure function taking (candidate, required, *, numeric_promotion).
        """
        # Late import to avoid circular dependency
        from structcopy.core.compat import operations

        checks = {
            CompatibilityMode.DEFAULT: operations.check_default,
            CompatibilityMode.STRICT: operations.check_strict,
            CompatibilityMode.DERIVED: operations.check_derived,
        }
        return checks[self]

    def get_instance_check(self) -> Callable[[Any, Any], bool]:
        """Get the value-level check function for this mode.

        Returns:
            Pure function taking (value, required).
        """
        from structcopy.core.compat import operations

        checks = {
            CompatibilityMode.DEFAULT: operations.instance_default,
            CompatibilityMode.STRICT: operations.instance_strict,
            CompatibilityMode.DERIVED: operations.instance_derived,
        }
        return checks[self]

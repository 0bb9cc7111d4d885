"""Compatibility functionality: strictness modes and type/value predicates."""

from structcopy.core.compat.models import CompatibilityMode
from structcopy.core.compat.operations import (
    is_compatible,
    is_instance,
    normalize_type,
    of_type,
    strip_annotated,
    type_match,
    value_fits,
)

__all__ = [
    # Models
    "CompatibilityMode",
    # Operations
    "is_compatible",
    "is_instance",
    "of_type",
    "type_match",
    "value_fits",
    "normalize_type",
    "strip_annotated",
]

"""Capability protocols for copy-style operations."""

from structcopy.core.capability.models import (
    Cloneable,
    CopyableFrom,
    CopyableTo,
    DeepCopyable,
    ShallowCopyable,
    copy_from_copyable,
)

__all__ = [
    "CopyableTo",
    "CopyableFrom",
    "Cloneable",
    "DeepCopyable",
    "ShallowCopyable",
    "copy_from_copyable",
]

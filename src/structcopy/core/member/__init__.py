"""Member functionality: descriptors, discovery, registry, and opt-out markers."""

from structcopy.core.member.core import MemberRegistry, get_registry, inspect_members
from structcopy.core.member.markers import (
    COPY_DISABLED_KEY,
    CopyDisabled,
    copy_disabled,
    disabled_field,
)
from structcopy.core.member.models import (
    Binding,
    MemberDescriptor,
    MemberKind,
    MemberTable,
    Scope,
)

__all__ = [
    # Models
    "MemberDescriptor",
    "MemberTable",
    "MemberKind",
    "Scope",
    "Binding",
    # Markers
    "CopyDisabled",
    "copy_disabled",
    "disabled_field",
    "COPY_DISABLED_KEY",
    # Core
    "inspect_members",
    "get_registry",
    "MemberRegistry",
]

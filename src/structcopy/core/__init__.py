"""Core functionalities: stateless protocols, predicates, and member metadata.

Architecture Note:
    core/ contains pure, stateless functionalities: type compatibility, member
    discovery, opt-out markers, capability protocols, and value conversion.
    The only process-wide state is the member-table cache, whose entries are
    immutable. The copy and equality algorithms built on top live in engine/.
"""

from structcopy.core.capability import (
    Cloneable,
    CopyableFrom,
    CopyableTo,
    DeepCopyable,
    ShallowCopyable,
    copy_from_copyable,
)
from structcopy.core.compat import (
    CompatibilityMode,
    is_compatible,
    is_instance,
    of_type,
    type_match,
    value_fits,
)
from structcopy.core.convert import convert, convert_or_default
from structcopy.core.errors import (
    ConversionError,
    InvalidArgumentError,
    StructCopyError,
    TypeMismatchError,
    UninstantiableTypeError,
)
from structcopy.core.member import (
    Binding,
    CopyDisabled,
    MemberDescriptor,
    MemberKind,
    MemberRegistry,
    MemberTable,
    Scope,
    copy_disabled,
    disabled_field,
    get_registry,
    inspect_members,
)
from structcopy.core.types import NameMatcher

__all__ = [
    # Types
    "NameMatcher",
    # Errors
    "StructCopyError",
    "InvalidArgumentError",
    "UninstantiableTypeError",
    "TypeMismatchError",
    "ConversionError",
    # Compatibility
    "CompatibilityMode",
    "is_compatible",
    "is_instance",
    "of_type",
    "type_match",
    "value_fits",
    # Members
    "MemberDescriptor",
    "MemberTable",
    "MemberKind",
    "Scope",
    "Binding",
    "MemberRegistry",
    "get_registry",
    "inspect_members",
    "CopyDisabled",
    "copy_disabled",
    "disabled_field",
    # Capabilities
    "CopyableTo",
    "CopyableFrom",
    "Cloneable",
    "DeepCopyable",
    "ShallowCopyable",
    "copy_from_copyable",
    # Conversion
    "convert",
    "convert_or_default",
]

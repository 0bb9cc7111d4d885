"""structcopy: structural copy and equality for Python objects.

Copies or compares the matching named members (fields and properties) of two
objects, driven by class metadata rather than hand-written mapping code.

Usage:
    from dataclasses import dataclass
    from structcopy import clone, copy_similar_to, structurally_equal

    @dataclass
    class Order:
        id: int = 0
        total: float = 0.0
        note: str | None = None

    @dataclass
    class OrderSummary:
        id: int = 0
        total: float = 0.0

    order = Order(7, 19.5, "gift")
    copy = clone(order)
    assert structurally_equal(order, copy)

    summary = OrderSummary()
    copy_similar_to(order, summary)   # id and total; note has no counterpart
"""

__version__ = "0.1.0"

# Core primitives
from structcopy.core import (
    Binding,
    Cloneable,
    CompatibilityMode,
    ConversionError,
    CopyableFrom,
    CopyableTo,
    CopyDisabled,
    DeepCopyable,
    InvalidArgumentError,
    MemberDescriptor,
    MemberKind,
    MemberRegistry,
    MemberTable,
    NameMatcher,
    Scope,
    ShallowCopyable,
    StructCopyError,
    TypeMismatchError,
    UninstantiableTypeError,
    convert,
    convert_or_default,
    copy_disabled,
    copy_from_copyable,
    disabled_field,
    get_registry,
    inspect_members,
    is_compatible,
    is_instance,
    of_type,
    type_match,
)

# Configuration
from structcopy.config import EngineSettings

# Engine
from structcopy.engine import (
    CopyEngine,
    CopyPair,
    CopyRequest,
    StructCopyable,
    clone,
    copy_from,
    copy_similar_from,
    copy_similar_to,
    copy_to,
    get_engine,
    ignore_case,
    ignore_underscores,
    new_instance,
    set_engine,
    structurally_equal,
)

__all__ = [
    # Version
    "__version__",
    # Entry points
    "clone",
    "copy_to",
    "copy_from",
    "copy_similar_to",
    "copy_similar_from",
    "structurally_equal",
    "new_instance",
    # Engine
    "CopyEngine",
    "CopyRequest",
    "CopyPair",
    "get_engine",
    "set_engine",
    "StructCopyable",
    "ignore_case",
    "ignore_underscores",
    "EngineSettings",
    # Compatibility
    "CompatibilityMode",
    "is_compatible",
    "is_instance",
    "of_type",
    "type_match",
    # Members
    "MemberDescriptor",
    "MemberTable",
    "MemberKind",
    "Scope",
    "Binding",
    "MemberRegistry",
    "get_registry",
    "inspect_members",
    "NameMatcher",
    # Opt-out
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
    # Errors
    "StructCopyError",
    "InvalidArgumentError",
    "UninstantiableTypeError",
    "TypeMismatchError",
    "ConversionError",
]

"""Engine functionality: structural copy, clone, and equality."""

from structcopy.engine.copyable import StructCopyable
from structcopy.engine.core import (
    CopyEngine,
    clone,
    copy_from,
    copy_similar_from,
    copy_similar_to,
    copy_to,
    get_engine,
    set_engine,
    structurally_equal,
)
from structcopy.engine.equality import members_equal
from structcopy.engine.matchers import exact_names, ignore_case, ignore_underscores
from structcopy.engine.models import CopyPair, CopyRequest
from structcopy.engine.operations import (
    apply_pairs,
    copy_members,
    copy_same_type,
    match_members,
    new_instance,
    write_member,
)

__all__ = [
    # Models
    "CopyRequest",
    "CopyPair",
    # Engine
    "CopyEngine",
    "get_engine",
    "set_engine",
    "clone",
    "copy_to",
    "copy_from",
    "copy_similar_to",
    "copy_similar_from",
    "structurally_equal",
    "StructCopyable",
    # Operations
    "new_instance",
    "write_member",
    "copy_members",
    "copy_same_type",
    "match_members",
    "apply_pairs",
    "members_equal",
    # Matchers
    "exact_names",
    "ignore_case",
    "ignore_underscores",
]

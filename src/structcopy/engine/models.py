"""Engine models: the per-call request and the member pairs it resolves to."""

from __future__ import annotations

from dataclasses import dataclass

from structcopy.core.member import MemberDescriptor
from structcopy.core.types import NameMatcher


@dataclass(slots=True, frozen=True)
class CopyRequest:
    """One copy invocation.

    Attributes:
        source_type: Class whose members are read.
        target_type: Class whose members are written (may equal source_type).
        include_private: Widen both sides to non-public members.
        name_matcher: Pairs members by name instead of exact equality.
    """

    source_type: type
    target_type: type
    include_private: bool = False
    name_matcher: NameMatcher | None = None

    @property
    def same_type(self) -> bool:
        return self.source_type is self.target_type and self.name_matcher is None


@dataclass(slots=True, frozen=True)
class CopyPair:
    """A source member whose value is written into a target member."""

    source: MemberDescriptor
    target: MemberDescriptor

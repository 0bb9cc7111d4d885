"""Member discovery and the per-class member table registry.

Members are derived from a class's static shape, never from instance state:

    @dataclass
    class Point:
        x: int = 0                  # instance field
        y: int = 0                  # instance field
        origin: ClassVar[str] = "o" # static field
        _tag: str = ""              # non-public field

        @property
        def norm(self) -> int:      # read-only property
            return abs(self.x) + abs(self.y)

    table = get_registry().get_members(Point)
    [d.name for d in table]         # ['norm', 'x', 'y', 'origin']
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import types
import weakref
from typing import Any, ClassVar, get_args, get_origin, get_type_hints

from structcopy.core.compat import strip_annotated
from structcopy.core.member.markers import (
    exclusion_list,
    has_marker,
    is_dataclass_field_disabled,
    is_property_disabled,
)
from structcopy.core.member.models import (
    Binding,
    MemberDescriptor,
    MemberKind,
    MemberTable,
    Scope,
)

_logger = logging.getLogger(__name__)

# Class-level names that are configuration, not data
_RESERVED_NAMES = frozenset(
    {
        "model_config",
        "model_fields",
        "model_computed_fields",
        "_abc_impl",
        "_is_protocol",
        "_is_runtime_protocol",
    }
)

# Modules whose classes contribute no members
_LIBRARY_MODULES = ("builtins", "abc", "typing", "pydantic", "pydantic_settings")


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def _is_library_base(klass: type) -> bool:
    module = klass.__module__
    return any(module == m or module.startswith(m + ".") for m in _LIBRARY_MODULES)


def _is_frozen(cls: type) -> bool:
    params = getattr(cls, "__dataclass_params__", None)
    if params is not None and params.frozen:
        return True
    if _is_pydantic(cls):
        config = getattr(cls, "model_config", None) or {}
        return bool(config.get("frozen", False))
    return False


def _own_annotations(klass: type) -> dict[str, Any]:
    try:
        return dict(inspect.get_annotations(klass))
    except NameError:
        # Unresolvable annotations: keep the names, lose the types
        return {name: object for name in klass.__dict__.get("__annotations__", {})}


def _resolve_hints(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls, include_extras=True)
    except (NameError, TypeError, AttributeError) as e:
        _logger.debug("Could not resolve type hints of %s: %s", cls.__qualname__, e)
        return {}


def _evaluated_annotations(klass: type) -> dict[str, Any]:
    """Evaluate one class's own annotations when the class-wide resolution failed."""
    try:
        return dict(inspect.get_annotations(klass, eval_str=True))
    except (NameError, SyntaxError, TypeError, AttributeError):
        return {}


def _fallback_hint(raw: Any, evaluated: dict[str, Any], name: str) -> Any:
    if name in evaluated:
        return evaluated[name]
    # Unresolvable string annotations lose their type
    return object if isinstance(raw, str) else raw


def _instances_have_dict(cls: type) -> bool:
    """Check whether instances of ``cls`` carry a ``__dict__`` for their own state."""
    return any(
        isinstance(vars(klass).get("__dict__"), types.GetSetDescriptorType)
        for klass in cls.__mro__
    )


def _return_hint(func: Any) -> Any:
    if func is None:
        return object
    try:
        return get_type_hints(func, include_extras=True).get("return", object)
    except (NameError, TypeError, AttributeError):
        return object


def _unwrap_classvar(hint: Any) -> tuple[bool, Any]:
    """Split a hint into (is_static, declared_type)."""
    inner = strip_annotated(hint)
    if inner is ClassVar:
        return True, object
    if get_origin(inner) is ClassVar:
        args = get_args(inner)
        return True, strip_annotated(args[0]) if args else object
    return False, inner


def _is_pseudo_field(hint: Any) -> bool:
    inner = strip_annotated(hint)
    return isinstance(inner, dataclasses.InitVar) or inner is dataclasses.InitVar or (
        inner is dataclasses.KW_ONLY
    )


def _is_plain_data(value: Any) -> bool:
    """Class attribute that is data, not a method, class, or descriptor."""
    return not callable(value) and not hasattr(type(value), "__get__")


def _slot_names(klass: type) -> tuple[str, ...]:
    slots = klass.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    names = []
    for s in slots:
        if s in ("__dict__", "__weakref__"):
            continue
        if s.startswith("__") and not s.endswith("__"):
            s = f"_{klass.__name__.lstrip('_')}{s}"
        names.append(s)
    return tuple(names)


def _scope(name: str) -> Scope:
    return Scope.NON_PUBLIC if name.startswith("_") else Scope.PUBLIC


def inspect_members(cls: type, include_private: bool = False) -> MemberTable:
    """Build the member table of ``cls`` without caching.

    Walks the MRO from the root towards ``cls`` so that base declarations come
    first and the most derived declaration of a name wins, keeping the position
    of its first declaration.

    Args:
        cls: Class to inspect.
        include_private: Include members whose name starts with an underscore.

    Returns:
        Immutable member table.

    Raises:
        TypeError: If cls is not a class.
    """
    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, got {cls!r}")

    hints = _resolve_hints(cls)
    excluded = exclusion_list(cls)
    frozen = _is_frozen(cls)
    instance_state = _instances_have_dict(cls)
    found: dict[str, MemberDescriptor] = {}

    def add_field(klass: type, name: str, declared: Any, static: bool, marked: bool) -> None:
        found[name] = MemberDescriptor(
            name=name,
            kind=MemberKind.FIELD,
            declared_type=declared,
            readable=True,
            writable=static or not frozen,
            frozen=frozen and not static,
            scope=_scope(name),
            binding=Binding.STATIC if static else Binding.INSTANCE,
            disabled=marked or name in excluded or is_dataclass_field_disabled(cls, name),
            owner_ref=weakref.ref(klass),
        )

    for klass in reversed(cls.__mro__):
        if _is_library_base(klass):
            continue
        annotations = _own_annotations(klass)
        evaluated = {} if hints.keys() >= annotations.keys() else _evaluated_annotations(klass)

        for name, raw in annotations.items():
            if _is_dunder(name) or name in _RESERVED_NAMES:
                continue
            hint = hints[name] if name in hints else _fallback_hint(raw, evaluated, name)
            if _is_pseudo_field(hint):
                continue
            static, declared = _unwrap_classvar(hint)
            add_field(klass, name, declared, static, has_marker(hint))

        for name in _slot_names(klass):
            if name not in annotations and name not in found and not _is_dunder(name):
                add_field(klass, name, object, False, False)

        for name, value in vars(klass).items():
            if _is_dunder(name) or name in annotations or name in _RESERVED_NAMES:
                continue
            if isinstance(value, property):
                returns = _return_hint(value.fget)
                found[name] = MemberDescriptor(
                    name=name,
                    kind=MemberKind.PROPERTY,
                    declared_type=strip_annotated(returns),
                    readable=value.fget is not None,
                    writable=value.fset is not None,
                    scope=_scope(name),
                    binding=Binding.INSTANCE,
                    disabled=is_property_disabled(value) or has_marker(returns) or name in excluded,
                    owner_ref=weakref.ref(klass),
                )
            elif _is_plain_data(value):
                inherited = found.get(name)
                if inherited is not None and not inherited.is_static:
                    # Subclass overriding the default of an inherited instance field
                    continue
                # A class-level default is instance data unless instances have no
                # __dict__ to hold it, or it redefines an inherited static field
                static = inherited is not None or not instance_state
                declared = object if value is None else type(value)
                add_field(klass, name, declared, static, False)

    members = [d for d in found.values() if include_private or d.is_public]
    table = MemberTable(
        cls_ref=weakref.ref(cls),
        include_private=include_private,
        fields=tuple(d for d in members if d.kind is MemberKind.FIELD),
        properties=tuple(d for d in members if d.kind is MemberKind.PROPERTY),
    )
    _logger.debug(
        "Inspected %s.%s (include_private=%s): %d fields, %d properties",
        cls.__module__,
        cls.__qualname__,
        include_private,
        len(table.fields),
        len(table.properties),
    )
    return table


class MemberRegistry:
    """Process-local cache of member tables keyed by class, then ``include_private``.

    A class's shape is fixed for its lifetime, so tables are built once and
    never mutated. Classes are held weakly: a class created at runtime and then
    discarded drops out of the cache. Entries are inserted with ``setdefault``:
    two threads racing on the same key both build a table, but only the first
    one is kept and returned to everyone.
    """

    def __init__(self, cache: bool = True) -> None:
        """Initialize empty member registry.

        Args:
            cache: If False, every lookup re-inspects the class.
        """
        self._cache = cache
        self._tables: weakref.WeakKeyDictionary[type, dict[bool, MemberTable]] = (
            weakref.WeakKeyDictionary()
        )

    @property
    def caching(self) -> bool:
        return self._cache

    def get_members(self, cls: type, include_private: bool = False) -> MemberTable:
        """Get the member table of a class.

        Args:
            cls: Class to look up.
            include_private: Include non-public members.

        Returns:
            Member table for the class and visibility setting.
        """
        table = self._tables.get(cls, {}).get(include_private)
        if table is not None:
            return table
        table = inspect_members(cls, include_private)
        if not self._cache:
            return table
        return self._tables.setdefault(cls, {}).setdefault(include_private, table)

    def is_cached(self, cls: type, include_private: bool = False) -> bool:
        """Check if a table for the class has already been built."""
        return include_private in self._tables.get(cls, {})

    def clear(self) -> None:
        """Drop every cached table."""
        _logger.debug("Clearing %d cached member tables", len(self))
        self._tables.clear()

    def __len__(self) -> int:
        return sum(len(tables) for tables in list(self._tables.values()))


# Module-level registry instance
_registry = MemberRegistry()


def get_registry() -> MemberRegistry:
    """Access the global member registry.

    Returns:
        The process-local MemberRegistry instance.
    """
    return _registry

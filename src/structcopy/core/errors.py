"""Error taxonomy for structural copy operations.

Every failure is raised synchronously to the immediate caller. Nothing is
retried or logged; a copy that fails part-way leaves the target with the
members processed so far already written.
"""


class StructCopyError(Exception):
    """Base class for all structcopy errors."""

    pass


class InvalidArgumentError(StructCopyError, ValueError):
    """Raised for an unrecognized compatibility mode or an invalid argument."""

    pass


class UninstantiableTypeError(StructCopyError, TypeError):
    """Raised when a class cannot be constructed without arguments."""

    pass


class TypeMismatchError(StructCopyError, TypeError):
    """Raised when a value cannot be stored into the matched target member."""

    pass


class ConversionError(StructCopyError, ValueError):
    """Raised when a value cannot be converted to the requested type."""

    pass

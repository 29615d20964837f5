"""Exception taxonomy for scanning and property access.

Three levels, each aborting only its own scope:
- Type level: :class:`ScanRejectedError` aborts a whole ``scan()`` call.
- Property level: conflicting declarations are skipped and logged, never raised.
- Instance level: :class:`AccessError` aborts a single get/set call.

Contract violations inside the library itself (a wrapper built from an
unclassified declaration, a property built against its invariants) raise
:class:`InvalidElementError` or :class:`PropertyInvariantError`.
"""

from __future__ import annotations


class BeanscanError(Exception):
    """Base class for every error raised by beanscan."""


# --- Type level ---


class ScanRejectedError(BeanscanError, ValueError):
    """The class cannot be scanned into a type model.

    Attributes:
        raw_type: The object passed to ``scan()``.
        reason: Short machine-readable rejection code.
    """

    reason = "rejected"

    def __init__(self, raw_type: object, message: str) -> None:
        super().__init__(message)
        self.raw_type = raw_type


class NotAClassError(ScanRejectedError):
    reason = "not_a_class"


class VoidTypeError(ScanRejectedError):
    reason = "void"


class ArrayTypeError(ScanRejectedError):
    reason = "array"


class PrimitiveTypeError(ScanRejectedError):
    reason = "primitive"


class AbstractTypeError(ScanRejectedError):
    reason = "abstract"


class NoDefaultConstructorError(ScanRejectedError):
    reason = "no_default_constructor"


class ConstructorFailedError(ScanRejectedError):
    reason = "constructor_failed"


# --- Contract violations ---


class InvalidElementError(BeanscanError, ValueError):
    """A wrapper was built from a declaration that fails its classifier."""


class PropertyInvariantError(BeanscanError, ValueError):
    """A property was built from elements that violate a property invariant.

    ``reason`` is one of ``no_elements``, ``not_gettable``, ``not_settable``,
    ``name_mismatch`` or ``type_mismatch``.
    """

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason


# --- Instance level ---


class AccessError(BeanscanError):
    """Base class for failures of a single get/set call."""


class NoSuchPropertyError(AccessError, KeyError):
    """The type model has no property with the requested name."""

    def __init__(self, name: str, raw_type: type) -> None:
        super().__init__(f"No such property {name!r} on {raw_type.__qualname__}")
        self.name = name
        self.raw_type = raw_type

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class PropertyOwnershipError(AccessError, ValueError):
    """A property handle from one type model was used against another."""

    def __init__(self, owner: type, target: type) -> None:
        super().__init__(
            f"Given property belongs to {owner.__qualname__}, not {target.__qualname__}"
        )
        self.owner = owner
        self.target = target


class PropertyInvocationError(AccessError, RuntimeError):
    """The underlying accessor raised. The original exception is ``__cause__``."""


class UnsupportedAccessError(AccessError, TypeError):
    """An element was asked to read or write in a role it does not support."""


class InstantiationError(BeanscanError, RuntimeError):
    """The default constructor failed after the class had passed its scan."""

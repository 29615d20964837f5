"""beanscan: infer, cache, and access the property set of any class.

Usage::

    from beanscan import scan, wrap

    model = scan(Point)          # TypeModel, cached per class
    point = wrap(Point())        # Instance bound to the object
    point.set("x", 3)
    point.get("x")               # 3
"""

from __future__ import annotations

from beanscan.domain.errors import (
    AbstractTypeError,
    AccessError,
    ArrayTypeError,
    BeanscanError,
    ConstructorFailedError,
    InstantiationError,
    InvalidElementError,
    NoDefaultConstructorError,
    NoSuchPropertyError,
    NotAClassError,
    PrimitiveTypeError,
    PropertyInvariantError,
    PropertyInvocationError,
    PropertyOwnershipError,
    ScanRejectedError,
    UnsupportedAccessError,
    VoidTypeError,
)
from beanscan.domain.instance import Instance
from beanscan.domain.model import Property, TypeModel
from beanscan.infrastructure.cache import clear_cache
from beanscan.services.scanner import scan

__version__ = "0.1.0"


def wrap(obj: object) -> Instance:
    """Bind *obj* to the (cached) type model of its class."""
    return Instance.wrap(obj)


__all__ = [
    "AbstractTypeError",
    "AccessError",
    "ArrayTypeError",
    "BeanscanError",
    "ConstructorFailedError",
    "Instance",
    "InstantiationError",
    "InvalidElementError",
    "NoDefaultConstructorError",
    "NoSuchPropertyError",
    "NotAClassError",
    "PrimitiveTypeError",
    "Property",
    "PropertyInvariantError",
    "PropertyInvocationError",
    "PropertyOwnershipError",
    "ScanRejectedError",
    "TypeModel",
    "UnsupportedAccessError",
    "VoidTypeError",
    "__version__",
    "clear_cache",
    "scan",
    "wrap",
]

"""Scan a class into a cached, frozen :class:`TypeModel`.

Scanning runs in two phases:

1. Preconditions, checked in order, each rejecting the whole scan with its
   own :class:`ScanRejectedError` subclass: ``None``/void, array types,
   primitives, abstract classes, no default constructor, and a default
   constructor that raises on a trial call.
2. Property resolution. Fields, getters and setters from the class and its
   ancestors (most-derived first) are classified, grouped by property name,
   and resolved name by name in ascending order.

Resolution per role (field, getter, setter):
- no candidates: the role is absent;
- one candidate: it fills the role;
- several getters or setters that all declare the same type (an ordinary
  override): the most-derived one fills the role;
- several fields, or getters/setters that disagree on type: the property
  is ambiguous and skipped.

Properties that are ambiguous, or whose surviving elements break a
property invariant, are skipped with a debug log. They never affect other
properties of the same class.
"""

from __future__ import annotations

import array
import inspect
import logging
import types
import typing
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from beanscan.domain.classify import is_property_field, is_property_getter, is_property_setter
from beanscan.domain.elements import FieldElement, GetterElement, SetterElement
from beanscan.domain.errors import (
    AbstractTypeError,
    ArrayTypeError,
    ConstructorFailedError,
    NoDefaultConstructorError,
    NotAClassError,
    PrimitiveTypeError,
    PropertyInvariantError,
    VoidTypeError,
)
from beanscan.domain.model import Property, TypeModel
from beanscan.infrastructure.cache import get_cache
from beanscan.infrastructure.introspection import all_declared_fields, all_declared_methods

logger = logging.getLogger(__name__)

ARRAY_TYPES: tuple[type, ...] = (list, tuple, bytes, bytearray, memoryview, array.array)
PRIMITIVE_TYPES: tuple[type, ...] = (bool, int, float, complex, str)

_E = TypeVar("_E", FieldElement, GetterElement, SetterElement)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def scan(raw_type: Any) -> TypeModel:
    """Return the type model for *raw_type*, building and caching it on a miss.

    Raises:
        ScanRejectedError: *raw_type* is not a concrete, default-constructible
            class. The subclass names the reason.
    """
    cache = get_cache()
    if isinstance(raw_type, type):
        cached = cache.get(raw_type)
        if cached is not None:
            return cached

    factory = check_scannable(raw_type)
    model = build_type_model(raw_type, factory)
    return cache.put(raw_type, model)


def check_scannable(raw_type: Any) -> Callable[[], object]:
    """Validate scan preconditions in order; return the default constructor."""
    if raw_type is None or raw_type is types.NoneType:
        msg = "Class NoneType is void"
        raise VoidTypeError(raw_type, msg)

    origin = typing.get_origin(raw_type)
    if origin is not None:
        if isinstance(origin, type) and issubclass(origin, ARRAY_TYPES):
            msg = f"Type {raw_type!r} is array type"
            raise ArrayTypeError(raw_type, msg)
        msg = f"Type {raw_type!r} is not a class"
        raise NotAClassError(raw_type, msg)
    if not isinstance(raw_type, type):
        msg = f"{raw_type!r} is not a class"
        raise NotAClassError(raw_type, msg)

    name = raw_type.__qualname__
    if issubclass(raw_type, ARRAY_TYPES):
        msg = f"Class {name} is array type"
        raise ArrayTypeError(raw_type, msg)
    if issubclass(raw_type, PRIMITIVE_TYPES):
        msg = f"Class {name} is primitive"
        raise PrimitiveTypeError(raw_type, msg)
    if inspect.isabstract(raw_type):
        msg = f"Class {name} is abstract"
        raise AbstractTypeError(raw_type, msg)
    if not _has_default_constructor(raw_type):
        msg = f"Class {name} has no default constructor"
        raise NoDefaultConstructorError(raw_type, msg)

    try:
        raw_type()
    except Exception as exc:
        msg = f"Class {name} failed during instantiation"
        raise ConstructorFailedError(raw_type, msg) from exc

    return raw_type


def build_type_model(raw_type: type, factory: Callable[[], object]) -> TypeModel:
    """Resolve the properties of an already-validated class. Not cached."""
    model = TypeModel(raw_type, factory)

    fields = _group(FieldElement(f) for f in all_declared_fields(raw_type) if is_property_field(f))
    methods = all_declared_methods(raw_type)
    getters = _group(GetterElement(m) for m in methods if is_property_getter(m))
    setters = _group(SetterElement(m) for m in methods if is_property_setter(m))

    for name in sorted(fields.keys() | getters.keys() | setters.keys()):
        field, field_ok = _resolve_fields(fields.get(name, []))
        getter, getter_ok = _resolve_accessors(getters.get(name, []))
        setter, setter_ok = _resolve_accessors(setters.get(name, []))

        conflicts = [
            role
            for role, ok in (("field", field_ok), ("getter", getter_ok), ("setter", setter_ok))
            if not ok
        ]
        if conflicts:
            _skip(raw_type, name, "ambiguous_" + "_".join(conflicts))
            continue

        try:
            prop = Property(model, field=field, getter=getter, setter=setter)
        except PropertyInvariantError as exc:
            _skip(raw_type, name, exc.reason)
            continue
        model._add_property(prop)

    model._freeze()
    logger.debug("Scanned %s: %d properties", raw_type.__qualname__, model.size())
    return model


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _has_default_constructor(raw_type: type) -> bool:
    """True if ``raw_type()`` needs no arguments.

    Classes whose signature cannot be read are left to the trial call.
    """
    try:
        signature = inspect.signature(raw_type)
    except (TypeError, ValueError):
        return True
    variadic = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    return all(
        p.default is not inspect.Parameter.empty or p.kind in variadic
        for p in signature.parameters.values()
    )


def _group(elements: Iterable[_E]) -> dict[str, list[_E]]:
    groups: dict[str, list[_E]] = {}
    for element in elements:
        groups.setdefault(element.name, []).append(element)
    return groups


def _resolve_fields(candidates: list[FieldElement]) -> tuple[FieldElement | None, bool]:
    """A re-declared field hides its parent's, so any repeat is ambiguous."""
    if not candidates:
        return None, True
    if len(candidates) == 1:
        return candidates[0], True
    return None, False


def _resolve_accessors(candidates: list[_E]) -> tuple[_E | None, bool]:
    """Overrides with an identical type collapse to the most-derived one."""
    if not candidates:
        return None, True
    first = candidates[0]
    if all(c.declared_type == first.declared_type for c in candidates[1:]):
        return first, True
    return None, False


def _skip(raw_type: type, name: str, reason: str) -> None:
    logger.debug(
        "Ignoring property %s of %s: %s",
        name,
        raw_type.__qualname__,
        reason,
        extra={"property": name, "reason": reason},
    )

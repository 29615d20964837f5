"""Element classifier: which declarations take part in a property.

Three pure predicates over raw declarations, plus the naming rules that
map a declaration to its logical property name.

- Field: name (after leading underscores) starts lower-case, not a
  ``ClassVar``, not ``Final``.
- Getter: public instance function, no parameters, annotated non-``None``
  return, named ``getX``; or named ``isX`` and returning exactly ``bool``.
- Setter: public instance function, one annotated parameter, returns
  ``None`` (or is unannotated), named ``setX``.

Getters and setters must also be plain Python functions written in the
class body (not native, not injected from elsewhere).
"""

from __future__ import annotations

import typing
from typing import Annotated, Any

from beanscan.infrastructure.introspection import MISSING, RawField, RawMethod

GETTER_PREFIX = "get"
BOOLEAN_GETTER_PREFIX = "is"
SETTER_PREFIX = "set"

_NONE_TYPES = (None, type(None))


def split_annotated(annotation: Any) -> tuple[Any, tuple[Any, ...]]:
    """Split ``Annotated[T, *meta]`` into ``(T, meta)``; other types get no metadata."""
    if typing.get_origin(annotation) is Annotated:
        return annotation.__origin__, tuple(annotation.__metadata__)
    return annotation, ()


def _has_prefix(name: str, prefix: str) -> bool:
    return len(name) > len(prefix) and name.startswith(prefix) and name[len(prefix)].isupper()


def decapitalize(name: str) -> str:
    return name[:1].lower() + name[1:]


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_property_field(field: RawField) -> bool:
    bare = field.name.lstrip("_")
    return bool(bare) and bare[0].islower() and not field.is_static and not field.is_final


def _is_plain_instance_method(method: RawMethod) -> bool:
    return (
        not method.is_synthetic
        and not method.is_static
        and method.is_public
        and not method.is_native
    )


def is_property_getter(method: RawMethod) -> bool:
    if not _is_plain_instance_method(method) or method.parameter_count != 0:
        return False
    returns = method.return_annotation
    if returns is MISSING or returns in _NONE_TYPES:
        return False
    if _has_prefix(method.name, GETTER_PREFIX):
        return True
    return split_annotated(returns)[0] is bool and _has_prefix(
        method.name, BOOLEAN_GETTER_PREFIX
    )


def is_property_setter(method: RawMethod) -> bool:
    if not _is_plain_instance_method(method) or method.parameter_count != 1:
        return False
    if method.parameters[0] is MISSING:
        return False
    returns = method.return_annotation
    if returns is not MISSING and returns not in _NONE_TYPES:
        return False
    return _has_prefix(method.name, SETTER_PREFIX)


# ---------------------------------------------------------------------------
# Logical names
# ---------------------------------------------------------------------------


def field_property_name(name: str) -> str:
    """``_count`` and ``count`` both name the ``count`` property."""
    return name.lstrip("_")


def getter_property_name(name: str) -> str:
    if _has_prefix(name, GETTER_PREFIX):
        return decapitalize(name[len(GETTER_PREFIX) :])
    if _has_prefix(name, BOOLEAN_GETTER_PREFIX):
        return decapitalize(name[len(BOOLEAN_GETTER_PREFIX) :])
    msg = f"Unrecognized getter name: {name!r}"
    raise AssertionError(msg)


def setter_property_name(name: str) -> str:
    return decapitalize(name[len(SETTER_PREFIX) :])

"""Element wrappers: one classified declaration in a uniform shape.

An element is one of three variants (field, getter, setter), told apart
by :attr:`kind`. Every variant answers the same questions: logical
``name``, ``declared_type``, ``annotations``, whether it is ``gettable``
or ``settable``, and how to ``get``/``set`` the value on an object.

INVARIANT: a wrapper only ever holds a declaration that passed its
classifier; anything else raises :class:`InvalidElementError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from beanscan.domain.classify import (
    field_property_name,
    getter_property_name,
    is_property_field,
    is_property_getter,
    is_property_setter,
    setter_property_name,
    split_annotated,
)
from beanscan.domain.errors import (
    InvalidElementError,
    PropertyInvocationError,
    UnsupportedAccessError,
)
from beanscan.infrastructure.introspection import (
    RawField,
    RawMethod,
    invoke,
    read_field,
    write_field,
)


class ElementKind(StrEnum):
    """The role an element plays in its property."""

    FIELD = "field"
    GETTER = "getter"
    SETTER = "setter"


def _unsupported(element: Element, action: str) -> UnsupportedAccessError:
    return UnsupportedAccessError(f"{element.kind} {element.name!r} cannot {action}")


@dataclass(frozen=True)
class FieldElement:
    """An annotated attribute. Readable and writable only when public."""

    declaration: RawField
    kind: ClassVar[ElementKind] = ElementKind.FIELD

    def __post_init__(self) -> None:
        if not is_property_field(self.declaration):
            msg = f"Not a property field: {self.declaration.name!r}"
            raise InvalidElementError(msg)

    @property
    def name(self) -> str:
        return field_property_name(self.declaration.name)

    @property
    def declared_type(self) -> Any:
        return split_annotated(self.declaration.annotation)[0]

    @property
    def annotations(self) -> tuple[Any, ...]:
        return split_annotated(self.declaration.annotation)[1]

    @property
    def gettable(self) -> bool:
        return self.declaration.is_public

    @property
    def settable(self) -> bool:
        return self.declaration.is_public

    def get(self, obj: object) -> Any:
        if not self.gettable:
            raise _unsupported(self, "get")
        return read_field(obj, self.declaration.name)

    def set(self, obj: object, value: Any) -> None:
        if not self.settable:
            raise _unsupported(self, "set")
        write_field(obj, self.declaration.name, value)


@dataclass(frozen=True)
class GetterElement:
    """A ``getX``/``isX`` method. Always readable, never writable."""

    declaration: RawMethod
    kind: ClassVar[ElementKind] = ElementKind.GETTER

    def __post_init__(self) -> None:
        if not is_property_getter(self.declaration):
            msg = f"Not a getter method: {self.declaration.name!r}"
            raise InvalidElementError(msg)

    @property
    def name(self) -> str:
        return getter_property_name(self.declaration.name)

    @property
    def declared_type(self) -> Any:
        return split_annotated(self.declaration.return_annotation)[0]

    @property
    def annotations(self) -> tuple[Any, ...]:
        return split_annotated(self.declaration.return_annotation)[1]

    @property
    def gettable(self) -> bool:
        return True

    @property
    def settable(self) -> bool:
        return False

    def get(self, obj: object) -> Any:
        try:
            return invoke(self.declaration.function, obj)
        except Exception as exc:
            msg = f"Getter {self.declaration.function.__qualname__} raised {type(exc).__name__}"
            raise PropertyInvocationError(msg) from exc

    def set(self, obj: object, value: Any) -> None:
        raise _unsupported(self, "set")


@dataclass(frozen=True)
class SetterElement:
    """A ``setX`` method. Always writable, never readable."""

    declaration: RawMethod
    kind: ClassVar[ElementKind] = ElementKind.SETTER

    def __post_init__(self) -> None:
        if not is_property_setter(self.declaration):
            msg = f"Not a setter method: {self.declaration.name!r}"
            raise InvalidElementError(msg)

    @property
    def name(self) -> str:
        return setter_property_name(self.declaration.name)

    @property
    def declared_type(self) -> Any:
        return split_annotated(self.declaration.parameters[0])[0]

    @property
    def annotations(self) -> tuple[Any, ...]:
        return split_annotated(self.declaration.parameters[0])[1]

    @property
    def gettable(self) -> bool:
        return False

    @property
    def settable(self) -> bool:
        return True

    def get(self, obj: object) -> Any:
        raise _unsupported(self, "get")

    def set(self, obj: object, value: Any) -> None:
        try:
            invoke(self.declaration.function, obj, value)
        except Exception as exc:
            msg = f"Setter {self.declaration.function.__qualname__} raised {type(exc).__name__}"
            raise PropertyInvocationError(msg) from exc


Element = FieldElement | GetterElement | SetterElement

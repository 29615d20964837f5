"""Property and TypeModel: the resolved, frozen property set of a class.

A :class:`TypeModel` is built once per class by the scanner, then shared
read-only by every caller. Each :class:`Property` belongs to exactly one
model and is backed by one to three elements (getter, setter, field).

INVARIANT: every property is gettable, settable, and all of its elements
agree exactly on name and declared type. Checked at construction.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from beanscan.domain.elements import FieldElement, GetterElement, SetterElement
from beanscan.domain.errors import InstantiationError, PropertyInvariantError

if TYPE_CHECKING:
    from beanscan.domain.elements import Element
    from beanscan.domain.instance import Instance


def type_name(declared_type: Any) -> str:
    """Readable name for a declared type (``int``, ``pkg.mod.Cls``, ``list[str]``)."""
    if isinstance(declared_type, str):
        return declared_type
    if isinstance(declared_type, type) and not hasattr(declared_type, "__origin__"):
        if declared_type.__module__ == "builtins":
            return declared_type.__qualname__
        return f"{declared_type.__module__}.{declared_type.__qualname__}"
    return repr(declared_type)


# --- Descriptions (serializable snapshots) ---


class PropertyDescription(BaseModel):
    """Serializable summary of one property."""

    model_config = {"frozen": True}

    name: str
    type: str
    elements: list[str]
    annotations: list[str] = Field(default_factory=list)


class TypeModelDescription(BaseModel):
    """Serializable summary of a whole type model."""

    model_config = {"frozen": True}

    type: str
    size: int
    properties: list[PropertyDescription] = Field(default_factory=list)


# --- Property ---


class Property:
    """One logical property of a class.

    Elements are ordered getter, setter, field, so reads prefer a getter
    and writes prefer a setter over the raw attribute.
    """

    __slots__ = ("_elements", "_model")

    def __init__(
        self,
        model: TypeModel,
        *,
        field: FieldElement | None = None,
        getter: GetterElement | None = None,
        setter: SetterElement | None = None,
    ) -> None:
        self._model = model
        self._elements: tuple[Element, ...] = tuple(
            e for e in (getter, setter, field) if e is not None
        )

        if not self._elements:
            raise PropertyInvariantError("no_elements", "No field, getter, or setter")
        if not self.gettable:
            raise PropertyInvariantError("not_gettable", f"{self.name!r} is not gettable")
        if not self.settable:
            raise PropertyInvariantError("not_settable", f"{self.name!r} is not settable")

        names = sorted({e.name for e in self._elements})
        if len(names) > 1:
            raise PropertyInvariantError("name_mismatch", f"Names mismatch: {names}")

        first = self._elements[0].declared_type
        if any(e.declared_type != first for e in self._elements[1:]):
            types = [type_name(e.declared_type) for e in self._elements]
            raise PropertyInvariantError(
                "type_mismatch", f"Types mismatch for {self.name!r}: {types}"
            )

    @property
    def model(self) -> TypeModel:
        """The type model this property belongs to."""
        return self._model

    @property
    def name(self) -> str:
        return self._elements[0].name

    @property
    def declared_type(self) -> Any:
        return self._elements[0].declared_type

    @property
    def elements(self) -> tuple[Element, ...]:
        return self._elements

    @property
    def field(self) -> FieldElement | None:
        return next((e for e in self._elements if isinstance(e, FieldElement)), None)

    @property
    def getter(self) -> GetterElement | None:
        return next((e for e in self._elements if isinstance(e, GetterElement)), None)

    @property
    def setter(self) -> SetterElement | None:
        return next((e for e in self._elements if isinstance(e, SetterElement)), None)

    @property
    def gettable(self) -> bool:
        return any(e.gettable for e in self._elements)

    @property
    def settable(self) -> bool:
        return any(e.settable for e in self._elements)

    @property
    def annotations(self) -> tuple[Any, ...]:
        """``Annotated`` metadata from every element, element by element."""
        return tuple(a for e in self._elements for a in e.annotations)

    def get(self, obj: object) -> Any:
        """Read the value from *obj*, preferring the getter."""
        element = next((e for e in self._elements if e.gettable), None)
        assert element is not None, "property is not gettable"
        return element.get(obj)

    def set(self, obj: object, value: Any) -> None:
        """Write *value* to *obj*, preferring the setter."""
        element = next((e for e in self._elements if e.settable), None)
        assert element is not None, "property is not settable"
        element.set(obj, value)

    def describe(self) -> PropertyDescription:
        return PropertyDescription(
            name=self.name,
            type=type_name(self.declared_type),
            elements=[str(e.kind) for e in self._elements],
            annotations=[repr(a) for a in self.annotations],
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Property):
            return NotImplemented
        return self._model == other._model and self._elements == other._elements

    def __hash__(self) -> int:
        return hash((self._model, self.name))

    def __repr__(self) -> str:
        kinds = ", ".join(str(e.kind) for e in self._elements)
        return (
            f"Property({self._model.raw_type.__qualname__}.{self.name}: "
            f"{type_name(self.declared_type)} [{kinds}])"
        )


# --- TypeModel ---


class TypeModel:
    """The frozen, name-ordered property set of one class.

    Two models are equal when they describe the same class, so repeated
    scans of a class are interchangeable.

    Usage::

        model = scan(Point)
        model.property_names()      # {"x", "y"}
        model.get_property("x")     # Property(Point.x: int [field])
        [p.name for p in model]     # ["x", "y"]
    """

    def __init__(self, raw_type: type, factory: Callable[[], object] | None = None) -> None:
        self._raw_type = raw_type
        self._factory: Callable[[], object] = factory if factory is not None else raw_type
        self._pending: list[Property] | None = []
        self._properties: tuple[Property, ...] = ()
        self._index: dict[str, Property] = {}

    # -- building (scanner only) --

    def _add_property(self, prop: Property) -> None:
        assert self._pending is not None, "type model is frozen"
        if prop.model is not self:
            msg = "Property belongs to another type model"
            raise ValueError(msg)
        self._pending.append(prop)

    def _freeze(self) -> None:
        assert self._pending is not None, "type model is frozen"
        self._properties = tuple(self._pending)
        self._index = {p.name: p for p in self._properties}
        self._pending = None

    # -- public API --

    @property
    def raw_type(self) -> type:
        """The class this model was scanned from."""
        return self._raw_type

    def property_names(self) -> set[str]:
        return set(self._index)

    def get_property(self, name: str) -> Property | None:
        return self._index.get(name)

    def get(self, index: int) -> Property:
        if not 0 <= index < len(self._properties):
            msg = f"Property index {index} out of range for {len(self._properties)} properties"
            raise IndexError(msg)
        return self._properties[index]

    def size(self) -> int:
        return len(self._properties)

    def stream(self) -> tuple[Property, ...]:
        """All properties in ascending name order."""
        return self._properties

    def new_instance(self) -> Instance:
        """Construct a fresh object with the default constructor and wrap it."""
        from beanscan.domain.instance import Instance

        try:
            obj = self._factory()
        except Exception as exc:
            msg = f"Could not instantiate {self._raw_type.__qualname__}"
            raise InstantiationError(msg) from exc
        return Instance(self, obj)

    def describe(self) -> TypeModelDescription:
        return TypeModelDescription(
            type=type_name(self._raw_type),
            size=self.size(),
            properties=[p.describe() for p in self._properties],
        )

    def __iter__(self) -> Iterator[Property]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeModel):
            return NotImplemented
        return self._raw_type == other._raw_type

    def __hash__(self) -> int:
        return hash(self._raw_type)

    def __repr__(self) -> str:
        return f"TypeModel(raw_type={type_name(self._raw_type)})"

"""Instance — named property access on one live object.

An Instance is a view: it does not copy or own the object, so changes made
through it are visible to every other holder of the object and vice versa.
No locking is done here; concurrent access has the same exposure as
touching the object's attributes directly.
"""

from __future__ import annotations

from typing import Any

from beanscan.domain.errors import NoSuchPropertyError, PropertyOwnershipError
from beanscan.domain.model import Property, TypeModel


class Instance:
    """A :class:`TypeModel` bound to one object of its class."""

    __slots__ = ("_model", "_obj")

    def __init__(self, model: TypeModel, obj: object) -> None:
        if not isinstance(obj, model.raw_type):
            msg = f"{type(obj).__qualname__} is not an instance of {model.raw_type.__qualname__}"
            raise TypeError(msg)
        self._model = model
        self._obj = obj

    @classmethod
    def wrap(cls, obj: object) -> Instance:
        """Scan ``type(obj)`` (cached) and bind the result to *obj*."""
        if obj is None:
            msg = "Cannot wrap None"
            raise TypeError(msg)
        from beanscan.services.scanner import scan

        return cls(scan(type(obj)), obj)

    @property
    def model(self) -> TypeModel:
        return self._model

    @property
    def obj(self) -> object:
        """The wrapped object itself."""
        return self._obj

    def _resolve(self, prop: str | Property) -> Property:
        if isinstance(prop, Property):
            if prop.model != self._model:
                raise PropertyOwnershipError(prop.model.raw_type, self._model.raw_type)
            return prop
        if isinstance(prop, str):
            found = self._model.get_property(prop)
            if found is None:
                raise NoSuchPropertyError(prop, self._model.raw_type)
            return found
        msg = f"Expected a property name or Property, got {type(prop).__name__}"
        raise TypeError(msg)

    def get(self, prop: str | Property) -> Any:
        """Read a property by name or handle.

        Raises:
            NoSuchPropertyError: Unknown name.
            PropertyOwnershipError: Handle from a different type model.
            PropertyInvocationError: The getter raised.
        """
        return self._resolve(prop).get(self._obj)

    def set(self, prop: str | Property, value: Any) -> None:
        """Write a property by name or handle. Same failures as :meth:`get`."""
        self._resolve(prop).set(self._obj, value)

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of every property value, in property order."""
        return {p.name: p.get(self._obj) for p in self._model}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instance):
            return NotImplemented
        return self._model == other._model and self._obj == other._obj

    def __hash__(self) -> int:
        return hash(self._model)

    def __str__(self) -> str:
        return str(self._obj)

    def __repr__(self) -> str:
        return f"Instance({self._obj!r})"

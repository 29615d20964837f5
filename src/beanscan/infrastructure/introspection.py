"""Raw introspection of classes: declared attributes and methods.

This is the only module that talks to Python's reflection machinery.
It reports what each class in an MRO declares, with the metadata the
classifier needs (visibility, static/final/native flags, annotations),
and provides the read/write/invoke primitives used at access time.

Declared attributes are the class's own annotations. Declared methods are
the callables in the class's own ``__dict__``. Inherited members are
reported by walking ``cls.__mro__``, most-derived class first.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import sys
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

#: Sentinel for a parameter or return value without an annotation.
MISSING: Any = inspect.Signature.empty

@dataclass(frozen=True)
class RawField:
    """One annotated attribute declared directly on *owner*."""

    owner: type
    name: str
    annotation: Any
    is_static: bool = False
    is_final: bool = False

    @property
    def is_public(self) -> bool:
        return not self.name.startswith("_")


@dataclass(frozen=True)
class RawMethod:
    """One callable declared directly on *owner*.

    ``parameters`` holds the annotations of the parameters after ``self``
    (all parameters for static methods), ``MISSING`` where unannotated.
    """

    owner: type
    name: str
    function: Callable[..., Any]
    parameters: tuple[Any, ...] = ()
    return_annotation: Any = MISSING
    is_static: bool = False
    is_native: bool = False
    is_synthetic: bool = False

    @property
    def is_public(self) -> bool:
        return not self.name.startswith("_")

    @property
    def parameter_count(self) -> int:
        return len(self.parameters)


# ---------------------------------------------------------------------------
# Annotation helpers
# ---------------------------------------------------------------------------


def _annotation_holder(annotation: str) -> Callable[[], None]:
    def holder() -> None: ...

    holder.__annotations__ = {"value": annotation}
    return holder


def evaluate_annotation(
    annotation: Any,
    owner: type,
    globalns: dict[str, Any] | None = None,
) -> Any:
    """Resolve a string annotation in the scope it was written in.

    Non-string annotations are returned unchanged. Each string is resolved
    on its own through :func:`inspect.get_annotations`, against *globalns*
    (the declaring module by default) and the namespace of *owner*. A
    string that fails to resolve is returned as-is, so it only ever agrees
    with an identical string and never affects other annotations.
    """
    if not isinstance(annotation, str):
        return annotation
    if globalns is None:
        module = sys.modules.get(owner.__module__)
        globalns = vars(module) if module is not None else {}
    localns = dict(vars(owner))
    localns.setdefault(owner.__name__, owner)
    try:
        resolved = inspect.get_annotations(
            _annotation_holder(annotation),
            globals=dict(globalns),
            locals=localns,
            eval_str=True,
        )
    except Exception:
        # Annotation text is arbitrary user code; any failure leaves it unresolved.
        logger.debug(
            "Unresolved annotation %r on %s", annotation, owner.__qualname__, exc_info=True
        )
        return annotation
    return resolved["value"]


def _is_wrapped_in(annotation: Any, marker: Any, marker_name: str) -> bool:
    while typing.get_origin(annotation) is typing.Annotated:
        annotation = annotation.__origin__
    if annotation is marker or typing.get_origin(annotation) is marker:
        return True
    if isinstance(annotation, str):
        head = annotation.split("[", 1)[0].strip()
        return head in (marker_name, f"typing.{marker_name}")
    return False


def is_class_var(annotation: Any) -> bool:
    """True for ``ClassVar`` and ``dataclasses.InitVar`` annotations.

    Neither describes state stored on an instance.
    """
    if isinstance(annotation, dataclasses.InitVar):
        return True
    return _is_wrapped_in(annotation, typing.ClassVar, "ClassVar")


def is_final(annotation: Any) -> bool:
    return _is_wrapped_in(annotation, typing.Final, "Final")


# ---------------------------------------------------------------------------
# Per-class declarations
# ---------------------------------------------------------------------------


def _own_annotations(cls: type) -> dict[str, Any]:
    try:
        return dict(inspect.get_annotations(cls))
    except NameError:
        logger.debug("Annotations of %s unavailable", cls.__qualname__, exc_info=True)
        return {}


def declared_fields(cls: type) -> list[RawField]:
    """Annotated attributes declared directly on *cls*, in declaration order.

    Every field of a frozen dataclass is reported as final.
    """
    frozen = dataclasses.is_dataclass(cls) and cls.__dataclass_params__.frozen
    fields: list[RawField] = []
    for name, raw in _own_annotations(cls).items():
        annotation = evaluate_annotation(raw, cls)
        fields.append(
            RawField(
                owner=cls,
                name=name,
                annotation=annotation,
                is_static=is_class_var(annotation),
                is_final=frozen or is_final(annotation),
            )
        )
    return fields


def _describe_method(cls: type, name: str, member: Any) -> RawMethod | None:
    is_static = isinstance(member, (staticmethod, classmethod))
    function = member.__func__ if is_static else member

    if inspect.isfunction(function):
        is_native = False
    elif inspect.isbuiltin(function) or inspect.ismethoddescriptor(function):
        is_native = True
    else:
        # Properties, nested classes, plain values.
        return None

    qualname = getattr(function, "__qualname__", "")
    is_synthetic = not qualname.startswith(f"{cls.__qualname__}.")

    parameters: tuple[Any, ...] = ()
    return_annotation: Any = MISSING
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        signature = None
    if signature is not None:
        globalns = getattr(function, "__globals__", None)
        params = list(signature.parameters.values())
        if not isinstance(member, staticmethod) and params:
            params = params[1:]
        parameters = tuple(evaluate_annotation(p.annotation, cls, globalns) for p in params)
        return_annotation = evaluate_annotation(signature.return_annotation, cls, globalns)

    return RawMethod(
        owner=cls,
        name=name,
        function=function,
        parameters=parameters,
        return_annotation=return_annotation,
        is_static=is_static,
        is_native=is_native,
        is_synthetic=is_synthetic,
    )


def declared_methods(cls: type) -> list[RawMethod]:
    """Callables declared directly on *cls*, in declaration order."""
    methods: list[RawMethod] = []
    for name, member in vars(cls).items():
        method = _describe_method(cls, name, member)
        if method is not None:
            methods.append(method)
    return methods


# ---------------------------------------------------------------------------
# Ancestor walk
# ---------------------------------------------------------------------------


def ancestry(cls: type) -> list[type]:
    """*cls* and its ancestors, most-derived first, without ``object``."""
    return [c for c in cls.__mro__ if c is not object]


def all_declared_fields(cls: type) -> list[RawField]:
    """Fields of *cls* first, then of its parent, and so on up the MRO."""
    return [f for c in ancestry(cls) for f in declared_fields(c)]


def all_declared_methods(cls: type) -> list[RawMethod]:
    """Methods of *cls* first, then of its parent, and so on up the MRO."""
    return [m for c in ancestry(cls) for m in declared_methods(c)]


# ---------------------------------------------------------------------------
# Access primitives
# ---------------------------------------------------------------------------


def read_field(obj: object, name: str) -> Any:
    return getattr(obj, name)


def write_field(obj: object, name: str, value: Any) -> None:
    setattr(obj, name, value)


def invoke(function: Callable[..., Any], obj: object, *args: Any) -> Any:
    return function(obj, *args)

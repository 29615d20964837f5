"""Tests for the element classifier predicates and naming rules."""

from typing import Annotated, Any

import pytest

from beanscan.domain.classify import (
    decapitalize,
    field_property_name,
    getter_property_name,
    is_property_field,
    is_property_getter,
    is_property_setter,
    setter_property_name,
    split_annotated,
)
from beanscan.infrastructure.introspection import MISSING, RawField, RawMethod


class Owner:
    pass


def _noop(self: Any) -> None:
    return None


def _field(name: str, **flags: bool) -> RawField:
    return RawField(owner=Owner, name=name, annotation=int, **flags)


def _method(
    name: str,
    parameters: tuple[Any, ...] = (),
    returns: Any = MISSING,
    **flags: bool,
) -> RawMethod:
    return RawMethod(
        owner=Owner,
        name=name,
        function=_noop,
        parameters=parameters,
        return_annotation=returns,
        **flags,
    )


class TestIsPropertyField:
    @pytest.mark.parametrize("name", ["x", "count", "_x", "__private", "camelCase"])
    def test_accepts(self, name: str) -> None:
        assert is_property_field(_field(name))

    @pytest.mark.parametrize("name", ["X", "Count", "_", "__", "_X"])
    def test_rejects_names(self, name: str) -> None:
        assert not is_property_field(_field(name))

    def test_rejects_static(self) -> None:
        assert not is_property_field(_field("x", is_static=True))

    def test_rejects_final(self) -> None:
        assert not is_property_field(_field("x", is_final=True))


class TestIsPropertyGetter:
    def test_get_prefix(self) -> None:
        assert is_property_getter(_method("getX", returns=int))

    def test_is_prefix_requires_bool(self) -> None:
        assert is_property_getter(_method("isActive", returns=bool))
        assert not is_property_getter(_method("isActive", returns=int))

    def test_is_prefix_accepts_annotated_bool(self) -> None:
        assert is_property_getter(_method("isActive", returns=Annotated[bool, "flag"]))

    def test_get_prefix_allows_bool(self) -> None:
        assert is_property_getter(_method("getActive", returns=bool))

    @pytest.mark.parametrize("name", ["get", "getx", "is", "isx", "fetchX", "get_x"])
    def test_rejects_names(self, name: str) -> None:
        assert not is_property_getter(_method(name, returns=bool))

    def test_rejects_parameters(self) -> None:
        assert not is_property_getter(_method("getX", parameters=(int,), returns=int))

    @pytest.mark.parametrize("returns", [MISSING, None, type(None)])
    def test_rejects_void(self, returns: Any) -> None:
        assert not is_property_getter(_method("getX", returns=returns))

    @pytest.mark.parametrize("flag", ["is_static", "is_native", "is_synthetic"])
    def test_rejects_flags(self, flag: str) -> None:
        assert not is_property_getter(_method("getX", returns=int, **{flag: True}))

    def test_rejects_non_public(self) -> None:
        assert not is_property_getter(_method("_getX", returns=int))


class TestIsPropertySetter:
    def test_accepts(self) -> None:
        assert is_property_setter(_method("setX", parameters=(int,), returns=None))

    def test_accepts_unannotated_return(self) -> None:
        assert is_property_setter(_method("setX", parameters=(int,)))

    def test_rejects_non_void_return(self) -> None:
        assert not is_property_setter(_method("setX", parameters=(int,), returns=int))

    @pytest.mark.parametrize("parameters", [(), (int, int)])
    def test_rejects_arity(self, parameters: tuple[Any, ...]) -> None:
        assert not is_property_setter(_method("setX", parameters=parameters))

    def test_rejects_unannotated_parameter(self) -> None:
        assert not is_property_setter(_method("setX", parameters=(MISSING,)))

    @pytest.mark.parametrize("name", ["set", "setx", "set_x", "putX"])
    def test_rejects_names(self, name: str) -> None:
        assert not is_property_setter(_method(name, parameters=(int,)))

    @pytest.mark.parametrize("flag", ["is_static", "is_native", "is_synthetic"])
    def test_rejects_flags(self, flag: str) -> None:
        assert not is_property_setter(_method("setX", parameters=(int,), **{flag: True}))


class TestPropertyNames:
    def test_field(self) -> None:
        assert field_property_name("count") == "count"
        assert field_property_name("_count") == "count"

    def test_getter(self) -> None:
        assert getter_property_name("getFooBar") == "fooBar"
        assert getter_property_name("isActive") == "active"
        assert getter_property_name("getURL") == "uRL"

    def test_getter_unrecognized(self) -> None:
        with pytest.raises(AssertionError):
            getter_property_name("fetch")

    def test_setter(self) -> None:
        assert setter_property_name("setX") == "x"

    def test_decapitalize(self) -> None:
        assert decapitalize("Name") == "name"
        assert decapitalize("") == ""


class TestSplitAnnotated:
    def test_plain(self) -> None:
        assert split_annotated(int) == (int, ())

    def test_annotated(self) -> None:
        assert split_annotated(Annotated[int, "a", "b"]) == (int, ("a", "b"))

"""Tests for the describe service: loading a class by path and scanning it."""

from collections import OrderedDict

import pytest

from beanscan.services.describe import describe_class, load_class


class Point:
    x: int = 0
    y: int = 0

    class Nested:
        label: str = ""


class Needy:
    def __init__(self, value: int) -> None:
        self.value = value


NOT_A_CLASS = 3


class TestLoadClass:
    def test_colon_form(self) -> None:
        assert load_class(f"{__name__}:Point") is Point

    def test_nested_qualname(self) -> None:
        assert load_class(f"{__name__}:Point.Nested") is Point.Nested

    def test_dotted_form(self) -> None:
        assert load_class("collections.OrderedDict") is OrderedDict

    @pytest.mark.parametrize("target", ["Point", ":Point", f"{__name__}:"])
    def test_malformed(self, target: str) -> None:
        with pytest.raises(ValueError, match="module:Class"):
            load_class(target)

    def test_missing_module(self) -> None:
        with pytest.raises(ImportError):
            load_class("no_such_module_here:Thing")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            load_class(f"{__name__}:Missing")

    def test_not_a_class(self) -> None:
        with pytest.raises(ValueError, match="not a class"):
            load_class(f"{__name__}:NOT_A_CLASS")


class TestDescribeClass:
    def test_ok(self) -> None:
        result = describe_class(f"{__name__}:Point")
        assert result.ok
        assert result.op == "describe"
        assert result.data["size"] == 2
        assert [p["name"] for p in result.data["properties"]] == ["x", "y"]
        assert result.data["properties"][0]["elements"] == ["field"]

    def test_not_found(self) -> None:
        result = describe_class("no_such_module_here:Thing")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail["target"] == "no_such_module_here:Thing"

    def test_rejected(self) -> None:
        result = describe_class(f"{__name__}:Needy")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "SCAN_REJECTED"
        assert result.error.detail["reason"] == "no_default_constructor"

    def test_rejected_builtin(self) -> None:
        result = describe_class("builtins:int")
        assert result.error is not None
        assert result.error.detail["reason"] == "primitive"

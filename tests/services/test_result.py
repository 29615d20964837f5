"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from beanscan.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="describe", data={"type": "pkg.Point"})
        assert result.ok is True
        assert result.op == "describe"
        assert result.data == {"type": "pkg.Point"}
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NOT_FOUND", message="No module named 'nope'")
        result = ServiceResult(ok=False, op="describe", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.data == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="describe", data={"size": 2})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "describe"
        assert parsed["data"]["size"] == 2
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="describe")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(
            code="SCAN_REJECTED",
            message="Class int is primitive",
            detail={"reason": "primitive"},
        )
        assert error.detail["reason"] == "primitive"

    def test_default_detail(self) -> None:
        assert ServiceError(code="NOT_FOUND", message="bad").detail == {}

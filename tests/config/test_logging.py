"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from beanscan.config.logging import configure_logging
from beanscan.services.scanner import build_type_model


class Conflicted:
    _x: int = 0
    x: int = 0


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("beanscan").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("beanscan").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("beanscan.test")
        log.warning("hello world", key="val")

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("beanscan.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "beanscan.test"
        assert "timestamp" in parsed

    def test_skipped_property_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        build_type_model(Conflicted, Conflicted)
        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line]
        skipped = [line for line in lines if line.get("reason")]
        assert len(skipped) == 1
        assert skipped[0]["property"] == "x"
        assert skipped[0]["reason"] == "ambiguous_field"
        assert skipped[0]["logger"] == "beanscan.services.scanner"

    def test_quiet_hides_skips(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        build_type_model(Conflicted, Conflicted)
        assert capfd.readouterr().err == ""

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("urllib3").debug("connection noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

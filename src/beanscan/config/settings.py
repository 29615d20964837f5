"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``BEANSCAN_*`` prefix
  3. Code defaults

The library itself reads settings once per process through
:func:`get_settings`; only ``cache_size`` matters outside the CLI.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

from pydantic import ValidationError, ValidatorFunctionWrapHandler, field_validator
from pydantic_settings import BaseSettings

from beanscan.infrastructure.cache import DEFAULT_CAPACITY

logger = logging.getLogger(__name__)


class BeanscanSettings(BaseSettings):
    """Settings for the beanscan library and CLI.

    Attributes:
        cache_size: Maximum number of cached type models
            (``BEANSCAN_CACHE_SIZE``). Malformed or non-positive values
            fall back to the default instead of failing.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BEANSCAN_",
    }

    cache_size: int = DEFAULT_CAPACITY

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @field_validator("cache_size", mode="wrap")
    @classmethod
    def _fallback_cache_size(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> int:
        try:
            size = handler(value)
        except ValidationError:
            logger.warning("Ignoring malformed cache size %r, using %d", value, DEFAULT_CAPACITY)
            return DEFAULT_CAPACITY
        if size < 1:
            logger.warning("Ignoring non-positive cache size %r, using %d", value, DEFAULT_CAPACITY)
            return DEFAULT_CAPACITY
        return size

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> BeanscanSettings:
        """Construct settings from a CLI invocation; flags override env vars."""
        return cls(**cli_flags)


@functools.cache
def get_settings() -> BeanscanSettings:
    """Process-wide settings, read from the environment on first call."""
    return BeanscanSettings()

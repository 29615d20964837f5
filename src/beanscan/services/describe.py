"""Describe a class by import path: the service behind ``beanscan describe``."""

from __future__ import annotations

import importlib
import logging

from beanscan.domain.errors import ScanRejectedError
from beanscan.services.result import ServiceError, ServiceResult
from beanscan.services.scanner import scan

logger = logging.getLogger(__name__)


def load_class(target: str) -> type:
    """Import ``package.module:Outer.Inner`` (or ``package.module.Class``).

    Raises:
        ValueError: *target* is malformed or does not name a class.
        ImportError: The module cannot be imported.
        AttributeError: The module has no such attribute.
    """
    if ":" in target:
        module_name, _, qualname = target.partition(":")
    else:
        module_name, _, qualname = target.rpartition(".")
    if not module_name or not qualname:
        msg = f"Expected 'module:Class', got {target!r}"
        raise ValueError(msg)

    obj: object = importlib.import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    if not isinstance(obj, type):
        msg = f"{target!r} is not a class"
        raise ValueError(msg)
    return obj


def describe_class(target: str) -> ServiceResult:
    """Scan the class named by *target* and return its property table."""
    try:
        cls = load_class(target)
    except (ImportError, AttributeError, ValueError) as exc:
        logger.debug("Could not load %s", target, exc_info=True)
        return ServiceResult(
            ok=False,
            op="describe",
            error=ServiceError(code="NOT_FOUND", message=str(exc), detail={"target": target}),
        )

    try:
        model = scan(cls)
    except ScanRejectedError as exc:
        return ServiceResult(
            ok=False,
            op="describe",
            error=ServiceError(
                code="SCAN_REJECTED",
                message=str(exc),
                detail={"target": target, "reason": exc.reason},
            ),
        )

    return ServiceResult(ok=True, op="describe", data=model.describe().model_dump())

"""Render beanscan's log records through structlog.

beanscan never configures logging on import: scanning code logs through
stdlib loggers under ``beanscan.*`` and emits nothing unless the host
application opts in. The CLI opts in via :func:`configure_logging`.

What gets logged:
- debug: properties skipped during a scan (with ``property`` and
  ``reason`` fields), cache evictions, unresolved annotations
- warning: settings that were ignored, such as a malformed cache size

Records go to stderr so that ``describe`` output on stdout stays clean,
either as a console line or, with ``--log-json``, one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "beanscan"


def _record_processors() -> list[structlog.types.Processor]:
    """Processors applied to every stdlib record before rendering."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        # ``extra={"property": ..., "reason": ...}`` become top-level keys.
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route beanscan's log records to stderr.

    Safe to call repeatedly: the root handler is replaced, not added.

    Args:
        verbose: Show beanscan debug records, such as why a property was
            skipped. Otherwise only warnings and errors.
        log_json: One JSON object per record instead of console lines.
    """
    processors = _record_processors()

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    # Other libraries stay at warning even in verbose mode.
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)

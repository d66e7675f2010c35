"""Structured logging with context injection.

Features:
- console handler
- JSON logs optional (easy ingestion)
- context injection (source/region/section/event_key) without needing a big framework
"""

from __future__ import annotations

import json
import logging
import sys
import time
from dataclasses import dataclass
from typing import Any

ROOT_LOGGER_NAME = "senior_events"

CONTEXT_FIELDS = ("source", "region", "section", "event_key")

# ---------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------


class JsonFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k in CONTEXT_FIELDS:
            if hasattr(record, k):
                base[k] = getattr(record, k)

        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)

        payload = getattr(record, "payload", None)
        if isinstance(payload, dict):
            base["payload"] = payload

        return json.dumps(base, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Format log records as human-readable text."""

    def format(self, record: logging.LogRecord) -> str:
        parts = [record.levelname, record.name]

        ctx = [
            f"{k}={getattr(record, k)}"
            for k in CONTEXT_FIELDS
            if getattr(record, k, None)
        ]
        if ctx:
            parts.append("[" + " ".join(ctx) + "]")

        parts.append(record.getMessage())
        s = " ".join(parts)

        if record.exc_info:
            s += "\n" + self.formatException(record.exc_info)

        return s


# ---------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class LoggingOptions:
    """Configure logging behavior for a session."""

    level: str = "INFO"
    json_logs: bool = False


def configure_logging(options: LoggingOptions | None = None) -> logging.Logger:
    """Install a single console handler on the package logger."""
    options = options or LoggingOptions()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, options.level.upper(), logging.INFO))
    logger.propagate = False

    # Clear old handlers if re-configuring
    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = JsonFormatter() if options.json_logs else TextFormatter()
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logger.level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    return logger


# ---------------------------------------------------------------------
# Context injection
# ---------------------------------------------------------------------


class ContextAdapter(logging.LoggerAdapter):
    """Inject context fields into log records."""

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        merged = dict(self.extra)
        merged.update(extra)
        kwargs["extra"] = merged
        return msg, kwargs


def with_context(
    logger: logging.Logger,
    *,
    source: str | None = None,
    region: str | None = None,
    section: str | None = None,
    event_key: str | None = None,
) -> ContextAdapter:
    """Create a context adapter with source, region, section and event info."""
    extra: dict[str, Any] = {}
    if source:
        extra["source"] = source
    if region:
        extra["region"] = region
    if section:
        extra["section"] = section
    if event_key:
        extra["event_key"] = event_key
    return ContextAdapter(logger, extra)

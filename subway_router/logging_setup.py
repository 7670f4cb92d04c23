"""Logging configuration for the command-line driver.

Adapters and services log through ``logging.getLogger(__name__)`` and
pass structured fields with ``extra={...}``. This module turns those
records into plain text or, when ``structured`` is enabled, one JSON
object per line.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from .config import ObservabilityConfig
from .domain.errors import ConfigurationError

# Attributes every LogRecord carries; anything else came from ``extra``.
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED}


class JsonFormatter(logging.Formatter):
    """Render a record and its ``extra`` fields as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        obj: Dict[str, Any] = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        obj.update(_extra_fields(record))
        if record.exc_info:
            obj["exc"] = self.formatException(record.exc_info)
        return json.dumps(obj, default=str)


class KeyValueFormatter(logging.Formatter):
    """Plain formatter that appends ``extra`` fields as ``key=value``."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _extra_fields(record)
        if not fields:
            return line
        kv = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{line} {kv}"


def configure_logging(
    config: ObservabilityConfig,
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Install a single handler on the ``subway_router`` logger.

    Args:
        config: Logging settings.
        level: Optional level name overriding ``config.level``.
        stream: Destination stream; defaults to ``sys.stderr``.

    Returns:
        The installed handler.

    Raises:
        ConfigurationError: If the level name is unknown.
    """
    level_name = (level or config.level).upper()
    numeric = logging.getLevelName(level_name)
    if not isinstance(numeric, int):
        raise ConfigurationError(
            f"Unknown log level: {level_name}",
            setting_name="observability.level",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    handler = logging.StreamHandler(stream or sys.stderr)
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(KeyValueFormatter(config.format))

    logger = logging.getLogger("subway_router")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(numeric)
    return handler

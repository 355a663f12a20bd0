"""Logging setup for the flight finder.

Modules log through ``logging.getLogger(__name__)`` and attach context
with ``extra=``. This module installs a single handler on the package
logger, formatted according to ObservabilityConfig.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

PACKAGE_LOGGER = "flightfinder"

# Attributes every LogRecord has; anything else came in through extra=
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_handler: Optional[logging.Handler] = None


class JsonFormatter(logging.Formatter):
    """One JSON object per line, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED:
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Configure the package logger.

    Safe to call more than once: the previously installed handler is
    replaced rather than duplicated.

    Args:
        config: Logging settings; defaults to the application config.
        handler: Custom handler (defaults to a stdout StreamHandler).

    Returns:
        The configured package logger.

    Raises:
        ConfigurationError: If the configured level is unknown.
    """
    global _handler

    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="FF_LOG_LEVEL",
            expected_type="DEBUG|INFO|WARNING|ERROR|CRITICAL",
        )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = handler or logging.StreamHandler(sys.stdout)
    if config.structured:
        _handler.setFormatter(JsonFormatter())
    else:
        _handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(_handler)

    # Let records reach the root logger so pytest can capture them
    logger.propagate = True

    return logger

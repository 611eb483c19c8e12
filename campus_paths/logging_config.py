"""Logging setup driven by ObservabilityConfig.

Components log through ``logging.getLogger(__name__)`` and attach
context with ``extra={...}``. This module only decides where those
records go and how they look: a plain text line, or one JSON object per
record with the extra fields merged in.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

ROOT_LOGGER = "campus_paths"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling it again replaces the previous handler, so the level or the
    format can be changed at runtime.

    Args:
        config: Logging settings, defaults to the application config.

    Returns:
        The configured package logger.

    Raises:
        ConfigurationError: If the configured level is unknown.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="CP_LOG_LEVEL",
        )

    handler = logging.StreamHandler(sys.stderr)
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    logger = logging.getLogger(ROOT_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger

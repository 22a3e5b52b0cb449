"""Logging setup driven by ObservabilityConfig.

Modules log through ``logging.getLogger(__name__)`` and pass context in
``extra``. The plain format drops that context; the structured format
emits one JSON object per record with the extra fields merged in.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

# Attributes every LogRecord carries; anything else came from ``extra``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys() | {"message", "asctime"}
)


class JsonFormatter(logging.Formatter):
    """Format records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Handler:
    """Install a handler on the root logger according to configuration.

    Calling it again replaces the handler installed by the previous call.

    Args:
        config: Optional override; defaults to the application configuration.

    Returns:
        The installed handler.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="EMS_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))
    handler.set_name("election_monitor")

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == "election_monitor":
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    return handler

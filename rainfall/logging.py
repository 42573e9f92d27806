"""
Logging setup for the rainfall tools.

Modules log through ``logging.getLogger(__name__)``; pages and scripts call
configure_logging() once at start-up to pick plain text or newline-delimited
JSON on stderr (APP_LOG_FORMAT=json).

Usage::

    from rainfall.logging import configure_logging

    configure_logging()                  # honours APP_LOG_FORMAT / APP_LOG_LEVEL
"""

from __future__ import annotations

import json
import logging

from utils.config import AppConfig

logger = logging.getLogger(__name__)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Extra fields copied into JSON records when passed via ``extra={...}``
_EXTRA_KEYS = ("url", "rows", "csv_file", "export_path", "column", "duration_ms")


class _JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


def configure_logging(cfg: AppConfig | None = None) -> logging.Handler:
    """Install a single stderr handler on the root logger.

    Args:
        cfg: Configuration to read the format and level from
             (default: AppConfig.from_env())

    Returns:
        The installed handler, so callers can detach it again.
    """
    cfg = cfg or AppConfig.from_env()
    handler = logging.StreamHandler()
    if cfg.log_format == "json":
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    level = logging.getLevelName(cfg.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(handlers=[handler], level=level, force=True)
    logger.debug("logging_configured %s", cfg.to_dict())
    return handler

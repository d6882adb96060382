"""Structured JSON logging configuration.

Configures Python stdlib logging to emit one JSON object per line on stdout,
with ``severity``/``timestamp``/``logger`` field names that log collectors
pick up without extra parsing.

Usage:
    from notion_pages.logging_config import configure_logging
    configure_logging()
"""

import logging
import logging.config

from notion_pages.config import get_settings

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "notion-pages",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str | None = None) -> None:
    """Apply structured JSON logging configuration.

    The root level comes from ``level`` when given, otherwise from
    ``Settings.log_level``. Call once at startup; subsequent
    ``logging.getLogger()`` calls emit JSON to stdout.
    """
    config = {**LOGGING_CONFIG, "root": {**LOGGING_CONFIG["root"]}}
    config["root"]["level"] = (level or get_settings().log_level).upper()
    logging.config.dictConfig(config)

"""Console logging for the showcase services."""

import logging
import logging.config
from typing import Optional


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once per process."""

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "plain",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": (level or "INFO").upper(),
            "handlers": ["console"],
        },
        "loggers": {
            "werkzeug": {"level": "WARNING"},
            "urllib3": {"level": "WARNING"},
        },
    }

    logging.config.dictConfig(config)

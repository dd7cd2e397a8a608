"""
Logging configuration for tabsession command line use
"""

import logging
import logging.config
from typing import Dict, Any


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration for the tabsession loggers."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr"
            }
        },
        "loggers": {
            "tabsession": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the tabsession logging configuration."""
    logging.config.dictConfig(get_logging_config(level))

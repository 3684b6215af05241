# customer_api/core/log_config.py

import logging
import logging.config


LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "customer_api": {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
    },
}


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure the package loggers with a single console handler.
    """
    level = log_level.upper()
    config = {
        **LOGGING_CONFIG,
        "handlers": {
            name: {**handler, "level": level}
            for name, handler in LOGGING_CONFIG["handlers"].items()
        },
        "loggers": {
            name: {**logger, "level": level}
            for name, logger in LOGGING_CONFIG["loggers"].items()
        },
    }
    logging.config.dictConfig(config)

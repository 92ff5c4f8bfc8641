from __future__ import annotations

import logging
from logging.config import dictConfig

from app.core.config import Settings


def configure_logging(settings: Settings) -> None:
    if settings.log_json:
        log_format = (
            '{"level":"%(levelname)s","time":"%(asctime)s","logger":"%(name)s","message":"%(message)s"}'
        )
    else:
        log_format = "%(levelname)s %(asctime)s %(name)s %(message)s"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {"format": log_format},
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                }
            },
            "root": {
                "level": settings.log_level,
                "handlers": ["default"],
            },
        }
    )

    logging.getLogger("uvicorn.error").setLevel(settings.log_level)
    # httpx logs every request line at INFO, which is noise for a proxy.
    logging.getLogger("httpx").setLevel(logging.WARNING)

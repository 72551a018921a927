"""
Logging setup for the WaterWise API.

Every record carries the id of the request that produced it, so a single
page load can be followed across routers, services and outbound calls.
``LOG_FORMAT=json`` switches stdout to one JSON object per line.
"""

import logging
import logging.config
import sys
from typing import Any, Dict

from waterwise.core.config import settings

# Client libraries that log every outbound call at INFO
CHATTY_LIBRARIES = ("httpx", "httpcore", "urllib3", "minio")


class RequestIdFilter(logging.Filter):
    """
    Stamp each record with the current request id.
    Records emitted outside a request (startup, seeding) get "system".
    """

    def filter(self, record):
        from waterwise.core.middleware import request_id_context

        record.request_id = request_id_context.get() or "system"
        return True


def _logger(level: str) -> Dict[str, Any]:
    return {"handlers": ["stdout"], "level": level, "propagate": False}


def setup_logging():
    """
    Configure logging using logging.dictConfig.
    """
    app_level = settings.log_level.upper()

    loggers = {
        "root": _logger(app_level),
        "waterwise": _logger(app_level),
        "uvicorn": _logger("INFO"),
        "uvicorn.access": _logger("INFO"),
        "fastapi": _logger(app_level),
        "sqlalchemy.engine": _logger(settings.sqlalchemy_log_level.upper()),
    }
    loggers.update({name: _logger("WARNING") for name in CHATTY_LIBRARIES})

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {"request_id": {"()": RequestIdFilter}},
            "formatters": {
                "text": {
                    "format": "%(asctime)s %(levelname)-8s [%(request_id)s] %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": "pythonjsonlogger.json.JsonFormatter",
                    "format": "%(asctime)s %(levelname)s %(request_id)s %(name)s %(message)s",
                    "rename_fields": {"levelname": "level", "name": "logger"},
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": sys.stdout,
                    "formatter": "json" if settings.log_format == "json" else "text",
                    "filters": ["request_id"],
                    "level": app_level,
                },
            },
            "loggers": loggers,
        }
    )

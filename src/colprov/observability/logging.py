"""Logging setup: request-id tagged lines, service and library levels kept apart."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar

APP_LOGGER = "colprov"

# Set by RequestIDMiddleware for the lifetime of one HTTP request.
request_id_var: ContextVar[str] = ContextVar("colprov_request_id", default="-")


class RequestIDFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def _level(name: str, default: int) -> int:
    value = getattr(logging, name.upper(), None)
    return value if isinstance(value, int) else default


def setup_logging(level: str = "INFO", library_level: str = "WARNING") -> None:
    """Configure stdout logging.

    ``level`` applies to the ``colprov`` loggers; third-party loggers
    (httpx, uvicorn, ...) stay at ``library_level`` unless ``level`` is
    stricter, so store traffic is reported once, by ``colprov.gateway``.
    """
    app_level = _level(level, logging.INFO)
    lib_level = max(_level(library_level, logging.WARNING), app_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDFilter())
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s %(name)s [%(request_id)s]  %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(lib_level)
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger(APP_LOGGER).setLevel(app_level)

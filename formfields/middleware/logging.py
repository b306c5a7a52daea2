"""
Structured Logging Middleware

One JSON object per log line. Access lines carry the request id, timing,
client address and the locale chosen by the language middleware.
"""

import json
import logging
import time
import uuid
from collections.abc import Callable
from contextvars import ContextVar
from datetime import datetime, timezone

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

EXTRA_FIELDS = ("method", "path", "status_code", "duration_ms", "client_ip", "locale")
QUIET_PATHS = frozenset({"/health"})
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    """Stamp every record with the id of the request being served."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class StructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", ""),
        }
        entry.update({key: getattr(record, key) for key in EXTRA_FIELDS if hasattr(record, key)})
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Access log plus ``X-Request-ID`` propagation (taken from the request or generated)."""

    def __init__(self, app: ASGIApp, logger_name: str = "formfields.access"):
        super().__init__(app)
        self.logger = logging.getLogger(logger_name)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        token = request_id_var.set(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._access(request, 500, started, exc_info=True)
            raise
        else:
            response.headers["X-Request-ID"] = request_id
            self._access(request, response.status_code, started)
            return response
        finally:
            request_id_var.reset(token)

    def _access(self, request: Request, status_code: int, started: float, exc_info: bool = False) -> None:
        if request.url.path in QUIET_PATHS:
            return

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        level = logging.ERROR if status_code >= 500 else logging.WARNING if status_code >= 400 else logging.INFO
        extra = {
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": duration_ms,
            "client_ip": _client_ip(request),
            "locale": getattr(request.state, "locale", None),
        }
        self.logger.log(
            level, f"{request.method} {request.url.path} - {status_code} ({duration_ms}ms)", extra=extra, exc_info=exc_info
        )


def setup_structured_logging(log_level: str = "INFO", json_format: bool = True) -> None:
    """
    Replace the root handlers with a single stream handler.

    Args:
        log_level: Level name for the root and ``formfields`` loggers
        json_format: JSON lines when True, a plain text line otherwise
    """
    level = getattr(logging, log_level.upper())
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter() if json_format else logging.Formatter(PLAIN_FORMAT))
    handler.addFilter(RequestIdFilter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.getLogger("formfields").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def configure_logging(settings) -> None:
    """Apply ``log_level`` / ``log_json`` from the application settings."""
    setup_structured_logging(log_level=settings.log_level, json_format=settings.log_json)

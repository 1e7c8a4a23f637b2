from __future__ import annotations

import json
import logging
import time
from contextvars import ContextVar
from typing import Callable, Optional

from fastapi import Request

from requestid.core.errors import current_request_id
from requestid.settings import settings

_request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

access_logger = logging.getLogger("requestid.access")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"


class RequestIDLogFilter(logging.Filter):
    """Inject ``request_id`` into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id_var.get() or "-"  # type: ignore[attr-defined]
        return True


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging with the request id in the line prefix.

    Safe to call more than once: the handler is only added the first time.
    """
    resolved = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    for handler in root_logger.handlers:
        if any(isinstance(f, RequestIDLogFilter) for f in handler.filters):
            return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIDLogFilter())
    root_logger.addHandler(handler)


async def log_middleware(request: Request, call_next: Callable):
    token = _request_id_var.set(current_request_id(request))
    try:
        start = time.time()
        response = await call_next(request)
        elapsed_ms = int((time.time() - start) * 1000)

        log_obj = {
            "path": request.url.path,
            "method": request.method,
            "status": response.status_code,
            "requestId": _request_id_var.get(),
            "latencyMs": elapsed_ms,
        }
        access_logger.info(json.dumps(log_obj, ensure_ascii=False))
        return response
    finally:
        _request_id_var.reset(token)

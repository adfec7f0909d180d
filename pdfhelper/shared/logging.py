"""
Logging setup with request context.

The current RequestContext lives in a ContextVar so log lines emitted
anywhere during a request carry its request id.
"""

import logging
import sys
from contextvars import ContextVar

from pdfhelper.shared.types import RequestContext

_request_context: ContextVar[RequestContext | None] = ContextVar(
    "request_context", default=None
)

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(request_id)s] %(name)s: %(message)s"


class RequestContextFilter(logging.Filter):
    """Inject the active request id into every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = _request_context.get()
        record.request_id = ctx.request_id if ctx else "-"
        return True


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once; repeated calls only adjust the level."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    if any(getattr(h, "_pdfhelper", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestContextFilter())
    handler._pdfhelper = True  # type: ignore[attr-defined]
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_request_context(ctx: RequestContext) -> None:
    _request_context.set(ctx)


def clear_request_context() -> None:
    _request_context.set(None)

"""Request-scoped identifier used to correlate log lines and error responses.

The middleware in :mod:`mma_scheduler.main` stamps each inbound request with a
UUID. Handlers and the data store read it back through :func:`get_request_id`
when logging upstream failures.
"""

from __future__ import annotations

from contextvars import ContextVar, Token

__all__ = ["get_request_id", "set_request_id"]

_REQUEST_ID: ContextVar[str] = ContextVar("request_id", default="")


def set_request_id(request_id: str) -> Token[str]:
    return _REQUEST_ID.set(request_id)


def get_request_id() -> str:
    """Current request identifier, or an empty string outside a request."""

    return _REQUEST_ID.get()

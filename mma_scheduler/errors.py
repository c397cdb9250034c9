"""Exception types shared by the data store and the request boundary."""

from __future__ import annotations


class UpstreamQueryError(Exception):
    """Raised when the hosted database reports an error for a read query.

    The exception is never retried. Route handlers convert it into a generic
    failure response; the roster build is the only caller that tolerates it
    for a single source.
    """

    def __init__(self, table: str, message: str) -> None:
        super().__init__(f"Query against '{table}' failed: {message}")
        self.table = table
        self.message = message


__all__ = ["UpstreamQueryError"]

"""Errors raised by meiliclient.

Everything derives from `MeiliError`. Status failures carry the status code
and body the service answered with.
"""

from __future__ import annotations

from typing import Optional


class MeiliError(Exception):
    """Base class for all meiliclient exceptions."""


class ConfigError(MeiliError):
    """Raised when configuration or the service URI is malformed."""


class UnexpectedStatus(MeiliError):
    """Raised when the service answers with a status the operation does not handle.

    Carries the status code and the raw response body for diagnostics.
    """

    def __init__(
        self,
        status: int,
        body: str = "",
        *,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        target = f" for {method} {url}" if method and url else ""
        super().__init__(f"Unexpected status {status}{target}: {body}")
        self.status = status
        self.body = body
        self.method = method
        self.url = url


class IndexNotFoundError(MeiliError):
    """Raised when accessing metadata of an index that does not exist."""


class NoSuchFieldError(MeiliError, LookupError):
    """Raised when the service did not return a requested metadata field."""

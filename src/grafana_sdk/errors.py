"""Exception types raised by grafana-sdk.

Transport failures are not wrapped: ``requests.RequestException`` reaches the
caller as-is, and so does ``pydantic.ValidationError`` for bodies that don't
decode into the expected model.
"""

from __future__ import annotations


class GrafanaError(Exception):
    """Base class for errors raised by this package."""


class HTTPStatusError(GrafanaError):
    """The API answered with an unexpected HTTP status code."""

    def __init__(self, code: int, body: str) -> None:
        self.code = code
        self.body = body
        super().__init__(f"HTTP error {code}: returns {body}")

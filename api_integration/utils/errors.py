"""
api_integration/utils/errors.py

Unrecoverable errors raised by the request executor.

Expected HTTP failures (4xx/5xx) are never raised; they come back as a
FailureResult. The errors below signal problems the caller cannot recover
from by inspecting a result: a URL that cannot be built, or a success
response whose body is not JSON. Transport failures are not wrapped and
surface as `requests.RequestException`.
"""

from __future__ import annotations


class ApiIntegrationError(Exception):
    """Base class for errors raised by the API integration client."""


class MalformedURLError(ApiIntegrationError, ValueError):
    """Base host + endpoint does not form a valid http(s) URL."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Malformed URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class ResponseParseError(ApiIntegrationError, ValueError):
    """A 200/201 response carried a body that is not valid JSON."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Response body is not valid JSON (status={status_code})")
        self.status_code = status_code
        self.body = body


class UnknownOperationError(ApiIntegrationError, KeyError):
    """A resource client was asked for an operation missing from its table."""

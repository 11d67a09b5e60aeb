"""
api_integration/base_api/base_service.py

WHAT THIS FILE IS FOR
---------------------
This module defines the generic request executor that every resource
client builds on.

One call to `perform_request()`:
1) Resolves the base host from configuration (production vs. sandbox)
2) Joins host + endpoint and validates the resulting URL
3) Resolves the HTTP verb (unknown values fall back to GET)
4) Builds headers: Bearer token (if any), JSON content type, caller overrides
5) Serializes a non-empty payload to a UTF-8 JSON body
6) Sends exactly one blocking request on a fresh connection
7) Normalizes the response into SuccessResult / FailureResult

CALL FLOW CONTEXT
-----------------
UserService.get(42)
  → ResourceClient.call("get", resource_id=42)
      → BaseService.perform_request(endpoint="/users/42", method="get")
          → HttpClient.send("GET", "https://sandbox.api.com/v1/users/42", ...)
          → normalize_response(...)

ERROR HANDLING RULES
--------------------
- Non-200/201 responses → FailureResult (never raised)
- Malformed URL → MalformedURLError (propagated)
- Transport failure → requests.RequestException (propagated)
- Invalid JSON on 200/201 → ResponseParseError (propagated)

No retries are performed anywhere.

WHAT THIS FILE IS NOT FOR
-------------------------
This module MUST NOT:
- Know about specific resources or endpoint templates
- Validate payload contents
- Log tokens or request/response bodies
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlsplit

import structlog
from requests.structures import CaseInsensitiveDict

from api_integration.base_api.response_normalizer import normalize_response
from api_integration.utils.errors import MalformedURLError
from api_integration.utils.http_client import HttpClient
from api_integration.utils.settings import Settings, get_settings, resolve_base_url
from schemas.request_schema import HttpMethod, RequestDescriptor
from schemas.result_schema import ApiResult

logger = structlog.get_logger(__name__)

MethodLike = Union[HttpMethod, str, None]

_SUPPORTED_SCHEMES = ("http", "https")
_BODY_METHODS = {
    "post": HttpMethod.POST,
    "put": HttpMethod.PUT,
    "delete": HttpMethod.DELETE,
}


def resolve_http_method(method: MethodLike) -> HttpMethod:
    """
    Map a caller-supplied method onto an HTTP verb.

    post/put/delete (any case, or the enum member) map to themselves.
    Everything else, including None and typos, becomes GET.
    """
    if isinstance(method, HttpMethod):
        return method

    key = str(method).strip().lower() if method is not None else ""
    resolved = _BODY_METHODS.get(key)
    if resolved is not None:
        return resolved

    if key not in ("", "get"):
        # Unknown verbs are sent as GET; surface it so typos are visible.
        logger.warning("http_method_unrecognized_fallback_get", method=str(method))
    return HttpMethod.GET


def build_url(base_url: str, endpoint: str) -> str:
    """Concatenate base host and endpoint; raise MalformedURLError if invalid."""
    url = f"{base_url}{endpoint}"

    if any(ch.isspace() for ch in url):
        raise MalformedURLError(url, "contains whitespace")

    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError on a non-numeric or out-of-range port
    except ValueError as exc:
        raise MalformedURLError(url, str(exc)) from exc

    if parts.scheme not in _SUPPORTED_SCHEMES:
        raise MalformedURLError(url, f"unsupported scheme {parts.scheme!r}")
    if not parts.hostname:
        raise MalformedURLError(url, "missing host")

    return url


class BaseService:
    """
    Generic request executor.

    - Token: given at construction, or read once from settings (API_TOKEN)
    - Host: resolved from settings on every call, never cached
    - One request per call, one normalized Result back

    An empty-string token counts as no token: no Authorization header is
    sent (not "Bearer "). Passing token="" also skips the API_TOKEN lookup.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        http: Optional[HttpClient] = None,
    ) -> None:
        self._settings = settings
        self._token = token if token is not None else self._current_settings().api_token
        self.http = http or HttpClient()

    @property
    def host(self) -> str:
        return resolve_base_url(self._current_settings())

    @property
    def has_token(self) -> bool:
        return bool(self._token)

    def perform(
        self,
        method: MethodLike,
        endpoint: str,
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResult:
        return self.perform_request(
            endpoint=endpoint,
            method=method,
            payload=payload,
            headers=headers,
        )

    def perform_descriptor(self, descriptor: RequestDescriptor) -> ApiResult:
        return self.perform_request(
            endpoint=descriptor.endpoint,
            method=descriptor.method,
            payload=descriptor.payload,
            headers=descriptor.headers,
        )

    def perform_request(
        self,
        endpoint: str,
        method: MethodLike = HttpMethod.GET,
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResult:
        """
        Perform one HTTP request and return a normalized Result.

        Raises:
            MalformedURLError: host + endpoint is not a valid URL.
            requests.RequestException: transport failure.
            ResponseParseError: 200/201 with a non-JSON body.
        """
        url = build_url(self.host, endpoint)
        verb = resolve_http_method(method)
        request_headers = self._build_headers(headers)
        body = json.dumps(dict(payload)).encode("utf-8") if payload else None

        resp = self.http.send(verb.value, url, headers=request_headers, body=body)

        logger.info(
            "api_request_completed",
            method=verb.value,
            url=url,
            status_code=resp.status_code,
        )
        result = normalize_response(
            status_code=resp.status_code,
            reason=resp.reason,
            content=resp.content,
            text=resp.text,
        )
        if not result.success:
            logger.warning(
                "api_request_unsuccessful",
                method=verb.value,
                url=url,
                status_code=resp.status_code,
                reason=resp.reason,
            )
        return result

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    def _current_settings(self) -> Settings:
        return self._settings if self._settings is not None else get_settings()

    def _build_headers(self, headers: Optional[Mapping[str, str]]) -> CaseInsensitiveDict:
        request_headers: CaseInsensitiveDict = CaseInsensitiveDict()
        if self._token:
            request_headers["Authorization"] = f"Bearer {self._token}"
        request_headers["Content-Type"] = "application/json"
        # Caller headers go last and win on collision.
        for key, value in (headers or {}).items():
            request_headers[key] = value
        return request_headers

"""
api_integration/base_api/response_normalizer.py

WHAT THIS FILE IS FOR
---------------------
This module defines the *single canonical rule* for mapping an HTTP
response into the client's Result contract.

CONTRACT RULE
-------------
- HTTP 200 or 201 -> SuccessResult(data=<JSON-parsed body>)
- anything else   -> FailureResult(error=<reason phrase>, details=<raw body>)

Notes:
- 204 and other 2xx codes are NOT success here.
- Success bodies are parsed from the raw bytes. `json.loads` detects
  UTF-8/16/32 itself, so the Content-Type charset (or a missing one)
  never changes the parsed value.
- Failure bodies are never parsed, even when they are valid JSON.
  `details` is the decoded response text.
- An empty success body parses as None.
- A non-empty success body that is not JSON raises ResponseParseError.
  There is no fallback to raw text.

WHAT THIS FILE IS NOT FOR
-------------------------
This module MUST NOT:
- Perform HTTP calls
- Log
- Retry or reinterpret upstream errors

It performs *pure, deterministic mapping only*.
"""

from __future__ import annotations

import json
from typing import Optional

from api_integration.utils.errors import ResponseParseError
from schemas.result_schema import ApiResult, FailureResult, SuccessResult

SUCCESS_STATUS_CODES = frozenset({200, 201})


def normalize_response(
    *,
    status_code: int,
    reason: Optional[str],
    content: Optional[bytes],
    text: Optional[str],
) -> ApiResult:
    if status_code not in SUCCESS_STATUS_CODES:
        return FailureResult(error=reason or "", details=text or "")

    content = content or b""
    if not content.strip():
        return SuccessResult(data=None)

    try:
        data = json.loads(content)
    except ValueError as exc:
        # UnicodeDecodeError is a ValueError too
        raise ResponseParseError(status_code, content.decode("utf-8", errors="replace")) from exc

    return SuccessResult(data=data)

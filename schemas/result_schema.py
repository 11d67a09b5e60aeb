# -------------------------------------------------------------------
# schemas/result_schema.py
#
# WHAT THIS FILE IS FOR
# --------------------
# The normalized outcome of every API call. Exactly two shapes exist:
#
#     {"success": True,  "data": <parsed JSON>}
#     {"success": False, "error": <reason phrase>, "details": <raw body>}
#
# Callers branch on `success`, never on exceptions. Expected HTTP
# failures (4xx/5xx) always arrive as FailureResult.
#
# `model_dump()` on either variant yields exactly the mapping above.
#
# WHAT THIS FILE IS NOT FOR
# ------------------------
# This module does NOT:
# - Decide which variant a response maps to (see response_normalizer)
# - Parse or inspect failure bodies
# -------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel


class SuccessResult(BaseModel):
    """200/201 response with its JSON body parsed into `data`."""

    success: Literal[True] = True
    data: Any = None


class FailureResult(BaseModel):
    """
    Any other status.

    `error` is the HTTP reason phrase, `details` the raw, unparsed body.
    """

    success: Literal[False] = False
    error: str
    details: str = ""


ApiResult = Union[SuccessResult, FailureResult]

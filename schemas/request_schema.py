# -------------------------------------------------------------------
# schemas/request_schema.py
#
# WHAT THIS FILE IS FOR
# --------------------
# Typed description of one outbound API call (the "request descriptor"):
#
#     {method, endpoint, payload, headers}
#
# BaseService.perform_descriptor() consumes it; the keyword forms
# perform() / perform_request() build one internally.
#
# PAYLOAD RULE
# ------------
# An empty payload means "no body", whatever the method.
# A non-empty payload is sent as UTF-8 JSON text.
#
# WHAT THIS FILE IS NOT FOR
# ------------------------
# This module does NOT:
# - Resolve the HTTP verb (see base_service.resolve_http_method)
# - Validate payload contents against any resource schema
# -------------------------------------------------------------------

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Union

from pydantic import BaseModel, Field


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class RequestDescriptor(BaseModel):
    """
    One HTTP call, before host resolution.

    `method` is kept as given (enum member or free-form string) so that
    unrecognized values reach the executor and fall back to GET there.
    """

    method: Union[HttpMethod, str, None] = HttpMethod.GET
    endpoint: str
    payload: Dict[str, Any] = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def has_body(self) -> bool:
        return bool(self.payload)

"""
api_integration/utils/http_client.py

WHAT THIS FILE IS FOR
---------------------
This module provides a minimal, synchronous HTTP client abstraction
used by the request executor (BaseService) to send one HTTP request.

It exists to:
- Centralize the single outbound call behind one seam
- Avoid scattering raw `requests` calls across the codebase
- Give tests one object to replace with a fake transport

This client is intentionally kept *very thin*.

WHAT THIS FILE IS NOT FOR
-------------------------
This module is NOT responsible for:
- Retry logic
- Logging
- Building URLs, headers or JSON bodies
- Response normalization or error translation

Those responsibilities belong to BaseService and the response normalizer.

CONNECTION MODEL
----------------
Every call opens a short-lived `requests.Session` and closes it on return,
so every request goes out on a new connection and nothing is pooled.
TLS is used when the URL scheme is https.

The session has `trust_env = False`: ~/.netrc credentials never replace the
Authorization header, and proxy variables from the environment are ignored.

No timeout is passed; the transport defaults apply.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests


class HttpClient:
    """
    Minimal synchronous HTTP client wrapper.

    It intentionally:
    - Does NOT add retries
    - Does NOT add logging
    - Does NOT interpret response payloads
    - Does NOT reuse connections
    """

    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> requests.Response:
        """
        Send one request and block until the full response is received.

        Args:
            method:
                HTTP verb, already resolved (GET/POST/PUT/DELETE).
            url:
                Full URL of the target endpoint.
            headers:
                Final request headers.
            body:
                Encoded request body, or None to send no body.

        Returns:
            requests.Response

        Raises:
            requests.RequestException:
                Any network-level error (DNS, connection, TLS).
                Callers let it propagate.
        """
        with requests.Session() as session:
            session.trust_env = False
            return session.request(
                method,
                url,
                headers=dict(headers or {}),
                data=body,
            )

# tests/test_http_client.py
from __future__ import annotations

from typing import Any, Dict, List

import pytest
import requests

import api_integration.utils.http_client as http_mod
from api_integration.utils.http_client import HttpClient


class _FakeSession:
    """
    Mimics requests.Session used as:
      with requests.Session() as session:
          session.trust_env = False
          return session.request(...)
    """

    instances: List["_FakeSession"] = []

    def __init__(self) -> None:
        self.trust_env = True
        self.closed = False
        self.calls: List[Dict[str, Any]] = []
        self.response: Any = object()
        _FakeSession.instances.append(self)

    def __enter__(self) -> "_FakeSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.closed = True

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, "trust_env": self.trust_env, **kwargs})
        return self.response


@pytest.fixture
def fake_sessions(monkeypatch: pytest.MonkeyPatch) -> List[_FakeSession]:
    _FakeSession.instances = []
    monkeypatch.setattr(http_mod.requests, "Session", _FakeSession)
    return _FakeSession.instances


def test_send_passes_through_to_session(fake_sessions: List[_FakeSession]) -> None:
    out = HttpClient().send(
        "POST",
        "https://sandbox.api.com/v1/users",
        headers={"Content-Type": "application/json"},
        body=b'{"name": "Bob"}',
    )

    session = fake_sessions[0]
    assert out is session.response
    assert session.calls == [
        {
            "method": "POST",
            "url": "https://sandbox.api.com/v1/users",
            "trust_env": False,
            "headers": {"Content-Type": "application/json"},
            "data": b'{"name": "Bob"}',
        }
    ]


def test_send_without_headers_or_body(fake_sessions: List[_FakeSession]) -> None:
    HttpClient().send("GET", "https://sandbox.api.com/v1/users/1")

    call = fake_sessions[0].calls[0]
    assert call["headers"] == {}
    assert call["data"] is None


def test_each_send_uses_a_new_session_and_closes_it(fake_sessions: List[_FakeSession]) -> None:
    client = HttpClient()
    client.send("GET", "https://sandbox.api.com/v1/users/1")
    client.send("GET", "https://sandbox.api.com/v1/users/2")

    assert len(fake_sessions) == 2
    assert all(s.closed for s in fake_sessions)
    assert all(s.trust_env is False for s in fake_sessions)


def test_netrc_and_proxy_env_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    # real Session: with trust_env off, environment settings never merge in
    monkeypatch.setenv("HTTPS_PROXY", "http://proxy.invalid:3128")
    captured: Dict[str, Any] = {}

    def fake_send(self, request, **kwargs):
        captured["headers"] = dict(request.headers)
        captured["proxies"] = kwargs.get("proxies")
        resp = requests.Response()
        resp.status_code = 200
        resp._content = b"{}"
        return resp

    monkeypatch.setattr(requests.Session, "send", fake_send)

    HttpClient().send(
        "GET",
        "https://sandbox.api.com/v1/users/1",
        headers={"Authorization": "Bearer tok"},
    )

    assert captured["headers"]["Authorization"] == "Bearer tok"
    assert not captured["proxies"]


def test_send_does_not_swallow_transport_errors(
    fake_sessions: List[_FakeSession],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def broken_request(self, method, url, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(_FakeSession, "request", broken_request)

    with pytest.raises(requests.ConnectionError):
        HttpClient().send("GET", "https://sandbox.api.com/v1/users/1")
    assert fake_sessions[0].closed is True

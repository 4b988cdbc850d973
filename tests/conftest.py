"""
Pytest fixtures for the test suite.

Google is never contacted: ``fake_google`` is an ``httpx.MockTransport``
handler that records every request and answers with a configurable status
and body. Tests that need time to pass use ``clock`` instead of sleeping.
"""
from __future__ import annotations

import json
from types import SimpleNamespace

import httpx
import pytest
from starlette.datastructures import Headers

from credentials.google_token import AuthOptions, GoogleTokenAuthenticator, ProfileCache, RemoteVerifier

ALICE = {"sub": "123", "name": "Alice", "email": "alice@example.com"}


class FakeGoogle:
    """Stand-in for the userinfo endpoint."""

    def __init__(self) -> None:
        self.calls: list[httpx.Request] = []
        self.status_code = 200
        self.payload: object = dict(ALICE)
        self.raw_body: bytes | None = None
        self.error: type[httpx.HTTPError] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.error is not None:
            raise self.error("simulated transport failure", request=request)
        body = self.raw_body if self.raw_body is not None else json.dumps(self.payload).encode()
        return httpx.Response(self.status_code, content=body, headers={"Content-Type": "application/json"})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fake_google() -> FakeGoogle:
    return FakeGoogle()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_authenticator(fake_google, clock):
    """Build an authenticator wired to ``fake_google`` and ``clock``."""

    def _make(options: AuthOptions | None = None, token_time_to_live: float | None = None, **kwargs):
        kwargs.setdefault("cache", ProfileCache(clock=clock))
        kwargs.setdefault("verifier", RemoteVerifier(client=fake_google.client()))
        return GoogleTokenAuthenticator(options, token_time_to_live, clock=clock, **kwargs)

    return _make


def make_request(headers: dict[str, str] | None = None) -> SimpleNamespace:
    """Minimal request object: only ``headers`` is read by strategies."""
    return SimpleNamespace(headers=Headers(headers=headers or {}))


def google_request(token: str | None = "abc123") -> SimpleNamespace:
    headers = {"X-token-type": "GoogleToken"}
    if token is not None:
        headers["access_token"] = token
    return make_request(headers)


@pytest.fixture(name="make_request")
def make_request_fixture():
    return make_request


@pytest.fixture(name="google_request")
def google_request_fixture():
    return google_request

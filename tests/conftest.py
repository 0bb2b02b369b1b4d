"""
Shared fixtures: a fake Folo API built on httpx.MockTransport.

Every test that needs the network gets a FakeFolo instead.  It records each
request it receives, so tests can assert on the URL, headers and body, and
on how many requests were (or were not) made.
"""

import json
from typing import Any, Awaitable, Callable, Union

import httpx
import pytest

from core.config import Settings

Responder = Callable[[httpx.Request], Union[httpx.Response, Awaitable[httpx.Response]]]


class FakeFolo:
    """A recording stand-in for api.follow.is."""

    def __init__(self, responder: Responder):
        self.requests: list[httpx.Request] = []
        self._responder = responder
        self.transport = httpx.MockTransport(self._handle)

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._responder(request)
        if isinstance(response, httpx.Response):
            return response
        return await response

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was made"
        return self.requests[-1]

    def last_json_body(self) -> Any:
        return json.loads(self.last_request.content)


def json_response(payload: Any, status_code: int = 200) -> Responder:
    return lambda request: httpx.Response(status_code, json=payload)


@pytest.fixture
def settings() -> Settings:
    return Settings(session_token="test-token")


@pytest.fixture
def no_token_settings() -> Settings:
    return Settings(session_token=None)


@pytest.fixture
def ok_api() -> FakeFolo:
    """Answers every request with the standard Folo success envelope."""
    return FakeFolo(json_response({"code": 0, "data": {"ok": True}}))

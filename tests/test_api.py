"""
Tests for core.api.send_api_query, the request translator.

Coverage:
- Missing session token short-circuits without touching the network
- GET → query string, POST/DELETE → JSON body
- Auth cookie and user-agent on every request
- Response normalisation: success envelope, bare payloads, API errors,
  non-JSON bodies
- Timeouts and transport failures become error results
"""

import asyncio
import json

import httpx
import pytest

from conftest import FakeFolo, json_response
from core.api import MISSING_TOKEN_MESSAGE, USER_AGENT, send_api_query
from core.config import Settings


# =============================================================================
# Credential check
# =============================================================================
@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "POST", "DELETE"])
async def test_missing_token_returns_error_without_request(no_token_settings, ok_api, method):
    result = await send_api_query(
        "/entries", method, {"view": 0},
        settings=no_token_settings, transport=ok_api.transport,
    )

    assert result.is_error is True
    assert "FOLO_SESSION_TOKEN" in result.text
    assert result.text == MISSING_TOKEN_MESSAGE
    assert len(ok_api.requests) == 0


# =============================================================================
# Request construction
# =============================================================================
@pytest.mark.asyncio
async def test_get_encodes_args_as_query_string(settings, ok_api):
    await send_api_query("/subscriptions", "GET", {"view": 0}, settings=settings, transport=ok_api.transport)

    request = ok_api.last_request
    assert request.method == "GET"
    assert request.url.path == "/subscriptions"
    assert "view=0" in request.url.query.decode()
    assert request.content == b""
    assert "content-type" not in request.headers


@pytest.mark.asyncio
async def test_get_renders_booleans_and_lists(settings, ok_api):
    await send_api_query(
        "/entries", "GET",
        {"read": False, "feedIdList": ["a", "b"], "userId": None},
        settings=settings, transport=ok_api.transport,
    )

    params = ok_api.last_request.url.params
    assert params["read"] == "false"
    assert params.get_list("feedIdList") == ["a", "b"]
    assert "userId" not in params


@pytest.mark.asyncio
async def test_get_without_args_has_no_query(settings, ok_api):
    await send_api_query("/better-auth/get-session", "GET", {}, settings=settings, transport=ok_api.transport)

    assert str(ok_api.last_request.url) == "https://api.follow.is/better-auth/get-session"


@pytest.mark.asyncio
async def test_post_sends_json_body_and_no_query(settings, ok_api):
    await send_api_query("/collections", "POST", {"entryId": "123"}, settings=settings, transport=ok_api.transport)

    request = ok_api.last_request
    assert request.method == "POST"
    assert request.url.query == b""
    assert request.headers["content-type"] == "application/json"
    assert ok_api.last_json_body() == {"entryId": "123"}


@pytest.mark.asyncio
async def test_delete_sends_json_body(settings, ok_api):
    await send_api_query("/subscriptions", "DELETE", {"feedId": "41459996870678529"}, settings=settings, transport=ok_api.transport)

    request = ok_api.last_request
    assert request.method == "DELETE"
    assert request.url.query == b""
    assert ok_api.last_json_body() == {"feedId": "41459996870678529"}


@pytest.mark.asyncio
async def test_post_with_no_args_sends_empty_object(settings, ok_api):
    await send_api_query("/reads/all", "POST", None, settings=settings, transport=ok_api.transport)

    assert ok_api.last_json_body() == {}


@pytest.mark.asyncio
async def test_auth_cookie_and_user_agent_attached(settings, ok_api):
    await send_api_query("/reads", "GET", {}, settings=settings, transport=ok_api.transport)

    headers = ok_api.last_request.headers
    assert headers["cookie"] == "__Secure-better-auth.session_token=test-token;"
    assert headers["user-agent"] == USER_AGENT


@pytest.mark.asyncio
async def test_base_url_comes_from_settings(ok_api):
    settings = Settings(session_token="t", base_url="http://localhost:8787")

    await send_api_query("/feeds", "GET", {"id": "1"}, settings=settings, transport=ok_api.transport)

    assert str(ok_api.last_request.url) == "http://localhost:8787/feeds?id=1"


# =============================================================================
# Response normalisation
# =============================================================================
@pytest.mark.asyncio
async def test_success_envelope_returns_pretty_data(settings):
    api = FakeFolo(json_response({"code": 0, "data": {"a": 1}}))

    result = await send_api_query("/reads", "GET", {}, settings=settings, transport=api.transport)

    assert result.is_error is False
    assert result.text == json.dumps({"a": 1}, indent=2)


@pytest.mark.asyncio
async def test_bare_payload_without_code_is_returned_whole(settings):
    session = {"user": {"name": "Ada", "email": "ada@example.com"}, "session": {"expiresAt": "2026-01-01"}}
    api = FakeFolo(json_response(session))

    result = await send_api_query("/better-auth/get-session", "GET", {}, settings=settings, transport=api.transport)

    assert result.is_error is False
    assert json.loads(result.text) == session


@pytest.mark.asyncio
async def test_null_data_falls_back_to_whole_body(settings):
    api = FakeFolo(json_response({"code": 0, "data": None}))

    result = await send_api_query("/collections", "POST", {"entryId": "1"}, settings=settings, transport=api.transport)

    assert result.is_error is False
    assert json.loads(result.text) == {"code": 0, "data": None}


@pytest.mark.asyncio
async def test_json_null_body_is_success(settings):
    api = FakeFolo(lambda request: httpx.Response(200, content=b"null"))

    result = await send_api_query("/collections", "DELETE", {"entryId": "1"}, settings=settings, transport=api.transport)

    assert result.is_error is False
    assert result.text == "Success"


@pytest.mark.asyncio
async def test_list_payload_is_pretty_printed(settings):
    api = FakeFolo(json_response({"code": 0, "data": [{"id": "1"}, {"id": "2"}]}))

    result = await send_api_query("/subscriptions", "GET", {}, settings=settings, transport=api.transport)

    assert json.loads(result.text) == [{"id": "1"}, {"id": "2"}]
    assert "\n  " in result.text


@pytest.mark.asyncio
async def test_non_ascii_is_kept_readable(settings):
    api = FakeFolo(json_response({"code": 0, "data": {"title": "日本語のフィード"}}))

    result = await send_api_query("/feeds", "GET", {"id": "1"}, settings=settings, transport=api.transport)

    assert "日本語のフィード" in result.text


@pytest.mark.asyncio
async def test_nonzero_code_is_api_error(settings):
    api = FakeFolo(json_response({"code": 42, "message": "bad"}))

    result = await send_api_query("/entries", "POST", {}, settings=settings, transport=api.transport)

    assert result.is_error is True
    assert "bad" in result.text
    assert "42" in result.text
    assert result.text == "Error: bad. Code: 42."


@pytest.mark.asyncio
@pytest.mark.parametrize("code", [-1, 1, 401])
async def test_any_nonzero_code_is_failure(settings, code):
    api = FakeFolo(json_response({"code": code, "data": {"a": 1}}))

    result = await send_api_query("/reads", "GET", {}, settings=settings, transport=api.transport)

    assert result.is_error is True
    assert result.text == f"Error: Unknown API error. Code: {code}."


@pytest.mark.asyncio
async def test_non_json_body_reports_status_and_text(settings):
    api = FakeFolo(lambda request: httpx.Response(500, text="<html>Internal Server Error</html>"))

    result = await send_api_query("/entries", "POST", {}, settings=settings, transport=api.transport)

    assert result.is_error is True
    assert "500" in result.text
    assert "<html>Internal Server Error</html>" in result.text
    assert result.text.endswith("The API returned a non-JSON response.")


@pytest.mark.asyncio
async def test_empty_body_reports_reason_phrase(settings):
    api = FakeFolo(lambda request: httpx.Response(502))

    result = await send_api_query("/entries", "GET", {"id": "1"}, settings=settings, transport=api.transport)

    assert result.is_error is True
    assert result.text == "Error: HTTP 502 - Bad Gateway. The API returned a non-JSON response."


# =============================================================================
# Timeouts and transport failures
# =============================================================================
@pytest.mark.asyncio
async def test_timeout_returns_error_and_cancels_request():
    settings = Settings(session_token="t", request_timeout=0.05)
    cancelled = []

    async def never_answers(request):
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.append(request)
            raise
        return httpx.Response(200, json={})

    api = FakeFolo(never_answers)

    for _ in range(3):
        result = await send_api_query("/entries", "POST", {}, settings=settings, transport=api.transport)
        assert result.is_error is True
        assert "timed out" in result.text

    assert len(api.requests) == 3
    assert len(cancelled) == 3
    pending = [task for task in asyncio.all_tasks() if task is not asyncio.current_task()]
    assert pending == []


@pytest.mark.asyncio
async def test_timeout_message_uses_default_of_30_seconds(settings):
    def raise_timeout(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    api = FakeFolo(raise_timeout)

    result = await send_api_query("/reads", "GET", {}, settings=settings, transport=api.transport)

    assert result.is_error is True
    assert "Request timed out after 30 seconds" in result.text


@pytest.mark.asyncio
async def test_connection_error_is_caught(settings):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    api = FakeFolo(refuse)

    result = await send_api_query("/reads", "GET", {}, settings=settings, transport=api.transport)

    assert result.is_error is True
    assert result.text == "Error: connection refused. Please try again."


@pytest.mark.asyncio
async def test_exception_without_message_gets_fallback(settings):
    def explode(request):
        raise RuntimeError()

    api = FakeFolo(explode)

    result = await send_api_query("/reads", "GET", {}, settings=settings, transport=api.transport)

    assert result.is_error is True
    assert result.text == "Error: An unexpected error occurred. Please try again."


@pytest.mark.asyncio
async def test_failure_does_not_affect_next_call(settings):
    responses = iter([
        httpx.Response(500, text="boom"),
        httpx.Response(200, json={"code": 0, "data": {"a": 1}}),
    ])
    api = FakeFolo(lambda request: next(responses))

    first = await send_api_query("/reads", "GET", {}, settings=settings, transport=api.transport)
    second = await send_api_query("/reads", "GET", {}, settings=settings, transport=api.transport)

    assert first.is_error is True
    assert second.is_error is False
    assert json.loads(second.text) == {"a": 1}

# =============================================================================
# core/api.py  —  Request Translator (the only component with behaviour)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   send_api_query() turns one tool call into one authenticated HTTP request
#   against the Folo API, and turns whatever comes back into a ToolResult.
#
# HOW IT WORKS (the flow):
#   1. No session token?  Return an error result.  No request is made.
#   2. Build the request:
#        GET          → arguments go in the query string, no body
#        POST/DELETE  → arguments go in a JSON body, no query string
#      Every request carries the better-auth session cookie and a fixed
#      browser user-agent.
#   3. Race the request against the timeout (asyncio.wait_for).  If the
#      timer wins, the request task is cancelled and the client closed.
#   4. Normalise the response:
#        body is not JSON          → error "HTTP <status> - ..."
#        body has code != 0        → error "<message>. Code: <code>."
#        otherwise                 → ok, pretty JSON of `data` (or the body)
#   5. Anything else that goes wrong becomes an error result.
#
# THE CONTRACT:
#   send_api_query() NEVER raises.  Every failure mode is reported as a
#   ToolResult with is_error=True, so one bad call can't take down the
#   host's session or affect the next call.
#
# RESPONSE ENVELOPES:
#   Folo's own endpoints answer {"code": 0, "data": ...}.  The better-auth
#   endpoints (e.g. /better-auth/get-session) answer with the bare payload
#   and no "code" field at all.  Both are handled by the same rules above.
# =============================================================================

import asyncio
import json
import logging
from typing import Any, Mapping, Optional

import httpx

from core.config import SESSION_TOKEN_ENV, Settings
from core.models import HttpMethod, ToolResult

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "__Secure-better-auth.session_token"
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/134.0.0.0 Safari/537.36"
)

# Folo's success sentinel.  Any other value of "code" is a failure.
SUCCESS_CODE = 0

_BODY_METHODS = frozenset({"POST", "DELETE"})

MISSING_TOKEN_MESSAGE = (
    f"Error: {SESSION_TOKEN_ENV} environment variable is not set. "
    "Please provide your Folo session token to authenticate API requests."
)


async def send_api_query(
    path: str,
    method: HttpMethod,
    args: Optional[Mapping[str, Any]] = None,
    *,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ToolResult:
    """Call ``method path`` on the Folo API and normalise the outcome.

    Args:
        path: API path, e.g. "/entries".  Appended to settings.base_url.
        method: "GET", "POST" or "DELETE".
        args: Tool arguments.  Keys whose value is None are dropped.
        settings: Resolved configuration (token, base URL, timeout).
        transport: Optional httpx transport, used by tests to fake the API.

    Returns:
        A ToolResult.  Never raises.
    """
    if not settings.session_token:
        logger.warning("Refusing %s %s: no session token configured", method, path)
        return ToolResult.error(MISSING_TOKEN_MESSAGE)

    payload = {k: v for k, v in (args or {}).items() if v is not None}
    request_kwargs = _build_request(path, method, payload, settings)
    logger.debug("%s %s%s", method, settings.base_url, path)

    try:
        response = await asyncio.wait_for(
            _exchange(request_kwargs, settings, transport),
            timeout=settings.request_timeout,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException):
        logger.warning("%s %s timed out after %ss", method, path, settings.request_timeout)
        return ToolResult.error(
            f"Error: Request timed out after {settings.request_timeout:g} seconds. "
            "Please check your network connection and try again."
        )
    except Exception as exc:
        logger.warning("%s %s failed: %r", method, path, exc)
        return ToolResult.error(
            f"Error: {str(exc) or 'An unexpected error occurred'}. Please try again."
        )

    return _normalise_response(response)


def _build_request(
    path: str,
    method: HttpMethod,
    payload: dict[str, Any],
    settings: Settings,
) -> dict[str, Any]:
    """Translate (path, method, args) into keyword arguments for httpx."""
    headers = {
        "cookie": f"{SESSION_COOKIE_NAME}={settings.session_token};",
        "user-agent": USER_AGENT,
    }
    request: dict[str, Any] = {
        "method": method,
        "url": f"{settings.base_url}{path}",
        "headers": headers,
    }

    if method in _BODY_METHODS:
        headers["content-type"] = "application/json"
        request["json"] = payload
    else:
        # httpx renders booleans as "true"/"false" and lists as repeated keys.
        request["params"] = payload
    return request


async def _exchange(
    request_kwargs: dict[str, Any],
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport],
) -> httpx.Response:
    """Send one request and read the full body.

    The client lives only for this call, so its connection is released
    whether the exchange finishes, fails, or is cancelled by the timeout.
    """
    async with httpx.AsyncClient(
        transport=transport,
        timeout=settings.request_timeout,
    ) as client:
        return await client.request(**request_kwargs)


def _normalise_response(response: httpx.Response) -> ToolResult:
    # --- Step 1: the body must be JSON ---
    try:
        body = response.json()
    except ValueError:
        try:
            text = response.text
        except Exception:
            text = ""
        logger.warning("HTTP %s with non-JSON body", response.status_code)
        return ToolResult.error(
            f"Error: HTTP {response.status_code} - {text or response.reason_phrase}. "
            "The API returned a non-JSON response."
        )

    # --- Step 2: application-level failure ---
    if isinstance(body, dict) and "code" in body and body["code"] != SUCCESS_CODE:
        message = body.get("message") or "Unknown API error"
        logger.warning("API error %s: %s", body["code"], message)
        return ToolResult.error(f"Error: {message}. Code: {body['code']}.")

    # --- Step 3: success ---
    data = body.get("data") if isinstance(body, dict) else None
    result = body if data is None else data

    # null, "", false and 0 carry nothing worth printing.
    if result in (None, "", False):
        return ToolResult.ok("Success")
    return ToolResult.ok(json.dumps(result, indent=2, ensure_ascii=False))

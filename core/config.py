# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Resolves the server's configuration from the environment ONCE, at
#   process start, into a frozen Settings object.  The request translator
#   receives Settings explicitly; it never reads os.environ itself.
#
# ENVIRONMENT VARIABLES:
#   FOLO_SESSION_TOKEN    - better-auth session token (required to call the API)
#   FOLO_API_BASE_URL     - API origin (default: https://api.follow.is)
#   FOLO_REQUEST_TIMEOUT  - per-request timeout in seconds (default: 30)
#
# A missing token is NOT a startup failure.  The server starts normally and
# every tool call reports the missing token as an error result instead.
#
# Loading a .env file is the entry point's job (see tools/mcp_server.py and
# main.py), so this module stays free of side effects.
# =============================================================================

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.follow.is"
DEFAULT_REQUEST_TIMEOUT = 30.0

SESSION_TOKEN_ENV = "FOLO_SESSION_TOKEN"
BASE_URL_ENV = "FOLO_API_BASE_URL"
REQUEST_TIMEOUT_ENV = "FOLO_REQUEST_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    """Configuration shared (read-only) by every tool invocation."""

    session_token: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build Settings from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ

        # An empty token is treated the same as a missing one.
        token = env.get(SESSION_TOKEN_ENV, "").strip() or None
        base_url = env.get(BASE_URL_ENV, "").strip().rstrip("/") or DEFAULT_BASE_URL

        return cls(
            session_token=token,
            base_url=base_url,
            request_timeout=_parse_timeout(env.get(REQUEST_TIMEOUT_ENV)),
        )

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks.
        token = "***" if self.session_token else None
        return (
            f"Settings(session_token={token!r}, base_url={self.base_url!r}, "
            f"request_timeout={self.request_timeout!r})"
        )


def _parse_timeout(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_REQUEST_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning(
            "Ignoring %s=%r (not a number); using %ss",
            REQUEST_TIMEOUT_ENV, raw, DEFAULT_REQUEST_TIMEOUT,
        )
        return DEFAULT_REQUEST_TIMEOUT
    if value <= 0:
        logger.warning(
            "Ignoring %s=%r (must be positive); using %ss",
            REQUEST_TIMEOUT_ENV, raw, DEFAULT_REQUEST_TIMEOUT,
        )
        return DEFAULT_REQUEST_TIMEOUT
    return value

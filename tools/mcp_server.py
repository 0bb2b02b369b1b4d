# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL Folo tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes every catalog entry (core/catalog.py) as an MCP tool.  Each tool
#   is a thin wrapper around core.api.send_api_query — it validates the
#   arguments, forwards them to the fixed (path, method) of its ToolSpec,
#   and hands the ToolResult back to the host.
#
# HOW IT WORKS (the flow):
#   1. The host (Claude Desktop, an ADK agent, ...) lists the tools
#   2. It calls a tool by name via MCP (e.g., "entry_list")
#   3. FastMCP routes the call to the FoloTool registered for that name
#   4. FoloTool validates the arguments against the declared fields
#   5. send_api_query() performs the HTTP call and normalises the result
#   6. Error results are raised as ToolError → the host sees isError=true
#
# WHY A Tool SUBCLASS INSTEAD OF @mcp.tool() FUNCTIONS?
#   Every Folo tool has the same body; only the schema and the HTTP binding
#   differ.  The catalog is data, so we register it by iterating over it
#   rather than writing twelve identical decorated functions.
#
# RUNNING THIS SERVER:
#     a) Installed:   folo-mcp
#     b) From source: python -m tools.mcp_server
#     c) Spawned by the ADK agent in agent/folo_agent.py via stdio
# =============================================================================

import logging
import sys
from datetime import datetime
from typing import Annotated, Any, Awaitable, Callable, Optional

import httpx
from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as FastMCPToolResult
from mcp.types import TextContent, ToolAnnotations
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, ValidationError, create_model

from core.api import send_api_query
from core.catalog import TOOLS
from core.config import Settings
from core.models import FieldSpec, ToolResult, ToolSpec

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because stdout is the MCP transport.  Anything printed to
# stdout would corrupt the JSON-RPC stream and break the host connection.
#
#   CYAN   → incoming tool calls (name + arguments)
#   YELLOW → status/progress messages
#   GREEN  → successful responses
#   RED    → error results
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

# Responses can be whole article bodies; only the head goes to the log.
_MAX_LOGGED_RESPONSE = 500

logger = logging.getLogger(__name__)

SERVER_NAME = "folo-mcp"
SERVER_INSTRUCTIONS = (
    "Tools for the Folo RSS reader: list and read entries, manage "
    "subscriptions, unread state and starred entries for the signed-in user."
)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, params: dict[str, Any]) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: ToolResult) -> ToolResult:
    """Log the tool result (GREEN for ok, RED for errors), then return it."""
    if result.is_error:
        logger.info(f"{_RED}  ← {tool_name} error: {result.text}{_RESET}")
        return result

    text = result.text
    if len(text) > _MAX_LOGGED_RESPONSE:
        text = f"{text[:_MAX_LOGGED_RESPONSE]}... ({len(result.text)} chars)"
    logger.info(f"{_GREEN}  ← {tool_name} response: {text}{_RESET}")
    return result


# =============================================================================
# Argument validation
# =============================================================================
# The catalog declares fields as plain data (FieldSpec).  Here we turn those
# declarations into a pydantic model per tool, so malformed arguments are
# rejected before any HTTP request is made.  Values keep their original
# form: a validated URL is forwarded exactly as the caller wrote it.
# =============================================================================

_HTTP_URL = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    _HTTP_URL.validate_python(value)
    return value


def _check_datetime(value: str) -> str:
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError("must be an ISO 8601 datetime, e.g. 2025-01-31T00:00:00Z") from None
    return value


_KIND_TO_TYPE: dict[str, Any] = {
    "integer": int,
    "number": float,
    "string": str,
    "boolean": bool,
    "url": Annotated[str, AfterValidator(_check_url)],
    "datetime": Annotated[str, AfterValidator(_check_datetime)],
    "string_list": list[str],
}


def _field_definition(spec: FieldSpec) -> tuple[Any, Any]:
    python_type = _KIND_TO_TYPE[spec.kind]
    if spec.required:
        return python_type, Field(..., description=spec.description)
    return Optional[python_type], Field(None, description=spec.description)


def build_input_model(spec: ToolSpec) -> type[BaseModel]:
    """Create the pydantic model that validates arguments for ``spec``."""
    return create_model(
        f"{spec.name}_arguments",
        __config__=ConfigDict(extra="ignore"),
        **{field.name: _field_definition(field) for field in spec.input_fields},
    )


def _format_validation_error(tool_name: str, exc: ValidationError) -> str:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
        for err in exc.errors()
    )
    return f"Error: Invalid arguments for {tool_name}: {problems}."


# =============================================================================
# FoloTool — one registered MCP tool per catalog entry
# =============================================================================
class FoloTool(Tool):
    """An MCP tool whose body is "validate, then call the Folo API"."""

    input_model: type[BaseModel]
    handler: Callable[[dict[str, Any]], Awaitable[ToolResult]]

    async def run(self, arguments: dict[str, Any]) -> FastMCPToolResult:
        _log_request(self.name, arguments or {})

        try:
            validated = self.input_model.model_validate(arguments or {})
        except ValidationError as exc:
            message = _format_validation_error(self.name, exc)
            _log_response(self.name, ToolResult.error(message))
            raise ToolError(message) from exc

        result = _log_response(
            self.name, await self.handler(validated.model_dump(exclude_none=True))
        )
        if result.is_error:
            raise ToolError(result.text)
        return FastMCPToolResult(content=[TextContent(type="text", text=result.text)])


def build_tool(
    spec: ToolSpec,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FoloTool:
    """Bind one catalog entry to the request translator."""

    async def handler(args: dict[str, Any]) -> ToolResult:
        return await send_api_query(
            spec.path,
            spec.http_method,
            args,
            settings=settings,
            transport=transport,
        )

    return FoloTool(
        name=spec.name,
        description=spec.description,
        parameters=spec.input_schema(),
        annotations=ToolAnnotations(
            readOnlyHint=spec.hints.read_only,
            destructiveHint=spec.hints.destructive,
            idempotentHint=spec.hints.idempotent,
            openWorldHint=spec.hints.open_world,
        ),
        input_model=build_input_model(spec),
        handler=handler,
    )


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
def create_server(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastMCP:
    """Build the server and register every catalog entry on it.

    ``transport`` is handed to every outbound httpx client; tests use it to
    fake the Folo API.
    """
    mcp = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS)
    for spec in TOOLS:
        mcp.add_tool(build_tool(spec, settings, transport))
    return mcp


# =============================================================================
# Server entry point
# =============================================================================
# The session token is read once, here.  A missing token is reported but is
# not fatal: the server still starts, and each tool call explains what's
# missing.
# =============================================================================
def main() -> None:
    _configure_logging()
    load_dotenv()

    settings = Settings.from_env()
    _log_status(f"Starting {SERVER_NAME} with {len(TOOLS)} tools against {settings.base_url}")
    if not settings.session_token:
        _log_status("FOLO_SESSION_TOKEN is not set; every tool call will return an error")

    create_server(settings).run()


if __name__ == "__main__":
    main()

# =============================================================================
# agent/folo_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates a Google ADK agent that talks to the Folo MCP server.  This is
#   one example of an "invoking host": it spawns tools/mcp_server.py as a
#   subprocess, discovers the catalog over MCP, and lets an LLM decide which
#   tools to call.
#
# HOW THE PIECES CONNECT:
#
#   ┌─────────────┐   LiteLlm    ┌──────────────┐
#   │  ADK Agent  │ ───────────→ │     LLM      │
#   └──────┬──────┘              └──────────────┘
#          │ MCP over stdio
#   ┌──────▼──────────────┐   HTTPS   ┌───────────────────┐
#   │ tools/mcp_server.py │ ────────→ │ api.follow.is     │
#   └─────────────────────┘           └───────────────────┘
#
# ENVIRONMENT:
#   FOLO_AGENT_MODEL    - LiteLlm model string (default: openrouter/openai/gpt-4o)
#   OPENROUTER_API_KEY  - read by LiteLlm for openrouter/* models
#   FOLO_*              - forwarded to the MCP server subprocess
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_folo_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def server_environment() -> dict[str, str]:
    """Environment for the MCP server subprocess.

    The MCP stdio client starts servers with a minimal environment, so the
    Folo settings have to be passed through explicitly.
    """
    return {key: value for key, value in os.environ.items() if key.startswith("FOLO_")}


def server_parameters() -> StdioServerParameters:
    """How ADK starts the Folo MCP server: this interpreter, ``-m tools.mcp_server``."""
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "tools.mcp_server"],
        cwd=project_root,
        env=server_environment(),
    )


def create_agent(model: str | None = None) -> Agent:
    """Create the Folo reading assistant.

    Args:
        model: LiteLlm model string.  Falls back to FOLO_AGENT_MODEL, then
            to DEFAULT_MODEL.

    Returns:
        A configured Google ADK Agent instance.
    """
    mcp_tools = MCPToolset(connection_params=server_parameters())

    return Agent(
        name="folo_reading_assistant",
        model=LiteLlm(model=model or os.environ.get("FOLO_AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_folo_assistant_prompt(),
        tools=[mcp_tools],
    )

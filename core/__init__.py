# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains everything that knows about the Folo API:
#
#   models.py   - ToolSpec / FieldSpec / ToolHints / ToolResult dataclasses
#   catalog.py  - the static table of tools (pure data)
#   config.py   - Settings resolved once from the environment
#   api.py      - send_api_query(), the request translator
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, MCP types, or Google ADK.  The
#   translator returns plain ToolResult objects; turning them into MCP
#   results is the job of tools/mcp_server.py.
# =============================================================================

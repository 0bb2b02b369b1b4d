# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains a Google ADK agent that uses the Folo MCP server.
#
# ARCHITECTURAL ROLE:
#   The agent is just one possible MCP host.  It:
#     1. Receives the user's question ("What's new in my tech feeds?")
#     2. Decides which Folo tools to call (via MCP)
#     3. Summarises the results for the user
#
# It holds no Folo logic of its own: the tool contracts come from
# core/catalog.py and every API call goes through tools/mcp_server.py.
# =============================================================================

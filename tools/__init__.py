# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server that exposes the Folo catalog.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/.  It:
#     1. Registers one MCP tool per entry in core.catalog.TOOLS
#     2. Validates arguments against each entry's declared fields
#     3. Calls core.api.send_api_query with the entry's fixed path/method
#     4. Reports error results to the host with isError=true
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build HTTP requests or parse responses (that's core/api.py)
#   - They do NOT declare schemas (that's core/catalog.py)
#   - They do NOT know about Google ADK
# =============================================================================

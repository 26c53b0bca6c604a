# =============================================================================
# tools/__init__.py
# =============================================================================
# This package exposes the FreeTable API as MCP tools.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP clients and core/:
#     - mcp_server.py  registers get_restaurants and create_booking on a
#                      FastMCP server and wraps core/ calls
#     - http_app.py    routes /sse, /sse/message and /mcp to that server
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build HTTP requests themselves (that's core/freetable.py)
#   - They do NOT decide what to book (that's the calling agent's job)
# =============================================================================

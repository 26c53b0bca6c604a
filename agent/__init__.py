# =============================================================================
# agent/__init__.py
# =============================================================================
# A demo booking assistant built with Google ADK.
#
# ARCHITECTURAL ROLE:
#   The agent is one possible MCP client of tools/mcp_server.py.  It:
#     1. Receives the user's request ("Book me a table for two on Friday")
#     2. Calls get_restaurants to see what is available
#     3. Collects the missing booking details from the user
#     4. Calls create_booking and reports the confirmation
#
#   It holds no booking logic; the server and the FreeTable API do the work.
# =============================================================================

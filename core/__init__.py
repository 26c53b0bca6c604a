# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL logic for talking to the FreeTable booking API.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK or FastMCP.  The modules here
#   are plain Python plus httpx:
#     - models.py      response shapes, the booking payload, result types
#     - freetable.py   the HTTP client (one request per call)
#     - formatting.py  ApiResult → text for the agent
# =============================================================================

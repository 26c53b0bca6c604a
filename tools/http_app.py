# =============================================================================
# tools/http_app.py  —  HTTP Transport Entry Point
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Serves the FreeTable MCP server over HTTP so remote agents can reach it.
#   One ASGI callable routes each request by path:
#
#     /sse, /sse/message   → SSE transport (long-lived stream + POST channel)
#     /mcp                 → streamable-HTTP transport
#     anything else        → 404 "Not found"
#
#   Both transports are bound to the SAME registry (one FastMCP instance).
#   The router itself holds no state.
#
# LIFESPAN:
#   The streamable-HTTP app runs a session manager that must be started by
#   the ASGI lifespan protocol, so lifespan events are forwarded to it.
#
# RUNNING:
#   python -m tools.http_app          (HOST / PORT from the environment)
# =============================================================================

import logging
import os
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.server.http import create_sse_app
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

SSE_PATH = "/sse"
SSE_MESSAGE_PATH = "/sse/message"
MCP_PATH = "/mcp"

# Starlette mounts the message endpoint as a prefix and redirects the bare
# path to its trailing-slash form, so both spellings reach the SSE app.
_SSE_PATHS = {SSE_PATH, SSE_MESSAGE_PATH, SSE_MESSAGE_PATH + "/"}


def route_requests(sse_app: ASGIApp, mcp_app: ASGIApp) -> ASGIApp:
    """Build the path router in front of the two transport apps."""
    not_found = PlainTextResponse("Not found", status_code=404)

    async def app(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await mcp_app(scope, receive, send)
            return

        path = scope.get("path", "")
        if path in _SSE_PATHS:
            await sse_app(scope, receive, send)
        elif path == MCP_PATH:
            await mcp_app(scope, receive, send)
        else:
            logger.info("No route for %s", path)
            await not_found(scope, receive, send)

    return app


def create_app(server: Optional[FastMCP] = None) -> ASGIApp:
    """Bind both transports of one MCP server behind the path router."""
    if server is None:
        from tools.mcp_server import mcp as server

    sse_app = create_sse_app(
        server=server,
        message_path=SSE_MESSAGE_PATH,
        sse_path=SSE_PATH,
    )
    mcp_app = server.http_app(path=MCP_PATH, transport="streamable-http")
    return route_requests(sse_app, mcp_app)


def run() -> None:
    """Serve the routed app with uvicorn."""
    load_dotenv()
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "8000"))
    logger.info("Serving FreeTable MCP on http://%s:%d (%s, %s)", host, port, SSE_PATH, MCP_PATH)
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    run()

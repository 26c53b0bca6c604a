# =============================================================================
# agent/booking_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures the booking assistant: a Google ADK agent whose reasoning
#   runs on an LLM reached through LiteLlm, and whose only capabilities are
#   the FreeTable MCP tools.
#
#     ADK Agent → LiteLlm → LLM provider
#         │
#         └── MCPToolset → FreeTable MCP server (tools/mcp_server.py)
#                              • get_restaurants
#                              • create_booking
#
# MCP CONNECTION (two modes):
#   - FREETABLE_MCP_URL set   → connect to a running server over
#                               streamable HTTP (e.g. http://host:8000/mcp)
#   - FREETABLE_MCP_URL unset → spawn `uv run python -m tools.mcp_server`
#                               and talk over stdio
#
# MODEL:
#   BOOKING_AGENT_MODEL picks the LiteLlm model string.  The default routes
#   GPT-4o through OpenRouter; LiteLlm reads OPENROUTER_API_KEY itself.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import (
    MCPToolset,
    StreamableHTTPConnectionParams,
)
from mcp import StdioServerParameters

from agent.prompt import get_booking_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def _connection_params():
    """Pick the MCP connection: remote HTTP if configured, else local stdio."""
    url = os.environ.get("FREETABLE_MCP_URL")
    if url:
        return StreamableHTTPConnectionParams(url=url)

    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return StdioServerParameters(
        command="uv",
        args=["run", "python", "-m", "tools.mcp_server"],
        cwd=project_root,
    )


def create_agent() -> Agent:
    """Create the FreeTable booking assistant.

    Returns:
        A configured Google ADK Agent wired to the FreeTable MCP tools.
    """
    mcp_tools = MCPToolset(connection_params=_connection_params())

    return Agent(
        name="freetable_booking_assistant",
        model=LiteLlm(model=os.environ.get("BOOKING_AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_booking_assistant_prompt(),
        tools=[mcp_tools],
    )

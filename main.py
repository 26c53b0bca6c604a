# =============================================================================
# main.py  —  Entry Point for the FreeTable Booking Assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/booking_agent.py)
#   2. Opens one conversation session
#   3. Sends each user message to the agent
#   4. Prints every FreeTable tool call and what it returned, so the
#      booking ID is visible even if the agent paraphrases it
#   5. Prints the agent's reply
#
# THE AGENT LOOP:
#   For "Book me a table for two at a French place tomorrow at 7pm" the
#   agent will typically:
#     a) Call get_restaurants              → "📋 Found 12 restaurants:"
#     b) Ask for name, email, phone, table
#     c) Confirm, then call create_booking → "✅ ... Booking ID**: 42"
#
# To use the HTTP server instead of a stdio subprocess, start
# `python -m tools.http_app` and set FREETABLE_MCP_URL=http://127.0.0.1:8000/mcp
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load environment variables from .env (OPENROUTER_API_KEY, FREETABLE_*, ...)
# before the agent reads them.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.booking_agent import create_agent

APP_NAME = "freetable_booking"
USER_ID = "demo_user"


# =============================================================================
# Tool result display
# =============================================================================
# ADK hands MCP tool results back as a dict.  For MCP tools that dict is
# the CallToolResult: {"content": [{"type": "text", "text": ...}], "isError": ...}.
# Plain function tools and ADK's own failures use {"result": ...} or
# {"error": ...} instead.
# =============================================================================
def tool_result_text(response) -> str:
    """Pull the text out of a tool response dict."""
    if not isinstance(response, dict):
        return "" if response is None else str(response)
    if response.get("error"):
        return str(response["error"])
    content = response.get("content")
    if isinstance(content, list):
        return "\n".join(
            item.get("text", "") for item in content
            if isinstance(item, dict) and item.get("type") == "text"
        )
    result = response.get("result")
    return "" if result is None else str(result)


def describe_tool_response(name: str, response) -> str:
    """One console block summarizing a FreeTable tool result."""
    text = tool_result_text(response).strip()
    failed = isinstance(response, dict) and (response.get("isError") or response.get("error"))

    if failed or text.startswith("Error"):
        return f"  ⚠️  {name} failed: {text or 'no details'}"
    if name == "get_restaurants":
        # Only the "Found N restaurants:" headline; the agent summarizes the rest.
        return f"  📋 {text.splitlines()[0] if text else 'No restaurants returned'}"
    if name == "create_booking":
        return "\n".join(f"  {line}" for line in text.splitlines())
    return f"  ↩️  {name}: {text}"


async def run_agent():
    """Run the booking assistant interactively."""

    # =========================================================================
    # Step 1: Create the agent
    # =========================================================================
    # LiteLlm model + FreeTable MCP toolset (stdio or FREETABLE_MCP_URL).
    print("=" * 70)
    print("  FREETABLE BOOKING ASSISTANT")
    print("  Powered by Google ADK + FastMCP")
    print("=" * 70)
    print("\n🔧 Connecting to the FreeTable tools...")
    agent = create_agent()

    # =========================================================================
    # Step 2: Create a Runner and Session
    # =========================================================================
    # One in-memory session holds the whole booking conversation, so details
    # given in earlier turns (name, email, date) are still known at booking.
    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Ready!\n")
    print("💬 Ask about restaurants or book a table.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    bookings_made: list[str] = []

    # =========================================================================
    # Step 3: Conversation loop
    # =========================================================================
    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            break

        if user_input.lower() in ("quit", "exit", "q"):
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        # =====================================================================
        # Step 4: Stream events — tool calls, tool results, final reply
        # =====================================================================
        # function_call     → the agent decided to hit FreeTable
        # function_response → what the MCP server answered
        # text              → the agent's own words (last one wins)
        # =====================================================================
        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if not (event.content and event.content.parts):
                continue
            for part in event.content.parts:
                if part.function_call:
                    print(f"  🔧 Calling {part.function_call.name}...")
                if part.function_response:
                    name = part.function_response.name
                    response = part.function_response.response
                    print(describe_tool_response(name, response))
                    text = tool_result_text(response)
                    if name == "create_booking" and "Booking ID" in text:
                        bookings_made.append(text)
                if part.text:
                    final_response = part.text

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Assistant:\n\n{final_response}")
        else:
            print("\n⚠️  No reply from the assistant. Check the tool output above.")

    # =========================================================================
    # Step 5: Session summary
    # =========================================================================
    print(f"\n\n👋 Goodbye! Bookings made this session: {len(bookings_made)}")


if __name__ == "__main__":
    asyncio.run(run_agent())

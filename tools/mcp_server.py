# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the MCP tools an agent can call to browse FreeTable restaurants
#   and book a table.  Each tool is a thin wrapper around core/: it calls
#   the FreeTable client, formats the result, and returns text.
#
# HOW IT WORKS (the flow):
#   1. An agent calls a tool by name via MCP (e.g., "create_booking")
#   2. FastMCP validates the arguments against the schema it derived from
#      the function signature.  Bad input (e.g., an invalid email) is
#      rejected here as an MCP error result; the handler never runs.
#   3. The handler makes ONE request through core.freetable.FreeTableClient
#   4. core.formatting turns the ApiResult into a text message
#   5. FastMCP wraps the text as {content: [{type: "text", text: ...}]}
#
# TOOLS:
#   - get_restaurants  → read-only listing, no arguments
#   - create_booking   → write; single attempt, no idempotency key
#
# RUNNING THIS SERVER:
#   a) stdio:  python -m tools.mcp_server   (what agent/ spawns)
#   b) HTTP:   python -m tools.http_app     (/sse, /sse/message, /mcp)
# =============================================================================

import json
import logging
import sys
from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import AfterValidator, Field
from pydantic.networks import validate_email

from core.formatting import format_booking, format_restaurants
from core.freetable import FreeTableClient
from core.models import BookingRequest

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: in stdio mode STDOUT carries the MCP JSON stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response text
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

SERVER_NAME = "FreeTable Restaurant Booking"
SERVER_VERSION = "1.0.0"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the tool response in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(text, ensure_ascii=False)}{_RESET}")
    return text


def _mask_contact(payload: dict) -> dict:
    """Hide most of the customer's email and phone before logging."""
    masked = dict(payload)
    email = masked.get("customerEmail") or ""
    local, _, domain = email.partition("@")
    masked["customerEmail"] = f"{local[:1]}***@{domain}" if domain else "***"
    phone = masked.get("customerPhone") or ""
    masked["customerPhone"] = f"***{phone[-2:]}" if len(phone) > 2 else "***"
    return masked


# =============================================================================
# Argument validation
# =============================================================================
# The email is checked with pydantic's validator and forwarded exactly as
# the caller typed it.
# =============================================================================
def _check_email(value: str) -> str:
    validate_email(value)
    return value


# =============================================================================
# Server factory
# =============================================================================
# The registry is an explicit FastMCP value built here, one per call.
# Tools are registered in order; FastMCP keeps name → (schema, handler).
# Tests pass their own FreeTableClient (backed by httpx.MockTransport).
# =============================================================================
def create_server(api: Optional[FreeTableClient] = None) -> FastMCP:
    """Build the FreeTable MCP server with both tools registered."""
    api = api or FreeTableClient()
    server = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    # -------------------------------------------------------------------------
    # TOOL 1: get_restaurants
    # -------------------------------------------------------------------------
    @server.tool()
    async def get_restaurants() -> str:
        """List all restaurants available for booking on FreeTable.

        WHEN TO CALL THIS: Before create_booking, to find a restaurant ID
        and show the user what is on offer.

        Returns:
            A text summary "Found N restaurants:" followed by one entry per
            restaurant with name, cuisine, description, price range,
            address and phone.  On failure, a message starting with
            "Error fetching restaurants:".
        """
        _log_request("get_restaurants")
        result = await api.list_restaurants()
        _log_status(f"Result: {type(result).__name__}")
        return _log_response("get_restaurants", format_restaurants(result))

    # -------------------------------------------------------------------------
    # TOOL 2: create_booking
    # -------------------------------------------------------------------------
    @server.tool()
    async def create_booking(
        restaurantId: Annotated[int, Field(description="ID of the restaurant to book")],
        tableId: Annotated[int, Field(description="ID of the table to book")],
        customerName: Annotated[str, Field(description="Full name of the customer")],
        customerEmail: Annotated[
            str,
            AfterValidator(_check_email),
            Field(description="Email address of the customer", json_schema_extra={"format": "email"}),
        ],
        customerPhone: Annotated[str, Field(description="Phone number of the customer")],
        bookingDate: Annotated[str, Field(description="Booking date in YYYY-MM-DD format")],
        bookingTime: Annotated[str, Field(description="Booking time in HH:MM format (24-hour)")],
        partySize: Annotated[int, Field(description="Number of people in the party")],
        specialRequests: Annotated[
            Optional[str], Field(description="Any special requests or notes")
        ] = None,
    ) -> str:
        """Create a table booking at a FreeTable restaurant.

        WHEN TO CALL THIS: Once the user has chosen a restaurant and table
        and given their name, email, phone, date, time and party size.
        Each call makes exactly one booking attempt; do not call it twice
        for the same reservation.

        Returns:
            A confirmation with date, time, party size, booking ID and
            status (and special requests, if any).  On failure, a message
            starting with "Error creating booking:".
        """
        request = BookingRequest(
            restaurant_id=restaurantId,
            table_id=tableId,
            customer_name=customerName,
            customer_email=customerEmail,
            customer_phone=customerPhone,
            booking_date=bookingDate,
            booking_time=bookingTime,
            party_size=partySize,
            special_requests=specialRequests,
        )
        _log_request("create_booking", **_mask_contact(request.to_payload()))
        result = await api.create_booking(request)
        _log_status(f"Result: {type(result).__name__}")
        return _log_response("create_booking", format_booking(result, specialRequests))

    return server


# The default server instance, backed by the live FreeTable API.
mcp = create_server()


# =============================================================================
# Server entry point
# =============================================================================
# When run directly (python -m tools.mcp_server), serve over stdio.
# =============================================================================
if __name__ == "__main__":
    mcp.run()

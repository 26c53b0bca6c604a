# =============================================================================
# core/formatting.py  —  Turning API results into agent-readable text
# =============================================================================
#
# The MCP tools return plain text, so this is where an ApiResult becomes
# the message the calling agent reads.  Each formatter handles all three
# result variants explicitly; there is no fall-through path.
# =============================================================================

from typing import Optional

from core.models import (
    ApiHttpError,
    ApiResult,
    ApiSuccess,
    ApiTransportError,
    Restaurant,
    parse_booking,
    parse_restaurants,
)


def _text(value) -> str:
    return "" if value is None else str(value)


def format_restaurant(restaurant: Restaurant) -> str:
    """Render one restaurant as a short multi-line block."""
    return (
        f"🍽️ **{_text(restaurant.name)}** ({_text(restaurant.cuisine)})\n"
        f"   {_text(restaurant.description)}\n"
        f"   Price: {_text(restaurant.price_range)}\n"
        f"   📍 {_text(restaurant.address)}\n"
        f"   📞 {_text(restaurant.phone)}\n"
    )


def format_restaurants(result: ApiResult) -> str:
    """Text for the get_restaurants tool."""
    if isinstance(result, ApiHttpError):
        return f"Error fetching restaurants: {result.status_code} {result.reason}"
    if isinstance(result, ApiTransportError):
        return f"Error fetching restaurants: {result.message}"

    restaurants = parse_restaurants(result.data)
    listing = "\n".join(format_restaurant(r) for r in restaurants)
    return f"Found {len(restaurants)} restaurants:\n\n{listing}"


def format_booking(result: ApiResult, special_requests: Optional[str] = None) -> str:
    """Text for the create_booking tool.

    ``special_requests`` is what the caller sent, echoed back when non-empty.
    """
    if isinstance(result, ApiHttpError):
        return (
            f"Error creating booking: {result.status_code} {result.reason}"
            f" - {result.body}"
        )
    if isinstance(result, ApiTransportError):
        return f"Error creating booking: {result.message}"

    booking = parse_booking(result.data) if isinstance(result, ApiSuccess) else None
    if booking is None:
        return "Error creating booking: response did not include booking details"

    lines = [
        "✅ Booking created successfully!",
        "",
        f"📅 **Date**: {_text(booking.booking_date)}",
        f"🕐 **Time**: {_text(booking.booking_time)}",
        f"👥 **Party Size**: {_text(booking.party_size)}",
        f"🔖 **Booking ID**: {_text(booking.id)}",
        f"📋 **Status**: {_text(booking.status)}",
    ]
    if special_requests:
        lines.append(f"📝 **Special Requests**: {special_requests}")
    return "\n".join(lines)

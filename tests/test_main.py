"""Tests for how the console shows FreeTable tool results."""

from main import describe_tool_response, tool_result_text


def mcp_result(text: str, is_error: bool = False) -> dict:
    return {"content": [{"type": "text", "text": text}], "isError": is_error}


def test_text_from_mcp_result():
    assert tool_result_text(mcp_result("Found 0 restaurants:")) == "Found 0 restaurants:"


def test_text_from_result_and_error_keys():
    assert tool_result_text({"result": "ok"}) == "ok"
    assert tool_result_text({"error": "boom"}) == "boom"
    assert tool_result_text(None) == ""


def test_booking_confirmation_is_shown_in_full():
    text = "✅ Booking created successfully!\n\n🔖 **Booking ID**: 9\n📋 **Status**: confirmed"

    shown = describe_tool_response("create_booking", mcp_result(text))

    assert "**Booking ID**: 9" in shown
    assert "confirmed" in shown


def test_restaurant_listing_shows_headline_only():
    text = "Found 2 restaurants:\n\n🍽️ **Cafe X** (French)\n"

    shown = describe_tool_response("get_restaurants", mcp_result(text))

    assert shown == "  📋 Found 2 restaurants:"


def test_error_text_is_flagged():
    shown = describe_tool_response(
        "create_booking", mcp_result("Error creating booking: 409 Conflict - taken")
    )

    assert shown.startswith("  ⚠️  create_booking failed:")
    assert "409" in shown


def test_validation_error_is_flagged():
    shown = describe_tool_response(
        "create_booking", mcp_result("Input validation error: customerEmail", is_error=True)
    )

    assert "failed" in shown
    assert "customerEmail" in shown

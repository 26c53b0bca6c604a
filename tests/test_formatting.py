"""Tests for turning API results into tool text."""

from core.formatting import format_booking, format_restaurants
from core.models import ApiHttpError, ApiSuccess, ApiTransportError

CAFE_X = {
    "id": 1,
    "name": "Cafe X",
    "cuisine": "French",
    "description": "Cozy",
    "priceRange": "$$",
    "address": "1 Main",
    "phone": "555-1",
    "email": "a@b.c",
}


def test_restaurants_listing():
    text = format_restaurants(ApiSuccess(data={"restaurants": [CAFE_X]}))

    assert text.startswith("Found 1 restaurants:\n\n")
    assert "🍽️ **Cafe X** (French)" in text
    assert "   Cozy\n" in text
    assert "   Price: $$\n" in text
    assert "📍 1 Main" in text
    assert "📞 555-1" in text


def test_restaurants_entries_separated_by_blank_line():
    second = dict(CAFE_X, name="Bistro Y")

    text = format_restaurants(ApiSuccess(data={"restaurants": [CAFE_X, second]}))

    assert text.startswith("Found 2 restaurants:")
    assert "📞 555-1\n\n🍽️ **Bistro Y**" in text


def test_restaurants_missing_array():
    assert format_restaurants(ApiSuccess(data={})).startswith("Found 0 restaurants")


def test_restaurants_http_error():
    text = format_restaurants(ApiHttpError(status_code=500, reason="Internal Server Error"))

    assert text == "Error fetching restaurants: 500 Internal Server Error"


def test_restaurants_transport_error():
    text = format_restaurants(ApiTransportError(message="timed out"))

    assert text == "Error fetching restaurants: timed out"


def test_booking_confirmation():
    booking = {
        "id": 9,
        "bookingDate": "2024-01-01",
        "bookingTime": "19:00",
        "partySize": 2,
        "status": "confirmed",
    }

    text = format_booking(ApiSuccess(data={"booking": booking}))

    assert "**Date**: 2024-01-01" in text
    assert "**Time**: 19:00" in text
    assert "**Party Size**: 2" in text
    assert "Booking ID**: 9" in text
    assert "confirmed" in text
    assert "Special Requests" not in text


def test_booking_echoes_special_requests():
    text = format_booking(ApiSuccess(data={"booking": {"id": 3}}), "Birthday cake")

    assert "**Special Requests**: Birthday cake" in text


def test_booking_http_error_includes_body():
    text = format_booking(ApiHttpError(status_code=400, reason="Bad Request", body="Table taken"))

    assert text == "Error creating booking: 400 Bad Request - Table taken"


def test_booking_transport_error():
    assert format_booking(ApiTransportError()) == "Error creating booking: Unknown error"


def test_booking_missing_details():
    text = format_booking(ApiSuccess(data={"ok": True}))

    assert text.startswith("Error creating booking:")

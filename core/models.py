# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of everything that crosses the
# FreeTable API boundary.  The backend owns the entities; we only describe
# what we read from it and what we send to it.
#
# TWO KINDS OF MODELS LIVE HERE:
#   1. Entity shapes (Restaurant, Booking, BookingRequest) — decoded
#      defensively from loose JSON.  A missing field is None, never a crash.
#   2. Result types (ApiSuccess, ApiHttpError, ApiTransportError) — every
#      outbound call ends in exactly one of these, so callers can enumerate
#      the outcomes instead of catching exceptions.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional, Union


# -----------------------------------------------------------------------------
# Restaurant — one entry of GET /api/restaurants
# -----------------------------------------------------------------------------
@dataclass
class Restaurant:
    """A restaurant as listed by the FreeTable API.

    All fields are passed through unmodified; the backend decides what
    they contain.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    cuisine: Optional[str] = None
    price_range: Optional[str] = None   # "$", "$$", "$$$" ...
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict) -> "Restaurant":
        return cls(
            id=raw.get("id"),
            name=raw.get("name"),
            description=raw.get("description"),
            cuisine=raw.get("cuisine"),
            price_range=raw.get("priceRange"),
            address=raw.get("address"),
            phone=raw.get("phone"),
            email=raw.get("email"),
        )


# -----------------------------------------------------------------------------
# Booking — the backend's record of a created booking
# -----------------------------------------------------------------------------
@dataclass
class Booking:
    """A booking returned by POST /api/bookings."""

    id: Optional[int] = None
    booking_date: Optional[str] = None
    booking_time: Optional[str] = None
    party_size: Optional[int] = None
    status: Optional[str] = None
    restaurant_id: Optional[int] = None
    table_id: Optional[int] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    special_requests: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict) -> "Booking":
        return cls(
            id=raw.get("id"),
            booking_date=raw.get("bookingDate"),
            booking_time=raw.get("bookingTime"),
            party_size=raw.get("partySize"),
            status=raw.get("status"),
            restaurant_id=raw.get("restaurantId"),
            table_id=raw.get("tableId"),
            customer_name=raw.get("customerName"),
            customer_email=raw.get("customerEmail"),
            customer_phone=raw.get("customerPhone"),
            special_requests=raw.get("specialRequests"),
        )


# -----------------------------------------------------------------------------
# BookingRequest — what we send to POST /api/bookings
# -----------------------------------------------------------------------------
@dataclass
class BookingRequest:
    """A booking creation request.

    bookingDate (YYYY-MM-DD) and bookingTime (HH:MM, 24-hour) are passed
    through as given; the backend is the judge of their format.
    """

    restaurant_id: int
    table_id: int
    customer_name: str
    customer_email: str
    customer_phone: str
    booking_date: str
    booking_time: str
    party_size: int
    special_requests: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        """Build the camelCase JSON body the backend expects.

        Every key is always present; an absent special request is sent
        as the empty string.
        """
        return {
            "restaurantId": self.restaurant_id,
            "tableId": self.table_id,
            "customerName": self.customer_name,
            "customerEmail": self.customer_email,
            "customerPhone": self.customer_phone,
            "bookingDate": self.booking_date,
            "bookingTime": self.booking_time,
            "partySize": self.party_size,
            "specialRequests": self.special_requests or "",
        }


# =============================================================================
# Result types — the three ways an outbound call can end
# =============================================================================
@dataclass
class ApiSuccess:
    """2xx response whose body decoded as JSON."""

    data: Any = field(default_factory=dict)


@dataclass
class ApiHttpError:
    """Non-2xx response.  The body is kept as raw text."""

    status_code: int
    reason: str = ""
    body: str = ""


@dataclass
class ApiTransportError:
    """Network failure or a body that could not be decoded."""

    message: str = "Unknown error"


ApiResult = Union[ApiSuccess, ApiHttpError, ApiTransportError]


# =============================================================================
# Defensive decoders
# =============================================================================
def parse_restaurants(data: Any) -> list[Restaurant]:
    """Extract the ``restaurants`` array, or [] if it is missing or malformed."""
    if not isinstance(data, dict):
        return []
    raw = data.get("restaurants")
    if not isinstance(raw, list):
        return []
    return [Restaurant.from_dict(item) for item in raw if isinstance(item, dict)]


def parse_booking(data: Any) -> Optional[Booking]:
    """Extract the ``booking`` object, or None if it is missing or malformed."""
    if not isinstance(data, dict):
        return None
    raw = data.get("booking")
    if not isinstance(raw, dict):
        return None
    return Booking.from_dict(raw)

# =============================================================================
# core/freetable.py  —  FreeTable REST API Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Talks to the FreeTable booking API.  Two endpoints are used:
#     GET  <base>/api/restaurants   → {"restaurants": [...]}
#     POST <base>/api/bookings      → {"booking": {...}}
#
# THE CONTRACT:
#   Every public method performs exactly ONE request and returns an
#   ApiResult (see core/models.py):
#     - ApiSuccess         2xx, body decoded as JSON
#     - ApiHttpError       non-2xx, body kept as text
#     - ApiTransportError  connection failure or undecodable body
#   Exceptions stop at this module.  Nothing above it needs try/except.
#
# CONFIGURATION:
#   FREETABLE_API_BASE  overrides the API origin.
#   FREETABLE_TIMEOUT   overrides httpx's default timeout (seconds).
#   Both are read on every call, so tests and .env files can change them.
# =============================================================================

import logging
import os
from typing import Any, Optional

import httpx

from core.models import (
    ApiHttpError,
    ApiResult,
    ApiSuccess,
    ApiTransportError,
    BookingRequest,
)

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://free-table.gyurmatag.workers.dev"

RESTAURANTS_PATH = "/api/restaurants"
BOOKINGS_PATH = "/api/bookings"


def get_api_base() -> str:
    """Return the FreeTable API origin, without a trailing slash."""
    return os.environ.get("FREETABLE_API_BASE", DEFAULT_API_BASE).rstrip("/")


def get_timeout() -> Optional[float]:
    """Return FREETABLE_TIMEOUT in seconds, or None to keep httpx's default."""
    raw = os.environ.get("FREETABLE_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric FREETABLE_TIMEOUT=%r", raw)
        return None


def _error_message(exc: Exception) -> str:
    return str(exc) or "Unknown error"


class FreeTableClient:
    """Async client for the FreeTable API.

    Args:
        base_url: API origin.  Defaults to get_api_base() at call time.
        transport: Optional httpx transport.  Tests pass an
            httpx.MockTransport here; production leaves it as None.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/") if base_url else None
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url or get_api_base()

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {"base_url": self.base_url}
        timeout = get_timeout()
        if timeout is not None:
            kwargs["timeout"] = timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def _request(self, method: str, path: str, **kwargs) -> ApiResult:
        logger.info("%s %s%s", method, self.base_url, path)
        try:
            async with self._client() as client:
                response = await client.request(method, path, **kwargs)
                if not response.is_success:
                    logger.warning(
                        "%s %s failed: %s %s",
                        method, path, response.status_code, response.reason_phrase,
                    )
                    return ApiHttpError(
                        status_code=response.status_code,
                        reason=response.reason_phrase,
                        body=response.text,
                    )
                return ApiSuccess(data=response.json())
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("%s %s raised %s: %s", method, path, type(exc).__name__, exc)
            return ApiTransportError(message=_error_message(exc))

    async def list_restaurants(self) -> ApiResult:
        """GET /api/restaurants."""
        return await self._request("GET", RESTAURANTS_PATH)

    async def create_booking(self, request: BookingRequest) -> ApiResult:
        """POST /api/bookings with the full creation payload."""
        return await self._request("POST", BOOKINGS_PATH, json=request.to_payload())

"""Marketplace service — synthesizes responses for the write-stub endpoints.

Learn: Nothing here is persisted. Each "create" call just builds a
plausible payload: a timestamp-based identifier plus whatever the client
sent. The clock and random source are injected so tests can pin the
generated ids and the matched-professionals count.
"""

import random
import time
from typing import Any, Callable, Optional

import structlog

from wideangu.schemas.requests import InstantCaptureRequest, RegisterRequest

logger = structlog.get_logger()

# Placeholder credential returned by /auth/register; not a real token
PLACEHOLDER_TOKEN = "jwt_token_here"

MIN_MATCHED = 1
MAX_MATCHED = 10


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class MarketplaceService:
    """Stub business logic for capture requests, registration and bookings."""

    def __init__(
        self,
        clock: Callable[[], int] = _epoch_ms,
        rng: Optional[random.Random] = None,
    ):
        self.clock = clock
        self.rng = rng or random.Random()

    # ─── Instant capture ────────────────────────────────

    def request_instant_capture(self, body: InstantCaptureRequest) -> dict[str, Any]:
        """Echo the capture request with a request id and a random match count.

        matchedProfessionals is NOT an actual match; it's a uniform
        random integer in [1, 10].
        """
        request_id = f"REQ_{self.clock()}"
        matched = self.rng.randint(MIN_MATCHED, MAX_MATCHED)
        echoed = body.model_dump(
            include={"services", "location", "date"}, exclude_unset=True
        )
        logger.info(
            "capture.requested", request_id=request_id, matched=matched
        )
        return {
            "requestId": request_id,
            **echoed,
            "matchedProfessionals": matched,
        }

    # ─── Registration ───────────────────────────────────

    def register_user(self, body: RegisterRequest) -> dict[str, Any]:
        """Build a user record and placeholder token without storing anything.

        professionalType only survives when userType is exactly
        "professional"; for everyone else it's nulled.
        """
        sent = body.model_dump(
            include={"email", "user_type"}, by_alias=True, exclude_unset=True
        )
        is_professional = body.user_type == "professional"
        user = {
            "id": self.clock(),
            **sent,
            "professionalType": body.professional_type if is_professional else None,
        }
        logger.info("user.registered", user_id=user["id"], professional=is_professional)
        return {"user": user, "token": PLACEHOLDER_TOKEN}

    # ─── Bookings ───────────────────────────────────────

    def create_booking(self) -> dict[str, Any]:
        booking_id = f"BOOK_{self.clock()}"
        logger.info("booking.created", booking_id=booking_id)
        return {
            "bookingId": booking_id,
            "status": "pending",
            "message": "Booking created successfully",
        }


def get_marketplace_service() -> MarketplaceService:
    """FastAPI dependency; swap via dependency_overrides to pin clock and rng."""
    return MarketplaceService()

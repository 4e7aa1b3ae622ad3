"""Per-restaurant outcome of a single availability check."""

from enum import Enum

from pydantic import BaseModel, Field

from resdiary_notifier.models.availability import TimeSlot


class CheckStatus(str, Enum):
    """Outcome of checking one restaurant."""

    SLOTS_FOUND = "slots_found"
    NO_SLOTS = "no_slots"
    FAILED = "failed"


class RestaurantCheckResult(BaseModel):
    """Result of querying and processing one restaurant."""

    restaurant: str = Field(..., description="ResDiary restaurant identifier")
    status: CheckStatus = Field(..., description="Check outcome")
    accepted: list[TimeSlot] = Field(
        default_factory=list, description="Slots before the cutoff"
    )
    rejected: list[TimeSlot] = Field(
        default_factory=list, description="Slots at or after the cutoff"
    )
    notifications_sent: int = Field(
        0, description="Notifications the provider accepted"
    )
    error: str | None = Field(None, description="Failure reason if the check failed")

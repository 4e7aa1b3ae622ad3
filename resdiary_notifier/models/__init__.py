"""Data models for the ResDiary notifier."""

from resdiary_notifier.models.availability import AvailabilityResponse, TimeSlot
from resdiary_notifier.models.result import CheckStatus, RestaurantCheckResult

__all__ = ["AvailabilityResponse", "CheckStatus", "RestaurantCheckResult", "TimeSlot"]

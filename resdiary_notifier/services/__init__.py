"""Services for the ResDiary notifier."""

from resdiary_notifier.services.availability_client import (
    AvailabilityClient,
    AvailabilityError,
)
from resdiary_notifier.services.pushover_service import PushoverService
from resdiary_notifier.services.slot_checker import SlotChecker
from resdiary_notifier.services.slot_filter import is_slot_acceptable

__all__ = [
    "AvailabilityClient",
    "AvailabilityError",
    "PushoverService",
    "SlotChecker",
    "is_slot_acceptable",
]

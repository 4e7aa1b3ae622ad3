"""Cutoff filtering for offered time slots."""

from datetime import datetime


def slot_cutoff(slot_time: datetime, cutoff_hour: int, cutoff_minute: int) -> datetime:
    """Return the cutoff on the same calendar day (and tzinfo) as the slot."""
    return slot_time.replace(
        hour=cutoff_hour, minute=cutoff_minute, second=0, microsecond=0
    )


def is_slot_acceptable(
    slot_time: datetime, cutoff_hour: int, cutoff_minute: int
) -> bool:
    """Check whether a slot starts strictly before the cutoff.

    A slot exactly at the cutoff is rejected.
    """
    return slot_time < slot_cutoff(slot_time, cutoff_hour, cutoff_minute)

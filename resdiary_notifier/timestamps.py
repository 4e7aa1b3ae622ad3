"""ResDiary timestamp handling.

ResDiary returns slot times as local wall-clock strings such as
``2024-12-21T19:30:00`` with no offset and no fractional seconds. These are
parsed into naive datetimes and rendered back in exactly the same form.
"""

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

TIMESLOT_FORMAT = "%Y-%m-%dT%H:%M:%S"

_TIMESLOT_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}", re.ASCII)


class TimeSlotFormatError(ValueError):
    """Raised when a string is not a ResDiary slot timestamp."""


def parse_timeslot(value: str) -> datetime:
    """Parse a ``YYYY-MM-DDTHH:MM:SS`` string into a naive datetime.

    Args:
        value: Timestamp string as sent by ResDiary

    Returns:
        Naive datetime in the restaurant's local time

    Raises:
        TimeSlotFormatError: If the string is not in the exact format
    """
    if not isinstance(value, str) or not _TIMESLOT_RE.fullmatch(value):
        msg = f"invalid ResDiary timestamp {value!r}, expected YYYY-MM-DDTHH:MM:SS"
        raise TimeSlotFormatError(msg)

    try:
        return datetime.strptime(value, TIMESLOT_FORMAT)  # noqa: DTZ007
    except ValueError as e:
        msg = f"invalid ResDiary timestamp {value!r}: {e}"
        raise TimeSlotFormatError(msg) from e


def format_timeslot(value: datetime) -> str:
    """Render a datetime in the ResDiary ``YYYY-MM-DDTHH:MM:SS`` format."""
    # isoformat keeps the year zero padded, unlike strftime("%Y") on glibc
    return value.replace(tzinfo=None, microsecond=0).isoformat()


def _validate_timeslot(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    return parse_timeslot(value)


ResDiaryDateTime = Annotated[
    datetime,
    BeforeValidator(_validate_timeslot),
    PlainSerializer(format_timeslot, return_type=str),
]

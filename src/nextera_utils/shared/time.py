"""Time utilities.

Offsets are handled against a fixed table of ``UTC±HH:MM`` strings rather
than the IANA database.
"""

import logging
import re
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

DEFAULT_OFFSET = "UTC+00:00"

SUPPORTED_OFFSETS: tuple[str, ...] = (
    "UTC-12:00",
    "UTC-11:00",
    "UTC-10:00",
    "UTC-09:30",
    "UTC-09:00",
    "UTC-08:00",
    "UTC-07:00",
    "UTC-06:00",
    "UTC-05:00",
    "UTC-04:30",
    "UTC-04:00",
    "UTC-03:30",
    "UTC-03:00",
    "UTC-02:00",
    "UTC-01:00",
    "UTC+00:00",
    "UTC+01:00",
    "UTC+02:00",
    "UTC+03:00",
    "UTC+03:30",
    "UTC+04:00",
    "UTC+04:30",
    "UTC+05:00",
    "UTC+05:30",
    "UTC+05:45",
    "UTC+06:00",
    "UTC+06:30",
    "UTC+07:00",
    "UTC+08:00",
    "UTC+08:30",
    "UTC+08:45",
    "UTC+09:00",
    "UTC+09:30",
    "UTC+10:00",
    "UTC+10:30",
    "UTC+11:00",
    "UTC+11:30",
    "UTC+12:00",
    "UTC+12:45",
    "UTC+13:00",
    "UTC+14:00",
)

_DIGITS = re.compile(r"[0-9]+")


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def naive_utc_now() -> datetime:
    """Return current UTC datetime without tzinfo."""
    return utc_now().replace(tzinfo=None)


def local_now() -> datetime:
    """Return current local datetime without tzinfo."""
    return datetime.now()


def supported_offsets() -> list[str]:
    """Return the supported offsets, ordered from UTC-12:00 to UTC+14:00."""
    return list(SUPPORTED_OFFSETS)


def validate_offset(offset: str) -> str:
    """Return ``offset`` if it is supported, otherwise ``UTC+00:00``."""
    if offset in SUPPORTED_OFFSETS:
        return offset
    return DEFAULT_OFFSET


def convert_offset(dt: datetime, offset: str) -> datetime:
    """Shift ``dt`` by a ``UTC±HH:MM`` offset.

    Malformed offsets are not an error: ``dt`` is returned unchanged.
    The offset is not checked against ``SUPPORTED_OFFSETS``; use
    ``validate_offset`` first when that matters.

    Parameters
    ----------
    dt
        Datetime to shift, naive or aware
    offset
        Offset string such as ``"UTC+06:30"``

    Returns
    -------
    The shifted datetime, or ``dt`` if the offset cannot be parsed
    """
    parts = offset.split(":")
    if len(parts) != 2 or len(parts[0]) != 6:
        logger.debug("Ignoring malformed offset %r", offset)
        return dt

    sign = parts[0][3]
    hours, minutes = parts[0][4:6], parts[1]
    if sign not in "+-" or not _DIGITS.fullmatch(hours) or not _DIGITS.fullmatch(minutes):
        logger.debug("Ignoring malformed offset %r", offset)
        return dt

    delta = timedelta(minutes=int(hours) * 60 + int(minutes))
    return dt + delta if sign == "+" else dt - delta

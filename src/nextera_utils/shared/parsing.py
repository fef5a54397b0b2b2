"""Best-effort string to number parsing.

Only ASCII digits with an optional sign are accepted. Whitespace,
underscores and other characters Python's ``int()`` would tolerate are
rejected, and so are values outside the target range.
"""

import re

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT16_MAX = 2**16 - 1

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")


def optional_str_to_int32(value: str | None) -> int | None:
    """Parse an optional string into a signed 32-bit integer.

    >>> optional_str_to_int32("200")
    200
    >>> optional_str_to_int32("hello") is None
    True
    """
    if value is None or not _SIGNED.fullmatch(value):
        return None
    number = int(value)
    if not INT32_MIN <= number <= INT32_MAX:
        return None
    return number


def str_to_uint16(value: str) -> int | None:
    """Parse a string into an unsigned 16-bit integer.

    >>> str_to_uint16("200")
    200
    >>> str_to_uint16("-1") is None
    True
    """
    if not _UNSIGNED.fullmatch(value):
        return None
    number = int(value)
    if number > UINT16_MAX:
        return None
    return number

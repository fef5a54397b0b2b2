"""Shared helpers: time conversion and number parsing."""

from nextera_utils.shared.parsing import optional_str_to_int32, str_to_uint16
from nextera_utils.shared.time import (
    DEFAULT_OFFSET,
    SUPPORTED_OFFSETS,
    convert_offset,
    local_now,
    naive_utc_now,
    supported_offsets,
    utc_now,
    validate_offset,
)

__all__ = [
    # Time
    "DEFAULT_OFFSET",
    "SUPPORTED_OFFSETS",
    "convert_offset",
    "local_now",
    "naive_utc_now",
    "supported_offsets",
    "utc_now",
    "validate_offset",
    # Parsing
    "optional_str_to_int32",
    "str_to_uint16",
]

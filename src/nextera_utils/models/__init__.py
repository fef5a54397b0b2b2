"""Data envelopes used to carry results between services."""

from nextera_utils.models.cache import CacheData
from nextera_utils.models.responses import (
    ResponseData,
    ResponseMessage,
    ServiceResponse,
)

__all__ = [
    "CacheData",
    "ResponseData",
    "ResponseMessage",
    "ServiceResponse",
]

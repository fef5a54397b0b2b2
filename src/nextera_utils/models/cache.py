"""Cache envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class CacheData(BaseModel, Generic[T]):
    """A cached page of items.

    Round-trips through ``model_dump_json`` / ``model_validate_json`` so it
    can be stored as a string in a cache.
    """

    data: list[T] = Field(..., description="Cached items")
    total: int = Field(..., description="Total number of items")

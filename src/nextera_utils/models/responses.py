"""Response envelopes shared by services."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ResponseMessage(BaseModel):
    """Plain message response."""

    message: str = Field(..., description="Message for the caller")


class ResponseData(BaseModel, Generic[T]):
    """A page of items with the total number of items available."""

    data: list[T] = Field(..., description="Items of the current page")
    total: int = Field(..., description="Total number of items")


class ServiceResponse(BaseModel):
    """Status code and message returned by a downstream service."""

    status_code: int = Field(..., ge=0, le=65535, description="HTTP status code")
    message: str = Field(..., description="Status message")

"""Unit tests for response and cache envelopes."""

import pytest
from pydantic import BaseModel, ValidationError

from nextera_utils.models import (
    CacheData,
    ResponseData,
    ResponseMessage,
    ServiceResponse,
)


class Item(BaseModel):
    id: int
    name: str


class TestResponseMessage:
    """Tests for ResponseMessage."""

    def test_message(self):
        """Should carry the message."""
        response = ResponseMessage(message="Hello")

        assert response.message == "Hello"
        assert response.model_dump() == {"message": "Hello"}


class TestResponseData:
    """Tests for ResponseData."""

    def test_data_and_total(self):
        """Should carry the page and the total."""
        response = ResponseData[int](data=[1, 2, 3], total=3)

        assert len(response.data) == 3
        assert response.total == 3

    def test_nested_models_serialize(self):
        """Should serialize nested models."""
        response = ResponseData[Item](data=[Item(id=1, name="a")], total=10)

        assert response.model_dump() == {"data": [{"id": 1, "name": "a"}], "total": 10}

    def test_rejects_wrong_item_type(self):
        """Should validate item types."""
        with pytest.raises(ValidationError):
            ResponseData[int](data=["not a number"], total=1)


class TestServiceResponse:
    """Tests for ServiceResponse."""

    def test_fields(self):
        """Should carry status code and message."""
        response = ServiceResponse(status_code=200, message="Hello")

        assert response.status_code == 200
        assert response.message == "Hello"

    @pytest.mark.parametrize("status_code", [-1, 65536])
    def test_status_code_range(self, status_code):
        """Should reject status codes outside 0..65535."""
        with pytest.raises(ValidationError):
            ServiceResponse(status_code=status_code, message="Hello")


class TestCacheData:
    """Tests for CacheData."""

    def test_data_and_total(self):
        """Should carry the cached page and the total."""
        cached = CacheData[int](data=[1, 2, 3], total=3)

        assert len(cached.data) == 3
        assert cached.total == 3

    def test_restores_from_cached_json(self):
        """Should load a page stored as JSON."""
        raw = '{"data": [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}], "total": 2}'

        cached = CacheData[Item].model_validate_json(raw)

        assert cached.data[1] == Item(id=2, name="b")
        assert cached.total == 2

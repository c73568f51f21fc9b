"""
Shared pydantic building blocks.

``CamelModel`` gives every payload the camelCase wire format used by
the storefront (``isFeatured``, ``imageUrl``...) while keeping
snake_case attribute names in Python; both spellings are accepted on
input.  Request bodies derive from ``PayloadModel``, which strips
surrounding whitespace so a blank string never passes for a value.
``RecordModel`` is the base of every stored entity: it carries the
``id`` and folds an upstream ``_id`` key into it.  ``ApiResponse`` is
the envelope wrapped around every response body.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PayloadModel(CamelModel):
    """Base class for request bodies; surrounding whitespace is stripped
    before length checks apply."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)


class RecordModel(CamelModel):
    """Base class for stored entities.

    Records are replaced as a whole and never mutated in place, hence
    ``frozen``.
    """

    id: str = Field(..., description="Identifier assigned by the store")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def normalize_upstream_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and "_id" in data and "id" not in data:
            data = dict(data)
            data["id"] = data.pop("_id")
        return data


class Pagination(BaseModel):
    page: int
    limit: int
    total: int


class ApiResponse(BaseModel, Generic[T]):
    """Uniform response envelope.

    ``pagination`` is part of the contract for compatibility with the
    upstream content API but lists are always returned in full.
    """

    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    pagination: Optional[Pagination] = None


def envelope(data: Any = None, message: Optional[str] = None) -> dict:
    """Build a success envelope for ``data``."""
    return {"success": True, "message": message, "data": data}

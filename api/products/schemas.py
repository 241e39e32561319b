"""
Product API schemas (request/response models).

Request models carry the field rules; `validation.MESSAGES` turns their
failures into the messages clients see.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


class _ProductFields(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100, examples=["Curved 49 inch monitor"])
    price: float = Field(..., gt=0, allow_inf_nan=False, examples=[399])

    @field_validator("price", mode="before")
    @classmethod
    def _reject_bool_price(cls, value: Any) -> Any:
        # bool is an int subclass; lax float parsing would store true as 1.0.
        if isinstance(value, bool):
            raise PydanticCustomError("float_type", "Input should be a valid number")
        return value


class ProductCreate(_ProductFields):
    # Omitted -> the table default applies.
    availability: bool | None = Field(default=None, examples=[True])


class ProductUpdate(_ProductFields):
    availability: bool = Field(..., examples=[True])


class Product(BaseModel):
    id: int = Field(..., description="The product ID", examples=[1])
    name: str = Field(..., description="The product name", examples=["Curved 49 inch monitor"])
    price: float = Field(..., description="The product price", examples=[300])
    availability: bool = Field(..., description="The product availability", examples=[True])
    created_at: datetime
    updated_at: datetime


class ProductResponse(BaseModel):
    data: Product


class ProductListResponse(BaseModel):
    data: list[Product]


class MessageResponse(BaseModel):
    data: str = Field(..., examples=["Product deleted"])


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Product not found"])


class ValidationErrorItem(BaseModel):
    location: str
    field: str | None = None
    message: str


class ValidationErrorResponse(BaseModel):
    errors: list[ValidationErrorItem]

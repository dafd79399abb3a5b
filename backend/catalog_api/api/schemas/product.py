"""Pydantic models describing Product payloads."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

PRICE_FIELD = dict(max_digits=12, decimal_places=2)

# Bounds of the INTEGER columns backing ids, categories and stock
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class CamelModel(BaseModel):
    """Exchange camelCase JSON keys while keeping snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductCreate(CamelModel):
    code: str = Field(..., min_length=1, max_length=64, description="Business-unique code")
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: Decimal = Field(..., **PRICE_FIELD, description="Must be greater than zero")
    category_id: int = Field(..., ge=1, le=INT32_MAX)
    stock_quantity: int = Field(..., ge=0, le=INT32_MAX)


class ProductUpdate(ProductCreate):
    """Full replacement of every mutable field."""

    id: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    active: bool


class ProductPatch(CamelModel):
    """Partial update; only the keys present in the request are applied."""

    id: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    code: str | None = Field(None, min_length=1, max_length=64)
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    price: Decimal | None = Field(None, **PRICE_FIELD)
    category_id: int | None = Field(None, ge=1, le=INT32_MAX)
    stock_quantity: int | None = Field(None, ge=0, le=INT32_MAX)
    active: bool | None = None


class ProductRead(CamelModel):
    id: int
    code: str
    name: str
    description: str | None = None
    price: Decimal
    category_id: int
    stock_quantity: int
    active: bool
    created_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


class ErrorResponse(BaseModel):
    error: str

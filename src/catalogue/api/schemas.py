"""Pydantic request schemas for the Catalogue API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductForm(BaseModel):
    """Fields of the multipart product creation form."""

    title: str = Field(..., max_length=200)
    description: str | None = Field(None, max_length=500)
    price_amount: float
    price_currency: Literal["USD", "INR"] = "INR"
    stock: int = Field(0, ge=0)

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title is required")
        return value.strip()

    @field_validator("price_amount")
    @classmethod
    def price_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Price amount must be a positive number")
        return value


class PriceIn(BaseModel):
    amount: float | None = Field(None, gt=0)
    currency: Literal["USD", "INR"] | None = None


class UpdateProductRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"title": "Handloom Saree", "price": {"amount": 2499, "currency": "INR"}, "stock": 12}]
        }
    )

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=500)
    price: PriceIn | None = None
    stock: int | None = Field(None, ge=0)

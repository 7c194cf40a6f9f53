"""Pydantic request schemas for the Cart API."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def check_product_id(value: str) -> str:
    """Validate a product id and return it in canonical lower-case hyphenated form."""
    try:
        return str(UUID(str(value)))
    except ValueError:
        raise ValueError("invalid Product Id format") from None


def _check_quantity(value: int) -> int:
    if value < 1:
        raise ValueError("Quantity must be a positive integer")
    return value


ProductId = Annotated[str, AfterValidator(check_product_id)]
Quantity = Annotated[int, AfterValidator(_check_quantity)]


class AddItemRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"examples": [{"productId": "3f6c1a52-8c8e-4b8a-9a51-2f0b8f0f8a11", "qty": 2}]},
    )

    product_id: ProductId = Field(..., alias="productId")
    qty: Quantity


class UpdateItemRequest(BaseModel):
    qty: Quantity

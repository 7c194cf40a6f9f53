"""Pydantic request schemas for the Ordering API."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

_SIX_DIGITS = re.compile(r"^\d{6}$")


class ShippingAddressIn(BaseModel):
    """A shipping address; each missing or blank part is reported by name."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"street": "12 MG Road", "city": "Bengaluru", "state": "KA", "country": "India", "pincode": "560001"}
            ]
        },
    )

    street: str | None = Field(None, max_length=255, validate_default=True)
    city: str | None = Field(None, max_length=100, validate_default=True)
    state: str | None = Field(None, max_length=100, validate_default=True)
    country: str | None = Field(None, max_length=100, validate_default=True)
    pincode: str | None = Field(None, validate_default=True)

    @field_validator("street", "city", "state", "country", "pincode", mode="before")
    @classmethod
    def part_is_present(cls, value, info: ValidationInfo):
        label = info.field_name.capitalize()
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError(f"{label} is required")
        if not isinstance(value, str):
            raise ValueError(f"{label} must be a string")
        return value.strip()

    @field_validator("pincode")
    @classmethod
    def pincode_is_six_digits(cls, value: str) -> str:
        if not _SIX_DIGITS.match(value):
            raise ValueError("Pincode must be exactly 6 digits")
        return value


class PlaceOrderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    shipping_address: ShippingAddressIn = Field(..., alias="shippingAddress")


class UpdateAddressRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    shipping_address: ShippingAddressIn = Field(..., alias="shippingAddress")


class CancelOrderRequest(BaseModel):
    reason: str | None = Field(None, max_length=500)


class UpdateStatusRequest(BaseModel):
    status: str

    @field_validator("status")
    @classmethod
    def status_is_forward(cls, value: str) -> str:
        value = value.upper()
        if value not in ("SHIPPED", "DELIVERED"):
            raise ValueError("Status must be either SHIPPED or DELIVERED")
        return value

"""Pydantic request schemas for the Auth API.

Field names follow the public JSON contract (camelCase aliases); validation
messages are returned verbatim as the `message` of a 400 response.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_SIX_DIGITS = re.compile(r"^\d{6}$")


def _check_email(value: str | None) -> str | None:
    if value is not None and not _EMAIL.match(value):
        raise ValueError("Invalid email address")
    return value


class FullNameIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName", max_length=100)
    last_name: str = Field(..., alias="lastName", max_length=100)

    @field_validator("first_name")
    @classmethod
    def first_name_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("First Name is required!")
        return value.strip()

    @field_validator("last_name")
    @classmethod
    def last_name_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Last Name is required")
        return value.strip()


class AddressIn(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "street": "12 MG Road",
                    "city": "Bengaluru",
                    "state": "KA",
                    "country": "India",
                    "pincode": "560001",
                    "isDefault": True,
                }
            ]
        },
    )

    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    country: str = Field(..., min_length=1, max_length=100)
    pincode: str
    phone: str | None = Field(None, max_length=20)
    is_default: bool = Field(False, alias="isDefault")

    @field_validator("pincode")
    @classmethod
    def pincode_is_six_digits(cls, value: str) -> str:
        if not _SIX_DIGITS.match(value):
            raise ValueError("Pincode must be exactly 6 digits")
        return value


class RegisterRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "username": "asha",
                    "email": "asha@example.com",
                    "password": "secret123",
                    "fullName": {"firstName": "Asha", "lastName": "Rao"},
                    "role": "user",
                }
            ]
        },
    )

    username: str = Field(..., max_length=50)
    email: str = Field(..., max_length=254)
    password: str
    full_name: FullNameIn = Field(..., alias="fullName")
    role: str = "user"
    addresses: list[AddressIn] = Field(default_factory=list)

    @field_validator("username")
    @classmethod
    def username_min_length(cls, value: str) -> str:
        if len(value.strip()) < 3:
            raise ValueError("Username must be at least 3 characters long")
        return value.strip()

    @field_validator("email")
    @classmethod
    def email_is_valid(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def password_min_length(cls, value: str) -> str:
        if len(value) < 6:
            raise ValueError("Password must be 6 characters long")
        return value

    @field_validator("role")
    @classmethod
    def role_is_allowed(cls, value: str) -> str:
        if value not in ("user", "seller"):
            raise ValueError("Role must be either user or seller")
        return value


class LoginRequest(BaseModel):
    username: str | None = None
    email: str | None = None
    password: str

    @field_validator("email")
    @classmethod
    def email_is_valid(cls, value: str | None) -> str | None:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def password_min_length(cls, value: str) -> str:
        if len(value) < 6:
            raise ValueError("Password should be 6 characters long")
        return value

    @model_validator(mode="after")
    def identifier_required(self) -> LoginRequest:
        if not self.username and not self.email:
            raise ValueError("Either username or email is required")
        return self

"""Customer models for Payment Gateway SDK."""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import field_validator

from ..validators import (
    PERSON_NAME_PATTERN,
    PHONE_PATTERN,
    check_email,
    check_length,
    check_not_blank,
    check_pattern,
)
from .base import GatewayModel


class CustomerRequest(GatewayModel):
    """Request to create or update a bank customer."""

    first_name: str
    last_name: str
    email: str
    phone_number: str
    bank_id: UUID
    client_id: Optional[UUID] = None
    bvn: Optional[str] = None  # Bank Verification Number

    @field_validator("first_name")
    @classmethod
    def _validate_first_name(cls, value: str) -> str:
        check_not_blank(value, "First name is required")
        check_pattern(value, PERSON_NAME_PATTERN, "First name must only contain letters and hyphens.")
        check_length(
            value,
            "First name cannot be shorter than 2 characters & no longer than 25 characters.",
            2,
            25,
        )
        return value

    @field_validator("last_name")
    @classmethod
    def _validate_last_name(cls, value: str) -> str:
        check_not_blank(value, "Last name is required")
        check_pattern(value, PERSON_NAME_PATTERN, "Last name must only contain letters and hyphens.")
        check_length(
            value,
            "Last name cannot be shorter than 2 characters & no longer than 25 characters.",
            2,
            25,
        )
        return value

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        check_not_blank(value, "Email is required")
        check_length(value, "Email cannot exceed 255 characters", max_length=255)
        return check_email(value)

    @field_validator("phone_number")
    @classmethod
    def _validate_phone_number(cls, value: str) -> str:
        check_not_blank(value, "Phone number is required")
        check_pattern(value, PHONE_PATTERN, "Phone number must contain only digits and may start with a '+'")
        check_length(value, "Phone number must be 9-15 digits long", 9, 15)
        return value


class Customer(GatewayModel):
    id: Optional[UUID] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    bank_id: Optional[UUID] = None
    client_id: Optional[UUID] = None

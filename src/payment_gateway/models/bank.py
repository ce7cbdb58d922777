"""Bank models for Payment Gateway SDK."""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import field_validator

from ..validators import DIGITS_PATTERN, NAME_PATTERN, check_length, check_not_blank, check_pattern
from .base import GatewayModel


class BankRequest(GatewayModel):
    """Request to create or update a bank."""

    sort_code: str
    country: str
    name: str

    @field_validator("sort_code")
    @classmethod
    def _validate_sort_code(cls, value: str) -> str:
        check_not_blank(value, "Sortcode is required")
        check_pattern(value, DIGITS_PATTERN, "Sortcode must contain only digits")
        check_length(value, "Sortcode must be 4-6 digits long", 4, 6)
        return value

    @field_validator("country")
    @classmethod
    def _validate_country(cls, value: str) -> str:
        check_not_blank(value, "Country is required")
        check_pattern(value, NAME_PATTERN, "Country name can only contain letters, spaces and hyphens")
        return value

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        check_not_blank(value, "Bank name is required")
        check_pattern(value, NAME_PATTERN, "Bank name can only contain letters, spaces and hyphens")
        return value


class Bank(GatewayModel):
    id: Optional[UUID] = None
    sort_code: Optional[str] = None
    name: Optional[str] = None
    country: Optional[str] = None
    client_id: Optional[UUID] = None

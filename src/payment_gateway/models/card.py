"""Card models for Payment Gateway SDK."""
from __future__ import annotations

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from ..validators import (
    CARD_NUMBER_PATTERN,
    CVV_PATTERN,
    DIGITS_PATTERN,
    NAME_PATTERN,
    check_account_number,
    check_length,
    check_min_amount,
    check_not_blank,
    check_pattern,
)
from .base import GatewayModel

SUPPORTED_CARD_TYPES = frozenset({
    "VISA Debit",
    "MasterCard Debit",
    "VISA",
    "MasterCard",
    "American Express",
    "AmEx",
    "VC",
    "VC Debit",
    "MC",
    "MC Debit",
})


class CardRequest(GatewayModel):
    """Request to issue or update a card against an account."""

    account_no: str
    holders_name: str
    card_type: str

    @field_validator("account_no", mode="before")
    @classmethod
    def _coerce_account_no(cls, value):
        # Accept ints as well; the backend expects a string.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("account_no")
    @classmethod
    def _validate_account_no(cls, value: str) -> str:
        check_not_blank(value, "Account number is required")
        check_pattern(value, DIGITS_PATTERN, "Account number must contain only digits")
        check_account_number(
            int(value),
            "Account number must be at least 10 digits",
            "Account number must not exceed 10 digits",
        )
        return value

    @field_validator("holders_name")
    @classmethod
    def _validate_holders_name(cls, value: str) -> str:
        check_not_blank(value, "Card holder's name is required")
        check_pattern(value, NAME_PATTERN, "Card holder's name can only contain letters, spaces and hyphens")
        check_length(value, "Card holder's name must be between 2 and 100 characters", 2, 100)
        return value

    @field_validator("card_type")
    @classmethod
    def _validate_card_type(cls, value: str) -> str:
        check_not_blank(value, "Card type is required")
        if value not in SUPPORTED_CARD_TYPES:
            raise ValueError(
                "Invalid card type. The card types we support are VISA, VISA Debit, "
                "MasterCard, MasterCard Debit, American Express."
            )
        return value


class CardTransferRequest(GatewayModel):
    """Request to pay from a card into an account."""

    card_no: str = Field(repr=False)
    cvv: str = Field(repr=False)
    to_account_no: int
    amount: Decimal

    @field_validator("card_no")
    @classmethod
    def _validate_card_no(cls, value: str) -> str:
        check_not_blank(value, "Card number is required")
        check_pattern(value, CARD_NUMBER_PATTERN, "Card number must be 16 digits")
        return value

    @field_validator("cvv")
    @classmethod
    def _validate_cvv(cls, value: str) -> str:
        check_not_blank(value, "CVV is required")
        check_pattern(value, CVV_PATTERN, "CVV must be 3 digits")
        return value

    @field_validator("to_account_no")
    @classmethod
    def _validate_to_account_no(cls, value: int) -> int:
        return check_account_number(
            value,
            "Recipient account number must be at least 10 digits",
            "Recipient account number must not exceed 10 digits",
        )

    @field_validator("amount")
    @classmethod
    def _validate_amount(cls, value: Decimal) -> Decimal:
        return check_min_amount(value)


class Card(GatewayModel):
    id: Optional[UUID] = None
    account_no: Optional[str] = None
    holders_name: Optional[str] = None
    card_type: Optional[str] = None
    card_no: Optional[str] = Field(default=None, repr=False)
    expiry: Optional[str] = None
    cvv: Optional[str] = Field(default=None, repr=False)
    client_id: Optional[UUID] = None

    @field_validator("account_no", mode="before")
    @classmethod
    def _coerce_account_no(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

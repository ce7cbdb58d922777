"""Account and transfer models for Payment Gateway SDK."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import field_validator

from ..validators import (
    CURRENCY_PATTERN,
    NAME_PATTERN,
    check_account_number,
    check_length,
    check_min_amount,
    check_not_blank,
    check_pattern,
    check_positive,
)
from .base import GatewayModel


class AccountRequest(GatewayModel):
    """Request to create or update an account."""

    account_name: str
    customer_id: UUID
    currency: str
    balance: Decimal

    @field_validator("account_name")
    @classmethod
    def _validate_account_name(cls, value: str) -> str:
        check_not_blank(value, "Account name is required")
        check_pattern(value, NAME_PATTERN, "Account name can only contain letters, spaces and hyphens")
        check_length(value, "Account name must be between 2 and 100 characters", 2, 100)
        return value

    @field_validator("currency")
    @classmethod
    def _validate_currency(cls, value: str) -> str:
        check_not_blank(value, "Currency is required")
        check_pattern(value, CURRENCY_PATTERN, "Currency must be a 3-letter ISO code")
        return value

    @field_validator("balance")
    @classmethod
    def _validate_balance(cls, value: Decimal) -> Decimal:
        return check_positive(value, "Balance must be positive")


class Account(GatewayModel):
    id: Optional[UUID] = None
    account_name: Optional[str] = None
    account_no: Optional[int] = None
    customer_id: Optional[UUID] = None
    currency: Optional[str] = None
    balance: Optional[Decimal] = None
    client_id: Optional[UUID] = None


class BalanceResponse(GatewayModel):
    """Balance snapshot for a single account."""

    account_no: Optional[int] = None
    account_name: Optional[str] = None
    balance: Optional[Decimal] = None
    currency: Optional[str] = None


class TransferRequest(GatewayModel):
    """Request to move money between two accounts by account number."""

    from_account_no: int
    to_account_no: int
    amount: Decimal

    @field_validator("from_account_no")
    @classmethod
    def _validate_from_account_no(cls, value: int) -> int:
        return check_account_number(
            value,
            "Source account number must be at least 10 digits",
            "Source account number must not exceed 10 digits",
        )

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
        check_positive(value, "Transfer amount must be positive")
        return check_min_amount(value)


class TransactionDetails(GatewayModel):
    from_account_no: Optional[int] = None
    to_account_no: Optional[int] = None
    amount: Optional[Decimal] = None
    new_balance_from: Optional[Decimal] = None
    new_balance_to: Optional[Decimal] = None


class TransferResponse(GatewayModel):
    """Outcome of an account or card transfer."""

    message: Optional[str] = None
    success: bool = False
    timestamp: Optional[datetime] = None
    details: Optional[TransactionDetails] = None

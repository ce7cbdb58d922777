"""
Field validation helpers for request models.

Request models call these from pydantic field validators so that malformed
input is rejected, with a readable message, before anything is sent.

Usage:
    from payment_gateway.validators import NAME_PATTERN, check_pattern

    check_pattern(value, NAME_PATTERN, "Bank name can only contain letters, spaces and hyphens")
"""
from __future__ import annotations

import re
from decimal import Decimal
from typing import Optional, Pattern


# =============================================================================
# Regex Patterns (ASCII only)
# =============================================================================

# Letters, whitespace and hyphens (account, bank, client, tenant names)
NAME_PATTERN: Pattern[str] = re.compile(r"^[A-Za-z\s-]+$", re.ASCII)

# Letters and hyphens only (customer first/last names)
PERSON_NAME_PATTERN: Pattern[str] = re.compile(r"^[A-Za-z-]*$", re.ASCII)

# ISO 4217 style currency code
CURRENCY_PATTERN: Pattern[str] = re.compile(r"[A-Z]{3}", re.ASCII)

DIGITS_PATTERN: Pattern[str] = re.compile(r"\d+", re.ASCII)
CARD_NUMBER_PATTERN: Pattern[str] = re.compile(r"^\d{16}$", re.ASCII)
CVV_PATTERN: Pattern[str] = re.compile(r"^\d{3}$", re.ASCII)
PHONE_PATTERN: Pattern[str] = re.compile(r"^(\+?[0-9]{7,15})$", re.ASCII)

# Email pattern (simplified but effective)
EMAIL_PATTERN: Pattern[str] = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$", re.ASCII
)

# Ten-digit account numbers
ACCOUNT_NO_MIN = 1_000_000_000
ACCOUNT_NO_MAX = 9_999_999_999

MIN_AMOUNT = Decimal("0.01")


# =============================================================================
# Checks
# =============================================================================

def check_not_blank(value: Optional[str], message: str) -> str:
    """Reject ``None``, empty and whitespace-only strings."""
    if value is None or not value.strip():
        raise ValueError(message)
    return value


def check_pattern(value: Optional[str], pattern: Pattern[str], message: str) -> Optional[str]:
    """Require the whole value to match ``pattern``. ``None`` passes."""
    if value is not None and not pattern.fullmatch(value):
        raise ValueError(message)
    return value


def check_length(
    value: Optional[str],
    message: str,
    min_length: int = 0,
    max_length: Optional[int] = None,
) -> Optional[str]:
    """Bound the length of a string. ``None`` passes."""
    if value is None:
        return value
    if len(value) < min_length or (max_length is not None and len(value) > max_length):
        raise ValueError(message)
    return value


def check_email(value: str, message: str = "Invalid email format") -> str:
    """Validate an email address."""
    if not EMAIL_PATTERN.fullmatch(value):
        raise ValueError(message)
    return value


def check_account_number(
    value: int,
    min_message: str,
    max_message: str,
) -> int:
    """Require a ten-digit account number."""
    if value < ACCOUNT_NO_MIN:
        raise ValueError(min_message)
    if value > ACCOUNT_NO_MAX:
        raise ValueError(max_message)
    return value


def check_positive(value: Decimal, message: str) -> Decimal:
    if value <= 0:
        raise ValueError(message)
    return value


def check_min_amount(value: Decimal, message: str = "Amount must be greater than zero") -> Decimal:
    if value < MIN_AMOUNT:
        raise ValueError(message)
    return value


__all__ = [
    "NAME_PATTERN",
    "PERSON_NAME_PATTERN",
    "CURRENCY_PATTERN",
    "DIGITS_PATTERN",
    "CARD_NUMBER_PATTERN",
    "CVV_PATTERN",
    "PHONE_PATTERN",
    "EMAIL_PATTERN",
    "ACCOUNT_NO_MIN",
    "ACCOUNT_NO_MAX",
    "MIN_AMOUNT",
    "check_not_blank",
    "check_pattern",
    "check_length",
    "check_email",
    "check_account_number",
    "check_positive",
    "check_min_amount",
]

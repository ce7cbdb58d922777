"""
Logging helpers for the Payment Gateway SDK with sensitive data masking.

The SDK logs through the standard library. Nothing here configures handlers;
applications decide where records go.

Usage:
    from payment_gateway.logging import mask_card_number, mask_headers

    logger.debug("Sending %s %s headers=%s", method, url, mask_headers(headers))
    logger.debug("Card transfer from %s", mask_card_number(card_no))
"""
from __future__ import annotations

from typing import Mapping, Optional

MASK_PATTERN = "***"

SENSITIVE_HEADERS = frozenset({
    "authorization",
    "x-api-key",
    "x-auth-token",
    "cookie",
    "set-cookie",
})

# Response bodies are truncated in debug output
MAX_BODY_LOG_LENGTH = 500


def mask_value(value: Optional[str], show_chars: int = 4) -> str:
    """Mask a sensitive value, showing the first/last characters.

    Args:
        value: The value to mask
        show_chars: Number of characters to show at start and end

    Returns:
        Masked string
    """
    if not value or len(value) <= show_chars * 2:
        return MASK_PATTERN

    return f"{value[:show_chars]}...{value[-show_chars:]}"


def mask_card_number(card_no: Optional[str]) -> str:
    """Return the first four digits of a card number followed by ``****``."""
    if not card_no or len(card_no) < 4:
        return "****"
    return f"{card_no[:4]}****"


def mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Mask sensitive HTTP headers.

    Args:
        headers: HTTP headers mapping

    Returns:
        Copy of the headers with sensitive values masked
    """
    result = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            result[key] = MASK_PATTERN
        else:
            result[key] = value
    return result


def truncate_body(body: Optional[str], limit: int = MAX_BODY_LOG_LENGTH) -> str:
    if not body:
        return ""
    if len(body) > limit:
        return body[:limit] + "...[truncated]"
    return body

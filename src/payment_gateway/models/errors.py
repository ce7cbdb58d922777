"""Error models for Payment Gateway SDK."""
from __future__ import annotations

from typing import Any, Optional


class PaymentGatewayError(Exception):
    """Base exception for Payment Gateway SDK."""

    default_code = "PAYMENT_GATEWAY_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    @property
    def cause(self) -> Optional[BaseException]:
        """The exception this error was raised from, if any."""
        return self.__cause__

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code,
            }
        }


class APIError(PaymentGatewayError):
    """Non-2xx response from the gateway.

    Raised by the transport; resources translate it into a
    :class:`PaymentException` or :class:`TenantException`.
    """

    default_code = "API_ERROR"

    def __init__(
        self,
        status_code: int,
        response_body: str = "",
        reason: str = "",
        headers: Optional[dict[str, str]] = None,
    ):
        message = f"{status_code} {reason}".strip()
        if response_body:
            message = f"{message}: {response_body}"
        super().__init__(
            message,
            status_code=status_code,
            response_body=response_body,
            details={"reason": reason},
        )
        self.reason = reason
        self.headers = headers or {}

    def __str__(self) -> str:
        return self.message


class PaymentException(PaymentGatewayError):
    """A payment, account, bank, card, client or customer operation failed."""

    default_code = "PAYMENT_ERROR"


class TenantException(PaymentGatewayError):
    """A tenant operation failed."""

    default_code = "TENANT_ERROR"

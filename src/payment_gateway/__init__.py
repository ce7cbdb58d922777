"""
Payment Gateway Python SDK

Synchronous client for a multi-tenant payment gateway: tenants, clients,
banks, accounts, cards, customers, transfers and payments.
"""
from logging import NullHandler, getLogger

from .client import PaymentGatewayClient
from .config import PaymentClientSettings, load_settings
from .models.errors import (
    APIError,
    PaymentException,
    PaymentGatewayError,
    TenantException,
)

__version__ = "0.1.0"

getLogger(__name__).addHandler(NullHandler())

__all__ = [
    # Client
    "PaymentGatewayClient",
    # Configuration
    "PaymentClientSettings",
    "load_settings",
    # Errors
    "PaymentGatewayError",
    "APIError",
    "PaymentException",
    "TenantException",
]

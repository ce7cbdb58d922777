"""Payment Gateway SDK Models."""
from .base import GatewayModel
from .account import (
    Account,
    AccountRequest,
    BalanceResponse,
    TransactionDetails,
    TransferRequest,
    TransferResponse,
)
from .bank import Bank, BankRequest
from .card import SUPPORTED_CARD_TYPES, Card, CardRequest, CardTransferRequest
from .client import Client, ClientRequest
from .customer import Customer, CustomerRequest
from .tenant import Tenant, TenantActivationResponse, TenantRegistration, TenantRequest
from .errors import APIError, PaymentException, PaymentGatewayError, TenantException

__all__ = [
    "GatewayModel",
    "Account",
    "AccountRequest",
    "BalanceResponse",
    "TransactionDetails",
    "TransferRequest",
    "TransferResponse",
    "Bank",
    "BankRequest",
    "SUPPORTED_CARD_TYPES",
    "Card",
    "CardRequest",
    "CardTransferRequest",
    "Client",
    "ClientRequest",
    "Customer",
    "CustomerRequest",
    "Tenant",
    "TenantActivationResponse",
    "TenantRegistration",
    "TenantRequest",
    "PaymentGatewayError",
    "APIError",
    "PaymentException",
    "TenantException",
]

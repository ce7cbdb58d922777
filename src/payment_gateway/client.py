"""
Payment Gateway Python SDK

Synchronous client for the multi-tenant payment gateway REST API.

Example usage:
    ```python
    from payment_gateway import PaymentGatewayClient
    from payment_gateway.models import BankRequest

    with PaymentGatewayClient(api_key="tenant-key", client_id=client_id) as client:
        bank = client.banks.create(
            BankRequest(sort_code="123456", name="First Bank", country="Nigeria")
        )

        for account in client.accounts.list():
            print(account.account_no, account.balance)
    ```
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Union
from uuid import UUID

import httpx

from .config import PaymentClientSettings, load_settings
from .logging import mask_headers, truncate_body
from .models.account import Account, TransferRequest, TransferResponse
from .models.bank import Bank, BankRequest
from .models.errors import APIError
from .resources.accounts import AccountsResource
from .resources.banks import BanksResource
from .resources.cards import CardsResource
from .resources.clients import ClientsResource
from .resources.customers import CustomersResource
from .resources.payments import PaymentsResource
from .resources.tenants import TenantsResource

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-KEY"
CLIENT_ID_HEADER = "X-CLIENT-ID"
TENANT_ID_HEADER = "X-TENANT-ID"
USER_AGENT = "payment-gateway-sdk-python/0.1.0"


class PaymentGatewayClient:
    """
    Payment gateway API client.

    Provides access to all gateway resources:
    - accounts: Accounts, balances and account-to-account transfers
    - banks: Bank registry
    - cards: Card issuance and card-to-account transfers
    - clients: Clients scoped under a tenant
    - customers: Bank customers
    - tenants: Tenant registration and lifecycle
    - payments: Generic payment processing

    Args:
        settings: Connection settings (default: read from the environment)
        api_key: Overrides ``settings.api_key``
        base_url: Overrides ``settings.base_url``
        client_id: Overrides ``settings.client_id``
        http_client: Shared ``httpx.Client``; the caller keeps ownership
    """

    def __init__(
        self,
        settings: Optional[PaymentClientSettings] = None,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        client_id: Optional[Union[UUID, str]] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        settings = settings or load_settings()

        overrides: dict[str, Any] = {}
        if api_key is not None:
            overrides["api_key"] = api_key
        if base_url is not None:
            overrides["base_url"] = base_url.strip().rstrip("/")
        if client_id is not None:
            overrides["client_id"] = UUID(str(client_id))
        if overrides:
            settings = settings.model_copy(update=overrides)

        self.settings = settings
        self._base_url = settings.base_url
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=settings.timeout())

        if not settings.api_key:
            logger.warning("Payment gateway client created without an API key")
        logger.info(
            "Payment gateway client ready base_url=%s test_mode=%s",
            self._base_url,
            settings.test_mode,
        )

        # Initialize resources
        self.accounts = AccountsResource(self)
        self.banks = BanksResource(self)
        self.cards = CardsResource(self)
        self.clients = ClientsResource(self)
        self.customers = CustomersResource(self)
        self.tenants = TenantsResource(self)
        self.payments = PaymentsResource(self)

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str) -> str:
        """Build full URL for an API path."""
        return f"{self._base_url}{path}"

    def _build_headers(
        self,
        client_id: Optional[Union[UUID, str]] = None,
        tenant_id: Optional[Union[UUID, str]] = None,
        include_default_client: bool = True,
    ) -> dict[str, str]:
        """Build the headers for one call.

        ``client_id`` wins over the configured default. The default is left
        out when ``include_default_client`` is false.
        """
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self.settings.api_key:
            headers[API_KEY_HEADER] = self.settings.api_key

        if client_id is None and include_default_client:
            client_id = self.settings.client_id
        if client_id is not None:
            headers[CLIENT_ID_HEADER] = str(client_id)

        if tenant_id is not None:
            headers[TENANT_ID_HEADER] = str(tenant_id)
        return headers

    def _request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send one request and decode the response.

        Returns:
            The decoded JSON body, or None for an empty body

        Raises:
            APIError: The gateway answered with a non-2xx status
            httpx.HTTPError: The request could not be completed
        """
        logger.debug("%s %s headers=%s", method, url, mask_headers(headers))
        response = self._http.request(
            method,
            url,
            headers=headers,
            json=json,
            params=params,
        )

        if not response.is_success:
            body = response.text
            logger.debug(
                "HTTP error status: %s, body: %s",
                response.status_code,
                truncate_body(body),
            )
            raise APIError(
                response.status_code,
                body,
                reason=response.reason_phrase,
                headers=dict(response.headers),
            )

        if not response.content or not response.content.strip():
            return None
        return response.json()

    # ==================== Convenience Methods ====================

    def process_payment(self, request: Any) -> Any:
        """Process a payment through the generic payments endpoint."""
        return self.payments.process(request)

    def get_account_balance(
        self,
        account_id: Union[UUID, str],
        client_id: Optional[Union[UUID, str]] = None,
    ) -> Account:
        """Fetch the account, including its current balance."""
        return self.accounts.get(account_id, client_id=client_id)

    def create_bank(self, request: BankRequest) -> Bank:
        return self.banks.create(request)

    def process_transfer(self, request: TransferRequest) -> TransferResponse:
        return self.accounts.transfer(request)

    # ==================== Lifecycle ====================

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http and not self._http.is_closed:
            self._http.close()

    def __enter__(self) -> "PaymentGatewayClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

"""
Pytest configuration and fixtures for Payment Gateway SDK tests.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from payment_gateway import PaymentClientSettings, PaymentGatewayClient, load_settings

BASE_URL = "https://gateway.test"
API_KEY = "test-api-key"
CLIENT_ID = "7b1c1b0e-5a7e-4d35-9a0c-2f4a0c6f1e11"
TENANT_ID = "3f2d8a44-0c61-4b8e-a5f7-9d1e6b2c4a90"


@dataclass
class _MockEntry:
    method: str
    url: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None


@dataclass
class RecordedCall:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    json: Any = None


class GatewayMock:
    """Serves queued responses per (method, URL) and records outgoing calls."""

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.calls: list[RecordedCall] = []

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        text: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        response_headers = dict(headers or {})
        if text is not None:
            content = text.encode("utf-8")
        elif json is not None:
            content = json_dumps_bytes(json)
            response_headers.setdefault("content-type", "application/json")
        else:
            content = b""

        request = httpx.Request(method.upper(), url)
        response = httpx.Response(
            status_code=status_code,
            headers=response_headers,
            content=content,
            request=request,
        )
        self._entries.append(_MockEntry(method=method.upper(), url=url, response=response))

    def add_exception(self, exception: Exception, *, url: str, method: str = "GET") -> None:
        self._entries.append(_MockEntry(method=method.upper(), url=url, exception=exception))

    @property
    def last_call(self) -> RecordedCall:
        assert self.calls, "no request was sent"
        return self.calls[-1]

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _append_query_params(url: str, params: Optional[dict[str, Any]]) -> str:
    if not params:
        return url
    query = urlencode(params, doseq=True)
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


@pytest.fixture
def gateway_mock(monkeypatch):
    """Replace ``httpx.Client.request`` with a recording mock."""
    mock = GatewayMock()

    def _sync_request(self, method, url, params=None, headers=None, json=None, **kwargs):
        full_url = _append_query_params(str(url), params)
        mock.calls.append(
            RecordedCall(method=method.upper(), url=full_url, headers=dict(headers or {}), json=json)
        )
        match = mock._pop_match(method, full_url)
        if match.exception is not None:
            raise match.exception
        assert match.response is not None
        return match.response

    monkeypatch.setattr(httpx.Client, "request", _sync_request)
    return mock


# Mock response data
MOCK_RESPONSES = {
    "account": {
        "id": "c0a80101-0000-4000-8000-000000000001",
        "accountName": "Main Savings",
        "accountNo": 1234567890,
        "customerId": "c0a80101-0000-4000-8000-000000000002",
        "currency": "NGN",
        "balance": 2500.50,
        "clientId": CLIENT_ID,
    },
    "balance": {
        "accountNo": 1234567890,
        "accountName": "Main Savings",
        "balance": 2500.50,
        "currency": "NGN",
    },
    "transfer": {
        "message": "Transfer successful",
        "success": True,
        "timestamp": "2025-01-20T10:15:30",
        "details": {
            "fromAccountNo": 1234567890,
            "toAccountNo": 9876543210,
            "amount": 100.00,
            "newBalanceFrom": 2400.50,
            "newBalanceTo": 600.00,
        },
    },
    "bank": {
        "id": "c0a80101-0000-4000-8000-000000000003",
        "sortCode": "123456",
        "name": "First Bank",
        "country": "Nigeria",
        "clientId": CLIENT_ID,
    },
    "card": {
        "id": "c0a80101-0000-4000-8000-000000000004",
        "accountNo": 1234567890,
        "holdersName": "Ada Obi",
        "cardType": "VISA",
        "cardNo": "4111111111111111",
        "expiry": "12/28",
        "cvv": "123",
        "clientId": CLIENT_ID,
    },
    "client": {
        "id": CLIENT_ID,
        "name": "Acme Payments",
        "email": "ops@acme.test",
        "tenantId": TENANT_ID,
        "active": True,
    },
    "customer": {
        "id": "c0a80101-0000-4000-8000-000000000002",
        "firstName": "Ada",
        "lastName": "Obi",
        "email": "ada@example.com",
        "phoneNumber": "+2348012345678",
        "bankId": "c0a80101-0000-4000-8000-000000000003",
        "clientId": CLIENT_ID,
    },
    "tenant": {
        "id": TENANT_ID,
        "tenantCode": "TEN-001",
        "name": "Acme Group",
        "description": "Holding tenant",
        "active": True,
        "dateCreated": "2025-01-20T00:00:00",
        "createdBy": "system",
    },
    "activation": {
        "tenantId": TENANT_ID,
        "tenantCode": "tk_live_abcdef123456",
        "name": "Acme Group",
        "status": "ACTIVE",
        "expiresAt": "2026-01-20T00:00:00",
    },
}


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Keep PAYMENT_GATEWAY_* variables of the host out of the tests."""
    for name in list(os.environ):
        if name.startswith("PAYMENT_GATEWAY_"):
            monkeypatch.delenv(name)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return BASE_URL


@pytest.fixture
def api_url(base_url):
    """Build a full gateway URL from a path."""

    def build(path: str) -> str:
        return f"{base_url}{path}"

    return build


@pytest.fixture
def client_id() -> str:
    return CLIENT_ID


@pytest.fixture
def tenant_id() -> str:
    return TENANT_ID


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES


@pytest.fixture
def settings(base_url, client_id) -> PaymentClientSettings:
    return PaymentClientSettings(
        _env_file=None,
        api_key=API_KEY,
        base_url=base_url,
        client_id=client_id,
    )


@pytest.fixture
def client(settings, gateway_mock) -> PaymentGatewayClient:
    """Create a test client wired to the mock transport."""
    client = PaymentGatewayClient(settings)
    yield client
    client.close()


@pytest.fixture
def anonymous_client(base_url, gateway_mock) -> PaymentGatewayClient:
    """Client with neither an API key nor a default client id."""
    settings = PaymentClientSettings(_env_file=None, base_url=base_url)
    client = PaymentGatewayClient(settings)
    yield client
    client.close()

"""Tests for request and response models."""

from __future__ import annotations

import re
from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import ValidationError

from payment_gateway.models import (
    Account,
    AccountRequest,
    BankRequest,
    Card,
    CardRequest,
    CardTransferRequest,
    Client,
    ClientRequest,
    CustomerRequest,
    Tenant,
    TenantRequest,
    TransferRequest,
)

UUID_1 = "c0a80101-0000-4000-8000-000000000001"


def _raises(message: str):
    return pytest.raises(ValidationError, match=re.escape(message))


class TestGatewayModel:
    def test_to_dict_uses_camel_case_and_drops_none(self):
        account = Account(account_name="Main", account_no=1234567890)

        assert account.to_dict() == {"accountName": "Main", "accountNo": 1234567890}

    def test_from_dict_ignores_unknown_keys(self):
        account = Account.from_dict({"accountName": "Main", "somethingNew": 1})

        assert account.account_name == "Main"

    def test_populate_by_field_name(self):
        assert Account(account_name="Main").account_name == "Main"
        assert Account.model_validate({"accountName": "Main"}).account_name == "Main"


class TestAccountRequest:
    def _build(self, **overrides):
        data = dict(account_name="Main Savings", customer_id=UUID_1, currency="NGN", balance=Decimal("10"))
        data.update(overrides)
        return AccountRequest(**data)

    def test_valid(self):
        request = self._build()
        assert request.customer_id == UUID(UUID_1)

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"account_name": "  "}, "Account name is required"),
            ({"account_name": "Main 123"}, "Account name can only contain letters, spaces and hyphens"),
            ({"account_name": "M"}, "Account name must be between 2 and 100 characters"),
            ({"currency": "ngn"}, "Currency must be a 3-letter ISO code"),
            ({"currency": "NGNX"}, "Currency must be a 3-letter ISO code"),
            ({"balance": Decimal("0")}, "Balance must be positive"),
        ],
    )
    def test_invalid(self, overrides, message):
        with _raises(message):
            self._build(**overrides)

    def test_customer_id_required(self):
        with pytest.raises(ValidationError):
            AccountRequest(account_name="Main", currency="NGN", balance=Decimal("1"))


class TestTransferRequest:
    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"from_account_no": 999999999}, "Source account number must be at least 10 digits"),
            ({"from_account_no": 10000000000}, "Source account number must not exceed 10 digits"),
            ({"to_account_no": 12}, "Recipient account number must be at least 10 digits"),
            ({"amount": Decimal("-5")}, "Transfer amount must be positive"),
            ({"amount": Decimal("0.001")}, "Amount must be greater than zero"),
        ],
    )
    def test_invalid(self, overrides, message):
        data = dict(from_account_no=1234567890, to_account_no=9876543210, amount=Decimal("1"))
        data.update(overrides)
        with _raises(message):
            TransferRequest(**data)

    def test_minimum_amount_accepted(self):
        request = TransferRequest(from_account_no=1000000000, to_account_no=9999999999, amount=Decimal("0.01"))
        assert request.amount == Decimal("0.01")


class TestBankRequest:
    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"sort_code": ""}, "Sortcode is required"),
            ({"sort_code": "12a4"}, "Sortcode must contain only digits"),
            ({"sort_code": "123"}, "Sortcode must be 4-6 digits long"),
            ({"sort_code": "1234567"}, "Sortcode must be 4-6 digits long"),
            ({"country": "Nigeria 2"}, "Country name can only contain letters, spaces and hyphens"),
            ({"sort_code": "١٢٣٤"}, "Sortcode must contain only digits"),
            ({"name": "First　Bank"}, "Bank name can only contain letters, spaces and hyphens"),
            ({"name": " "}, "Bank name is required"),
        ],
    )
    def test_invalid(self, overrides, message):
        data = dict(sort_code="1234", country="Nigeria", name="First Bank")
        data.update(overrides)
        with _raises(message):
            BankRequest(**data)


class TestCardModels:
    def test_card_request_accepts_int_account_no(self):
        request = CardRequest(account_no=1234567890, holders_name="Ada Obi", card_type="MC Debit")
        assert request.account_no == "1234567890"

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"account_no": "12345abcde"}, "Account number must contain only digits"),
            ({"account_no": "１２３４５６７８９０"}, "Account number must contain only digits"),
            ({"account_no": "0123456789"}, "Account number must be at least 10 digits"),
            ({"holders_name": "A"}, "Card holder's name must be between 2 and 100 characters"),
            ({"card_type": "Discover"}, "Invalid card type."),
        ],
    )
    def test_card_request_invalid(self, overrides, message):
        data = dict(account_no="1234567890", holders_name="Ada Obi", card_type="VISA")
        data.update(overrides)
        with _raises(message):
            CardRequest(**data)

    def test_card_transfer_hides_secrets_in_repr(self):
        request = CardTransferRequest(
            card_no="4111111111111111",
            cvv="123",
            to_account_no=1234567890,
            amount=Decimal("5"),
        )
        assert "4111111111111111" not in repr(request)
        assert request.to_dict()["cardNo"] == "4111111111111111"

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"card_no": "٤" * 16}, "Card number must be 16 digits"),
            ({"cvv": "１２３"}, "CVV must be 3 digits"),
        ],
    )
    def test_card_transfer_rejects_non_ascii_digits(self, overrides, message):
        data = dict(card_no="4111111111111111", cvv="123", to_account_no=1234567890, amount=Decimal("5"))
        data.update(overrides)
        with _raises(message):
            CardTransferRequest(**data)

    def test_card_response_coerces_account_no(self):
        assert Card.model_validate({"accountNo": 1234567890}).account_no == "1234567890"


class TestClientAndCustomer:
    def test_client_request_email(self):
        with _raises("Invalid email format"):
            ClientRequest(name="Acme", email="not-an-email", tenant_id=UUID_1)

    def test_client_reads_active_flag(self):
        assert Client.model_validate({"active": True}).is_active is True
        assert Client.model_validate({"isActive": False}).is_active is False
        assert Client.model_validate({}).is_active is None

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"first_name": "Ada2"}, "First name must only contain letters and hyphens."),
            ({"last_name": "O"}, "Last name cannot be shorter than 2 characters & no longer than 25 characters."),
            ({"phone_number": "080-123"}, "Phone number must contain only digits and may start with a '+'"),
            ({"phone_number": "12345678"}, "Phone number must be 9-15 digits long"),
            ({"email": "a" * 250 + "@x.com"}, "Email cannot exceed 255 characters"),
        ],
    )
    def test_customer_request_invalid(self, overrides, message):
        data = dict(
            first_name="Ada",
            last_name="Obi",
            email="ada@example.com",
            phone_number="08012345678",
            bank_id=UUID_1,
        )
        data.update(overrides)
        with _raises(message):
            CustomerRequest(**data)


class TestTenantModels:
    def test_tenant_reads_active_flag(self):
        assert Tenant.model_validate({"active": True}).is_active is True
        assert Tenant.model_validate({"isActive": True}).is_active is True
        assert Tenant.model_validate({}).is_active is False

    def test_tenant_request_description_limit(self):
        with _raises("Description cannot exceed 500 characters"):
            TenantRequest(name="Acme", description="x" * 501)

    def test_tenant_request_name_pattern(self):
        with _raises("Tenant name can only contain letters, spaces and hyphens"):
            TenantRequest(name="Acme_1")

"""
Accounts resource for the Payment Gateway SDK.

Accounts belong to a customer and are scoped to a client; transfers move
money between two accounts identified by account number.
"""
from __future__ import annotations

import logging
from typing import Optional, Union
from uuid import UUID

from ..models.account import Account, AccountRequest, BalanceResponse, TransferRequest, TransferResponse
from .base import BaseResource, ErrorRule, parse_bool, parse_list, parse_model

logger = logging.getLogger(__name__)

ID = Union[UUID, str]

CUSTOMER_NOT_FOUND = ErrorRule(400, "Customer not found with the provided ID", "Customer not found")
INVALID_ACCOUNT = ErrorRule(400, "Invalid account data: {body}")
ACCOUNT_ID_NOT_FOUND = ErrorRule(404, "Account not found with ID: {id}")


class AccountsResource(BaseResource):
    """Resource for account operations."""

    path = "/api/accounts"
    error_code = "ACCOUNT_ERROR"

    def create(self, request: AccountRequest, client_id: Optional[ID] = None) -> Account:
        """Open an account.

        Args:
            request: Account details
            client_id: Client the account belongs to (default: configured client)

        Returns:
            The created account
        """
        logger.debug("Creating account %s for client %s", request.account_name, client_id)
        return self._call(
            "POST",
            action="Failed to create account",
            body=request,
            client_id=client_id,
            require_client=True,
            parse=parse_model(Account),
            rules=(
                CUSTOMER_NOT_FOUND,
                ErrorRule(400, "Customer ID is required for account creation", "Customer ID cannot be null"),
                ErrorRule(400, "Account with this number already exists", "account number already exists"),
                INVALID_ACCOUNT,
            ),
        )

    def update(self, account_id: ID, request: AccountRequest, client_id: Optional[ID] = None) -> Account:
        logger.debug("Updating account %s for client %s", account_id, client_id)
        return self._call(
            "PUT",
            account_id,
            action="Failed to update account",
            body=request,
            client_id=client_id,
            require_client=True,
            parse=parse_model(Account),
            rules=(ACCOUNT_ID_NOT_FOUND, CUSTOMER_NOT_FOUND, INVALID_ACCOUNT),
            id=account_id,
        )

    def get(self, account_id: ID, client_id: Optional[ID] = None) -> Account:
        logger.debug("Fetching account %s for client %s", account_id, client_id)
        return self._call(
            "GET",
            account_id,
            action="Failed to retrieve account",
            client_id=client_id,
            require_client=True,
            parse=parse_model(Account),
            rules=(ACCOUNT_ID_NOT_FOUND,),
            id=account_id,
        )

    def list(self, client_id: Optional[ID] = None) -> list[Account]:
        logger.debug("Fetching all accounts for client %s", client_id)
        return self._call(
            "GET",
            action="Failed to retrieve accounts",
            client_id=client_id,
            require_client=True,
            parse=parse_list(Account),
            translate=False,
        )

    def transfer(self, request: TransferRequest) -> TransferResponse:
        """Move money between two accounts.

        Raises:
            PaymentException: e.g. "Insufficient balance for transfer"
        """
        logger.debug(
            "Transferring %s from %s to %s",
            request.amount,
            request.from_account_no,
            request.to_account_no,
        )
        return self._call(
            "POST",
            "transfer",
            action="Failed to process transfer",
            body=request,
            parse=parse_model(TransferResponse),
            rules=(
                ErrorRule(400, "Cannot transfer to the same account", "same account"),
                ErrorRule(400, "Insufficient balance for transfer", "insufficient balance"),
                ErrorRule(400, "Currency mismatch between accounts", "currency mismatch"),
                ErrorRule(400, "Invalid transfer request: {body}"),
                ErrorRule(404, "One or both accounts not found"),
            ),
        )

    def exists_by_account_no(self, account_no: int) -> bool:
        logger.debug("Checking if account %s exists", account_no)
        return self._call(
            "GET",
            "exists",
            account_no,
            action="Failed to check account existence",
            parse=parse_bool,
            not_found=False,
        )

    def confirm(self, account_no: int) -> bool:
        """Confirm that an account number is valid."""
        logger.debug("Confirming account %s", account_no)
        return self._call(
            "GET",
            "confirm",
            account_no,
            action="Failed to confirm account",
            parse=parse_bool,
            not_found=False,
        )

    def get_balance(self, account_no: int, client_id: Optional[ID] = None) -> BalanceResponse:
        logger.debug("Fetching balance for account %s", account_no)
        return self._call(
            "GET",
            account_no,
            "balance",
            action="Failed to retrieve account balance",
            client_id=client_id,
            require_client=True,
            parse=parse_model(BalanceResponse),
            rules=(ErrorRule(404, "Account not found with number: {no}"),),
            no=account_no,
        )

"""
Cards resource for the Payment Gateway SDK.

Example usage:
    ```python
    card = client.cards.create(
        CardRequest(account_no="1234567890", holders_name="Ada Obi", card_type="VISA"),
    )

    result = client.cards.transfer(
        card_no=card.card_no,
        cvv=card.cvv,
        to_account_no=9876543210,
        amount=Decimal("25.00"),
    )
    ```
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from ..logging import mask_card_number
from ..models.account import TransferResponse
from ..models.card import Card, CardRequest, CardTransferRequest
from .base import BaseResource, ErrorRule, parse_bool, parse_list, parse_model

logger = logging.getLogger(__name__)

ID = Union[UUID, str]

INVALID_CARD = ErrorRule(400, "Invalid card data: {body}")
ASSOCIATED_ACCOUNT_NOT_FOUND = "Associated account not found"


class CardsResource(BaseResource):
    """Resource for card operations."""

    path = "/api/cards"
    error_code = "CARD_ERROR"

    def create(self, request: CardRequest, client_id: Optional[ID] = None) -> Card:
        """Issue a card against an existing account.

        Args:
            request: Card details
            client_id: Client the card belongs to (default: configured client)

        Returns:
            The issued card, including number, expiry and CVV
        """
        logger.debug("Creating card for account %s, client %s", request.account_no, client_id)
        return self._call(
            "POST",
            action="Failed to create card",
            body=request,
            client_id=client_id,
            require_client=True,
            parse=parse_model(Card),
            rules=(
                ErrorRule(400, "Account not found with the provided account number", "Account not found"),
                INVALID_CARD,
                ErrorRule(404, ASSOCIATED_ACCOUNT_NOT_FOUND),
            ),
        )

    def update(self, card_id: ID, request: CardRequest, client_id: Optional[ID] = None) -> Card:
        logger.debug("Updating card %s for client %s", card_id, client_id)
        return self._call(
            "PUT",
            card_id,
            action="Failed to update card",
            body=request,
            client_id=client_id,
            require_client=True,
            parse=parse_model(Card),
            rules=(
                ErrorRule(404, "Card not found with ID: {id}", "Card not found"),
                ErrorRule(404, ASSOCIATED_ACCOUNT_NOT_FOUND, "Account not found"),
                ErrorRule(404, "Resource not found"),
                INVALID_CARD,
            ),
            id=card_id,
        )

    def get(self, card_id: ID, client_id: Optional[ID] = None) -> Card:
        logger.debug("Fetching card %s for client %s", card_id, client_id)
        return self._call(
            "GET",
            card_id,
            action="Failed to retrieve card",
            client_id=client_id,
            require_client=True,
            parse=parse_model(Card),
            rules=(ErrorRule(404, "Card not found with ID: {id}"),),
            id=card_id,
        )

    def list(self, client_id: Optional[ID] = None) -> list[Card]:
        logger.debug("Fetching all cards for client %s", client_id)
        return self._call(
            "GET",
            action="Failed to retrieve cards",
            client_id=client_id,
            require_client=True,
            parse=parse_list(Card),
            translate=False,
        )

    def list_by_account(self, account_no: Union[int, str], client_id: Optional[ID] = None) -> list[Card]:
        """Cards issued against ``account_no``; an unknown account gives ``[]``."""
        logger.debug("Fetching cards for account %s, client %s", account_no, client_id)
        return self._call(
            "GET",
            "account",
            account_no,
            action="Failed to retrieve cards by account number",
            client_id=client_id,
            require_client=True,
            parse=parse_list(Card),
            not_found=[],
        )

    def list_by_type(self, card_type: str, client_id: Optional[ID] = None) -> list[Card]:
        logger.debug("Fetching cards of type %s for client %s", card_type, client_id)
        return self._call(
            "GET",
            "type",
            card_type,
            action="Failed to retrieve cards by type",
            client_id=client_id,
            require_client=True,
            parse=parse_list(Card),
            translate=False,
        )

    def exists(self, card_id: ID, client_id: Optional[ID] = None) -> bool:
        return self._call(
            "GET",
            card_id,
            "exists",
            action="Failed to check card existence",
            client_id=client_id,
            require_client=True,
            parse=parse_bool,
            not_found=False,
        )

    def transfer(
        self,
        *,
        card_no: str,
        cvv: str,
        to_account_no: int,
        amount: Decimal,
    ) -> TransferResponse:
        """Pay from a card into an account.

        Args:
            card_no: 16-digit card number
            cvv: 3-digit card verification value
            to_account_no: Destination account number
            amount: Amount to move (at least 0.01)

        Returns:
            Transfer outcome

        Raises:
            pydantic.ValidationError: Malformed card details; nothing is sent
            PaymentException: e.g. "Invalid card CVV provided"
        """
        request = CardTransferRequest(
            card_no=card_no,
            cvv=cvv,
            to_account_no=to_account_no,
            amount=amount,
        )
        logger.debug(
            "Processing card transfer from %s to account %s, amount %s",
            mask_card_number(card_no),
            to_account_no,
            amount,
        )
        return self._call(
            "POST",
            "transfer",
            action="Failed to process card transfer",
            body=request,
            parse=parse_model(TransferResponse),
            rules=(
                ErrorRule(400, "Invalid card CVV provided", "Invalid CVV"),
                ErrorRule(400, "Card has expired", "Card has expired"),
                ErrorRule(400, "Insufficient balance on the card account", "insufficient balance"),
                ErrorRule(400, "Currency mismatch between source and destination accounts", "currency mismatch"),
                ErrorRule(400, "Invalid transfer request: {body}"),
                ErrorRule(404, "Card not found", "Card not found"),
                ErrorRule(404, "Destination account not found", "Account not found"),
                ErrorRule(404, "Resource not found for transfer"),
                ErrorRule(401, "Card authentication failed"),
            ),
        )

"""Banks resource for the Payment Gateway SDK."""
from __future__ import annotations

import logging
from typing import Union
from uuid import UUID

from ..models.bank import Bank, BankRequest
from ..models.errors import PaymentException
from .base import BaseResource, ErrorRule, parse_list, parse_model

logger = logging.getLogger(__name__)

ID = Union[UUID, str]

BANK_NOT_FOUND = ErrorRule(404, "Bank not found with ID: {id}")

BANK_STATUS_MESSAGES = {
    400: "Invalid bank data: {body}",
    401: "Authentication failed",
    403: "Access denied to bank resource",
    404: "Bank resource not found",
}


class BanksResource(BaseResource):
    """Resource for bank operations."""

    path = "/api/banks"
    error_code = "BANK_ERROR"
    status_messages = BANK_STATUS_MESSAGES
    default_message = "{action}"

    def create(self, request: BankRequest) -> Bank:
        logger.debug("Creating bank %s (%s)", request.name, request.sort_code)
        return self._call(
            "POST",
            action="Failed to create bank",
            body=request,
            parse=parse_model(Bank),
            rules=(ErrorRule(400, "Bank with this sort code already exists", "sort code already exists"),),
        )

    def update(self, bank_id: ID, request: BankRequest) -> Bank:
        logger.debug("Updating bank %s", bank_id)
        return self._call(
            "PUT",
            bank_id,
            action="Failed to update bank",
            body=request,
            parse=parse_model(Bank),
            rules=(BANK_NOT_FOUND,),
            id=bank_id,
        )

    def get(self, bank_id: ID) -> Bank:
        logger.debug("Fetching bank %s", bank_id)
        return self._call(
            "GET",
            bank_id,
            action="Failed to retrieve bank",
            parse=parse_model(Bank),
            rules=(BANK_NOT_FOUND,),
            id=bank_id,
        )

    def list(self) -> list[Bank]:
        logger.debug("Fetching all banks")
        return self._call(
            "GET",
            action="Failed to retrieve banks",
            parse=parse_list(Bank),
            translate=False,
        )

    def sort_code_exists(self, sort_code: str) -> bool:
        """Check whether any bank uses ``sort_code``.

        There is no dedicated endpoint, so this filters the full bank list.
        """
        logger.debug("Checking if sort code %s exists", sort_code)
        try:
            return any(bank.sort_code == sort_code for bank in self.list())
        except PaymentException as err:
            logger.error("Error checking sort code existence: %s", sort_code)
            raise PaymentException(
                f"Failed to check sort code: {err.message}",
                code=self.error_code,
                status_code=err.status_code,
                response_body=err.response_body,
            ) from err

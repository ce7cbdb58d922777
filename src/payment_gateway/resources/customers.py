"""Customers resource for the Payment Gateway SDK."""
from __future__ import annotations

import logging
from typing import Optional, Union
from uuid import UUID

from ..models.customer import Customer, CustomerRequest
from .base import BaseResource, ErrorRule, parse_bool, parse_list, parse_model

logger = logging.getLogger(__name__)

ID = Union[UUID, str]

INVALID_CUSTOMER = ErrorRule(400, "Invalid customer data: {body}")


class CustomersResource(BaseResource):
    """Resource for customer operations."""

    path = "/api/customers"
    error_code = "CUSTOMER_ERROR"

    def create(self, request: CustomerRequest, client_id: Optional[ID] = None) -> Customer:
        logger.debug("Creating customer %s %s for client %s", request.first_name, request.last_name, client_id)
        return self._call(
            "POST",
            action="Failed to create customer",
            body=request,
            client_id=client_id,
            require_client=True,
            parse=parse_model(Customer),
            rules=(
                ErrorRule(400, "Bank not found with the provided ID", "Bank not found"),
                INVALID_CUSTOMER,
                ErrorRule(404, "Associated bank not found"),
            ),
        )

    def update(self, customer_id: ID, request: CustomerRequest, client_id: Optional[ID] = None) -> Customer:
        logger.debug("Updating customer %s for client %s", customer_id, client_id)
        return self._call(
            "PUT",
            customer_id,
            action="Failed to update customer",
            body=request,
            client_id=client_id,
            require_client=True,
            parse=parse_model(Customer),
            rules=(
                ErrorRule(404, "Customer not found with ID: {id}", "Customer not found"),
                ErrorRule(404, "Associated bank not found", "Bank not found"),
                ErrorRule(404, "Resource not found"),
                INVALID_CUSTOMER,
            ),
            id=customer_id,
        )

    def get(self, customer_id: ID, client_id: Optional[ID] = None) -> Customer:
        logger.debug("Fetching customer %s for client %s", customer_id, client_id)
        return self._call(
            "GET",
            customer_id,
            action="Failed to retrieve customer",
            client_id=client_id,
            require_client=True,
            parse=parse_model(Customer),
            rules=(ErrorRule(404, "Customer not found with ID: {id}"),),
            id=customer_id,
        )

    def list(self, client_id: Optional[ID] = None) -> list[Customer]:
        logger.debug("Fetching all customers for client %s", client_id)
        return self._call(
            "GET",
            action="Failed to retrieve customers",
            client_id=client_id,
            require_client=True,
            parse=parse_list(Customer),
            translate=False,
        )

    def list_by_bank(self, bank_id: ID, client_id: Optional[ID] = None) -> list[Customer]:
        """Customers of one bank; an unknown bank gives ``[]``."""
        logger.debug("Fetching customers for bank %s, client %s", bank_id, client_id)
        return self._call(
            "GET",
            "bank",
            bank_id,
            action="Failed to retrieve customers by bank ID",
            client_id=client_id,
            require_client=True,
            parse=parse_list(Customer),
            not_found=[],
        )

    def exists(self, customer_id: ID) -> bool:
        return self._call(
            "GET",
            customer_id,
            "exists",
            action="Failed to check customer existence",
            parse=parse_bool,
            not_found=False,
        )

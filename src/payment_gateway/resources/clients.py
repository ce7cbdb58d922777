"""
Clients resource for the Payment Gateway SDK.

Clients are scoped by tenant: every call carries X-TENANT-ID and never the
configured default X-CLIENT-ID.
"""
from __future__ import annotations

import logging
from typing import Optional, Union
from uuid import UUID

from ..models.client import Client, ClientRequest
from .base import BaseResource, ErrorRule, parse_bool, parse_list, parse_model

logger = logging.getLogger(__name__)

ID = Union[UUID, str]

CLIENT_NOT_FOUND = ErrorRule(404, "Client not found with ID: {id}")
INVALID_CLIENT = ErrorRule(400, "Invalid client data: {body}")


class ClientsResource(BaseResource):
    """Resource for client operations."""

    path = "/api/clients"
    error_code = "CLIENT_ERROR"
    sends_default_client_id = False

    def create(self, request: ClientRequest, tenant_id: Optional[ID] = None) -> Client:
        """Register a client under a tenant.

        Args:
            request: Client details
            tenant_id: Owning tenant (default: ``request.tenant_id``)
        """
        tenant_id = tenant_id if tenant_id is not None else request.tenant_id
        logger.debug("Creating client %s for tenant %s", request.name, tenant_id)
        return self._call(
            "POST",
            action="Failed to create client",
            body=request,
            tenant_id=tenant_id,
            parse=parse_model(Client),
            rules=(
                ErrorRule(400, "Tenant not found with the provided ID", "Tenant not found"),
                INVALID_CLIENT,
                ErrorRule(404, "Associated tenant not found"),
            ),
        )

    def get(self, client_id: ID, tenant_id: ID) -> Client:
        logger.debug("Fetching client %s for tenant %s", client_id, tenant_id)
        return self._call(
            "GET",
            client_id,
            action="Failed to retrieve client",
            tenant_id=tenant_id,
            parse=parse_model(Client),
            rules=(CLIENT_NOT_FOUND,),
            id=client_id,
        )

    def list(self, tenant_id: ID) -> list[Client]:
        """All clients of a tenant; ``[]`` when the gateway answers 404."""
        logger.debug("Fetching all clients for tenant %s", tenant_id)
        return self._call(
            "GET",
            action="Failed to retrieve clients by tenant",
            tenant_id=tenant_id,
            parse=parse_list(Client),
            rules=(ErrorRule(404, "Tenant not found with ID: {tenant}", "Tenant not found"),),
            not_found=[],
            tenant=tenant_id,
        )

    def update(self, client_id: ID, request: ClientRequest, tenant_id: Optional[ID] = None) -> Client:
        tenant_id = tenant_id if tenant_id is not None else request.tenant_id
        logger.debug("Updating client %s for tenant %s", client_id, tenant_id)
        return self._call(
            "PUT",
            client_id,
            action="Failed to update client",
            body=request,
            tenant_id=tenant_id,
            parse=parse_model(Client),
            rules=(
                ErrorRule(404, "Client not found with ID: {id}", "Client not found"),
                ErrorRule(404, "Associated tenant not found", "Tenant not found"),
                ErrorRule(404, "Resource not found"),
                INVALID_CLIENT,
            ),
            id=client_id,
        )

    def delete(self, client_id: ID, tenant_id: ID) -> None:
        logger.debug("Deleting client %s for tenant %s", client_id, tenant_id)
        self._call(
            "DELETE",
            client_id,
            action="Failed to delete client",
            tenant_id=tenant_id,
            rules=(
                CLIENT_NOT_FOUND,
                ErrorRule(409, "Cannot delete client - has dependent resources"),
            ),
            id=client_id,
        )

    def exists(self, client_id: ID, tenant_id: ID) -> bool:
        return self._call(
            "GET",
            client_id,
            "exists",
            action="Failed to check client existence",
            tenant_id=tenant_id,
            parse=parse_bool,
            not_found=False,
        )

    def activate(self, client_id: ID, tenant_id: ID) -> Client:
        logger.debug("Activating client %s for tenant %s", client_id, tenant_id)
        return self._call(
            "PUT",
            client_id,
            "activate",
            action="Failed to activate client",
            tenant_id=tenant_id,
            parse=parse_model(Client),
            rules=(CLIENT_NOT_FOUND,),
            id=client_id,
        )

    def deactivate(self, client_id: ID, tenant_id: ID) -> Client:
        logger.debug("Deactivating client %s for tenant %s", client_id, tenant_id)
        return self._call(
            "PUT",
            client_id,
            "deactivate",
            action="Failed to deactivate client",
            tenant_id=tenant_id,
            parse=parse_model(Client),
            rules=(CLIENT_NOT_FOUND,),
            id=client_id,
        )

"""
Tenants resource for the Payment Gateway SDK.

A tenant is registered as pending, then activated; activation returns the
tenant code that serves as the tenant's API key. Failures raise
:class:`~payment_gateway.models.errors.TenantException`.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Union
from uuid import UUID

from ..logging import mask_value
from ..models.errors import TenantException
from ..models.tenant import Tenant, TenantActivationResponse, TenantRegistration, TenantRequest
from .base import BaseResource, ErrorRule, parse_bool, parse_list, parse_model

logger = logging.getLogger(__name__)

ID = Union[UUID, str]

TENANT_NOT_FOUND = ErrorRule(404, "Tenant not found with ID: {id}")
NAME_EXISTS = ErrorRule(400, "Tenant with this name already exists", "name already exists")
INVALID_TENANT = ErrorRule(400, "Invalid tenant data: {body}")


def _parse_uuid(data: Any) -> Optional[UUID]:
    if data is None:
        return None
    return UUID(str(data))


class TenantsResource(BaseResource):
    """Resource for tenant operations."""

    path = "/api/tenants"
    error_class = TenantException
    error_code = "TENANT_ERROR"

    def create_pending(self, request: TenantRegistration, client_id: Optional[ID] = None) -> Optional[UUID]:
        """Register a tenant awaiting activation.

        Returns:
            The pending tenant's id
        """
        logger.debug("Creating pending tenant %s for client %s", request.name, client_id)
        return self._call(
            "POST",
            "pending",
            action="Failed to create pending tenant",
            body=request,
            client_id=client_id,
            require_client=True,
            parse=_parse_uuid,
            rules=(
                NAME_EXISTS,
                ErrorRule(400, "Tenant name is required", "name cannot be null"),
                INVALID_TENANT,
            ),
        )

    def activate(self, pending_tenant_id: ID, client_id: Optional[ID] = None) -> TenantActivationResponse:
        logger.debug("Activating tenant %s for client %s", pending_tenant_id, client_id)
        return self._call(
            "POST",
            pending_tenant_id,
            "activate",
            action="Failed to activate tenant",
            client_id=client_id,
            require_client=True,
            parse=parse_model(TenantActivationResponse),
            rules=(
                TENANT_NOT_FOUND,
                ErrorRule(400, "Tenant is not in pending payment state", "not in pending payment state"),
                ErrorRule(400, "Invalid activation request: {body}"),
            ),
            id=pending_tenant_id,
        )

    def get(self, tenant_id: ID, client_id: Optional[ID] = None) -> Tenant:
        logger.debug("Fetching tenant %s for client %s", tenant_id, client_id)
        return self._call(
            "GET",
            tenant_id,
            action="Failed to retrieve tenant",
            client_id=client_id,
            require_client=True,
            parse=parse_model(Tenant),
            rules=(TENANT_NOT_FOUND,),
            id=tenant_id,
        )

    def list(self, client_id: Optional[ID] = None) -> list[Tenant]:
        logger.debug("Fetching all tenants for client %s", client_id)
        return self._call(
            "GET",
            action="Failed to retrieve tenants",
            client_id=client_id,
            require_client=True,
            parse=parse_list(Tenant),
            translate=False,
        )

    def update(self, tenant_id: ID, request: TenantRequest, client_id: Optional[ID] = None) -> Tenant:
        logger.debug("Updating tenant %s for client %s", tenant_id, client_id)
        return self._call(
            "PUT",
            tenant_id,
            action="Failed to update tenant",
            body=request,
            client_id=client_id,
            require_client=True,
            parse=parse_model(Tenant),
            rules=(TENANT_NOT_FOUND, NAME_EXISTS, INVALID_TENANT),
            id=tenant_id,
        )

    def deactivate(self, tenant_id: ID, client_id: Optional[ID] = None) -> Tenant:
        logger.debug("Deactivating tenant %s for client %s", tenant_id, client_id)
        return self._call(
            "POST",
            tenant_id,
            "deactivate",
            action="Failed to deactivate tenant",
            client_id=client_id,
            require_client=True,
            parse=parse_model(Tenant),
            rules=(
                TENANT_NOT_FOUND,
                ErrorRule(400, "Tenant is already inactive", "already inactive"),
                ErrorRule(400, "Cannot deactivate tenant: {body}"),
            ),
            id=tenant_id,
        )

    def exists_by_code(self, tenant_code: str) -> bool:
        logger.debug("Checking if tenant exists with code %s", mask_value(tenant_code))
        return self._call(
            "GET",
            "exists",
            "code",
            tenant_code,
            action="Failed to check tenant existence",
            parse=parse_bool,
            not_found=False,
        )

    def validate_code(self, tenant_code: str) -> bool:
        """True when the code belongs to an active tenant."""
        logger.debug("Validating tenant code %s", mask_value(tenant_code))
        return self._call(
            "GET",
            "validate",
            "code",
            tenant_code,
            action="Failed to validate tenant code",
            parse=parse_bool,
            not_found=False,
        )

    def get_by_code(self, tenant_code: str, client_id: Optional[ID] = None) -> Tenant:
        logger.debug("Fetching tenant by code %s for client %s", mask_value(tenant_code), client_id)
        return self._call(
            "GET",
            "code",
            tenant_code,
            action="Failed to retrieve tenant by code",
            client_id=client_id,
            require_client=True,
            parse=parse_model(Tenant),
            rules=(ErrorRule(404, "Tenant not found with code: {code}"),),
            code=tenant_code,
        )

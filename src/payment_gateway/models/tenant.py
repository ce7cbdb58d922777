"""Tenant models for Payment Gateway SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import AliasChoices, Field, field_validator

from ..validators import NAME_PATTERN, check_length, check_not_blank, check_pattern
from .base import GatewayModel


class TenantRegistration(GatewayModel):
    """Registration for a tenant that stays pending until activated."""

    name: Optional[str] = None
    description: Optional[str] = None
    plan_type: Optional[str] = None  # "BASIC" | "PRO" | "ENTERPRISE"


class TenantRequest(GatewayModel):
    """Request to update an existing tenant."""

    name: str
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        check_not_blank(value, "Name is required")
        check_pattern(value, NAME_PATTERN, "Tenant name can only contain letters, spaces and hyphens")
        check_length(value, "Name must be between 2 and 100 characters", 2, 100)
        return value

    @field_validator("description")
    @classmethod
    def _validate_description(cls, value: Optional[str]) -> Optional[str]:
        return check_length(value, "Description cannot exceed 500 characters", max_length=500)


class Tenant(GatewayModel):
    """
    Top-level account holder.

    The backend serialises the active flag as ``active``; ``isActive`` is
    accepted too.
    """

    id: Optional[UUID] = None
    tenant_code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = Field(
        default=False,
        validation_alias=AliasChoices("active", "isActive", "is_active"),
    )
    date_created: Optional[datetime] = None
    created_by: Optional[str] = None
    date_modified: Optional[datetime] = None
    modified_by: Optional[str] = None


class TenantActivationResponse(GatewayModel):
    """Result of activating a pending tenant.

    ``tenant_code`` is the tenant's API key and is kept out of ``repr``.
    """

    tenant_id: Optional[UUID] = None
    tenant_code: Optional[str] = Field(default=None, repr=False)
    name: Optional[str] = None
    status: Optional[str] = None
    expires_at: Optional[datetime] = None

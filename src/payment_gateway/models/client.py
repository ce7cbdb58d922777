"""Client models for Payment Gateway SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import AliasChoices, Field, field_validator

from ..validators import NAME_PATTERN, check_email, check_length, check_not_blank, check_pattern
from .base import GatewayModel


class ClientRequest(GatewayModel):
    """Request to register or update a client under a tenant."""

    name: str
    email: str
    tenant_id: UUID

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        check_not_blank(value, "Name is required")
        check_pattern(value, NAME_PATTERN, "Client name can only contain letters, spaces and hyphens")
        check_length(value, "Name must be between 2 and 100 characters", 2, 100)
        return value

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        check_not_blank(value, "Email is required")
        check_length(value, "Email cannot exceed 255 characters", max_length=255)
        return check_email(value)


class Client(GatewayModel):
    """A business entity scoped under a tenant."""

    id: Optional[UUID] = None
    name: Optional[str] = None
    email: Optional[str] = None
    tenant_id: Optional[UUID] = None
    is_active: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("active", "isActive", "is_active"),
    )
    date_created: Optional[datetime] = None

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scoped record model: the unit stores persist and the resolver consumes."""

from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from omnibase_scopes.enums import EnumScopeType
from omnibase_scopes.models.model_scope_tuple import ModelScopeTuple
from omnibase_scopes.types import ScopeId

V = TypeVar("V")


class ModelScopedRecord(BaseModel, Generic[V]):
    """One configuration value attached to one scope slot of a key.

    ``value`` is a boolean for feature flags and any JSON value for
    policies. Exactly the discriminator matching ``scope_type`` is set
    (none for GLOBAL); the engine enforces this before every write.

    Attributes:
        id: Store-assigned identifier, immutable
        key: Lookup key shared by competing records (e.g. "DISPATCH_ENABLED")
        value: Configured value
        scope_type: Scope level of the record
        region_id: Region discriminator
        org_id: Organization discriminator
        service_category_id: Service category discriminator
        description: Optional human-readable note
        created_by_id: Identifier of the administrator who created the record
        created_at: Creation timestamp (store-managed)
        updated_at: Last modification timestamp (store-managed)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID = Field(description="Store-assigned record identifier")
    key: str = Field(min_length=1, description="Lookup key")
    value: V = Field(description="Configured value")
    scope_type: EnumScopeType = Field(description="Scope level of the record")
    region_id: ScopeId = Field(default=None, description="Region discriminator")
    org_id: ScopeId = Field(default=None, description="Organization discriminator")
    service_category_id: ScopeId = Field(
        default=None, description="Service category discriminator"
    )
    description: str | None = Field(default=None, description="Human-readable note")
    created_by_id: str | None = Field(
        default=None, description="Administrator who created the record"
    )
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last modification timestamp")

    @property
    def scope(self) -> ModelScopeTuple:
        """Scope tuple this record occupies."""
        return ModelScopeTuple(
            scope_type=self.scope_type,
            region_id=self.region_id,
            org_id=self.org_id,
            service_category_id=self.service_category_id,
        )


__all__ = ["ModelScopedRecord"]

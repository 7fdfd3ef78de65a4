# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope tuple model.

A scope tuple ``(scope_type, region_id, org_id, service_category_id)``
identifies exactly one configuration slot for a key. Stores use it both
to enumerate candidate slots for a lookup and to detect collisions.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_scopes.enums import EnumScopeType
from omnibase_scopes.types import ScopeId


class ModelScopeTuple(BaseModel):
    """Exact scope slot of a record.

    Frozen and hashable so tuples can be collected into sets and used as
    dictionary keys by in-memory stores.

    Attributes:
        scope_type: Scope level of the slot
        region_id: Region discriminator (REGION scope only)
        org_id: Organization discriminator (ORG scope only)
        service_category_id: Service category discriminator (SERVICE_CATEGORY only)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    scope_type: EnumScopeType = Field(description="Scope level of the slot")
    region_id: ScopeId = Field(default=None, description="Region discriminator")
    org_id: ScopeId = Field(default=None, description="Organization discriminator")
    service_category_id: ScopeId = Field(
        default=None, description="Service category discriminator"
    )

    @classmethod
    def global_scope(cls) -> ModelScopeTuple:
        """Return the single GLOBAL slot."""
        return cls(scope_type=EnumScopeType.GLOBAL)

    @classmethod
    def for_scope(cls, scope_type: EnumScopeType, scope_id: str | None) -> ModelScopeTuple:
        """Build a well-formed tuple for ``scope_type`` keyed by ``scope_id``.

        The id is placed in the discriminator field that ``scope_type``
        requires; GLOBAL ignores it.
        """
        field_name = scope_type.scope_id_field
        if field_name is None:
            return cls.global_scope()
        return cls.model_validate({"scope_type": scope_type, field_name: scope_id})

    @property
    def scope_id(self) -> str | None:
        """Value of the discriminator that ``scope_type`` requires, if any."""
        field_name = self.scope_type.scope_id_field
        if field_name is None:
            return None
        value: str | None = getattr(self, field_name)
        return value

    def sort_key(self) -> tuple[int, str, str, str]:
        """Ordering key: specificity, then discriminator ids."""
        return (
            self.scope_type.specificity,
            self.region_id or "",
            self.org_id or "",
            self.service_category_id or "",
        )


__all__ = ["ModelScopeTuple"]

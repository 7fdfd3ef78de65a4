# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope context model supplied by every configuration lookup."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_scopes.enums import EnumScopeType
from omnibase_scopes.models.model_scope_tuple import ModelScopeTuple
from omnibase_scopes.types import ScopeId


class ModelScopeContext(BaseModel):
    """Caller's position in the scope hierarchy.

    Any combination of the three dimensions may be populated. An empty
    context only matches GLOBAL records.

    Example:
        >>> ctx = ModelScopeContext(region_id="us-west", service_category_id="electrical")
        >>> ctx.most_specific_scope()
        (<EnumScopeType.SERVICE_CATEGORY: 'SERVICE_CATEGORY'>, 'electrical')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    region_id: ScopeId = Field(default=None, description="Caller's region")
    org_id: ScopeId = Field(default=None, description="Caller's organization")
    service_category_id: ScopeId = Field(
        default=None, description="Caller's service category"
    )

    def candidate_scopes(self) -> list[ModelScopeTuple]:
        """Return the GLOBAL tuple plus one tuple per populated dimension."""
        scopes = [ModelScopeTuple.global_scope()]
        if self.region_id is not None:
            scopes.append(
                ModelScopeTuple(scope_type=EnumScopeType.REGION, region_id=self.region_id)
            )
        if self.org_id is not None:
            scopes.append(ModelScopeTuple(scope_type=EnumScopeType.ORG, org_id=self.org_id))
        if self.service_category_id is not None:
            scopes.append(
                ModelScopeTuple(
                    scope_type=EnumScopeType.SERVICE_CATEGORY,
                    service_category_id=self.service_category_id,
                )
            )
        return scopes

    def most_specific_scope(self) -> tuple[EnumScopeType, str | None]:
        """Return the most specific populated dimension and its id.

        Falls back to ``(GLOBAL, None)`` for an empty context.
        """
        if self.service_category_id is not None:
            return EnumScopeType.SERVICE_CATEGORY, self.service_category_id
        if self.org_id is not None:
            return EnumScopeType.ORG, self.org_id
        if self.region_id is not None:
            return EnumScopeType.REGION, self.region_id
        return EnumScopeType.GLOBAL, None


__all__ = ["ModelScopeContext"]

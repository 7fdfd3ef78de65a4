# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Partial update payload for a scoped record.

Merge rules applied by the engine:
    - ``value``: None (or omitted) keeps the stored value
    - ``scope_type``: None (or omitted) keeps the stored scope type
    - scope ids and ``description``: omitted keeps the stored value, an
      explicit None clears it (tracked through ``model_fields_set``)

The key is not part of the patch; ``extra="forbid"`` rejects attempts to
change it.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from omnibase_scopes.enums import EnumScopeType
from omnibase_scopes.types import ScopeId
from omnibase_scopes.utils import validate_generic_value_strictly

V = TypeVar("V")


class ModelScopedRecordPatch(BaseModel, Generic[V]):
    """Administrative update request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: V | None = Field(default=None, description="New value")
    scope_type: EnumScopeType | None = Field(default=None, description="New scope level")
    region_id: ScopeId = Field(default=None, description="New region discriminator")
    org_id: ScopeId = Field(default=None, description="New organization discriminator")
    service_category_id: ScopeId = Field(
        default=None, description="New service category discriminator"
    )
    description: str | None = Field(default=None, description="New description")

    @field_validator("value", mode="before")
    @classmethod
    def validate_value_strictly(cls, v: object) -> object:
        return validate_generic_value_strictly(cls, v)

    def is_set(self, field_name: str) -> bool:
        """Return True if ``field_name`` was explicitly provided."""
        return field_name in self.model_fields_set


__all__ = ["ModelScopedRecordPatch"]

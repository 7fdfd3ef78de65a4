# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Payload for creating a scoped record."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from omnibase_scopes.enums import EnumScopeType
from omnibase_scopes.models.model_scope_tuple import ModelScopeTuple
from omnibase_scopes.types import ScopeId
from omnibase_scopes.utils import validate_generic_value_strictly

V = TypeVar("V")


class ModelScopedRecordCreate(BaseModel, Generic[V]):
    """Administrative create request.

    Scope consistency is checked by the engine, which raises
    InvalidScopeError.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str = Field(min_length=1, description="Lookup key")
    value: V = Field(description="Configured value")
    scope_type: EnumScopeType = Field(description="Scope level of the record")
    region_id: ScopeId = Field(default=None, description="Region discriminator")
    org_id: ScopeId = Field(default=None, description="Organization discriminator")
    service_category_id: ScopeId = Field(
        default=None, description="Service category discriminator"
    )
    description: str | None = Field(default=None, description="Human-readable note")

    @field_validator("value", mode="before")
    @classmethod
    def validate_value_strictly(cls, v: object) -> object:
        return validate_generic_value_strictly(cls, v)

    @property
    def scope(self) -> ModelScopeTuple:
        return ModelScopeTuple(
            scope_type=self.scope_type,
            region_id=self.region_id,
            org_id=self.org_id,
            service_category_id=self.service_category_id,
        )


__all__ = ["ModelScopedRecordCreate"]

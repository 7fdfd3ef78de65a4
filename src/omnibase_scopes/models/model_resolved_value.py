# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resolved value model returned by the engine and stored in the cache."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from omnibase_scopes.enums import EnumScopeType

V = TypeVar("V")


class ModelResolvedValue(BaseModel, Generic[V]):
    """Outcome of resolving a key for a scope context.

    ``resolved_scope_type`` records which scope answered the lookup. A value
    taken from the default table reports GLOBAL.

    Attributes:
        key: Key that was resolved
        value: Winning value
        resolved_scope_type: Scope level of the winning record
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str = Field(description="Key that was resolved")
    value: V = Field(description="Winning value")
    resolved_scope_type: EnumScopeType = Field(
        description="Scope level of the winning record"
    )


__all__ = ["ModelResolvedValue"]

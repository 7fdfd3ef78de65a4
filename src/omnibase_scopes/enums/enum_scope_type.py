# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope type enumeration for scoped configuration records.

Defines the four scope levels a feature flag or policy record can be
attached to, ordered from least to most specific.
"""

from enum import Enum


class EnumScopeType(str, Enum):
    """Breadth at which a scoped configuration value applies.

    Members are declared in ascending specificity. A record at a more
    specific scope wins over a matching record at a broader scope.

    Attributes:
        GLOBAL: Applies to every caller.
        REGION: Applies to callers in one region (``region_id``).
        ORG: Applies to callers in one organization (``org_id``).
        SERVICE_CATEGORY: Applies to callers in one service category
            (``service_category_id``).
    """

    GLOBAL = "GLOBAL"
    REGION = "REGION"
    ORG = "ORG"
    SERVICE_CATEGORY = "SERVICE_CATEGORY"

    @property
    def specificity(self) -> int:
        """Position in the scope hierarchy (0 for GLOBAL, 3 for SERVICE_CATEGORY)."""
        return SCOPE_HIERARCHY.index(self)

    @property
    def scope_id_field(self) -> str | None:
        """Name of the discriminator field this scope requires, if any."""
        return _SCOPE_ID_FIELDS[self]


SCOPE_HIERARCHY: tuple[EnumScopeType, ...] = (
    EnumScopeType.GLOBAL,
    EnumScopeType.REGION,
    EnumScopeType.ORG,
    EnumScopeType.SERVICE_CATEGORY,
)

_SCOPE_ID_FIELDS: dict[EnumScopeType, str | None] = {
    EnumScopeType.GLOBAL: None,
    EnumScopeType.REGION: "region_id",
    EnumScopeType.ORG: "org_id",
    EnumScopeType.SERVICE_CATEGORY: "service_category_id",
}

SCOPE_ID_FIELDS: tuple[str, ...] = ("region_id", "org_id", "service_category_id")


__all__ = ["SCOPE_HIERARCHY", "SCOPE_ID_FIELDS", "EnumScopeType"]

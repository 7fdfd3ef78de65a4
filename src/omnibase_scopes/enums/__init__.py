# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scoped configuration enumerations.

Exports:
    EnumScopeType: Scope levels (GLOBAL, REGION, ORG, SERVICE_CATEGORY)
    SCOPE_HIERARCHY: Scope levels ordered by ascending specificity
    SCOPE_ID_FIELDS: Names of the scope discriminator fields
    EnumInfraTransportType: Backend transport identifiers for error context
    EnumFeatureFlagKey: Well-known feature flag keys
    EnumPolicyKey: Well-known policy keys
"""

from omnibase_scopes.enums.enum_feature_flag_key import EnumFeatureFlagKey
from omnibase_scopes.enums.enum_infra_transport_type import EnumInfraTransportType
from omnibase_scopes.enums.enum_policy_key import EnumPolicyKey
from omnibase_scopes.enums.enum_scope_type import (
    SCOPE_HIERARCHY,
    SCOPE_ID_FIELDS,
    EnumScopeType,
)

__all__: list[str] = [
    "SCOPE_HIERARCHY",
    "SCOPE_ID_FIELDS",
    "EnumFeatureFlagKey",
    "EnumInfraTransportType",
    "EnumPolicyKey",
    "EnumScopeType",
]

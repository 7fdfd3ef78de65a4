# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Scoped Configuration.

Resolves feature flags and policies against a four-level scope hierarchy
(GLOBAL < REGION < ORG < SERVICE_CATEGORY), caches resolutions per calling
context, and keeps the cache consistent across administrative writes.

Subpackages:
    enums: Scope types, transport types, well-known keys
    errors: ModelOnexError-based error hierarchy
    models: Pydantic models for contexts, records, results, and configuration
    protocols: Store and cache contracts
    resolution: Resolver, validator, cache keys, engine, seeding, guards
    stores: In-memory and PostgreSQL record stores
    cache: In-memory and Valkey JSON caches
    cli: Administration CLI (``omnibase-scopes``)

Example:
    >>> from omnibase_scopes import (
    ...     InMemoryJsonCache,
    ...     InMemoryScopedRecordStore,
    ...     ModelScopeContext,
    ...     ServiceFeatureFlags,
    ...     create_feature_flag_engine,
    ... )
    >>> flags = ServiceFeatureFlags(
    ...     create_feature_flag_engine(InMemoryScopedRecordStore(), InMemoryJsonCache())
    ... )
    >>> await flags.is_enabled("DISPATCH_ENABLED", ModelScopeContext(org_id="acme"))
    False
"""

from omnibase_scopes.cache import InMemoryJsonCache, ValkeyJsonCache
from omnibase_scopes.enums import EnumFeatureFlagKey, EnumPolicyKey, EnumScopeType
from omnibase_scopes.errors import (
    DuplicateScopeError,
    FeatureDisabledError,
    InvalidScopedValueError,
    InvalidScopeError,
    RuntimeHostError,
    ScopeConsistencyError,
    ScopedRecordNotFoundError,
)
from omnibase_scopes.models import (
    ModelResolvedValue,
    ModelScopeContext,
    ModelScopedEngineConfig,
    ModelScopedRecord,
    ModelScopedRecordCreate,
    ModelScopedRecordPatch,
    ModelScopeTuple,
)
from omnibase_scopes.resolution import (
    ConfigResolutionEngine,
    ServiceFeatureFlags,
    create_feature_flag_engine,
    create_policy_engine,
    require_feature_flag,
    resolve_scoped_record,
    seed_scoped_records,
    validate_scope,
)
from omnibase_scopes.stores import InMemoryScopedRecordStore, PostgresScopedRecordStore

__version__ = "0.1.0"

__all__: list[str] = [
    "ConfigResolutionEngine",
    "DuplicateScopeError",
    "EnumFeatureFlagKey",
    "EnumPolicyKey",
    "EnumScopeType",
    "FeatureDisabledError",
    "InMemoryJsonCache",
    "InMemoryScopedRecordStore",
    "InvalidScopeError",
    "InvalidScopedValueError",
    "ModelResolvedValue",
    "ModelScopeContext",
    "ModelScopeTuple",
    "ModelScopedEngineConfig",
    "ModelScopedRecord",
    "ModelScopedRecordCreate",
    "ModelScopedRecordPatch",
    "PostgresScopedRecordStore",
    "RuntimeHostError",
    "ScopeConsistencyError",
    "ScopedRecordNotFoundError",
    "ServiceFeatureFlags",
    "ValkeyJsonCache",
    "__version__",
    "create_feature_flag_engine",
    "create_policy_engine",
    "require_feature_flag",
    "resolve_scoped_record",
    "seed_scoped_records",
    "validate_scope",
]

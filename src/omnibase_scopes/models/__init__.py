# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models for scoped configuration resolution.

Exports:
    ModelScopeContext: Caller's region/org/service category
    ModelScopeTuple: Exact scope slot of a record
    ModelScopedRecord: Persisted scoped value (generic over the value type)
    ModelResolvedValue: Resolution outcome and cache payload
    ModelScopedRecordCreate: Create request
    ModelScopedRecordPatch: Partial update request
    ModelScopedEngineConfig: Cache TTL configuration
    ModelPostgresScopedStoreConfig: PostgreSQL store configuration
    ModelValkeyCacheConfig: Valkey cache configuration
    ModelCacheStats: Cache counters snapshot
"""

from omnibase_scopes.models.model_cache_stats import ModelCacheStats
from omnibase_scopes.models.model_postgres_scoped_store_config import (
    ModelPostgresScopedStoreConfig,
)
from omnibase_scopes.models.model_resolved_value import ModelResolvedValue
from omnibase_scopes.models.model_scope_context import ModelScopeContext
from omnibase_scopes.models.model_scope_tuple import ModelScopeTuple
from omnibase_scopes.models.model_scoped_engine_config import (
    DEFAULT_FEATURE_FLAG_TTL_SECONDS,
    DEFAULT_POLICY_TTL_SECONDS,
    ModelScopedEngineConfig,
)
from omnibase_scopes.models.model_scoped_record import ModelScopedRecord
from omnibase_scopes.models.model_scoped_record_create import ModelScopedRecordCreate
from omnibase_scopes.models.model_scoped_record_patch import ModelScopedRecordPatch
from omnibase_scopes.models.model_valkey_cache_config import ModelValkeyCacheConfig

__all__: list[str] = [
    "DEFAULT_FEATURE_FLAG_TTL_SECONDS",
    "DEFAULT_POLICY_TTL_SECONDS",
    "ModelCacheStats",
    "ModelPostgresScopedStoreConfig",
    "ModelResolvedValue",
    "ModelScopeContext",
    "ModelScopeTuple",
    "ModelScopedEngineConfig",
    "ModelScopedRecord",
    "ModelScopedRecordCreate",
    "ModelScopedRecordPatch",
    "ModelValkeyCacheConfig",
]

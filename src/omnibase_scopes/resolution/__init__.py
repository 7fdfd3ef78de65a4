# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scoped configuration resolution.

Components:
    - Resolver: pure selection of the most specific matching record
    - Validator: scope discriminator consistency checks
    - Cache keys: per-context cache keys and per-key invalidation patterns
    - Engine: generic cache/store/resolver orchestration and admin writes
    - Value kinds: feature flag (bool) and policy (JSON) descriptors
    - Defaults and seeding: built-in policy defaults and seed records
    - Feature flags service: ``is_enabled`` and guards

Example:
    >>> from omnibase_scopes.cache import InMemoryJsonCache
    >>> from omnibase_scopes.models import ModelScopeContext
    >>> from omnibase_scopes.resolution import create_policy_engine
    >>> from omnibase_scopes.stores import InMemoryScopedRecordStore
    >>>
    >>> policies = create_policy_engine(InMemoryScopedRecordStore(), InMemoryJsonCache())
    >>> await policies.get_value("SLA_ACCEPT_MINUTES", ModelScopeContext(region_id="york"))
    5
"""

from omnibase_scopes.resolution.cache_keys import (
    GLOBAL_SCOPE_ID,
    build_cache_key,
    build_invalidation_pattern,
    escape_glob,
)
from omnibase_scopes.resolution.defaults import (
    DEFAULT_FEATURE_FLAG_SEEDS,
    DEFAULT_FEATURE_FLAGS,
    DEFAULT_POLICIES,
    DEFAULT_POLICY_SEEDS,
)
from omnibase_scopes.resolution.engine import ConfigResolutionEngine
from omnibase_scopes.resolution.engine_factories import (
    create_feature_flag_engine,
    create_policy_engine,
)
from omnibase_scopes.resolution.scope_resolver import resolve_scoped_record, scope_matches
from omnibase_scopes.resolution.scope_validator import validate_scope, validate_scope_tuple
from omnibase_scopes.resolution.seeding import seed_scoped_records
from omnibase_scopes.resolution.service_feature_flags import (
    ServiceFeatureFlags,
    require_feature_flag,
)
from omnibase_scopes.resolution.value_kinds import (
    FEATURE_FLAG_KIND,
    POLICY_KIND,
    ScopedValueKind,
)

__all__: list[str] = [
    "DEFAULT_FEATURE_FLAGS",
    "DEFAULT_FEATURE_FLAG_SEEDS",
    "DEFAULT_POLICIES",
    "DEFAULT_POLICY_SEEDS",
    "FEATURE_FLAG_KIND",
    "GLOBAL_SCOPE_ID",
    "POLICY_KIND",
    "ConfigResolutionEngine",
    "ScopedValueKind",
    "ServiceFeatureFlags",
    "build_cache_key",
    "build_invalidation_pattern",
    "create_feature_flag_engine",
    "create_policy_engine",
    "escape_glob",
    "require_feature_flag",
    "resolve_scoped_record",
    "scope_matches",
    "seed_scoped_records",
    "validate_scope",
    "validate_scope_tuple",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared fixtures for omnibase_scopes tests.

Provides in-memory backends driven by a fake clock, a store that counts
candidate queries, and engines for both value kinds. Feature flag and
policy engines share the same store and cache fixtures, so a test should
use only one of them unless it builds its own second store.
"""

from __future__ import annotations

import pytest
from pydantic import JsonValue

from omnibase_scopes.cache import InMemoryJsonCache
from omnibase_scopes.models import ModelScopedEngineConfig
from omnibase_scopes.resolution import (
    ConfigResolutionEngine,
    create_feature_flag_engine,
    create_policy_engine,
)
from tests.helpers.scoped_fakes import CountingScopedRecordStore, FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> CountingScopedRecordStore:
    return CountingScopedRecordStore()


@pytest.fixture
def cache(clock: FakeClock) -> InMemoryJsonCache:
    return InMemoryJsonCache(clock=clock)


@pytest.fixture
def engine_config() -> ModelScopedEngineConfig:
    return ModelScopedEngineConfig(feature_flag_ttl_seconds=300, policy_ttl_seconds=300)


@pytest.fixture
def flag_engine(
    store: CountingScopedRecordStore,
    cache: InMemoryJsonCache,
    engine_config: ModelScopedEngineConfig,
) -> ConfigResolutionEngine[bool]:
    return create_feature_flag_engine(store, cache, engine_config)


@pytest.fixture
def policy_engine(
    store: CountingScopedRecordStore,
    cache: InMemoryJsonCache,
    engine_config: ModelScopedEngineConfig,
) -> ConfigResolutionEngine[JsonValue]:
    return create_policy_engine(store, cache, engine_config)

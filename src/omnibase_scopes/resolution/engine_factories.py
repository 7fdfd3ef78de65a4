# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Factories for the two engine instantiations: feature flags and policies."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import JsonValue

from omnibase_scopes.models import ModelScopedEngineConfig
from omnibase_scopes.protocols import ProtocolJsonCache, ProtocolScopedRecordStore
from omnibase_scopes.resolution.defaults import DEFAULT_FEATURE_FLAGS, DEFAULT_POLICIES
from omnibase_scopes.resolution.engine import ConfigResolutionEngine
from omnibase_scopes.resolution.value_kinds import FEATURE_FLAG_KIND, POLICY_KIND


def create_feature_flag_engine(
    store: ProtocolScopedRecordStore,
    cache: ProtocolJsonCache,
    config: ModelScopedEngineConfig | None = None,
    defaults: Mapping[str, bool] | None = None,
) -> ConfigResolutionEngine[bool]:
    """Build the boolean feature flag engine (cache prefix ``ff``)."""
    effective_config = config or ModelScopedEngineConfig()
    return ConfigResolutionEngine(
        kind=FEATURE_FLAG_KIND,
        store=store,
        cache=cache,
        ttl_seconds=effective_config.feature_flag_ttl_seconds,
        defaults=DEFAULT_FEATURE_FLAGS if defaults is None else defaults,
    )


def create_policy_engine(
    store: ProtocolScopedRecordStore,
    cache: ProtocolJsonCache,
    config: ModelScopedEngineConfig | None = None,
    defaults: Mapping[str, JsonValue] | None = None,
) -> ConfigResolutionEngine[JsonValue]:
    """Build the JSON policy engine (cache prefix ``policy``).

    ``defaults`` replaces the built-in DEFAULT_POLICIES table when given.
    """
    effective_config = config or ModelScopedEngineConfig()
    return ConfigResolutionEngine(
        kind=POLICY_KIND,
        store=store,
        cache=cache,
        ttl_seconds=effective_config.policy_ttl_seconds,
        defaults=DEFAULT_POLICIES if defaults is None else defaults,
    )


__all__ = ["create_feature_flag_engine", "create_policy_engine"]

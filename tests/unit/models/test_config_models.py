# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for engine, store, and cache configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from omnibase_scopes.errors import ProtocolConfigurationError
from omnibase_scopes.models import (
    ModelCacheStats,
    ModelPostgresScopedStoreConfig,
    ModelScopedEngineConfig,
    ModelValkeyCacheConfig,
)


class TestModelScopedEngineConfig:
    """TTL configuration."""

    def test_defaults(self) -> None:
        config = ModelScopedEngineConfig()

        assert config.feature_flag_ttl_seconds == 300
        assert config.policy_ttl_seconds == 300

    def test_rejects_zero_ttl(self) -> None:
        with pytest.raises(ValidationError):
            ModelScopedEngineConfig(policy_ttl_seconds=0)

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCOPES_FEATURE_FLAG_TTL_SECONDS", "60")
        monkeypatch.delenv("SCOPES_POLICY_TTL_SECONDS", raising=False)

        config = ModelScopedEngineConfig.from_environment()

        assert config.feature_flag_ttl_seconds == 60
        assert config.policy_ttl_seconds == 300

    def test_from_environment_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCOPES_POLICY_TTL_SECONDS", "soon")

        with pytest.raises(ProtocolConfigurationError, match="1 invalid value"):
            ModelScopedEngineConfig.from_environment()


class TestModelPostgresScopedStoreConfig:
    """PostgreSQL store configuration."""

    def test_dsn_hidden_from_repr(self) -> None:
        config = ModelPostgresScopedStoreConfig(dsn="postgresql://u:secret@h/db")

        assert "secret" not in repr(config)

    def test_pool_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ModelPostgresScopedStoreConfig(
                dsn="postgresql://h/db", pool_min_size=5, pool_max_size=2
            )

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POSTGRES_DSN", "postgresql://h/db")
        monkeypatch.setenv("SCOPES_POSTGRES_POOL_MAX_SIZE", "20")
        monkeypatch.delenv("SCOPES_POSTGRES_POOL_MIN_SIZE", raising=False)
        monkeypatch.delenv("SCOPES_POSTGRES_COMMAND_TIMEOUT", raising=False)

        config = ModelPostgresScopedStoreConfig.from_environment("policies")

        assert config.table_name == "policies"
        assert config.pool_max_size == 20
        assert config.command_timeout == 30.0

    def test_from_environment_requires_dsn(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("POSTGRES_DSN", raising=False)

        with pytest.raises(ProtocolConfigurationError, match="POSTGRES_DSN is not set"):
            ModelPostgresScopedStoreConfig.from_environment("feature_flags")

    def test_from_environment_rejects_bad_table(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("POSTGRES_DSN", "postgresql://h/db")

        with pytest.raises(ProtocolConfigurationError):
            ModelPostgresScopedStoreConfig.from_environment("bad-name")


class TestModelValkeyCacheConfig:
    """Valkey cache configuration."""

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VALKEY_HOST", "valkey")
        monkeypatch.setenv("VALKEY_PORT", "6380")
        monkeypatch.setenv("VALKEY_PASSWORD", "pw")
        for name in ("VALKEY_DB", "VALKEY_TIMEOUT_SECONDS", "VALKEY_SCAN_COUNT"):
            monkeypatch.delenv(name, raising=False)

        config = ModelValkeyCacheConfig.from_environment()

        assert config.host == "valkey"
        assert config.port == 6380
        assert config.password is not None
        assert config.password.get_secret_value() == "pw"
        assert "pw" not in repr(config)

    def test_from_environment_invalid_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VALKEY_PORT", "99999")

        with pytest.raises(ProtocolConfigurationError):
            ModelValkeyCacheConfig.from_environment()


class TestModelCacheStats:
    """Derived statistics."""

    def test_hit_rate(self) -> None:
        assert ModelCacheStats().hit_rate == 0.0
        assert ModelCacheStats(hits=3, misses=1).hit_rate == 0.75

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration model for the scoped configuration engines."""

from __future__ import annotations

import os
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from omnibase_scopes.errors import ModelInfraErrorContext, ProtocolConfigurationError

DEFAULT_FEATURE_FLAG_TTL_SECONDS: Final[int] = 300
DEFAULT_POLICY_TTL_SECONDS: Final[int] = 300

_ENV_VARS: Final[dict[str, str]] = {
    "feature_flag_ttl_seconds": "SCOPES_FEATURE_FLAG_TTL_SECONDS",
    "policy_ttl_seconds": "SCOPES_POLICY_TTL_SECONDS",
}


class ModelScopedEngineConfig(BaseModel):
    """Cache lifetimes for resolved feature flags and policies.

    Attributes:
        feature_flag_ttl_seconds: TTL of cached feature flag resolutions
        policy_ttl_seconds: TTL of cached policy resolutions

    Environment Variables:
        SCOPES_FEATURE_FLAG_TTL_SECONDS: Overrides feature_flag_ttl_seconds
        SCOPES_POLICY_TTL_SECONDS: Overrides policy_ttl_seconds
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    feature_flag_ttl_seconds: int = Field(
        default=DEFAULT_FEATURE_FLAG_TTL_SECONDS,
        ge=1,
        description="TTL of cached feature flag resolutions in seconds",
    )
    policy_ttl_seconds: int = Field(
        default=DEFAULT_POLICY_TTL_SECONDS,
        ge=1,
        description="TTL of cached policy resolutions in seconds",
    )

    @classmethod
    def from_environment(cls) -> ModelScopedEngineConfig:
        """Build configuration from ``SCOPES_*`` environment variables.

        Raises:
            ProtocolConfigurationError: If a variable holds an invalid value.
        """
        values = {
            field_name: os.environ[env_var]
            for field_name, env_var in _ENV_VARS.items()
            if os.environ.get(env_var)
        }
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ProtocolConfigurationError(
                f"Invalid scoped engine configuration: {e.error_count()} invalid value(s)",
                context=ModelInfraErrorContext(
                    operation="from_environment",
                    target_name="scoped_engine_config",
                ),
            ) from e


__all__ = [
    "DEFAULT_FEATURE_FLAG_TTL_SECONDS",
    "DEFAULT_POLICY_TTL_SECONDS",
    "ModelScopedEngineConfig",
]

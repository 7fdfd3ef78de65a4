# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration model for the Valkey resolution cache."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

from omnibase_scopes.errors import ModelInfraErrorContext, ProtocolConfigurationError


class ModelValkeyCacheConfig(BaseModel):
    """Connection settings for ValkeyJsonCache.

    Attributes:
        host: Valkey hostname
        port: Valkey port
        db: Logical database index
        password: Optional password
        timeout_seconds: Socket connect and command timeout
        scan_count: COUNT hint for SCAN during pattern deletes

    Environment Variables:
        VALKEY_HOST, VALKEY_PORT, VALKEY_DB, VALKEY_PASSWORD,
        VALKEY_TIMEOUT_SECONDS, VALKEY_SCAN_COUNT
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = Field(default="localhost", min_length=1, description="Valkey hostname")
    port: int = Field(default=6379, ge=1, le=65535, description="Valkey port")
    db: int = Field(default=0, ge=0, description="Logical database index")
    password: SecretStr | None = Field(default=None, description="Valkey password")
    timeout_seconds: float = Field(
        default=5.0, gt=0, description="Socket connect and command timeout"
    )
    scan_count: int = Field(
        default=500, ge=1, description="COUNT hint for SCAN during pattern deletes"
    )

    @classmethod
    def from_environment(cls) -> ModelValkeyCacheConfig:
        """Build configuration from ``VALKEY_*`` environment variables.

        Raises:
            ProtocolConfigurationError: If a variable holds an invalid value.
        """
        values: dict[str, object] = {}
        for field_name, env_var in (
            ("host", "VALKEY_HOST"),
            ("port", "VALKEY_PORT"),
            ("db", "VALKEY_DB"),
            ("password", "VALKEY_PASSWORD"),
            ("timeout_seconds", "VALKEY_TIMEOUT_SECONDS"),
            ("scan_count", "VALKEY_SCAN_COUNT"),
        ):
            raw = os.environ.get(env_var)
            if raw:
                values[field_name] = raw
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ProtocolConfigurationError(
                f"Invalid Valkey cache configuration: {e.error_count()} invalid value(s)",
                context=ModelInfraErrorContext(
                    operation="from_environment",
                    target_name="valkey_cache_config",
                ),
            ) from e


__all__ = ["ModelValkeyCacheConfig"]

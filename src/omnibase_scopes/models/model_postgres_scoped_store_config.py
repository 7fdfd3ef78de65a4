# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration model for the PostgreSQL scoped record store."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from omnibase_scopes.errors import ModelInfraErrorContext, ProtocolConfigurationError


class ModelPostgresScopedStoreConfig(BaseModel):
    """Connection and table settings for PostgresScopedRecordStore.

    ``table_name`` is interpolated into SQL, so it is restricted to plain
    PostgreSQL identifiers. Feature flags and policies use separate tables.

    Attributes:
        dsn: PostgreSQL connection string (contains credentials, never logged)
        table_name: Table holding the records
        pool_min_size: Minimum pooled connections
        pool_max_size: Maximum pooled connections
        command_timeout: Per-statement timeout in seconds

    Environment Variables:
        POSTGRES_DSN: Required DSN
        SCOPES_POSTGRES_POOL_MIN_SIZE: Overrides pool_min_size
        SCOPES_POSTGRES_POOL_MAX_SIZE: Overrides pool_max_size
        SCOPES_POSTGRES_COMMAND_TIMEOUT: Overrides command_timeout
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    dsn: str = Field(min_length=1, repr=False, description="PostgreSQL DSN")
    table_name: str = Field(
        default="scoped_records",
        pattern=r"^[a-zA-Z_][a-zA-Z0-9_]*$",
        max_length=48,
        description="Table holding the records",
    )
    pool_min_size: int = Field(default=1, ge=0, description="Minimum pool size")
    pool_max_size: int = Field(default=10, ge=1, description="Maximum pool size")
    command_timeout: float = Field(
        default=30.0, gt=0, description="Per-statement timeout in seconds"
    )

    @model_validator(mode="after")
    def _check_pool_bounds(self) -> ModelPostgresScopedStoreConfig:
        if self.pool_min_size > self.pool_max_size:
            raise ValueError("pool_min_size must not exceed pool_max_size")
        return self

    @classmethod
    def from_environment(cls, table_name: str) -> ModelPostgresScopedStoreConfig:
        """Build configuration for ``table_name`` from environment variables.

        Raises:
            ProtocolConfigurationError: If POSTGRES_DSN is missing or a value
                is invalid.
        """
        context = ModelInfraErrorContext(
            operation="from_environment",
            target_name="postgres_scoped_store_config",
        )
        dsn = os.environ.get("POSTGRES_DSN", "")
        if not dsn:
            raise ProtocolConfigurationError("POSTGRES_DSN is not set", context=context)

        values: dict[str, object] = {"dsn": dsn, "table_name": table_name}
        for field_name, env_var in (
            ("pool_min_size", "SCOPES_POSTGRES_POOL_MIN_SIZE"),
            ("pool_max_size", "SCOPES_POSTGRES_POOL_MAX_SIZE"),
            ("command_timeout", "SCOPES_POSTGRES_COMMAND_TIMEOUT"),
        ):
            raw = os.environ.get(env_var)
            if raw:
                values[field_name] = raw
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ProtocolConfigurationError(
                f"Invalid PostgreSQL store configuration: {e.error_count()} invalid value(s)",
                context=context,
            ) from e


__all__ = ["ModelPostgresScopedStoreConfig"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scoped Configuration Errors Module.

All errors extend ModelOnexError (omnibase_core) through RuntimeHostError
and carry an EnumCoreErrorCode.

Exports:
    ModelInfraErrorContext: Bundled structured error context
    RuntimeHostError: Base error class
    ProtocolConfigurationError: Invalid store/cache/engine configuration
    InfraConnectionError: Store or cache connection failures
    InfraTimeoutError: Store or cache timeouts
    InfraUnavailableError: Backend used before initialize() or after shutdown()
    InvalidScopeError: Scope discriminators inconsistent with scope type
    InvalidScopedValueError: Value does not match the kind's value type
    DuplicateScopeError: Scope tuple already taken for a key
    ScopedRecordNotFoundError: Unknown record id or unresolvable policy key
    ScopeConsistencyError: Conflicting records of equal specificity
    FeatureDisabledError: Guarded feature flag is off

Correlation IDs:
    Store and cache adapters generate a uuid4() correlation ID per operation
    and attach it through ModelInfraErrorContext so a failing call can be
    traced across logs.

Error Sanitization:
    Never include DSNs, passwords, or raw driver messages in error text.
    Use the exception type name instead (``type(e).__name__``).
"""

from omnibase_scopes.errors.error_scoped_config import (
    DuplicateScopeError,
    FeatureDisabledError,
    InvalidScopedValueError,
    InvalidScopeError,
    ScopeConsistencyError,
    ScopedRecordNotFoundError,
)
from omnibase_scopes.errors.infra_errors import (
    InfraConnectionError,
    InfraTimeoutError,
    InfraUnavailableError,
    ProtocolConfigurationError,
    RuntimeHostError,
)
from omnibase_scopes.errors.model_infra_error_context import ModelInfraErrorContext

__all__: list[str] = [
    "DuplicateScopeError",
    "FeatureDisabledError",
    "InfraConnectionError",
    "InfraTimeoutError",
    "InfraUnavailableError",
    "InvalidScopeError",
    "InvalidScopedValueError",
    "ModelInfraErrorContext",
    "ProtocolConfigurationError",
    "RuntimeHostError",
    "ScopeConsistencyError",
    "ScopedRecordNotFoundError",
]

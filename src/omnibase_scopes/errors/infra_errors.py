# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Classes.

Error Hierarchy:
    ModelOnexError (from omnibase_core)
    └── RuntimeHostError (base infrastructure error)
        ├── ProtocolConfigurationError
        ├── InfraConnectionError
        ├── InfraTimeoutError
        └── InfraUnavailableError

Store and cache adapters translate driver exceptions (asyncpg, redis) into
these classes with ``raise ... from e`` so the engine can surface transport
failures without knowing which backend produced them. The engine never
retries or swallows them.
"""

from typing import Optional

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.models.errors.model_onex_error import ModelOnexError

from omnibase_scopes.errors.model_infra_error_context import ModelInfraErrorContext


class RuntimeHostError(ModelOnexError):
    """Base error class for scoped configuration errors.

    Structured Fields (via ModelInfraErrorContext):
        transport_type: Backend transport (db, valkey, memory, runtime)
        operation: Operation being performed
        correlation_id: Request correlation ID for tracking
        target_name: Store, cache, or engine name

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.VALKEY,
        ...     operation="delete_by_pattern",
        ...     target_name="valkey_json_cache",
        ... )
        >>> raise RuntimeHostError("Cache operation failed", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumCoreErrorCode] = None,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize RuntimeHostError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled infrastructure context (transport_type, operation, etc.)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        super().__init__(
            message=message,
            error_code=error_code or EnumCoreErrorCode.OPERATION_FAILED,
            correlation_id=correlation_id,
            **structured_context,
        )


class ProtocolConfigurationError(RuntimeHostError):
    """Raised when store, cache, or engine configuration is invalid.

    Example:
        >>> raise ProtocolConfigurationError(
        ...     "POSTGRES_DSN is not set",
        ...     context=ModelInfraErrorContext(operation="from_environment"),
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class InfraConnectionError(RuntimeHostError):
    """Raised when a store or cache connection cannot be established or is lost.

    Example:
        >>> raise InfraConnectionError(
        ...     "Failed to connect to database - check host and port",
        ...     context=context,
        ... ) from e
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.DATABASE_CONNECTION_ERROR,
            context=context,
            **extra_context,
        )


class InfraTimeoutError(RuntimeHostError):
    """Raised when a store query or cache command exceeds its timeout.

    Example:
        >>> raise InfraTimeoutError(
        ...     "find_candidates timed out after 30.0s",
        ...     context=context,
        ...     timeout_seconds=30.0,
        ... ) from e
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.TIMEOUT_ERROR,
            context=context,
            **extra_context,
        )


class InfraUnavailableError(RuntimeHostError):
    """Raised when a backend is not ready to serve requests.

    Used when a store or cache is called before ``initialize()`` or after
    ``shutdown()``.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.SERVICE_UNAVAILABLE,
            context=context,
            **extra_context,
        )


__all__ = [
    "InfraConnectionError",
    "InfraTimeoutError",
    "InfraUnavailableError",
    "ProtocolConfigurationError",
    "RuntimeHostError",
]

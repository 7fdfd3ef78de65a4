# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scoped Configuration Error Classes.

Client-facing errors raised by the scoped configuration engine. They share
the RuntimeHostError base with transport errors so callers can catch the
whole family, but carry distinct error codes:

    RuntimeHostError
    ├── InvalidScopeError          (VALIDATION_FAILED, 400 equivalent)
    ├── InvalidScopedValueError    (VALIDATION_FAILED, 400 equivalent)
    ├── DuplicateScopeError        (DUPLICATE_REGISTRATION, 409 equivalent)
    ├── ScopedRecordNotFoundError  (RESOURCE_NOT_FOUND, 404 equivalent)
    ├── ScopeConsistencyError      (INVALID_STATE, store holds conflicting records)
    └── FeatureDisabledError       (PERMISSION_DENIED, 403 equivalent)

Validation errors are raised before the engine touches the store.
"""

from typing import Optional
from uuid import UUID

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode

from omnibase_scopes.enums import EnumScopeType
from omnibase_scopes.errors.infra_errors import RuntimeHostError
from omnibase_scopes.errors.model_infra_error_context import ModelInfraErrorContext


def _scope_context(
    extra_context: dict[str, object],
    key: Optional[str],
    scope_type: Optional[str | EnumScopeType],
) -> dict[str, object]:
    if key is not None:
        extra_context["key"] = key
    if scope_type is not None:
        extra_context["scope_type"] = (
            scope_type.value if isinstance(scope_type, EnumScopeType) else scope_type
        )
    return extra_context


class InvalidScopeError(RuntimeHostError):
    """Raised when scope discriminator fields do not fit the scope type.

    Example:
        >>> raise InvalidScopeError(
        ...     "REGION scope requires region_id",
        ...     scope_type=EnumScopeType.REGION,
        ... )
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        scope_type: Optional[str | EnumScopeType] = None,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        self.key = key
        self.scope_type = scope_type
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.VALIDATION_FAILED,
            context=context,
            **_scope_context(extra_context, key, scope_type),
        )


class InvalidScopedValueError(RuntimeHostError):
    """Raised when a record value does not match the value type of its kind.

    Example:
        >>> raise InvalidScopedValueError(
        ...     "Feature flag value must be a boolean",
        ...     key="DISPATCH_ENABLED",
        ... )
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        self.key = key
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.VALIDATION_FAILED,
            context=context,
            **_scope_context(extra_context, key, None),
        )


class DuplicateScopeError(RuntimeHostError):
    """Raised when a record already occupies the same scope tuple for a key.

    Raised both by the engine's preflight check and by stores whose
    uniqueness constraint rejects a concurrent write.

    Example:
        >>> raise DuplicateScopeError(
        ...     "Feature flag 'DISPATCH_ENABLED' already exists for this scope",
        ...     key="DISPATCH_ENABLED",
        ...     scope_type=EnumScopeType.GLOBAL,
        ... )
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        scope_type: Optional[str | EnumScopeType] = None,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        self.key = key
        self.scope_type = scope_type
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.DUPLICATE_REGISTRATION,
            context=context,
            **_scope_context(extra_context, key, scope_type),
        )


class ScopedRecordNotFoundError(RuntimeHostError):
    """Raised for an unknown record id, or a policy key with no value.

    Example:
        >>> raise ScopedRecordNotFoundError(
        ...     "Policy with ID '...' not found",
        ...     record_id=record_id,
        ... )
    """

    def __init__(
        self,
        message: str,
        record_id: Optional[UUID] = None,
        key: Optional[str] = None,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        self.record_id = record_id
        self.key = key
        if record_id is not None:
            extra_context["record_id"] = str(record_id)
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.RESOURCE_NOT_FOUND,
            context=context,
            **_scope_context(extra_context, key, None),
        )


class ScopeConsistencyError(RuntimeHostError):
    """Raised when two matching records share the same specificity.

    Only reachable when the store no longer upholds per-tuple uniqueness.
    The resolver refuses to pick one of them arbitrarily.
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        scope_type: Optional[str | EnumScopeType] = None,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        self.key = key
        self.scope_type = scope_type
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.INVALID_STATE,
            context=context,
            **_scope_context(extra_context, key, scope_type),
        )


class FeatureDisabledError(RuntimeHostError):
    """Raised by feature guards when the required flag resolves to off.

    Example:
        >>> raise FeatureDisabledError(
        ...     "Feature 'BOOKING_ENABLED' is not enabled",
        ...     key="BOOKING_ENABLED",
        ... )
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        self.key = key
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.PERMISSION_DENIED,
            context=context,
            **_scope_context(extra_context, key, None),
        )


__all__ = [
    "DuplicateScopeError",
    "FeatureDisabledError",
    "InvalidScopeError",
    "InvalidScopedValueError",
    "ScopeConsistencyError",
    "ScopedRecordNotFoundError",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the scoped configuration error hierarchy."""

from __future__ import annotations

from uuid import uuid4

import pytest
from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.models.errors.model_onex_error import ModelOnexError

from omnibase_scopes.enums import EnumInfraTransportType, EnumScopeType
from omnibase_scopes.errors import (
    DuplicateScopeError,
    FeatureDisabledError,
    InfraConnectionError,
    InfraTimeoutError,
    InfraUnavailableError,
    InvalidScopedValueError,
    InvalidScopeError,
    ModelInfraErrorContext,
    ProtocolConfigurationError,
    RuntimeHostError,
    ScopeConsistencyError,
    ScopedRecordNotFoundError,
)


class TestErrorHierarchy:
    """Every error is a RuntimeHostError and a ModelOnexError."""

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (InvalidScopeError("m"), EnumCoreErrorCode.VALIDATION_FAILED),
            (InvalidScopedValueError("m"), EnumCoreErrorCode.VALIDATION_FAILED),
            (DuplicateScopeError("m"), EnumCoreErrorCode.DUPLICATE_REGISTRATION),
            (ScopedRecordNotFoundError("m"), EnumCoreErrorCode.RESOURCE_NOT_FOUND),
            (ScopeConsistencyError("m"), EnumCoreErrorCode.INVALID_STATE),
            (FeatureDisabledError("m"), EnumCoreErrorCode.PERMISSION_DENIED),
            (ProtocolConfigurationError("m"), EnumCoreErrorCode.INVALID_CONFIGURATION),
            (InfraConnectionError("m"), EnumCoreErrorCode.DATABASE_CONNECTION_ERROR),
            (InfraTimeoutError("m"), EnumCoreErrorCode.TIMEOUT_ERROR),
            (InfraUnavailableError("m"), EnumCoreErrorCode.SERVICE_UNAVAILABLE),
            (RuntimeHostError("m"), EnumCoreErrorCode.OPERATION_FAILED),
        ],
    )
    def test_error_codes(self, error: RuntimeHostError, code: EnumCoreErrorCode) -> None:
        assert isinstance(error, RuntimeHostError)
        assert isinstance(error, ModelOnexError)
        assert error.error_code == code
        assert error.message == "m"


class TestErrorContext:
    """Structured context fields."""

    def test_infra_context_is_flattened(self) -> None:
        correlation_id = uuid4()
        context = ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.DATABASE,
            operation="insert",
            target_name="postgres_scoped_record_store",
            correlation_id=correlation_id,
        )

        error = InfraConnectionError("lost", context=context)

        assert error.correlation_id == correlation_id
        assert error.model.context["operation"] == "insert"
        assert error.model.context["target_name"] == "postgres_scoped_record_store"

    def test_scope_fields(self) -> None:
        error = DuplicateScopeError(
            "Feature flag 'X' already exists for this scope",
            key="X",
            scope_type=EnumScopeType.REGION,
        )

        assert error.key == "X"
        assert error.scope_type is EnumScopeType.REGION
        assert error.model.context["scope_type"] == "REGION"
        assert "DUPLICATE_REGISTRATION" in str(error).upper()

    def test_not_found_records_id(self) -> None:
        record_id = uuid4()

        error = ScopedRecordNotFoundError("missing", record_id=record_id)

        assert error.record_id == record_id
        assert error.model.context["record_id"] == str(record_id)

    def test_raise_from_preserves_cause(self) -> None:
        original = OSError("refused")

        with pytest.raises(InfraConnectionError) as exc_info:
            try:
                raise original
            except OSError as e:
                raise InfraConnectionError("connect failed") from e

        assert exc_info.value.__cause__ is original

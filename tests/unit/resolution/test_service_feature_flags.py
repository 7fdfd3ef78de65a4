# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ServiceFeatureFlags and the require_feature_flag guard."""

from __future__ import annotations

from dataclasses import dataclass
from unittest.mock import AsyncMock

import pytest

from omnibase_scopes.enums import EnumScopeType
from omnibase_scopes.errors import FeatureDisabledError, InfraConnectionError
from omnibase_scopes.models import ModelScopeContext, ModelScopedRecordCreate
from omnibase_scopes.resolution import (
    ConfigResolutionEngine,
    ServiceFeatureFlags,
    require_feature_flag,
)


@dataclass
class BookingRequest:
    org_id: str


@pytest.fixture
def flags(flag_engine: ConfigResolutionEngine[bool]) -> ServiceFeatureFlags:
    return ServiceFeatureFlags(flag_engine)


async def enable_for_org(engine: ConfigResolutionEngine[bool], key: str, org_id: str) -> None:
    await engine.create(
        ModelScopedRecordCreate(
            key=key, value=False, scope_type=EnumScopeType.GLOBAL
        )
    )
    await engine.create(
        ModelScopedRecordCreate(
            key=key, value=True, scope_type=EnumScopeType.ORG, org_id=org_id
        )
    )


class TestIsEnabled:
    """Boolean checks."""

    @pytest.mark.asyncio
    async def test_unknown_flag_is_disabled(self, flags: ServiceFeatureFlags) -> None:
        assert await flags.is_enabled("UNKNOWN") is False

    @pytest.mark.asyncio
    async def test_follows_scope_resolution(
        self, flags: ServiceFeatureFlags, flag_engine: ConfigResolutionEngine[bool]
    ) -> None:
        await enable_for_org(flag_engine, "BOOKING_ENABLED", "acme")

        assert await flags.is_enabled("BOOKING_ENABLED", ModelScopeContext(org_id="acme"))
        assert not await flags.is_enabled("BOOKING_ENABLED", ModelScopeContext(org_id="other"))
        assert not await flags.is_enabled("BOOKING_ENABLED")

    def test_exposes_engine(
        self, flags: ServiceFeatureFlags, flag_engine: ConfigResolutionEngine[bool]
    ) -> None:
        assert flags.engine is flag_engine

    @pytest.mark.asyncio
    async def test_backend_failure_is_not_reported_as_disabled(self) -> None:
        engine = AsyncMock(spec=ConfigResolutionEngine)
        engine.get_value.side_effect = InfraConnectionError("Valkey connection failed")
        flags = ServiceFeatureFlags(engine)

        with pytest.raises(InfraConnectionError):
            await flags.is_enabled("DISPATCH_ENABLED")


class TestRequire:
    """Guards raise FeatureDisabledError when the flag is off."""

    @pytest.mark.asyncio
    async def test_require_disabled_flag(self, flags: ServiceFeatureFlags) -> None:
        with pytest.raises(FeatureDisabledError) as exc_info:
            await flags.require("PHONE_AGENT_ENABLED")

        assert exc_info.value.message == "Feature 'PHONE_AGENT_ENABLED' is not enabled"
        assert exc_info.value.key == "PHONE_AGENT_ENABLED"

    @pytest.mark.asyncio
    async def test_require_enabled_flag(
        self, flags: ServiceFeatureFlags, flag_engine: ConfigResolutionEngine[bool]
    ) -> None:
        await enable_for_org(flag_engine, "BOOKING_ENABLED", "acme")

        await flags.require("BOOKING_ENABLED", ModelScopeContext(org_id="acme"))

    @pytest.mark.asyncio
    async def test_decorator_uses_scope_from_arguments(
        self, flags: ServiceFeatureFlags, flag_engine: ConfigResolutionEngine[bool]
    ) -> None:
        await enable_for_org(flag_engine, "BOOKING_ENABLED", "acme")
        calls: list[str] = []

        @require_feature_flag(
            flags,
            "BOOKING_ENABLED",
            scope_from=lambda request: ModelScopeContext(org_id=request.org_id),
        )
        async def create_booking(request: BookingRequest) -> str:
            calls.append(request.org_id)
            return f"booked:{request.org_id}"

        assert await create_booking(BookingRequest(org_id="acme")) == "booked:acme"
        with pytest.raises(FeatureDisabledError):
            await create_booking(BookingRequest(org_id="other"))

        assert calls == ["acme"]
        assert create_booking.__name__ == "create_booking"

    @pytest.mark.asyncio
    async def test_decorator_without_scope_checks_globally(
        self, flags: ServiceFeatureFlags
    ) -> None:
        @require_feature_flag(flags, "DISPATCH_ENABLED")
        async def dispatch() -> None:
            raise AssertionError("must not run")

        with pytest.raises(FeatureDisabledError):
            await dispatch()

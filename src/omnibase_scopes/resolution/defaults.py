# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Built-in default tables and seed records.

``DEFAULT_POLICIES`` answers policy lookups that no stored record
resolves. Feature flags have no built-in defaults; an unresolved flag is
off. The seed lists are written by ``seed_scoped_records`` to give a fresh
database one GLOBAL record per well-known key.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from pydantic import JsonValue

from omnibase_scopes.enums import EnumFeatureFlagKey, EnumPolicyKey, EnumScopeType
from omnibase_scopes.models import ModelScopedRecordCreate

DEFAULT_FEATURE_FLAGS: Final[Mapping[str, bool]] = MappingProxyType({})

DEFAULT_POLICIES: Final[Mapping[str, JsonValue]] = MappingProxyType(
    {
        EnumPolicyKey.BOOKING_MODE.value: "EXACT",
        EnumPolicyKey.PHONE_AGENT_MODE.value: "INBOUND_ONLY",
        EnumPolicyKey.SLA_ACCEPT_MINUTES.value: 5,
        EnumPolicyKey.SLA_SCHEDULE_HOURS.value: 24,
        EnumPolicyKey.SLA_STATUS_UPDATE_HOURS.value: 48,
        EnumPolicyKey.DISPATCH_ESCALATION_STEPS.value: [1, 2, 5],
        EnumPolicyKey.IDENTITY_REVEAL_POLICY.value: "AFTER_ACCEPT_OR_PREFERRED_BOOKING",
        EnumPolicyKey.VISIBILITY_DEFAULT_PHOTOS.value: "PRIVATE",
        EnumPolicyKey.DATA_RETENTION_DAYS.value: 365,
        EnumPolicyKey.MAX_DISPATCH_ATTEMPTS.value: 10,
        EnumPolicyKey.LEAD_TIME_MINUTES.value: 60,
        EnumPolicyKey.BUFFER_MINUTES.value: 15,
        EnumPolicyKey.MAX_BOOKINGS_PER_DAY.value: 10,
        EnumPolicyKey.CANCELLATION_HOURS.value: 24,
    }
)

_FEATURE_FLAG_SEED_VALUES: Final[tuple[tuple[EnumFeatureFlagKey, bool, str], ...]] = (
    (EnumFeatureFlagKey.DISPATCH_ENABLED, True, "Enable automatic job dispatch"),
    (EnumFeatureFlagKey.BOOKING_ENABLED, True, "Enable booking functionality"),
    (EnumFeatureFlagKey.PHONE_AGENT_ENABLED, False, "Enable AI phone agent"),
    (
        EnumFeatureFlagKey.REQUIRE_BEFORE_PHOTOS,
        True,
        "Require before photos on job creation",
    ),
    (
        EnumFeatureFlagKey.REQUIRE_AFTER_PHOTOS,
        True,
        "Require after photos on job completion",
    ),
    (
        EnumFeatureFlagKey.ENABLE_PREFERRED_CONTRACTOR,
        True,
        "Allow SMBs to save preferred contractors",
    ),
    (EnumFeatureFlagKey.ENABLE_BOOST, False, "Enable boost campaigns for pros"),
    (
        EnumFeatureFlagKey.CONSENT_REQUIRED_FOR_RECORDING,
        True,
        "Require consent before call recording",
    ),
    (
        EnumFeatureFlagKey.PORTFOLIO_OPT_IN_REQUIRED,
        True,
        "Require opt-in for portfolio visibility",
    ),
)

_POLICY_SEED_DESCRIPTIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        EnumPolicyKey.BOOKING_MODE.value: "Booking mode: EXACT or WINDOW",
        EnumPolicyKey.PHONE_AGENT_MODE.value: (
            "Phone agent mode: INBOUND_ONLY or INBOUND_OUTBOUND"
        ),
        EnumPolicyKey.SLA_ACCEPT_MINUTES.value: "Minutes for pro to accept dispatch",
        EnumPolicyKey.SLA_SCHEDULE_HOURS.value: "Hours to schedule after acceptance",
        EnumPolicyKey.SLA_STATUS_UPDATE_HOURS.value: (
            "Hours between required status updates"
        ),
        EnumPolicyKey.DISPATCH_ESCALATION_STEPS.value: (
            "Pros to dispatch per escalation step"
        ),
        EnumPolicyKey.IDENTITY_REVEAL_POLICY.value: "When to reveal pro identity",
        EnumPolicyKey.VISIBILITY_DEFAULT_PHOTOS.value: "Default photo visibility",
        EnumPolicyKey.DATA_RETENTION_DAYS.value: "Days to retain data",
        EnumPolicyKey.MAX_DISPATCH_ATTEMPTS.value: "Maximum dispatch attempts per job",
        EnumPolicyKey.LEAD_TIME_MINUTES.value: "Minimum booking lead time",
        EnumPolicyKey.BUFFER_MINUTES.value: "Buffer between bookings",
        EnumPolicyKey.MAX_BOOKINGS_PER_DAY.value: "Maximum bookings per pro per day",
        EnumPolicyKey.CANCELLATION_HOURS.value: "Hours before for free cancellation",
    }
)

DEFAULT_FEATURE_FLAG_SEEDS: Final[tuple[ModelScopedRecordCreate[bool], ...]] = tuple(
    ModelScopedRecordCreate[bool](
        key=key.value,
        value=enabled,
        scope_type=EnumScopeType.GLOBAL,
        description=description,
    )
    for key, enabled, description in _FEATURE_FLAG_SEED_VALUES
)

DEFAULT_POLICY_SEEDS: Final[tuple[ModelScopedRecordCreate[JsonValue], ...]] = tuple(
    ModelScopedRecordCreate[JsonValue](
        key=key,
        value=value,
        scope_type=EnumScopeType.GLOBAL,
        description=_POLICY_SEED_DESCRIPTIONS.get(key),
    )
    for key, value in DEFAULT_POLICIES.items()
)


__all__ = [
    "DEFAULT_FEATURE_FLAGS",
    "DEFAULT_FEATURE_FLAG_SEEDS",
    "DEFAULT_POLICIES",
    "DEFAULT_POLICY_SEEDS",
]

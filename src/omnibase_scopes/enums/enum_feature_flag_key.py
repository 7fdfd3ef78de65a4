# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Well-known feature flag keys."""

from enum import Enum


class EnumFeatureFlagKey(str, Enum):
    """Feature flag keys consumed by platform modules.

    Flag lookups accept any string key; these members only name the keys
    that ship with default seed records.
    """

    DISPATCH_ENABLED = "DISPATCH_ENABLED"
    BOOKING_ENABLED = "BOOKING_ENABLED"
    PHONE_AGENT_ENABLED = "PHONE_AGENT_ENABLED"
    REQUIRE_BEFORE_PHOTOS = "REQUIRE_BEFORE_PHOTOS"
    REQUIRE_AFTER_PHOTOS = "REQUIRE_AFTER_PHOTOS"
    ENABLE_PREFERRED_CONTRACTOR = "ENABLE_PREFERRED_CONTRACTOR"
    ENABLE_BOOST = "ENABLE_BOOST"
    CONSENT_REQUIRED_FOR_RECORDING = "CONSENT_REQUIRED_FOR_RECORDING"
    PORTFOLIO_OPT_IN_REQUIRED = "PORTFOLIO_OPT_IN_REQUIRED"


__all__ = ["EnumFeatureFlagKey"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Well-known policy keys."""

from enum import Enum


class EnumPolicyKey(str, Enum):
    """Policy keys with a registered default value."""

    BOOKING_MODE = "BOOKING_MODE"
    PHONE_AGENT_MODE = "PHONE_AGENT_MODE"
    SLA_ACCEPT_MINUTES = "SLA_ACCEPT_MINUTES"
    SLA_SCHEDULE_HOURS = "SLA_SCHEDULE_HOURS"
    SLA_STATUS_UPDATE_HOURS = "SLA_STATUS_UPDATE_HOURS"
    DISPATCH_ESCALATION_STEPS = "DISPATCH_ESCALATION_STEPS"
    IDENTITY_REVEAL_POLICY = "IDENTITY_REVEAL_POLICY"
    VISIBILITY_DEFAULT_PHOTOS = "VISIBILITY_DEFAULT_PHOTOS"
    DATA_RETENTION_DAYS = "DATA_RETENTION_DAYS"
    MAX_DISPATCH_ATTEMPTS = "MAX_DISPATCH_ATTEMPTS"
    LEAD_TIME_MINUTES = "LEAD_TIME_MINUTES"
    BUFFER_MINUTES = "BUFFER_MINUTES"
    MAX_BOOKINGS_PER_DAY = "MAX_BOOKINGS_PER_DAY"
    CANCELLATION_HOURS = "CANCELLATION_HOURS"


__all__ = ["EnumPolicyKey"]

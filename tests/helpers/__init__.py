# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared test helpers for omnibase_scopes tests."""

from tests.helpers.scoped_fakes import CountingScopedRecordStore, FakeClock

__all__ = ["CountingScopedRecordStore", "FakeClock"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared utilities for omnibase_scopes."""

from omnibase_scopes.utils.util_pydantic_validators import (
    validate_generic_value_strictly,
)

__all__ = ["validate_generic_value_strictly"]

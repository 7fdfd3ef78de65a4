# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared type aliases for omnibase_scopes."""

from omnibase_scopes.types.type_scope_id import ScopeId, normalize_scope_id

__all__ = ["ScopeId", "normalize_scope_id"]

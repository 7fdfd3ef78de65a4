# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope identifier type shared by scope contexts, tuples, and records."""

from typing import Annotated

from pydantic import BeforeValidator


def normalize_scope_id(value: object) -> object:
    """Collapse blank scope ids to None so "set" always means non-empty."""
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


# Region, org, or service category identifier; blank strings become None
ScopeId = Annotated[str | None, BeforeValidator(normalize_scope_id)]

__all__ = ["ScopeId", "normalize_scope_id"]

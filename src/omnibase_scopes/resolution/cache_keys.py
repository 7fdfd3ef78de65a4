# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Cache key construction and invalidation patterns.

Resolutions are cached per calling context, keyed on the single most
specific dimension present in the context, not on the scope that
answered:

    ff:DISPATCH_ENABLED:SERVICE_CATEGORY:electrical
    policy:BOOKING_MODE:GLOBAL:global

Any write to a key deletes every entry under ``{prefix}:{key}:*``.
"""

from __future__ import annotations

import re
from typing import Final

from omnibase_scopes.models import ModelScopeContext

GLOBAL_SCOPE_ID: Final[str] = "global"

_GLOB_METACHARACTERS: Final[re.Pattern[str]] = re.compile(r"([*?\[\]\\])")


def escape_glob(text: str) -> str:
    """Backslash-escape Redis glob metacharacters in ``text``."""
    return _GLOB_METACHARACTERS.sub(r"\\\1", text)


def build_cache_key(
    prefix: str,
    key: str,
    ctx: ModelScopeContext | None = None,
) -> str:
    """Return the cache key for resolving ``key`` in ``ctx``.

    Example:
        >>> build_cache_key("ff", "X", ModelScopeContext(region_id="r1", org_id="o1"))
        'ff:X:ORG:o1'
        >>> build_cache_key("policy", "BOOKING_MODE")
        'policy:BOOKING_MODE:GLOBAL:global'
    """
    scope_type, scope_id = (ctx or ModelScopeContext()).most_specific_scope()
    return f"{prefix}:{key}:{scope_type.value}:{scope_id or GLOBAL_SCOPE_ID}"


def build_invalidation_pattern(prefix: str, key: str) -> str:
    """Return the glob matching every cached resolution of ``key``.

    Example:
        >>> build_invalidation_pattern("ff", "DISPATCH_ENABLED")
        'ff:DISPATCH_ENABLED:*'
    """
    return f"{prefix}:{escape_glob(key)}:*"


__all__ = [
    "GLOBAL_SCOPE_ID",
    "build_cache_key",
    "build_invalidation_pattern",
    "escape_glob",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""JSON caches for resolved scoped values.

Caches:
    - InMemoryJsonCache: process-local TTL cache
    - ValkeyJsonCache: shared Valkey cache via redis.asyncio
"""

from omnibase_scopes.cache.cache_inmemory import InMemoryJsonCache, compile_glob
from omnibase_scopes.cache.cache_valkey import ValkeyJsonCache

__all__: list[str] = ["InMemoryJsonCache", "ValkeyJsonCache", "compile_glob"]

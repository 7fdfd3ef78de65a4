# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the TTL JSON cache in front of the record stores.

Implementations:
    - InMemoryJsonCache: process-local cache for tests and single instances
    - ValkeyJsonCache: shared cache on Valkey (Redis protocol)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import JsonValue


@runtime_checkable
class ProtocolJsonCache(Protocol):
    """Key/value cache storing JSON documents with a TTL.

    Transport failures must raise (RuntimeHostError subclasses); they are
    never reported as a miss.
    """

    async def get_json(self, cache_key: str) -> JsonValue | None:
        """Return the decoded document under ``cache_key``, or None on a miss."""
        ...

    async def set_json(self, cache_key: str, value: JsonValue, ttl_seconds: int) -> None:
        """Store ``value`` under ``cache_key`` for ``ttl_seconds``."""
        ...

    async def delete_by_pattern(self, pattern: str) -> int:
        """Delete every entry whose key matches the glob ``pattern``.

        Patterns follow Redis glob syntax (``*``, ``?``, ``[...]``, and
        backslash escapes).

        Returns:
            Number of entries deleted.
        """
        ...


__all__ = ["ProtocolJsonCache"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory JSON cache with TTL expiry and Redis-style pattern deletes.

Entries are stored serialized, so readers always receive a fresh copy
and cannot mutate cached state, matching the behaviour of a networked
cache.
"""

from __future__ import annotations

import json
import logging
import re
import time
from collections.abc import Callable

from pydantic import JsonValue

from omnibase_scopes.models import ModelCacheStats

logger = logging.getLogger(__name__)


def _glob_class(body: str, negate: bool) -> str:
    """Translate the body of a glob character class into a regex fragment."""
    if not body:
        # Empty class matches nothing; negated, any one character.
        return "." if negate else "(?!)"
    items: list[str] = []
    index = 0
    while index < len(body):
        start = body[index]
        if index + 2 < len(body) and body[index + 1] == "-":
            low, high = sorted((start, body[index + 2]))
            items.append(f"{re.escape(low)}-{re.escape(high)}")
            index += 3
        else:
            items.append(re.escape(start))
            index += 1
    return f"[{'^' if negate else ''}{''.join(items)}]"


def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a Redis glob pattern into an anchored regular expression.

    Supports ``*``, ``?``, ``[...]`` (with ``^`` negation and ranges),
    and backslash escapes.
    """
    parts: list[str] = []
    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char == "\\" and index + 1 < length:
            parts.append(re.escape(pattern[index + 1]))
            index += 2
            continue
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        elif char == "[":
            end = pattern.find("]", index + 1)
            if end == -1:
                parts.append(re.escape(char))
            else:
                body = pattern[index + 1 : end]
                negate = body.startswith("^")
                if negate:
                    body = body[1:]
                parts.append(_glob_class(body, negate))
                index = end + 1
                continue
        else:
            parts.append(re.escape(char))
        index += 1
    return re.compile("".join(parts), re.DOTALL)


class InMemoryJsonCache:
    """Process-local implementation of ProtocolJsonCache.

    Args:
        clock: Monotonic time source in seconds (injectable for tests).

    Example:
        >>> cache = InMemoryJsonCache()
        >>> await cache.set_json("ff:X:GLOBAL:global", {"value": True}, ttl_seconds=300)
        >>> await cache.delete_by_pattern("ff:X:*")
        1
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[str, float]] = {}
        self._hits = 0
        self._misses = 0
        self._sets = 0
        self._deleted = 0
        self._expired_evictions = 0

    def __len__(self) -> int:
        return len(self._entries)

    async def get_json(self, cache_key: str) -> JsonValue | None:
        entry = self._entries.get(cache_key)
        if entry is None:
            self._misses += 1
            return None

        payload, expires_at = entry
        if expires_at <= self._clock():
            del self._entries[cache_key]
            self._expired_evictions += 1
            self._misses += 1
            return None

        self._hits += 1
        value: JsonValue = json.loads(payload)
        return value

    async def set_json(self, cache_key: str, value: JsonValue, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._entries[cache_key] = (json.dumps(value), self._clock() + ttl_seconds)
        self._sets += 1

    async def delete_by_pattern(self, pattern: str) -> int:
        matcher = compile_glob(pattern)
        doomed = [key for key in self._entries if matcher.fullmatch(key)]
        for key in doomed:
            del self._entries[key]
        self._deleted += len(doomed)
        logger.debug(
            "Deleted cache entries by pattern",
            extra={"pattern": pattern, "deleted": len(doomed)},
        )
        return len(doomed)

    async def clear(self) -> None:
        """Drop every entry. Counters are kept."""
        self._entries.clear()

    def get_stats(self) -> ModelCacheStats:
        """Return a snapshot of the cache counters."""
        return ModelCacheStats(
            hits=self._hits,
            misses=self._misses,
            sets=self._sets,
            deleted=self._deleted,
            expired_evictions=self._expired_evictions,
        )


__all__ = ["InMemoryJsonCache", "compile_glob"]

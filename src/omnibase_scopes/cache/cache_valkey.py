# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Valkey-backed JSON cache.

Uses ``redis.asyncio`` (Valkey speaks the Redis protocol). Values are
stored as JSON strings with ``SET key value EX ttl``. Pattern deletes walk
the keyspace with ``SCAN MATCH`` and remove keys in batches of
``scan_count``, so they never block the server the way ``KEYS`` would.

Transport failures are raised as InfraConnectionError / InfraTimeoutError
/ RuntimeHostError. A cache outage is never reported as a miss.

Security Note:
    Redis connection errors may echo connection strings; only exception
    type names are placed in error messages.
"""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import uuid4

from pydantic import JsonValue
from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from omnibase_scopes.enums import EnumInfraTransportType
from omnibase_scopes.errors import (
    InfraConnectionError,
    InfraTimeoutError,
    InfraUnavailableError,
    ModelInfraErrorContext,
    RuntimeHostError,
)
from omnibase_scopes.models import ModelCacheStats, ModelValkeyCacheConfig

logger = logging.getLogger(__name__)

_TARGET_NAME = "valkey_json_cache"


class ValkeyJsonCache:
    """Valkey implementation of ProtocolJsonCache.

    Either pass a ready client (shared with other components, not closed by
    ``shutdown``) or let ``initialize`` create one from the config.

    Example:
        >>> cache = ValkeyJsonCache(ModelValkeyCacheConfig(host="valkey"))
        >>> await cache.initialize()
        >>> try:
        ...     engine = create_policy_engine(store, cache)
        ... finally:
        ...     await cache.shutdown()
    """

    def __init__(
        self,
        config: ModelValkeyCacheConfig | None = None,
        client: Redis | None = None,
    ) -> None:
        self._config = config or ModelValkeyCacheConfig()
        self._client: Redis | None = client
        self._owns_client = client is None
        self._hits = 0
        self._misses = 0
        self._sets = 0
        self._deleted = 0

    @property
    def is_initialized(self) -> bool:
        """Return True if a client is available."""
        return self._client is not None

    async def initialize(self) -> None:
        """Create the client (if none was injected) and verify it with PING.

        Raises:
            InfraConnectionError: If Valkey is unreachable.
            InfraTimeoutError: If PING times out.
        """
        if self._client is None:
            password = self._config.password
            self._client = Redis(
                host=self._config.host,
                port=self._config.port,
                db=self._config.db,
                password=password.get_secret_value() if password else None,
                socket_timeout=self._config.timeout_seconds,
                socket_connect_timeout=self._config.timeout_seconds,
                decode_responses=True,
            )
            self._owns_client = True

        async with self._guard("initialize") as client:
            await client.ping()
        logger.info(
            "ValkeyJsonCache initialized",
            extra={"host": self._config.host, "port": self._config.port, "db": self._config.db},
        )

    async def shutdown(self) -> None:
        """Close the client if this cache created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
        logger.info("ValkeyJsonCache shutdown complete")

    async def get_json(self, cache_key: str) -> JsonValue | None:
        async with self._guard("get_json") as client:
            raw = await client.get(cache_key)
        if raw is None:
            self._misses += 1
            return None

        try:
            value: JsonValue = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(
                "Discarding undecodable cache entry",
                extra={"cache_key": cache_key},
            )
            self._misses += 1
            return None
        self._hits += 1
        return value

    async def set_json(self, cache_key: str, value: JsonValue, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        payload = json.dumps(value)
        async with self._guard("set_json") as client:
            await client.set(cache_key, payload, ex=ttl_seconds)
        self._sets += 1

    async def delete_by_pattern(self, pattern: str) -> int:
        batch_size = self._config.scan_count
        deleted = 0
        batch: list[str] = []
        async with self._guard("delete_by_pattern") as client:
            async for key in client.scan_iter(match=pattern, count=batch_size):
                batch.append(key)
                if len(batch) >= batch_size:
                    deleted += await client.delete(*batch)
                    batch.clear()
            if batch:
                deleted += await client.delete(*batch)
        self._deleted += deleted
        logger.debug(
            "Deleted cache entries by pattern",
            extra={"pattern": pattern, "deleted": deleted},
        )
        return deleted

    def get_stats(self) -> ModelCacheStats:
        """Return a snapshot of this instance's counters."""
        return ModelCacheStats(
            hits=self._hits,
            misses=self._misses,
            sets=self._sets,
            deleted=self._deleted,
        )

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[Redis]:
        """Yield the client, mapping redis errors to infrastructure errors."""
        context = ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.VALKEY,
            operation=operation,
            target_name=_TARGET_NAME,
            correlation_id=uuid4(),
        )
        if self._client is None:
            raise InfraUnavailableError(
                "Cache not initialized - call initialize() first",
                context=context,
            )

        try:
            yield self._client
        except RedisTimeoutError as e:
            raise InfraTimeoutError(
                f"Valkey {operation} timed out after {self._config.timeout_seconds}s",
                context=context,
                timeout_seconds=self._config.timeout_seconds,
            ) from e
        except RedisConnectionError as e:
            raise InfraConnectionError(
                f"Valkey connection failed during {operation}",
                context=context,
            ) from e
        except RedisError as e:
            raise RuntimeHostError(
                f"Valkey error during {operation}: {type(e).__name__}",
                context=context,
            ) from e


__all__: list[str] = ["ValkeyJsonCache"]

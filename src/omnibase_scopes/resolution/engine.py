# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scoped configuration resolution engine.

One generic engine serves both feature flags and policies. Each instance
is bound to a value kind (see value_kinds), a record store, and a JSON
cache.

Lookup flow:
    cache hit -> return cached ModelResolvedValue
    cache miss -> store.find_candidates(key, GLOBAL + context tuples)
               -> resolve_scoped_record
               -> default table (synthetic GLOBAL result) if nothing resolves
               -> cache the result for the kind's TTL

Write flow (create/update/delete):
    validate scope -> preflight duplicate check -> store write
    -> delete every cached resolution of the key

The engine keeps no mutable state of its own, so any number of instances
may share a store and cache. Store and cache errors propagate unchanged;
nothing is retried here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Generic, TypeVar, cast
from uuid import UUID

from pydantic import ValidationError

from omnibase_scopes.enums import EnumScopeType
from omnibase_scopes.errors import DuplicateScopeError, ScopedRecordNotFoundError
from omnibase_scopes.models import (
    ModelResolvedValue,
    ModelScopeContext,
    ModelScopedRecord,
    ModelScopedRecordCreate,
    ModelScopedRecordPatch,
    ModelScopeTuple,
)
from omnibase_scopes.protocols import ProtocolJsonCache, ProtocolScopedRecordStore
from omnibase_scopes.resolution.cache_keys import (
    build_cache_key,
    build_invalidation_pattern,
)
from omnibase_scopes.resolution.scope_resolver import resolve_scoped_record
from omnibase_scopes.resolution.scope_validator import validate_scope_tuple
from omnibase_scopes.resolution.value_kinds import ScopedValueKind

logger = logging.getLogger(__name__)

V = TypeVar("V")


class ConfigResolutionEngine(Generic[V]):
    """Resolve, cache, and administer scoped configuration values of one kind.

    Example:
        >>> engine = ConfigResolutionEngine(
        ...     kind=FEATURE_FLAG_KIND,
        ...     store=InMemoryScopedRecordStore(),
        ...     cache=InMemoryJsonCache(),
        ...     ttl_seconds=300,
        ... )
        >>> await engine.create(
        ...     ModelScopedRecordCreate(
        ...         key="DISPATCH_ENABLED", value=True, scope_type=EnumScopeType.GLOBAL
        ...     )
        ... )
        >>> await engine.get_value("DISPATCH_ENABLED", ModelScopeContext(region_id="r1"))
        True
    """

    def __init__(
        self,
        kind: ScopedValueKind[V],
        store: ProtocolScopedRecordStore,
        cache: ProtocolJsonCache,
        ttl_seconds: int,
        defaults: Mapping[str, V] | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            kind: Value kind this engine serves.
            store: Record store for this kind.
            cache: Cache shared with other engine instances.
            ttl_seconds: Lifetime of cached resolutions.
            defaults: Static ``key -> value`` table consulted only when no
                stored record resolves.
        """
        self._kind = kind
        self._store = store
        self._cache = cache
        self._ttl_seconds = ttl_seconds
        self._defaults: Mapping[str, V] = defaults if defaults is not None else {}

    @property
    def kind(self) -> ScopedValueKind[V]:
        """Value kind served by this engine."""
        return self._kind

    async def get(
        self,
        key: str,
        ctx: ModelScopeContext | None = None,
    ) -> ModelResolvedValue[V] | None:
        """Resolve ``key`` for the caller context ``ctx``.

        Returns:
            The resolved value, a synthetic GLOBAL result from the default
            table, or None if neither exists. None results are not cached.
        """
        context = ctx or ModelScopeContext()
        cache_key = build_cache_key(self._kind.cache_prefix, key, context)

        cached = await self._cache.get_json(cache_key)
        if cached is not None:
            resolved = self._parse_cached(cache_key, cached)
            if resolved is not None:
                logger.debug(
                    "Scoped value cache hit",
                    extra={"kind": self._kind.name, "cache_key": cache_key},
                )
                return resolved

        candidates = await self._store.find_candidates(key, context.candidate_scopes())
        record = resolve_scoped_record(candidates, context)

        resolved_model = self._kind.resolved_model
        if record is not None:
            resolved = resolved_model(
                key=key,
                value=record.value,
                resolved_scope_type=record.scope_type,
            )
        elif key in self._defaults:
            resolved = resolved_model(
                key=key,
                value=self._defaults[key],
                resolved_scope_type=EnumScopeType.GLOBAL,
            )
        else:
            logger.debug(
                "Scoped value not resolved",
                extra={"kind": self._kind.name, "key": key},
            )
            return None

        await self._cache.set_json(
            cache_key, resolved.model_dump(mode="json"), self._ttl_seconds
        )
        logger.debug(
            "Scoped value resolved and cached",
            extra={
                "kind": self._kind.name,
                "cache_key": cache_key,
                "resolved_scope_type": resolved.resolved_scope_type.value,
                "from_defaults": record is None,
            },
        )
        return resolved

    async def get_value(self, key: str, ctx: ModelScopeContext | None = None) -> V:
        """Return only the resolved value for ``key``.

        Falls back to the kind's ``fallback_value`` (False for feature
        flags) when nothing resolves.

        Raises:
            ScopedRecordNotFoundError: If nothing resolves and the kind has
                no fallback value.
        """
        resolved = await self.get(key, ctx)
        if resolved is not None:
            return resolved.value
        if self._kind.fallback_value is not None:
            return self._kind.fallback_value
        raise ScopedRecordNotFoundError(f"{self._kind.label} '{key}' not found", key=key)

    async def list_records(self) -> list[ModelScopedRecord[V]]:
        """Return every record ordered by key, then scope. Bypasses the cache."""
        records = await self._store.list_all()
        return cast("list[ModelScopedRecord[V]]", records)

    async def create(
        self,
        data: ModelScopedRecordCreate[V],
        created_by_id: str | None = None,
    ) -> ModelScopedRecord[V]:
        """Create a record and invalidate cached resolutions of its key.

        Raises:
            InvalidScopeError: If the scope discriminators are inconsistent.
            InvalidScopedValueError: If the value does not fit the kind.
            DuplicateScopeError: If the scope tuple is already taken.
        """
        scope = data.scope
        validate_scope_tuple(scope, key=data.key)
        value = self._kind.validate_value(data.key, data.value)
        await self._ensure_scope_available(data.key, scope)

        record = await self._store.insert(
            key=data.key,
            value=value,
            scope=scope,
            description=data.description,
            created_by_id=created_by_id,
        )
        await self.invalidate(record.key)
        logger.info(
            "Scoped record created",
            extra={
                "kind": self._kind.name,
                "key": record.key,
                "record_id": str(record.id),
                "scope_type": record.scope_type.value,
            },
        )
        return cast("ModelScopedRecord[V]", record)

    async def update(
        self,
        record_id: UUID,
        patch: ModelScopedRecordPatch[V],
    ) -> ModelScopedRecord[V]:
        """Merge ``patch`` into a record and invalidate its key.

        The merged scope is re-validated and checked against every other
        record of the key. The key itself cannot change.

        Raises:
            ScopedRecordNotFoundError: If ``record_id`` does not exist.
            InvalidScopeError: If the merged scope is inconsistent.
            InvalidScopedValueError: If the new value does not fit the kind.
            DuplicateScopeError: If another record holds the merged scope.
        """
        existing = await self._get_existing(record_id)

        scope = ModelScopeTuple(
            scope_type=patch.scope_type or existing.scope_type,
            region_id=patch.region_id if patch.is_set("region_id") else existing.region_id,
            org_id=patch.org_id if patch.is_set("org_id") else existing.org_id,
            service_category_id=(
                patch.service_category_id
                if patch.is_set("service_category_id")
                else existing.service_category_id
            ),
        )
        validate_scope_tuple(scope, key=existing.key)
        value = (
            existing.value
            if patch.value is None
            else self._kind.validate_value(existing.key, patch.value)
        )
        description = (
            patch.description if patch.is_set("description") else existing.description
        )
        await self._ensure_scope_available(existing.key, scope, exclude_id=existing.id)

        record = await self._store.update(
            existing.id,
            value=value,
            scope=scope,
            description=description,
        )
        await self.invalidate(existing.key)
        logger.info(
            "Scoped record updated",
            extra={
                "kind": self._kind.name,
                "key": existing.key,
                "record_id": str(existing.id),
                "scope_type": scope.scope_type.value,
            },
        )
        return cast("ModelScopedRecord[V]", record)

    async def delete(self, record_id: UUID) -> None:
        """Delete a record and invalidate its key.

        Raises:
            ScopedRecordNotFoundError: If ``record_id`` does not exist.
        """
        existing = await self._get_existing(record_id)
        if not await self._store.delete(existing.id):
            raise self._not_found(record_id)
        await self.invalidate(existing.key)
        logger.info(
            "Scoped record deleted",
            extra={
                "kind": self._kind.name,
                "key": existing.key,
                "record_id": str(existing.id),
            },
        )

    async def invalidate(self, key: str) -> int:
        """Delete every cached resolution of ``key``. Returns the entry count."""
        pattern = build_invalidation_pattern(self._kind.cache_prefix, key)
        deleted = await self._cache.delete_by_pattern(pattern)
        logger.debug(
            "Scoped value cache invalidated",
            extra={"kind": self._kind.name, "pattern": pattern, "deleted": deleted},
        )
        return deleted

    def _parse_cached(self, cache_key: str, payload: object) -> ModelResolvedValue[V] | None:
        try:
            return self._kind.resolved_model.model_validate(payload)
        except ValidationError as e:
            logger.warning(
                "Discarding unreadable cached scoped value",
                extra={
                    "kind": self._kind.name,
                    "cache_key": cache_key,
                    "error_count": e.error_count(),
                },
            )
            return None

    async def _get_existing(self, record_id: UUID) -> ModelScopedRecord[object]:
        existing = await self._store.get_by_id(record_id)
        if existing is None:
            raise self._not_found(record_id)
        return existing

    async def _ensure_scope_available(
        self,
        key: str,
        scope: ModelScopeTuple,
        exclude_id: UUID | None = None,
    ) -> None:
        conflict = await self._store.find_by_exact_scope(key, scope, exclude_id=exclude_id)
        if conflict is not None:
            raise DuplicateScopeError(
                f"{self._kind.label} '{key}' already exists for this scope",
                key=key,
                scope_type=scope.scope_type,
            )

    def _not_found(self, record_id: UUID) -> ScopedRecordNotFoundError:
        return ScopedRecordNotFoundError(
            f"{self._kind.label} with ID '{record_id}' not found",
            record_id=record_id,
        )


__all__ = ["ConfigResolutionEngine"]

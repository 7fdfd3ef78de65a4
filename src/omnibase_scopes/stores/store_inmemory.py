# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory scoped record store.

Keeps records in a dictionary guarded by an asyncio.Lock. Writes enforce
per-key scope tuple uniqueness inside the lock, giving the same guarantee
as the unique index of the PostgreSQL store within one process.

Intended for tests and single-process deployments; records are lost when
the process exits.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from datetime import UTC, datetime
from uuid import UUID, uuid4

from omnibase_scopes.errors import DuplicateScopeError, ScopedRecordNotFoundError
from omnibase_scopes.models import ModelScopedRecord, ModelScopeTuple


class InMemoryScopedRecordStore:
    """Dictionary-backed implementation of ProtocolScopedRecordStore.

    Example:
        >>> store = InMemoryScopedRecordStore()
        >>> record = await store.insert(
        ...     key="DISPATCH_ENABLED",
        ...     value=True,
        ...     scope=ModelScopeTuple.global_scope(),
        ... )
        >>> await store.get_by_id(record.id) == record
        True
    """

    def __init__(self) -> None:
        self._records: dict[UUID, ModelScopedRecord[object]] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._records)

    async def find_candidates(
        self,
        key: str,
        scopes: Sequence[ModelScopeTuple],
    ) -> list[ModelScopedRecord[object]]:
        wanted = set(scopes)
        return [
            record
            for record in self._records.values()
            if record.key == key and record.scope in wanted
        ]

    async def find_by_exact_scope(
        self,
        key: str,
        scope: ModelScopeTuple,
        exclude_id: UUID | None = None,
    ) -> ModelScopedRecord[object] | None:
        return self._find_exact(key, scope, exclude_id)

    async def get_by_id(self, record_id: UUID) -> ModelScopedRecord[object] | None:
        return self._records.get(record_id)

    async def insert(
        self,
        *,
        key: str,
        value: object,
        scope: ModelScopeTuple,
        description: str | None = None,
        created_by_id: str | None = None,
    ) -> ModelScopedRecord[object]:
        async with self._lock:
            if self._find_exact(key, scope, None) is not None:
                raise DuplicateScopeError(
                    f"Record '{key}' already exists for this scope",
                    key=key,
                    scope_type=scope.scope_type,
                )
            now = datetime.now(UTC)
            record = ModelScopedRecord(
                id=uuid4(),
                key=key,
                value=value,
                scope_type=scope.scope_type,
                region_id=scope.region_id,
                org_id=scope.org_id,
                service_category_id=scope.service_category_id,
                description=description,
                created_by_id=created_by_id,
                created_at=now,
                updated_at=now,
            )
            self._records[record.id] = record
            return record

    async def update(
        self,
        record_id: UUID,
        *,
        value: object,
        scope: ModelScopeTuple,
        description: str | None,
    ) -> ModelScopedRecord[object]:
        async with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                raise ScopedRecordNotFoundError(
                    f"Record with ID '{record_id}' not found",
                    record_id=record_id,
                )
            if self._find_exact(existing.key, scope, record_id) is not None:
                raise DuplicateScopeError(
                    f"Record '{existing.key}' already exists for this scope",
                    key=existing.key,
                    scope_type=scope.scope_type,
                )
            record = existing.model_copy(
                update={
                    "value": value,
                    "scope_type": scope.scope_type,
                    "region_id": scope.region_id,
                    "org_id": scope.org_id,
                    "service_category_id": scope.service_category_id,
                    "description": description,
                    "updated_at": datetime.now(UTC),
                }
            )
            self._records[record_id] = record
            return record

    async def delete(self, record_id: UUID) -> bool:
        async with self._lock:
            return self._records.pop(record_id, None) is not None

    async def list_all(self) -> list[ModelScopedRecord[object]]:
        return sorted(
            self._records.values(),
            key=lambda record: (record.key, record.scope.sort_key(), str(record.id)),
        )

    async def clear(self) -> None:
        """Remove every record."""
        async with self._lock:
            self._records.clear()

    def _find_exact(
        self,
        key: str,
        scope: ModelScopeTuple,
        exclude_id: UUID | None,
    ) -> ModelScopedRecord[object] | None:
        for record in self._records.values():
            if record.id != exclude_id and record.key == key and record.scope == scope:
                return record
        return None


__all__ = ["InMemoryScopedRecordStore"]

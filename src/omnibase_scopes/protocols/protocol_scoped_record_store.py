# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for scoped record persistence.

Stores hold the records of one entity kind (feature flags or policies).
Implementations must enforce per-key uniqueness of the scope tuple at write
time, raising DuplicateScopeError, so concurrent creates cannot both
succeed. The engine's preflight duplicate check only produces a friendlier
error in the non-racing case.

Implementations:
    - InMemoryScopedRecordStore: asyncio-locked dictionary for tests and
      single-process use
    - PostgresScopedRecordStore: asyncpg-backed store with a unique index
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable
from uuid import UUID

from omnibase_scopes.models import ModelScopedRecord, ModelScopeTuple


@runtime_checkable
class ProtocolScopedRecordStore(Protocol):
    """Persistence contract consumed by ConfigResolutionEngine.

    All methods are async. Transport failures surface as RuntimeHostError
    subclasses (InfraConnectionError, InfraTimeoutError, ...).
    """

    async def find_candidates(
        self,
        key: str,
        scopes: Sequence[ModelScopeTuple],
    ) -> list[ModelScopedRecord[object]]:
        """Return every record for ``key`` occupying one of ``scopes``.

        Args:
            key: Lookup key.
            scopes: Candidate scope tuples (GLOBAL plus the tuples implied by
                the caller's context).

        Returns:
            Matching records in any order.
        """
        ...

    async def find_by_exact_scope(
        self,
        key: str,
        scope: ModelScopeTuple,
        exclude_id: UUID | None = None,
    ) -> ModelScopedRecord[object] | None:
        """Return the record occupying exactly ``scope`` for ``key``.

        Args:
            key: Lookup key.
            scope: Exact scope tuple to look up.
            exclude_id: Record id to ignore (the record being updated).

        Returns:
            The occupying record, or None if the slot is free.
        """
        ...

    async def get_by_id(self, record_id: UUID) -> ModelScopedRecord[object] | None:
        """Return the record with ``record_id``, or None."""
        ...

    async def insert(
        self,
        *,
        key: str,
        value: object,
        scope: ModelScopeTuple,
        description: str | None = None,
        created_by_id: str | None = None,
    ) -> ModelScopedRecord[object]:
        """Persist a new record and return it with id and timestamps assigned.

        Raises:
            DuplicateScopeError: If ``scope`` is already taken for ``key``.
        """
        ...

    async def update(
        self,
        record_id: UUID,
        *,
        value: object,
        scope: ModelScopeTuple,
        description: str | None,
    ) -> ModelScopedRecord[object]:
        """Replace the mutable fields of a record and bump ``updated_at``.

        Raises:
            DuplicateScopeError: If ``scope`` is taken by another record.
            ScopedRecordNotFoundError: If the record no longer exists.
        """
        ...

    async def delete(self, record_id: UUID) -> bool:
        """Delete a record. Returns False if it did not exist."""
        ...

    async def list_all(self) -> list[ModelScopedRecord[object]]:
        """Return every record ordered by key, then scope specificity.

        Ties are broken by the scope ids and then the record id so the
        order is fully deterministic.
        """
        ...


__all__ = ["ProtocolScopedRecordStore"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Idempotent seeding of scoped records.

Seeding goes through the engine, so every seed is scope-validated and
caches are invalidated like any administrative write. A seed whose scope
slot is already taken is skipped, which keeps administrator edits intact
when the seed is re-run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeVar

from omnibase_scopes.errors import DuplicateScopeError
from omnibase_scopes.models import ModelScopedRecord, ModelScopedRecordCreate
from omnibase_scopes.resolution.engine import ConfigResolutionEngine

logger = logging.getLogger(__name__)

V = TypeVar("V")


async def seed_scoped_records(
    engine: ConfigResolutionEngine[V],
    seeds: Iterable[ModelScopedRecordCreate[V]],
    created_by_id: str | None = None,
) -> list[ModelScopedRecord[V]]:
    """Create each seed whose scope slot is still free.

    Args:
        engine: Engine of the seeded kind.
        seeds: Records to create.
        created_by_id: Recorded as the creator of new records.

    Returns:
        The records that were created (skipped seeds are omitted).
    """
    created: list[ModelScopedRecord[V]] = []
    skipped = 0
    for seed in seeds:
        try:
            created.append(await engine.create(seed, created_by_id=created_by_id))
        except DuplicateScopeError:
            skipped += 1
    logger.info(
        "Scoped records seeded",
        extra={
            "kind": engine.kind.name,
            "created": len(created),
            "skipped": skipped,
        },
    )
    return created


__all__ = ["seed_scoped_records"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope resolution: pick the most specific record matching a context.

Resolution is a pure function of the candidate records and the caller's
scope context. It performs no I/O and has no time or ordering dependency,
so the same inputs always produce the same winner.

Algorithm:
    1. Keep candidates whose scope matches the context. GLOBAL always
       matches; REGION, ORG, and SERVICE_CATEGORY match when the context
       carries the same id in the corresponding dimension.
    2. Order matches by descending specificity
       (SERVICE_CATEGORY > ORG > REGION > GLOBAL).
    3. Return the first match, or None.

Two distinct matching records at the winning specificity mean the store
lost per-tuple uniqueness; ScopeConsistencyError is raised instead of
picking one.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from omnibase_scopes.enums import EnumScopeType
from omnibase_scopes.errors import ScopeConsistencyError
from omnibase_scopes.models import ModelScopeContext, ModelScopedRecord

V = TypeVar("V")


def scope_matches(record: ModelScopedRecord[V], ctx: ModelScopeContext) -> bool:
    """Return True if ``record`` applies to a caller positioned at ``ctx``."""
    scope_type = record.scope_type
    if scope_type is EnumScopeType.GLOBAL:
        return True
    if scope_type is EnumScopeType.REGION:
        return ctx.region_id is not None and record.region_id == ctx.region_id
    if scope_type is EnumScopeType.ORG:
        return ctx.org_id is not None and record.org_id == ctx.org_id
    if scope_type is EnumScopeType.SERVICE_CATEGORY:
        return (
            ctx.service_category_id is not None
            and record.service_category_id == ctx.service_category_id
        )
    return False


def resolve_scoped_record(
    candidates: Iterable[ModelScopedRecord[V]],
    ctx: ModelScopeContext,
) -> ModelScopedRecord[V] | None:
    """Select the most specific candidate that matches ``ctx``.

    Args:
        candidates: Records sharing one key. Records that do not match the
            context are ignored, so callers may pass a superset.
        ctx: Caller's scope context.

    Returns:
        The winning record, or None if nothing matches.

    Raises:
        ScopeConsistencyError: If two distinct records match at the winning
            specificity.
    """
    # Same record listed twice is not a conflict.
    unique = {record.id: record for record in candidates}
    matches = [record for record in unique.values() if scope_matches(record, ctx)]
    if not matches:
        return None

    matches.sort(key=lambda record: record.scope_type.specificity, reverse=True)
    winner = matches[0]
    tied = [record for record in matches if record.scope_type is winner.scope_type]
    if len(tied) > 1:
        raise ScopeConsistencyError(
            f"Found {len(tied)} matching {winner.scope_type.value} records "
            f"for key '{winner.key}'",
            key=winner.key,
            scope_type=winner.scope_type,
            record_ids=sorted(str(record.id) for record in tied),
        )
    return winner


__all__ = ["resolve_scoped_record", "scope_matches"]

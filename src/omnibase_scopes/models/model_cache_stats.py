# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Cache statistics snapshot."""

from pydantic import BaseModel, ConfigDict, Field


class ModelCacheStats(BaseModel):
    """Counters reported by JSON cache implementations.

    Attributes:
        hits: Reads that returned a live entry
        misses: Reads that found nothing (or an expired entry)
        sets: Entries written
        deleted: Entries removed by pattern deletes
        expired_evictions: Entries dropped because their TTL elapsed
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hits: int = Field(default=0, ge=0, description="Reads that returned a live entry")
    misses: int = Field(default=0, ge=0, description="Reads that found nothing")
    sets: int = Field(default=0, ge=0, description="Entries written")
    deleted: int = Field(default=0, ge=0, description="Entries removed by pattern deletes")
    expired_evictions: int = Field(
        default=0, ge=0, description="Entries dropped because their TTL elapsed"
    )

    @property
    def hit_rate(self) -> float:
        """Fraction of reads served from the cache (0.0 when unused)."""
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


__all__ = ["ModelCacheStats"]

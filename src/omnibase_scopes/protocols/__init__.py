# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Backend protocols for scoped configuration resolution.

Exports:
    ProtocolScopedRecordStore: Record persistence contract
    ProtocolJsonCache: TTL JSON cache contract
"""

from omnibase_scopes.protocols.protocol_json_cache import ProtocolJsonCache
from omnibase_scopes.protocols.protocol_scoped_record_store import (
    ProtocolScopedRecordStore,
)

__all__: list[str] = ["ProtocolJsonCache", "ProtocolScopedRecordStore"]

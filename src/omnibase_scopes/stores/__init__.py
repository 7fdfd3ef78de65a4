# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scoped record stores.

Stores:
    - InMemoryScopedRecordStore: process-local store for tests
    - PostgresScopedRecordStore: asyncpg store with a unique scope index

Example - InMemory (Testing):
    >>> from omnibase_scopes.models import ModelScopeTuple
    >>> from omnibase_scopes.stores import InMemoryScopedRecordStore
    >>>
    >>> store = InMemoryScopedRecordStore()
    >>> await store.insert(key="X", value=True, scope=ModelScopeTuple.global_scope())
    >>> await store.insert(key="X", value=False, scope=ModelScopeTuple.global_scope())
    Traceback (most recent call last):
    DuplicateScopeError: ...
"""

from omnibase_scopes.stores.store_inmemory import InMemoryScopedRecordStore
from omnibase_scopes.stores.store_postgres import PostgresScopedRecordStore

__all__: list[str] = ["InMemoryScopedRecordStore", "PostgresScopedRecordStore"]

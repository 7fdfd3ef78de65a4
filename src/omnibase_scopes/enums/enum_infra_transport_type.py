# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure transport type enumeration.

Identifies the backing transport an infrastructure error originated from,
used in ModelInfraErrorContext for structured error reporting.
"""

from enum import Enum


class EnumInfraTransportType(str, Enum):
    """Transport types used by scoped configuration backends.

    Attributes:
        DATABASE: PostgreSQL record store
        VALKEY: Valkey (Redis-compatible) resolution cache
        MEMORY: In-process store or cache
        RUNTIME: Engine-level operations with no external transport
    """

    DATABASE = "db"
    VALKEY = "valkey"
    MEMORY = "memory"
    RUNTIME = "runtime"


__all__ = ["EnumInfraTransportType"]

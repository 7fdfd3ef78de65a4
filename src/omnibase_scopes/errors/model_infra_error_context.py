# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Context Model.

Bundles the structured fields every scoped configuration error may carry
so error constructors keep a short, strongly typed signature.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from omnibase_scopes.enums import EnumInfraTransportType


class ModelInfraErrorContext(BaseModel):
    """Structured context attached to scoped configuration errors.

    Attributes:
        transport_type: Backend the failing operation talked to (db, valkey, memory)
        operation: Operation being performed (find_candidates, set_json, create, ...)
        target_name: Store, cache, or engine name
        correlation_id: Correlation ID for distributed tracing

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.DATABASE,
        ...     operation="find_candidates",
        ...     target_name="postgres_scoped_record_store",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise InfraConnectionError("Database connection lost", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: Optional[EnumInfraTransportType] = Field(
        default=None,
        description="Backend transport of the failing operation (db, valkey, memory)",
    )
    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (find_candidates, set_json, create, ...)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Store, cache, or engine name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for distributed tracing",
    )


__all__ = ["ModelInfraErrorContext"]

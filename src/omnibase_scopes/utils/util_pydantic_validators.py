# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared Pydantic field validator utilities.

Pydantic validators must be methods of the model class, but they delegate
to these functions for the actual validation logic.

Example:
    class ModelPayload(BaseModel, Generic[V]):
        value: V

        @field_validator("value", mode="before")
        @classmethod
        def validate_value_strictly(cls, v: object) -> object:
            return validate_generic_value_strictly(cls, v)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError


@lru_cache(maxsize=64)
def _strict_adapter(value_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(value_type)


def validate_generic_value_strictly(model: type[BaseModel], value: object) -> object:
    """Validate ``value`` in strict mode against ``model``'s type parameter.

    Generic payload models are validated in lax mode, which would turn
    ``"true"`` into ``True`` for ``ModelScopedRecordCreate[bool]``. Running
    this as a ``mode="before"`` validator rejects such inputs while they
    still have their original type. Unparametrized models and None values
    are returned unchanged.

    Args:
        model: Concrete (possibly parametrized) model class.
        value: Raw field input.

    Returns:
        The input value, unchanged.

    Raises:
        ValueError: If the value does not strictly match the type parameter.
    """
    args = model.__pydantic_generic_metadata__["args"]
    if value is None or len(args) != 1:
        return value
    try:
        _strict_adapter(args[0]).validate_python(value, strict=True)
    except ValidationError as e:
        raise ValueError(
            f"value {value!r} does not match {getattr(args[0], '__name__', args[0])}"
        ) from e
    return value


__all__ = ["validate_generic_value_strictly"]

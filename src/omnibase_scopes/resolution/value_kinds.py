# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Value kinds: what distinguishes feature flags from policies.

The resolution engine is one generic algorithm. A ScopedValueKind carries
the few facts that differ between instantiations: the value type, the
cache prefix, the wording of error messages, and what ``get_value``
returns when nothing resolves.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Final, Generic, TypeVar

from pydantic import JsonValue, StrictBool, TypeAdapter, ValidationError

from omnibase_scopes.errors import InvalidScopedValueError
from omnibase_scopes.models import ModelResolvedValue

V = TypeVar("V")


@dataclass(frozen=True)
class ScopedValueKind(Generic[V]):
    """Descriptor of one kind of scoped configuration value.

    Attributes:
        name: Machine name used in logs ("feature_flag", "policy")
        label: Human label used in error messages ("Feature flag")
        cache_prefix: First segment of cache keys ("ff", "policy")
        value_type: Type expression values are validated against
        value_description: Expected value wording for error messages
        fallback_value: Returned by ``get_value`` when nothing resolves;
            None means the miss is an error
    """

    name: str
    label: str
    cache_prefix: str
    value_type: Any
    value_description: str
    fallback_value: V | None = None

    @cached_property
    def value_adapter(self) -> TypeAdapter[V]:
        return TypeAdapter(self.value_type)

    @cached_property
    def resolved_model(self) -> type[ModelResolvedValue[V]]:
        """ModelResolvedValue parametrized with this kind's value type."""
        return ModelResolvedValue[self.value_type]  # type: ignore[name-defined]

    def validate_value(self, key: str, value: object) -> V:
        """Validate ``value`` for ``key`` against the kind's value type.

        Raises:
            InvalidScopedValueError: If the value is missing or mistyped.
        """
        if value is None:
            raise InvalidScopedValueError(
                f"{self.label} '{key}' requires a value", key=key
            )
        try:
            return self.value_adapter.validate_python(value)
        except ValidationError as e:
            raise InvalidScopedValueError(
                f"{self.label} '{key}' value must be {self.value_description}",
                key=key,
            ) from e


FEATURE_FLAG_KIND: Final[ScopedValueKind[bool]] = ScopedValueKind(
    name="feature_flag",
    label="Feature flag",
    cache_prefix="ff",
    value_type=StrictBool,
    value_description="a boolean",
    fallback_value=False,
)

POLICY_KIND: Final[ScopedValueKind[JsonValue]] = ScopedValueKind(
    name="policy",
    label="Policy",
    cache_prefix="policy",
    value_type=JsonValue,
    value_description="a JSON value",
)


__all__ = ["FEATURE_FLAG_KIND", "POLICY_KIND", "ScopedValueKind"]

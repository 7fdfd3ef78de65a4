# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope consistency validation for record writes.

A record with scope type S must set the discriminator for S and leave the
other discriminators empty:

    GLOBAL            no discriminators
    REGION            region_id only
    ORG               org_id only
    SERVICE_CATEGORY  service_category_id only
"""

from __future__ import annotations

from omnibase_scopes.enums import SCOPE_ID_FIELDS, EnumScopeType
from omnibase_scopes.errors import InvalidScopeError
from omnibase_scopes.models import ModelScopeTuple


def _join_fields(fields: list[str]) -> str:
    if len(fields) <= 2:
        return " or ".join(fields)
    return ", ".join(fields[:-1]) + f", or {fields[-1]}"


def validate_scope(
    scope_type: EnumScopeType,
    region_id: str | None = None,
    org_id: str | None = None,
    service_category_id: str | None = None,
    key: str | None = None,
) -> None:
    """Check that the discriminators fit ``scope_type``.

    Blank strings count as unset.

    Raises:
        InvalidScopeError: If the required discriminator is missing or any
            other discriminator is set.
    """
    values = {
        "region_id": region_id,
        "org_id": org_id,
        "service_category_id": service_category_id,
    }
    required = scope_type.scope_id_field
    forbidden = [name for name in SCOPE_ID_FIELDS if name != required]

    if required is not None and not (values[required] or "").strip():
        raise InvalidScopeError(
            f"{scope_type.value} scope requires {required}",
            key=key,
            scope_type=scope_type,
        )
    if any((values[name] or "").strip() for name in forbidden):
        raise InvalidScopeError(
            f"{scope_type.value} scope should not have {_join_fields(forbidden)}",
            key=key,
            scope_type=scope_type,
        )


def validate_scope_tuple(scope: ModelScopeTuple, key: str | None = None) -> None:
    """Validate a scope tuple; see validate_scope."""
    validate_scope(
        scope.scope_type,
        region_id=scope.region_id,
        org_id=scope.org_id,
        service_category_id=scope.service_category_id,
        key=key,
    )


__all__ = ["validate_scope", "validate_scope_tuple"]

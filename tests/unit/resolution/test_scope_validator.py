# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for scope consistency validation."""

from __future__ import annotations

import pytest

from omnibase_scopes.enums import EnumScopeType
from omnibase_scopes.errors import InvalidScopeError
from omnibase_scopes.resolution import validate_scope


class TestValidScopes:
    """Well-formed scopes pass silently."""

    @pytest.mark.parametrize(
        ("scope_type", "ids"),
        [
            (EnumScopeType.GLOBAL, {}),
            (EnumScopeType.REGION, {"region_id": "york"}),
            (EnumScopeType.ORG, {"org_id": "acme"}),
            (EnumScopeType.SERVICE_CATEGORY, {"service_category_id": "electrical"}),
        ],
    )
    def test_accepts_matching_discriminator(
        self, scope_type: EnumScopeType, ids: dict[str, str]
    ) -> None:
        validate_scope(scope_type, **ids)


class TestInvalidScopes:
    """Each rule produces a descriptive InvalidScopeError."""

    def test_global_with_region(self) -> None:
        with pytest.raises(InvalidScopeError) as exc_info:
            validate_scope(EnumScopeType.GLOBAL, region_id="x")

        assert exc_info.value.message == (
            "GLOBAL scope should not have region_id, org_id, or service_category_id"
        )

    def test_region_without_region_id(self) -> None:
        with pytest.raises(InvalidScopeError) as exc_info:
            validate_scope(EnumScopeType.REGION, region_id=None)

        assert exc_info.value.message == "REGION scope requires region_id"
        assert exc_info.value.scope_type is EnumScopeType.REGION

    def test_region_with_org(self) -> None:
        with pytest.raises(InvalidScopeError) as exc_info:
            validate_scope(EnumScopeType.REGION, region_id="york", org_id="acme")

        assert exc_info.value.message == (
            "REGION scope should not have org_id or service_category_id"
        )

    def test_org_requires_org_id(self) -> None:
        with pytest.raises(InvalidScopeError, match="ORG scope requires org_id"):
            validate_scope(EnumScopeType.ORG, region_id="york")

    def test_org_with_service_category(self) -> None:
        with pytest.raises(InvalidScopeError, match="should not have"):
            validate_scope(EnumScopeType.ORG, org_id="acme", service_category_id="e")

    def test_service_category_requires_id(self) -> None:
        with pytest.raises(
            InvalidScopeError, match="SERVICE_CATEGORY scope requires service_category_id"
        ):
            validate_scope(EnumScopeType.SERVICE_CATEGORY)

    def test_service_category_with_region(self) -> None:
        with pytest.raises(
            InvalidScopeError, match="should not have region_id or org_id"
        ):
            validate_scope(
                EnumScopeType.SERVICE_CATEGORY,
                service_category_id="electrical",
                region_id="york",
            )

    def test_blank_id_counts_as_missing(self) -> None:
        with pytest.raises(InvalidScopeError, match="requires region_id"):
            validate_scope(EnumScopeType.REGION, region_id="   ")

    def test_key_is_attached(self) -> None:
        with pytest.raises(InvalidScopeError) as exc_info:
            validate_scope(EnumScopeType.ORG, key="BOOKING_MODE")

        assert exc_info.value.key == "BOOKING_MODE"

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Feature flag checks and guards for consumers.

Consumers ask ``is_enabled`` or guard an async entry point with
``require_feature_flag``. A flag that resolves to nothing is off, but a
store or cache failure is raised, never reported as "disabled".

Example:
    >>> flags = ServiceFeatureFlags(engine)
    >>>
    >>> @require_feature_flag(
    ...     flags,
    ...     "BOOKING_ENABLED",
    ...     scope_from=lambda request: ModelScopeContext(org_id=request.org_id),
    ... )
    ... async def create_booking(request: BookingRequest) -> Booking:
    ...     ...
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from omnibase_scopes.errors import FeatureDisabledError
from omnibase_scopes.models import ModelScopeContext
from omnibase_scopes.resolution.engine import ConfigResolutionEngine

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


class ServiceFeatureFlags:
    """Boolean view over the feature flag engine."""

    def __init__(self, engine: ConfigResolutionEngine[bool]) -> None:
        self._engine = engine

    @property
    def engine(self) -> ConfigResolutionEngine[bool]:
        """Underlying engine, for administrative operations."""
        return self._engine

    async def is_enabled(self, key: str, ctx: ModelScopeContext | None = None) -> bool:
        """Return True if ``key`` resolves to enabled for ``ctx``."""
        return await self._engine.get_value(key, ctx) is True

    async def require(self, key: str, ctx: ModelScopeContext | None = None) -> None:
        """Raise FeatureDisabledError unless ``key`` is enabled for ``ctx``."""
        if not await self.is_enabled(key, ctx):
            logger.info(
                "Feature guard rejected call",
                extra={"key": key, "scope": ctx.model_dump() if ctx else None},
            )
            raise FeatureDisabledError(f"Feature '{key}' is not enabled", key=key)


def require_feature_flag(
    flags: ServiceFeatureFlags,
    key: str,
    scope_from: Callable[..., ModelScopeContext | None] | None = None,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorate an async callable so it only runs while ``key`` is enabled.

    Args:
        flags: Feature flag service to consult.
        key: Flag key to require.
        scope_from: Builds the caller's scope context from the decorated
            callable's arguments. Without it the flag is checked globally.

    Raises:
        FeatureDisabledError: From the wrapped callable, before it runs,
            when the flag is off.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            ctx = scope_from(*args, **kwargs) if scope_from is not None else None
            await flags.require(key, ctx)
            return await func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["ServiceFeatureFlags", "require_feature_flag"]

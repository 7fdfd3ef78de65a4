# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Scoped Configuration CLI Commands.

Inspect, resolve, and edit feature flags and policies stored in PostgreSQL.

Environment:
    POSTGRES_DSN: Database holding the record tables (required)
    SCOPES_FEATURE_FLAG_TABLE: Feature flag table (default: feature_flags)
    SCOPES_POLICY_TABLE: Policy table (default: policies)
    VALKEY_HOST: When set, resolutions and invalidations go through Valkey
        so running services observe CLI writes immediately
"""

from __future__ import annotations

import asyncio
import json
import os
from collections.abc import AsyncIterator, Callable, Coroutine
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any
from uuid import UUID

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from omnibase_scopes.cache import InMemoryJsonCache, ValkeyJsonCache
from omnibase_scopes.enums import EnumScopeType
from omnibase_scopes.errors import RuntimeHostError
from omnibase_scopes.models import (
    ModelPostgresScopedStoreConfig,
    ModelScopeContext,
    ModelScopedEngineConfig,
    ModelScopedRecordCreate,
    ModelScopedRecordPatch,
    ModelValkeyCacheConfig,
)
from omnibase_scopes.protocols import ProtocolJsonCache, ProtocolScopedRecordStore
from omnibase_scopes.resolution import (
    DEFAULT_FEATURE_FLAG_SEEDS,
    DEFAULT_POLICY_SEEDS,
    ConfigResolutionEngine,
    create_feature_flag_engine,
    create_policy_engine,
    seed_scoped_records,
)
from omnibase_scopes.stores import PostgresScopedRecordStore

console = Console()


@dataclass(frozen=True)
class _KindCommands:
    title: str
    table_env_var: str
    default_table: str
    engine_factory: Callable[..., ConfigResolutionEngine[Any]]

    @property
    def table_name(self) -> str:
        return os.environ.get(self.table_env_var) or self.default_table


_FLAGS = _KindCommands(
    title="Feature Flags",
    table_env_var="SCOPES_FEATURE_FLAG_TABLE",
    default_table="feature_flags",
    engine_factory=create_feature_flag_engine,
)
_POLICIES = _KindCommands(
    title="Policies",
    table_env_var="SCOPES_POLICY_TABLE",
    default_table="policies",
    engine_factory=create_policy_engine,
)

_SCOPE_TYPE_CHOICE = click.Choice([scope.value for scope in EnumScopeType])


# =============================================================================
# Backends
# =============================================================================


@asynccontextmanager
async def _open_store(table_name: str) -> AsyncIterator[ProtocolScopedRecordStore]:
    store = PostgresScopedRecordStore(
        ModelPostgresScopedStoreConfig.from_environment(table_name)
    )
    await store.initialize()
    try:
        yield store
    finally:
        await store.shutdown()


@asynccontextmanager
async def _open_cache() -> AsyncIterator[ProtocolJsonCache]:
    if not os.environ.get("VALKEY_HOST"):
        yield InMemoryJsonCache()
        return

    cache = ValkeyJsonCache(ModelValkeyCacheConfig.from_environment())
    await cache.initialize()
    try:
        yield cache
    finally:
        await cache.shutdown()


@asynccontextmanager
async def _open_engine(kind: _KindCommands) -> AsyncIterator[ConfigResolutionEngine[Any]]:
    config = ModelScopedEngineConfig.from_environment()
    async with _open_store(kind.table_name) as store, _open_cache() as cache:
        yield kind.engine_factory(store, cache, config)


def _run(coro: Coroutine[Any, Any, None]) -> None:
    """Run an async command body, turning failures into exit code 1."""
    try:
        asyncio.run(coro)
    except SystemExit:
        raise
    except RuntimeHostError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Error: {type(e).__name__}[/red]")
        raise SystemExit(1)


# =============================================================================
# Shared command bodies
# =============================================================================


async def _list_records(kind: _KindCommands) -> None:
    async with _open_engine(kind) as engine:
        records = await engine.list_records()

    table = Table(title=kind.title)
    table.add_column("Key", style="cyan")
    table.add_column("Scope")
    table.add_column("Scope ID")
    table.add_column("Value", style="green")
    table.add_column("ID", style="dim")
    for record in records:
        table.add_row(
            escape(record.key),
            record.scope_type.value,
            escape(record.scope.scope_id or "-"),
            escape(json.dumps(record.value)),
            str(record.id),
        )
    console.print(table)
    console.print(f"[dim]{len(records)} record(s)[/dim]")


async def _resolve(kind: _KindCommands, key: str, ctx: ModelScopeContext) -> None:
    async with _open_engine(kind) as engine:
        resolved = await engine.get(key, ctx)

    if resolved is None:
        console.print(f"[yellow]{escape(key)} is not resolved[/yellow]")
        raise SystemExit(1)
    console.print(
        f"[bold]{escape(key)}[/bold] = [green]{escape(json.dumps(resolved.value))}[/green] "
        f"(scope: {resolved.resolved_scope_type.value})"
    )


async def _create_record(
    kind: _KindCommands,
    data: ModelScopedRecordCreate[Any],
    created_by_id: str | None,
) -> None:
    async with _open_engine(kind) as engine:
        record = await engine.create(data, created_by_id=created_by_id)
    console.print(
        f"[green]Created {escape(record.key)} ({record.scope_type.value}) "
        f"id={record.id}[/green]"
    )


async def _update_record(
    kind: _KindCommands,
    record_id: UUID,
    patch: ModelScopedRecordPatch[Any],
) -> None:
    async with _open_engine(kind) as engine:
        record = await engine.update(record_id, patch)
    console.print(
        f"[green]Updated {escape(record.key)} ({record.scope_type.value}) "
        f"id={record.id}[/green]"
    )


async def _delete_record(kind: _KindCommands, record_id: UUID) -> None:
    async with _open_engine(kind) as engine:
        await engine.delete(record_id)
    console.print(f"[green]Deleted {record_id}[/green]")


def _scope_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach --region/--org/--service-category options."""
    func = click.option("--service-category", default=None, help="Service category ID")(func)
    func = click.option("--org", default=None, help="Organization ID")(func)
    func = click.option("--region", default=None, help="Region ID")(func)
    return func


def _create_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach scope and metadata options for create commands."""
    func = click.option("--created-by", default=None, help="Creator ID")(func)
    func = click.option("--description", default=None, help="Description")(func)
    func = _scope_options(func)
    func = click.option(
        "--scope-type",
        type=_SCOPE_TYPE_CHOICE,
        default=EnumScopeType.GLOBAL.value,
        show_default=True,
        help="Scope level of the new record",
    )(func)
    return func


def _update_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach scope and metadata options for update commands."""
    func = click.option(
        "--clear-description", is_flag=True, help="Remove the description"
    )(func)
    func = click.option("--description", default=None, help="New description")(func)
    func = _scope_options(func)
    func = click.option(
        "--scope-type",
        type=_SCOPE_TYPE_CHOICE,
        default=None,
        help="Move the record to this scope level (unset scope IDs are cleared)",
    )(func)
    return func


def _patch_fields(
    scope_type: str | None,
    region: str | None,
    org: str | None,
    service_category: str | None,
    description: str | None,
    clear_description: bool,
) -> dict[str, Any]:
    """Collect the patch fields given on the command line.

    Omitted options keep the stored values. With ``--scope-type`` every
    scope ID is replaced, so the IDs not passed are cleared.
    """
    if clear_description and description is not None:
        raise click.UsageError("--description and --clear-description are exclusive")

    fields: dict[str, Any] = {}
    scope_ids = {
        "region_id": region,
        "org_id": org,
        "service_category_id": service_category,
    }
    if scope_type is not None:
        fields["scope_type"] = EnumScopeType(scope_type)
        fields.update(scope_ids)
    else:
        fields.update({name: v for name, v in scope_ids.items() if v is not None})
    if clear_description:
        fields["description"] = None
    elif description is not None:
        fields["description"] = description
    return fields


def _parse_policy_value(raw: str) -> Any:
    """Parse a policy value as JSON, falling back to the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# =============================================================================
# Commands
# =============================================================================


@click.group()
def cli() -> None:
    """Scoped feature flag and policy administration."""


@cli.group()
def flags() -> None:
    """Feature flag commands."""


@flags.command("list")
def flags_list() -> None:
    """List every feature flag record."""
    _run(_list_records(_FLAGS))


@flags.command("get")
@click.argument("key")
@_scope_options
def flags_get(
    key: str, region: str | None, org: str | None, service_category: str | None
) -> None:
    """Resolve a feature flag for a scope context."""
    ctx = ModelScopeContext(
        region_id=region, org_id=org, service_category_id=service_category
    )
    _run(_resolve(_FLAGS, key, ctx))


@flags.command("set")
@click.argument("key")
@click.argument("enabled", type=click.BOOL)
@_create_options
def flags_set(
    key: str,
    enabled: bool,
    scope_type: str,
    region: str | None,
    org: str | None,
    service_category: str | None,
    description: str | None,
    created_by: str | None,
) -> None:
    """Create a feature flag record."""
    data = ModelScopedRecordCreate[bool](
        key=key,
        value=enabled,
        scope_type=EnumScopeType(scope_type),
        region_id=region,
        org_id=org,
        service_category_id=service_category,
        description=description,
    )
    _run(_create_record(_FLAGS, data, created_by))


@flags.command("update")
@click.argument("record_id", type=click.UUID)
@click.option("--enabled/--disabled", default=None, help="New flag value")
@_update_options
def flags_update(
    record_id: UUID,
    enabled: bool | None,
    scope_type: str | None,
    region: str | None,
    org: str | None,
    service_category: str | None,
    description: str | None,
    clear_description: bool,
) -> None:
    """Update a feature flag record by ID."""
    fields = _patch_fields(
        scope_type, region, org, service_category, description, clear_description
    )
    if enabled is not None:
        fields["value"] = enabled
    _run(_update_record(_FLAGS, record_id, ModelScopedRecordPatch[bool](**fields)))


@flags.command("delete")
@click.argument("record_id", type=click.UUID)
def flags_delete(record_id: UUID) -> None:
    """Delete a feature flag record by ID."""
    _run(_delete_record(_FLAGS, record_id))


@cli.group()
def policies() -> None:
    """Policy commands."""


@policies.command("list")
def policies_list() -> None:
    """List every policy record."""
    _run(_list_records(_POLICIES))


@policies.command("get")
@click.argument("key")
@_scope_options
def policies_get(
    key: str, region: str | None, org: str | None, service_category: str | None
) -> None:
    """Resolve a policy for a scope context (falls back to built-in defaults)."""
    ctx = ModelScopeContext(
        region_id=region, org_id=org, service_category_id=service_category
    )
    _run(_resolve(_POLICIES, key, ctx))


@policies.command("set")
@click.argument("key")
@click.argument("value")
@_create_options
def policies_set(
    key: str,
    value: str,
    scope_type: str,
    region: str | None,
    org: str | None,
    service_category: str | None,
    description: str | None,
    created_by: str | None,
) -> None:
    """Create a policy record. VALUE is parsed as JSON when possible."""
    data = ModelScopedRecordCreate[Any](
        key=key,
        value=_parse_policy_value(value),
        scope_type=EnumScopeType(scope_type),
        region_id=region,
        org_id=org,
        service_category_id=service_category,
        description=description,
    )
    _run(_create_record(_POLICIES, data, created_by))


@policies.command("update")
@click.argument("record_id", type=click.UUID)
@click.option(
    "--value", "raw_value", default=None, help="New value, parsed as JSON when possible"
)
@_update_options
def policies_update(
    record_id: UUID,
    raw_value: str | None,
    scope_type: str | None,
    region: str | None,
    org: str | None,
    service_category: str | None,
    description: str | None,
    clear_description: bool,
) -> None:
    """Update a policy record by ID."""
    fields = _patch_fields(
        scope_type, region, org, service_category, description, clear_description
    )
    if raw_value is not None:
        fields["value"] = _parse_policy_value(raw_value)
    _run(_update_record(_POLICIES, record_id, ModelScopedRecordPatch[Any](**fields)))


@policies.command("delete")
@click.argument("record_id", type=click.UUID)
def policies_delete(record_id: UUID) -> None:
    """Delete a policy record by ID."""
    _run(_delete_record(_POLICIES, record_id))


@cli.command("seed")
@click.option("--flags/--no-flags", "seed_flags", default=True, help="Seed feature flags")
@click.option(
    "--policies/--no-policies", "seed_policies", default=True, help="Seed policies"
)
@click.option("--created-by", default=None, help="Creator ID recorded on new records")
def seed(seed_flags: bool, seed_policies: bool, created_by: str | None) -> None:
    """Create the built-in GLOBAL records that do not exist yet."""

    async def _seed() -> None:
        if seed_flags:
            async with _open_engine(_FLAGS) as engine:
                created = await seed_scoped_records(
                    engine, DEFAULT_FEATURE_FLAG_SEEDS, created_by_id=created_by
                )
            console.print(f"[green]Feature flags: {len(created)} created[/green]")
        if seed_policies:
            async with _open_engine(_POLICIES) as engine:
                created = await seed_scoped_records(
                    engine, DEFAULT_POLICY_SEEDS, created_by_id=created_by
                )
            console.print(f"[green]Policies: {len(created)} created[/green]")

    _run(_seed())


if __name__ == "__main__":
    cli()

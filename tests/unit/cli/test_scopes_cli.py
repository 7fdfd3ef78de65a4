# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the omnibase-scopes CLI.

The PostgreSQL store and the cache are replaced with in-memory backends
that persist across invocations within one test.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest
from click.testing import CliRunner
from rich.console import Console

from omnibase_scopes.cache import InMemoryJsonCache
from omnibase_scopes.cli import commands
from omnibase_scopes.cli.commands import cli
from omnibase_scopes.errors import InfraConnectionError
from omnibase_scopes.protocols import ProtocolJsonCache, ProtocolScopedRecordStore
from omnibase_scopes.resolution import DEFAULT_FEATURE_FLAG_SEEDS, DEFAULT_POLICY_SEEDS
from omnibase_scopes.stores import InMemoryScopedRecordStore


@pytest.fixture
def stores(monkeypatch: pytest.MonkeyPatch) -> dict[str, InMemoryScopedRecordStore]:
    """Patch the CLI backends; returns the in-memory stores by table name."""
    tables: dict[str, InMemoryScopedRecordStore] = {}
    shared_cache = InMemoryJsonCache()

    @asynccontextmanager
    async def open_store(table_name: str) -> AsyncIterator[ProtocolScopedRecordStore]:
        yield tables.setdefault(table_name, InMemoryScopedRecordStore())

    @asynccontextmanager
    async def open_cache() -> AsyncIterator[ProtocolJsonCache]:
        yield shared_cache

    monkeypatch.setattr(commands, "_open_store", open_store)
    monkeypatch.setattr(commands, "_open_cache", open_cache)
    monkeypatch.setattr(commands, "console", Console(width=200, no_color=True))
    for name in (
        "SCOPES_FEATURE_FLAG_TABLE",
        "SCOPES_POLICY_TABLE",
        "SCOPES_FEATURE_FLAG_TTL_SECONDS",
        "SCOPES_POLICY_TTL_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    return tables


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestFlagsCommands:
    """flags list/get/set/delete."""

    def test_set_then_get(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        created = runner.invoke(cli, ["flags", "set", "DISPATCH_ENABLED", "false"])
        scoped = runner.invoke(
            cli,
            ["flags", "set", "DISPATCH_ENABLED", "true", "--scope-type", "ORG", "--org", "acme"],
        )
        resolved = runner.invoke(cli, ["flags", "get", "DISPATCH_ENABLED", "--org", "acme"])
        fallback = runner.invoke(cli, ["flags", "get", "DISPATCH_ENABLED", "--org", "other"])

        assert created.exit_code == 0, created.output
        assert "Created DISPATCH_ENABLED (GLOBAL)" in created.output
        assert scoped.exit_code == 0, scoped.output
        assert "DISPATCH_ENABLED = true (scope: ORG)" in resolved.output
        assert "DISPATCH_ENABLED = false (scope: GLOBAL)" in fallback.output
        assert len(stores["feature_flags"]) == 2

    def test_get_unresolved_exits_nonzero(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        result = runner.invoke(cli, ["flags", "get", "UNKNOWN"])

        assert result.exit_code == 1
        assert "UNKNOWN is not resolved" in result.output

    def test_invalid_scope_is_reported(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        result = runner.invoke(cli, ["flags", "set", "X", "true", "--scope-type", "REGION"])

        assert result.exit_code == 1
        assert "REGION scope requires region_id" in result.output

    def test_duplicate_is_reported(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        runner.invoke(cli, ["flags", "set", "X", "true"])

        result = runner.invoke(cli, ["flags", "set", "X", "false"])

        assert result.exit_code == 1
        assert "already exists for this scope" in result.output

    def test_list_and_delete(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        runner.invoke(cli, ["flags", "set", "X", "true", "--description", "demo"])
        record_id = next(iter(stores["feature_flags"]._records))

        listed = runner.invoke(cli, ["flags", "list"])
        deleted = runner.invoke(cli, ["flags", "delete", str(record_id)])
        missing = runner.invoke(cli, ["flags", "delete", str(record_id)])

        assert listed.exit_code == 0, listed.output
        assert "Feature Flags" in listed.output
        assert "1 record(s)" in listed.output
        assert f"Deleted {record_id}" in deleted.output
        assert missing.exit_code == 1
        assert "not found" in missing.output

    def test_update_value_and_scope(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        runner.invoke(
            cli,
            ["flags", "set", "X", "false", "--scope-type", "REGION", "--region", "york"],
        )
        record_id = next(iter(stores["feature_flags"]._records))

        enabled = runner.invoke(cli, ["flags", "update", str(record_id), "--enabled"])
        moved = runner.invoke(
            cli,
            ["flags", "update", str(record_id), "--scope-type", "ORG", "--org", "acme"],
        )
        resolved = runner.invoke(cli, ["flags", "get", "X", "--org", "acme"])

        assert enabled.exit_code == 0, enabled.output
        assert "Updated X (REGION)" in enabled.output
        assert moved.exit_code == 0, moved.output
        assert "Updated X (ORG)" in moved.output
        record = stores["feature_flags"]._records[record_id]
        assert record.value is True
        assert record.region_id is None
        assert record.org_id == "acme"
        assert "X = true (scope: ORG)" in resolved.output

    def test_update_keeps_omitted_fields(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        runner.invoke(cli, ["flags", "set", "X", "true", "--description", "demo"])
        record_id = next(iter(stores["feature_flags"]._records))

        described = runner.invoke(
            cli, ["flags", "update", str(record_id), "--description", "pilot"]
        )
        record = stores["feature_flags"]._records[record_id]
        assert described.exit_code == 0, described.output
        assert record.value is True
        assert record.description == "pilot"

        cleared = runner.invoke(cli, ["flags", "update", str(record_id), "--clear-description"])
        assert cleared.exit_code == 0, cleared.output
        assert stores["feature_flags"]._records[record_id].description is None

    def test_update_rejects_conflicting_description_options(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        runner.invoke(cli, ["flags", "set", "X", "true"])
        record_id = next(iter(stores["feature_flags"]._records))

        result = runner.invoke(
            cli,
            [
                "flags",
                "update",
                str(record_id),
                "--description",
                "a",
                "--clear-description",
            ],
        )

        assert result.exit_code == 2
        assert "exclusive" in result.output

    def test_update_unknown_record(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        result = runner.invoke(
            cli,
            ["flags", "update", "00000000-0000-0000-0000-000000000001", "--disabled"],
        )

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_table_name_from_environment(
        self,
        runner: CliRunner,
        stores: dict[str, InMemoryScopedRecordStore],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("SCOPES_FEATURE_FLAG_TABLE", "flags_v2")

        runner.invoke(cli, ["flags", "set", "X", "true"])

        assert len(stores["flags_v2"]) == 1


class TestPoliciesCommands:
    """policies get/set with JSON values and defaults."""

    def test_get_falls_back_to_default(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        result = runner.invoke(cli, ["policies", "get", "SLA_ACCEPT_MINUTES"])

        assert result.exit_code == 0, result.output
        assert "SLA_ACCEPT_MINUTES = 5 (scope: GLOBAL)" in result.output

    def test_set_parses_json_values(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        runner.invoke(
            cli,
            [
                "policies",
                "set",
                "DISPATCH_ESCALATION_STEPS",
                "[2, 4]",
                "--scope-type",
                "REGION",
                "--region",
                "york",
            ],
        )
        runner.invoke(cli, ["policies", "set", "BOOKING_MODE", "WINDOW"])

        steps = runner.invoke(
            cli, ["policies", "get", "DISPATCH_ESCALATION_STEPS", "--region", "york"]
        )
        mode = runner.invoke(cli, ["policies", "get", "BOOKING_MODE"])

        assert "DISPATCH_ESCALATION_STEPS = [2, 4] (scope: REGION)" in steps.output
        assert 'BOOKING_MODE = "WINDOW" (scope: GLOBAL)' in mode.output

    def test_update_parses_json_value(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        runner.invoke(cli, ["policies", "set", "DISPATCH_ESCALATION_STEPS", "[1, 2]"])
        record_id = next(iter(stores["policies"]._records))

        result = runner.invoke(
            cli, ["policies", "update", str(record_id), "--value", "[3, 6, 9]"]
        )
        steps = runner.invoke(cli, ["policies", "get", "DISPATCH_ESCALATION_STEPS"])

        assert result.exit_code == 0, result.output
        assert "Updated DISPATCH_ESCALATION_STEPS (GLOBAL)" in result.output
        assert "DISPATCH_ESCALATION_STEPS = [3, 6, 9] (scope: GLOBAL)" in steps.output

    def test_list_is_empty_by_default(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        result = runner.invoke(cli, ["policies", "list"])

        assert result.exit_code == 0
        assert "0 record(s)" in result.output


class TestSeedCommand:
    """seed creates missing GLOBAL records only."""

    def test_seed_is_idempotent(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        first = runner.invoke(cli, ["seed", "--created-by", "ops"])
        second = runner.invoke(cli, ["seed"])

        assert first.exit_code == 0, first.output
        assert f"Feature flags: {len(DEFAULT_FEATURE_FLAG_SEEDS)} created" in first.output
        assert f"Policies: {len(DEFAULT_POLICY_SEEDS)} created" in first.output
        assert "Feature flags: 0 created" in second.output
        assert "Policies: 0 created" in second.output

    def test_seed_only_policies(
        self, runner: CliRunner, stores: dict[str, InMemoryScopedRecordStore]
    ) -> None:
        result = runner.invoke(cli, ["seed", "--no-flags"])

        assert "Feature flags" not in result.output
        assert "feature_flags" not in stores
        assert len(stores["policies"]) == len(DEFAULT_POLICY_SEEDS)


class TestBackendFailures:
    """Backend errors become a message and exit code 1."""

    def test_store_connection_error(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        @asynccontextmanager
        async def failing_store(table_name: str) -> AsyncIterator[ProtocolScopedRecordStore]:
            raise InfraConnectionError("Failed to connect to database - check host and port")
            yield  # pragma: no cover

        monkeypatch.setattr(commands, "_open_store", failing_store)
        monkeypatch.setattr(commands, "console", Console(width=200, no_color=True))

        result = runner.invoke(cli, ["flags", "list"])

        assert result.exit_code == 1
        assert "Error: Failed to connect to database" in result.output

    def test_missing_dsn(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("POSTGRES_DSN", raising=False)
        monkeypatch.setattr(commands, "console", Console(width=200, no_color=True))

        result = runner.invoke(cli, ["flags", "list"])

        assert result.exit_code == 1
        assert "POSTGRES_DSN is not set" in result.output

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command line interface for scoped configuration administration."""

from omnibase_scopes.cli.commands import cli

__all__ = ["cli"]

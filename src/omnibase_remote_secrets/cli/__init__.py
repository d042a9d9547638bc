# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command-line entry points."""

from omnibase_remote_secrets.cli.cli_remote_secrets import cli

__all__: list[str] = ["cli"]

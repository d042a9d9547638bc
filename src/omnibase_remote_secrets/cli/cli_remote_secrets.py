# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Remote secrets CLI.

Commands:
- `omnibase-remote-secrets fetch`: fetch once, print health and key names
- `omnibase-remote-secrets watch`: poll until SIGINT/SIGTERM, printing key
  names on every change

Secret values are never printed; the key table masks every value.

Usage:
    ```bash
    omnibase-remote-secrets fetch --config secrets.yaml
    omnibase-remote-secrets watch --config secrets.yaml --poll-interval 5m
    OMNIBASE_SECRETS_LOG_LEVEL=DEBUG omnibase-remote-secrets fetch -c secrets.yaml
    ```

Exit codes:
    0: healthy (fetch) or clean shutdown (watch)
    1: fetch failed
    2: configuration error
"""

from __future__ import annotations

import asyncio
import logging
import signal
from collections.abc import Callable
from typing import Any

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from omnibase_remote_secrets.adapters import build_secret_store
from omnibase_remote_secrets.enums import EnumHealthStatus
from omnibase_remote_secrets.errors import ProtocolConfigurationError
from omnibase_remote_secrets.models import (
    ModelHealthState,
    ModelSecretExports,
    ModelSecretWatchConfig,
)
from omnibase_remote_secrets.services import ServiceRemoteSecretsComponent
from omnibase_remote_secrets.utils import configure_logging, format_duration
from omnibase_remote_secrets.utils.util_config_loader import load_secret_watch_config

logger = logging.getLogger(__name__)
console = Console()

EXIT_HEALTHY = 0
EXIT_UNHEALTHY = 1
EXIT_CONFIG_ERROR = 2

MASKED_VALUE = "********"

_STATUS_STYLES: dict[EnumHealthStatus, str] = {
    EnumHealthStatus.HEALTHY: "green",
    EnumHealthStatus.UNHEALTHY: "red",
    EnumHealthStatus.UNKNOWN: "yellow",
}


def _source_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every command that watches a secret."""
    func = click.option(
        "--version-label",
        type=str,
        default=None,
        help="Version label override (default: from config, else AWSCURRENT)",
    )(func)
    func = click.option(
        "--secret-id",
        type=str,
        default=None,
        help="Secret name or ARN override",
    )(func)
    func = click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(dir_okay=False),
        required=True,
        help="YAML configuration file",
    )(func)
    return func


@click.group()
@click.option(
    "--log-level",
    type=str,
    default=None,
    help="Log level (default: OMNIBASE_SECRETS_LOG_LEVEL or INFO)",
)
def cli(log_level: str | None) -> None:
    """Remote secrets component commands."""
    configure_logging(log_level)


@cli.command("fetch")
@_source_options
def fetch_cmd(
    config_path: str,
    secret_id: str | None,
    version_label: str | None,
) -> None:
    """Fetch the secret once and report health."""
    config = _load_config(config_path, secret_id=secret_id, version_label=version_label)
    console.print(f"[bold blue]Fetching {config.secret_id}...[/bold blue]")

    try:
        component = asyncio.run(
            ServiceRemoteSecretsComponent.create(
                config,
                _ignore_exports,
                store_factory=build_secret_store,
            )
        )
    except ProtocolConfigurationError as e:
        console.print(f"[red]Configuration error: {escape(e.message)}[/red]")
        raise SystemExit(EXIT_CONFIG_ERROR) from None

    health = component.current_health()
    _print_health(health)
    if component.exports is not None:
        console.print(_exports_table(component.exports))
    raise SystemExit(EXIT_HEALTHY if health.is_healthy else EXIT_UNHEALTHY)


@cli.command("watch")
@_source_options
@click.option(
    "--poll-interval",
    type=str,
    default=None,
    help="Poll interval override, e.g. 10m or 1h30m (must exceed 30s)",
)
def watch_cmd(
    config_path: str,
    secret_id: str | None,
    version_label: str | None,
    poll_interval: str | None,
) -> None:
    """Poll the secret until interrupted, printing key names on each change."""
    config = _load_config(
        config_path,
        secret_id=secret_id,
        version_label=version_label,
        poll_interval=poll_interval,
    )
    console.print(f"[bold blue]Watching {config.secret_id}[/bold blue]")
    console.print(f"  Version label: {config.version_label}")
    console.print(f"  Poll interval: {format_duration(config.poll_interval)}")
    console.print()
    console.print("Press Ctrl+C to stop")

    try:
        asyncio.run(_watch(config))
    except ProtocolConfigurationError as e:
        console.print(f"[red]Configuration error: {escape(e.message)}[/red]")
        raise SystemExit(EXIT_CONFIG_ERROR) from None
    except KeyboardInterrupt:
        console.print("\n[yellow]Watch stopped by user[/yellow]")
    console.print("[green]Watch stopped[/green]")


async def _watch(config: ModelSecretWatchConfig) -> None:
    shutdown_event = asyncio.Event()

    def signal_handler() -> None:
        shutdown_event.set()

    loop = asyncio.get_running_loop()
    installed: list[signal.Signals] = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, signal_handler)
            installed.append(sig)
        except (NotImplementedError, RuntimeError):
            # Not supported on Windows or outside the main thread.
            pass

    def on_state_change(exports: ModelSecretExports) -> None:
        console.print(_exports_table(exports))

    try:
        component = await ServiceRemoteSecretsComponent.create(
            config,
            on_state_change,
            store_factory=build_secret_store,
        )
        _print_health(component.current_health())
        await component.run(shutdown_event)
        _print_health(component.current_health())
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)


def _load_config(config_path: str, **overrides: object) -> ModelSecretWatchConfig:
    try:
        return load_secret_watch_config(config_path).with_overrides(**overrides)
    except ProtocolConfigurationError as e:
        console.print(f"[red]Configuration error: {escape(e.message)}[/red]")
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors(include_input=False)
        )
        console.print(f"[red]Configuration error: {escape(problems)}[/red]")
    raise SystemExit(EXIT_CONFIG_ERROR)


def _ignore_exports(exports: ModelSecretExports) -> None:
    """State change callback for one-shot fetches; the table is printed after."""


def _print_health(health: ModelHealthState) -> None:
    style = _STATUS_STYLES.get(health.status, "white")
    console.print(
        f"[{style}]{health.status.value.upper()}[/{style}]",
        Text(health.message),
    )


def _exports_table(exports: ModelSecretExports) -> Table:
    table = Table(title=f"Exported Keys ({len(exports.data)})")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="dim")
    for key in exports.keys():
        table.add_row(Text(key), MASKED_VALUE)
    return table


__all__: list[str] = ["cli"]

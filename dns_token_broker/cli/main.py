#!/usr/bin/env python3
"""
DNS Token Broker - Command Line Interface

Main entry point for running the HTTP service and for driving the
binding lifecycle by hand.
"""

import argparse
import logging
import sys
import traceback

from rich.console import Console
from rich.table import Table

from ..core.binding_manager import BindingManager
from ..providers.executor import TransactionExecutor
from ..server.http_app import run_server
from ..storage import OverlayBindingStore, create_store
from ..utils.config import DEFAULT_CONFIG_PATH, config_logger, load_config

console = Console()
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="DNS Token Broker - token-authenticated dynamic DNS"
    )

    parser.add_argument(
        "--config",
        "-c",
        default=DEFAULT_CONFIG_PATH,
        help=f"Configuration file path (default: {DEFAULT_CONFIG_PATH})",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print update scripts instead of sending them",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP service")
    serve.add_argument("--host", help="Address to bind (overrides config)")
    serve.add_argument("--port", type=int, help="Port to bind (overrides config)")

    create = subparsers.add_parser("create", help="Claim a hostname")
    create.add_argument("hostname")

    update = subparsers.add_parser("update", help="Point a hostname at an address")
    update.add_argument("token")
    update.add_argument("ip")

    delete = subparsers.add_parser("delete", help="Release a hostname")
    delete.add_argument("token")

    return parser


def _print_result(command: str, result: dict):
    if result["error"] is not None:
        console.print(f"[red]Error: {result['error']}[/red]")
        return

    table = Table(title=f"{command} succeeded")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    for key, value in result.items():
        if key != "error":
            table.add_row(key, str(value))
    console.print(table)


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.verbose:
        config.setdefault("logging", {})["level"] = "DEBUG"
    config_logger(config)

    store = None
    executor = None

    try:
        if args.dry_run:
            store = OverlayBindingStore(create_store(config))
            executor = TransactionExecutor({"default_provider": "mock"})

        manager = BindingManager(config, store=store, executor=executor)

        if args.command == "serve":
            http_config = config.get("http", {})
            run_server(
                manager,
                args.host or http_config.get("host", "127.0.0.1"),
                args.port or http_config.get("port", 8080),
            )
            sys.exit(0)

        fields = {
            key: getattr(args, key)
            for key in ("hostname", "token", "ip")
            if hasattr(args, key)
        }
        result = manager.handle(args.command, fields)
        _print_result(args.command, result)

        if args.dry_run:
            for script in executor.agent.scripts:
                console.print("[yellow]DRY RUN - script not sent:[/yellow]")
                console.print(script, markup=False, highlight=False)

        sys.exit(0 if result["error"] is None else 1)

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if args.verbose:
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()

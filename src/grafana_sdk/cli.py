"""
Command-line interface for grafana-sdk.

Thin wrapper over the ``datasources`` module: every subcommand performs one
API call and prints the result as JSON on stdout.  Connection details come
from settings (``GRAFANA_URL``, ``GRAFANA_AUTH``, ``GRAFANA_ORG_ID``) and can
be overridden with ``--url``, ``--auth`` and ``--org``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import requests
from pydantic import BaseModel, ValidationError

from grafana_sdk import __version__, datasources
from grafana_sdk.client import Client
from grafana_sdk.config import get_settings
from grafana_sdk.errors import GrafanaError
from grafana_sdk.logger import configure_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="grafana-sdk",
        description="Manage Grafana datasources over the HTTP API",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--log-json", action="store_true", help="Emit log records as JSON lines (default: LOG_JSON)"
    )
    parser.add_argument("--url", default=None, help="Grafana base URL (default: GRAFANA_URL)")
    parser.add_argument(
        "--auth", default=None, help="API key or user:password (default: GRAFANA_AUTH)"
    )
    parser.add_argument(
        "--org", type=int, default=None, help="Organization ID (default: GRAFANA_ORG_ID)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")
    subparsers.add_parser("list", help="List all datasources")
    subparsers.add_parser("types", help="List available datasource plugins")

    get_parser = subparsers.add_parser("get", help="Show one datasource")
    _add_selector(get_parser)

    delete_parser = subparsers.add_parser("delete", help="Delete a datasource")
    _add_selector(delete_parser)

    create_parser_ = subparsers.add_parser("create", help="Create a datasource from a JSON file")
    create_parser_.add_argument("file", type=Path, help="Datasource JSON ('-' for stdin)")

    update_parser = subparsers.add_parser("update", help="Update a datasource from a JSON file")
    update_parser.add_argument("file", type=Path, help="Datasource JSON ('-' for stdin)")

    return parser


def _add_selector(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--id", type=int, dest="datasource_id", help="Datasource ID")
    group.add_argument("--name", help="Datasource name")


# =============================================================================
# Helpers
# =============================================================================


def _client(args: argparse.Namespace) -> Client:
    settings = get_settings()
    overrides: dict[str, Any] = {}
    if args.url is not None:
        overrides["grafana_url"] = args.url
    if args.auth is not None:
        overrides["grafana_auth"] = args.auth
    if overrides:
        settings = settings.model_copy(update=overrides)
    return Client.from_settings(settings)


def _org(args: argparse.Namespace) -> int:
    return args.org if args.org is not None else get_settings().grafana_org_id


def _print_json(data: Any) -> None:
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True)
    elif isinstance(data, list):
        data = [item.model_dump(mode="json", by_alias=True) for item in data]
    elif isinstance(data, dict):
        data = {key: item.model_dump(mode="json", by_alias=True) for key, item in data.items()}
    print(json.dumps(data, indent=2))


def _load_json(path: Path) -> Any:
    if str(path) == "-":
        return json.load(sys.stdin)
    with path.open() as f:
        return json.load(f)


# =============================================================================
# Commands
# =============================================================================


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Grafana URL: {settings.grafana_url}")
    print(f"Organization: {settings.grafana_org_id or 'current'}")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Handle the 'list' command."""
    with _client(args) as client:
        _print_json(datasources.get_all_datasources(client, _org(args)))
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    """Handle the 'get' command."""
    with _client(args) as client:
        if args.name is not None:
            ds = datasources.get_datasource_by_name(client, args.name, _org(args))
        else:
            ds = datasources.get_datasource(client, args.datasource_id, _org(args))
    _print_json(ds)
    return 0


def cmd_create(args: argparse.Namespace) -> int:
    """Handle the 'create' command."""
    payload = _load_json(args.file)
    with _client(args) as client:
        _print_json(datasources.create_datasource(client, payload, _org(args)))
    return 0


def cmd_update(args: argparse.Namespace) -> int:
    """Handle the 'update' command."""
    payload = _load_json(args.file)
    with _client(args) as client:
        _print_json(datasources.update_datasource(client, payload, _org(args)))
    return 0


def cmd_delete(args: argparse.Namespace) -> int:
    """Handle the 'delete' command."""
    with _client(args) as client:
        if args.name is not None:
            status = datasources.delete_datasource_by_name(client, args.name, _org(args))
        else:
            status = datasources.delete_datasource(client, args.datasource_id, _org(args))
    _print_json(status)
    return 0


def cmd_types(args: argparse.Namespace) -> int:
    """Handle the 'types' command."""
    with _client(args) as client:
        _print_json(datasources.get_datasource_types(client, _org(args)))
    return 0


COMMANDS = {
    "info": cmd_info,
    "list": cmd_list,
    "get": cmd_get,
    "create": cmd_create,
    "update": cmd_update,
    "delete": cmd_delete,
    "types": cmd_types,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
        configure_logging(
            "DEBUG" if args.debug or settings.debug else settings.log_level,
            json_format=args.log_json or settings.log_json,
        )
    except ValueError as exc:
        # pydantic.ValidationError is a ValueError too
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    if args.command is None:
        parser.print_help()
        return 0

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except (GrafanaError, requests.RequestException, ValidationError, OSError, ValueError) as exc:
        logger.debug("command %r failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

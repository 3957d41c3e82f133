"""Railnorm CLI entry points.
This module exposes commands for train designations, messages and departures.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import RailnormConfig
from core.errors import RailnormError
from core.types import RawMessage
from enrich.departure_enrichment import designation_payload, enrich_departures
from enrich.departure_reader import read_departures
from enrich.message_rendering import render_messages, rendered_message_payload
from transforms.catalog_loader import build_message_catalog
from transforms.message_catalog import MessageCatalog
from transforms.train_designation import is_long_distance, parse_train_designation


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="railnorm", description="Railnorm departure CLI")
    parser.add_argument("--catalog", help="Override RAILNORM_MESSAGE_CATALOG for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_train_command(subparsers)
    _add_messages_command(subparsers)
    _add_enrich_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Railnorm CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.catalog)
        if args.command == "train":
            return _run_train_command(args)
        if args.command == "messages":
            return _run_messages_command(config, build_message_catalog(config), args)
        if args.command == "enrich":
            return _run_enrich_command(config, build_message_catalog(config), args)
    except RailnormError as error:
        print(f"error={error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(catalog_path: str | None) -> RailnormConfig:
    """Build config with optional catalog override.

    Args:
        catalog_path: Optional override path.

    Returns:
        Validated runtime config.
    """
    config = RailnormConfig.from_env()
    if catalog_path:
        config = replace(config, catalog_path=Path(catalog_path).expanduser().resolve())
    return config


def _run_train_command(args: argparse.Namespace) -> int:
    """Handle train command.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    for raw in args.designations:
        payload = designation_payload(parse_train_designation(raw))
        payload["longDistance"] = is_long_distance(raw)
        print(json.dumps(payload, ensure_ascii=False))
    return 0


def _run_messages_command(
    config: RailnormConfig,
    catalog: MessageCatalog,
    args: argparse.Namespace,
) -> int:
    """Handle messages command.

    Args:
        config: Runtime config.
        catalog: Message catalog.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    messages = [_parse_message_argument(value) for value in args.codes]
    rendered = render_messages(messages, config, catalog)
    print(
        json.dumps(
            [rendered_message_payload(message) for message in rendered],
            ensure_ascii=False,
            indent=2,
        )
    )
    return 0


def _run_enrich_command(
    config: RailnormConfig,
    catalog: MessageCatalog,
    args: argparse.Namespace,
) -> int:
    """Handle enrich command.

    Args:
        config: Runtime config.
        catalog: Message catalog.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    departures = read_departures(args.source)
    enriched = enrich_departures(departures, config, catalog)
    print(json.dumps(enriched, ensure_ascii=False, indent=2))
    return 0


def _parse_message_argument(value: str) -> RawMessage:
    """Split a ``CODE[:PREFIX]`` argument into a raw message."""
    code, _, type_prefix = value.partition(":")
    return RawMessage(code=code.strip(), type_prefix=type_prefix.strip())


def _add_train_command(subparsers: Any) -> None:
    """Register train subcommand."""
    parser = subparsers.add_parser("train", help="Parse raw train designations")
    parser.add_argument("designations", nargs="+", help="Raw designation, e.g. 'NWB RS12345'")


def _add_messages_command(subparsers: Any) -> None:
    """Register messages subcommand."""
    parser = subparsers.add_parser("messages", help="Render message codes of one departure")
    parser.add_argument(
        "codes",
        nargs="+",
        help="Message code with optional type prefix, e.g. 80:q or 43:d",
    )


def _add_enrich_command(subparsers: Any) -> None:
    """Register enrich subcommand."""
    parser = subparsers.add_parser("enrich", help="Enrich a JSON list of departures")
    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Departures JSON file, '-' or omitted for stdin",
    )

#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from pydantic import ValidationError

from inventory_sync.adapters.storage import instance_from_request
from inventory_sync.app import fetch_related_records, sync_instance_related_records
from inventory_sync.common import configure_logging
from inventory_sync.config import ConfigurationError
from inventory_sync.domain.reconciliation import RelationshipSyncError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from inventory_sync.domain.model import Instance
    from inventory_sync.domain.reconciliation import SyncResult


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Synchronise instance relationships and preceding/succeeding titles"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Reconcile related records of an instance")
    sync.add_argument(
        "instance",
        type=Path,
        help="Path to an instance JSON document, or '-' to read it from stdin",
    )

    show = subparsers.add_parser("show", help="Print the stored related records of instances")
    show.add_argument("instance_ids", nargs="+", help="Instance ids to look up")

    return parser.parse_args(list(argv))


def _read_instance(source: Path) -> Instance:
    try:
        raw = sys.stdin.read() if str(source) == "-" else source.read_text()
        payload: Any = json.loads(raw)
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Cannot read instance from {source}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError("Instance document must be a JSON object")
    try:
        return instance_from_request(payload)
    except ValidationError as exc:
        raise ValueError(f"Invalid instance document: {exc}") from exc


def _report(result: SyncResult) -> None:
    for phase in result.phases:
        print(f"{phase.family}: {len(phase.operations)} operation(s)")
        for outcome in phase.batch.outcomes:
            status = "ok" if outcome.succeeded else "FAILED"
            print(f"  [{status}] {outcome.describe()}")
    if result.succeeded:
        print(f"Instance {result.instance_id}: related records in sync")
    else:
        print(f"Instance {result.instance_id}: some writes failed", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args = _parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    if parsed_args.command == "show":
        try:
            related = fetch_related_records(parsed_args.instance_ids)
        except (ConfigurationError, RelationshipSyncError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
        print(json.dumps(related, indent=2))
        return

    try:
        instance = _read_instance(parsed_args.instance)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    try:
        result = sync_instance_related_records(instance)
    except (ConfigurationError, RelationshipSyncError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    _report(result)
    if not result.succeeded:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

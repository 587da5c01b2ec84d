from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from fedinotify.adapters.mastodon import dump_grouped_notifications
from fedinotify.app import fold_notification_pages, load_pages
from fedinotify.config import ConfigurationError, configure_logging, get_client_settings
from fedinotify.domain.capabilities import supported_kinds, supported_push_kinds

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Work with grouped notification pages")
    subparsers = parser.add_subparsers(dest="command", required=True)

    merge = subparsers.add_parser("merge", help="Merge grouped notification pages")
    merge.add_argument(
        "pages",
        nargs="+",
        type=Path,
        help="JSON files holding grouped notification pages, in delivery order",
    )
    merge.add_argument(
        "--flavour",
        type=str,
        help=(
            "Drop groups whose type this server flavour does not support; "
            "without it nothing is filtered, whatever FEDINOTIFY_FLAVOUR says"
        ),
    )
    merge.add_argument(
        "--output",
        type=Path,
        help="Write the merged collection here instead of stdout",
    )

    capabilities = subparsers.add_parser(
        "capabilities",
        help="List notification types a server flavour supports",
    )
    capabilities.add_argument(
        "--flavour",
        type=str,
        help="Server flavour (defaults to FEDINOTIFY_FLAVOUR or mastodon)",
    )
    capabilities.add_argument(
        "--push",
        action="store_true",
        help="List push notification types instead",
    )

    return parser.parse_args(list(argv))


def _write_json(document: object, output: Path | None) -> None:
    text = json.dumps(document, indent=2, ensure_ascii=False)
    if output is None:
        sys.stdout.write(text + "\n")
        return
    output.write_text(text + "\n", encoding="utf-8")
    log.info("Wrote merged notifications to %s", output)


def _run_merge(args: argparse.Namespace) -> None:
    flavour = get_client_settings(flavour=args.flavour).flavour if args.flavour else None
    results = fold_notification_pages(load_pages(args.pages), flavour=flavour)
    _write_json(dump_grouped_notifications(results), args.output)


def _run_capabilities(args: argparse.Namespace) -> None:
    flavour = get_client_settings(flavour=args.flavour).flavour
    kinds = supported_push_kinds(flavour) if args.push else supported_kinds(flavour)
    if not flavour.is_known:
        log.warning("Unknown flavour %s, assuming Mastodon-compatible defaults", flavour.raw)
    for kind in sorted(kinds):
        sys.stdout.write(f"{kind.value}\n")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        settings = get_client_settings()
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)
    configure_logging(level=settings.log_level)

    try:
        if parsed_args.command == "merge":
            _run_merge(parsed_args)
        elif parsed_args.command == "capabilities":
            _run_capabilities(parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

"""Command-line interface for Subaddress Labeler.

This module provides the main entry point for the CLI application.
"""

from __future__ import annotations

import argparse
import logging
import sys

import structlog

from subaddress_labeler import __version__
from subaddress_labeler.config import get_settings
from subaddress_labeler.gmail import GmailClient, GmailMailbox
from subaddress_labeler.labeling import ThreadLabelingPolicy, label_inbox
from subaddress_labeler.routing import decode_label_paths, extract_address, get_subroute

logger = structlog.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subaddress-labeler",
        description="Label Gmail threads from plus-addressed recipients",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Label inbox threads")
    run_parser.add_argument(
        "--query",
        default=None,
        help="Gmail search query selecting threads (default: settings inbox_query)",
    )
    run_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of threads to process (default: settings max_threads)",
    )

    decode_parser = subparsers.add_parser(
        "decode",
        help="Show the labels an address decodes to, without touching Gmail",
    )
    decode_parser.add_argument("address", help='Recipient address or "Name" <address>')

    return parser


def _cmd_run(args: argparse.Namespace) -> int:
    settings = get_settings()

    client = GmailClient(settings)
    client.authenticate()

    mailbox = GmailMailbox(
        client,
        query=args.query or settings.inbox_query,
        max_threads=args.limit if args.limit is not None else settings.max_threads,
    )
    policy = ThreadLabelingPolicy(mailbox, settings.trusted_creator_domains)
    summary = label_inbox(mailbox, policy)

    for result in summary.results:
        print(f"{result.thread_id}\t{result.sender}\t{result.subject}\t{', '.join(result.added_labels)}")

    print(
        f"Labeled {summary.threads_labeled} of {summary.threads_seen} threads "
        f"({summary.threads_failed} failed)"
    )
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    address = extract_address(args.address)
    subroute = get_subroute(address)
    print(f"Subroute: {subroute}")
    for path in decode_label_paths(subroute):
        print(f"- {path}")
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the Subaddress Labeler CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    settings = get_settings()

    # Configure logging; stdout carries the run report
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )

    logger.info("subaddress_labeler_started", version=__version__, debug=settings.debug)

    parser = _build_parser()
    parsed = parser.parse_args(args)

    if parsed.command == "run":
        return _cmd_run(parsed)
    if parsed.command == "decode":
        return _cmd_decode(parsed)

    logger.error("unknown_command", command=parsed.command)
    return 2


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface for the new mail checker."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from email_check import check, config, notify, sync
from email_check.errors import EmailCheckError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="email-check",
        description="Announce newly arrived Maildir messages with desktop notifications.",
    )
    parser.add_argument(
        "--no-sync",
        action="store_true",
        help="Skip running mbsync before scanning the mail store.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List new messages without notifying or updating the state file.",
    )
    parser.add_argument(
        "--maildir",
        type=Path,
        help=f"Mail store root (default: ${config.MAILDIR_ENV} or ~/Maildir).",
    )
    parser.add_argument(
        "--state-file",
        type=Path,
        help=(
            f"File recording already reported message IDs "
            f"(default: ${config.STATE_FILE_ENV} or <data dir>/email-check/seen_ids)."
        ),
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar output during the scan.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase logging verbosity for troubleshooting.",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)

    resolved = config.load_config(args.maildir, args.state_file)
    args.maildir = resolved.maildir
    args.state_file = resolved.state_file
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    logging.getLogger(__name__).debug(
        "Using maildir %s and state file %s", args.maildir, args.state_file
    )

    synchronizer = None if args.no_sync else sync.sync_mail
    try:
        stats = check.run_check(
            args.maildir,
            args.state_file,
            notifier=notify.send_notification,
            synchronizer=synchronizer,
            dry_run=args.dry_run,
            show_progress=not args.no_progress,
        )
    except EmailCheckError as exc:
        _print_error_chain(exc)
        return 1

    print(
        f"Check complete: {stats.scanned_messages} messages scanned, "
        f"{stats.new_messages} new."
    )
    if stats.dry_run:
        for record in stats.new_records:
            print(f"  {record.identifier}  {record.sender}  {record.subject}")
    elif stats.failed_notifications:
        print(
            f"  {stats.failed_notifications} "
            f"notification{'s' if stats.failed_notifications != 1 else ''} failed."
        )
    return 0


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_error_chain(exc: BaseException) -> None:
    print(f"error: {exc}", file=sys.stderr)
    cause = exc.__cause__
    while cause is not None:
        print(f"  caused by: {cause}", file=sys.stderr)
        cause = cause.__cause__


if __name__ == "__main__":  # pragma: no cover - manual execution entry point
    raise SystemExit(main())

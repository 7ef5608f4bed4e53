"""The scan, diff and notify workflow behind a single ``email-check`` run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

from email_check.errors import NotificationError
from email_check.readers import maildir
from email_check.readers.maildir import MessageRecord
from email_check.state import SeenSet

logger = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]
Synchronizer = Callable[[], None]


@dataclass(frozen=True)
class CheckStats:
    """Summary information produced by a check run."""

    scanned_messages: int
    new_messages: int
    notified_messages: int
    failed_notifications: int
    seen_total: int
    dry_run: bool
    new_records: tuple[MessageRecord, ...] = field(default=(), repr=False)


def select_new(records: Iterable[MessageRecord], seen: SeenSet) -> list[MessageRecord]:
    """Return the records whose identifier is not in ``seen``, keeping their order."""

    return [record for record in records if not seen.contains(record.identifier)]


def run_check(
    store_root: Path,
    state_file: Path,
    *,
    notifier: Notifier,
    synchronizer: Synchronizer | None = None,
    dry_run: bool = False,
    show_progress: bool = False,
) -> CheckStats:
    """Notify about every message in ``store_root`` not yet recorded in ``state_file``.

    The state file is read once before scanning and written once at the end.
    Messages whose notification fails are still recorded as seen, so they are
    never announced on a later run.
    """

    seen = SeenSet.load(state_file)

    if synchronizer is not None:
        synchronizer()

    records = maildir.scan_maildir(store_root, show_progress=show_progress)
    logger.info("Found %d total emails", len(records))

    new_records = select_new(records, seen)
    logger.info("Found %d new emails", len(new_records))

    if dry_run:
        return CheckStats(
            scanned_messages=len(records),
            new_messages=len(new_records),
            notified_messages=0,
            failed_notifications=0,
            seen_total=len(seen),
            dry_run=True,
            new_records=tuple(new_records),
        )

    notified = 0
    failed = 0
    for record in new_records:
        try:
            notifier(record.subject, record.sender)
        except NotificationError as exc:
            failed += 1
            logger.warning("Notification for %s failed: %s", record.identifier, exc)
            continue
        notified += 1
    if notified:
        logger.info("Sent %d notifications", notified)

    for record in new_records:
        seen.add(record.identifier)

    seen.save(state_file)
    logger.info("Mail check completed")

    return CheckStats(
        scanned_messages=len(records),
        new_messages=len(new_records),
        notified_messages=notified,
        failed_notifications=failed,
        seen_total=len(seen),
        dry_run=False,
        new_records=tuple(new_records),
    )


__all__ = ["CheckStats", "Notifier", "Synchronizer", "run_check", "select_new"]

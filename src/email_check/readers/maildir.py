"""Helpers for reading new messages from a Maildir-style mail store (~/Maildir)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tqdm import tqdm

from email_check.errors import (
    InvalidMessagePath,
    MessageReadError,
    MessageUnreadable,
    StoreUnreadable,
)
from lib import rfc2047

logger = logging.getLogger(__name__)

INBOX_NEW = Path("Inbox") / "new"

_SUBJECT_PREFIX = "Subject: "
_FROM_PREFIX = "From: "


@dataclass(frozen=True)
class MessageRecord:
    """Header metadata for a single message, keyed by its file name."""

    identifier: str
    subject: str
    sender: str


def read_message(path: Path) -> MessageRecord:
    """Return the record for the message stored at ``path``.

    Only the header block is read: parsing stops at the first empty or
    whitespace-only line. Repeated ``Subject``/``From`` headers overwrite
    earlier ones.
    """

    identifier = path.name
    if identifier in ("", ".", ".."):
        raise InvalidMessagePath(f"Invalid message path: {path}", path)

    try:
        handle = path.open("rb")
    except OSError as exc:
        raise MessageUnreadable(f"Failed to open message file: {path}", path) from exc

    subject = ""
    sender = ""
    with handle:
        try:
            for raw_line in handle:
                line = _decode_line(raw_line)
                if not line.strip():
                    break
                if line.startswith(_SUBJECT_PREFIX):
                    subject = rfc2047.decode_header_value(line[len(_SUBJECT_PREFIX):])
                elif line.startswith(_FROM_PREFIX):
                    sender = line[len(_FROM_PREFIX):]
        except OSError as exc:
            raise MessageReadError(f"Failed to read line from message file: {path}", path) from exc

    return MessageRecord(identifier=identifier, subject=subject, sender=sender)


def scan_maildir(store_root: Path, *, show_progress: bool = False) -> list[MessageRecord]:
    """Return records for the ``Inbox/new`` messages of every account under ``store_root``.

    Records are ordered by account, then by file name within the account.
    Identifiers are not deduplicated across accounts.
    """

    try:
        entries = sorted(store_root.iterdir(), key=lambda item: item.name)
    except OSError as exc:
        raise StoreUnreadable(f"Failed to read maildir: {store_root}", store_root) from exc

    message_paths: list[Path] = []
    for account_dir in entries:
        if not account_dir.is_dir():
            continue
        message_paths.extend(_list_message_files(account_dir / INBOX_NEW))

    progress = tqdm(
        total=len(message_paths),
        disable=not show_progress,
        unit="msg",
        desc="Scanning Maildir",
    )

    records: list[MessageRecord] = []
    for message_path in message_paths:
        record = _read_or_skip(message_path)
        if record is not None:
            records.append(record)
        progress.update(1)

    progress.close()
    return records


def _decode_line(raw_line: bytes) -> str:
    # Lines end at "\n" only; a lone "\r" inside a header stays part of it.
    line = raw_line[:-1] if raw_line.endswith(b"\n") else raw_line
    if line.endswith(b"\r"):
        line = line[:-1]
    return line.decode("utf-8", errors="replace")


def _list_message_files(inbox_dir: Path) -> list[Path]:
    try:
        children = sorted(inbox_dir.iterdir(), key=lambda item: item.name)
    except FileNotFoundError:
        return []
    except OSError as exc:
        logger.warning("Skipping unreadable inbox %s: %s", inbox_dir, exc)
        return []
    return [child for child in children if child.is_file()]


def _read_or_skip(message_path: Path) -> MessageRecord | None:
    try:
        return read_message(message_path)
    except MessageReadError as exc:
        logger.debug("Skipping %s: %s", message_path, exc)
        return None


__all__ = ["INBOX_NEW", "MessageRecord", "read_message", "scan_maildir"]

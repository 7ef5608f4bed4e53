"""Wrapper around the external mail synchronizer (``mbsync``)."""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from email_check.errors import SyncError

logger = logging.getLogger(__name__)

DEFAULT_SYNC_COMMAND: tuple[str, ...] = ("mbsync", "-Va")


def sync_mail(command: Sequence[str] = DEFAULT_SYNC_COMMAND) -> None:
    """Run ``command`` and raise :class:`SyncError` unless it exits cleanly."""

    program = command[0]
    logger.info("Syncing mail with %s", " ".join(command))
    try:
        result = subprocess.run(list(command), capture_output=True, text=True, check=False)
    except OSError as exc:
        raise SyncError(f"Failed to execute {program} - is it installed?") from exc

    if result.returncode != 0:
        raise SyncError(f"{program} failed: {result.stderr.strip()}")


__all__ = ["DEFAULT_SYNC_COMMAND", "sync_mail"]

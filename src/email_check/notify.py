"""Desktop notifications for newly arrived mail."""

from __future__ import annotations

import subprocess

from email_check.errors import NotificationError

NOTIFICATION_TITLE = "New Mail"


def format_notification_body(subject: str, sender: str) -> str:
    return f"From: {sender}\nSubject: {subject}"


def send_notification(subject: str, sender: str) -> None:
    """Show a ``notify-send`` popup for one message."""

    body = format_notification_body(subject, sender)
    try:
        result = subprocess.run(
            ["notify-send", NOTIFICATION_TITLE, body],
            capture_output=True,
            text=True,
            check=False,
        )
    except ValueError as exc:
        # e.g. a NUL byte in a decoded subject cannot be passed as an argument
        raise NotificationError(f"Cannot pass notification text to notify-send: {exc}") from exc
    except OSError as exc:
        raise NotificationError("Failed to execute notify-send - is it installed?") from exc

    if result.returncode != 0:
        raise NotificationError(f"notify-send failed: {result.stderr.strip()}")


__all__ = ["NOTIFICATION_TITLE", "format_notification_body", "send_notification"]

"""Exception types raised by the email-check pipeline."""

from __future__ import annotations

from pathlib import Path


class EmailCheckError(Exception):
    """Base class for every error the pipeline reports to the command line."""


class MessageReadError(EmailCheckError):
    """A single message file could not be turned into a record."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class InvalidMessagePath(MessageReadError):
    """No identifier can be derived from the message path."""


class MessageUnreadable(MessageReadError):
    """The message file could not be opened."""


class StoreUnreadable(EmailCheckError):
    """The mail store root could not be listed."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class StateLoadError(EmailCheckError):
    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class StateSaveError(EmailCheckError):
    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class SyncError(EmailCheckError):
    """The external mail synchronizer failed."""


class NotificationError(EmailCheckError):
    """A desktop notification could not be delivered."""


__all__ = [
    "EmailCheckError",
    "InvalidMessagePath",
    "MessageReadError",
    "MessageUnreadable",
    "NotificationError",
    "StateLoadError",
    "StateSaveError",
    "StoreUnreadable",
    "SyncError",
]

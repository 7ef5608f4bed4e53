"""Tests for the mbsync and notify-send wrappers."""

import subprocess

import pytest

from email_check import notify, sync
from email_check.errors import NotificationError, SyncError


class _FakeRun:
    def __init__(self, returncode: int = 0, stderr: str = "", error: Exception | None = None) -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.error = error
        self.commands: list[list[str]] = []

    def __call__(self, command, **kwargs):
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(command, self.returncode, stdout="", stderr=self.stderr)


def test_send_notification_invokes_notify_send(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)

    notify.send_notification("Test Subject", "test@example.com")

    assert fake.commands == [
        ["notify-send", "New Mail", "From: test@example.com\nSubject: Test Subject"]
    ]


def test_send_notification_raises_on_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(subprocess, "run", _FakeRun(returncode=1, stderr="no display\n"))

    with pytest.raises(NotificationError, match="notify-send failed: no display"):
        notify.send_notification("Subject", "sender@example.com")


def test_send_notification_raises_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(subprocess, "run", _FakeRun(error=FileNotFoundError("notify-send")))

    with pytest.raises(NotificationError, match="is it installed"):
        notify.send_notification("Subject", "sender@example.com")


def test_sync_mail_runs_mbsync(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)

    sync.sync_mail()

    assert fake.commands == [["mbsync", "-Va"]]


def test_sync_mail_raises_with_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(subprocess, "run", _FakeRun(returncode=1, stderr="IMAP error\n"))

    with pytest.raises(SyncError, match="mbsync failed: IMAP error"):
        sync.sync_mail()


def test_sync_mail_raises_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    error = FileNotFoundError("offlineimap")
    monkeypatch.setattr(subprocess, "run", _FakeRun(error=error))

    with pytest.raises(SyncError) as excinfo:
        sync.sync_mail(("offlineimap", "-o"))

    assert "Failed to execute offlineimap" in str(excinfo.value)
    assert excinfo.value.__cause__ is error


def test_send_notification_rejects_nul_byte_text() -> None:
    with pytest.raises(NotificationError) as excinfo:
        notify.send_notification("hi\x00there", "sender@example.com")

    assert isinstance(excinfo.value.__cause__, ValueError)

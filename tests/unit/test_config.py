"""Tests for resolving the mail store and state file locations."""

from pathlib import Path

import pytest

from email_check import config


def test_load_config_uses_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    resolved = config.load_config(environ={})

    assert resolved.maildir == (tmp_path / "Maildir").resolve()
    assert resolved.state_file == (
        tmp_path / ".local" / "share" / "email-check" / "seen_ids"
    ).resolve()


def test_load_config_honours_xdg_data_home(tmp_path: Path) -> None:
    resolved = config.load_config(environ={"XDG_DATA_HOME": str(tmp_path / "data")})

    assert resolved.state_file == (tmp_path / "data" / "email-check" / "seen_ids").resolve()


def test_load_config_prefers_environment_overrides(tmp_path: Path) -> None:
    environ = {
        config.MAILDIR_ENV: str(tmp_path / "mail"),
        config.STATE_FILE_ENV: str(tmp_path / "seen"),
        "XDG_DATA_HOME": str(tmp_path / "ignored"),
    }

    resolved = config.load_config(environ=environ)

    assert resolved.maildir == (tmp_path / "mail").resolve()
    assert resolved.state_file == (tmp_path / "seen").resolve()


def test_load_config_prefers_explicit_arguments(tmp_path: Path) -> None:
    environ = {config.MAILDIR_ENV: str(tmp_path / "from-env")}

    resolved = config.load_config(
        tmp_path / "explicit",
        tmp_path / "state",
        environ=environ,
    )

    assert resolved.maildir == (tmp_path / "explicit").resolve()
    assert resolved.state_file == (tmp_path / "state").resolve()


def test_load_config_does_not_create_directories(tmp_path: Path) -> None:
    config.load_config(environ={"XDG_DATA_HOME": str(tmp_path / "data")})

    assert not (tmp_path / "data").exists()

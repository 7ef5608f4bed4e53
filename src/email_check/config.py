"""Default locations for the mail store and the seen-message state file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

MAILDIR_ENV = "EMAIL_CHECK_MAILDIR"
STATE_FILE_ENV = "EMAIL_CHECK_STATE_FILE"

_APP_DIR = "email-check"
_STATE_FILE_NAME = "seen_ids"


@dataclass(frozen=True)
class CheckConfig:
    maildir: Path
    state_file: Path


def default_data_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Return the per-user data directory, honouring ``XDG_DATA_HOME``."""

    env = os.environ if environ is None else environ
    base = env.get("XDG_DATA_HOME")
    if base:
        return Path(base).expanduser() / _APP_DIR
    return Path.home() / ".local" / "share" / _APP_DIR


def load_config(
    maildir: Path | None = None,
    state_file: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> CheckConfig:
    """Resolve each path from the explicit argument, then the environment, then the default."""

    env = os.environ if environ is None else environ

    if maildir is None:
        maildir = Path(env[MAILDIR_ENV]) if env.get(MAILDIR_ENV) else Path.home() / "Maildir"
    if state_file is None:
        if env.get(STATE_FILE_ENV):
            state_file = Path(env[STATE_FILE_ENV])
        else:
            state_file = default_data_dir(env) / _STATE_FILE_NAME

    return CheckConfig(
        maildir=maildir.expanduser().resolve(),
        state_file=state_file.expanduser().resolve(),
    )


__all__ = ["CheckConfig", "MAILDIR_ENV", "STATE_FILE_ENV", "default_data_dir", "load_config"]

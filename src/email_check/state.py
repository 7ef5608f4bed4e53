"""Persistent record of message identifiers that have already been reported."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Iterator

from email_check.errors import StateLoadError, StateSaveError

logger = logging.getLogger(__name__)


class SeenSet:
    """Set of identifiers already announced to the user.

    The on-disk form is plain text with one identifier per line. Identifiers
    are only ever added; nothing is evicted.
    """

    def __init__(self, identifiers: Iterable[str] = ()) -> None:
        self._identifiers: set[str] = set(identifiers)

    @classmethod
    def load(cls, path: Path) -> SeenSet:
        """Return the set stored at ``path``, or an empty set if it does not exist yet."""

        if not path.exists():
            logger.debug("No state file at %s, starting with an empty seen set", path)
            return cls()

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StateLoadError(f"Failed to read state file: {path}", path) from exc

        lines = (line.rstrip("\r") for line in content.split("\n"))
        seen = cls(line for line in lines if line.strip())
        logger.debug("Loaded %d seen message IDs from %s", len(seen), path)
        return seen

    def save(self, path: Path) -> None:
        """Replace the contents of ``path`` with every identifier in the set.

        The data is written to a temporary sibling first and moved into place,
        so readers only ever observe the previous or the new complete file.
        """

        content = "".join(f"{identifier}\n" for identifier in sorted(self._identifiers))
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(content)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StateSaveError(f"Failed to write state file: {path}", path) from exc
        logger.debug("Saved %d seen message IDs to %s", len(self._identifiers), path)

    def contains(self, identifier: str) -> bool:
        return identifier in self._identifiers

    def add(self, identifier: str) -> None:
        self._identifiers.add(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._identifiers

    def __iter__(self) -> Iterator[str]:
        return iter(self._identifiers)

    def __len__(self) -> int:
        return len(self._identifiers)


__all__ = ["SeenSet"]

"""Helpers for decoding RFC 2047 encoded-word header values."""

from __future__ import annotations

import re
from email.errors import HeaderParseError
from email.header import decode_header, make_header

_ENCODED_WORD = re.compile(r"=\?[^?\s]+\?[BbQq]\?[^?\s]*\?=")


def is_encoded(raw: str) -> bool:
    """Return ``True`` if ``raw`` contains at least one encoded word."""

    return _ENCODED_WORD.search(raw) is not None


def decode_header_value(raw: str) -> str:
    """Return the display text for ``raw``, or ``raw`` itself if it cannot be decoded.

    Plain values pass through untouched. Values carrying encoded words are
    decoded along with any surrounding plain text, e.g.
    ``"Re: =?UTF-8?Q?caf=C3=A9?="`` becomes ``"Re: café"``.
    """

    if not is_encoded(raw):
        return raw
    try:
        return str(make_header(decode_header(raw)))
    except (HeaderParseError, LookupError, ValueError):
        return raw


__all__ = ["decode_header_value", "is_encoded"]

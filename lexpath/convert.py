"""Conversion of path names between bytes and text."""

from __future__ import annotations

import sys


class CodecvtError(ValueError):
    """Raised when a path name cannot be converted between bytes and text."""


def _resolve(encoding: str | None) -> str:
    return sys.getfilesystemencoding() if encoding is None else encoding


def to_text(data: bytes | bytearray | memoryview, encoding: str | None = None) -> str:
    """Decode ``data`` into text; the filesystem encoding is the default."""
    raw = bytes(data)
    if not raw:
        return ""
    try:
        return raw.decode(_resolve(encoding))
    except UnicodeError as exc:
        raise CodecvtError("path codecvt to wstring") from exc


def to_bytes(text: str, encoding: str | None = None) -> bytes:
    """Encode ``text`` into bytes; the filesystem encoding is the default."""
    if not text:
        return b""
    try:
        return text.encode(_resolve(encoding))
    except UnicodeError as exc:
        raise CodecvtError("path codecvt to string") from exc
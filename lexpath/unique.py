"""Generation of unique, randomly filled path names."""

from __future__ import annotations

import errno
import os
from typing import Union

from lexpath.path import Path

PathLike = Union[str, "os.PathLike[str]"]

_HEX_DIGITS = "0123456789abcdef"
_PERCENT = "%"
_RANDOM_BYTES = 16
_MAX_NIBBLES = 2 * _RANDOM_BYTES


class FilesystemError(OSError):
    """A failed filesystem operation, with the paths it concerned."""

    def __init__(
        self,
        error_number: int,
        message: str,
        path1: PathLike | None = None,
        path2: PathLike | None = None,
    ) -> None:
        super().__init__(error_number, os.strerror(error_number))
        self.message = message
        self.filename = None if path1 is None else os.fspath(path1)
        self.filename2 = None if path2 is None else os.fspath(path2)

    def __str__(self) -> str:
        text = f"{self.message}: {self.strerror}"
        paths = [p for p in (self.filename, self.filename2) if p is not None]
        if paths:
            text += ": " + ", ".join(f'"{p}"' for p in paths)
        return text


def _random_bytes(count: int) -> bytes:
    """Read ``count`` bytes from the system's cryptographic random source."""
    try:
        return os.urandom(count)
    except NotImplementedError as exc:
        raise FilesystemError(errno.ENOSYS, "unique_path") from exc
    except OSError as exc:
        raise FilesystemError(exc.errno or errno.EIO, "unique_path") from exc


def _nibbles():
    """Yield random 4-bit values, low nibble of each byte first."""
    while True:
        for byte in _random_bytes(_RANDOM_BYTES):
            yield byte & 0xF
            yield (byte >> 4) & 0xF


def unique_path(model: PathLike) -> Path:
    """Return ``model`` with every ``%`` replaced by a random hex digit.

    Raises :class:`FilesystemError` if no random data can be obtained.
    """
    text = os.fspath(model)
    if _PERCENT not in text:
        return Path(text)
    nibbles = _nibbles()
    result = "".join(
        _HEX_DIGITS[next(nibbles)] if char == _PERCENT else char for char in text
    )
    return Path(result)
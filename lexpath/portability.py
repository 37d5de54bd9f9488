"""Checks of file and directory names for portability between systems."""

from __future__ import annotations

_WINDOWS_INVALID_CHARS = frozenset(
    [chr(code) for code in range(0x00, 0x20)] + list('<>:"/\\|')
)

_VALID_POSIX = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789._-"
)


def native(name: str) -> bool:
    """Return True if ``name`` is a valid name on this (POSIX) system."""
    return bool(name) and name[0] != " " and "/" not in name


def portable_posix_name(name: str) -> bool:
    """Return True if ``name`` uses only the POSIX portable character set."""
    return bool(name) and all(char in _VALID_POSIX for char in name)


def windows_name(name: str) -> bool:
    """Return True if ``name`` is a valid Windows file name."""
    return (
        bool(name)
        and name[0] != " "
        and not any(char in _WINDOWS_INVALID_CHARS for char in name)
        and name[-1] != " "
        and (name[-1] != "." or len(name) == 1 or name == "..")
    )


def portable_name(name: str) -> bool:
    """Return True if ``name`` is valid on both POSIX and Windows."""
    return bool(name) and (
        name in (".", "..")
        or (
            windows_name(name)
            and portable_posix_name(name)
            and name[0] not in ".-"
        )
    )


def portable_directory_name(name: str) -> bool:
    """Return True if ``name`` is a portable directory name (no dots)."""
    return name in (".", "..") or (portable_name(name) and "." not in name)


def portable_file_name(name: str) -> bool:
    """Return True if ``name`` is a portable file name.

    At most one dot is allowed, followed by at most three characters.
    """
    if not portable_name(name) or name in (".", ".."):
        return False
    pos = name.find(".")
    if pos == -1:
        return True
    return name.find(".", pos + 1) == -1 and pos + 5 > len(name)
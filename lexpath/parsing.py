"""Low-level parsing of generic (POSIX style) path strings.

Positions are plain string indices. Where a position may be absent,
``None`` is used.
"""

from __future__ import annotations

SEPARATOR = "/"
DOT = "."


def is_separator(char: str) -> bool:
    """Return True if ``char`` is a directory separator."""
    return char == SEPARATOR


def _find_separator(text: str, start: int) -> int | None:
    pos = text.find(SEPARATOR, start)
    return None if pos == -1 else pos


def is_root_separator(text: str, pos: int) -> bool:
    """Return True if the separator at ``pos`` is the root directory."""
    if not text or not 0 <= pos < len(text) or not is_separator(text[pos]):
        raise ValueError("position does not refer to a separator")

    # Move to the leftmost separator of a run.
    while pos > 0 and is_separator(text[pos - 1]):
        pos -= 1

    if pos == 0:
        return True

    # "//" name "/"
    if pos < 3 or not is_separator(text[0]) or not is_separator(text[1]):
        return False

    return _find_separator(text, 2) == pos


def filename_pos(text: str, end_pos: int) -> int:
    """Return where the last element of ``text[:end_pos]`` starts.

    Returns 0 when the whole string is the filename (or is empty).
    """
    if end_pos == 2 and is_separator(text[0]) and is_separator(text[1]):
        return 0

    if end_pos and is_separator(text[end_pos - 1]):
        return end_pos - 1

    # A zero end position searches the whole string.
    limit = len(text) if end_pos == 0 else end_pos
    pos = text.rfind(SEPARATOR, 0, limit)

    if pos == -1 or (pos == 1 and is_separator(text[0])):
        return 0
    return pos + 1


def root_directory_start(text: str, size: int) -> int | None:
    """Return the position of the root directory separator, or None."""
    # case "//"
    if size == 2 and is_separator(text[0]) and is_separator(text[1]):
        return None

    # case "//net {/}"
    if (
        size > 3
        and is_separator(text[0])
        and is_separator(text[1])
        and not is_separator(text[2])
    ):
        pos = _find_separator(text, 2)
        return pos if pos is not None and pos < size else None

    # case "/"
    if size > 0 and is_separator(text[0]):
        return 0

    return None


def first_element(text: str, size: int | None = None) -> tuple[int, int]:
    """Return ``(position, length)`` of the first element of ``text``.

    Extra leading separators are skipped; an empty string gives ``(0, 0)``.
    """
    if size is None:
        size = len(text)
    if not text:
        return 0, 0

    cur = 0
    element_pos = 0
    element_size = 0

    if (
        size >= 2
        and is_separator(text[0])
        and is_separator(text[1])
        and (size == 2 or not is_separator(text[2]))
    ):
        # "//" network name
        cur = 2
        element_size = 2
    elif is_separator(text[0]):
        element_size = 1
        while cur + 1 < size and is_separator(text[cur + 1]):
            cur += 1
            element_pos += 1
        return element_pos, element_size

    while cur < size and not is_separator(text[cur]):
        cur += 1
        element_size += 1

    return element_pos, element_size


def next_element(text: str, pos: int, element: str) -> tuple[int, str]:
    """Advance past ``element`` found at ``pos``.

    Returns the position and text of the following element. At the end the
    position equals ``len(text)`` and the element is empty.
    """
    size = len(text)
    if pos >= size:
        raise ValueError("cannot advance past the end of the path")

    pos += len(element)
    if pos == size:
        return pos, ""

    was_net = (
        len(element) > 2
        and is_separator(element[0])
        and is_separator(element[1])
        and not is_separator(element[2])
    )

    if is_separator(text[pos]):
        if was_net:
            return pos, SEPARATOR

        while pos != size and is_separator(text[pos]):
            pos += 1

        # A trailing non-root separator reads as ".".
        if pos == size and not is_root_separator(text, pos - 1):
            return pos - 1, DOT

    end_pos = _find_separator(text, pos)
    if end_pos is None:
        end_pos = size
    return pos, text[pos:end_pos]


def previous_element(text: str, pos: int) -> tuple[int, str]:
    """Step back from ``pos`` to the preceding element.

    Returns the position and text of that element.
    """
    if pos == 0:
        raise ValueError("cannot step back before the start of the path")

    size = len(text)
    end_pos = pos

    if (
        pos == size
        and size > 1
        and is_separator(text[pos - 1])
        and not is_root_separator(text, pos - 1)
    ):
        return pos - 1, DOT

    root_dir_pos = root_directory_start(text, end_pos)

    while (
        end_pos > 0
        and end_pos - 1 != root_dir_pos
        and is_separator(text[end_pos - 1])
    ):
        end_pos -= 1

    start = filename_pos(text, end_pos)
    return start, text[start:end_pos]
"""An immutable, purely lexical path type using the generic "/" format."""

from __future__ import annotations

import functools
import os
from typing import Iterator, Union

from lexpath.parsing import (
    DOT,
    SEPARATOR,
    filename_pos,
    first_element,
    is_root_separator,
    is_separator,
    next_element,
    root_directory_start,
)

PathLike = Union[str, "os.PathLike[str]"]

_DOT_DOT = ".."


def _as_path(value: object) -> "Path | None":
    if isinstance(value, Path):
        return value
    if isinstance(value, str) or isinstance(value, os.PathLike):
        return Path(value)
    return None


@functools.total_ordering
class Path:
    """A path held as text and decomposed lexically, without touching disk."""

    __slots__ = ("_text",)

    def __init__(self, pathname: PathLike = "") -> None:
        text = os.fspath(pathname)
        if not isinstance(text, str):
            raise TypeError("path must be text, not bytes")
        self._text = text

    # -- conversions ------------------------------------------------------

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Path({self._text!r})"

    def __fspath__(self) -> str:
        return self._text

    def native(self) -> str:
        """Return the path as stored."""
        return self._text

    # -- comparison -------------------------------------------------------

    def compare(self, other: PathLike) -> int:
        """Compare element by element; return -1, 0 or 1."""
        other_path = _as_path(other)
        if other_path is None:
            raise TypeError(f"cannot compare Path with {type(other).__name__}")
        mine = list(self)
        theirs = list(other_path)
        for left, right in zip(mine, theirs):
            if left < right:
                return -1
            if right < left:
                return 1
        if len(mine) == len(theirs):
            return 0
        return -1 if len(mine) < len(theirs) else 1

    def __eq__(self, other: object) -> bool:
        other_path = _as_path(other)
        if other_path is None:
            return NotImplemented
        return self.compare(other_path) == 0

    def __lt__(self, other: object) -> bool:
        other_path = _as_path(other)
        if other_path is None:
            return NotImplemented
        return self.compare(other_path) < 0

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __bool__(self) -> bool:
        return bool(self._text)

    # -- iteration --------------------------------------------------------

    def _elements(self) -> Iterator[tuple[int, str]]:
        text = self._text
        pos, size = first_element(text)
        element = text[pos:pos + size]
        while pos != len(text):
            yield pos, element
            pos, element = next_element(text, pos, element)

    def __iter__(self) -> Iterator[str]:
        for _, element in self._elements():
            yield element

    def __reversed__(self) -> Iterator[str]:
        return reversed(list(self))

    # -- appending --------------------------------------------------------

    def __truediv__(self, other: object) -> "Path":
        other_path = _as_path(other)
        if other_path is None:
            return NotImplemented
        addition = other_path._text
        if not addition:
            return self
        text = self._text
        if not is_separator(addition[0]) and text and not is_separator(text[-1]):
            text += SEPARATOR
        return Path(text + addition)

    def __rtruediv__(self, other: object) -> "Path":
        other_path = _as_path(other)
        if other_path is None:
            return NotImplemented
        return other_path / self

    # -- modifiers (returning new paths) ----------------------------------

    def _parent_path_end(self) -> int | None:
        text = self._text
        end_pos = filename_pos(text, len(text))
        filename_was_separator = bool(text) and is_separator(text[end_pos])

        root_dir_pos = root_directory_start(text, end_pos)
        while (
            end_pos > 0
            and end_pos - 1 != root_dir_pos
            and is_separator(text[end_pos - 1])
        ):
            end_pos -= 1

        if end_pos == 1 and root_dir_pos == 0 and filename_was_separator:
            return None
        return end_pos

    def remove_filename(self) -> "Path":
        """Return the path with its last element removed."""
        end_pos = self._parent_path_end()
        return Path(self._text[: end_pos or 0])

    def remove_trailing_separator(self) -> "Path":
        """Return the path without one trailing separator, if it has one."""
        if self._text and is_separator(self._text[-1]):
            return Path(self._text[:-1])
        return self

    def replace_extension(self, new_extension: PathLike = "") -> "Path":
        """Return the path with its extension replaced (or removed)."""
        extension = os.fspath(new_extension)
        text = self._text[: len(self._text) - len(self.extension()._text)]
        if extension:
            if extension[0] != DOT:
                text += DOT
            text += extension
        return Path(text)

    # -- decomposition ----------------------------------------------------

    def root_name(self) -> "Path":
        """Return the network root name, such as ``//net``, if any."""
        for _, element in self._elements():
            if (
                len(element) > 1
                and is_separator(element[0])
                and is_separator(element[1])
            ):
                return Path(element)
            break
        return Path()

    def root_directory(self) -> "Path":
        """Return the root directory separator, if any."""
        pos = root_directory_start(self._text, len(self._text))
        if pos is None:
            return Path()
        return Path(self._text[pos:pos + 1])

    def root_path(self) -> "Path":
        """Return the root name followed by the root directory."""
        return Path(self.root_name()._text + self.root_directory()._text)

    def relative_path(self) -> "Path":
        """Return the part of the path after its root."""
        for pos, element in self._elements():
            if not is_separator(element[0]):
                return Path(self._text[pos:])
        return Path()

    def parent_path(self) -> "Path":
        """Return the path without its last element."""
        end_pos = self._parent_path_end()
        if end_pos is None:
            return Path()
        return Path(self._text[:end_pos])

    def filename(self) -> "Path":
        """Return the last element; a trailing separator reads as ``.``."""
        text = self._text
        pos = filename_pos(text, len(text))
        if (
            text
            and pos
            and is_separator(text[pos])
            and not is_root_separator(text, pos)
        ):
            return Path(DOT)
        return Path(text[pos:])

    def stem(self) -> "Path":
        """Return the filename without its extension."""
        name = self.filename()._text
        if name in (DOT, _DOT_DOT):
            return Path(name)
        pos = name.rfind(DOT)
        return Path(name if pos == -1 else name[:pos])

    def extension(self) -> "Path":
        """Return the filename's extension, dot included, if any."""
        name = self.filename()._text
        if name in (DOT, _DOT_DOT):
            return Path()
        pos = name.rfind(DOT)
        return Path() if pos == -1 else Path(name[pos:])

    def is_absolute(self) -> bool:
        """Return True if the path has a root directory."""
        return bool(self.root_directory())

    # -- lexical operations -----------------------------------------------

    def lexically_normal(self) -> "Path":
        """Return the path with ``.`` and ``name/..`` pairs removed."""
        if not self._text:
            return self

        elements = [element for _, element in self._elements()]
        last = len(elements) - 1
        temp = Path()

        for index, element in enumerate(elements):
            if element == DOT and index != 0 and index != last:
                continue

            if temp and element == _DOT_DOT:
                lf = temp.filename()._text
                if (
                    lf
                    and (len(lf) != 1 or (lf[0] != DOT and lf[0] != SEPARATOR))
                    and (len(lf) != 2 or (lf[0] != DOT and lf[1] != DOT))
                ):
                    temp = temp.remove_filename()
                    following = index + 1
                    if (
                        not temp
                        and following != len(elements)
                        and following == last
                        and elements[last] == DOT
                    ):
                        temp = temp / DOT
                    continue

            temp = temp / element

        if not temp:
            temp = Path(DOT)
        return temp

    def lexically_relative(self, base: PathLike) -> "Path":
        """Return this path expressed relative to ``base``, or an empty path."""
        mine = list(self)
        theirs = list(Path(base))

        common = 0
        while (
            common < len(mine)
            and common < len(theirs)
            and mine[common] == theirs[common]
        ):
            common += 1

        if common == 0:
            return Path()
        if common == len(mine) and common == len(theirs):
            return Path(DOT)

        depth = 0
        for element in theirs[common:]:
            if element == _DOT_DOT:
                depth -= 1
            elif element and element != DOT:
                depth += 1

        if depth < 0:
            return Path()
        if depth == 0 and (common == len(mine) or not mine[common]):
            return Path(DOT)

        result = Path()
        for _ in range(depth):
            result = result / _DOT_DOT
        for element in mine[common:]:
            result = result / element
        return result

    def lexically_proximate(self, base: PathLike) -> "Path":
        """Like :meth:`lexically_relative`, but return self when unrelated."""
        relative = self.lexically_relative(base)
        return relative if relative else self
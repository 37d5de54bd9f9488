# lexpath

Lexical handling of POSIX-style paths. None of the path operations read
or change the filesystem. A leading `//name` is treated as a network root
name. A trailing non-root separator counts as an implicit `.` element.

## Installation

```
pip install lexpath
```

## Paths

`lexpath.path.Path` is an immutable value. Every operation returns a new
`Path` and leaves the original unchanged.

```python
from lexpath.path import Path

p = Path("foo/bar/baz.txt")
p.filename()     # Path("baz.txt")
p.stem()         # Path("baz")
p.extension()    # Path(".txt")
p.parent_path()  # Path("foo/bar")
list(p)          # ["foo", "bar", "baz.txt"]

Path("a") / "b"                                # Path("a/b")
Path("foo/../bar/").lexically_normal()         # Path("bar/.")
Path("a/b/c").lexically_relative("a/x")        # Path("../b/c")
Path("a/b/c").lexically_relative("x")          # Path("")
Path("a/b/c").lexically_proximate("x")         # Path("a/b/c")
```

Iterating a `Path` yields its elements as strings. `reversed()` yields
them in reverse order.

A `Path` also offers the following:

- `root_name`, `root_directory`, `root_path` and `relative_path`
- `is_absolute`, which is true when there is a root directory
- `compare`, which returns -1, 0 or 1
- `native`, which returns the stored text
- `remove_filename`
- `remove_trailing_separator`
- `replace_extension`, which takes an extension with or without its dot,
  or nothing to remove it

A `Path` works with `os.fspath` and `str`. It compares and hashes element
by element, so `Path("a//b") == "a/b"` is true. A `Path` can also be
compared with a plain string.

## Low-level parsing

`lexpath.parsing` holds the string-index helpers that `Path` is built on:

- `is_separator`
- `is_root_separator`
- `filename_pos`
- `root_directory_start`
- `first_element`
- `next_element`
- `previous_element`

## Portability checks

```python
from lexpath.portability import portable_file_name, windows_name

portable_file_name("readme.txt")   # True
windows_name("bad:name")           # False
```

The module also provides these checks:

- `native`: the name is valid on a POSIX system.
- `portable_posix_name`: the name uses only the POSIX portable character
  set.
- `portable_name`: the name is valid on both POSIX and Windows.
- `portable_directory_name`: a portable name that has no dots.

`portable_file_name` accepts at most one dot, followed by at most three
characters.

## Unique names

```python
from lexpath.unique import unique_path

unique_path("tmp-%%%%-%%%%")   # e.g. Path("tmp-3f9a-0c71")
```

Each `%` is replaced with a random lower-case hexadecimal digit. The digits
come from `os.urandom`. If that source fails, `FilesystemError` is raised.
`FilesystemError` is a subclass of `OSError`.

## Encoding conversion

```python
from lexpath.convert import to_bytes, to_text

to_bytes("caf\u00e9", "utf-8")    # b"caf\xc3\xa9"
to_text(b"caf\xc3\xa9", "utf-8")  # "caf\u00e9"
```

When no encoding is given, the filesystem encoding is used. Both functions
raise `CodecvtError` when the data cannot be converted. `CodecvtError` is a
subclass of `ValueError`.

## What this package does not do

It has no operations on the filesystem itself. It does not check whether
paths exist, create or copy files and directories, or iterate over
directories. It also has no command-line program.
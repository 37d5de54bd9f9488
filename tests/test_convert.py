import sys

import pytest

from lexpath.convert import CodecvtError, to_bytes, to_text


def test_empty_inputs():
    assert to_text(b"", "utf-8") == ""
    assert to_bytes("", "utf-8") == b""


def test_utf8_encoding_of_accented_letter():
    assert to_bytes("\u00e9", "utf-8") == b"\xc3\xa9"


@pytest.mark.parametrize(
    "name",
    ["narrow_fstream_test", "wide_fstream_test_\u2780\u263a", "/some/filesystem/path/%%%%"],
)
def test_utf8_round_trip(name):
    assert to_text(to_bytes(name, "utf-8"), "utf-8") == name


def test_accepts_bytearray_and_memoryview():
    data = to_bytes("abc/\u263a", "utf-8")
    assert to_text(bytearray(data), "utf-8") == "abc/\u263a"
    assert to_text(memoryview(data), "utf-8") == "abc/\u263a"


def test_default_encoding_is_filesystem_encoding():
    name = "plain_name.txt"
    encoding = sys.getfilesystemencoding()
    assert to_bytes(name) == name.encode(encoding)
    assert to_text(to_bytes(name)) == name


def test_invalid_bytes_raise():
    with pytest.raises(CodecvtError, match="to wstring"):
        to_text(b"\xff\xfe\xfd", "utf-8")


def test_unencodable_text_raises():
    with pytest.raises(CodecvtError, match="to string"):
        to_bytes("\u2780", "ascii")


def test_codecvt_error_is_value_error():
    with pytest.raises(ValueError):
        to_text(b"\x80", "ascii")
    assert issubclass(CodecvtError, ValueError)
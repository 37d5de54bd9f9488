import errno
import string
from unittest import mock

import pytest

from lexpath.path import Path
from lexpath.unique import FilesystemError, unique_path


def test_percent_signs_become_hex_digits():
    model = "/some/filesystem/path/%%%%"
    result = unique_path(model)
    text = str(result)
    assert len(text) == len(model)
    assert text.startswith("/some/filesystem/path/")
    assert "%" not in text
    assert all(c in "0123456789abcdef" for c in text[-4:])


def test_other_characters_are_kept():
    model = "a%b-%%.tmp%"
    text = str(unique_path(model))
    assert len(text) == len(model)
    for original, produced in zip(model, text):
        if original == "%":
            assert produced in string.hexdigits.lower()
        else:
            assert produced == original


def test_model_without_percent_is_unchanged():
    assert unique_path("plain/name.txt") == Path("plain/name.txt")


def test_accepts_path_and_returns_path():
    result = unique_path(Path("dir/%%%%"))
    assert isinstance(result, Path)
    assert result.parent_path() == Path("dir")


def test_low_nibble_comes_first():
    data = bytes([0x12, 0x34]) + bytes(14)
    with mock.patch("lexpath.unique.os.urandom", return_value=data):
        assert str(unique_path("%%%%")) == "2143"


def test_random_data_refetched_after_32_digits():
    with mock.patch("lexpath.unique.os.urandom", return_value=bytes(16)) as urandom:
        text = str(unique_path("%" * 33))
    assert urandom.call_count == 2
    assert text == "0" * 33


def test_thirty_two_digits_use_one_fetch():
    with mock.patch("lexpath.unique.os.urandom", return_value=bytes(16)) as urandom:
        text = str(unique_path("%" * 32))
    assert urandom.call_count == 1
    assert text == "0" * 32


def test_results_differ_between_calls():
    results = {str(unique_path("%%%%-%%%%-%%%%-%%%%")) for _ in range(10)}
    assert len(results) > 1


def test_random_source_failure_raises():
    with mock.patch("lexpath.unique.os.urandom", side_effect=OSError(errno.EIO, "io")):
        with pytest.raises(FilesystemError) as info:
            unique_path("%%")
    assert info.value.errno == errno.EIO
    assert "unique_path" in str(info.value)


def test_missing_random_source_reports_not_supported():
    with mock.patch("lexpath.unique.os.urandom", side_effect=NotImplementedError):
        with pytest.raises(FilesystemError) as info:
            unique_path("%")
    assert info.value.errno == errno.ENOSYS


def test_filesystem_error_carries_paths():
    err = FilesystemError(errno.ENOENT, "copy", "a", Path("b"))
    assert err.errno == errno.ENOENT
    assert err.filename == "a"
    assert err.filename2 == "b"
    assert '"a", "b"' in str(err)
    assert isinstance(err, OSError)
import os

import pytest

from leakreport.fileutil import (
    FileReadError,
    FileWriteError,
    file_exists,
    get_file_extension,
    get_file_name_from_path,
    last_modified_time,
    read_file,
    remove_file_extension,
    write_file,
)


def test_file_exists_true_and_false(tmp_path):
    target = tmp_path / "present.bin"
    target.write_bytes(b"x")
    assert file_exists(target) is True
    assert file_exists(tmp_path / "absent.bin") is False


def test_last_modified_time(tmp_path):
    target = tmp_path / "stamp.txt"
    target.write_text("data")
    os.utime(target, (1_000_000, 1_000_000))
    assert last_modified_time(target) == 1_000_000


def test_last_modified_time_missing_raises(tmp_path):
    with pytest.raises(OSError):
        last_modified_time(tmp_path / "missing")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("report.txt", "report"),
        ("archive.tar.gz", "archive.tar"),
        ("noext", "noext"),
        ("dir/file.json", "dir/file"),
    ],
)
def test_remove_file_extension(name, expected):
    assert remove_file_extension(name) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("report.txt", "txt"),
        ("archive.tar.gz", "gz"),
        ("noext", None),
        (".hidden", None),
    ],
)
def test_get_file_extension(name, expected):
    assert get_file_extension(name) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("dir/name.txt", "name"),
        ("name.txt", "name"),
        ("dir/name", "name"),
        ("plain", "plain"),
        ("a/b/c.txt", "b/c"),
    ],
)
def test_get_file_name_from_path(name, expected):
    assert get_file_name_from_path(name) == expected


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "blob.bin"
    payload = bytes(range(256)) * 10
    write_file(payload, target)
    assert read_file(target) == payload


def test_read_empty_file(tmp_path):
    target = tmp_path / "empty"
    write_file(b"", target)
    assert read_file(target) == b""


def test_write_overwrites(tmp_path):
    target = tmp_path / "over.bin"
    write_file(b"first content", target)
    write_file(bytearray(b"second"), target)
    assert read_file(target) == b"second"


def test_read_missing_file_raises(tmp_path):
    missing = tmp_path / "nope.json"
    with pytest.raises(FileReadError) as info:
        read_file(missing)
    assert "Error reading file" in str(info.value)
    assert str(missing) in str(info.value)


def test_write_into_missing_directory_raises(tmp_path):
    target = tmp_path / "no_such_dir" / "out.bin"
    with pytest.raises(FileWriteError) as info:
        write_file(b"abc", target)
    assert "Cannot write files" in str(info.value)
"""Small file helpers: existence checks, name manipulation, whole-file I/O."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

IO_READ_CHUNK_SIZE = 2097152


class FileReadError(OSError):
    """Raised when a file cannot be read."""


class FileWriteError(OSError):
    """Raised when a file cannot be written."""


def file_exists(file_name: PathLike) -> bool:
    """Return True if ``file_name`` can be stat'ed."""
    try:
        os.stat(file_name)
    except OSError:
        return False
    return True


def last_modified_time(file_name: PathLike) -> int:
    """Return the last modification time of ``file_name`` in whole seconds.

    Raises OSError if the file cannot be stat'ed.
    """
    return int(os.stat(file_name).st_mtime)


def remove_file_extension(file_name: str) -> str:
    """Return ``file_name`` with everything from its last dot removed."""
    dot = file_name.rfind(".")
    return file_name if dot < 0 else file_name[:dot]


def get_file_extension(file_name: str) -> str | None:
    """Return the text after the last dot, or None if there is no extension.

    A name whose only dot is its first character has no extension.
    """
    dot = file_name.rfind(".")
    if dot <= 0:
        return None
    return file_name[dot + 1:]


def get_file_name_from_path(file_name: str) -> str:
    """Return the name between the first slash and the last dot.

    Without a slash the name starts at the beginning; without a dot it runs
    to the end.
    """
    dot = file_name.rfind(".")
    slash = file_name.find("/")
    if dot >= 0:
        if 0 <= slash < dot:
            return file_name[slash + 1:dot]
        return file_name[:dot]
    if slash >= 0:
        return file_name[slash + 1:]
    return file_name


def read_file(path: PathLike) -> bytes:
    """Read a whole file in binary mode."""
    chunks: list[bytes] = []
    try:
        with open(path, "rb") as handle:
            while chunk := handle.read(IO_READ_CHUNK_SIZE):
                chunks.append(chunk)
    except MemoryError as exc:
        raise FileReadError(f"Not enough free memory to read file: {path}") from exc
    except OSError as exc:
        raise FileReadError(
            f"Error reading file: {path}. error: {exc.errno}"
        ) from exc
    return b"".join(chunks)


def write_file(data: bytes | bytearray | memoryview, path: PathLike) -> None:
    """Write ``data`` to ``path``, replacing any existing content."""
    payload = bytes(data)
    try:
        handle = open(path, "wb")
    except OSError as exc:
        raise FileWriteError(f"Cannot write files: {path}.") from exc
    with handle:
        try:
            written = handle.write(payload)
        except OSError as exc:
            raise FileWriteError(f"Cannot write files: {path}.") from exc
    if written != len(payload):
        raise FileWriteError(
            f"Write error expected {len(payload)} bytes, got {written}."
        )


__all__ = [
    "FileReadError",
    "FileWriteError",
    "file_exists",
    "last_modified_time",
    "remove_file_extension",
    "get_file_extension",
    "get_file_name_from_path",
    "read_file",
    "write_file",
    "Path",
]
"""Tracked buffer allocation with a message describing where it was made."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

_RED = "\033[31m"
_RESET = "\033[0m"


@dataclass(eq=False)
class MemoryLeakPtr:
    """A tracked buffer and the message to print if it is never freed."""

    buffer: bytearray | None
    elements: int
    is_array: bool
    dangling_ptr_message: str
    address: int = field(default=0)

    @property
    def freed(self) -> bool:
        return self.buffer is None


def new_ptr(
    memory_size: int,
    element_count: int,
    file: str,
    line: int,
    func: str,
    notes: str | None = "",
) -> MemoryLeakPtr:
    """Allocate ``memory_size * element_count`` zeroed bytes.

    Raises MemoryError if the allocation fails.
    """
    try:
        buffer = bytearray(memory_size * element_count)
    except MemoryError as exc:
        raise MemoryError(f"Allocation failed: {notes or 'Unknown'}") from exc
    message = (
        f"Ptr failed to delete at File: {file} Line: {line} "
        f"Function: {func} Notes: {notes or ''}"
    )
    return MemoryLeakPtr(
        buffer=buffer,
        elements=element_count,
        is_array=element_count > 1,
        dangling_ptr_message=message,
        address=id(buffer),
    )


def delete_ptr(ptr: MemoryLeakPtr) -> None:
    """Release the buffer held by ``ptr``.

    Raises ValueError if it was already released.
    """
    if ptr.buffer is None:
        raise ValueError("buffer already freed")
    ptr.buffer = None


def dangling_ptr_message(ptr: MemoryLeakPtr | None, stream: TextIO | None = None) -> None:
    """Write the dangling-pointer message for ``ptr`` to ``stream``."""
    if ptr is None:
        return
    out = stream if stream is not None else sys.stdout
    isatty = getattr(out, "isatty", None)
    prefix = f"{_RED}Error: {_RESET}" if isatty is not None and isatty() else "Error: "
    out.write(prefix + ptr.dangling_ptr_message + "\n")
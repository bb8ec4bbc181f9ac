"""A registry of tracked buffers that can report the ones never freed."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from .memory import MemoryLeakPtr, delete_ptr, dangling_ptr_message, new_ptr

LEAK_HEADER = "Memory leaks detected in DLL:\n"


class MemorySystem:
    """Allocates buffers, remembers where they came from and reports leaks."""

    def __init__(self) -> None:
        self._ptrs: dict[int, MemoryLeakPtr] = {}
        self._lock = threading.Lock()

    def add_ptr_buffer(
        self,
        element_size: int,
        element_count: int = 1,
        file: str = "",
        line: int = 0,
        func: str = "",
        notes: str | None = "",
    ) -> bytearray:
        """Allocate a zeroed buffer of ``element_size * element_count`` bytes and track it."""
        with self._lock:
            ptr = new_ptr(element_size, element_count, file, line, func, notes)
            self._ptrs[ptr.address] = ptr
            assert ptr.buffer is not None
            return ptr.buffer

    def remove_ptr_buffer(self, buffer: bytearray) -> bool:
        """Free a tracked buffer. Return False if it was not tracked."""
        with self._lock:
            ptr = self._ptrs.get(id(buffer))
            if ptr is None or ptr.buffer is not buffer:
                return False
            delete_ptr(ptr)
            del self._ptrs[id(buffer)]
            return True

    def report_leaks(self, stream: TextIO | None = None) -> list[MemoryLeakPtr]:
        """Report every buffer still tracked and return them.

        Without ``stream`` the header goes to stderr and the messages to stdout.
        """
        with self._lock:
            leaks = list(self._ptrs.values())
            if leaks:
                (stream if stream is not None else sys.stderr).write(LEAK_HEADER)
                for ptr in leaks:
                    dangling_ptr_message(ptr, stream)
        return leaks

    def __len__(self) -> int:
        with self._lock:
            return len(self._ptrs)

    def __contains__(self, buffer: object) -> bool:
        with self._lock:
            ptr = self._ptrs.get(id(buffer))
            return ptr is not None and ptr.buffer is buffer
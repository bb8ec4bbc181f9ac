"""Demonstrations of leak reporting and a command that runs them."""

from __future__ import annotations

import argparse
import inspect
import sys

from .fileutil import FileReadError
from .level_layout import (
    LevelLayout,
    delete_level_layer_list,
    delete_level_layer_map,
    load_level_layout,
)
from .memory_system import MemorySystem

FLOAT_SIZE = 4
DEFAULT_LAYOUT_PATH = "../json/TestMapLevelLayout.json"


def _here() -> tuple[str, int, str]:
    frame = inspect.currentframe()
    caller = frame.f_back if frame else None
    if caller is None:
        return __file__, 0, "<unknown>"
    return caller.f_code.co_filename, caller.f_lineno, caller.f_code.co_name


def report_unfreed_buffer(memory_system: MemorySystem) -> bytearray:
    """Allocate 32 floats and leave them allocated, so they show up as a leak."""
    file, line, func = _here()
    return memory_system.add_ptr_buffer(FLOAT_SIZE, 32, file, line, func)


def free_buffer(memory_system: MemorySystem) -> None:
    """Allocate 32 floats and free them again."""
    file, line, func = _here()
    buffer = memory_system.add_ptr_buffer(FLOAT_SIZE, 32, file, line, func)
    memory_system.remove_ptr_buffer(buffer)


def load_and_free_level_layout(path, memory_system: MemorySystem) -> LevelLayout:
    """Load a layout, then free its layer list and only its first layer."""
    layout = load_level_layout(path, memory_system)
    delete_level_layer_list(layout, memory_system)
    if layout.level_layer_list:
        delete_level_layer_map(layout.level_layer_list[0], memory_system)
    return layout


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="leakreport", description="Load a level layout and report leaked buffers."
    )
    parser.add_argument("layout", nargs="?", default=DEFAULT_LAYOUT_PATH)
    args = parser.parse_args(argv)

    memory_system = MemorySystem()
    try:
        load_and_free_level_layout(args.layout, memory_system)
    except (FileReadError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    memory_system.report_leaks()
    return 0


if __name__ == "__main__":
    sys.exit(main())
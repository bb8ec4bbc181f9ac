"""Loading a tile level layout from JSON into tracked layer buffers."""

from __future__ import annotations

import inspect
import json
import struct
from dataclasses import dataclass, field

from .fileutil import PathLike, read_file
from .guid import VkGuid
from .memory_system import MemorySystem

_UINT32 = struct.Struct("<I")


def _call_site() -> tuple[str, int, str]:
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame and frame.f_back else None
    if caller is None:
        return __file__, 0, "<unknown>"
    return caller.f_code.co_filename, caller.f_lineno, caller.f_code.co_name


@dataclass
class LevelLayout:
    """A level's id, bounds, tile size and one tracked buffer per layer."""

    level_layout_id: VkGuid
    level_bounds: tuple[int, int]
    tile_size_in_pixels: tuple[int, int]
    level_layer_list: list[bytearray] = field(default_factory=list)
    level_layer_list_buffer: bytearray = field(default_factory=bytearray)
    level_layer_count: int = 0
    level_layer_map_count: int = 0

    def layer_values(self, index: int) -> list[int]:
        """Decode the tile ids held by layer ``index``."""
        return [value for (value,) in _UINT32.iter_unpack(self.level_layer_list[index])]


def _pair(document: dict, key: str) -> tuple[int, int]:
    values = document[key]
    return int(values[0]), int(values[1])


def load_level_layout(path: PathLike, memory_system: MemorySystem) -> LevelLayout:
    """Read a level layout file, allocating its layers through ``memory_system``.

    Raises FileReadError if the file cannot be read and ValueError if its
    content is not a valid layout.
    """
    document = json.loads(read_file(path))
    try:
        layout_id = VkGuid(str(document["LevelLayoutId"]))
        bounds = _pair(document, "LevelBounds")
        tile_size = _pair(document, "TileSizeInPixels")
        layers = document["LevelLayouts"]
        flattened = [
            [int(tile) for row in layer for tile in row] for layer in layers
        ]
    except (KeyError, IndexError, TypeError) as exc:
        raise ValueError(f"Invalid level layout: {path}") from exc

    layout = LevelLayout(layout_id, bounds, tile_size)
    file, line, func = _call_site()
    for tiles in flattened:
        layout.level_layer_map_count = len(tiles)
        buffer = memory_system.add_ptr_buffer(_UINT32.size, len(tiles), file, line, func)
        try:
            buffer[:] = struct.pack(f"<{len(tiles)}I", *tiles)
        except struct.error as exc:
            memory_system.remove_ptr_buffer(buffer)
            for made in layout.level_layer_list:
                memory_system.remove_ptr_buffer(made)
            raise ValueError(f"Tile id out of range in {path}") from exc
        layout.level_layer_list.append(buffer)

    layout.level_layer_count = len(layout.level_layer_list)
    layout.level_layer_list_buffer = memory_system.add_ptr_buffer(
        _UINT32.size, layout.level_layer_count, file, line, func
    )
    return layout


def delete_level_layer_list(layout: LevelLayout, memory_system: MemorySystem) -> None:
    """Free the buffer that holds the layout's list of layers."""
    memory_system.remove_ptr_buffer(layout.level_layer_list_buffer)


def delete_level_layer_map(layer_map: bytearray, memory_system: MemorySystem) -> None:
    """Free one layer's tile buffer."""
    memory_system.remove_ptr_buffer(layer_map)
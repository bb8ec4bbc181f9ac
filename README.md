# leakreport

A small bookkeeping layer for allocated buffers. Each buffer you allocate
through a `MemorySystem` is recorded together with the file, line, function and
an optional note of the request that made it. Release the buffer when you are
done with it. At any point, `report_leaks` writes a message for every buffer
that is still registered.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Tracking buffers

```python
import sys
from leakreport.memory_system import MemorySystem

system = MemorySystem()

buffer = system.add_ptr_buffer(4, 32, "main.py", 10, "setup", "float list")
assert buffer in system          # a zeroed bytearray of 4 * 32 bytes
assert len(system) == 1

system.remove_ptr_buffer(buffer)  # True; False if the buffer was not tracked
assert len(system) == 0

system.add_ptr_buffer(4, 32, "main.py", 20, "forgotten", "")
leaks = system.report_leaks(sys.stderr)
```

`report_leaks` returns the `MemoryLeakPtr` records still registered. If any
are left, it first writes `Memory leaks detected in DLL:`, then one line per
buffer:

```
Error: Ptr failed to delete at File: main.py Line: 20 Function: forgotten Notes: 
```

If you pass a stream, all of the output goes to it. If you pass none, the
header goes to standard error and the messages go to standard output. When the
stream is a terminal, `Error: ` is printed in red. The registry is guarded by a
lock, so you can use it from several threads.

## Lower-level pieces

- `leakreport.memory`
  - `new_ptr(memory_size, element_count, file, line, func, notes)` allocates a
    zeroed buffer and returns a `MemoryLeakPtr` holding it, its element count,
    `is_array` (more than one element) and the dangling-pointer message.
  - `delete_ptr(ptr)` releases the buffer and raises `ValueError` if it was
    already released.
  - `dangling_ptr_message(ptr, stream)` writes the message for one record.
- `leakreport.guid`
  - `VkGuid` parses GUID text with or without braces and raises `ValueError`
    on a malformed one. `VkGuid()` with no argument is the all-zero GUID.
  - `VkGuid.generate()` makes a random GUID. `VkGuid.from_uuid` wraps a
    `uuid.UUID`.
  - A `VkGuid` compares equal to another `VkGuid` or to a `uuid.UUID` with the
    same value.
  - `str()` gives the braced upper-case form.
- `leakreport.fileutil`
  - `read_file(path)` returns the bytes of a file and raises `FileReadError` if
    it cannot read them.
  - `write_file(data, path)` writes bytes and raises `FileWriteError` if it
    cannot.
  - `file_exists(name)` tells whether a path exists.
  - `last_modified_time(name)` returns the modification time in whole seconds
    and raises `OSError` if the path cannot be read.
  - `remove_file_extension`, `get_file_extension` and `get_file_name_from_path`
    take file names apart. `get_file_extension` returns `None` when there is no
    extension.
- `leakreport.level_layout`
  - `load_level_layout(path, memory_system)` reads a JSON level layout into a
    `LevelLayout`. The JSON holds:
    - `LevelLayoutId`, a GUID string.
    - `LevelBounds` and `TileSizeInPixels`, each a pair of integers.
    - `LevelLayouts`, a list of layers. Each layer is a list of rows of tile
      ids.
  - Each layer is flattened into a tracked buffer of little-endian 32-bit
    values. `LevelLayout.layer_values(index)` decodes one layer.
  - A separate tracked buffer stands for the list of layers.
  - Malformed content raises `ValueError`.
  - `delete_level_layer_list` and `delete_level_layer_map` release those
    buffers.

## Demo

```
leakreport-demo path/to/LevelLayout.json
```

The demo loads the layout and releases the layer-list buffer and only the
first layer. It then prints the leak report, so every other layer shows up as
a leak. If you give no path, it uses `../json/TestMapLevelLayout.json`. If the
file cannot be read or is not a valid layout, the demo prints the error and
exits with status 1.

The module `leakreport.demo` also has two helpers:

- `report_unfreed_buffer`, which allocates 32 floats and leaves them allocated.
- `free_buffer`, which allocates 32 floats and frees them again.

## What it does not do

- It only tracks buffers that you allocate through it. It does not watch
  Python's own memory use or the memory of native code.
- No sample level layout file comes with the package. Give the demo a layout
  file of your own.
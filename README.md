# circuitos

A small, dependency-free toolkit of building blocks for software on small devices.

## Modules

- `circuitos.gifdec`: `GifDecoder` reads a GIF from a seekable binary file frame by frame onto an RGB canvas. `get_frame()` returns `True` for a frame and `False` at the trailer; `render_frame(monochrome)` returns the current picture as bytes (one byte per pixel when monochrome, otherwise RGB). Malformed data raises `GifFormatError`. Optional `plain_text`, `comment` and `application` hooks are called for those extensions.
- `circuitos.gif`: `GIF` plays a file back with `next_frame()`, `get_frame()` (a `Frame` with `width`, `height`, `duration` in ms and `data`), `frame_duration()` and `reset()`. `loop_mode` is a `LoopMode`: `AUTO` follows the file's loop count, `SINGLE` stops at the end, `INFINITE` always rewinds.
- `circuitos.files`: `RamFile` (writable, grows as written; `create()`, `from_file()`) and `PGMFile` (read-only over fixed bytes), with `read`, `read_byte`, `peek`, `available`, `seek` with a `SeekMode`, `position`, `size` and `close`. Both work as context managers and are false once closed.
- `circuitos.element` and `circuitos.layout`: an element tree (`Element`, `ElementContainer`, `CustomElement`) and layouts that compute sizes and positions: `LinearLayout`, `GridLayout` and `ScrollLayout` (with `set_scroll`, `max_scroll_x`/`max_scroll_y` and `scroll_into_view`). Sizes follow a `WHType`: `FIXED`, `CHILDREN` or `PARENT`.
- `circuitos.vec`: `Vec3`, `Vec4` and `Quat` with arithmetic, `dot`, `cross`, `angle_cos`, `Quat.from_euler`, `euler`, `inverse` and `rotate`.
- `circuitos.vector`: list helpers `relocate`, `swap` and `index_of` (returns -1 when absent).
- `circuitos.listeners`: `WithListeners`, a listener registry whose `iterate_listeners` works on a snapshot, and `PinMap`, which maps pin names to numbers and returns -1 for unmapped names.

## Installation

```
pip install .
```

## Examples

Laying out a column:

```python
from circuitos.element import CustomElement
from circuitos.layout import LayoutDirection, LinearLayout, WHType

column = LinearLayout(None, LayoutDirection.VERTICAL)
column.set_padding(5).set_gutter(5)
column.set_wh_type(WHType.CHILDREN, WHType.CHILDREN)
for _ in range(3):
    column.add_child(CustomElement(column, 100, 16))
column.reflow()
column.repos()
print(column.width, column.height)               # 110 68
print([child.y for child in column.children])    # [5, 26, 47]
```

Playing a GIF once:

```python
from circuitos.gif import GIF, LoopMode

with open("animation.gif", "rb") as f:
    gif = GIF(f)
    gif.loop_mode = LoopMode.SINGLE
    while gif.next_frame():
        frame = gif.get_frame()
        print(frame.width, frame.height, frame.duration, len(frame.data))
```

An in-memory file:

```python
from circuitos.files import RamFile

ram = RamFile.create("notes")
ram.write(b"hello")
ram.seek(0)
print(ram.read(5))  # b'hello'
```

## What it does not do

The package does no drawing: layouts only compute sizes and positions, and the GIF player only hands back pixel bytes. It has no scheduler or main loop, no button or sensor handling, no access to hardware, and no command-line program.

## Tests

```
pip install .[test]
pytest
```
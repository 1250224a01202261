# termcell

`termcell` holds the building blocks that a cell-based terminal application
draws with. It supplies the values a screen works with and the bookkeeping
a screen needs:

- **Colors** (`termcell.color`): `Color` is an integer. It stands for a
  palette index, a W3C named color or a 24-bit RGB value. Named colors are
  class attributes such as `Color.RED`, `Color.CADET_BLUE` or
  `Color.DARK_GREY`. `get_color`, `new_rgb_color`, `new_hex_color`,
  `palette_color` and `from_image_color` create colors. `COLOR_DEFAULT`
  leaves the terminal's default color unchanged.
- **Color matching** (`termcell.colorfit`): `find_color` returns the palette
  entry closest to a color, measured by CIE76 distance.
- **Text attributes** (`termcell.attr`): the `AttrMask` flags `BOLD`,
  `BLINK`, `REVERSE`, `UNDERLINE`, `DIM`, `ITALIC` and `STRIKE_THROUGH`.
- **Cell buffers** (`termcell.cell`): `CellBuffer` is a two-dimensional grid
  of character cells. It tracks which cells changed since they were last
  drawn, can lock cells so they are not redrawn, and keeps its content when
  resized.
- **Drawing characters** (`termcell.runes`): box-drawing and other special
  characters (`RUNE_HLINE`, `RUNE_ULCORNER`, ...) and their ASCII fallbacks
  in `RUNE_FALLBACKS`.
- **Character sets** (`termcell.charset`, `termcell.encoding`): `get_charset`
  reads the character set from `LC_ALL`, `LC_CTYPE` or `LANG`.
  `register_encoding`, `get_encoding` and `set_encoding_fallback` keep a
  registry of codecs. UTF-8 and US-ASCII are registered from the start.
- **TTY settings** (`termcell.tty`): on POSIX systems `set_buf_params` makes
  a terminal file descriptor non-blocking and sets its VMIN and VTIME
  parameters.

## Installation

```
pip install termcell
```

## Examples

Colors:

```python
from termcell.color import Color, get_color, new_rgb_color, palette_color
from termcell.colorfit import find_color

red = get_color("red")
print(red == Color.RED)                 # True
print(red.hex() == 0xFF0000)            # True
print(str(red))                         # 'red'
print(get_color("#112233").rgb())       # (17, 34, 51)
print(new_rgb_color(255, 0, 0).css())   # '#FF0000'
print(get_color("door").valid())        # False

ansi = [palette_color(i) for i in range(16)]
print(find_color(get_color("orangered"), ansi) == Color.RED)  # True
```

Attributes:

```python
from termcell.attr import AttrMask

attrs = AttrMask.BOLD | AttrMask.UNDERLINE
print(AttrMask.BOLD in attrs)  # True
```

A cell buffer:

```python
from termcell.cell import CellBuffer

buf = CellBuffer(80, 24)
buf.set_content(0, 0, "A", (), "my-style")  # the style can be any value
print(buf.dirty(0, 0))        # True
buf.set_dirty(0, 0, False)    # mark the cell as drawn
print(buf.dirty(0, 0))        # False
print(buf.get_content(0, 0))  # CellContent(mainc='A', combc=(), style='my-style', width=1)
```

Character sets:

```python
from termcell.charset import get_charset
from termcell.encoding import get_encoding, register_encoding

print(get_charset({"LANG": "en_US.ISO8859-1"}))  # 'ISO8859-1'
print(get_charset({"LANG": "C"}))                # 'US-ASCII'

register_encoding("GBK", "gbk")
text, _ = get_encoding("gbk").decode(b"\x82\x74")
print(text)                                      # '倀'
```

## What the package does not do

`termcell` has no screen of its own. It does not open, draw on or read from
a terminal. It does not decode key or mouse input into events, and it holds
no terminal database. Only UTF-8 and US-ASCII come registered. Any other
character set must be added with `register_encoding`.

## Running the tests

```
pip install "termcell[test]"
pytest
```
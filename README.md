# halfblock

Draw pixels in a true-colour terminal. Each character cell holds two
pixels stacked vertically: the upper pixel is drawn as the foreground
colour of an upper half block (`▀`), the lower pixel as its background.
A terminal of `C` columns and `R` rows therefore gives a drawing surface
of `C × 2R` pixels.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using it

```python
from halfblock.color import Color
from halfblock.window import Window

with Window() as window:
    window.put_pixel(0, 0, Color(255, 0, 0))
    window.put_pixel(0, 1, Color(0, 255, 0))
    window.put_pixel(1, 0, Color(0, 0, 255))
    window.refresh()
```

`Window(stream=None, columns=None, rows=None)` writes to `sys.stdout`
unless another stream is given. A size that is not given is taken from
the current terminal size. The pixel buffer starts out black.

Opening a `Window` (with `open()` or by entering a `with` block) switches
the terminal to the alternate screen, clears it, hides the cursor and
enables mouse and focus reporting. If standard input is a terminal, echo
and line buffering are turned off. If the output stream is a terminal, a
handler for terminal resize signals is installed that fits the buffer to
the new size. Closing it (`close()` or leaving the `with` block) puts all
of that back.

`refresh()` redraws the whole buffer. `handle_resize(columns, rows)`
resizes the pixel buffer by hand; pixels that still fit are kept.

`put_pixel` with coordinates outside the buffer raises `IndexError`, as do
`Array2D.at` and `Array2D.set`. A `Color` channel outside 0–255 raises
`ValueError`.

The building blocks are available separately:

- `halfblock.grid.Array2D`: a fixed-size two-dimensional grid with
  bounds-checked `at`, `set`, `size` and `resize`, and an optional fill
  value for new cells.
- `halfblock.grid.Vec2i`: an immutable integer `(x, y)` pair, returned by
  `Array2D.size()`.
- `halfblock.color.Color`: an RGB colour with 8-bit channels; `shifted`
  returns a copy with each channel moved and wrapped modulo 256.
- `halfblock.window.render_frame(buffer)`: builds the escape-sequence text
  for one frame from a grid of colours, without touching the terminal.
- `halfblock.window.parse_parent_pid(stat_text)` and
  `halfblock.window.read_parent_pid(pid)`: read the parent process id from
  a `/proc/<pid>/stat` line or file.
- `halfblock.window.get_window()`: the shared `Window` on standard output
  for the process.

## Demo

```
halfblock-demo
```

This draws three pixels whose red, green and blue channels cycle
continuously. Press Ctrl-C to quit and restore the terminal. Options:

- `--frames N`: stop after `N` frames.
- `--columns N`, `--rows N`: use this size instead of the terminal's.

`halfblock.demo.cycle_colors(frames=None)` yields the demo's colour triples
on its own.

## What it does not do

The package only draws. It turns on mouse and focus reporting but does not
read or decode keyboard, mouse or focus events, and it does not look up or
talk to the graphical window the terminal runs in.
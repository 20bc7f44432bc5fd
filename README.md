# fractol

An interactive viewer for the Mandelbrot set and Julia sets. It opens an
800×800 window with pygame and lets you pan, zoom and change the iteration
depth from the keyboard and mouse.

Each pixel is iterated with `z = z² + c` until `|z|²` exceeds 4 or the
iteration limit (40 to start with) is reached. A point that escapes at
iteration `i` gets the colour value `0xFFFFFF * i / iterations`, truncated to
an integer; a point that never escapes is white (`0xFFFFFF`).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Draw the Mandelbrot set:

```
fractol mandelbrot
```

Draw a Julia set, giving the real and imaginary parts of the constant:

```
fractol julia -0.8 0.156
```

With wrong or missing arguments the command writes a usage message to
standard error and exits with status 1. Giving `julia` without its two
numbers prints the Julia usage line; anything else prints the Mandelbrot one.

### Controls

| Input              | Effect                                   |
|--------------------|------------------------------------------|
| Arrow keys         | Pan by half the current zoom             |
| `+` / `=`          | Five more iterations                     |
| `-`                | Five fewer iterations                    |
| Mouse wheel up     | Zoom in (zoom × 0.95)                    |
| Mouse wheel down   | Zoom out (zoom × 1.05)                   |
| `Esc` / close box  | Quit                                     |

The whole view is redrawn after every key press or mouse click.

## Library use

The pieces can be used on their own:

- `fractol.app` — `parse_args(argv)` turns the arguments after the program
  name into a `Fractal` or raises `UsageError`; `run(fractal)` opens the
  window; `main(argv=None)` does both and returns the exit status.
- `fractol.fractal` — `Fractal` and `FractalKind`. `Fractal.render(width, height)`
  returns a 32-bit little-endian `Image` of the view, and
  `Fractal.pixel_color(x, y, width, height)` gives the colour of one pixel.
- `fractol.events` — `Key`, `handle_key(fractal, key)` (returns `False` for
  Escape) and `handle_button(fractal, button)` apply one input to a `Fractal`.
- `fractol.mathutils` — `scale` maps a value linearly from `[0, old_max]` to a
  new range; `step(z, c)` returns `z * z + c`.
- `fractol.strutils` — `parse_double` reads a decimal number the way the
  command line does (no validation of digits), and `strncmp` compares
  strings up to a limit.
- `fractol.image` — `Image`, a pixel buffer of 8, 16, 24 or 32 bits per pixel
  in either byte order, with rows padded to 32 bits; `put_pixel`, `get_pixel`
  and `line_length`.
- `fractol.xpm` — `parse_xpm_text`, `parse_xpm_file` and `parse_xpm_lines`
  read XPM pictures into an `Image`, raising `XpmError` on malformed input;
  `split_words` and `strip_comments` are the helpers they use.
- `fractol.colors` — `lookup_color` resolves an X11 colour name or `#RRGGBB`;
  `rgb_shifts` and `good_color` pack colours for visuals of less than 24 bits.

## What it does not do

The viewer only draws the two fractals on screen. It cannot save a rendered
view to a file, and the XPM reader only loads pictures into an `Image`; no
command displays them.
# fractol

An interactive explorer for the Mandelbrot set and Julia sets. It opens an
800×600 window titled `fract-ol`, colours each pixel by how many iterations
(up to 100) it takes the point to escape, and lets you pan and zoom around the
picture.

## Installation

```
pip install .
```

The package depends on `numpy`. The window is drawn with `tkinter` from the
standard library, so the Python installation must include Tk. To run the test
suite as well:

```
pip install ".[test]"
pytest
```

## Running

Draw the Mandelbrot set:

```
fractol mandelbrot
```

Draw the Julia set for the constant `c = re + im·i`:

```
fractol julia -0.8 0.156
```

Numbers are written as an optional sign, digits and an optional decimal part
(`-0.8`, `+.5`, `1`); parsing stops at the first character that does not fit,
and exponents are not read. Any other invocation prints the usage text and
exits with status 0:

```
Usage:
  fractol mandelbrot
  fractol julia <real_part> <imag_part>
```

If no window can be opened, the command prints the reason to standard error
and exits with status 1.

## Controls

| Input             | Effect                                               |
|-------------------|------------------------------------------------------|
| Arrow keys        | Pan the view by 50 pixels                            |
| `r`               | Reset zoom and position to the start view            |
| Mouse wheel up    | Zoom in by 10 %, keeping the point under the cursor  |
| Mouse wheel down  | Zoom out by 10 %, keeping the point under the cursor |
| `Esc` / close box | Quit                                                 |

The start view has a zoom of 200 pixels per unit, centred on the origin.

## Using the library

The rendering functions can be used without a window:

```python
from fractol.render import View, FractalType, compute_mandelbrot, get_color, render

compute_mandelbrot(0.0, 0.0)   # 100: the origin never escapes
get_color(100)                 # 0x000000: points inside the set are black
get_color(1)                   # 0x0F0703

view = View(type=FractalType.JULIA, julia_c=complex(-0.8, 0.156), width=80, height=60)
pixels = render(view)          # numpy array of 0xRRGGBB values, shape (60, 80)
```

- `fractol.render` — `FractalType`, `View` (with `reset()`),
  `compute_mandelbrot`, `compute_julia`, `get_color`, `iteration_grid` (the
  iteration count of every pixel) and `render` (the colour of every pixel).
- `fractol.hooks` — `handle_key` and `handle_mouse`, which update a `View` in
  response to input and return an `Action` (`NONE`, `REDRAW` or `CLOSE`).
- `fractol.args` — `parse_args` (builds a `View` from the arguments after the
  program name, raising `UsageError` on bad input), `parse_float` and
  `usage_text`.
- `fractol.app` — the `Viewer` window (`redraw()` and `run()`) and the `main`
  entry point.

Smaller helpers live alongside: `fractol.textutil` (string and character
utilities: `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`,
`strncmp`, `strcmp` and the `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
`is_print` tests), `fractol.printf` (`format_printf` and `printf` for the
`%c %s %p %d %i %u %x %X %%` conversions) and `fractol.linereader`
(`LineReader` and `iter_lines`, which read a text or binary stream one line at
a time through a fixed-size buffer).

## What it does not do

The viewer only shows the picture on screen: there is no command to save an
image to a file, the window cannot be resized, and the iteration limit and
colour scheme are fixed.
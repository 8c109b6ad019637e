# fractol

An interactive viewer for three escape-time fractals: the Mandelbrot set,
Julia sets and the Burning Ship. The chosen fractal is drawn in a 600×600
window. You can pan and zoom the view, cycle the colours and raise or lower
the iteration depth.

## Installation

```
pip install .
```

## Usage

```
fractol mandel
fractol julia
fractol ship
fractol julia <real> <imaginary>
```

Without parameters, `julia` uses the constant `-0.745429 + 0.05i`. To pick
your own constant, give two plain decimal numbers. Each may have an optional
sign and one decimal point, and must lie between -2.0 and 2.0. `mandel` and
`ship` take no parameters.

If the arguments are invalid, the program prints its usage and a list of
suggested Julia constants, then exits with status 1. Some of the suggestions:

| Constant            | Appearance                         |
|---------------------|------------------------------------|
| `0.285 0.01`        | Twisted seahorse shapes            |
| `-0.70176 -0.3842`  | Classic Julia (connected, filled)  |
| `-0.8 0.156`        | Delicate symmetric spirals         |
| `-1.476 0.0`        | Thin flower petal structures       |

If a single argument is not a known fractal name, the program prints
`fractals: mandel, julia, ship` and exits with status 1. Closing the viewer
also ends with status 1.

## Controls

| Input             | Effect                                       |
|-------------------|----------------------------------------------|
| Arrow keys        | Pan the view by 42 pixels' worth             |
| Mouse wheel       | Zoom in or out by a factor of 1.1 at cursor  |
| `c`               | Cycle the colour scheme                      |
| `p` / `m`         | Add or remove 42 iterations (42 to 4200)     |
| `Esc`, close      | Quit                                         |

## Library use

The computation works without a window:

```python
from fractol.fractal import Fractal, Kind
from fractol.render import escape_counts, render

fractal = Fractal(kind=Kind.from_name("mandel"))
counts = escape_counts(fractal, 600)   # escape iteration per pixel, indexed [y, x]
pixels = render(fractal, 600)          # 32-bit 0xRRGGBB value per pixel, uint32
```

`Fractal.escape_count(x, y)` and `Fractal.color_at(x, y)` give the same
results for a single pixel. Points that never escape are black.

`fractol.controls` holds the view changes that the keyboard and mouse
apply: `apply_action(fractal, action)` with an `Action` member, and
`zoom(fractal, x, y, direction)`. `fractol.cli` exposes `check_arguments`,
`build_fractal`, `julia_presets`, `run_window` and `main`.

The package also ships small general-purpose helpers:

- `fractol.chars`: ASCII character classification and case conversion
- `fractol.numbers`: lenient number parsing (`parse_double`, `parse_int`,
  `is_valid_number`)
- `fractol.text`: string search, splitting, trimming and size-bounded copying
- `fractol.memory`: byte-buffer fill, copy, move, search and compare
- `fractol.output`: writing to streams and a printf-style formatter
- `fractol.linked_list`: a singly linked `LinkedList` of `Node`s
- `fractol.line_reader`: `LineReader`, which reads a stream line by line in
  fixed-size chunks

## What it does not do

The viewer only draws on screen. It cannot save images and does not keep
settings between runs.

## Tests

```
pip install ".[test]"
pytest
```
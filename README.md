# fractol

An interactive fractal explorer. It draws the Mandelbrot set, Julia sets and
the Burning Ship fractal in a pygame window. You can pan, zoom, change the
level of detail and shift the colour palette while it runs.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

```
fractol --Mandelbrot
fractol --Julia
fractol --Julia 0.285 0.013
fractol --Burning_ship
fractol --Help_key
```

Short forms work too: `-M`, `-J`, `-B` and `-H`. With no argument, or with
arguments it does not recognise, `fractol` prints a usage summary and exits
with status 1. `--Help_key` prints the list of controls and also exits with
status 1 without opening a window.

For a Julia set you can give the real and imaginary parts of the constant `c`.
Each one is a signed decimal number such as `-0.8` or `+0.156`. Without them
the constant is 0.285 + 0.01i.

The window is 800 by 800 pixels. Closing it or pressing ESC prints
`Exiting program.` and ends the program.

## Controls

| Action                    | Keys / buttons                               |
|---------------------------|----------------------------------------------|
| Quit                      | ESC, or close the window                     |
| Move                      | Arrow keys                                   |
| Zoom in on the cursor     | Left click, scroll down                      |
| Zoom out from the cursor  | Right click, scroll up                       |
| Zoom in / out on centre   | `+` / `-`                                    |
| More / less detail        | keypad `+` / keypad `-`                      |
| Reset detail              | keypad Enter                                 |
| Red up / down             | keypad 4 / keypad 1                          |
| Green up / down           | keypad 5 / keypad 2                          |
| Blue up / down            | keypad 6 / keypad 3                          |
| Julia constant            | `C`/`V` real part, `B`/`N` imaginary part    |

Detail is the iteration limit: it starts at 42, keypad `+` adds 8 while it is
below 420, keypad `-` takes away 4 while it is above 12. `C` and `B` multiply
a part of the constant by 1.25, `V` and `N` by 0.9; they only act on Julia
sets.

## Using it as a library

The drawing code works without a window:

```python
from fractol.fractal import Fractal, FractalKind, Palette, render
from fractol.image import Image

image = Image(200, 200)
fractal = Fractal.default(FractalKind.MANDELBROT)
render(FractalKind.MANDELBROT, fractal, Palette(), image)
print(image.get_pixel(100, 100))
```

- `fractol.fractal` has the per-pixel escape functions `mandelbrot`, `julia`
  and `burning_ship`, `escape_function`, `color_for` and `render`.
- `fractol.events` applies key and mouse input to a `Fractal` and `Palette`
  (`handle_key`, `handle_mouse`, `zoom_at`, `zoom_center`).
- `fractol.params.parse_args` turns the command-line arguments into `Options`.
- `fractol.app.Viewer` holds the state of one window; `Viewer.run` opens it.
- `fractol.image.Image` is a 32-bit pixel buffer with `put_pixel`,
  `get_pixel` and `to_rgb_bytes`; `convert_color` and `rgb_shifts` pack
  colours for visuals shallower than 24 bits.
- `fractol.xpm` reads XPM images (`xpm_file_to_image`, `xpm_to_image`) into
  `Image` and raises `XpmError` on malformed data.
- `fractol.colornames` resolves X11 colour names with `lookup_color` and
  `parse_color`.

## What it does not do

The viewer only shows the fractal on screen: it cannot save the image to a
file, and XPM images that `fractol.xpm` reads are not shown by the viewer.
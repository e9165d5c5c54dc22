# raycube

The building blocks of a small first-person raycasting engine, in plain Python
with no third-party dependencies.

## Modules

- `raycube.colors`
  - `Color(r, g, b)`: a frozen RGB colour; each channel must be 0–255, otherwise
    `ValueError` is raised. `Color.to_int()` packs it as `0xRRGGBB`.
  - `parse_rgb(text)`: reads an `R,G,B` colour string such as `"220,100,0"`.
    Spaces and ASCII control characters 7–13 are allowed around the numbers and
    commas. A missing number, a missing comma, a value above 255 or trailing
    text raises `ColorFormatError` (a subclass of `ValueError`).
  - `is_space(char)`: whether a character counts as a blank for `parse_rgb`.
- `raycube.image`
  - `Image(width, height)`: an in-memory framebuffer of 32-bit pixels, all
    black to start with. Sizes of zero or less raise `ValueError`.
  - `pixel_put(x, y, color)` sets one pixel; writes outside the image are
    ignored. `vertical_line(x, start, end, color)` paints rows `start` up to,
    but not including, `end`. `clear()` turns every pixel black.
    `color_at(x, y)` reads a pixel back, giving black outside the image.
  - `data` gives a copy of the raw pixel bytes (B, G, R, 0 per pixel).
- `raycube.clock`
  - `Clock(source=None)`: `now()` gives the microseconds since its first
    reading; `tick()` gives the seconds since the previous tick. By default it
    reads the wall clock; pass a callable returning microseconds to drive it
    yourself.
- `raycube.controls`
  - `KeyCode`: the X11 key symbols the game reacts to (Z/W forward, S back,
    Q/A strafe left, D strafe right, the arrow keys to turn, ESC to quit).
  - `Player(x, y, direction=0.0)`: position, view direction in radians and
    camera `plane`.
  - `Controls`: `press(keycode)` and `release(keycode)` set and clear movement
    flags; ESC sets `should_close`. `apply(player, frame_seconds)` walks,
    strafes and turns the player for one frame (speeds 5, 4 and 3 units per
    second). When opposite keys are held together, forward, left and
    turning left win.
  - `camera_plane(direction)`: the camera plane for a 66° field of view.
- `raycube.frame`
  - `render_floor_ceiling(image, floor, ceiling)`: paints the upper half of an
    image with the ceiling colour and the lower half with the floor colour,
    leaving the last row untouched. `WINDOW_WIDTH` and `WINDOW_HEIGHT` give
    the default screen size, 1080×720.
- `raycube.mathutil` – `clamp(value, low, high)`.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from raycube.clock import Clock
from raycube.colors import parse_rgb
from raycube.controls import Controls, KeyCode, Player
from raycube.frame import WINDOW_HEIGHT, WINDOW_WIDTH, render_floor_ceiling
from raycube.image import Image

image = Image(WINDOW_WIDTH, WINDOW_HEIGHT)
render_floor_ceiling(image, parse_rgb("220,100,0"), parse_rgb("225, 30, 0"))

player = Player(x=2.5, y=2.5, direction=0.0)
controls = Controls()
clock = Clock()

controls.press(KeyCode.W)
controls.apply(player, clock.tick())
controls.release(KeyCode.W)
```

## What it does not do

raycube has no game command and opens no window. It does not read map files,
load wall textures, check for collisions with walls or cast rays to draw the
walls; it supplies the colours, framebuffer, timing and movement that such a
renderer would build on.
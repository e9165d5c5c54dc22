"""Per-frame background rendering."""

from __future__ import annotations

from .colors import Color
from .image import Image

WINDOW_WIDTH = 1080
WINDOW_HEIGHT = 720


def render_floor_ceiling(image: Image, floor: Color, ceiling: Color) -> None:
    """Paint the upper half of ``image`` with ``ceiling`` and the lower half with ``floor``.

    The last row is left untouched.
    """
    half = image.height // 2
    for x in range(image.width):
        image.vertical_line(x, 0, half, ceiling)
        image.vertical_line(x, half, image.height - 1, floor)
"""An in-memory 32-bit pixel image."""

from __future__ import annotations

from .colors import BLACK, Color

_BYTES_PER_PIXEL = 4


class Image:
    """A ``width`` x ``height`` image stored as little-endian 32-bit pixels (B, G, R, 0)."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self._line_len = width * _BYTES_PER_PIXEL
        self._pixels = bytearray(self._line_len * height)

    @property
    def data(self) -> bytes:
        """A copy of the raw pixel buffer."""
        return bytes(self._pixels)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        return y * self._line_len + x * _BYTES_PER_PIXEL

    def pixel_put(self, x: int, y: int, color: Color) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if not self._contains(x, y):
            return
        offset = self._offset(x, y)
        self._pixels[offset:offset + _BYTES_PER_PIXEL] = color.to_int().to_bytes(
            _BYTES_PER_PIXEL, "little"
        )

    def vertical_line(self, x: int, start: int, end: int, color: Color) -> None:
        """Paint column ``x`` from row ``start`` up to, but not including, ``end``."""
        for y in range(start, end):
            self.pixel_put(x, y, color)

    def clear(self) -> None:
        """Reset every pixel to black."""
        self._pixels[:] = bytes(len(self._pixels))

    def color_at(self, x: int, y: int) -> Color:
        """Return the colour of a pixel, or black outside the image."""
        if not self._contains(x, y):
            return BLACK
        offset = self._offset(x, y)
        b, g, r = self._pixels[offset:offset + 3]
        return Color(r, g, b)
"""RGB colours and parsing of ``R,G,B`` colour specifications."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = "0123456789"


class ColorFormatError(ValueError):
    """Raised when a colour specification cannot be parsed."""


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGB colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            channel = getattr(self, name)
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel {name}={channel} out of range 0..255")

    def to_int(self) -> int:
        """Pack the colour as ``0xRRGGBB``."""
        return (self.r << 16) | (self.g << 8) | self.b


BLACK = Color(0, 0, 0)


def is_space(char: str) -> bool:
    """Return whether ``char`` is a space or an ASCII control character 7 to 13."""
    return char == " " or (len(char) == 1 and 7 <= ord(char) <= 13)


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    return pos


def parse_rgb(text: str) -> Color:
    """Parse ``"R,G,B"`` with optional surrounding whitespace into a :class:`Color`.

    Each component is a run of decimal digits whose value must fit in 0..255.
    """
    channels: list[int] = []
    pos = 0
    for index in range(3):
        pos = _skip_spaces(text, pos)
        if pos >= len(text) or text[pos] not in _DIGITS:
            raise ColorFormatError("color invalid format")
        value = 0
        while pos < len(text) and text[pos] in _DIGITS:
            value = value * 10 + int(text[pos])
            if value > 255:
                raise ColorFormatError("uint8 overflow")
            pos += 1
        channels.append(value)
        pos = _skip_spaces(text, pos)
        if index < 2:
            if pos >= len(text) or text[pos] != ",":
                raise ColorFormatError("comma shall separate color values")
            pos += 1
    pos = _skip_spaces(text, pos)
    if pos < len(text):
        raise ColorFormatError("color format's invalid")
    return Color(*channels)
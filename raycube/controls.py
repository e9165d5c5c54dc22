"""Keyboard state and player movement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

FOV_DEGREES = 66

_FORWARD = 1 << 0
_BACKWARD = 1 << 1
_RIGHT = 1 << 0
_LEFT = 1 << 1
_TURN_RIGHT = 1 << 0
_TURN_LEFT = 1 << 1

_MOVE_SPEED = 5.0
_STRAFE_SPEED = 4.0
_TURN_SPEED = 3.0


class KeyCode(IntEnum):
    """X11 key symbols the game reacts to."""

    Z = 122
    W = 119
    A = 97
    Q = 113
    S = 115
    D = 100
    ESC = 65307
    LEFT = 65363
    RIGHT = 65361


def camera_plane(direction: float) -> tuple[float, float]:
    """Return the camera plane vector for a view ``direction`` in radians."""
    scale = math.tan((FOV_DEGREES >> 1) * math.pi / 180.0)
    return (-math.sin(direction) * scale, math.cos(direction) * scale)


@dataclass
class Player:
    """Player position, view direction (radians) and camera plane."""

    x: float
    y: float
    direction: float = 0.0
    plane: tuple[float, float] = field(init=False)

    def __post_init__(self) -> None:
        self.plane = camera_plane(self.direction)


@dataclass
class Controls:
    """Tracks which movement keys are held and moves the player each frame."""

    forward_backward: int = 0
    left_right: int = 0
    turning: int = 0
    should_close: bool = False

    def press(self, keycode: int) -> None:
        """Record a key being pressed."""
        if keycode in (KeyCode.Z, KeyCode.W):
            self.forward_backward |= _FORWARD
        if keycode == KeyCode.S:
            self.forward_backward |= _BACKWARD
        if keycode == KeyCode.D:
            self.left_right |= _RIGHT
        if keycode == KeyCode.LEFT:
            self.turning |= _TURN_LEFT
        if keycode == KeyCode.RIGHT:
            self.turning |= _TURN_RIGHT
        if keycode in (KeyCode.Q, KeyCode.A):
            self.left_right |= _LEFT
        if keycode == KeyCode.ESC:
            self.should_close = True

    def release(self, keycode: int) -> None:
        """Record a key being released."""
        if keycode in (KeyCode.Z, KeyCode.W):
            self.forward_backward &= ~_FORWARD
        if keycode == KeyCode.S:
            self.forward_backward &= ~_BACKWARD
        if keycode == KeyCode.D:
            self.left_right &= ~_RIGHT
        if keycode == KeyCode.LEFT:
            self.turning &= ~_TURN_LEFT
        if keycode == KeyCode.RIGHT:
            self.turning &= ~_TURN_RIGHT
        if keycode in (KeyCode.Q, KeyCode.A):
            self.left_right &= ~_LEFT

    def move_forward_backward(self, player: Player, frame_seconds: float) -> None:
        """Walk along the view direction; forward wins when both keys are held."""
        if not self.forward_backward & (_FORWARD | _BACKWARD):
            return
        sign = 1 if self.forward_backward & _FORWARD else -1
        speed = frame_seconds * _MOVE_SPEED
        player.x += math.cos(player.direction) * speed * sign
        player.y += math.sin(player.direction) * speed * sign

    def move_left_right(self, player: Player, frame_seconds: float) -> None:
        """Strafe perpendicular to the view direction; left wins when both are held."""
        if not self.left_right & (_LEFT | _RIGHT):
            return
        sign = 1 if self.left_right & _LEFT else -1
        speed = frame_seconds * _STRAFE_SPEED
        player.x += math.sin(player.direction) * sign * speed
        player.y += -math.cos(player.direction) * sign * speed

    def turn(self, player: Player, frame_seconds: float) -> None:
        """Rotate the view; turning left wins when both keys are held."""
        if not self.turning & (_TURN_LEFT | _TURN_RIGHT):
            return
        sign = 1 if self.turning & _TURN_LEFT else -1
        player.direction += frame_seconds * _TURN_SPEED * sign
        player.plane = camera_plane(player.direction)

    def apply(self, player: Player, frame_seconds: float) -> None:
        """Apply walking, strafing and turning for one frame, in that order."""
        self.move_forward_backward(player, frame_seconds)
        self.move_left_right(player, frame_seconds)
        self.turn(player, frame_seconds)
"""Colours, framebuffer images, frame timing and player controls for a raycasting engine."""

__version__ = "0.1.0"
__all__ = ["clock", "colors", "controls", "frame", "image", "mathutil"]
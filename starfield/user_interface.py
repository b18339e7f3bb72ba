"""The caption shown at the bottom of the view: projection and distance."""

from __future__ import annotations

import struct


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class UserInterface:
    """Keeps the camera's distance to the Sun and formats it for display."""

    LIGHTYEARS_PER_PARSEC = 3.261631
    FONT_SIZE = 24.0
    BOX_SIZE = (800, 100)
    TEXT = "%.0f lightyears from the Sun"

    def __init__(self) -> None:
        self.distance = 0.0
        self.text = self.TEXT

    def set_camera_distance(self, distance: float) -> None:
        """Set the camera's distance to the Sun in parsecs; it is kept in lightyears."""
        self.distance = _f32(distance * self.LIGHTYEARS_PER_PARSEC)

    def caption(self) -> str:
        """The distance line, rounded to whole lightyears."""
        return self.text % self.distance
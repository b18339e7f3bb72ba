"""The equatorial coordinate grid drawn on the sky sphere."""

from __future__ import annotations

import math
import struct

from .conversions import Color


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _point(radius: float, tr: float, pr: float) -> tuple[float, float, float]:
    return (
        _f32(radius * math.cos(tr) * math.sin(pr)),
        _f32(radius * math.sin(tr)),
        _f32(radius * math.cos(tr) * math.cos(pr)),
    )


def build_grid_vertices(
    radius: float, segments: int, rings: int, subdiv: int
) -> list[tuple[float, float, float]]:
    """Return line vertices, in pairs, of the circles of latitude and longitude.

    Circles of latitude run from ``1 - rings`` to ``rings - 1`` steps of
    90/rings degrees; meridians are spaced 360/segments degrees apart. Each
    circle is split into ``subdiv`` line pieces per step.
    """
    theta_step = math.radians(90.0) / (rings * subdiv)
    phi_step = math.radians(360.0) / (segments * subdiv)
    vertices: list[tuple[float, float, float]] = []

    for theta in range(1 - rings, rings):
        tr = theta * theta_step * subdiv
        for piece in range(segments * subdiv):
            pr = piece * phi_step
            vertices.append(_point(radius, tr, pr))
            vertices.append(_point(radius, tr, pr + phi_step))

    for phi in range(segments):
        pr = phi * phi_step * subdiv
        for piece in range((1 - rings) * subdiv, (rings - 1) * subdiv):
            tr = piece * theta_step
            vertices.append(_point(radius, tr, pr))
            vertices.append(_point(radius, tr + theta_step, pr))

    return vertices


class Grid:
    """A spherical grid of 10 degree latitude and longitude lines."""

    SEGMENTS = 36
    RINGS = 9
    SUBDIV = 10
    RADIUS = 2000.0
    color = Color(0.5 * 0.25, 0.6 * 0.25, 0.8 * 0.25)

    def __init__(self) -> None:
        self.line_width = 1.5
        self.vertices: list[tuple[float, float, float]] = []

    def setup(self) -> None:
        """Build the grid's line vertices."""
        self.vertices = build_grid_vertices(
            self.RADIUS, self.SEGMENTS, self.RINGS, self.SUBDIV
        )
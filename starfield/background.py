"""The textured Milky Way sphere and galactic/equatorial conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .conversions import clamp, lerp, wrap

GALACTIC_CENTER_EQUATORIAL = (math.radians(266.40510), math.radians(-28.936175), 8.33)
GALACTIC_NORTHPOLE_EQUATORIAL = (math.radians(192.859508), math.radians(27.128336))

_ASCENDING_NODE = math.radians(33.0)

# Rotates the galactic-coordinate background map into equatorial coordinates.
TRANSFORM = (
    (+0.444829594298, -0.746982248696, -0.494109453633, 0.0),
    (-0.198076389622, +0.455983794523, -0.867666135681, 0.0),
    (+0.873437104725, +0.483834991775, +0.054875539390, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


@dataclass
class SphereMesh:
    """Vertex data of a sphere drawn as a single triangle strip."""

    normals: list[tuple[float, float, float]] = field(default_factory=list)
    positions: list[tuple[float, float, float]] = field(default_factory=list)
    tex_coords: list[tuple[float, float]] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


def create_sphere(radius: float, slices: int, segments: int) -> SphereMesh:
    """Build an inward-facing textured sphere as one triangle strip.

    Strips of neighbouring segments run in alternating directions and are
    joined by degenerate triangles.
    """
    mesh = SphereMesh()
    for x in range(segments + 1):
        theta = x / segments * 2.0 * math.pi
        for y in range(slices + 1):
            phi = (0.5 - y / slices) * math.pi
            normal = (
                math.cos(phi) * math.sin(theta),
                math.sin(phi),
                math.cos(phi) * math.cos(theta),
            )
            mesh.normals.append(normal)
            mesh.positions.append(tuple(c * radius for c in normal))
            mesh.tex_coords.append((1.0 - x / segments, y / slices))

    rings = slices + 1
    for x in range(segments):
        here, there = x * rings, (x + 1) * rings
        if x % 2:
            mesh.indices += [here, here]
            for y in range(rings):
                mesh.indices += [here + y, there + y]
        else:
            mesh.indices += [there + slices, there + slices]
            for y in reversed(range(rings)):
                mesh.indices += [there + y, here + y]
    return mesh


def to_equatorial(longitude: float, latitude: float) -> tuple[float, float]:
    """Convert galactic (longitude, latitude) to equatorial J2000 (ra, dec), in radians."""
    alpha, delta = GALACTIC_NORTHPOLE_EQUATORIAL
    offset = longitude - _ASCENDING_NODE
    dec = math.asin(
        math.sin(latitude) * math.sin(delta)
        + math.cos(latitude) * math.cos(delta) * math.sin(offset)
    )
    ra = math.atan2(
        math.cos(latitude) * math.cos(offset),
        math.sin(latitude) * math.cos(delta)
        - math.cos(latitude) * math.sin(delta) * math.sin(offset),
    ) + alpha
    return wrap(ra, 0.0, 2.0 * math.pi), dec


def to_galactic(ra: float, dec: float) -> tuple[float, float]:
    """Convert equatorial J2000 (ra, dec) to galactic (longitude, latitude), in radians."""
    alpha, delta = GALACTIC_NORTHPOLE_EQUATORIAL
    offset = ra - alpha
    latitude = math.asin(
        math.sin(dec) * math.sin(delta)
        + math.cos(dec) * math.cos(delta) * math.cos(offset)
    )
    longitude = math.atan2(
        math.sin(dec) * math.cos(delta)
        - math.cos(dec) * math.sin(delta) * math.cos(offset),
        math.cos(dec) * math.sin(offset),
    ) + _ASCENDING_NODE
    return wrap(longitude, 0.0, 2.0 * math.pi), latitude


class Background:
    """The far-away sky sphere showing the Milky Way."""

    RADIUS = 2000
    SLICES = 30
    SEGMENTS = 60
    MINIMUM = 0.5
    MAXIMUM = 1.0

    def __init__(self) -> None:
        self.attenuation = 1.0
        self.transform = TRANSFORM
        self.mesh: SphereMesh | None = None

    def create(self) -> SphereMesh:
        """Build the sphere mesh and keep it."""
        self.mesh = create_sphere(self.RADIUS, self.SLICES, self.SEGMENTS)
        return self.mesh

    def set_camera_distance(self, distance: float) -> None:
        """Fade the background with the camera's distance to the Sun."""
        if distance > 300.0:
            value = lerp(self.MINIMUM, 0.0, (distance - 300.0) / 200.0)
            self.attenuation = clamp(value, 0.0, self.MAXIMUM)
        elif distance <= 0.0:
            self.attenuation = self.MAXIMUM
        else:
            value = 1.0 - math.log10(distance) / math.log10(100.0)
            self.attenuation = clamp(value, self.MINIMUM, self.MAXIMUM)
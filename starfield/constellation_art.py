"""The constellation artwork painted on a small sphere around the Sun."""

from __future__ import annotations

from .background import SphereMesh, create_sphere
from .conversions import Color, clamp


class ConstellationArt:
    """A textured sphere that shows constellation figures close to the Sun."""

    RADIUS = 25
    SLICES = 30
    SEGMENTS = 60
    MINIMUM = 0.01
    MAXIMUM = 0.7
    FADE_DISTANCE = 12.0
    color = Color(0.4, 0.6, 0.8)

    def __init__(self) -> None:
        self.attenuation = 1.0
        self.mesh: SphereMesh | None = None

    def create(self) -> SphereMesh:
        """Build the sphere mesh and keep it."""
        self.mesh = create_sphere(self.RADIUS, self.SLICES, self.SEGMENTS)
        return self.mesh

    def set_camera_distance(self, distance: float) -> None:
        """Fade the artwork out as the camera moves away from the Sun."""
        self.attenuation = clamp(
            1.0 - distance / self.FADE_DISTANCE, self.MINIMUM, self.MAXIMUM
        )
"""An orbiting camera around the Sun with mouse control and a screensaver mode."""

from __future__ import annotations

import math
import time
from collections import deque
from typing import Callable

from .conversions import clamp, lerp, wrap


def _elapsed_clock() -> Callable[[], float]:
    start = time.monotonic()
    return lambda: time.monotonic() - start


class Cam:
    """Camera orbiting the origin, given by latitude, longitude and distance.

    Angles are in degrees and the distance in parsecs. After ``time_out``
    seconds without mouse input the camera starts a slow automatic tour.
    """

    LATITUDE_LIMIT = 89.0
    LATITUDE_THRESHOLD = 89.0
    DISTANCE_MIN = 0.015
    DISTANCE_MAX = 1000.0

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or _elapsed_clock()

        self.near_clip = 0.02
        self.far_clip = 5000.0
        self.eye_separation = 0.005
        self.convergence = 1.0
        self.aspect_ratio = 1.0

        self.delta_x = self.delta_y = self.delta_d = 0.0
        self._deltas: deque[tuple[float, float, float]] = deque(maxlen=6)
        self.is_mouse_down = False
        self._mouse_pos = (0, 0)

        self.latitude = 0.0
        self.longitude = 0.0
        self.distance = 0.015
        self._fov = 60.0

        self.time_distance = 0.0
        self.time_distance_target = 0.0
        self.setup()

    def setup(self) -> None:
        """Reset the idle timer so that the automatic tour starts right away."""
        self.time_out = 300.0
        self.time_mouse = self._clock() - self.time_out

    @property
    def fov(self) -> float:
        """Vertical field of view in degrees, limited to 1..179."""
        return self._fov

    @fov.setter
    def fov(self, angle: float) -> None:
        self._fov = clamp(angle, 1.0, 179.0)

    def set_distance_time(self, value: float) -> None:
        """Set the phase (0..1 repeating) of the automatic zoom cycle."""
        self.time_distance_target = value

    def resize(self, aspect_ratio: float) -> None:
        """Adapt to a new window aspect ratio."""
        self.aspect_ratio = aspect_ratio

    def update(self, elapsed: float) -> None:
        """Advance the camera by one frame."""
        self.time_distance += 0.1 * wrap(
            self.time_distance_target - self.time_distance, -0.5, 0.5
        )
        now = self._clock()

        if now - self.time_mouse > self.time_out:
            self._tour(now)
        elif not self.is_mouse_down:
            self._coast()
        else:
            self._deltas.append((self.delta_x, self.delta_y, self.delta_d))
            self.delta_x = self.delta_y = self.delta_d = 0.0

        eye = math.dist(self.position(), (0.0, 0.0, 0.0))
        self.convergence = min(1.0, 0.95 * eye)

    def _tour(self, now: float) -> None:
        fraction = self.time_distance - math.floor(self.time_distance)
        period = 2.0 * math.pi * clamp(fraction * 1.20 - 0.10, 0.0, 1.0)
        distance = 100.0 - 99.85 * math.cos(period)

        # once around every 300 seconds, up and down every 220 seconds
        longitude = now * 360.0 / 300.0
        latitude = self.LATITUDE_LIMIT * -math.sin(now * 2.0 * math.pi / 220.0)

        # ease in so the camera doesn't snap from user mode
        t = clamp((now - self.time_mouse - self.time_out) / 100.0, 0.0, 1.0)
        self.distance = lerp(self.distance, distance, t)
        self.latitude = lerp(self.latitude, latitude, t)
        self.longitude += lerp(0.0, wrap(longitude - self.longitude, -180.0, 180.0), t)

    def _coast(self) -> None:
        self.delta_x *= 0.975
        self.longitude = wrap(self.longitude - self.delta_x, -180.0, 180.0)
        self.delta_y *= 0.975
        self.latitude = clamp(
            self.latitude + self.delta_y, -self.LATITUDE_LIMIT, self.LATITUDE_LIMIT
        )
        if self.latitude < -self.LATITUDE_THRESHOLD:
            self.latitude = 0.9 * self.latitude - 0.1 * self.LATITUDE_THRESHOLD
            self.delta_y = 0.0
        elif self.latitude > self.LATITUDE_THRESHOLD:
            self.latitude = 0.9 * self.latitude + 0.1 * self.LATITUDE_THRESHOLD
            self.delta_y = 0.0

    def mouse_down(self, pos: tuple[int, int]) -> None:
        """Start a drag at the given window position."""
        self._mouse_pos = pos
        self.time_mouse = self._clock()
        self.delta_x = self.delta_y = self.delta_d = 0.0
        self._deltas.clear()
        self.is_mouse_down = True

    def mouse_drag(
        self,
        pos: tuple[int, int],
        left_down: bool,
        middle_down: bool,
        right_down: bool,
    ) -> None:
        """Rotate with the left button, zoom with the right button."""
        now = self._clock()
        if now - self.time_mouse < 1.0 / 60.0:
            return

        dx = pos[0] - self._mouse_pos[0]
        dy = pos[1] - self._mouse_pos[1]
        if left_down:
            sensitivity = 0.075
            self.delta_x = dx * sensitivity
            self.longitude = wrap(self.longitude - self.delta_x, -180.0, 180.0)
            self.delta_y = dy * sensitivity
            self.latitude = clamp(
                self.latitude + self.delta_y, -self.LATITUDE_LIMIT, self.LATITUDE_LIMIT
            )
        elif right_down:
            self.delta_d = float(dx + dy)
            sensitivity = max(
                0.005, math.log10(self.distance) / math.log10(100.0) * 0.075
            )
            self.distance = clamp(
                self.distance - self.delta_d * sensitivity,
                self.DISTANCE_MIN,
                self.DISTANCE_MAX,
            )

        self._mouse_pos = pos
        self.time_mouse = now

    def mouse_up(self, pos: tuple[int, int]) -> None:
        """End a drag; keep moving at the average speed of the last frames."""
        self._mouse_pos = pos
        self.time_mouse = self._clock()
        self.is_mouse_down = False

        count = len(self._deltas)
        if count:
            self.delta_x, self.delta_y, self.delta_d = (
                sum(values) / count for values in zip(*self._deltas)
            )
        else:
            self.delta_x = self.delta_y = self.delta_d = 0.0

    def position(self) -> tuple[float, float, float]:
        """Position of the camera in world space."""
        theta = math.pi - math.radians(self.longitude)
        phi = 0.5 * math.pi - math.radians(self.latitude)
        return (
            self.distance * math.sin(phi) * math.cos(theta),
            self.distance * math.cos(phi),
            self.distance * math.sin(phi) * math.sin(theta),
        )
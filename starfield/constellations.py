"""Constellation lines between stars, with CSV loading and a binary cache."""

from __future__ import annotations

import logging
import math
import os
import re
import struct
from pathlib import Path
from typing import BinaryIO

from .conversions import Color, clamp, equatorial_to_cartesian, lerp, to_double

logger = logging.getLogger(__name__)

_VERSION = 1
_HEADER = struct.Struct("<BII")
_VEC3 = struct.Struct("<fff")
_INDEX = struct.Struct("<I")

_SKY_RADIUS = 2000.0
ADJUSTED_FILE_NAME = "constellations.cln"


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError("unexpected end of constellation data")
    return data


def _read_text(path: str | os.PathLike[str]) -> str:
    with open(path, encoding="latin-1", newline="") as handle:
        return handle.read()


def _lines(text: str):
    for raw in re.split(r"[\r\n]", text):
        line = raw.strip()
        if line:
            yield line


def _fmt(value: float) -> str:
    return format(value, ".7g")


def star_coordinate(ra: float, dec: float, distance: float) -> tuple[float, float, float]:
    """World position of a star from right ascension (hours), declination (degrees)
    and distance (parsecs)."""
    return equatorial_to_cartesian(ra, dec, distance)


def star_coordinates(text: str) -> list[tuple[float, float, float]]:
    """Extract (ra, dec, distance) of every valid star in HYG database text."""
    result: list[tuple[float, float, float]] = []
    for line in _lines(text):
        tokens = line.split(";")
        if len(tokens) < 23:
            continue
        try:
            result.append(
                (to_double(tokens[7]), to_double(tokens[8]), to_double(tokens[9]))
            )
        except ValueError:
            continue
    return result


def _nearest_star(
    ra: float, dec: float, stars: list[tuple[float, float, float]]
) -> tuple[float, float, float]:
    """Return (ra, dec, distance) of the star closest in direction, if any is near."""
    target = star_coordinate(ra, dec, _SKY_RADIUS)
    best = (ra, dec, _SKY_RADIUS)
    best_distance = _SKY_RADIUS
    for star_ra, star_dec, star_distance in stars:
        gap = math.dist(target, star_coordinate(star_ra, star_dec, _SKY_RADIUS))
        if gap < best_distance:
            best = (star_ra, star_dec, star_distance)
            best_distance = gap
    return best


class Constellations:
    """Line segments connecting the stars of each constellation."""

    MINIMUM = 0.25
    MAXIMUM = 1.0
    RANGE = 50.0
    color = Color(0.5, 0.6, 0.8)

    def __init__(self) -> None:
        self.vertices: list[tuple[float, float, float]] = []
        self.indices: list[int] = []
        self.attenuation = 1.0
        self.line_width = 1.0

    def clear(self) -> None:
        """Remove all lines."""
        self.vertices.clear()
        self.indices.clear()

    def set_camera_distance(self, distance: float) -> None:
        """Fade the lines with the camera's distance to the Sun."""
        if distance > self.RANGE:
            value = lerp(self.MINIMUM, 0.0, (distance - self.RANGE) / self.RANGE)
            self.attenuation = clamp(value, 0.0, self.MAXIMUM)
        elif distance <= 0.0:
            self.attenuation = self.MAXIMUM
        else:
            value = 1.0 - math.log10(distance) / math.log10(self.RANGE)
            self.attenuation = clamp(value, self.MINIMUM, self.MAXIMUM)

    def _add_vertex(self, ra: float, dec: float, distance: float) -> None:
        self.indices.append(len(self.vertices))
        self.vertices.append(
            tuple(_f32(c) for c in star_coordinate(ra, dec, distance))
        )

    def load(
        self,
        path: str | os.PathLike[str],
        star_path: str | os.PathLike[str] | None = None,
    ) -> None:
        """Load line segments from a separated text file.

        Each line holds two stars as ``ra dec distance`` triples. Lines with
        only ``ra dec`` pairs have their stars looked up by direction in the
        HYG database at ``star_path``. The completed data is written next to
        ``path`` as ``constellations.cln``. Invalid numbers raise ValueError.
        """
        logger.info("Loading constellation database from CSV, please wait...")
        stars: list[tuple[float, float, float]] = []
        adjusted: list[str] = []

        for line in _lines(_read_text(path)):
            tokens = re.split(r"[; \t]+", line)
            if len(tokens) < 4:
                continue

            if len(tokens) < 6:
                if not stars:
                    if star_path is None:
                        raise ValueError(
                            "star distances are missing and no star database was given"
                        )
                    logger.info(
                        "Star distance is missing from constellation database, "
                        "creating lookup from star database..."
                    )
                    stars = star_coordinates(_read_text(star_path))
                for j in range(2):
                    ra = to_double(tokens[2 * j])
                    dec = to_double(tokens[2 * j + 1])
                    ra, dec, distance = _nearest_star(ra, dec, stars)
                    self._add_vertex(ra, dec, distance)
                    adjusted.append(f"{_fmt(ra)};{_fmt(dec)};{_fmt(distance)};")
                adjusted.append("\r\n")
            else:
                first = [to_double(token) for token in tokens[0:3]]
                second = [to_double(token) for token in tokens[3:6]]
                self._add_vertex(*first)
                self._add_vertex(*second)
                adjusted.append(";".join(_fmt(v) for v in first) + ";")
                adjusted.append(";".join(_fmt(v) for v in second) + "\r\n")

        target = Path(path).parent / ADJUSTED_FILE_NAME
        with open(target, "w", encoding="latin-1", newline="") as handle:
            handle.write("".join(adjusted))

    def read(self, stream: BinaryIO) -> None:
        """Read lines from the binary cache format."""
        self.clear()
        _, n_vertices, n_indices = _HEADER.unpack(_read_exact(stream, _HEADER.size))
        self.vertices.extend(
            _VEC3.unpack(_read_exact(stream, _VEC3.size)) for _ in range(n_vertices)
        )
        self.indices.extend(
            _INDEX.unpack(_read_exact(stream, _INDEX.size))[0] for _ in range(n_indices)
        )

    def write(self, stream: BinaryIO) -> None:
        """Write lines in the binary cache format."""
        stream.write(_HEADER.pack(_VERSION, len(self.vertices), len(self.indices)))
        for vertex in self.vertices:
            stream.write(_VEC3.pack(*vertex))
        for index in self.indices:
            stream.write(_INDEX.pack(index))
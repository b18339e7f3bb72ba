"""The star database: CSV loading, colour lookup and a binary cache format."""

from __future__ import annotations

import logging
import os
import re
import struct
from typing import BinaryIO

from .conversions import (
    Color,
    ColorA,
    clamp,
    equatorial_to_cartesian,
    to_color_a,
    to_double,
)

logger = logging.getLogger(__name__)

_VERSION = 1
_HEADER = struct.Struct("<BIII")
_VEC3 = struct.Struct("<fff")
_VEC2 = struct.Struct("<ff")

_LOOKUP = tuple(
    to_color_a(value)
    for value in (
        0xFF9BB2FF, 0xFF9EB5FF, 0xFFA3B9FF, 0xFFAABFFF, 0xFFB2C5FF, 0xFFBBCCFF,
        0xFFC4D2FF, 0xFFCCD8FF, 0xFFD3DDFF, 0xFFDAE2FF, 0xFFDFE5FF, 0xFFE4E9FF,
        0xFFE9ECFF,
        0xFFEEEFFF, 0xFFF3F2FF, 0xFFF8F6FF, 0xFFFEF9FF, 0xFFFFF9FB, 0xFFFFF7F5,
        0xFFFFF5EF, 0xFFFFF3EA, 0xFFFFF1E5, 0xFFFFEFE0, 0xFFFFEDDB, 0xFFFFEBD6,
        0xFFFFE9D2,
        0xFFFFE8CE, 0xFFFFE6CA, 0xFFFFE5C6, 0xFFFFE3C3, 0xFFFFE2BF, 0xFFFFE0BB,
        0xFFFFDFB8, 0xFFFFDDB4, 0xFFFFDBB0, 0xFFFFDAAD, 0xFFFFD8A9, 0xFFFFD6A5,
        0xFFFFD5A1,
        0xFFFFD29C, 0xFFFFD096, 0xFFFFCC8F, 0xFFFFC885, 0xFFFFC178, 0xFFFFB765,
        0xFFFFA94B, 0xFFFF9523, 0xFFFF7B00, 0xFFFF5200,
    )
)

WHITE = Color(1.0, 1.0, 1.0)


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def star_color(color_index: float) -> ColorA:
    """Return the colour of a star for its B-V colour index."""
    lut = (color_index + 0.40) / 0.05
    last = len(_LOOKUP) - 1
    index = int(clamp(int(lut), 0, last))
    next_index = int(clamp(int(lut) + 1, 0, last))
    t = clamp(lut - index, 0.0, 1.0)
    low, high = _LOOKUP[index], _LOOKUP[next_index]
    return ColorA(*((1.0 - t) * a + t * b for a, b in zip(low, high)))


class Star:
    """A single star given by its equatorial position and distance."""

    def __init__(
        self,
        ra: float = 0.0,
        dec: float = 0.0,
        distance: float = 0.0,
        magnitude: float = 0.0,
        color: Color = WHITE,
    ) -> None:
        self.distance = distance
        self.magnitude = magnitude
        self.color = color
        self._unit = (0.0, 0.0, 1.0)
        self.set_position(ra, dec)

    def position(self) -> tuple[float, float, float]:
        """Position in world space, in parsecs from the Sun."""
        return tuple(self.distance * c for c in self._unit)

    def set_position(self, ra: float, dec: float) -> None:
        """Set the direction from right ascension (hours) and declination (degrees)."""
        self._unit = equatorial_to_cartesian(ra, dec, 1.0)


class Stars:
    """Point data for all stars: positions, magnitude/distance pairs and colours."""

    def __init__(self) -> None:
        self.vertices: list[tuple[float, float, float]] = []
        self.texcoords: list[tuple[float, float]] = []
        self.colors: list[Color] = []
        self.aspect_ratio = 1.0

    def clear(self) -> None:
        """Remove all star data."""
        self.vertices.clear()
        self.texcoords.clear()
        self.colors.clear()

    def load(self, source: str | os.PathLike[str]) -> None:
        """Load a semicolon separated HYG star database file."""
        logger.info("Loading star database from CSV, please wait...")
        self.clear()
        with open(source, encoding="latin-1", newline="") as handle:
            text = handle.read()

        for raw in re.split(r"[\r\n]", text):
            line = raw.strip()
            if not line:
                continue
            tokens = line.split(";")
            if len(tokens) < 23:
                continue
            try:
                abs_mag = to_double(tokens[14])
                color = star_color(to_double(tokens[16]))
                ra = to_double(tokens[7])
                dec = to_double(tokens[8])
                distance = to_double(tokens[9])
            except ValueError:
                continue

            x, y, z = equatorial_to_cartesian(ra, dec, 1.0)
            self.vertices.append(
                (_f32(distance * _f32(x)), _f32(distance * _f32(y)), _f32(distance * _f32(z)))
            )
            self.texcoords.append((_f32(abs_mag), _f32(distance)))
            self.colors.append(Color(_f32(color.r), _f32(color.g), _f32(color.b)))

    def read(self, stream: BinaryIO) -> None:
        """Read star data from the binary cache format."""
        self.clear()
        _, n_vertices, n_texcoords, n_colors = _HEADER.unpack(
            _read_exact(stream, _HEADER.size)
        )
        self.vertices.extend(
            _VEC3.unpack(_read_exact(stream, _VEC3.size)) for _ in range(n_vertices)
        )
        self.texcoords.extend(
            _VEC2.unpack(_read_exact(stream, _VEC2.size)) for _ in range(n_texcoords)
        )
        self.colors.extend(
            Color(*_VEC3.unpack(_read_exact(stream, _VEC3.size))) for _ in range(n_colors)
        )

    def write(self, stream: BinaryIO) -> None:
        """Write star data in the binary cache format."""
        stream.write(
            _HEADER.pack(_VERSION, len(self.vertices), len(self.texcoords), len(self.colors))
        )
        for vertex in self.vertices:
            stream.write(_VEC3.pack(*vertex))
        for texcoord in self.texcoords:
            stream.write(_VEC2.pack(*texcoord))
        for color in self.colors:
            stream.write(_VEC3.pack(*color))


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError("unexpected end of star data")
    return data
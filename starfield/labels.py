"""Text labels placed in world space: star names and constellation names."""

from __future__ import annotations

import logging
import math
import os
import re
import struct
from dataclasses import dataclass
from typing import BinaryIO

from .conversions import (
    Color,
    clamp,
    equatorial_to_cartesian,
    lerp,
    to_double,
    to_float,
)

logger = logging.getLogger(__name__)

_VERSION = 1
_HEADER = struct.Struct("<BI")
_VEC3 = struct.Struct("<fff")

GALACTIC_CENTER_NAME = "Center of the Galaxy"
_GALACTIC_CENTER_RA = 17.76112222
_GALACTIC_CENTER_DEC = -29.00780555
_GALACTIC_CENTER_DISTANCE = 8330.0


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _f32_vector(
    scale: float, unit: tuple[float, float, float]
) -> tuple[float, float, float]:
    return tuple(_f32(scale * _f32(c)) for c in unit)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError("unexpected end of label data")
    return data


def _read_cstring(stream: BinaryIO) -> str:
    chunks = bytearray()
    while True:
        byte = stream.read(1)
        if not byte:
            raise EOFError("unterminated label name")
        if byte == b"\0":
            return chunks.decode("utf-8")
        chunks += byte


def _read_text(path: str | os.PathLike[str]) -> str:
    with open(path, encoding="latin-1", newline="") as handle:
        return handle.read()


def _lines(text: str):
    for raw in re.split(r"[\r\n]", text):
        line = raw.strip()
        if line:
            yield line


@dataclass(frozen=True)
class Label:
    """A name shown at a position in world space."""

    position: tuple[float, float, float]
    name: str


class Labels:
    """Names of stars, faded out as the camera moves away from the Sun."""

    MINIMUM = 0.25
    MAXIMUM = 1.0
    RANGE = 10.0
    FONT_SIZE = 16.0
    color = Color(1.0, 1.0, 1.0)

    def __init__(self) -> None:
        self.labels: list[Label] = []
        self.attenuation = 1.0

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self):
        return iter(self.labels)

    def add_label(self, position: tuple[float, float, float], name: str) -> None:
        """Add a label at a world space position."""
        self.labels.append(Label(tuple(position), name))

    def setup(self) -> None:
        """Add the fixed label marking the centre of the galaxy."""
        unit = equatorial_to_cartesian(_GALACTIC_CENTER_RA, _GALACTIC_CENTER_DEC, 1.0)
        self.add_label(_f32_vector(_GALACTIC_CENTER_DISTANCE, unit), GALACTIC_CENTER_NAME)

    def set_camera_distance(self, distance: float) -> None:
        """Fade the labels with the camera's distance to the Sun."""
        if distance > self.RANGE:
            value = lerp(self.MINIMUM, 0.0, (distance - self.RANGE) / self.RANGE)
            self.attenuation = clamp(value, 0.0, self.MAXIMUM)
        elif distance <= 0.0:
            self.attenuation = self.MAXIMUM
        else:
            value = 1.0 - math.log10(distance) / math.log10(self.RANGE)
            self.attenuation = clamp(value, self.MINIMUM, self.MAXIMUM)

    def load(self, source: str | os.PathLike[str]) -> None:
        """Load star names from a semicolon separated HYG database file."""
        logger.info("Loading label database from CSV, please wait...")
        self.labels.clear()
        for line in _lines(_read_text(source)):
            tokens = line.split(";")
            if len(tokens) < 23:
                continue
            name = tokens[6].strip()
            if not name:
                continue
            try:
                ra = to_double(tokens[7])
                dec = to_double(tokens[8])
                distance = to_float(tokens[9])
            except ValueError:
                continue
            unit = equatorial_to_cartesian(ra, dec, 1.0)
            self.add_label(_f32_vector(distance, unit), name)

    def read(self, stream: BinaryIO) -> None:
        """Read labels from the binary cache format."""
        self.labels.clear()
        _, count = _HEADER.unpack(_read_exact(stream, _HEADER.size))
        for _ in range(count):
            position = _VEC3.unpack(_read_exact(stream, _VEC3.size))
            self.add_label(position, _read_cstring(stream))

    def write(self, stream: BinaryIO) -> None:
        """Write labels in the binary cache format."""
        stream.write(_HEADER.pack(_VERSION, len(self.labels)))
        for label in self.labels:
            stream.write(_VEC3.pack(*label.position))
            stream.write(label.name.encode("utf-8") + b"\0")


class ConstellationLabels(Labels):
    """Names of the constellations, placed on the sky sphere."""

    RADIUS = 2000.0
    color = Color(0.5, 0.6, 0.8)

    def set_camera_distance(self, distance: float) -> None:
        """Fade the constellation names with the camera's distance to the Sun."""
        super().set_camera_distance(distance)

    def load(self, source: str | os.PathLike[str]) -> None:
        """Load constellation names from a semicolon separated file.

        Each line holds right ascension (hours), declination (degrees), an
        unused field and the name. Lines starting with ';' are comments.
        """
        logger.info("Loading constellation label database from CSV, please wait...")
        self.labels.clear()
        for line in _lines(_read_text(source)):
            if line.startswith(";"):
                continue
            tokens = line.split(";")
            if len(tokens) < 4:
                continue
            name = tokens[3].strip()
            if not name:
                continue
            try:
                ra = to_double(tokens[0])
                dec = to_double(tokens[1])
            except ValueError:
                continue
            unit = equatorial_to_cartesian(ra, dec, 1.0)
            self.add_label(_f32_vector(self.RADIUS, unit), name)
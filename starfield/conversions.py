"""Colour, number and coordinate conversions shared by the star field."""

from __future__ import annotations

import math
import os
import re
from typing import NamedTuple

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)
_FLOAT32_MAX = 3.4028234663852886e38


class Color(NamedTuple):
    """An RGB colour with components in the range 0..1."""

    r: float
    g: float
    b: float


class ColorA(NamedTuple):
    """An RGBA colour with components in the range 0..1."""

    r: float
    g: float
    b: float
    a: float


def to_color(hex_value: int) -> Color:
    """Convert a hexadecimal colour (0xRRGGBB) to a Color."""
    return Color(
        ((hex_value & 0x00FF0000) >> 16) / 255.0,
        ((hex_value & 0x0000FF00) >> 8) / 255.0,
        (hex_value & 0x000000FF) / 255.0,
    )


def to_color_a(hex_value: int) -> ColorA:
    """Convert a hexadecimal colour (0xAARRGGBB) to a ColorA."""
    return ColorA(
        ((hex_value & 0x00FF0000) >> 16) / 255.0,
        ((hex_value & 0x0000FF00) >> 8) / 255.0,
        (hex_value & 0x000000FF) / 255.0,
        ((hex_value & 0xFF000000) >> 24) / 255.0,
    )


def to_int(text: str) -> int:
    """Parse the leading integer of a string, ignoring leading whitespace."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def to_double(text: str) -> float:
    """Parse the leading floating point number of a string."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = float(match.group(1))
    if math.isinf(value):
        raise ValueError(f"number out of range: {text!r}")
    return value


def to_float(text: str) -> float:
    """Parse the leading number of a string at single precision."""
    value = to_double(text)
    if abs(value) > _FLOAT32_MAX:
        raise ValueError(f"number out of single precision range: {text!r}")
    import struct

    return struct.unpack("<f", struct.pack("<f", value))[0]


def wrap(value: float, minimum: float, maximum: float) -> float:
    """Wrap a value into the half-open interval [minimum, maximum)."""
    span = maximum - minimum
    fraction = (value - minimum) / span
    fraction -= math.floor(fraction)
    return minimum + fraction * span


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b."""
    return a + (b - a) * t


def clamp(value: float, low: float, high: float) -> float:
    """Limit a value to the range low..high."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def equatorial_to_cartesian(
    ra_hours: float, dec_degrees: float, distance: float
) -> tuple[float, float, float]:
    """Convert right ascension (hours) and declination (degrees) to world space."""
    alpha = math.radians(ra_hours * 15.0)
    delta = math.radians(dec_degrees)
    return (
        distance * math.sin(alpha) * math.cos(delta),
        distance * math.sin(delta),
        distance * math.cos(alpha) * math.cos(delta),
    )


def _read_text(path: str | os.PathLike[str]) -> str:
    with open(path, encoding="latin-1", newline="") as handle:
        return handle.read()


def merge_names(hyg_path: str | os.PathLike[str], ciel_path: str | os.PathLike[str]) -> None:
    """Merge proper star names from a star-names list into an HYG database file.

    The names file holds lines whose first nine characters are the HR number,
    followed by semicolon separated names. The HYG file is rewritten in place.
    """
    names: dict[int, str] = {}
    for raw in re.split(r"[\r\n]+", _read_text(ciel_path)):
        line = raw.strip()
        if not line or line.startswith(";"):
            continue
        try:
            hr = to_int(raw[:9])
        except ValueError:
            continue
        names.setdefault(hr, raw[9:].split(";")[0])

    merged = []
    for raw in re.split(r"[\r\n]+", _read_text(hyg_path)):
        tokens = raw.strip().split(";")
        if len(tokens) > 6 and tokens[4]:
            try:
                name = names.get(to_int(tokens[3]), "")
            except ValueError:
                name = ""
            if name:
                tokens[6] = name
        merged.append(";".join(tokens))

    with open(hyg_path, "w", encoding="latin-1", newline="") as handle:
        handle.write("\r\n".join(merged))
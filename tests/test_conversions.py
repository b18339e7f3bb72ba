import math

import pytest

from starfield.conversions import (
    Color,
    ColorA,
    clamp,
    equatorial_to_cartesian,
    lerp,
    merge_names,
    to_color,
    to_color_a,
    to_double,
    to_float,
    to_int,
    wrap,
)


def test_to_color_channels():
    assert to_color(0xFF0000) == Color(1.0, 0.0, 0.0)
    assert to_color(0x00FF00) == Color(0.0, 1.0, 0.0)
    assert to_color(0x0000FF) == Color(0.0, 0.0, 1.0)


def test_to_color_ignores_alpha_byte():
    assert to_color(0xFF00FF00) == to_color(0x0000FF00)


def test_to_color_a_alpha():
    assert to_color_a(0xFF000000) == ColorA(0.0, 0.0, 0.0, 1.0)
    assert to_color_a(0x00FFFFFF) == ColorA(1.0, 1.0, 1.0, 0.0)


def test_to_int_parses_prefix():
    assert to_int("42") == 42
    assert to_int("  -7abc") == -7


@pytest.mark.parametrize("text", ["", "abc", "   "])
def test_to_int_rejects(text):
    with pytest.raises(ValueError):
        to_int(text)


def test_to_double_parses():
    assert to_double("3.5") == 3.5
    assert to_double(" 1e3 ") == 1000.0
    assert to_double("-.25x") == -0.25


@pytest.mark.parametrize("text", ["", "x1", ";"])
def test_to_double_rejects(text):
    with pytest.raises(ValueError):
        to_double(text)


def test_to_float_single_precision():
    assert to_float("0.1") == pytest.approx(0.1, rel=1e-7)
    assert to_float("2.5") == 2.5


def test_to_float_out_of_range():
    with pytest.raises(ValueError):
        to_float("1e300")


@pytest.mark.parametrize("value", [-1000.0, -181.0, 0.0, 179.9, 540.0, 12345.6])
def test_wrap_stays_in_range(value):
    result = wrap(value, -180.0, 180.0)
    assert -180.0 <= result < 180.0
    assert wrap(value + 360.0, -180.0, 180.0) == pytest.approx(result, abs=1e-9)


def test_wrap_keeps_in_range_value():
    assert wrap(10.0, -180.0, 180.0) == pytest.approx(10.0)
    assert wrap(2.0 * math.pi + 1.0, 0.0, 2.0 * math.pi) == pytest.approx(1.0)


def test_lerp_endpoints():
    assert lerp(2.0, 4.0, 0.0) == 2.0
    assert lerp(2.0, 4.0, 1.0) == 4.0


def test_clamp():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-1.0, 0.0, 1.0) == 0.0
    assert clamp(0.5, 0.0, 1.0) == 0.5


@pytest.mark.parametrize("ra,dec,distance", [(0, 0, 1), (6, 45, 10), (17.76, -29.0, 8330)])
def test_equatorial_to_cartesian_length(ra, dec, distance):
    x, y, z = equatorial_to_cartesian(ra, dec, distance)
    assert math.sqrt(x * x + y * y + z * z) == pytest.approx(distance)


def test_equatorial_to_cartesian_pole():
    x, y, z = equatorial_to_cartesian(3.0, 90.0, 2.0)
    assert y == pytest.approx(2.0)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert z == pytest.approx(0.0, abs=1e-12)


def test_merge_names(tmp_path):
    ciel = tmp_path / "names.txt"
    ciel.write_bytes(b";comment\r\n      1  Alpha;Other\r\n      1  Beta\r\n")
    hyg = tmp_path / "hyg.csv"
    hyg.write_bytes(b"0;1;2;1;x;y;;rest\r\n5;6;7;2;x;y;;rest\r\n")

    merge_names(hyg, ciel)

    lines = hyg.read_bytes().decode("latin-1").split("\r\n")
    assert lines[0] == "0;1;2;1;x;y;Alpha;rest"
    assert lines[1] == "5;6;7;2;x;y;;rest"


def test_merge_names_requires_field_four(tmp_path):
    ciel = tmp_path / "names.txt"
    ciel.write_bytes(b"      3  Gamma\r\n")
    hyg = tmp_path / "hyg.csv"
    hyg.write_bytes(b"0;1;2;3;;y;;rest")

    merge_names(hyg, ciel)

    assert hyg.read_bytes() == b"0;1;2;3;;y;;rest"
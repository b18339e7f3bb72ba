import math

import pytest

from starfield.background import create_sphere
from starfield.constellation_art import ConstellationArt


def test_create_builds_sphere_of_radius_25():
    art = ConstellationArt()
    mesh = art.create()
    assert art.mesh is mesh
    for position in mesh.positions:
        assert math.dist(position, (0.0, 0.0, 0.0)) == pytest.approx(25.0)


def test_create_matches_sphere_builder():
    mesh = ConstellationArt().create()
    reference = create_sphere(25, 30, 60)
    assert mesh.indices == reference.indices
    assert len(mesh.positions) == len(reference.positions)


def test_indices_stay_in_range():
    mesh = ConstellationArt().create()
    assert max(mesh.indices) == len(mesh.positions) - 1
    assert min(mesh.indices) == 0


def test_attenuation_is_capped_near_sun():
    art = ConstellationArt()
    art.set_camera_distance(0.0)
    assert art.attenuation == pytest.approx(0.7)


def test_attenuation_has_floor_far_away():
    art = ConstellationArt()
    art.set_camera_distance(100.0)
    assert art.attenuation == pytest.approx(0.01)


def test_attenuation_linear_in_between():
    art = ConstellationArt()
    art.set_camera_distance(6.0)
    assert art.attenuation == pytest.approx(0.5)


def test_attenuation_decreases_with_distance():
    art = ConstellationArt()
    values = []
    for distance in (4.0, 5.0, 8.0, 11.0):
        art.set_camera_distance(distance)
        values.append(art.attenuation)
    assert values == sorted(values, reverse=True)
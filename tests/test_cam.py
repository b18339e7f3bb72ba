import math

import pytest

from starfield.cam import Cam


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cam(clock):
    return Cam(clock=clock)


def test_default_position(cam):
    x, y, z = cam.position()
    assert x == pytest.approx(-0.015)
    assert y == pytest.approx(0.0)
    assert z == pytest.approx(0.0, abs=1e-12)


def test_position_length_is_distance(cam):
    cam.latitude, cam.longitude, cam.distance = 30.0, 120.0, 7.0
    assert math.dist(cam.position(), (0, 0, 0)) == pytest.approx(7.0)


def test_positive_latitude_is_up(cam):
    cam.latitude = 45.0
    assert cam.position()[1] > 0


@pytest.mark.parametrize("angle, expected", [(500.0, 179.0), (-3.0, 1.0), (45.0, 45.0)])
def test_fov_clamped(cam, angle, expected):
    cam.fov = angle
    assert cam.fov == expected


def test_drag_too_fast_is_ignored(cam, clock):
    cam.mouse_down((100, 100))
    clock.now += 0.001
    cam.mouse_drag((200, 150), True, False, False)
    assert cam.longitude == 0.0
    assert cam.latitude == 0.0


def test_left_drag_rotates(cam, clock):
    cam.mouse_down((100, 100))
    clock.now += 0.1
    cam.mouse_drag((140, 120), True, False, False)
    assert cam.longitude < 0.0
    assert cam.latitude > 0.0


def test_latitude_clamped(cam, clock):
    cam.mouse_down((0, 0))
    clock.now += 0.1
    cam.mouse_drag((0, 100000), True, False, False)
    assert cam.latitude == Cam.LATITUDE_LIMIT


def test_inertia_after_release(cam, clock):
    cam.mouse_down((100, 100))
    clock.now += 0.1
    cam.mouse_drag((140, 100), True, False, False)
    recorded = cam.delta_x
    cam.update(0.016)
    assert cam.delta_x == 0.0
    cam.mouse_up((140, 100))
    assert cam.delta_x == pytest.approx(recorded)

    before = cam.longitude
    clock.now += 0.016
    cam.update(0.016)
    assert cam.longitude < before
    assert abs(cam.delta_x) < abs(recorded)


def test_release_without_motion_stops(cam, clock):
    cam.mouse_down((10, 10))
    cam.mouse_up((10, 10))
    assert (cam.delta_x, cam.delta_y, cam.delta_d) == (0.0, 0.0, 0.0)


def test_user_mode_does_not_tour(cam, clock):
    cam.mouse_down((0, 0))
    cam.mouse_up((0, 0))
    clock.now += 10.0
    cam.update(0.016)
    assert cam.distance == pytest.approx(0.015)


def test_screensaver_tour(cam, clock):
    clock.now += 200.0
    cam.update(0.016)
    assert cam.distance == pytest.approx(0.15)
    assert -Cam.LATITUDE_LIMIT <= cam.latitude <= Cam.LATITUDE_LIMIT


def test_setup_restarts_tour(cam, clock):
    cam.mouse_down((0, 0))
    cam.mouse_up((0, 0))
    cam.setup()
    clock.now += 150.0
    cam.update(0.016)
    assert cam.distance == pytest.approx(0.15)


def test_convergence_bounded(cam, clock):
    cam.distance = 500.0
    cam.update(0.016)
    assert cam.convergence == 1.0
    cam.distance = 0.015
    cam.mouse_down((0, 0))
    cam.update(0.016)
    assert cam.convergence == pytest.approx(0.95 * 0.015)
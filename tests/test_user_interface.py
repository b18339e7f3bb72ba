import pytest

from starfield.user_interface import UserInterface


def test_initial_caption_shows_zero():
    ui = UserInterface()
    assert ui.caption() == "0 lightyears from the Sun"


def test_distance_is_converted_to_lightyears():
    ui = UserInterface()
    ui.set_camera_distance(10.0)
    assert ui.distance == pytest.approx(10.0 * UserInterface.LIGHTYEARS_PER_PARSEC, rel=1e-6)


def test_caption_rounds_to_whole_lightyears():
    ui = UserInterface()
    ui.set_camera_distance(100.0)
    assert ui.caption() == "326 lightyears from the Sun"


def test_caption_follows_latest_distance():
    ui = UserInterface()
    ui.set_camera_distance(100.0)
    first = ui.caption()
    ui.set_camera_distance(0.0)
    assert ui.caption() != first
    assert ui.caption().startswith("0 ")


def test_caption_is_monotonic_in_distance():
    ui = UserInterface()
    values = []
    for parsecs in (1.0, 5.0, 50.0, 500.0):
        ui.set_camera_distance(parsecs)
        values.append(int(ui.caption().split()[0]))
    assert values == sorted(values)
    assert all(text.endswith("lightyears from the Sun") for text in [ui.caption()])
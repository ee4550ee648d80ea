import numpy as np
import pytest

from minkgame.camera import Camera, build_matrix
from minkgame.vectors import Vec2

WINDOW = Vec2(800.0, 600.0)


def _camera(position=(0.0, 0.0), rotation=0.0, zoom=1.0, size=None):
    camera = Camera()
    camera.position = Vec2(*position)
    camera.rotation = rotation
    camera.zoom = zoom
    camera.size = size
    return camera


def test_defaults():
    camera = Camera()
    assert camera.size is None
    assert camera.position == Vec2.ZERO
    assert (camera.rotation, camera.zoom) == (0.0, 1.0)


def test_default_positions_are_independent():
    first, second = Camera(), Camera()
    first.position.x = 5.0
    assert second.position == Vec2.ZERO


def test_camera_position_appears_at_screen_centre():
    camera = _camera(position=(12.0, -40.0), rotation=0.7, zoom=1.8)
    centre = camera.unproject(camera.position, WINDOW)
    assert (centre.x, centre.y) == pytest.approx((WINDOW.x / 2, WINDOW.y / 2))


@pytest.mark.parametrize("zoom", [0.5, 1.0, 3.0])
@pytest.mark.parametrize("rotation", [0.0, 1.2])
def test_project_unproject_round_trip(zoom, rotation):
    camera = _camera(position=(30.0, 15.0), rotation=rotation, zoom=zoom)
    world = Vec2(-17.0, 88.0)
    back = camera.project(camera.unproject(world, WINDOW), WINDOW)
    assert (back.x, back.y) == pytest.approx((world.x, world.y))


def test_world_up_is_screen_up():
    camera = _camera()
    up = camera.unproject(Vec2(0.0, 10.0), WINDOW)
    assert up.y < WINDOW.y / 2
    assert up.x == pytest.approx(WINDOW.x / 2)


def test_zoom_scales_distance_from_centre():
    point = Vec2(20.0, 10.0)
    base = _camera().unproject(point, WINDOW) - WINDOW / 2
    zoomed = _camera(zoom=2.0).unproject(point, WINDOW) - WINDOW / 2
    assert (zoomed.x, zoomed.y) == pytest.approx((base.x * 2, base.y * 2))


def test_fixed_size_overrides_viewport():
    camera = _camera(size=Vec2(WINDOW.x / 2, WINDOW.y / 2))
    point = Vec2(20.0, 10.0)
    fixed = camera.unproject(point, WINDOW) - WINDOW / 2
    base = _camera().unproject(point, WINDOW) - WINDOW / 2
    assert (fixed.x, fixed.y) == pytest.approx((base.x * 2, base.y * 2))


@pytest.mark.parametrize("rotation", [0.0, 0.9])
def test_matrix_agrees_with_screen_transform(rotation):
    camera = _camera(position=(5.0, -8.0), rotation=rotation, zoom=1.5)
    world = Vec2(40.0, 25.0)
    clip = camera.matrix(WINDOW) @ np.array([world.x, world.y, 0.0, 1.0])
    screen = camera.unproject(world, WINDOW)
    expected_x = (clip[0] + 1.0) / 2.0 * WINDOW.x
    expected_y = (1.0 - clip[1]) / 2.0 * WINDOW.y
    assert (screen.x, screen.y) == pytest.approx((expected_x, expected_y))


def test_build_matrix_puts_position_at_clip_origin():
    m = build_matrix((640.0, 480.0), (3.0, 4.0), 0.3, 2.0)
    clip = m @ np.array([3.0, 4.0, 0.0, 1.0])
    assert clip[:2] == pytest.approx([0.0, 0.0])


def test_build_matrix_clamps_zero_zoom():
    m = build_matrix((640.0, 480.0), (0.0, 0.0), 0.0, 0.0)
    assert np.all(np.isfinite(m))
    assert m[0, 0] > 0
import numpy as np
import pytest

from terminal_pixels.projection import Camera, map_points_3d
from terminal_pixels.surface import BufferSurface


def test_project_in_front():
    camera = Camera()
    assert camera.project((1.0, 2.0, 4.0)) == pytest.approx((0.25, 0.5))


def test_fov_scales_image_plane():
    camera = Camera(fov=60.0)
    x, y = camera.project((1.0, 0.0, 1.0))
    assert x == pytest.approx(np.tan(np.radians(30.0)))
    assert y == pytest.approx(0.0)


def test_points_behind_or_on_camera_plane_are_not_projected():
    camera = Camera(pos=(0.0, 0.0, 1.0))
    assert camera.project((0.0, 0.0, 0.0)) is None
    assert camera.project((3.0, 2.0, 1.0)) is None
    assert camera.project((0.0, 0.0, 1.0 + 1e-9)) is None


def test_direction_is_normalized():
    camera = Camera(direction=(0.0, 0.0, 10.0))
    assert np.linalg.norm(camera.direction) == pytest.approx(1.0)


def test_sideways_camera():
    camera = Camera(direction=(1.0, 0.0, 0.0))
    assert camera.project((2.0, 1.0, 0.0)) == pytest.approx((0.0, 0.5))


def test_camera_looking_up():
    camera = Camera(direction=(0.0, 1.0, 0.0))
    assert camera.project((0.0, 5.0, 0.0)) == pytest.approx((0.0, 0.0))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"direction": (0.0, 0.0, 0.0)},
        {"fov": 0.0},
        {"fov": 180.0},
        {"near": 0.0},
    ],
)
def test_invalid_camera(kwargs):
    with pytest.raises(ValueError):
        Camera(**kwargs)


def test_project_points_drops_unprojectable():
    camera = Camera()
    projected = camera.project_points([(0.0, 0.0, 2.0), (0.0, 0.0, -2.0)])
    assert projected == [pytest.approx((0.0, 0.0))]


def test_map_points_3d():
    surface = BufferSurface(40, 20)
    map_points_3d(surface, Camera(), [(0.0, 0.0, 5.0), (0.0, 0.0, -5.0)])
    assert surface.painted.sum() == 2
    assert surface.painted[11, 21] and surface.painted[11, 22]

import math

import numpy as np
import pytest

from ewrender.camera import Camera, look_at, orthographic, perspective


def _project(m, point):
    clip = m @ np.append(np.asarray(point, dtype=float), 1.0)
    return clip[:3] / clip[3]


def test_defaults():
    cam = Camera()
    assert np.allclose(cam.position, [0.0, 0.0, 5.0])
    assert np.allclose(cam.target, 0.0)
    assert (cam.fov, cam.near_plane, cam.far_plane) == (60.0, 0.01, 100.0)
    assert cam.ortho_height == 6.0
    assert cam.aspect_ratio == 1.77
    assert cam.orthographic is False


def test_view_moves_eye_to_origin_and_target_down_minus_z():
    cam = Camera(position=[0.0, 2.0, 4.0], target=[0.0, 0.0, 0.0])
    view = cam.view_matrix()
    assert np.allclose(_project(view, cam.position), 0.0)
    t = _project(view, cam.target)
    distance = np.linalg.norm(cam.target - cam.position)
    assert np.allclose(t[:2], 0.0)
    assert t[2] == pytest.approx(-distance)


def test_view_rotation_is_orthonormal():
    view = Camera(position=[3.0, 1.0, -2.0], target=[0.5, 0.0, 1.0]).view_matrix()
    r = view[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))


def test_view_straight_down_uses_alternate_up():
    cam = Camera(position=[0.0, 5.0, 0.0], target=[0.0, 0.0, 0.0])
    view = cam.view_matrix()
    assert np.all(np.isfinite(view))
    assert np.allclose(view, look_at(cam.position, cam.target, [0.0, 0.0, 1.0]))


def test_view_rejects_coincident_eye_and_target():
    with pytest.raises(ValueError):
        Camera(position=[1.0, 1.0, 1.0], target=[1.0, 1.0, 1.0]).view_matrix()


def test_perspective_maps_near_and_far_to_clip_bounds():
    m = perspective(math.radians(60.0), 1.5, 0.1, 50.0)
    assert _project(m, [0.0, 0.0, -0.1])[2] == pytest.approx(-1.0)
    assert _project(m, [0.0, 0.0, -50.0])[2] == pytest.approx(1.0)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 10.0)


def test_orthographic_maps_box_corners_to_unit_cube():
    m = orthographic(-3.0, 5.0, -2.0, 4.0, 0.5, 20.0)
    low = _project(m, [-3.0, -2.0, -0.5])
    high = _project(m, [5.0, 4.0, -20.0])
    assert np.allclose(low, -1.0)
    assert np.allclose(high, 1.0)


def test_orthographic_rejects_empty_volume():
    with pytest.raises(ValueError):
        orthographic(1.0, 1.0, -1.0, 1.0, 0.1, 10.0)


def test_projection_selects_mode():
    cam = Camera(aspect_ratio=1.5)
    assert np.allclose(
        cam.projection_matrix(),
        perspective(math.radians(cam.fov), 1.5, cam.near_plane, cam.far_plane),
    )
    cam.orthographic = True
    half_w = cam.ortho_height * 1.5 / 2
    half_h = cam.ortho_height / 2
    corner = _project(cam.projection_matrix(), [half_w, half_h, -cam.near_plane])
    assert np.allclose(corner, [1.0, 1.0, -1.0])
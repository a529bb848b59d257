import math

import pytest

from ps2suitcase.camera import OrbitCamera


def _apply(matrix, point):
    vec = (*point, 1.0)
    return tuple(sum(row[i] * vec[i] for i in range(4)) for row in matrix)


def test_reset_view_restores_defaults():
    camera = OrbitCamera()
    camera.update(1.0, 0.5, 3.0)
    camera.reset_view()
    assert camera.yaw == 0.0
    assert camera.pitch == 0.0
    assert camera.distance == 10.0


def test_pitch_is_clamped():
    camera = OrbitCamera()
    camera.update(0.0, 100.0, 0.0)
    assert camera.pitch == pytest.approx(1.54)
    camera.update(0.0, -200.0, 0.0)
    assert camera.pitch == pytest.approx(-1.54)


def test_distance_is_clamped_to_limits():
    camera = OrbitCamera(distance=10.0, min_distance=2.0, max_distance=20.0)
    camera.update(0.0, 0.0, 100.0)
    assert camera.distance == 2.0
    camera.update(0.0, 0.0, -100.0)
    assert camera.distance == 20.0


def test_zoom_moves_closer():
    camera = OrbitCamera(distance=10.0)
    camera.update(0.0, 0.0, 3.0)
    assert camera.distance == pytest.approx(7.0)


def test_yaw_accumulates():
    camera = OrbitCamera()
    camera.update(0.25, 0.0, 0.0)
    camera.update(0.5, 0.0, 0.0)
    assert camera.yaw == pytest.approx(0.75)


def test_invalid_distance_range_raises():
    camera = OrbitCamera(min_distance=5.0, max_distance=1.0)
    with pytest.raises(ValueError):
        camera.update(0.0, 0.0, 0.0)


@pytest.mark.parametrize("yaw,pitch", [(0.0, 0.0), (1.2, 0.3), (-2.0, -1.0)])
def test_position_is_distance_from_target(yaw, pitch):
    camera = OrbitCamera(target=(1.0, 2.0, 3.0), distance=7.0, yaw=yaw, pitch=pitch)
    assert math.dist(camera.position(), camera.target) == pytest.approx(7.0)


@pytest.mark.parametrize("yaw,pitch", [(0.0, 0.0), (0.7, 0.4), (3.0, -1.2)])
def test_view_matrix_maps_eye_and_target(yaw, pitch):
    camera = OrbitCamera(target=(0.0, 2.5, 0.0), distance=6.0, yaw=yaw, pitch=pitch)
    view = camera.view_matrix()
    eye = _apply(view, camera.position())
    assert eye == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=1e-9)
    target = _apply(view, camera.target)
    assert target == pytest.approx((0.0, 0.0, -6.0, 1.0), abs=1e-9)


def test_view_matrix_rotation_is_orthonormal():
    camera = OrbitCamera(yaw=0.9, pitch=0.6)
    view = camera.view_matrix()
    rows = [row[:3] for row in view[:3]]
    for i, a in enumerate(rows):
        for j, b in enumerate(rows):
            dot = sum(x * y for x, y in zip(a, b))
            assert dot == pytest.approx(1.0 if i == j else 0.0, abs=1e-9)
    assert view[3] == (0.0, 0.0, 0.0, 1.0)
"""An orbit camera circling a target point."""

from __future__ import annotations

import math
from dataclasses import dataclass

Vector3 = tuple[float, float, float]
Matrix4 = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]

_PITCH_LIMIT = 1.54  # about 88 degrees, keeps clear of the poles


def _clamp(value: float, low: float, high: float) -> float:
    if low > high:
        raise ValueError(f"invalid clamp range: {low} > {high}")
    return max(low, min(high, value))


def _sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Vector3, b: Vector3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vector3, b: Vector3) -> Vector3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Vector3) -> Vector3:
    length = math.sqrt(_dot(v, v))
    return (v[0] / length, v[1] / length, v[2] / length)


@dataclass
class OrbitCamera:
    """A camera at ``distance`` from ``target``, placed by yaw and pitch."""

    target: Vector3 = (0.0, 2.5, 0.0)
    distance: float = 10.0
    yaw: float = 0.0
    pitch: float = 0.0
    min_distance: float = 1.0
    max_distance: float = 50.0

    def update(self, delta_yaw: float, delta_pitch: float, delta_zoom: float) -> None:
        """Rotate and zoom, keeping pitch and distance within their limits."""
        self.yaw += delta_yaw
        self.pitch = _clamp(self.pitch + delta_pitch, -_PITCH_LIMIT, _PITCH_LIMIT)
        self.distance = _clamp(
            self.distance - delta_zoom, self.min_distance, self.max_distance
        )

    def position(self) -> Vector3:
        """Return the camera position in world space."""
        cos_pitch = math.cos(self.pitch)
        x = self.distance * cos_pitch * math.sin(self.yaw)
        y = self.distance * math.sin(self.pitch)
        z = self.distance * cos_pitch * math.cos(self.yaw)
        tx, ty, tz = self.target
        return (x + tx, y + ty, z + tz)

    def view_matrix(self) -> Matrix4:
        """Return the right-handed look-at view matrix, row-major."""
        eye = self.position()
        f = _normalize(_sub(tuple(self.target), eye))
        s = _normalize(_cross(f, (0.0, 1.0, 0.0)))
        u = _cross(s, f)
        return (
            (s[0], s[1], s[2], -_dot(eye, s)),
            (u[0], u[1], u[2], -_dot(eye, u)),
            (-f[0], -f[1], -f[2], _dot(eye, f)),
            (0.0, 0.0, 0.0, 1.0),
        )

    def reset_view(self) -> None:
        """Return to the default orientation and distance."""
        self.yaw = 0.0
        self.pitch = 0.0
        self.distance = 10.0
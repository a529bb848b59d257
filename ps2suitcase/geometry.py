"""Vertex layouts and geometry for previewing ICN models."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ps2suitcase.animation import Key, Timeline

_FLOAT_SIZE = 4

Vector3 = tuple[float, float, float]


@dataclass
class Attributes:
    """An interleaved vertex layout: attribute names, widths and byte offsets."""

    size: int = 0
    attributes: list[tuple[str, int, int]] = field(default_factory=list)

    def float(self, name: str, n: int) -> Attributes:
        """Append an attribute of ``n`` floats and return the layout."""
        self.attributes.append((name, n, self.size))
        self.size += n * _FLOAT_SIZE
        return self


def attributes() -> Attributes:
    """Start an empty vertex layout."""
    return Attributes()


_BOX_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),  # bottom rectangle
    (4, 5), (5, 6), (6, 7), (7, 4),  # top rectangle
    (0, 4), (1, 5), (2, 6), (3, 7),  # vertical lines
)


def generate_wireframe_box(size: Vector3, center: Vector3) -> list[float]:
    """Return line-segment endpoints outlining a box, six floats per edge."""
    hx, hy, hz = (c * 0.5 for c in size)
    corners = [
        (-hx, -hy, -hz),
        (hx, -hy, -hz),
        (hx, hy, -hz),
        (-hx, hy, -hz),
        (-hx, -hy, hz),
        (hx, -hy, hz),
        (hx, hy, hz),
        (-hx, hy, hz),
    ]
    cx, cy, cz = center
    lines: list[float] = []
    for start, end in _BOX_EDGES:
        for x, y, z in (corners[start], corners[end]):
            lines.extend((x + cx, y + cy, z + cz))
    return lines


def generate_grid_lines(size: int, step: float) -> list[float]:
    """Return line segments of a square grid on the XZ plane."""
    half = size * step
    lines: list[float] = []
    for i in range(-size, size + 1):
        p = i * step
        lines.extend((p, 0.0, -half, p, 0.0, half))
        lines.extend((-half, 0.0, p, half, 0.0, p))
    return lines


def build_timelines(frames: Iterable[Sequence[Key]]) -> list[Timeline]:
    """Build one weight timeline per animation frame.

    The first frame gets an extra key of full weight at time zero.
    """
    timelines = []
    for index, keys in enumerate(frames):
        keys = list(keys)
        if index == 0:
            keys.insert(0, Key(0.0, 1.0))
        timelines.append(Timeline(keys))
    return timelines


def blend_shapes(
    shapes: Sequence[Sequence[float]], timelines: Sequence[Timeline], frame: float
) -> list[float]:
    """Mix the animation shapes by their normalised timeline weights at ``frame``.

    Without timelines the first shape is returned unchanged.
    """
    if not shapes:
        raise ValueError("no animation shapes")
    if not timelines:
        return list(shapes[0])
    weights = [timeline.evaluate(float(frame)) for timeline in timelines]
    if len(shapes) > len(weights):
        raise ValueError(
            f"{len(shapes)} shapes but only {len(weights)} timelines"
        )
    total = sum(weights)
    vertices = [0.0] * len(shapes[0])
    for shape, weight in zip(shapes, weights):
        factor = weight / total
        for i, value in enumerate(shape):
            vertices[i] += value * factor
    return vertices
"""Rotations of points in 3D space about the coordinate axes.

Angles are given in degrees. Each rotation returns a new point; a grid
of points can be rotated in place with :func:`rotate_grid`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, MutableSequence

ISO_ANGLE = 30.0


@dataclass(frozen=True)
class Point:
    """A point in 3D space."""

    x: float
    y: float
    z: float


Rotation = Callable[[Point, float], Point]


def _sin_cos(angle: float) -> tuple[float, float]:
    rad = math.radians(angle)
    return math.sin(rad), math.cos(rad)


def rot_x(p: Point, angle: float) -> Point:
    """Rotate ``p`` by ``angle`` degrees about the x axis."""
    s, c = _sin_cos(angle)
    return Point(p.x, p.y * c - p.z * s, p.y * s + p.z * c)


def rot_y(p: Point, angle: float) -> Point:
    """Rotate ``p`` by ``angle`` degrees about the y axis."""
    s, c = _sin_cos(angle)
    return Point(p.x * c + p.z * s, p.y, -p.x * s + p.z * c)


def rot_z(p: Point, angle: float) -> Point:
    """Rotate ``p`` by ``angle`` degrees about the z axis."""
    s, c = _sin_cos(angle)
    return Point(p.x * c - p.y * s, p.x * s + p.y * c, p.z)


def rot_iso_home(p: Point) -> Point:
    """Turn ``p`` into the home isometric view: 30 degrees about x, then 30 about y."""
    return rot_y(rot_x(p, ISO_ANGLE), ISO_ANGLE)


def rotate_grid(
    grid: List[MutableSequence[Point]], func: Rotation, angle: float
) -> None:
    """Replace every point of ``grid`` (a list of rows) by ``func(point, angle)``."""
    for row in grid:
        row[:] = [func(point, angle) for point in row]
"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

# (xmin, ymin, xmax, ymax), same convention as shapely's .bounds
Rect = tuple[float, float, float, float]
Point = tuple[float, float]


def rect_center(rect: Rect) -> Point:
    """Midpoint of a rect."""
    xmin, ymin, xmax, ymax = rect
    return ((xmin + xmax) * 0.5, (ymin + ymax) * 0.5)


def rect_size(rect: Rect) -> tuple[float, float]:
    xmin, ymin, xmax, ymax = rect
    return (xmax - xmin, ymax - ymin)


def centre_rect_on_point(width: float, height: float, cp: Point) -> Rect:
    """Rect of the given size whose midpoint is cp."""
    hw = width * 0.5
    hh = height * 0.5
    return (cp[0] - hw, cp[1] - hh, cp[0] + hw, cp[1] + hh)


def covering_square(rect: Rect, factor: float = math.sqrt(2)) -> Rect:
    """Square around rect's center with side = longest side * factor.

    With factor = sqrt(2) the square covers the rect under any rotation about
    its center.
    """
    w, h = rect_size(rect)
    side = max(w, h) * factor
    return centre_rect_on_point(side, side, rect_center(rect))


def rotation_transform(angle: float, cp: Point) -> NDArray[np.float64]:
    """3x3 affine matrix rotating by angle (radians) about cp."""
    c = math.cos(angle)
    s = math.sin(angle)
    px, py = cp
    return np.array(
        [
            [c, -s, px - c * px + s * py],
            [s, c, py - s * px - c * py],
            [0.0, 0.0, 1.0],
        ]
    )


def transform_point(matrix: NDArray[np.float64], point: Point) -> Point:
    """Apply a 3x3 affine matrix to a single point."""
    x, y = point
    return (
        float(matrix[0, 0] * x + matrix[0, 1] * y + matrix[0, 2]),
        float(matrix[1, 0] * x + matrix[1, 1] * y + matrix[1, 2]),
    )

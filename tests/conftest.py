"""Shared test fixtures."""

from __future__ import annotations

import pytest

from patternfill.engine.motif import Motif
from patternfill.engine.region import PolygonRegion


# Square of side 20 centred on the origin
SQUARE_20_POINTS = [(-10.0, -10.0), (10.0, -10.0), (10.0, 10.0), (-10.0, 10.0)]

# Square of side 40 centred on the origin
SQUARE_40_POINTS = [(-20.0, -20.0), (20.0, -20.0), (20.0, 20.0), (-20.0, 20.0)]

SQUARE_PATH = "M 0 0 H 20 V 20 H 0 Z"

DONUT_PATH = "M 0 0 H 30 V 30 H 0 Z M 10 10 H 20 V 20 H 10 Z"

CIRCLE_PATH = "M 0 10 A 10 10 0 1 0 0 -10 A 10 10 0 1 0 0 10 Z"

TRIANGLE_PATH = "M 0 0 L 60 0 L 30 50 Z"


class PointRegion:
    """Zero-area region: bounds collapse to a single point, nothing is inside."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = x
        self.y = y

    def bounding_rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.x, self.y)

    def contains(self, point: tuple[float, float]) -> bool:
        return False

    def intersects(self, rect: tuple[float, float, float, float]) -> bool:
        return False


@pytest.fixture
def motif() -> Motif:
    return Motif(width=10.0, height=10.0)


@pytest.fixture
def square_20() -> PolygonRegion:
    return PolygonRegion.from_points(SQUARE_20_POINTS)


@pytest.fixture
def square_40() -> PolygonRegion:
    return PolygonRegion.from_points(SQUARE_40_POINTS)

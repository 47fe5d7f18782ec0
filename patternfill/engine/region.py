"""Fill regions — the boundary a pattern is clipped to.

The tiler only needs three things from a region: its bounds, a point
containment test and a rect/outline crossing test. ``PolygonRegion`` provides
them on top of a shapely polygon; anything with the same three methods can be
passed to ``FillPattern.fill`` instead.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import numpy as np
import shapely
from numpy.typing import NDArray
from shapely.geometry import MultiPolygon, Point as ShapelyPoint, Polygon, box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from patternfill.utils.geometry import Point, Rect

logger = logging.getLogger(__name__)


@runtime_checkable
class BoundaryPath(Protocol):
    """Closed region a pattern fills."""

    def bounding_rect(self) -> Rect: ...

    def contains(self, point: Point) -> bool: ...

    def intersects(self, rect: Rect) -> bool:
        """True when the region's outline crosses ``rect``."""
        ...


class PolygonRegion:
    """Shapely-backed boundary path.

    The geometry and its outline are prepared on construction so that the
    per-cell tests in a dense pattern stay cheap.
    """

    def __init__(self, geometry: BaseGeometry) -> None:
        if not isinstance(geometry, (Polygon, MultiPolygon)):
            raise TypeError(f"Expected a polygonal geometry, got {geometry.geom_type}")
        if not geometry.is_empty and not geometry.is_valid:
            geometry = polygonal(shapely.make_valid(geometry))
        self.geometry = geometry
        self.outline = geometry.boundary
        if not geometry.is_empty:
            shapely.prepare(self.geometry)
            shapely.prepare(self.outline)

    @classmethod
    def from_points(cls, points: NDArray[np.float64] | list[Point]) -> PolygonRegion:
        pts = np.asarray(points, dtype=np.float64)
        if len(pts) < 3:
            logger.debug("Region from %d points is degenerate, using empty polygon", len(pts))
            return cls.empty()
        return cls(Polygon(pts))

    @classmethod
    def from_rect(cls, rect: Rect) -> PolygonRegion:
        return cls(box(*rect))

    @classmethod
    def empty(cls) -> PolygonRegion:
        return cls(Polygon())

    @property
    def is_empty(self) -> bool:
        return self.geometry.is_empty

    def bounding_rect(self) -> Rect:
        if self.geometry.is_empty:
            return (0.0, 0.0, 0.0, 0.0)
        xmin, ymin, xmax, ymax = self.geometry.bounds
        return (float(xmin), float(ymin), float(xmax), float(ymax))

    def contains(self, point: Point) -> bool:
        return bool(self.geometry.contains(ShapelyPoint(point)))

    def intersects(self, rect: Rect) -> bool:
        return bool(self.outline.intersects(box(*rect)))

    def __repr__(self) -> str:
        return f"PolygonRegion(bounds={self.bounding_rect()}, area={self.geometry.area:.3g})"


def polygonal(geometry: BaseGeometry) -> BaseGeometry:
    """Drop the non-areal parts make_valid can leave behind (collapsed edges, spikes)."""
    if isinstance(geometry, (Polygon, MultiPolygon)):
        return geometry
    parts = [g for g in getattr(geometry, "geoms", []) if isinstance(g, (Polygon, MultiPolygon))]
    if not parts:
        return Polygon()
    return unary_union(parts)

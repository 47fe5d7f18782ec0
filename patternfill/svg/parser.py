"""SVG path data → fill region. Facade over svgpathtools + shapely."""

from __future__ import annotations

import logging

import numpy as np
import shapely
from shapely.geometry import Polygon
from svgpathtools import Line, Path, parse_path

from patternfill.engine.region import PolygonRegion, polygonal

logger = logging.getLogger(__name__)


def parse_region(d: str, samples_per_segment: int = 24) -> PolygonRegion:
    """Parse SVG path data into a fillable region.

    Each closed-or-not sub-path is treated as a ring. Rings are combined
    even-odd, so a sub-path inside another cuts a hole. Malformed data gives
    an empty region.
    """
    try:
        path = parse_path(d)
    except Exception as e:
        logger.warning("Failed to parse path data: %s", e)
        return PolygonRegion.empty()

    if len(path) == 0:
        return PolygonRegion.empty()

    geometry = Polygon()
    for subpath in path.continuous_subpaths():
        points = _sample_path(subpath, samples_per_segment)
        if len(points) < 3:
            continue
        ring = Polygon(points)
        if not ring.is_valid:
            ring = polygonal(shapely.make_valid(ring))
        if ring.is_empty:
            continue
        geometry = geometry.symmetric_difference(ring)

    geometry = polygonal(geometry)
    if geometry.is_empty:
        logger.debug("Path data %r encloses no area", d[:40])
        return PolygonRegion.empty()

    return PolygonRegion(geometry)


def _sample_path(path: Path, samples_per_segment: int) -> list[tuple[float, float]]:
    """Flatten a path to points. Lines keep their endpoints, curves are sampled."""
    points: list[tuple[float, float]] = []

    for seg in path:
        if isinstance(seg, Line):
            ts = [0.0]
        else:
            ts = np.linspace(0, 1, samples_per_segment, endpoint=False)
        for t in ts:
            pt = seg.point(t)
            points.append((float(pt.real), float(pt.imag)))

    if len(path) > 0:
        end = path[-1].end
        points.append((float(end.real), float(end.imag)))

    return points

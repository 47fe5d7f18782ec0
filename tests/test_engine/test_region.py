"""Tests for shapely-backed fill regions."""

from __future__ import annotations

import pytest
from shapely.geometry import LineString, Polygon

from patternfill.engine.region import BoundaryPath, PolygonRegion
from tests.conftest import PointRegion


def test_bounds(square_20):
    assert square_20.bounding_rect() == (-10.0, -10.0, 10.0, 10.0)


def test_contains_excludes_outline(square_20):
    assert square_20.contains((0.0, 0.0))
    assert not square_20.contains((10.0, 0.0))
    assert not square_20.contains((30.0, 0.0))


def test_intersects_means_outline_crossing(square_20):
    # wholly inside: outline untouched
    assert not square_20.intersects((-5.0, -5.0, 5.0, 5.0))
    # straddles the right edge
    assert square_20.intersects((5.0, -5.0, 15.0, 5.0))
    # wholly outside
    assert not square_20.intersects((20.0, 20.0, 30.0, 30.0))
    # encloses the whole region
    assert square_20.intersects((-50.0, -50.0, 50.0, 50.0))


def test_hole_outline_counts_as_crossing():
    outer = [(0, 0), (30, 0), (30, 30), (0, 30)]
    hole = [(10, 10), (20, 10), (20, 20), (10, 20)]
    region = PolygonRegion(Polygon(outer, [hole]))
    assert not region.contains((15.0, 15.0))
    assert region.contains((5.0, 5.0))
    assert region.intersects((8.0, 8.0, 22.0, 22.0))


def test_degenerate_points_give_empty_region():
    region = PolygonRegion.from_points([(0.0, 0.0), (1.0, 1.0)])
    assert region.is_empty
    assert region.bounding_rect() == (0.0, 0.0, 0.0, 0.0)
    assert not region.contains((0.0, 0.0))


def test_self_intersecting_polygon_is_repaired():
    bowtie = PolygonRegion.from_points([(0, 0), (10, 10), (10, 0), (0, 10)])
    assert bowtie.geometry.is_valid
    assert bowtie.contains((2.0, 5.0))


def test_rejects_non_polygonal_geometry():
    with pytest.raises(TypeError):
        PolygonRegion(LineString([(0, 0), (1, 1)]))


def test_protocol_conformance(square_20):
    assert isinstance(square_20, BoundaryPath)
    assert isinstance(PointRegion(), BoundaryPath)

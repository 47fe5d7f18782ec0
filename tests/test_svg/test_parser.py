"""Tests for SVG path data → region parsing."""

from __future__ import annotations

import pytest

from patternfill.svg.parser import parse_region
from tests.conftest import CIRCLE_PATH, DONUT_PATH, SQUARE_PATH, TRIANGLE_PATH


def test_parse_square():
    region = parse_region(SQUARE_PATH)
    assert region.bounding_rect() == (0.0, 0.0, 20.0, 20.0)
    assert region.geometry.area == pytest.approx(400.0)
    assert region.contains((10.0, 10.0))


def test_parse_triangle():
    region = parse_region(TRIANGLE_PATH)
    assert region.geometry.area == pytest.approx(60 * 50 / 2)
    assert region.contains((30.0, 20.0))
    assert not region.contains((5.0, 40.0))


def test_parse_circle_samples_arcs():
    region = parse_region(CIRCLE_PATH)
    xmin, ymin, xmax, ymax = region.bounding_rect()
    assert xmin == pytest.approx(-10.0, abs=0.5)
    assert xmax == pytest.approx(10.0, abs=0.5)
    assert ymin == pytest.approx(-10.0, abs=0.5)
    assert ymax == pytest.approx(10.0, abs=0.5)
    assert region.contains((0.0, 0.0))


def test_inner_subpath_cuts_hole():
    region = parse_region(DONUT_PATH)
    assert region.geometry.area == pytest.approx(900.0 - 100.0)
    assert region.contains((5.0, 5.0))
    assert not region.contains((15.0, 15.0))


def test_empty_path_data_gives_empty_region():
    region = parse_region("")
    assert region.is_empty
    assert region.bounding_rect() == (0.0, 0.0, 0.0, 0.0)


def test_open_line_encloses_nothing():
    assert parse_region("M 0 0 L 10 0").is_empty

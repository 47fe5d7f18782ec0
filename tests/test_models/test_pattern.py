"""Tests for pattern parameters."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from patternfill.models.pattern import PatternParameters


CLAMP_CASES = [(-5, 0.0), (0, 0.0), (0.5, 0.5), (1, 1.0), (5, 1.0)]


def test_defaults():
    p = PatternParameters()
    assert p.scale == 1.0
    assert p.interval == 0.0
    assert p.alternate_offset == (0.0, 0.5)
    assert p.motif_angle_is_relative_to_pattern is True
    assert p.angle_is_relative_to_object is False
    assert p.suppress_clipped_elements is False
    assert p.wobble == 0.0
    assert p.motif_angle_randomness == 0.0


@pytest.mark.parametrize("value, stored", CLAMP_CASES)
def test_alternate_offset_clamped(value, stored):
    p = PatternParameters(alternate_offset=(value, value))
    assert p.alternate_offset == (stored, stored)

    p = PatternParameters()
    p.alternate_offset = (value, 0.25)
    assert p.alternate_offset == (stored, 0.25)


@pytest.mark.parametrize("value, stored", CLAMP_CASES)
def test_randomness_clamped(value, stored):
    p = PatternParameters(motif_angle_randomness=value, wobble=value)
    assert p.motif_angle_randomness == stored
    assert p.wobble == stored

    p = PatternParameters()
    p.motif_angle_randomness = value
    p.wobble = value
    assert p.motif_angle_randomness == stored
    assert p.wobble == stored


def test_scale_must_be_positive():
    with pytest.raises(ValidationError):
        PatternParameters(scale=0)
    p = PatternParameters()
    with pytest.raises(ValidationError):
        p.scale = -1.0


def test_interval_may_be_negative():
    assert PatternParameters(interval=-5.0).interval == -5.0


@pytest.mark.parametrize(
    "radians, degrees",
    [
        (0.0, 0.0),
        (math.pi / 2, 90.0),
        (-math.pi / 2, 270.0),
        (-math.pi, 180.0),
        (3 * math.pi, 540.0),
    ],
)
def test_degree_accessors_normalize_negative(radians, degrees):
    p = PatternParameters(angle=radians, motif_angle=radians)
    assert p.angle_degrees == pytest.approx(degrees)
    assert p.motif_angle_degrees == pytest.approx(degrees)


def test_degree_setters():
    p = PatternParameters()
    p.set_angle_degrees(45)
    p.set_motif_angle_degrees(-90)
    assert p.angle == pytest.approx(math.pi / 4)
    assert p.motif_angle == pytest.approx(-math.pi / 2)
    assert p.motif_angle_degrees == pytest.approx(270.0)

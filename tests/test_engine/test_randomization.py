"""Tests for the per-placement jitter cache."""

from __future__ import annotations

import math

from patternfill.engine.randomization import RandomizationCache


def test_wobble_is_cached_by_index():
    cache = RandomizationCache(seed=3)
    first = [cache.wobble_at(i, 10.0, 20.0, 0.5) for i in range(5)]
    again = [cache.wobble_at(i, 10.0, 20.0, 0.5) for i in range(5)]
    assert first == again
    assert len(cache.wobble_offsets) == 5


def test_wobble_range_per_axis():
    cache = RandomizationCache(seed=11)
    for i in range(200):
        jx, jy = cache.wobble_at(i, 10.0, 20.0, 0.5)
        assert -5.0 <= jx <= 5.0
        assert -10.0 <= jy <= 10.0


def test_cached_wobble_ignores_new_magnitude():
    cache = RandomizationCache(seed=5)
    before = cache.wobble_at(0, 10.0, 10.0, 0.1)
    assert cache.wobble_at(0, 10.0, 10.0, 1.0) == before


def test_angle_jitter_range():
    cache = RandomizationCache(seed=2)
    values = [cache.angle_jitter_at(i, 0.25) for i in range(200)]
    assert all(abs(v) <= 2 * math.pi * 0.25 for v in values)
    assert min(values) < 0 < max(values)


def test_same_seed_same_sequence():
    a = RandomizationCache(seed=42)
    b = RandomizationCache(seed=42)
    assert [a.angle_jitter_at(i, 1.0) for i in range(10)] == [b.angle_jitter_at(i, 1.0) for i in range(10)]


def test_clear_is_per_kind():
    cache = RandomizationCache(seed=1)
    cache.wobble_at(0, 1.0, 1.0, 1.0)
    cache.angle_jitter_at(0, 1.0)

    cache.clear_angle_jitter()
    assert cache.angle_jitter == []
    assert len(cache.wobble_offsets) == 1

    cache.angle_jitter_at(0, 1.0)
    cache.clear()
    assert cache.wobble_offsets == []
    assert cache.angle_jitter == []

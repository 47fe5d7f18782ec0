"""Per-placement jitter cache.

Jitter is generated once per placement index and replayed on every later
pass, so a pattern does not shuffle each time it is redrawn. The cache is
positional: entry ``i`` belongs to the ``i``-th cell of the traversal, which
only holds while the traversal order is the same on every pass.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


@dataclass
class RandomizationCache:
    wobble_offsets: list[tuple[float, float]] = field(default_factory=list)
    angle_jitter: list[float] = field(default_factory=list)
    seed: int | None = None
    _rng: np.random.Generator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._rng = np.random.default_rng(self.seed)

    def _signed_unit(self) -> float:
        """Uniform sample in [-1, 1]."""
        return float(self._rng.uniform(-1.0, 1.0))

    def wobble_at(self, index: int, dx: float, dy: float, wobble: float) -> tuple[float, float]:
        """Positional jitter for a placement, in [-dx*wobble, dx*wobble] x [-dy*wobble, dy*wobble].

        Cached values are returned unchanged even if dx, dy or wobble have
        changed since they were generated.
        """
        if index < len(self.wobble_offsets):
            return self.wobble_offsets[index]
        offset = (self._signed_unit() * dx * wobble, self._signed_unit() * dy * wobble)
        self.wobble_offsets.append(offset)
        return offset

    def angle_jitter_at(self, index: int, randomness: float) -> float:
        """Angular jitter for a placement, in [-2*pi*randomness, 2*pi*randomness]."""
        if index < len(self.angle_jitter):
            return self.angle_jitter[index]
        jitter = self._signed_unit() * 2.0 * math.pi * randomness
        self.angle_jitter.append(jitter)
        return jitter

    def clear_wobble(self) -> None:
        self.wobble_offsets.clear()

    def clear_angle_jitter(self) -> None:
        self.angle_jitter.clear()

    def clear(self) -> None:
        self.clear_wobble()
        self.clear_angle_jitter()

"""Tiler configuration — constants that shape the grid but are not pattern state."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class TilerConfig:
    """Controls grid coverage and randomization source."""

    # Longest side of the region bounds is multiplied by this to get the side of
    # the square the grid covers. sqrt(2) = worst-case diagonal of a rotated square.
    cover_factor: float = math.sqrt(2)

    # Seed for the jitter generator. None = fresh entropy per pattern object.
    seed: int | None = None

    # Samples per curved segment when flattening SVG path data into a polygon
    path_samples: int = 24

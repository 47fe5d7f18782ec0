"""Pattern tiler — fills a region with a rotated, optionally jittered grid of motifs.

The grid is laid out on a square centred on the region's bounds, large enough
to cover the region under any rotation. Cells are visited row-major (rows
outer, columns inner), each cell is offset, jittered and rotated about the
centre, optionally culled against the region, and handed to a drawer.

Malformed input (no motif, non-positive or non-finite motif size or grid step)
draws nothing. It never raises: a pattern that cannot render must not abort
the drawing that contains it.

Not thread-safe. The jitter caches are mutated in place during ``fill``, so
callers sharing one pattern between threads must serialize access.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from patternfill.engine.config import TilerConfig
from patternfill.engine.drawer import MotifDrawer
from patternfill.engine.motif import Motif, MotifImage
from patternfill.engine.randomization import RandomizationCache
from patternfill.engine.region import BoundaryPath, PolygonRegion
from patternfill.engine.shape import OwnerShape
from patternfill.models.pattern import PatternParameters
from patternfill.utils.geometry import (
    Point,
    Rect,
    centre_rect_on_point,
    covering_square,
    rect_center,
    rect_size,
    rotation_transform,
    transform_point,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridLayout:
    """Grid covering a region: centre, step and half-counts."""

    center: Point
    square: Rect
    dx: float
    dy: float
    rows: int
    cols: int

    @property
    def cell_count(self) -> int:
        return 2 * self.rows * 2 * self.cols

    def cells(self) -> Iterator[tuple[int, int]]:
        """(col, row) pairs in traversal order. Jitter caches depend on this order."""
        for row in range(-self.rows, self.rows):
            for col in range(-self.cols, self.cols):
                yield col, row


def grid_step(motif_size: tuple[float, float], interval: float, scale: float) -> tuple[float, float]:
    """Column and row step. Interval is scaled with the motif."""
    mw, mh = motif_size
    return ((mw + interval) * scale, (mh + interval) * scale)


def grid_layout(
    bounds: Rect,
    motif_size: tuple[float, float],
    interval: float,
    scale: float,
    cover_factor: float = math.sqrt(2),
) -> GridLayout | None:
    """Lay out the grid for a region's bounds, or None unless the step is finite and positive."""
    dx, dy = grid_step(motif_size, interval, scale)
    if not (math.isfinite(dx) and math.isfinite(dy)) or dx <= 0.0 or dy <= 0.0:
        return None

    square = covering_square(bounds, cover_factor)
    side_w, side_h = rect_size(square)

    # half-counts: the grid runs from -cols to +cols around the centre
    cols = math.floor(side_w / dx / 2) + 1
    rows = math.floor(side_h / dy / 2) + 1

    return GridLayout(
        center=rect_center(bounds),
        square=square,
        dx=dx,
        dy=dy,
        rows=rows,
        cols=cols,
    )


def effective_angles(params: PatternParameters, owner_rotation: float) -> tuple[float, float]:
    """(pattern angle, motif angle) after applying the relative flags."""
    pattern_angle = params.angle
    motif_angle = params.motif_angle

    if params.angle_is_relative_to_object:
        pattern_angle += owner_rotation
        motif_angle += owner_rotation

    # pattern_angle already carries the owner rotation, so with both flags set
    # the owner rotation is counted twice
    if params.motif_angle_is_relative_to_pattern:
        motif_angle += pattern_angle

    return pattern_angle, motif_angle


def cell_position(col: int, row: int, layout: GridLayout, alternate_offset: tuple[float, float]) -> Point:
    """Unrotated, unjittered centre of a cell.

    Odd ROWS shift along x and odd COLUMNS shift along y.
    """
    alt_x, alt_y = alternate_offset
    cx, cy = layout.center

    if row & 1:
        x = layout.dx * (col + alt_x) + cx
    else:
        x = layout.dx * col + cx

    if col & 1:
        y = layout.dy * (row + alt_y) + cy
    else:
        y = layout.dy * row + cy

    return (x, y)


class _Param:
    """Delegates an attribute to the pattern's PatternParameters."""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: FillPattern | None, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return getattr(obj._params, self.name)

    def __set__(self, obj: FillPattern, value: Any) -> None:
        setattr(obj._params, self.name, value)


class FillPattern:
    """A motif repeated over a region."""

    scale = _Param()
    interval = _Param()
    angle = _Param()
    angle_is_relative_to_object = _Param()
    motif_angle = _Param()
    motif_angle_is_relative_to_pattern = _Param()
    alternate_offset = _Param()
    wobble = _Param()
    suppress_clipped_elements = _Param()
    enabled = _Param()

    def __init__(
        self,
        motif: MotifImage | None = None,
        params: PatternParameters | None = None,
        config: TilerConfig | None = None,
    ) -> None:
        self.motif = motif
        self.config = config or TilerConfig()
        self._params = params.model_copy() if params is not None else PatternParameters()
        self.randomization = RandomizationCache(seed=self.config.seed)
        # cells visited / culled by the most recent fill
        self.placement_count = 0
        self.culled_count = 0

    @classmethod
    def with_motif(cls, motif: MotifImage, **kwargs: Any) -> FillPattern:
        return cls(motif=motif, **kwargs)

    @classmethod
    def default(cls) -> FillPattern:
        return cls(motif=Motif.rect())

    # --- parameters ---

    @property
    def parameters(self) -> PatternParameters:
        """Snapshot of the current parameters. Mutating it does not affect the pattern."""
        return self._params.model_copy()

    def update(self, params: PatternParameters) -> None:
        """Replace all parameters, going through the same setters as single assignments."""
        for name in PatternParameters.model_fields:
            setattr(self, name, getattr(params, name))

    @property
    def motif_angle_randomness(self) -> float:
        return self._params.motif_angle_randomness

    @motif_angle_randomness.setter
    def motif_angle_randomness(self, value: float) -> None:
        previous = self._params.motif_angle_randomness
        self._params.motif_angle_randomness = value
        if self._params.motif_angle_randomness != previous:
            self.randomization.clear_angle_jitter()

    @property
    def angle_degrees(self) -> float:
        return self._params.angle_degrees

    @angle_degrees.setter
    def angle_degrees(self, degrees: float) -> None:
        self._params.set_angle_degrees(degrees)

    @property
    def motif_angle_degrees(self) -> float:
        return self._params.motif_angle_degrees

    @motif_angle_degrees.setter
    def motif_angle_degrees(self, degrees: float) -> None:
        self._params.set_motif_angle_degrees(degrees)

    @property
    def extra_space_needed(self) -> tuple[float, float]:
        # a fill never draws outside its region
        return (0.0, 0.0)

    @property
    def is_fill(self) -> bool:
        return True

    # --- rendering ---

    def layout_for(self, region: BoundaryPath) -> GridLayout | None:
        """Grid the next fill of ``region`` would traverse, or None if it would draw nothing."""
        if self.motif is None:
            return None
        mw, mh = self.motif.intrinsic_size()
        if not (math.isfinite(mw) and math.isfinite(mh)) or mw <= 0.0 or mh <= 0.0:
            return None
        return grid_layout(
            region.bounding_rect(),
            (mw, mh),
            self._params.interval,
            self._params.scale,
            self.config.cover_factor,
        )

    def render(self, shape: OwnerShape, drawer: MotifDrawer) -> None:
        """Fill a shape's boundary, following its rotation. Disabled patterns draw nothing."""
        if not self._params.enabled:
            return
        self.fill(shape.boundary(), shape.rotation(), drawer)

    def fill_rect(self, rect: Rect, drawer: MotifDrawer, owner_rotation: float = 0.0) -> None:
        self.fill(PolygonRegion.from_rect(rect), owner_rotation, drawer)

    def fill(self, region: BoundaryPath, owner_rotation: float, drawer: MotifDrawer) -> None:
        """Emit one placement per grid cell covering ``region``."""
        self.placement_count = 0
        self.culled_count = 0

        layout = self.layout_for(region)
        if layout is None:
            logger.debug("Pattern fill skipped: no motif, empty motif or non-positive step")
            return

        params = self._params
        pattern_angle, motif_angle = effective_angles(params, owner_rotation)
        tfm = rotation_transform(pattern_angle, layout.center)

        mw, mh = self.motif.intrinsic_size()
        box_w = mw * params.scale
        box_h = mh * params.scale

        logger.debug(
            "Pattern fill: %d rows x %d cols, step %.3g x %.3g, angle %.3g",
            2 * layout.rows,
            2 * layout.cols,
            layout.dx,
            layout.dy,
            pattern_angle,
        )

        index = 0
        culled = 0
        for col, row in layout.cells():
            x, y = cell_position(col, row, layout, params.alternate_offset)

            if params.wobble > 0.0:
                jx, jy = self.randomization.wobble_at(index, layout.dx, layout.dy, params.wobble)
                x += jx
                y += jy

            rotation = motif_angle
            if params.motif_angle_randomness > 0.0:
                rotation += self.randomization.angle_jitter_at(index, params.motif_angle_randomness)

            tp = transform_point(tfm, (x, y))

            # counted before culling so cache indices follow the traversal, not the output
            index += 1

            if params.suppress_clipped_elements and _is_clipped(region, tp, box_w, box_h):
                culled += 1
                continue

            drawer.place(tp, rotation)

        self.placement_count = index
        self.culled_count = culled
        logger.debug("Pattern fill: %d placed, %d culled", index - culled, culled)

    def copy(self) -> FillPattern:
        """Same motif and parameters; jitter is regenerated on the copy's first fill."""
        return FillPattern(motif=self.motif, params=self._params, config=self.config)

    def __repr__(self) -> str:
        return f"FillPattern(motif={self.motif!r}, params={self._params!r})"


def _is_clipped(region: BoundaryPath, point: Point, width: float, height: float) -> bool:
    """True if a motif box centred on ``point`` is not wholly inside ``region``.

    The point test runs first; the outline test is far more expensive.
    """
    if not region.contains(point):
        return True
    motif_box = centre_rect_on_point(width, height, point)
    return region.intersects(motif_box)

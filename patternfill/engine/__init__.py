"""Pattern fill engine."""

from patternfill.engine.config import TilerConfig
from patternfill.engine.drawer import MotifDrawer, Placement, PlacementRecorder
from patternfill.engine.motif import Motif, MotifImage
from patternfill.engine.randomization import RandomizationCache
from patternfill.engine.region import BoundaryPath, PolygonRegion
from patternfill.engine.shape import OwnerShape, Shape
from patternfill.engine.tiler import FillPattern, GridLayout, grid_layout

__all__ = [
    "TilerConfig",
    "MotifDrawer",
    "Placement",
    "PlacementRecorder",
    "Motif",
    "MotifImage",
    "RandomizationCache",
    "BoundaryPath",
    "PolygonRegion",
    "OwnerShape",
    "Shape",
    "FillPattern",
    "GridLayout",
    "grid_layout",
]

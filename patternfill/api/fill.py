"""POST /api/fill — lay out a pattern over a region."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from patternfill.config import Settings
from patternfill.dependencies import get_settings
from patternfill.engine.config import TilerConfig
from patternfill.engine.drawer import PlacementRecorder
from patternfill.engine.motif import Motif
from patternfill.engine.region import PolygonRegion
from patternfill.engine.tiler import FillPattern
from patternfill.models.requests import FillRequest
from patternfill.models.responses import FillResponse, PlacementOut
from patternfill.svg.parser import parse_region
from patternfill.svg.serializer import SvgMotifDrawer

logger = logging.getLogger(__name__)

router = APIRouter()


def _build(req: FillRequest, settings: Settings) -> tuple[FillPattern, PolygonRegion]:
    config = TilerConfig(seed=settings.random_seed)
    if req.path is not None:
        region = parse_region(req.path, samples_per_segment=config.path_samples)
    else:
        region = PolygonRegion.from_points(req.points or [])

    motif = Motif(width=req.motif.width, height=req.motif.height, markup=req.motif.markup)
    pattern = FillPattern(motif=motif, params=req.pattern, config=config)

    layout = pattern.layout_for(region)
    if layout is not None and layout.cell_count > settings.max_placements:
        raise HTTPException(
            status_code=422,
            detail=f"Pattern too dense: {layout.cell_count} cells exceeds limit of {settings.max_placements}",
        )
    return pattern, region


def _region_path_data(req: FillRequest) -> str:
    if req.path is not None:
        return req.path
    pts = req.points or []
    if not pts:
        return ""
    head, *rest = pts
    segments = [f"M {head[0]:g} {head[1]:g}"] + [f"L {x:g} {y:g}" for x, y in rest]
    return " ".join(segments) + " Z"


@router.post("/fill", response_model=FillResponse)
async def fill(req: FillRequest, settings: Settings = Depends(get_settings)) -> FillResponse:
    start = time.perf_counter()
    pattern, region = _build(req, settings)

    if region.is_empty:
        logger.info("Fill request with empty region, nothing to place")
        return FillResponse()

    recorder = PlacementRecorder()
    pattern.fill(region, req.owner_rotation, recorder)
    layout = pattern.layout_for(region)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Fill: %d placements (%d culled) in %.1fms",
        len(recorder),
        pattern.culled_count,
        elapsed,
    )

    return FillResponse(
        placements=[PlacementOut(x=p.x, y=p.y, rotation=p.rotation) for p in recorder.placements],
        rows=2 * layout.rows if layout else 0,
        cols=2 * layout.cols if layout else 0,
        cells_visited=pattern.placement_count,
        culled=pattern.culled_count,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/fill/svg")
async def fill_svg(req: FillRequest, settings: Settings = Depends(get_settings)) -> Response:
    pattern, region = _build(req, settings)
    motif = pattern.motif

    drawer = SvgMotifDrawer(motif, scale=pattern.scale)
    if not region.is_empty:
        pattern.fill(region, req.owner_rotation, drawer)

    xmin, ymin, xmax, ymax = region.bounding_rect()
    pad = max(motif.width, motif.height) * pattern.scale
    viewbox = (xmin - pad, ymin - pad, xmax + pad, ymax + pad)

    svg = drawer.to_svg(_region_path_data(req), viewbox, title="Pattern fill")
    return Response(content=svg, media_type="image/svg+xml")

"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class PlacementOut(BaseModel):
    x: float
    y: float
    rotation: float


class FillResponse(BaseModel):
    placements: list[PlacementOut] = Field(default_factory=list)
    rows: int = 0
    cols: int = 0
    cells_visited: int = 0
    culled: int = 0
    processing_time_ms: float = 0.0

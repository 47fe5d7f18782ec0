"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from patternfill.models.pattern import PatternParameters


class MotifSpec(BaseModel):
    width: float = Field(..., description="Motif intrinsic width")
    height: float = Field(..., description="Motif intrinsic height")
    markup: str = Field(default="", description="SVG markup drawn in the motif's (0, 0, w, h) box")


class FillRequest(BaseModel):
    path: str | None = Field(default=None, description="Region as SVG path data")
    points: list[tuple[float, float]] | None = Field(default=None, description="Region as polygon vertices")
    motif: MotifSpec
    owner_rotation: float = Field(default=0.0, description="Rotation of the shape being filled, radians")
    pattern: PatternParameters = Field(default_factory=PatternParameters)

    @model_validator(mode="after")
    def _one_region(self) -> FillRequest:
        if (self.path is None) == (self.points is None):
            raise ValueError("Exactly one of 'path' or 'points' is required")
        return self

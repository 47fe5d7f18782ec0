"""Pattern parameters — the persisted, user-editable state of a fill pattern."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from patternfill.utils.math_helpers import degrees_to_radians, limit, positive_degrees


class PatternParameters(BaseModel):
    """Scalar state of a fill pattern. Angles are radians.

    Fractional fields are clamped to [0, 1] on construction and on
    assignment rather than rejected.
    """

    model_config = ConfigDict(validate_assignment=True)

    scale: float = Field(default=1.0, gt=0, description="Uniform scale of motif size and spacing")
    interval: float = Field(default=0.0, description="Spacing added to the motif size before scaling")
    angle: float = Field(default=0.0, description="Rotation of the whole grid")
    angle_is_relative_to_object: bool = False
    motif_angle: float = Field(default=0.0, description="Rotation of each motif instance")
    motif_angle_is_relative_to_pattern: bool = True
    alternate_offset: tuple[float, float] = Field(
        default=(0.0, 0.5),
        description="Shift of odd rows (x) and odd columns (y) as a fraction of the step",
    )
    wobble: float = Field(default=0.0, description="Positional jitter, fraction of the step")
    motif_angle_randomness: float = Field(default=0.0, description="Angular jitter, fraction of a turn")
    suppress_clipped_elements: bool = False
    enabled: bool = True

    @field_validator("alternate_offset")
    @classmethod
    def _clamp_offset(cls, v: tuple[float, float]) -> tuple[float, float]:
        return (limit(v[0], 0.0, 1.0), limit(v[1], 0.0, 1.0))

    @field_validator("wobble", "motif_angle_randomness")
    @classmethod
    def _clamp_fraction(cls, v: float) -> float:
        return limit(v, 0.0, 1.0)

    @property
    def angle_degrees(self) -> float:
        return positive_degrees(self.angle)

    def set_angle_degrees(self, degrees: float) -> None:
        self.angle = degrees_to_radians(degrees)

    @property
    def motif_angle_degrees(self) -> float:
        return positive_degrees(self.motif_angle)

    def set_motif_angle_degrees(self, degrees: float) -> None:
        self.motif_angle = degrees_to_radians(degrees)

"""Save/restore a fill pattern as a flat set of named fields.

The field set is the pattern's own seven fields plus the decorator fields
(scale, interval, wobble, enabled) it shares with other motif decorators.
Missing fields restore as zero/false, except
``motif_angle_is_relative_to_pattern`` which restores as true so data saved
before that field existed keeps its old look.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from patternfill.engine.config import TilerConfig
from patternfill.engine.motif import MotifImage
from patternfill.engine.tiler import FillPattern
from patternfill.models.pattern import PatternParameters

logger = logging.getLogger(__name__)

PATTERN_FIELDS = (
    "alternate_offset",
    "angle",
    "angle_is_relative_to_object",
    "motif_angle",
    "motif_angle_is_relative_to_pattern",
    "suppress_clipped_elements",
    "motif_angle_randomness",
)

DECORATOR_FIELDS = ("scale", "interval", "wobble", "enabled")


class PatternArchive(BaseModel):
    """Archived field set. Values are stored as given; clamping happens on restore."""

    alternate_offset: tuple[float, float] = (0.0, 0.0)
    angle: float = 0.0
    angle_is_relative_to_object: bool = False
    motif_angle: float = 0.0
    motif_angle_is_relative_to_pattern: bool = True
    suppress_clipped_elements: bool = False
    motif_angle_randomness: float = 0.0

    scale: float = 1.0
    interval: float = 0.0
    wobble: float = 0.0
    enabled: bool = True

    def to_parameters(self) -> PatternParameters:
        return PatternParameters(**self.model_dump())


def save_pattern(pattern: FillPattern) -> dict[str, Any]:
    """Flat dict of named scalar/bool/size fields."""
    params = pattern.parameters
    archive = PatternArchive(**{name: getattr(params, name) for name in PATTERN_FIELDS + DECORATOR_FIELDS})
    return archive.model_dump()


def restore_pattern(
    data: dict[str, Any],
    motif: MotifImage | None = None,
    config: TilerConfig | None = None,
) -> FillPattern:
    """Rebuild a pattern from ``save_pattern`` output. Unknown keys are ignored."""
    unknown = set(data) - set(PATTERN_FIELDS + DECORATOR_FIELDS)
    if unknown:
        logger.debug("Ignoring unknown archive fields: %s", sorted(unknown))
    archive = PatternArchive.model_validate({k: v for k, v in data.items() if k not in unknown})
    return FillPattern(motif=motif, params=archive.to_parameters(), config=config)

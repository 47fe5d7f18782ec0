"""Owner shapes — the drawable a pattern is attached to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from patternfill.engine.region import BoundaryPath


@runtime_checkable
class OwnerShape(Protocol):
    def rotation(self) -> float: ...

    def boundary(self) -> BoundaryPath: ...


@dataclass
class Shape:
    """Minimal owner: a boundary plus the angle (radians) the shape is drawn at."""

    path: BoundaryPath
    angle: float = 0.0

    def rotation(self) -> float:
        return self.angle

    def boundary(self) -> BoundaryPath:
        return self.path

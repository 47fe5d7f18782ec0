"""Placement sinks — what the tiler hands each motif instance to."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from patternfill.utils.geometry import Point


@runtime_checkable
class MotifDrawer(Protocol):
    def place(self, position: Point, rotation: float) -> None: ...


@dataclass(frozen=True)
class Placement:
    """One emitted motif instance."""

    x: float
    y: float
    rotation: float

    @property
    def position(self) -> Point:
        return (self.x, self.y)


@dataclass
class PlacementRecorder:
    """Drawer that keeps every placement in emission order."""

    placements: list[Placement] = field(default_factory=list)

    def place(self, position: Point, rotation: float) -> None:
        self.placements.append(Placement(x=position[0], y=position[1], rotation=rotation))

    def __len__(self) -> int:
        return len(self.placements)

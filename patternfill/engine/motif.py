"""Motifs — the repeated element of a pattern."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class MotifImage(Protocol):
    def intrinsic_size(self) -> tuple[float, float]: ...


@dataclass(frozen=True)
class Motif:
    """Sized motif with optional SVG markup drawn in a (0, 0, width, height) box."""

    width: float
    height: float
    markup: str = ""
    name: str = "motif"

    def intrinsic_size(self) -> tuple[float, float]:
        return (self.width, self.height)

    @classmethod
    def rect(cls, size: float = 10.0) -> Motif:
        """Plain square motif, the stock motif of a new pattern."""
        return cls(
            width=size,
            height=size,
            markup=f'<rect x="0" y="0" width="{size:g}" height="{size:g}" />',
            name="rect",
        )

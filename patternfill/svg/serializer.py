"""Write SVG output for a pattern fill.

Each placement becomes a ``<use>`` of a single motif ``<symbol>``, clipped to
the fill region.
"""

from __future__ import annotations

import math
from typing import Any
from xml.sax.saxutils import escape

from patternfill.engine.motif import Motif
from patternfill.utils.geometry import Point, Rect


def serialize_svg(
    elements: list[dict[str, Any]],
    viewbox: Rect,
    defs: list[str] | None = None,
    title: str = "",
) -> str:
    """Generate SVG markup from element definitions."""
    xmin, ymin, xmax, ymax = viewbox
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{xmin:g} {ymin:g} {xmax - xmin:g} {ymax - ymin:g}" xmlns="http://www.w3.org/2000/svg"'
        f' xmlns:xlink="http://www.w3.org/1999/xlink" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    if defs:
        lines.append("  <defs>")
        for d in defs:
            lines.append(f"    {d}")
        lines.append("  </defs>")

    for elem in elements:
        tag = elem.get("tag", "path")
        children = elem.get("children")
        attrs = {k: v for k, v in elem.items() if k not in ("tag", "children")}
        attr_str = _attrs(attrs)
        if children:
            lines.append(f"  <{tag} {attr_str}>")
            for child in children:
                child_tag = child.get("tag", "use")
                child_attrs = _attrs({k: v for k, v in child.items() if k != "tag"})
                lines.append(f"    <{child_tag} {child_attrs} />")
            lines.append(f"  </{tag}>")
        else:
            lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)


def _attrs(attrs: dict[str, Any]) -> str:
    return " ".join(f'{k}="{_attr_value(v)}"' for k, v in attrs.items())


def _attr_value(value: Any) -> str:
    return escape(str(value), {'"': "&quot;"})


class SvgMotifDrawer:
    """Drawer that turns placements into ``<use>`` elements.

    The motif is drawn centred on each placement point, scaled and rotated
    about that point.
    """

    def __init__(self, motif: Motif, scale: float = 1.0, symbol_id: str = "motif") -> None:
        self.motif = motif
        self.scale = scale
        self.symbol_id = symbol_id
        self.uses: list[dict[str, str]] = []

    def place(self, position: Point, rotation: float) -> None:
        x, y = position
        transform = (
            f"translate({x:.10g} {y:.10g}) rotate({math.degrees(rotation):.10g}) "
            f"scale({self.scale:g}) translate({-self.motif.width / 2:g} {-self.motif.height / 2:g})"
        )
        self.uses.append({"tag": "use", "href": f"#{self.symbol_id}", "transform": transform})

    def symbol(self) -> str:
        return (
            f'<symbol id="{self.symbol_id}" viewBox="0 0 {self.motif.width:g} {self.motif.height:g}"'
            f' width="{self.motif.width:g}" height="{self.motif.height:g}" overflow="visible">'
            f"{self.motif.markup}</symbol>"
        )

    def to_svg(self, region_d: str, viewbox: Rect, title: str = "") -> str:
        clip = f'<clipPath id="{self.symbol_id}-clip"><path d="{_attr_value(region_d)}" /></clipPath>'
        group = {
            "tag": "g",
            "clip-path": f"url(#{self.symbol_id}-clip)",
            "children": self.uses,
        }
        outline = {"tag": "path", "d": region_d, "fill": "none", "stroke": "black"}
        return serialize_svg([group, outline], viewbox, defs=[self.symbol(), clip], title=title)

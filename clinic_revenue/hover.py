"""
hover.py — Hover selection shared by the ring arcs, legend rows and top cards.

Drives the emphasized stroke width, glow and scale of the hovered category.
"""

from __future__ import annotations

import logging
from enum import Enum

from .geometry import DEFAULT_GEOMETRY, RingGeometry

ARC_HOVER_SCALE    = 1.02
SWATCH_HOVER_SCALE = 1.2
GLOW_BLUR_PX       = 8
GLOW_ALPHA_HEX     = "80"

logger = logging.getLogger(__name__)


class Surface(str, Enum):
    ARC    = "arc"
    LEGEND = "legend"
    CARD   = "card"


class HoverState:
    """
    The one hovered category shared by the arcs, the legend rows and the top
    cards. Entering a new category replaces the previous one; leaving any
    surface clears it.
    """

    def __init__(self, geometry: RingGeometry = DEFAULT_GEOMETRY):
        self.geometry = geometry
        self.hovered_category: str | None = None

    def enter(self, category: str, surface: Surface = Surface.ARC) -> None:
        logger.debug("hover enter %r via %s", category, Surface(surface).value)
        self.hovered_category = category

    def leave(self, surface: Surface = Surface.ARC) -> None:
        logger.debug("hover leave via %s", Surface(surface).value)
        self.hovered_category = None

    def is_hovered(self, category: str) -> bool:
        return self.hovered_category is not None and self.hovered_category == category

    def stroke_width(self, category: str) -> float:
        if self.is_hovered(category):
            return self.geometry.hover_stroke_width
        return self.geometry.base_stroke_width

    def glow(self, category: str, color: str) -> str:
        if not self.is_hovered(category):
            return "none"
        return f"drop-shadow(0 0 {GLOW_BLUR_PX}px {color}{GLOW_ALPHA_HEX})"

    def arc_scale(self, category: str) -> float:
        return ARC_HOVER_SCALE if self.is_hovered(category) else 1.0

    def swatch_scale(self, category: str) -> float:
        return SWATCH_HOVER_SCALE if self.is_hovered(category) else 1.0

"""
chart.py — RevenueBreakdownChart: the ring chart component.

Owns the derived state (breakdown, arc segments, legend, top cards), computed
on first access and cached until `update()` receives new data, and the single
hover selection shared by all three hover surfaces.
"""

from __future__ import annotations

import logging
from functools import cached_property
from typing import Any, Iterable

from .breakdown import Breakdown, aggregate
from .config import get_settings
from .geometry import DEFAULT_GEOMETRY, GUIDE_RING_DASH, GUIDE_RING_WIDTH, ArcSegment, RingGeometry, compute_segments
from .hover import HoverState, Surface
from .legend import LegendRow, TopCard, format_currency, legend_rows, top_categories

DEFAULT_TITLE    = "Income"
GUIDE_RING_COLOR = "#E0E5F2"

logger = logging.getLogger(__name__)

_DERIVED = ("breakdown", "segments", "legend", "top_categories")


class RevenueBreakdownChart:
    def __init__(
        self,
        data: Iterable[Any] | None = None,
        title: str | None = DEFAULT_TITLE,
        geometry: RingGeometry = DEFAULT_GEOMETRY,
        currency_symbol: str | None = None,
    ):
        # The caller's list is copied, never mutated.
        self._data           = list(data or [])
        self.title           = title or DEFAULT_TITLE
        self.geometry        = geometry
        self.currency_symbol = currency_symbol or get_settings().currency_symbol
        self.hover           = HoverState(geometry)

    # ── Input ────────────────────────────────────────────────────────────────

    @property
    def data(self) -> list:
        return list(self._data)

    def update(self, data: Iterable[Any] | None) -> None:
        self._data = list(data or [])
        for name in _DERIVED:
            self.__dict__.pop(name, None)
        logger.debug("Chart %r received %d rows", self.title, len(self._data))

    # ── Derived state ────────────────────────────────────────────────────────

    @cached_property
    def breakdown(self) -> Breakdown:
        return aggregate(self._data)

    @cached_property
    def segments(self) -> list[ArcSegment]:
        return compute_segments(self.breakdown.slices, self.geometry)

    @cached_property
    def legend(self) -> list[LegendRow]:
        return legend_rows(self.breakdown.slices)

    @cached_property
    def top_categories(self) -> list[TopCard]:
        return top_categories(self.breakdown.slices, symbol=self.currency_symbol)

    @property
    def total_amount(self) -> float:
        return self.breakdown.total_amount

    def center_label(self) -> str:
        return f"Total {self.title}"

    def center_value(self) -> str:
        return format_currency(self.total_amount, self.currency_symbol)

    # ── Interaction ──────────────────────────────────────────────────────────

    @property
    def hovered_category(self) -> str | None:
        return self.hover.hovered_category

    def pointer_enter(self, category: str, surface: Surface = Surface.ARC) -> None:
        self.hover.enter(category, surface)

    def pointer_leave(self, surface: Surface = Surface.ARC) -> None:
        self.hover.leave(surface)

    # ── View model ───────────────────────────────────────────────────────────

    def view_model(self) -> dict:
        geometry = self.geometry
        hover    = self.hover

        segments = []
        for segment in self.segments:
            payload = segment.as_dict()
            payload.update({
                "stroke_width": hover.stroke_width(segment.category),
                "glow":         hover.glow(segment.category, segment.color),
                "scale":        hover.arc_scale(segment.category),
                "hovered":      hover.is_hovered(segment.category),
            })
            segments.append(payload)

        legend = []
        for row in self.legend:
            payload = row.as_dict()
            payload["swatch_scale"] = hover.swatch_scale(row.category)
            payload["hovered"]      = hover.is_hovered(row.category)
            legend.append(payload)

        return {
            "title":            self.title,
            "total_amount":     self.total_amount,
            "center_label":     self.center_label(),
            "center_value":     self.center_value(),
            "hovered_category": self.hovered_category,
            "ring": {
                "canvas_size":   geometry.canvas_size,
                "radius":        geometry.radius,
                "circumference": geometry.circumference,
                "gap_percentage": geometry.gap_percentage,
                "guide_ring": {
                    "radius":     geometry.inner_radius,
                    "color":      GUIDE_RING_COLOR,
                    "width":      GUIDE_RING_WIDTH,
                    "dash_array": " ".join(str(part) for part in GUIDE_RING_DASH),
                },
            },
            "slices":         [item.as_dict() for item in self.breakdown.slices],
            "segments":       segments,
            "legend":         legend,
            "top_title":      f"Top {self.title}",
            "top_categories": [card.as_dict() for card in self.top_categories],
        }

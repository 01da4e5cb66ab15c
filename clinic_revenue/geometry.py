"""
geometry.py — Stroke-dash geometry for the segmented ring chart.

Every segment is drawn as its own full circle whose dash pattern isolates a
single arc: draw `dash_length`, skip `circumference - dash_length`, shifted by
`dash_offset`. A fixed gap is reserved after every segment (the last one
included) so rounded caps never touch.

Positions are measured clockwise from 12 o'clock as a fraction of the circle.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .breakdown import DisplaySlice

RADIUS                = 70
BASE_STROKE_WIDTH     = 11
HOVER_STROKE_WIDTH    = 15
# Round caps bleed strokeWidth/2 past each arc end (~2.5% of the circle
# together); 3.5% leaves about 1% of empty ring between neighbours.
GAP_PERCENTAGE        = 3.5
MIN_SCALED_PERCENTAGE = 0.1
GUIDE_RING_PADDING    = 4
GUIDE_RING_DASH       = (4, 4)
GUIDE_RING_WIDTH      = 1.5
CANVAS_SIZE           = 180


@dataclass(frozen=True)
class RingGeometry:
    radius:                float = RADIUS
    base_stroke_width:     float = BASE_STROKE_WIDTH
    hover_stroke_width:    float = HOVER_STROKE_WIDTH
    gap_percentage:        float = GAP_PERCENTAGE
    min_scaled_percentage: float = MIN_SCALED_PERCENTAGE
    canvas_size:           float = CANVAS_SIZE

    @property
    def circumference(self) -> float:
        return 2 * math.pi * self.radius

    @property
    def inner_radius(self) -> float:
        return self.radius - (self.base_stroke_width / 2) - GUIDE_RING_PADDING

    @property
    def center(self) -> float:
        return self.canvas_size / 2


DEFAULT_GEOMETRY = RingGeometry()


@dataclass(frozen=True)
class ArcSegment:
    category:          str
    color:             str
    percentage:        float
    scaled_percentage: float
    dash_length:       float
    dash_gap_length:   float
    dash_offset:       float
    circumference:     float

    @property
    def dash_array(self) -> str:
        return f"{self.dash_length} {self.dash_gap_length}"

    @property
    def start_fraction(self) -> float:
        """Where the drawn arc begins, as a fraction of the circle."""
        return ((self.circumference - self.dash_offset) / self.circumference) % 1.0

    @property
    def end_fraction(self) -> float:
        return self.start_fraction + self.dash_length / self.circumference

    def as_dict(self) -> dict:
        return {
            "category":          self.category,
            "color":             self.color,
            "percentage":        self.percentage,
            "scaled_percentage": self.scaled_percentage,
            "dash_array":        self.dash_array,
            "dash_length":       self.dash_length,
            "dash_gap_length":   self.dash_gap_length,
            "dash_offset":       self.dash_offset,
        }


def usable_percentage(slice_count: int, gap_percentage: float = GAP_PERCENTAGE) -> float:
    return max(0.0, 100 - slice_count * gap_percentage)


def scale_percentage(
    percentage: float,
    usable: float,
    minimum: float = MIN_SCALED_PERCENTAGE,
) -> float:
    scaled = (percentage / 100) * usable
    # Tiny slices still render as a rounded dot; the overshoot is not corrected.
    if scaled < minimum:
        scaled = minimum
    return scaled


def compute_segments(
    slices: Sequence[DisplaySlice],
    geometry: RingGeometry = DEFAULT_GEOMETRY,
) -> list[ArcSegment]:
    circumference = geometry.circumference
    usable        = usable_percentage(len(slices), geometry.gap_percentage)

    segments: list[ArcSegment] = []
    cumulative = 0.0
    for item in slices:
        scaled = scale_percentage(item.percentage, usable, geometry.min_scaled_percentage)
        length = (scaled / 100) * circumference

        segments.append(ArcSegment(
            category=item.category,
            color=item.color,
            percentage=item.percentage,
            scaled_percentage=scaled,
            dash_length=length,
            dash_gap_length=circumference - length,
            dash_offset=circumference - (cumulative / 100) * circumference,
            circumference=circumference,
        ))
        cumulative += scaled + geometry.gap_percentage

    return segments

from .breakdown import Breakdown, DisplaySlice, RevenueDatum, aggregate
from .chart import RevenueBreakdownChart
from .geometry import ArcSegment, RingGeometry, compute_segments
from .hover import HoverState, Surface

__all__ = [
    "ArcSegment",
    "Breakdown",
    "DisplaySlice",
    "HoverState",
    "RevenueBreakdownChart",
    "RevenueDatum",
    "RingGeometry",
    "Surface",
    "aggregate",
    "compute_segments",
]

"""
render.py — Draw a RevenueBreakdownChart with matplotlib.

The figure uses a y-down coordinate system in canvas pixels where one pixel is
one point, so stroke widths and font sizes carry over from the view model
unchanged. Each segment is a round-capped polyline sampled along its arc;
the hovered one is drawn wider over a translucent glow stroke.

Supported outputs: .png, .svg, .pdf
"""

from __future__ import annotations

import io
import logging
import math
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle, FancyBboxPatch

from .chart import GUIDE_RING_COLOR, RevenueBreakdownChart
from .config import get_settings
from .geometry import GUIDE_RING_DASH, GUIDE_RING_WIDTH, ArcSegment

SUPPORTED_FORMATS = {"png", "svg", "pdf"}

BG       = "#FFFFFF"
BORDER   = "#E0E5F2"
NAVY     = "#1B2559"
MUTED    = "#A3AED0"
SUBTLE   = "#8B95B7"
CARD_BG  = "#F8FAFC"

WIDTH        = 420
PADDING      = 28
HEADER       = 70
LEGEND_ROW_H = 24
CARD_H       = 58
CARD_GAP     = 14

logger = logging.getLogger(__name__)


class ChartRenderError(RuntimeError):
    pass


# ---------------------------------------------------------------------------
# Geometry helpers
# ---------------------------------------------------------------------------

def arc_points(segment: ArcSegment, cx: float, cy: float, radius: float) -> tuple[np.ndarray, np.ndarray]:
    """Points along a segment, clockwise from 12 o'clock, y axis pointing down."""
    start = segment.start_fraction
    end   = segment.end_fraction
    steps = max(2, int(math.ceil((end - start) * 360)) + 1)
    angles = np.linspace(start, end, steps) * 2 * np.pi
    return cx + radius * np.sin(angles), cy - radius * np.cos(angles)


def _figure_height(chart: RevenueBreakdownChart) -> float:
    height = HEADER + chart.geometry.canvas_size + PADDING
    cards = len(chart.top_categories)
    if cards:
        rows = math.ceil(cards / 2)
        height += 30 + rows * CARD_H + (rows - 1) * CARD_GAP + PADDING
    return height


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------

def _draw_ring(ax, chart: RevenueBreakdownChart, left: float, top: float) -> None:
    geometry = chart.geometry
    cx = left + geometry.center
    cy = top + geometry.center
    hover = chart.hover

    for segment in chart.segments:
        xs, ys = arc_points(segment, cx, cy, geometry.radius)
        width  = hover.stroke_width(segment.category)
        if hover.is_hovered(segment.category):
            ax.plot(xs, ys, color=segment.color, alpha=0.25,
                    linewidth=width + 16, solid_capstyle="round")
        ax.plot(xs, ys, color=segment.color, linewidth=width, solid_capstyle="round")

    dash = tuple(part / GUIDE_RING_WIDTH for part in GUIDE_RING_DASH)
    ax.add_patch(Circle(
        (cx, cy), geometry.inner_radius,
        fill=False, edgecolor=GUIDE_RING_COLOR,
        linewidth=GUIDE_RING_WIDTH, linestyle=(0, dash),
    ))

    ax.text(cx, cy - 9, chart.center_label().upper(), ha="center", va="center",
            color=SUBTLE, fontsize=6.5, fontweight="bold")
    ax.text(cx, cy + 8, chart.center_value(), ha="center", va="center",
            color=NAVY, fontsize=14, fontweight="bold")


def _draw_legend(ax, chart: RevenueBreakdownChart, left: float, top: float) -> None:
    right = WIDTH - PADDING
    rows  = chart.legend
    y = top + chart.geometry.center - (len(rows) - 1) * LEGEND_ROW_H / 2
    for row in rows:
        weight = "bold" if chart.hover.is_hovered(row.category) else "normal"
        swatch = 7 * chart.hover.swatch_scale(row.category)
        ax.plot([left, left + 10], [y, y], color=row.color,
                linewidth=swatch, solid_capstyle="round")
        label = row.category if len(row.category) <= 16 else row.category[:15] + "…"
        ax.text(left + 20, y, label, ha="left", va="center",
                color=NAVY, fontsize=10, fontweight=weight)
        ax.text(right, y, row.percent_label, ha="right", va="center",
                color=NAVY, fontsize=10, fontweight="bold")
        y += LEGEND_ROW_H


def _draw_top_cards(ax, chart: RevenueBreakdownChart, top: float) -> None:
    cards = chart.top_categories
    if not cards:
        return

    ax.text(PADDING, top, f"TOP {chart.title.upper()}", ha="left", va="top",
            color=MUTED, fontsize=9, fontweight="bold")
    card_w = (WIDTH - 2 * PADDING - CARD_GAP) / 2
    y0 = top + 30
    for idx, card in enumerate(cards):
        col, row = idx % 2, idx // 2
        x = PADDING + col * (card_w + CARD_GAP)
        y = y0 + row * (CARD_H + CARD_GAP)
        edge = BORDER if chart.hover.is_hovered(card.category) else CARD_BG
        ax.add_patch(FancyBboxPatch(
            (x, y), card_w, CARD_H,
            boxstyle="round,pad=0,rounding_size=14",
            facecolor=CARD_BG, edgecolor=edge, linewidth=1,
        ))
        ax.plot([x + 14, x + 23], [y + 20, y + 20], color=card.color,
                linewidth=6, solid_capstyle="round")
        ax.text(x + 32, y + 20, card.category, ha="left", va="center",
                color=SUBTLE, fontsize=10)
        ax.text(x + 32, y + 40, card.amount_label, ha="left", va="center",
                color=NAVY, fontsize=13, fontweight="bold")


def draw_chart(chart: RevenueBreakdownChart):
    height = _figure_height(chart)
    fig = plt.figure(figsize=(WIDTH / 72, height / 72))
    fig.patch.set_facecolor(BG)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, WIDTH)
    ax.set_ylim(height, 0)
    ax.set_aspect("equal")
    ax.axis("off")

    ax.text(PADDING, PADDING + 8, chart.title, ha="left", va="center",
            color=NAVY, fontsize=20, fontweight="bold")

    _draw_ring(ax, chart, PADDING, HEADER)
    _draw_legend(ax, chart, PADDING + chart.geometry.canvas_size + 24, HEADER)
    _draw_top_cards(ax, chart, HEADER + chart.geometry.canvas_size + PADDING)
    return fig


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _check_format(fmt: str) -> str:
    fmt = fmt.lower().lstrip(".")
    if fmt not in SUPPORTED_FORMATS:
        raise ChartRenderError(
            f"Unsupported chart format '{fmt}'. Use one of: {', '.join(sorted(SUPPORTED_FORMATS))}."
        )
    return fmt


def render_chart_bytes(chart: RevenueBreakdownChart, fmt: str = "png", dpi: int | None = None) -> bytes:
    fmt = _check_format(fmt)
    fig = draw_chart(chart)
    buffer = io.BytesIO()
    try:
        fig.savefig(buffer, format=fmt, dpi=dpi or get_settings().chart_dpi, facecolor=BG)
    finally:
        plt.close(fig)
    return buffer.getvalue()


def render_chart(chart: RevenueBreakdownChart, output_path: str | Path, dpi: int | None = None) -> Path:
    path = Path(output_path)
    fmt  = _check_format(path.suffix)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig = draw_chart(chart)
    try:
        fig.savefig(path, format=fmt, dpi=dpi or get_settings().chart_dpi, facecolor=BG)
    except OSError as exc:
        raise ChartRenderError(f"Could not write chart to {path}: {exc}") from exc
    finally:
        plt.close(fig)

    logger.info("Saved %s chart for %r to %s", fmt, chart.title, path)
    return path

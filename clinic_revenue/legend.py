"""
legend.py — Legend rows and the "top categories" cards beside the ring.

Legend percentages are the true shares rounded independently to integers, so
the shown values need not add up to 100.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .breakdown import DisplaySlice

LEGEND_LIMIT = 5
TOP_LIMIT    = 4


@dataclass(frozen=True)
class LegendRow:
    category:      str
    color:         str
    percentage:    int
    percent_label: str

    def as_dict(self) -> dict:
        return {
            "category":      self.category,
            "color":         self.color,
            "percentage":    self.percentage,
            "percent_label": self.percent_label,
        }


@dataclass(frozen=True)
class TopCard:
    category:     str
    color:        str
    amount:       float
    amount_label: str

    def as_dict(self) -> dict:
        return {
            "category":     self.category,
            "color":        self.color,
            "amount":       self.amount,
            "amount_label": self.amount_label,
        }


def round_half_up(value: float) -> int:
    # round() would send 2.5 to 2
    return int(math.floor(value + 0.5))


def format_currency(value: float, symbol: str = "$") -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def legend_rows(slices: Sequence[DisplaySlice], limit: int = LEGEND_LIMIT) -> list[LegendRow]:
    rows = []
    for item in slices[:limit]:
        pct = round_half_up(item.percentage)
        rows.append(LegendRow(
            category=item.category,
            color=item.color,
            percentage=pct,
            percent_label=f"{pct}%",
        ))
    return rows


def top_categories(
    slices: Sequence[DisplaySlice],
    limit: int = TOP_LIMIT,
    symbol: str = "$",
) -> list[TopCard]:
    return [
        TopCard(
            category=item.category,
            color=item.color,
            amount=item.amount,
            amount_label=format_currency(item.amount, symbol),
        )
        for item in slices[:limit]
    ]

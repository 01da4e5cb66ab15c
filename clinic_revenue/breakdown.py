"""
breakdown.py — Aggregate raw (category, amount) pairs into ranked display slices.

The headline total is the sum of every raw amount, including the zero and
negative ones that are dropped from the slices. Percentages use that total as
their denominator.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .categories import CATEGORY_RULES, FALLBACK_CATEGORY, CategoryRule, canonical_label, resolve_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RevenueDatum:
    category: str
    amount:   float


@dataclass(frozen=True)
class DisplaySlice:
    category:   str
    amount:     float
    percentage: float
    color:      str

    def as_dict(self) -> dict:
        return {
            "category":   self.category,
            "amount":     self.amount,
            "percentage": self.percentage,
            "color":      self.color,
        }


@dataclass(frozen=True)
class Breakdown:
    total_amount: float
    slices:       tuple[DisplaySlice, ...]

    @property
    def is_empty(self) -> bool:
        return not self.slices


# ---------------------------------------------------------------------------
# Input coercion
# ---------------------------------------------------------------------------

def _as_amount(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(amount) or math.isinf(amount):
        return 0.0
    return amount


def coerce_datum(item: Any) -> RevenueDatum | None:
    """Turn a RevenueDatum or a {category, amount} mapping into a RevenueDatum."""
    if isinstance(item, RevenueDatum):
        return RevenueDatum(category=item.category, amount=_as_amount(item.amount))
    if isinstance(item, Mapping):
        category = item.get("category")
        return RevenueDatum(
            category="" if category is None else str(category),
            amount=_as_amount(item.get("amount")),
        )
    return None


def coerce_data(data: Iterable[Any] | None) -> list[RevenueDatum]:
    if data is None:
        return []
    rows: list[RevenueDatum] = []
    for item in data:
        datum = coerce_datum(item)
        if datum is None:
            logger.warning("Skipping revenue row of type %s", type(item).__name__)
            continue
        rows.append(datum)
    return rows


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def total_amount(data: Iterable[RevenueDatum]) -> float:
    return sum((datum.amount for datum in data), 0.0)


def aggregate(
    data: Iterable[Any] | None,
    rules: tuple[CategoryRule, ...] = CATEGORY_RULES,
) -> Breakdown:
    rows  = coerce_data(data)
    total = total_amount(rows)

    visible = [datum for datum in rows if datum.amount > 0]
    # sorted() is stable, so equal amounts keep their input order
    visible = sorted(visible, key=lambda datum: datum.amount, reverse=True)

    slices = []
    for datum in visible:
        raw   = datum.category if datum.category.strip() else FALLBACK_CATEGORY
        label = canonical_label(raw, rules)
        slices.append(DisplaySlice(
            category=label,
            amount=datum.amount,
            percentage=(datum.amount / total) * 100 if total > 0 else 0.0,
            color=resolve_color(label, rules),
        ))

    logger.debug("Aggregated %d rows into %d slices, total=%s", len(rows), len(slices), total)
    return Breakdown(total_amount=total, slices=tuple(slices))

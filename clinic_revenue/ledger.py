"""
ledger.py — Turn ledger rows into the (category, amount) list the chart consumes.

Rows look like the clinic ledger's entries:
    {"treatment_category": "Periodontal Care", "amount_paid": "120.00"}
    {"category": "Ortho", "amount_paid": 300}
    {"item_type": "medicine", "amount_paid": 12.5}

Paid amounts are summed per canonical category: catalog names are normalized
and the chart's label aliases applied ("Ortho" and "Orthodontics" share one
row). Rows with item_type "medicine" go to "Medicine (Sales)"; rows without
any category go to "Other". Unparseable amounts count as 0.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

import pandas as pd

from .breakdown import RevenueDatum
from .categories import FALLBACK_CATEGORY, canonical_label, normalize_treatment_category

MEDICINE_CATEGORY = "Medicine (Sales)"
MEDICINE_TYPE     = "medicine"
CATEGORY_FIELDS   = ("treatment_category", "category")
AMOUNT_FIELD      = "amount_paid"

logger = logging.getLogger(__name__)


def _row_category(row: Mapping[str, Any]) -> str:
    if row.get("item_type") == MEDICINE_TYPE:
        return MEDICINE_CATEGORY
    for field in CATEGORY_FIELDS:
        name = normalize_treatment_category(row.get(field))
        if name:
            return canonical_label(name)
    return FALLBACK_CATEGORY


def revenue_from_ledger(entries: Iterable[Any] | None) -> list[RevenueDatum]:
    rows = [row for row in (entries or []) if isinstance(row, Mapping)]
    if not rows:
        return []

    df = pd.DataFrame({
        "category": [_row_category(row) for row in rows],
        "amount":   [row.get(AMOUNT_FIELD) for row in rows],
    })
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce")

    invalid = int(df["amount"].isna().sum())
    if invalid:
        logger.warning("Ledger: %d rows with unreadable %s counted as 0", invalid, AMOUNT_FIELD)
    df["amount"] = df["amount"].fillna(0.0)

    grouped = (
        df.groupby("category", sort=False)["amount"]
        .sum()
        .sort_values(ascending=False, kind="stable")
    )
    return [
        RevenueDatum(category=str(category), amount=float(amount))
        for category, amount in grouped.items()
    ]

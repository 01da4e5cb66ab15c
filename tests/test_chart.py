import json

import pytest

from clinic_revenue.chart import RevenueBreakdownChart
from clinic_revenue.config import get_settings
from clinic_revenue.hover import Surface


def test_empty_chart():
    chart = RevenueBreakdownChart()

    assert chart.title == "Income"
    assert chart.center_label() == "Total Income"
    assert chart.center_value() == "$0.00"
    assert chart.segments == []
    assert chart.legend == []
    assert chart.top_categories == []


def test_derived_state_is_cached_until_update(clinic_revenue_rows):
    chart = RevenueBreakdownChart(clinic_revenue_rows)

    segments = chart.segments
    assert chart.segments is segments

    chart.update([{"category": "Diagnostic", "amount": 10}])
    assert chart.segments is not segments
    assert [s.category for s in chart.segments] == ["Diagnostic"]
    assert chart.total_amount == 10


def test_does_not_mutate_caller_list(clinic_revenue_rows):
    snapshot = [dict(row) for row in clinic_revenue_rows]
    chart = RevenueBreakdownChart(clinic_revenue_rows)
    chart.view_model()
    assert clinic_revenue_rows == snapshot


def test_ordering_and_aliases(clinic_revenue_rows):
    chart = RevenueBreakdownChart(clinic_revenue_rows, title="Revenue")

    assert [s.category for s in chart.breakdown.slices] == [
        "Orthodontics",
        "Implant Treatment",
        "Restorative",
        "Diagnostic",
        "Medicine (Sales)",
        "Other",
    ]
    assert chart.center_value() == "$7,520.50"
    assert chart.center_label() == "Total Revenue"


def test_three_surfaces_share_one_hover(clinic_revenue_rows):
    chart = RevenueBreakdownChart(clinic_revenue_rows)

    chart.pointer_enter("Restorative", Surface.ARC)
    chart.pointer_enter("Diagnostic", Surface.LEGEND)
    chart.pointer_enter("Orthodontics", Surface.CARD)

    model = chart.view_model()
    hovered = [s["category"] for s in model["segments"] if s["hovered"]]
    assert hovered == ["Orthodontics"]
    assert model["hovered_category"] == "Orthodontics"

    widths = {s["category"]: s["stroke_width"] for s in model["segments"]}
    assert widths["Orthodontics"] == 15
    assert widths["Restorative"] == 11

    chart.pointer_leave(Surface.CARD)
    assert chart.hovered_category is None


def test_view_model_is_json_ready(clinic_revenue_rows):
    model = RevenueBreakdownChart(clinic_revenue_rows).view_model()

    json.dumps(model)
    assert model["ring"]["guide_ring"]["radius"] == 60.5
    assert model["ring"]["guide_ring"]["dash_array"] == "4 4"
    assert len(model["legend"]) == 5
    assert len(model["top_categories"]) == 4
    assert model["top_title"] == "Top Income"
    assert model["segments"][0]["glow"] == "none"


def test_currency_symbol_from_settings(monkeypatch):
    monkeypatch.setenv("CLINIC_CURRENCY_SYMBOL", "€")
    get_settings.cache_clear()

    chart = RevenueBreakdownChart([{"category": "Diagnostic", "amount": 12}])
    assert chart.center_value() == "€12.00"
    assert chart.top_categories[0].amount_label == "€12.00"


def test_repeated_charts_give_identical_segments(clinic_revenue_rows):
    first = RevenueBreakdownChart(clinic_revenue_rows).segments
    second = RevenueBreakdownChart(clinic_revenue_rows).segments
    assert first == second
    assert [s.dash_offset for s in first] == [s.dash_offset for s in second]


@pytest.mark.parametrize("title", [None, ""])
def test_blank_title_falls_back(title):
    assert RevenueBreakdownChart(title=title).title == "Income"

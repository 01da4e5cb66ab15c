import pytest

from clinic_revenue.chart import RevenueBreakdownChart
from clinic_revenue.render import ChartRenderError, arc_points, render_chart, render_chart_bytes


@pytest.fixture
def chart(clinic_revenue_rows):
    return RevenueBreakdownChart(clinic_revenue_rows)


def test_first_arc_starts_at_twelve_o_clock(chart):
    xs, ys = arc_points(chart.segments[0], 90, 90, 70)
    assert xs[0] == pytest.approx(90)
    assert ys[0] == pytest.approx(20)


def test_render_png(chart, tmp_path):
    path = render_chart(chart, tmp_path / "out" / "income.png", dpi=72)

    assert path.exists()
    assert path.read_bytes().startswith(b"\x89PNG")


def test_render_svg_and_pdf(chart, tmp_path):
    svg = render_chart(chart, tmp_path / "income.svg")
    pdf = render_chart(chart, tmp_path / "income.pdf")

    assert b"<svg" in svg.read_bytes()
    assert pdf.read_bytes().startswith(b"%PDF")


def test_render_hovered_and_empty(chart):
    chart.pointer_enter("Orthodontics")
    assert render_chart_bytes(chart, "png", dpi=72).startswith(b"\x89PNG")
    assert render_chart_bytes(RevenueBreakdownChart(), "svg")


@pytest.mark.parametrize("name", ["income.gif", "income"])
def test_unsupported_suffix(chart, tmp_path, name):
    with pytest.raises(ChartRenderError):
        render_chart(chart, tmp_path / name)


def test_unsupported_format_bytes(chart):
    with pytest.raises(ChartRenderError):
        render_chart_bytes(chart, "bmp")

"""
report.py — One-page printable revenue report (PDF) around the ring chart.

Layout: title + clinic name, generation date, headline total, chart image,
then a table with every slice (not only the legend's top five).
"""

from __future__ import annotations

import logging
import tempfile
from datetime import datetime
from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .chart import RevenueBreakdownChart
from .config import get_settings
from .legend import format_currency
from .render import ChartRenderError, render_chart

NAVY    = colors.HexColor("#1B2559")
MUTED   = colors.HexColor("#8B95B7")
BORDER  = colors.HexColor("#E0E5F2")
STRIPE  = colors.HexColor("#F8FAFC")
WHITE   = colors.HexColor("#FFFFFF")

logger = logging.getLogger(__name__)


class ReportError(RuntimeError):
    pass


def style_pack():
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "Title",
            parent=base["Title"],
            fontName="Helvetica-Bold",
            fontSize=24,
            leading=30,
            textColor=NAVY,
            spaceAfter=6,
        ),
        "subtitle": ParagraphStyle(
            "Subtitle",
            parent=base["Normal"],
            fontName="Helvetica",
            fontSize=10,
            leading=14,
            textColor=MUTED,
        ),
        "total": ParagraphStyle(
            "Total",
            parent=base["Normal"],
            fontName="Helvetica-Bold",
            fontSize=16,
            leading=22,
            textColor=NAVY,
            spaceBefore=8,
        ),
    }


def slice_table(chart: RevenueBreakdownChart) -> Table:
    symbol = chart.currency_symbol
    data = [["Category", "Amount", "Share"]]
    for item in chart.breakdown.slices:
        data.append([item.category, format_currency(item.amount, symbol), f"{item.percentage:.1f}%"])
    data.append(["Total", chart.center_value(), ""])

    table = Table(data, colWidths=[3.2 * inch, 1.8 * inch, 1.0 * inch])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), NAVY),
        ("TEXTCOLOR", (0, 0), (-1, 0), WHITE),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
        ("ROWBACKGROUNDS", (0, 1), (-1, -2), [WHITE, STRIPE]),
        ("LINEBELOW", (0, 0), (-1, -1), 0.5, BORDER),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("TOPPADDING", (0, 0), (-1, -1), 5),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
    ]))
    return table


def build_revenue_report(
    chart: RevenueBreakdownChart,
    output_path: str | Path,
    clinic_name: str | None = None,
) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    clinic_name = clinic_name if clinic_name is not None else get_settings().clinic_name
    styles = style_pack()

    with tempfile.TemporaryDirectory() as tmp_dir:
        image_path = Path(tmp_dir) / "chart.png"
        try:
            render_chart(chart, image_path)
        except ChartRenderError as exc:
            raise ReportError(f"Chart rendering failed: {exc}") from exc

        heading = f"{chart.title} Breakdown"
        if clinic_name:
            heading = f"{clinic_name} | {heading}"

        story = [
            Paragraph(heading, styles["title"]),
            Paragraph(f"Generated {datetime.now().strftime('%Y-%m-%d %H:%M')}", styles["subtitle"]),
            Paragraph(f"{chart.center_label()}: {chart.center_value()}", styles["total"]),
            Spacer(1, 0.2 * inch),
            Image(str(image_path), width=3.5 * inch, height=3.5 * inch, kind="proportional"),
            Spacer(1, 0.3 * inch),
        ]
        if chart.breakdown.slices:
            story.append(slice_table(chart))
        else:
            story.append(Paragraph("No revenue recorded for this period.", styles["subtitle"]))

        doc = SimpleDocTemplate(
            str(path),
            pagesize=LETTER,
            leftMargin=0.75 * inch,
            rightMargin=0.75 * inch,
            topMargin=0.75 * inch,
            bottomMargin=0.75 * inch,
            title=heading,
        )
        try:
            doc.build(story)
        except OSError as exc:
            raise ReportError(f"Could not write report to {path}: {exc}") from exc

    logger.info("Saved revenue report for %r to %s", chart.title, path)
    return path

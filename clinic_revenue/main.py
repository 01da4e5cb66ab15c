"""
main.py — FastAPI surface for the revenue breakdown chart.

The embedding page posts already-fetched (category, amount) pairs, or raw
ledger rows, and gets back either the chart's view model, a rendered image,
or a printable PDF report.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
import uuid
from pathlib import Path
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, Response
from pydantic import BaseModel, Field
from starlette.background import BackgroundTask

from .categories import CATEGORY_COLORS, CATEGORY_RULES, DEFAULT_COLOR, TREATMENT_CATEGORIES
from .chart import DEFAULT_TITLE, RevenueBreakdownChart
from .config import get_settings
from .ledger import revenue_from_ledger
from .render import SUPPORTED_FORMATS, ChartRenderError, render_chart_bytes
from .report import ReportError, build_revenue_report

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

logger   = logging.getLogger(__name__)
settings = get_settings()

IMAGE_MEDIA_TYPES = {
    "png": "image/png",
    "svg": "image/svg+xml",
    "pdf": "application/pdf",
}

app = FastAPI(title="Clinic Revenue Breakdown", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

class RevenueItem(BaseModel):
    category: str
    amount:   float


class BreakdownRequest(BaseModel):
    data:    list[RevenueItem] = Field(default_factory=list)
    title:   Optional[str] = DEFAULT_TITLE
    hovered: Optional[str] = None


class LedgerRequest(BaseModel):
    entries: list[dict[str, Any]] = Field(default_factory=list)
    title:   Optional[str] = DEFAULT_TITLE
    hovered: Optional[str] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _build_chart(body: BreakdownRequest) -> RevenueBreakdownChart:
    chart = RevenueBreakdownChart(
        data=[item.model_dump() for item in body.data],
        title=body.title,
    )
    if body.hovered:
        chart.pointer_enter(body.hovered)
    return chart


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.get("/api/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/api/categories")
def categories() -> dict:
    return {
        "categories":    list(TREATMENT_CATEGORIES),
        "colors":        dict(CATEGORY_COLORS),
        "default_color": DEFAULT_COLOR,
        "rules":         [rule.as_dict() for rule in CATEGORY_RULES],
    }


@app.post("/api/revenue-breakdown")
def revenue_breakdown(body: BreakdownRequest) -> dict:
    return _build_chart(body).view_model()


@app.post("/api/revenue-breakdown/ledger")
def revenue_breakdown_from_ledger(body: LedgerRequest) -> dict:
    chart = RevenueBreakdownChart(data=revenue_from_ledger(body.entries), title=body.title)
    if body.hovered:
        chart.pointer_enter(body.hovered)
    logger.info("Ledger breakdown: %d entries -> %d slices", len(body.entries), len(chart.segments))
    return chart.view_model()


@app.post("/api/revenue-breakdown/chart")
def revenue_breakdown_chart(
    body: BreakdownRequest,
    fmt: str = Query(default="png", alias="format"),
    download: bool = False,
) -> Response:
    fmt = fmt.lower()
    if fmt not in SUPPORTED_FORMATS:
        raise HTTPException(status_code=400, detail=f"Unsupported chart format '{fmt}'.")

    try:
        content = render_chart_bytes(_build_chart(body), fmt)
    except ChartRenderError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Chart rendering failed: {exc}") from exc

    headers = {}
    if download:
        headers["Content-Disposition"] = f'attachment; filename="revenue_breakdown.{fmt}"'
    return Response(content=content, media_type=IMAGE_MEDIA_TYPES[fmt], headers=headers)


@app.post("/api/revenue-breakdown/report")
def revenue_breakdown_report(body: BreakdownRequest) -> FileResponse:
    tmp_dir     = Path(tempfile.mkdtemp(prefix="revenue-report-"))
    report_path = tmp_dir / f"report_{uuid.uuid4().hex[:12]}.pdf"

    try:
        build_revenue_report(_build_chart(body), report_path)
    except ReportError as exc:
        shutil.rmtree(tmp_dir, ignore_errors=True)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        shutil.rmtree(tmp_dir, ignore_errors=True)
        raise HTTPException(status_code=500, detail=f"Report generation failed: {exc}") from exc

    return FileResponse(
        path=str(report_path),
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="revenue_report.pdf"'},
        background=BackgroundTask(shutil.rmtree, tmp_dir, ignore_errors=True),
    )

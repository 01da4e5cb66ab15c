"""
cli.py — Render the revenue breakdown chart (or its PDF report) from a JSON file.

Usage:
    clinic-revenue-chart --data revenue.json --output charts/income.png
    clinic-revenue-chart --data ledger.json --ledger --report --output income.pdf

The data file holds either a list of {"category", "amount"} objects or
{"rows": [...]}. With --ledger the rows are ledger entries
({"treatment_category", "amount_paid", "item_type"}).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .chart import DEFAULT_TITLE, RevenueBreakdownChart
from .config import get_settings
from .ledger import revenue_from_ledger
from .render import ChartRenderError, render_chart
from .report import ReportError, build_revenue_report

PROG = "clinic-revenue-chart"


def load_rows(path: str) -> list:
    with open(path, encoding="utf-8") as f:
        parsed = json.load(f)
    if isinstance(parsed, dict):
        parsed = parsed.get("rows", [])
    if not isinstance(parsed, list):
        raise ValueError("data file must contain a list or an object with a 'rows' list")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Render the clinic revenue ring chart.")
    parser.add_argument("--data",   required=True)
    parser.add_argument("--output", default=None)
    parser.add_argument("--title",  default=DEFAULT_TITLE)
    parser.add_argument("--hover",  default=None, help="category to draw highlighted")
    parser.add_argument("--ledger", action="store_true", help="data holds ledger entries")
    parser.add_argument("--report", action="store_true", help="write a PDF report instead of an image")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        rows = load_rows(args.data)
    except (OSError, ValueError) as exc:
        print(f"[{PROG}] ERROR: could not read {args.data}: {exc}", file=sys.stderr)
        return 1

    data  = revenue_from_ledger(rows) if args.ledger else rows
    chart = RevenueBreakdownChart(data=data, title=args.title)
    if args.hover:
        chart.pointer_enter(args.hover)

    output = args.output
    if output is None:
        suffix = "pdf" if args.report else "png"
        output = get_settings().output_dir / f"{Path(args.data).stem}.{suffix}"

    try:
        if args.report:
            saved = build_revenue_report(chart, output)
        else:
            saved = render_chart(chart, output)
    except (ChartRenderError, ReportError) as exc:
        print(f"[{PROG}] ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"[{PROG}] saved: {saved}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
config.py — Settings read from the environment (and an optional .env file).

Variables: CLINIC_CURRENCY_SYMBOL, CLINIC_CHART_DPI, CLINIC_OUTPUT_DIR,
CLINIC_CORS_ORIGINS (comma-separated), CLINIC_NAME.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env", override=False)

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    currency_symbol: str
    chart_dpi:       int
    output_dir:      Path
    cors_origins:    tuple[str, ...]
    clinic_name:     str


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer), using %d", name, raw, default)
        return default


def _origins_env(name: str) -> tuple[str, ...]:
    raw = os.getenv(name, "")
    origins = tuple(part.strip() for part in raw.split(",") if part.strip())
    return origins or DEFAULT_CORS_ORIGINS


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    output_dir = Path(os.getenv("CLINIC_OUTPUT_DIR") or BASE_DIR / "runtime" / "charts")
    return Settings(
        currency_symbol=os.getenv("CLINIC_CURRENCY_SYMBOL") or "$",
        chart_dpi=_int_env("CLINIC_CHART_DPI", 150),
        output_dir=output_dir,
        cors_origins=_origins_env("CLINIC_CORS_ORIGINS"),
        clinic_name=os.getenv("CLINIC_NAME", "").strip(),
    )

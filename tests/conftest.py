import pytest

from clinic_revenue.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    """Point chart output at a temp dir and rebuild settings per test."""
    monkeypatch.setenv("CLINIC_OUTPUT_DIR", str(tmp_path / "charts"))
    monkeypatch.delenv("CLINIC_CURRENCY_SYMBOL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clinic_revenue_rows():
    return [
        {"category": "Restorative", "amount": 1200.0},
        {"category": "Ortho", "amount": 3400.0},
        {"category": "Medicine (Sales)", "amount": 250.5},
        {"category": "Diagnostic", "amount": 480.0},
        {"category": "Other", "amount": 90.0},
        {"category": "Implants", "amount": 2100.0},
        {"category": "Cosmetic", "amount": 0.0},
    ]

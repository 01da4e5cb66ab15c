import pytest
from fastapi.testclient import TestClient

from clinic_revenue.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_categories(client):
    body = client.get("/api/categories").json()
    assert body["default_color"] == "#A3AED0"
    assert body["colors"]["Diagnostic"] == "#00E5FF"
    assert body["rules"][2]["color"] == "#A855F7"


def test_breakdown_view_model(client, clinic_revenue_rows):
    response = client.post(
        "/api/revenue-breakdown",
        json={"data": clinic_revenue_rows, "title": "Revenue", "hovered": "Restorative"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["center_value"] == "$7,520.50"
    assert body["segments"][0]["category"] == "Orthodontics"
    assert body["hovered_category"] == "Restorative"
    hovered = [s for s in body["segments"] if s["hovered"]]
    assert [s["stroke_width"] for s in hovered] == [15]


def test_breakdown_defaults(client):
    body = client.post("/api/revenue-breakdown", json={}).json()
    assert body["title"] == "Income"
    assert body["center_value"] == "$0.00"
    assert body["segments"] == []


def test_breakdown_rejects_bad_body(client):
    response = client.post("/api/revenue-breakdown", json={"data": [{"category": "A"}]})
    assert response.status_code == 422


def test_breakdown_from_ledger(client):
    response = client.post(
        "/api/revenue-breakdown/ledger",
        json={"entries": [
            {"treatment_category": "Cosmetic Dentistry", "amount_paid": 80},
            {"item_type": "medicine", "amount_paid": "20"},
        ]},
    )

    body = response.json()
    assert [s["category"] for s in body["slices"]] == ["Cosmetic", "Medicine (Sales)"]
    assert [row["percent_label"] for row in body["legend"]] == ["80%", "20%"]


@pytest.mark.parametrize("fmt, media_type", [("png", "image/png"), ("svg", "image/svg+xml")])
def test_chart_image(client, clinic_revenue_rows, fmt, media_type):
    response = client.post(
        f"/api/revenue-breakdown/chart?format={fmt}&download=true",
        json={"data": clinic_revenue_rows},
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(media_type)
    assert "attachment" in response.headers["content-disposition"]


def test_chart_unknown_format(client):
    response = client.post("/api/revenue-breakdown/chart?format=gif", json={"data": []})
    assert response.status_code == 400


def test_report_download(client, clinic_revenue_rows):
    response = client.post("/api/revenue-breakdown/report", json={"data": clinic_revenue_rows})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")

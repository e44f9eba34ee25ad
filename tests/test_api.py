"""
Tests for the FastAPI insights routes.
"""

import pytest
from fastapi.testclient import TestClient

from auto_insights.api.app import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture
def latency_rows(latency_values):
    return [
        {"minute": f"00:0{i}", "latency_ms": value, "requests": 100 + i * 10}
        for i, value in enumerate(latency_values)
    ]


class TestGenerateInsights:
    """Test POST /api/v1/insights/generate."""

    def test_generate(self, client, latency_rows):
        response = client.post("/api/v1/insights/generate", json={
            "dataset_id": "ds-1",
            "rows": latency_rows,
            "column_names": ["latency_ms"],
            "options": {"analyze_trends": True, "timestamp_column": "minute"},
        })
        assert response.status_code == 200
        body = response.json()
        assert body["dataset_id"] == "ds-1"
        assert body["count"] == len(body["insights"])
        assert body["insights"][0]["id"] == "summary"
        assert body["rows_analyzed"] == 7
        assert body["columns_analyzed"] == ["latency_ms"]

        by_id = {i["id"]: i for i in body["insights"]}
        assert by_id["outliers-latency_ms"]["severity"] == "warning"
        points = by_id["change-points-latency_ms"]["metadata"]["change_points"]
        assert points[0]["timestamp"] == "00:04"

    def test_ids_are_stable_across_requests(self, client, latency_rows):
        payload = {
            "rows": latency_rows,
            "column_names": ["latency_ms", "requests"],
            "options": {"analyze_trends": True, "analyze_correlations": True},
        }
        first = client.post("/api/v1/insights/generate", json=payload).json()
        second = client.post("/api/v1/insights/generate", json=payload).json()
        assert first["insights"] == second["insights"]

    def test_no_columns(self, client, latency_rows):
        response = client.post("/api/v1/insights/generate", json={
            "rows": latency_rows,
            "column_names": [],
        })
        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "validation_error"
        assert body["details"] == {"field": "column_names"}

    def test_no_rows(self, client):
        response = client.post("/api/v1/insights/generate", json={
            "rows": [],
            "column_names": ["latency_ms"],
        })
        assert response.status_code == 400
        assert response.json()["details"] == {"field": "rows"}

    def test_malformed_body(self, client):
        response = client.post("/api/v1/insights/generate", json={"column_names": ["x"]})
        assert response.status_code == 422


class TestHealth:
    """Test health and info routes."""

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_info(self, client):
        body = client.get("/api/v1/info").json()
        assert body["endpoints"]["generate"] == "/api/v1/insights/generate"

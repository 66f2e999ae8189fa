"""
Tests for the health check endpoint.
"""


def test_health_check_returns_200(client):
    response = client.get("/api/health")
    assert response.status_code == 200


def test_health_check_reports_ok_and_database(client):
    data = client.get("/api/health").json()
    assert data["ok"] is True
    assert "database" in data


def test_health_check_probes_database(client):
    data = client.get("/api/health").json()
    assert data["databaseStatus"] == "healthy"

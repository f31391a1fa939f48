"""Tests for formulaops API endpoints."""
from fastapi.testclient import TestClient


def test_version_endpoint(api_client: TestClient) -> None:
    response = api_client.get("/api/v1/version")
    assert response.status_code == 200
    data = response.json()
    assert "version" in data
    assert isinstance(data["version"], str)


def test_operators_endpoint(api_client: TestClient) -> None:
    response = api_client.get("/api/v1/operators")
    assert response.status_code == 200
    operators = response.json()["operators"]
    assert operators["/"]["name"] == "divide"
    assert set(operators) >= {"+", "-", "*", "/", "^", "&", "=", "<>", ">", ">=", "<", "<="}


def test_evaluate_endpoint_returns_value(api_client: TestClient) -> None:
    response = api_client.post("/api/v1/evaluate", json={"symbol": "/", "operands": [10, "4"]})
    assert response.status_code == 200
    assert response.json() == {"symbol": "/", "value": 2.5, "error": None}


def test_evaluate_endpoint_reports_formula_errors(api_client: TestClient) -> None:
    response = api_client.post("/api/v1/evaluate", json={"symbol": "/", "operands": [10, 0, 0]})
    assert response.status_code == 200
    assert response.json() == {"symbol": "/", "value": None, "error": "#DIV/0!"}

    response = api_client.post("/api/v1/evaluate", json={"symbol": "/", "operands": [0, 0]})
    assert response.json()["error"] == "#VALUE!"

    response = api_client.post("/api/v1/evaluate", json={"symbol": "MOD", "operands": [1, 2]})
    assert response.json()["error"] == "#NAME?"


def test_evaluate_endpoint_rejects_invalid_body(api_client: TestClient) -> None:
    response = api_client.post("/api/v1/evaluate", json={"operands": [1, 2]})
    assert response.status_code == 422
    assert "detail" in response.json()


def test_evaluate_endpoint_handles_long_digit_text(api_client: TestClient) -> None:
    response = api_client.post("/api/v1/evaluate", json={"symbol": "/", "operands": ["1" * 5000, 0]})
    assert response.status_code == 200
    assert response.json()["error"] == "#DIV/0!"


def test_evaluate_endpoint_maps_unexpected_faults_to_500(api_client: TestClient, monkeypatch) -> None:
    from formulaops import features

    class BrokenRegistry:
        def evaluate(self, symbol, operands):
            raise RuntimeError("kernel blew up")

    monkeypatch.setattr(features, "default_registry", lambda: BrokenRegistry())
    response = api_client.post("/api/v1/evaluate", json={"symbol": "/", "operands": [1, 2]})
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from config import Settings


@pytest.fixture
def client():
    with TestClient(create_app(Settings(log_level="WARNING"))) as c:
        yield c


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "0.1.0"}


def test_arithmetic_endpoint_returns_instructions_and_trace(client):
    response = client.post("/arithmetic", json={"text": "2+3*4"})

    assert response.status_code == 200
    body = response.json()
    assert body["result_name"] == "temp4"
    assert body["value"] == 14
    assert body["instructions"][3] == {
        "op": "MUL", "operand1": "temp1", "operand2": "temp2", "result": "temp3",
    }
    assert body["trace"][-1] == "[ADD] temp0 + temp3 = 14 -> temp4"


def test_arithmetic_endpoint_maps_failure_to_422(client):
    response = client.post("/arithmetic", json={"text": "5/0"})

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["kind"] == "semantic"
    assert error["code"] == "DIVISION_BY_ZERO"


def test_polynomial_endpoint_evaluates(client):
    response = client.post("/polynomial", json={"text": "3x^2 + 2x + 1", "x": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["canonical"] == "3x^2 + 2x + 1"
    assert body["value"] == 17
    assert body["terms"][0] == {"coefficient": 3.0, "exponent": 2}
    assert [s["op"] for s in body["steps"]] == ["POW", "MUL", "POW", "MUL", "LOAD"]


def test_polynomial_canonical_endpoint(client):
    response = client.post("/polynomial/canonical", json={"text": "x - x + 2x^2 - 1"})

    assert response.status_code == 200
    assert response.json()["canonical"] == "2x^2 - 1"


def test_polynomial_endpoint_maps_failure_to_422(client):
    response = client.post("/polynomial", json={"text": "2y + 1", "x": 1})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_CONSTANT"


def test_arithmetic_endpoint_deep_nesting_is_422(client):
    response = client.post("/arithmetic", json={"text": "(" * 400 + "1" + ")" * 400})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "NESTING_TOO_DEEP"


def test_polynomial_canonical_endpoint_overflow_is_422(client):
    response = client.post("/polynomial/canonical", json={"text": "1e308x + 1e308x"})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "NUMERIC_OVERFLOW"

from __future__ import annotations

from fastapi.testclient import TestClient

from api.main import create_app
from contracts import TokenTypeMismatch


def _client() -> TestClient:
    return TestClient(create_app())


def test_health():
    with _client() as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_evaluate_returns_value_and_steps():
    with _client() as client:
        response = client.post("/evaluate", json={"expression": "(2+3)*4"})

    assert response.status_code == 200
    body = response.json()
    assert body["value"] == 20
    assert body["steps"] == ["2 + 3 = 5", "5 * 4 = 20"]


def test_evaluate_maps_syntax_error_to_422():
    with _client() as client:
        response = client.post("/evaluate", json={"expression": "--5"})

    assert response.status_code == 422
    assert response.json()["kind"] == "syntax_error"


def test_evaluate_maps_division_by_zero_to_400():
    with _client() as client:
        response = client.post("/evaluate", json={"expression": "5/(2-2)"})

    assert response.status_code == 400
    assert response.json() == {"detail": "division by zero", "kind": "division_by_zero"}


def test_parse_returns_ast():
    with _client() as client:
        response = client.post("/parse", json={"expression": "-(1+2)"})

    assert response.status_code == 200
    ast = response.json()["ast"]
    assert ast["node_type"] == "binop"
    assert ast["negated"] is True


def test_tokens_lists_all_tokens_including_end():
    with _client() as client:
        response = client.post("/tokens", json={"expression": "1 + 2"})

    assert response.status_code == 200
    kinds = [tok["kind"] for tok in response.json()["tokens"]]
    assert kinds == ["number", "symbol", "number", "end"]


def test_parse_maps_syntax_error_to_422():
    with _client() as client:
        response = client.post("/parse", json={"expression": "--5"})

    assert response.status_code == 422
    assert response.json()["kind"] == "syntax_error"


class _MismatchParser:
    def parse(self, source):
        raise TokenTypeMismatch("current token not number")


def test_evaluate_maps_type_mismatch_to_500():
    with _client() as client:
        client.app.state.parser = _MismatchParser()
        response = client.post("/evaluate", json={"expression": "1"})

    assert response.status_code == 500
    assert response.json() == {"detail": "current token not number", "kind": "type_mismatch"}


def test_evaluate_long_sum():
    with _client() as client:
        response = client.post("/evaluate", json={"expression": "+".join(["1"] * 1500)})

    assert response.status_code == 200
    assert response.json()["value"] == 1500


def test_evaluate_deep_nesting_is_422():
    with _client() as client:
        response = client.post("/evaluate", json={"expression": "(" * 1000 + "1" + ")" * 1000})

    assert response.status_code == 422
    assert response.json()["kind"] == "syntax_error"

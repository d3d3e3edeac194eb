"""API tests for the session host."""

from __future__ import annotations

from fastapi.testclient import TestClient

from api.server import create_app


def _client() -> TestClient:
    return TestClient(create_app())


def _new_session(client: TestClient) -> str:
    response = client.post("/sessions")
    assert response.status_code == 200
    return response.json()["session_id"]


def test_health() -> None:
    response = _client().get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_session_starts_from_reset_board() -> None:
    client = _client()
    response = client.post("/sessions")
    body = response.json()

    assert body["session_id"]
    assert body["board"][0] == "rnbqkbnr"
    assert body["board"][7] == "RNBQKBNR"


def test_generate_moves_payload() -> None:
    client = _client()
    session_id = _new_session(client)

    response = client.post(f"/sessions/{session_id}/moves", json={"white": True})
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 12
    assert body["truncated"] is False
    assert body["moves"][0] == {"from": 48, "to": 40, "captured": "."}


def test_apply_move_success_and_errors() -> None:
    client = _client()
    session_id = _new_session(client)

    ok = client.post(f"/sessions/{session_id}/apply", json={"from_square": 52, "to_square": 44})
    assert ok.status_code == 200
    assert ok.json()["status"] == 0
    assert ok.json()["board"][5][4] == "P"
    assert ok.json()["board"][6][4] == "."

    out_of_range = client.post(f"/sessions/{session_id}/apply", json={"from_square": 52, "to_square": 64})
    assert out_of_range.status_code == 400
    assert out_of_range.json()["detail"]["status"] == -1

    empty = client.post(f"/sessions/{session_id}/apply", json={"from_square": 36, "to_square": 28})
    assert empty.status_code == 400
    assert empty.json()["detail"]["status"] == -2

    invalid = client.post(f"/sessions/{session_id}/apply", json={"from_square": 300, "to_square": 28})
    assert invalid.status_code == 422


def test_random_ai_is_deterministic_per_session() -> None:
    client = _client()
    first = _new_session(client)
    second = _new_session(client)

    for white in (True, False, True, False):
        a = client.post(f"/sessions/{first}/random-ai", json={"white": white}).json()
        b = client.post(f"/sessions/{second}/random-ai", json={"white": white}).json()
        assert a == b
        assert a["moved"] is True


def test_load_board_and_no_moves() -> None:
    client = _client()
    session_id = _new_session(client)
    rows = ["........"] * 3 + ["...Q...."] + ["........"] * 4

    loaded = client.put(f"/sessions/{session_id}/board", json={"rows": rows})
    assert loaded.status_code == 200
    assert loaded.json()["board"] == rows

    moves = client.post(f"/sessions/{session_id}/moves", json={"white": True}).json()
    assert moves["count"] == 0

    played = client.post(f"/sessions/{session_id}/random-ai", json={"white": True}).json()
    assert played["count"] == 0
    assert played["moved"] is False
    assert played["board"] == rows

    reset = client.post(f"/sessions/{session_id}/reset").json()
    assert reset["board"][0] == "rnbqkbnr"


def test_load_board_rejects_bad_rows() -> None:
    client = _client()
    session_id = _new_session(client)

    short_row = client.put(f"/sessions/{session_id}/board", json={"rows": ["......."] + ["........"] * 7})
    assert short_row.status_code == 400

    bad_symbol = client.put(f"/sessions/{session_id}/board", json={"rows": ["x......."] + ["........"] * 7})
    assert bad_symbol.status_code == 400

    too_few = client.put(f"/sessions/{session_id}/board", json={"rows": ["........"] * 7})
    assert too_few.status_code == 422


def test_unknown_and_deleted_sessions_return_404() -> None:
    client = _client()
    assert client.get("/sessions/does-not-exist/board").status_code == 404

    session_id = _new_session(client)
    assert client.delete(f"/sessions/{session_id}").status_code == 200
    assert client.get(f"/sessions/{session_id}/board").status_code == 404
    assert client.delete(f"/sessions/{session_id}").status_code == 404

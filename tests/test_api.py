import pytest
from fastapi.testclient import TestClient

from play_whe_analytics.api.deps import get_db, get_history
from play_whe_analytics.main import app
from play_whe_analytics.services import draw_service


@pytest.fixture
def client(sample_history):
    app.dependency_overrides[get_history] = lambda: sample_history
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_gaps(client):
    resp = client.get("/api/v1/stats/gaps", params={"category": "line"})
    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == 9
    gaps = [e["gap"] for e in data]
    assert gaps == sorted(gaps, reverse=True)


def test_gaps_with_offset_and_filter(client):
    resp = client.get(
        "/api/v1/stats/gaps",
        params={"offset": 10, "time_slot": "Evening", "day_name": "Friday"},
    )
    assert resp.status_code == 200
    for entry in resp.json():
        if entry["last_occurrence"]:
            assert entry["last_occurrence"]["time_slot"] == "Evening"
            assert entry["last_occurrence"]["day_name"] == "Friday"


def test_frequency(client):
    resp = client.get("/api/v1/stats/frequency", params={"window": 50, "top_k": 3})
    assert resp.status_code == 200
    data = resp.json()
    assert data["sample_size"] == 50
    assert len(data["all"]) == 36
    assert len(data["hot"]) == 3


def test_quartiles(client):
    resp = client.get("/api/v1/stats/quartiles")
    assert resp.status_code == 200
    groups = resp.json()["groups"]
    assert sorted(groups) == ["R1", "R2", "R3", "R4"]
    assert sorted(m for g in groups.values() for m in g) == list(range(1, 37))


def test_transitions(client):
    resp = client.get("/api/v1/stats/transitions", params={"trigger": 2})
    assert resp.status_code == 200
    data = resp.json()
    assert data["trigger"] == 2
    assert not data["insufficient"]

    resp = client.get("/api/v1/stats/transitions/matrix")
    assert resp.status_code == 200
    assert len(resp.json()["counts"]) == 4


def test_correlation(client):
    resp = client.get("/api/v1/stats/correlation", params={"a": 4, "b": 14, "proximity": 10})
    assert resp.status_code == 200
    assert resp.json()["total_a"] > 0


def test_lanes(client):
    resp = client.get("/api/v1/stats/lanes", params={"cycle_window": 20})
    assert resp.status_code == 200
    lanes = resp.json()["lanes"]
    assert set(lanes) == {"Morning", "Midday", "Afternoon", "Evening"}
    assert all(len(marks) == 20 for marks in lanes.values())


def test_under(client):
    resp = client.get("/api/v1/stats/under", params={"draw_date": "2024-01-08", "time_slot": "Morning"})
    assert resp.status_code == 200
    assert resp.json()["draw_date"] == "2024-01-01"

    resp = client.get("/api/v1/stats/under", params={"draw_date": "2023-01-08", "time_slot": "Morning"})
    assert resp.status_code == 404


@pytest.mark.parametrize("path,params", [
    ("/api/v1/stats/correlation", {"a": 4, "b": 4}),
    ("/api/v1/stats/correlation", {"a": 4, "b": 14, "proximity": 0}),
])
def test_invalid_parameters_are_bad_requests(client, path, params):
    assert client.get(path, params=params).status_code == 400


@pytest.mark.parametrize("path,params", [
    ("/api/v1/stats/gaps", {"offset": -1}),
    ("/api/v1/stats/frequency", {"window": 0}),
    ("/api/v1/stats/transitions", {"trigger": 5}),
    ("/api/v1/stats/gaps", {"category": "colour"}),
])
def test_rejected_by_validation(client, path, params):
    assert client.get(path, params=params).status_code == 422


def test_momentum(client):
    resp = client.get("/api/v1/stats/momentum")
    assert resp.status_code == 200
    data = resp.json()
    assert [e["symbol"] for e in data] == list(range(1, 37))
    assert sum(e["recent_count"] for e in data) == 10
    assert {e["status"] for e in data} <= {"HOT STREAK!", "Warming Up", "Neutral"}

    resp = client.get("/api/v1/stats/momentum", params={"search": "snake", "lookback": 50})
    assert [e["symbol_name"] for e in resp.json()] == ["Little Snake", "Big Snake"]


def test_momentum_rejects_zero_lookback(client):
    assert client.get("/api/v1/stats/momentum", params={"lookback": 0}).status_code == 422


@pytest.fixture
def draws_client(monkeypatch):
    calls = []

    async def fake_get_draws(session, **kwargs):
        calls.append(kwargs)
        return [], 0

    async def no_db():
        yield None

    monkeypatch.setattr(draw_service.crud, "get_draws", fake_get_draws)
    app.dependency_overrides[get_db] = no_db
    yield TestClient(app), calls
    app.dependency_overrides.clear()


def test_list_draws_with_filters(draws_client):
    client, calls = draws_client
    resp = client.get("/api/v1/draws", params={
        "time_slot": "Midday", "line": "4 Line", "suit": "3", "year": 2024, "search": "dog",
    })
    assert resp.status_code == 200
    assert resp.json()["total"] == 0
    assert calls[0]["time_slot"] == "Midday"
    assert calls[0]["line_group"] == "4 Line"
    assert calls[0]["suit_group"] == "3"
    assert calls[0]["year"] == 2024
    assert calls[0]["search"] == "dog"
    assert calls[0]["month"] is None


def test_list_draws_unknown_line(draws_client):
    client, calls = draws_client
    assert client.get("/api/v1/draws", params={"line": "12 Line"}).status_code == 400
    assert client.get("/api/v1/draws", params={"symbol": 37}).status_code == 422
    assert calls == []

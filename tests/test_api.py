import pytest
from fastapi.testclient import TestClient

import main


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(main, "API_KEY", None)
    return TestClient(main.app)


def payload(edges=None, **request):
    return {
        "vertices": [
            {"id": "a", "classId": "A"},
            {"id": "b", "class_id": "B"},
            {"id": "c", "classId": "C"},
            {"id": "d", "classId": "D"},
        ],
        "edges": edges
        if edges is not None
        else [
            {"source": "a", "target": "b"},
            {"source": "a", "target": "c"},
            {"source": "b", "target": "c"},
            {"source": "a", "target": "d"},
        ],
        "request": {"graphType": "hard", **request},
    }


def test_healthcheck(client):
    response = client.get("/api/health/check")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert "odd_cycle" in body["algorithms"]
    assert "soft" in body["graphTypes"]


def test_default_clique_cover(client):
    response = client.post("/api/cover/generate", json=payload())
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["cliques"] == [["a", "b", "c"]]
    assert body["residualEdges"] == [{"source": "a", "target": "d", "weight": 1.0}]
    assert [c["kind"] for c in body["constraints"]] == ["clique", "clique"]
    assert body["constraints"][0]["weight"] is None
    assert body["stats"]["graph_vertices"] == 4
    assert body["stats"]["graph_edges"] == 4


def test_all_algorithms(client):
    response = client.post(
        "/api/cover/generate",
        json=payload(algorithms=["clique", "star", "special_star", "bipartite", "odd_cycle"]),
    )
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["stars"] == [{"center": "a", "leaves": ["b", "c", "d"]}]
    assert {s["classId"] for s in body["specialStars"]} == {"B", "C", "D"}
    assert len(body["oddCycles"]) == 6
    assert len(body["bipartiteCliques"]) == 4


def test_unknown_endpoint_is_rejected(client):
    response = client.post("/api/cover/generate", json=payload(edges=[{"source": "a", "target": "z"}]))
    assert response.status_code == 400
    assert "z" in response.json()["detail"]


def test_unknown_algorithm_is_rejected(client):
    response = client.post("/api/cover/generate", json=payload(algorithms=["magic"]))
    assert response.status_code == 400


def test_cycle_budget(client):
    response = client.post(
        "/api/cover/generate", json=payload(algorithms=["odd_cycle"], maxCycleExpansions=1)
    )
    assert response.status_code == 422

    response = client.post(
        "/api/cover/generate",
        json=payload(algorithms=["odd_cycle"], maxCycleExpansions=2, allowPartialCycles=True),
    )
    assert response.status_code == 200
    assert response.json()["oddCycles"] == [["a", "b", "c"]]


def test_invalid_graph_type(client):
    body = payload()
    body["request"]["graphType"] = "weird"
    assert client.post("/api/cover/generate", json=body).status_code == 422


def test_api_key_required_when_set(monkeypatch):
    monkeypatch.setattr(main, "API_KEY", "secret")
    client = TestClient(main.app)
    assert client.post("/api/cover/generate", json=payload()).status_code == 401
    response = client.post("/api/cover/generate", json=payload(), headers={"x-api-key": "secret"})
    assert response.status_code == 200
    assert client.get("/api/health/check").status_code == 200

"""
Layout Route Tests
==================
"""

import uuid

from hybrid_layouts.api import layout_routes


def _layout_payload():
    section_id = str(uuid.uuid4())
    return {
        "kind": "hybrid",
        "canvas": {"width": 1000, "height": 500, "gridSize": 10, "zoom": 1.5},
        "sections": [
            {"id": section_id, "label": "Zone", "shape": "rectangle", "x": 100, "y": 100, "width": 180, "height": 140},
        ],
        "elements": [
            {"type": "stage", "label": "Stage", "x": 500, "y": 60, "width": 260, "height": 80},
        ],
        "seats": [
            {"sectionId": section_id, "rowLabel": "Zone", "number": 1, "x": 130, "y": 130, "type": "STANDARD"},
            {"sectionId": section_id, "rowLabel": "Zone", "number": 2, "x": 170, "y": 130, "tierCode": "VIP"},
        ],
    }


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_api_info(client):
    data = client.get("/api/info").json()

    assert data["default_canvas"]["gridSize"] == 20
    assert "stage" in data["element_types"]


def test_create_layout(client):
    response = client.post("/api/seat-layouts/")

    assert response.status_code == 200
    data = response.json()
    assert data["layout_id"]
    assert data["layout"]["canvas"] == {"width": 1200.0, "height": 700.0, "gridSize": 20.0, "zoom": 1.0}
    assert data["layout"]["seats"] == []

    fetched = client.get(f"/api/seat-layouts/{data['layout_id']}/hybrid")
    assert fetched.json() == data["layout"]


def test_get_unknown_layout(client):
    response = client.get("/api/seat-layouts/does-not-exist/hybrid")

    assert response.status_code == 404


def test_put_then_get(client):
    payload = _layout_payload()

    put = client.put("/api/seat-layouts/hall-7/hybrid", json=payload)
    assert put.status_code == 200
    stored = put.json()

    assert "kind" not in stored
    assert stored["canvas"]["gridSize"] == 10
    assert [s["number"] for s in stored["seats"]] == [1, 2]
    assert stored["seats"][0]["sectionId"] == payload["sections"][0]["id"]
    assert stored["seats"][0]["id"]
    assert stored["seats"][0]["tierCode"] is None
    assert stored["elements"][0]["id"]

    fetched = client.get("/api/seat-layouts/hall-7/hybrid")
    assert fetched.status_code == 200
    assert fetched.json() == stored


def test_put_replaces_previous_layout(client):
    client.put("/api/seat-layouts/hall-8/hybrid", json=_layout_payload())
    client.put("/api/seat-layouts/hall-8/hybrid", json={"canvas": None})

    data = client.get("/api/seat-layouts/hall-8/hybrid").json()

    assert data == {"canvas": None, "sections": [], "elements": [], "seats": []}


def test_put_accepts_null_lists(client):
    response = client.put(
        "/api/seat-layouts/hall-12/hybrid",
        json={"canvas": {"width": 10}, "sections": None, "elements": None, "seats": None},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["sections"] == []
    assert data["elements"] == []
    assert data["seats"] == []


def test_put_rejects_malformed_ids(client):
    response = client.put(
        "/api/seat-layouts/hall-9/hybrid",
        json={"seats": [{"sectionId": "not-a-uuid"}]},
    )

    assert response.status_code == 422


def test_summary(client):
    client.put("/api/seat-layouts/hall-10/hybrid", json=_layout_payload())

    data = client.get("/api/seat-layouts/hall-10").json()

    assert data["layout_id"] == "hall-10"
    assert data["section_count"] == 1
    assert data["element_count"] == 1
    assert data["seat_count"] == 2


def test_delete(client):
    client.put("/api/seat-layouts/hall-11/hybrid", json=_layout_payload())

    assert client.delete("/api/seat-layouts/hall-11/hybrid").status_code == 200
    assert client.get("/api/seat-layouts/hall-11/hybrid").status_code == 404
    assert client.delete("/api/seat-layouts/hall-11/hybrid").status_code == 404


def test_store_not_initialized(client, monkeypatch):
    monkeypatch.setattr(layout_routes, "layout_store", None)

    response = client.get("/api/seat-layouts/hall-1/hybrid")

    assert response.status_code == 500


def test_lifespan_injects_store(client):
    from hybrid_layouts import server

    assert server.layout_store is not None
    assert layout_routes.layout_store is server.layout_store

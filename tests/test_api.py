from __future__ import annotations

from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

pytest.importorskip("ortools")

from app import create_app
from hosteldada.utils.config import get_settings


def _build_test_client(admin_token: str | None = None) -> TestClient:
    settings = replace(get_settings(), admin_token=admin_token, solver_workers=1)
    return TestClient(create_app(settings=settings))


def _login(client: TestClient, admin_token: str) -> dict[str, str]:
    response = client.post("/login", json={"admin_token": admin_token})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def test_list_snacks_ordered_by_expiry() -> None:
    client = _build_test_client()

    response = client.get("/snacks")

    assert response.status_code == 200
    assert [row["name"] for row in response.json()] == ["Lays", "Kurkure", "Oreo"]


def test_purchase_then_profit_report() -> None:
    client = _build_test_client()

    response = client.post("/snacks/purchase", json={"name": "Kurkure", "quantity": 3})
    assert response.status_code == 200
    assert response.json() == {"name": "Kurkure", "profit": 45}

    report = client.get("/snacks/profit").json()
    assert report["total_profit"] == 45
    assert report["records"] == [{"name": "Kurkure", "profit": 45}]


def test_purchase_out_of_stock_returns_conflict() -> None:
    client = _build_test_client()

    response = client.post("/snacks/purchase", json={"name": "Lays", "quantity": 10})

    assert response.status_code == 409
    lays = [row for row in client.get("/snacks").json() if row["name"] == "Lays"][0]
    assert lays["quantity"] == 5


def test_purchase_rejects_non_positive_quantity() -> None:
    client = _build_test_client()

    response = client.post("/snacks/purchase", json={"name": "Lays", "quantity": 0})

    assert response.status_code == 422


def test_low_stock_and_search() -> None:
    client = _build_test_client()

    low = client.get("/snacks/low_stock", params={"threshold": 5}).json()
    found = client.get("/snacks/search", params={"prefix": "or"}).json()

    assert [row["name"] for row in low] == ["Lays"]
    assert [row["name"] for row in found] == ["Oreo"]


def test_room_assignments_greedy_and_unknown_strategy() -> None:
    client = _build_test_client()

    body = client.get("/rooms/assignments").json()
    assert body["assignments"] == {"A1": "Alice", "A2": "Bob"}
    assert body["unassigned_students"] == ["Charlie", "Daisy"]

    response = client.get("/rooms/assignments", params={"strategy": "lottery"})
    assert response.status_code == 400


def test_dishes_endpoints() -> None:
    client = _build_test_client()

    top = client.get("/dishes/top", params={"k": 2}).json()
    plan = client.get("/dishes/week_plan").json()

    assert [row["name"] for row in top] == ["Paneer", "Rice"]
    assert plan[0] == {"day": "Fri", "dish": "Chole"}


def test_laundry_booking_conflict_and_success() -> None:
    client = _build_test_client()

    conflict = client.post("/laundry/slots", json={"start": 10, "end": 11})
    booked = client.post("/laundry/slots", json={"start": 12, "end": 13})

    assert conflict.status_code == 409
    assert booked.status_code == 201
    assert client.get("/laundry/slots").json()[-1] == {"start": 12, "end": 13}


def test_laundry_booking_rejects_reversed_slot() -> None:
    client = _build_test_client()

    response = client.post("/laundry/slots", json={"start": 13, "end": 12})

    assert response.status_code == 422


def test_tasks_listed_by_urgency() -> None:
    client = _build_test_client()
    for description, urgency in [("fan", 5), ("tap", 1), ("bulb", 3)]:
        assert client.post(
            "/tasks",
            json={"description": description, "urgency": urgency},
        ).status_code == 201

    urgencies = [row["urgency"] for row in client.get("/tasks").json()]

    assert urgencies == [1, 3, 5]


def test_task_urgency_outside_suggested_range_accepted() -> None:
    client = _build_test_client()

    response = client.post("/tasks", json={"description": "roof", "urgency": 11})

    assert response.status_code == 201
    assert client.get("/tasks").json()[-1] == {"description": "roof", "urgency": 11}


def test_shortest_path_endpoint() -> None:
    client = _build_test_client()

    body = client.get("/paths/shortest").json()
    unreachable = client.get(
        "/paths/shortest",
        params={"source": "Gate", "destination": "Library"},
    ).json()
    missing_source = client.get("/paths/shortest", params={"source": "Library"})

    assert body["distance"] == 3
    assert body["nodes"] == ["Gate", "Mess", "Laundry"]
    assert unreachable["distance"] is None
    assert unreachable["reachable"] is False
    assert missing_source.status_code == 404


def test_mess_queue_endpoint() -> None:
    client = _build_test_client()

    body = client.get("/mess/queue").json()

    assert body["window_size"] == 2
    assert all(window["count"] == 2 for window in body["windows"])
    assert body["best_entry_time"] == 1


def test_mutating_routes_require_login_when_token_configured() -> None:
    client = _build_test_client(admin_token="warden-secret")

    anonymous = client.post("/tasks", json={"description": "fan", "urgency": 2})
    assert anonymous.status_code == 401

    wrong = client.post("/login", json={"admin_token": "guess"})
    assert wrong.status_code == 401

    headers = _login(client, "warden-secret")
    authorized = client.post(
        "/tasks",
        json={"description": "fan", "urgency": 2},
        headers=headers,
    )
    assert authorized.status_code == 201

    client.post("/logout", headers=headers)
    after_logout = client.post(
        "/tasks",
        json={"description": "tap", "urgency": 1},
        headers=headers,
    )
    assert after_logout.status_code == 401


def test_login_unavailable_without_admin_token() -> None:
    client = _build_test_client()

    response = client.post("/login", json={"admin_token": "anything"})

    assert response.status_code == 503

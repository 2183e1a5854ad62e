from __future__ import annotations

import sqlite3

import pytest
from fastapi.testclient import TestClient

from app import create_app


@pytest.fixture()
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def _create_building(client: TestClient, code: str = "B") -> dict:
    response = client.post(
        "/api/buildings",
        json={
            "code": code,
            "name": "Main building",
            "description": "Engineering",
            "dimensions": {"width": 20, "length": 15},
        },
    )
    assert response.status_code == 201
    return response.json()


def test_health(client: TestClient) -> None:
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_and_list_buildings(client: TestClient) -> None:
    created = _create_building(client)

    assert created == {
        "code": "B",
        "name": "Main building",
        "description": "Engineering",
        "dimensions": {"width": 20, "length": 15},
    }
    assert [item["code"] for item in client.get("/api/buildings").json()] == ["B"]


def test_duplicate_building_is_409(client: TestClient) -> None:
    _create_building(client)
    response = client.post("/api/buildings", json={"code": "B", "dimensions": {"width": 2, "length": 2}})
    assert response.status_code == 409
    assert response.json() == {"message": "Building with code B already exists."}


def test_invalid_building_is_400(client: TestClient) -> None:
    response = client.post("/api/buildings", json={"code": "B", "dimensions": {"width": -3, "length": 2}})
    assert response.status_code == 400
    assert response.json() == {"message": "Building dimensions must be greater than 0."}


def test_create_and_list_floors(client: TestClient) -> None:
    _create_building(client)

    created = client.post("/api/floors", json={"buildingCode": "B", "floorNumber": 2, "description": "Labs"})
    listed = client.get("/api/buildings/B/floors")

    assert created.status_code == 201
    assert created.json()["floorNumber"] == 2
    assert created.json()["buildingCode"] == "B"
    assert listed.status_code == 200
    assert [item["domainId"] for item in listed.json()] == [created.json()["domainId"]]


def test_floor_for_unknown_building_is_404(client: TestClient) -> None:
    response = client.post("/api/floors", json={"buildingCode": "NOPE", "floorNumber": 1})
    assert response.status_code == 404
    assert response.json() == {"message": "Building not found."}


def test_non_string_building_code_for_floor_is_400(client: TestClient) -> None:
    _create_building(client)
    response = client.post("/api/floors", json={"buildingCode": {"a": 1}, "floorNumber": 1})
    assert response.status_code == 400
    assert "buildingCode" in response.json()["message"]


def test_duplicate_floor_number_is_409(client: TestClient) -> None:
    _create_building(client)
    client.post("/api/floors", json={"buildingCode": "B", "floorNumber": 1})
    response = client.post("/api/floors", json={"buildingCode": "B", "floorNumber": 1})
    assert response.status_code == 409


def test_floors_of_unknown_building_is_404(client: TestClient) -> None:
    response = client.get("/api/buildings/NOPE/floors")
    assert response.status_code == 404


def test_list_buildings_storage_failure_is_503(client: TestClient, monkeypatch) -> None:
    def _raise_operational_error():
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(client.app.state.building_repository, "find_all", _raise_operational_error)
    response = client.get("/api/buildings")
    assert response.status_code == 503
    assert response.json() == {"message": "database is locked"}

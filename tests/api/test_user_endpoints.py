from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from userhub_backend.api import create_api
from userhub_backend.settings import BackendSettings
from userhub_backend.shared import IdStrategy

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


def test_list_users_returns_seed_records(client: TestClient) -> None:
    response = client.get("/api/users")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["count"] == 3
    assert [user["name"] for user in body["data"]] == [
        "John Doe",
        "Jane Smith",
        "Bob Johnson",
    ]


def test_get_user_by_id(client: TestClient) -> None:
    response = client.get("/api/users/2")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {"id": 2, "name": "Jane Smith", "email": "jane@example.com"},
    }


@pytest.mark.parametrize("user_id", ["42", "abc", "-1"])
def test_get_unknown_user_returns_not_found(client: TestClient, user_id: str) -> None:
    response = client.get(f"/api/users/{user_id}")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "User not found"}


def test_get_user_parses_leading_digits(client: TestClient) -> None:
    response = client.get("/api/users/2abc")

    assert response.status_code == 200
    assert response.json()["data"]["id"] == 2


def test_create_user_assigns_next_id(client: TestClient) -> None:
    response = client.post("/api/users", json={"name": "Ann", "email": "ann@x.com"})

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "User created successfully"
    assert body["data"] == {"id": 4, "name": "Ann", "email": "ann@x.com"}
    assert client.get("/api/users/4").json()["data"] == body["data"]


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Bo"},
        {"email": "bo@x.com"},
        {"name": "", "email": "bo@x.com"},
        {"name": "Bo", "email": None},
        {},
    ],
)
def test_create_user_requires_name_and_email(
    client: TestClient, payload: dict[str, object]
) -> None:
    response = client.post("/api/users", json=payload)

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Name and email are required",
    }
    assert client.get("/api/users").json()["count"] == 3


def test_create_user_without_body(client: TestClient) -> None:
    response = client.post("/api/users")

    assert response.status_code == 400
    assert response.json()["message"] == "Name and email are required"


def test_create_user_rejects_non_text_fields(client: TestClient) -> None:
    response = client.post("/api/users", json={"name": 12, "email": "a@b.c"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"].startswith("Invalid request: body.name")


def test_update_user_name_only_keeps_email(client: TestClient) -> None:
    response = client.put("/api/users/1", json={"name": "Johnny"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "User updated successfully"
    assert body["data"] == {"id": 1, "name": "Johnny", "email": "john@example.com"}


def test_update_user_email_only_keeps_name(client: TestClient) -> None:
    response = client.put("/api/users/3", json={"email": "bob@new.org", "name": ""})

    assert response.status_code == 200
    assert response.json()["data"] == {
        "id": 3,
        "name": "Bob Johnson",
        "email": "bob@new.org",
    }


def test_update_user_without_body_changes_nothing(client: TestClient) -> None:
    response = client.put("/api/users/2")

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Jane Smith"


def test_update_unknown_user(client: TestClient) -> None:
    response = client.put("/api/users/9", json={"name": "Ghost"})

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "User not found"}
    names = [user["name"] for user in client.get("/api/users").json()["data"]]
    assert "Ghost" not in names


def test_delete_user_removes_exactly_one(client: TestClient) -> None:
    response = client.delete("/api/users/2")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "User deleted successfully"
    assert body["data"]["id"] == 2
    listing = client.get("/api/users").json()
    assert [user["id"] for user in listing["data"]] == [1, 3]
    assert client.get("/api/users/2").status_code == 404


def test_delete_unknown_user(client: TestClient) -> None:
    response = client.delete("/api/users/99")

    assert response.status_code == 404
    assert client.get("/api/users").json()["count"] == 3


def test_ids_are_not_reused_after_delete(client: TestClient) -> None:
    client.delete("/api/users/3")

    response = client.post("/api/users", json={"name": "Cy", "email": "cy@x.com"})

    assert response.json()["data"]["id"] == 4


def test_create_delete_and_invalid_create_scenario(client: TestClient) -> None:
    created = client.post("/api/users", json={"name": "Ann", "email": "ann@x.com"})
    assert created.status_code == 201
    assert created.json()["data"]["id"] == 4

    assert client.delete("/api/users/2").status_code == 200

    rejected = client.post("/api/users", json={"name": "Bo"})
    assert rejected.status_code == 400
    assert client.get("/api/users").json()["count"] == 3


@pytest.fixture
def legacy_client(upload_dir: Path) -> Iterator[TestClient]:
    settings = BackendSettings(
        upload_dir=upload_dir, user_id_strategy=IdStrategy.LENGTH
    )
    with TestClient(create_api(settings)) as test_client:
        yield test_client


def test_length_strategy_uses_collection_size(legacy_client: TestClient) -> None:
    legacy_client.delete("/api/users/1")

    response = legacy_client.post("/api/users", json={"name": "Di", "email": "di@x"})

    assert response.json()["data"]["id"] == 3


def test_unseeded_collection_starts_empty(upload_dir: Path) -> None:
    settings = BackendSettings(upload_dir=upload_dir, seed_users=False)
    with TestClient(create_api(settings)) as client:
        assert client.get("/api/users").json() == {
            "success": True,
            "count": 0,
            "data": [],
        }
        created = client.post("/api/users", json={"name": "Ed", "email": "ed@x"})
        assert created.json()["data"]["id"] == 1


def test_non_ascii_digits_do_not_match(client: TestClient) -> None:
    response = client.get("/api/users/٣")

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_update_body_is_validated_before_lookup(client: TestClient) -> None:
    response = client.put("/api/users/999", json={"name": 5})

    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid request: body.name")

"""
HTTP tests for the /users endpoints, run against the in-memory store.
"""

import pytest


def _create(client, **fields):
    response = client.post("/users", json=fields)
    assert response.status_code == 201
    return response.json()["createdUser"]


def test_root_returns_plain_text_greeting(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.startswith("Hello")


def test_list_users_empty_collection(client):
    response = client.get("/users")

    assert response.status_code == 200
    assert response.json() == []


def test_created_user_appears_in_list(client):
    created = _create(client, name="Jane")

    assert created["id"]
    assert created["name"] == "Jane"

    users = client.get("/users").json()
    assert {"id": created["id"], "name": "Jane", "email": None, "age": None} in users


def test_create_response_envelope(client):
    response = client.post("/users", json={"name": "Jane", "email": "jane@example.com", "age": 31})

    body = response.json()
    assert body["message"] == "User created"
    assert body["createdUser"]["email"] == "jane@example.com"
    assert body["createdUser"]["age"] == 31


@pytest.mark.parametrize("payload", [
    {},
    {"name": ""},
    {"name": "Jane", "age": -1},
    {"name": "Jane", "role": "admin"},
    {"name": "Jane", "id": "abc"},
])
def test_create_rejects_invalid_payload(client, payload):
    response = client.post("/users", json=payload)

    assert response.status_code == 422
    assert client.get("/users").json() == []


def test_update_missing_user_returns_404(client):
    response = client.put("/users/999", json={"name": "Bob"})

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_update_applies_only_supplied_fields(client):
    created = _create(client, name="Jane", email="jane@example.com")

    response = client.put(f"/users/{created['id']}", json={"age": 40})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "User updated"
    assert body["updatedUser"] == {
        "id": created["id"],
        "name": "Jane",
        "email": "jane@example.com",
        "age": 40,
    }


def test_update_is_idempotent(client):
    created = _create(client, name="Jane")
    url = f"/users/{created['id']}"

    first = client.put(url, json={"name": "Janet"}).json()["updatedUser"]
    second = client.put(url, json={"name": "Janet"}).json()["updatedUser"]

    assert first == second
    assert client.get("/users").json() == [second]


def test_update_rejects_unknown_fields(client):
    created = _create(client, name="Jane")

    response = client.put(f"/users/{created['id']}", json={"id": "other", "is_admin": True})

    assert response.status_code == 422
    assert client.get("/users").json()[0]["id"] == created["id"]


def test_update_rejects_null_name(client):
    created = _create(client, name="Jane")

    response = client.put(f"/users/{created['id']}", json={"name": None})

    assert response.status_code == 422


def test_update_with_empty_body_returns_current_record(client):
    created = _create(client, name="Jane")

    response = client.put(f"/users/{created['id']}", json={})

    assert response.status_code == 200
    assert response.json()["updatedUser"] == created


def test_delete_returns_deleted_user_then_404(client):
    created = _create(client, name="Jane")
    url = f"/users/{created['id']}"

    first = client.delete(url)
    assert first.status_code == 200
    assert first.json() == {"message": "User deleted", "deletedUser": created}

    assert client.get("/users").json() == []

    second = client.delete(url)
    assert second.status_code == 404
    assert second.json() == {"message": "User not found"}


def test_delete_missing_user_returns_404(client):
    response = client.delete("/users/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


# ── Store unreachable ─────────────────────────────────────────


def test_list_users_store_down_returns_500(unreachable_client):
    response = unreachable_client.get("/users")

    assert response.status_code == 500
    assert response.json() == {"message": "localhost:27017: [Errno 111] Connection refused"}


@pytest.mark.parametrize("method,path,payload", [
    ("post", "/users", {"name": "Jane"}),
    ("put", "/users/abc", {"name": "Bob"}),
    ("delete", "/users/abc", None),
])
def test_store_down_maps_to_500_message(unreachable_client, method, path, payload):
    kwargs = {"json": payload} if payload is not None else {}
    response = getattr(unreachable_client, method)(path, **kwargs)

    assert response.status_code == 500
    assert set(response.json()) == {"message"}


def test_process_keeps_serving_root_when_store_down(unreachable_client):
    assert unreachable_client.get("/users").status_code == 500
    assert unreachable_client.get("/").status_code == 200

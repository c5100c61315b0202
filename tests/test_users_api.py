"""HTTP tests for user creation and listing."""

from exercise_tracker_api.app.core.errors import StoreError
from exercise_tracker_api.app.store import MemoryStore


class BrokenStore(MemoryStore):
    def insert_user(self, username):
        raise StoreError("disk I/O error")

    def find_users(self):
        raise StoreError("disk I/O error")


def test_create_user_returns_id_and_username(client):
    response = client.post("/api/users", data={"username": "alice"})
    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "alice"
    assert body["id"]
    assert set(body) == {"id", "username"}


def test_create_then_list_users(client, user):
    response = client.get("/api/users")
    assert response.status_code == 200
    users = response.json()
    assert len(users) == 1
    assert users[0] == {"id": user["id"], "username": "alice"}


def test_list_users_empty_store_returns_empty_list(client):
    response = client.get("/api/users")
    assert response.status_code == 200
    assert response.json() == []


def test_list_users_keeps_creation_order(client):
    for name in ("a", "b", "c"):
        client.post("/api/users", data={"username": name})
    names = [u["username"] for u in client.get("/api/users").json()]
    assert names == ["a", "b", "c"]


def test_create_user_with_empty_username_is_allowed(client):
    response = client.post("/api/users", data={"username": ""})
    assert response.status_code == 201
    assert response.json()["username"] == ""


def test_duplicate_usernames_get_distinct_ids(client):
    first = client.post("/api/users", data={"username": "bob"}).json()
    second = client.post("/api/users", data={"username": "bob"}).json()
    assert first["id"] != second["id"]


def test_store_failure_is_reported_as_server_error(client):
    from exercise_tracker_api.app.main import app
    from exercise_tracker_api.app.store import get_store

    app.dependency_overrides[get_store] = lambda: BrokenStore()
    response = client.post("/api/users", data={"username": "alice"})
    assert response.status_code == 500
    assert response.json() == {"detail": "there was an error"}
    assert "disk" not in response.text

    response = client.get("/api/users")
    assert response.status_code == 500


def test_cors_headers_present(client):
    response = client.get("/api/users", headers={"Origin": "http://example.com"})
    assert response.headers.get("access-control-allow-origin") == "*"


def test_index_banner(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"]

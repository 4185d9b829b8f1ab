"""Tests for user administration."""
from conftest import room_id_for, upload


def test_list_users_hides_password_hash(client, admin_headers):
    response = client.get("/api/users", headers=admin_headers)
    assert response.status_code == 200

    users = response.json()
    assert [u["username"] for u in users] == ["admin"]
    assert "password_hash" not in users[0]


def test_plain_user_cannot_manage_users(client, make_user):
    _, headers = make_user("worker")

    assert client.get("/api/users", headers=headers).status_code == 403
    response = client.post(
        "/api/users",
        json={"username": "x", "email": "x@example.com", "password": "secret123", "role": "user"},
        headers=headers,
    )
    assert response.status_code == 403


def test_manager_can_list_users(client, make_user):
    _, headers = make_user("lead", role="manager")
    assert client.get("/api/users", headers=headers).status_code == 200


def test_duplicate_username_conflicts(client, admin_headers, make_user):
    make_user("taken")

    response = client.post(
        "/api/users",
        json={"username": "taken", "email": "fresh@example.com", "password": "secret123", "role": "user"},
        headers=admin_headers,
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "Username already exists"


def test_duplicate_email_conflicts(client, admin_headers):
    response = client.post(
        "/api/users",
        json={"username": "fresh", "email": "admin@raroomreport.com", "password": "secret123", "role": "user"},
        headers=admin_headers,
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "Email already exists"


def test_invalid_user_payload_is_bad_request(client, admin_headers):
    response = client.post(
        "/api/users",
        json={"username": "shorty", "email": "not-an-email", "password": "123", "role": "admin"},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_update_user_replaces_fields(client, admin_headers, make_user):
    user, _ = make_user("promote")

    response = client.put(
        f"/api/users/{user['id']}",
        json={"username": "promoted", "email": "promoted@example.com", "role": "manager", "is_active": True},
        headers=admin_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "promoted"
    assert data["role"] == "manager"


def test_update_requires_full_record(client, admin_headers, make_user):
    user, _ = make_user("partial")

    response = client.put(f"/api/users/{user['id']}", json={"role": "manager"}, headers=admin_headers)
    assert response.status_code == 400


def test_update_user_to_taken_username_conflicts(client, admin_headers, make_user):
    user, _ = make_user("second")

    response = client.put(
        f"/api/users/{user['id']}",
        json={"username": "admin", "email": "second@example.com", "role": "user", "is_active": True},
        headers=admin_headers,
    )
    assert response.status_code == 409


def test_user_with_videos_cannot_be_deleted(client, admin_headers, make_user):
    user, headers = make_user("uploader")
    room_id = room_id_for(client, headers, "101")
    video = upload(client, headers, room_id).json()

    response = client.delete(f"/api/users/{user['id']}", headers=admin_headers)
    assert response.status_code == 400

    assert client.delete(f"/api/videos/{video['id']}", headers=headers).status_code == 204
    assert client.delete(f"/api/users/{user['id']}", headers=admin_headers).status_code == 204
    assert client.get(f"/api/users/{user['id']}", headers=admin_headers).status_code == 404


def test_username_reusable_after_delete(client, admin_headers, make_user):
    user, _ = make_user("recycled")
    assert client.delete(f"/api/users/{user['id']}", headers=admin_headers).status_code == 204

    again, _ = make_user("recycled")
    assert again["id"] != user["id"]


def test_deleted_user_cannot_login(client, admin_headers, make_user):
    user, _ = make_user("leaver")
    client.delete(f"/api/users/{user['id']}", headers=admin_headers)

    response = client.post("/api/auth/login", json={"username": "leaver", "password": "secret123"})
    assert response.status_code == 401

"""Tests for room administration."""
from conftest import room_id_for, upload


def test_list_seeded_rooms(client, admin_headers):
    response = client.get("/api/rooms", headers=admin_headers)
    assert response.status_code == 200
    assert sorted(r["room_number"] for r in response.json()) == ["101", "102", "201", "202", "301"]


def test_plain_user_can_list_rooms(client, make_user):
    _, headers = make_user("viewer")
    response = client.get("/api/rooms", headers=headers)
    assert response.status_code == 200
    assert len(response.json()) == 5


def test_plain_user_cannot_manage_rooms(client, make_user):
    _, headers = make_user("viewer")

    assert client.post("/api/rooms", json={"room_number": "999"}, headers=headers).status_code == 403
    room_id = room_id_for(client, headers, "101")
    assert client.put(f"/api/rooms/{room_id}", json={"room_number": "999", "is_active": True}, headers=headers).status_code == 403
    assert client.delete(f"/api/rooms/{room_id}", headers=headers).status_code == 403


def test_manager_can_create_room(client, make_user):
    _, headers = make_user("boss", role="manager")

    response = client.post("/api/rooms", json={"room_number": "A-12"}, headers=headers)
    assert response.status_code == 201
    assert response.json()["room_number"] == "A-12"
    assert response.json()["is_active"] is True


def test_duplicate_room_number_conflicts(client, admin_headers):
    response = client.post("/api/rooms", json={"room_number": "101"}, headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["detail"] == "Room number already exists"


def test_room_number_reusable_after_delete(client, admin_headers):
    room_id = room_id_for(client, admin_headers, "301")

    assert client.delete(f"/api/rooms/{room_id}", headers=admin_headers).status_code == 204
    response = client.post("/api/rooms", json={"room_number": "301"}, headers=admin_headers)
    assert response.status_code == 201
    assert response.json()["id"] != room_id


def test_update_room(client, admin_headers):
    room_id = room_id_for(client, admin_headers, "102")

    response = client.put(
        f"/api/rooms/{room_id}",
        json={"room_number": "102B", "is_active": False},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["room_number"] == "102B"
    assert response.json()["is_active"] is False


def test_update_room_requires_full_record(client, admin_headers):
    room_id = room_id_for(client, admin_headers, "102")
    client.put(f"/api/rooms/{room_id}", json={"room_number": "102", "is_active": False}, headers=admin_headers)

    response = client.put(f"/api/rooms/{room_id}", json={"room_number": "102"}, headers=admin_headers)
    assert response.status_code == 400
    assert client.get(f"/api/rooms/{room_id}", headers=admin_headers).json()["is_active"] is False


def test_update_room_to_taken_number_conflicts(client, admin_headers):
    room_id = room_id_for(client, admin_headers, "102")

    response = client.put(f"/api/rooms/{room_id}", json={"room_number": "201", "is_active": True}, headers=admin_headers)
    assert response.status_code == 409


def test_update_missing_room(client, admin_headers):
    response = client.put("/api/rooms/9999", json={"room_number": "x", "is_active": True}, headers=admin_headers)
    assert response.status_code == 404


def test_room_with_videos_cannot_be_deleted(client, admin_headers):
    room_id = room_id_for(client, admin_headers, "201")
    video = upload(client, admin_headers, room_id).json()

    response = client.delete(f"/api/rooms/{room_id}", headers=admin_headers)
    assert response.status_code == 400
    assert "existing videos" in response.json()["detail"]

    assert client.delete(f"/api/videos/{video['id']}", headers=admin_headers).status_code == 204
    assert client.delete(f"/api/rooms/{room_id}", headers=admin_headers).status_code == 204
    assert client.get(f"/api/rooms/{room_id}", headers=admin_headers).status_code == 404

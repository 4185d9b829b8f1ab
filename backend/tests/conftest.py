"""Shared fixtures: an app on a throwaway SQLite database and upload dir."""
import asyncio
import pytest
from fastapi.testclient import TestClient
from roomvideo.config import Settings
from roomvideo.main import create_app
from roomvideo.utils import security


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    """Cheap bcrypt rounds keep the suite quick."""
    monkeypatch.setattr(security, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        upload_dir=str(tmp_path / "uploads"),
        jwt_secret_key="test-secret",
        max_upload_size=1024,
        seed_defaults=True,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    """Session on the app's store (after startup seeding has run)."""
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


def login(client, username, password):
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client):
    return auth_headers(login(client, "admin", "password"))


@pytest.fixture
def make_user(client, admin_headers):
    """Create a user through the API and return (user json, auth headers)."""
    def _make_user(username, role="user", password="secret123"):
        response = client.post(
            "/api/users",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "password": password,
                "role": role,
            },
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return response.json(), auth_headers(login(client, username, password))

    return _make_user


def room_id_for(client, headers, room_number):
    rooms = client.get("/api/rooms", headers=headers).json()
    return next(r["id"] for r in rooms if r["room_number"] == room_number)


def upload(client, headers, room_id, content=b"0123456789", filename="clip.mp4", content_type="video/mp4"):
    return client.post(
        "/api/videos/upload",
        files={"video": (filename, content, content_type)},
        data={"room_id": str(room_id)},
        headers=headers,
    )


def on_event_loop():
    """True when called from the thread running the event loop."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True

"""Tests for the secure game service API."""

import pytest
from fastapi.testclient import TestClient

from securegame.game_server.config import Settings
from securegame.game_server.main import create_app
from securegame.game_server.store import GameRegistry

API_KEY = "test-api-key"
HEADERS = {"X-API-Key": API_KEY}


@pytest.fixture
def registry():
    return GameRegistry()


@pytest.fixture
def client(registry):
    """Create test client around a fresh registry."""
    return TestClient(create_app(registry=registry, settings=Settings(api_key=API_KEY)))


def add_alice(client, game_id=0):
    return client.post(
        f"/api/games/{game_id}/players",
        headers=HEADERS,
        json={"player_id": 1, "username": "alice", "credential": "h1"},
    )


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_game_success(client):
    """Test successful game creation."""
    response = client.post("/api/games", headers=HEADERS)
    assert response.status_code == 201
    data = response.json()
    assert data["game_id"] == 0
    assert data["state"] == "not_started"
    assert data["players"] == []
    assert "created_at" in data


def test_create_game_no_auth(client):
    """Test game creation without API key."""
    response = client.post("/api/games")
    assert response.status_code == 422  # Missing header


def test_create_game_invalid_auth(client):
    """Test game creation with invalid API key."""
    response = client.post("/api/games", headers={"X-API-Key": "wrong-key"})
    assert response.status_code == 401


def test_create_games_sequential_ids(client):
    ids = [client.post("/api/games", headers=HEADERS).json()["game_id"] for _ in range(3)]
    assert ids == [0, 1, 2]

    response = client.get("/api/games", headers=HEADERS)
    assert response.status_code == 200
    assert response.json() == [0, 1, 2]


def test_get_game(client):
    client.post("/api/games", headers=HEADERS)
    add_alice(client)

    response = client.get("/api/games/0", headers=HEADERS)
    assert response.status_code == 200
    data = response.json()
    assert data["game_id"] == 0
    assert data["players"] == [{"player_id": 1, "username": "alice"}]


def test_get_nonexistent_game(client):
    response = client.get("/api/games/5", headers=HEADERS)
    assert response.status_code == 404
    assert response.json()["detail"] == "Game 5 not found"


def test_add_player_success(client, registry):
    """Test adding players keeps join order and hides credentials."""
    client.post("/api/games", headers=HEADERS)
    add_alice(client)
    response = client.post(
        "/api/games/0/players",
        headers=HEADERS,
        json={"player_id": 2, "username": "bob", "credential": "h2"},
    )
    assert response.status_code == 200
    data = response.json()
    assert [p["username"] for p in data["players"]] == ["alice", "bob"]
    assert "h2" not in response.text
    assert registry.get_game(0).players[-1].credential == "h2"


def test_add_player_nonexistent_game(client):
    response = add_alice(client, game_id=3)
    assert response.status_code == 404


def test_add_player_invalid_body(client):
    client.post("/api/games", headers=HEADERS)
    response = client.post("/api/games/0/players", headers=HEADERS, json={"username": "alice"})
    assert response.status_code == 422


def test_add_player_after_start_conflict(client):
    client.post("/api/games", headers=HEADERS)
    client.post("/api/games/0/start", headers=HEADERS)
    response = add_alice(client)
    assert response.status_code == 409
    assert "in_progress" in response.json()["detail"]


def test_start_and_finish_game(client):
    client.post("/api/games", headers=HEADERS)
    add_alice(client)

    response = client.post("/api/games/0/start", headers=HEADERS)
    assert response.status_code == 200
    assert response.json()["state"] == "in_progress"

    response = client.post("/api/games/0/start", headers=HEADERS)
    assert response.status_code == 200
    assert response.json()["state"] == "in_progress"

    response = client.post("/api/games/0/finish", headers=HEADERS)
    assert response.status_code == 200
    assert response.json()["state"] == "finished"


def test_restart_finished_game_conflict(client):
    client.post("/api/games", headers=HEADERS)
    client.post("/api/games/0/start", headers=HEADERS)
    client.post("/api/games/0/finish", headers=HEADERS)

    response = client.post("/api/games/0/start", headers=HEADERS)
    assert response.status_code == 409

    state = client.get("/api/games/0", headers=HEADERS).json()["state"]
    assert state == "finished"


def test_finish_not_started_conflict(client):
    client.post("/api/games", headers=HEADERS)
    response = client.post("/api/games/0/finish", headers=HEADERS)
    assert response.status_code == 409


@pytest.mark.parametrize("action", ["start", "finish"])
def test_lifecycle_nonexistent_game(client, action):
    response = client.post(f"/api/games/9/{action}", headers=HEADERS)
    assert response.status_code == 404

    # Service keeps working after a failed lookup
    response = client.post("/api/games", headers=HEADERS)
    assert response.status_code == 201


def test_store_and_retrieve_secure_data(client, registry):
    response = client.put("/api/secure-data/alice_token", headers=HEADERS, json={"value": "secretvalue"})
    assert response.status_code == 204

    response = client.get("/api/secure-data/alice_token", headers=HEADERS)
    assert response.status_code == 200
    assert response.json() == {"value": "secretvalue"}
    assert registry.retrieve_secure_data("alice_token") == "secretvalue"


def test_secure_data_overwrite(client):
    client.put("/api/secure-data/alice_token", headers=HEADERS, json={"value": "first"})
    client.put("/api/secure-data/alice_token", headers=HEADERS, json={"value": "second"})
    response = client.get("/api/secure-data/alice_token", headers=HEADERS)
    assert response.json()["value"] == "second"


def test_secure_data_key_with_slash(client):
    client.put("/api/secure-data/users/alice", headers=HEADERS, json={"value": "v"})
    assert client.get("/api/secure-data/users/alice", headers=HEADERS).json()["value"] == "v"
    assert client.get("/api/secure-data/users", headers=HEADERS).status_code == 404


def test_retrieve_missing_secure_data(client):
    response = client.get("/api/secure-data/bob_token", headers=HEADERS)
    assert response.status_code == 404
    assert response.json()["detail"] == "No data stored for key"


def test_secure_data_requires_auth(client):
    response = client.put("/api/secure-data/k", headers={"X-API-Key": "wrong-key"}, json={"value": "v"})
    assert response.status_code == 401
    response = client.get("/api/secure-data/k", headers={"X-API-Key": "wrong-key"})
    assert response.status_code == 401


def test_apps_do_not_share_state():
    settings = Settings(api_key=API_KEY)
    first = TestClient(create_app(settings=settings))
    second = TestClient(create_app(settings=settings))
    first.post("/api/games", headers=HEADERS)
    first.put("/api/secure-data/k", headers=HEADERS, json={"value": "v"})
    assert second.get("/api/games", headers=HEADERS).json() == []
    assert second.get("/api/secure-data/k", headers=HEADERS).status_code == 404


def test_openapi_schema_available(client):
    """Test that OpenAPI schema is accessible."""
    response = client.get("/openapi.json")
    assert response.status_code == 200
    schema = response.json()
    assert "openapi" in schema
    assert "paths" in schema
    # Verify our endpoints are documented
    assert "/api/games" in schema["paths"]
    assert "/api/games/{game_id}" in schema["paths"]
    assert "/api/games/{game_id}/players" in schema["paths"]
    assert "/api/games/{game_id}/start" in schema["paths"]
    assert "/api/games/{game_id}/finish" in schema["paths"]

"""Tests for Notekeeper API Server."""

import json
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from notekeeper.api.config import (
    APIConfig,
    NotesServiceConfig,
    ServerConfig,
    load_config,
)
from notekeeper.api.routes.notes import get_note_service, reset_note_service
from notekeeper.api.server import app, create_app
from notekeeper.core import SAMPLE_NOTES
from notekeeper.store import InMemoryNoteService


class TestAPIConfig:
    """Test suite for API configuration."""

    def test_server_config_defaults(self):
        """Test ServerConfig default values."""
        config = ServerConfig()
        assert config.host == "0.0.0.0"
        assert config.port == 8000
        assert config.cors_origins == ["*"]
        assert config.debug is False

    def test_api_config_defaults(self):
        """Test APIConfig default values."""
        config = APIConfig()
        assert isinstance(config.server, ServerConfig)
        assert config.notes == NotesServiceConfig(seed_sample_notes=True)

    def test_api_config_from_file(self):
        """Test loading APIConfig from a JSON file."""
        config_data = {
            "server": {
                "host": "127.0.0.1",
                "port": 9000,
                "cors_origins": ["http://localhost:3000"],
                "debug": True
            },
            "notes": {
                "seed_sample_notes": False
            }
        }

        with tempfile.NamedTemporaryFile(
            mode='w', suffix='.json', delete=False
        ) as f:
            json.dump(config_data, f)
            temp_path = Path(f.name)

        try:
            config = APIConfig.from_file(temp_path)

            assert config.server.host == "127.0.0.1"
            assert config.server.port == 9000
            assert config.server.cors_origins == ["http://localhost:3000"]
            assert config.server.debug is True
            assert config.notes.seed_sample_notes is False
        finally:
            temp_path.unlink()

    def test_api_config_from_missing_file(self):
        """Test APIConfig returns defaults when file doesn't exist."""
        config = APIConfig.from_file(Path("/nonexistent/config.json"))

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 8000
        assert config.notes.seed_sample_notes is True

    def test_api_config_partial_data(self):
        """Test APIConfig handles partial config data."""
        with tempfile.NamedTemporaryFile(
            mode='w', suffix='.json', delete=False
        ) as f:
            json.dump({"server": {"port": 5000}}, f)
            temp_path = Path(f.name)

        try:
            config = APIConfig.from_file(temp_path)

            assert config.server.port == 5000
            assert config.server.host == "0.0.0.0"
            assert config.notes.seed_sample_notes is True
        finally:
            temp_path.unlink()

    def test_default_config_path(self):
        """Test default config path points to correct location."""
        path = APIConfig.default_config_path()
        assert path.name == "api_config.json"
        assert "configs" in str(path)

    def test_load_config(self):
        """Test load_config reads the shipped config."""
        assert isinstance(load_config(), APIConfig)


class TestHealthEndpoints:
    """Test suite for health endpoints."""

    @pytest.fixture(autouse=True)
    def fresh_service(self):
        reset_note_service(InMemoryNoteService(SAMPLE_NOTES))
        yield
        reset_note_service()

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_health(self, client):
        """Test health reports status and note count."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["notes"] == 3

    def test_root(self, client):
        """Test root endpoint."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Notekeeper API"
        assert response.json()["docs"] == "/docs"


class TestNotesEndpoints:
    """Test suite for /api/v1/notes endpoints."""

    @pytest.fixture(autouse=True)
    def fresh_service(self):
        """Give each test its own seeded service."""
        service = InMemoryNoteService(SAMPLE_NOTES)
        reset_note_service(service)
        yield service
        reset_note_service()

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_list_notes(self, client):
        """Test listing every note."""
        response = client.get("/api/v1/notes")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 3
        assert [n["id"] for n in data["notes"]] == ["1", "2", "3"]

    def test_list_notes_with_query(self, client):
        """Test searching with q."""
        response = client.get("/api/v1/notes", params={"q": "state"})

        data = response.json()
        assert data["count"] == 1
        assert data["notes"][0]["title"] == "State"

    def test_list_notes_no_match(self, client):
        """Test a query with no match returns an empty list."""
        data = client.get("/api/v1/notes", params={"q": "zzz"}).json()
        assert data == {"notes": [], "count": 0}

    def test_create_note(self, client, fresh_service):
        """Test creating a note with a client id."""
        response = client.post(
            "/api/v1/notes", json={"id": "100", "title": "New", "content": "Body"}
        )

        assert response.status_code == 201
        assert response.json() == {"id": "100", "title": "New", "content": "Body"}
        assert fresh_service.get("100") is not None
        assert client.get("/api/v1/notes").json()["notes"][0]["id"] == "100"

    def test_create_note_without_id(self, client):
        """Test the server assigns an id when none is sent."""
        response = client.post("/api/v1/notes", json={"title": "New", "content": "Body"})

        assert response.status_code == 201
        assert response.json()["id"]

    def test_create_note_taken_id(self, client):
        """Test a taken id is replaced."""
        response = client.post(
            "/api/v1/notes", json={"id": "1", "title": "New", "content": "Body"}
        )

        assert response.status_code == 201
        assert response.json()["id"] != "1"

    @pytest.mark.parametrize(
        "payload",
        [{"title": "", "content": "Body"}, {"title": "T", "content": "   "}],
    )
    def test_create_blank_note_returns_400(self, client, payload):
        """Test blank title or content is rejected."""
        response = client.post("/api/v1/notes", json=payload)

        assert response.status_code == 400
        assert "empty" in response.json()["detail"].lower()

    @pytest.mark.parametrize(
        "payload,field",
        [({"title": " ", "content": "Body"}, "title"), ({"title": "T", "content": ""}, "content")],
    )
    def test_create_blank_note_names_field(self, client, fresh_service, payload, field):
        """Test the 400 detail names the blank field and nothing is stored."""
        response = client.post("/api/v1/notes", json=payload)

        assert response.status_code == 400
        assert field in response.json()["detail"]
        assert len(fresh_service._notes) == 3

    def test_note_id_with_slash(self, client, fresh_service):
        """Test ids containing a slash reach the note routes."""
        client.post("/api/v1/notes", json={"id": "a/b", "title": "T", "content": "C"})

        response = client.put("/api/v1/notes/a%2Fb", json={"title": "T", "content": "Y"})
        assert response.status_code == 200
        assert fresh_service.get("a/b").content == "Y"

        response = client.delete("/api/v1/notes/a%2Fb")
        assert response.status_code == 204
        assert fresh_service.get("a/b") is None

    def test_create_missing_field_returns_422(self, client):
        """Test missing fields fail validation."""
        response = client.post("/api/v1/notes", json={"title": "T"})
        assert response.status_code == 422

    def test_update_note(self, client, fresh_service):
        """Test replacing a note."""
        response = client.put(
            "/api/v1/notes/2", json={"title": "Custom", "content": "Y"}
        )

        assert response.status_code == 200
        assert response.json()["content"] == "Y"
        assert fresh_service.get("2").content == "Y"

    def test_update_missing_note_returns_404(self, client):
        """Test updating an unknown note."""
        response = client.put("/api/v1/notes/nope", json={"title": "T", "content": "C"})
        assert response.status_code == 404

    def test_delete_note(self, client, fresh_service):
        """Test deleting a note."""
        response = client.delete("/api/v1/notes/1")

        assert response.status_code == 204
        assert fresh_service.get("1") is None

    def test_delete_missing_note_returns_404(self, client):
        """Test deleting an unknown note."""
        response = client.delete("/api/v1/notes/nope")
        assert response.status_code == 404


class TestNoteServiceSingleton:
    """Test suite for the lazily created note service."""

    @pytest.fixture(autouse=True)
    def reset(self):
        reset_note_service()
        yield
        reset_note_service()

    def test_seeded_from_config(self):
        """Test the default service holds the sample notes."""
        with patch(
            "notekeeper.api.routes.notes.load_config",
            return_value=APIConfig(notes=NotesServiceConfig(seed_sample_notes=True)),
        ):
            service = get_note_service()

        assert service.get("1") == SAMPLE_NOTES[0]
        assert get_note_service() is service

    def test_unseeded_from_config(self):
        """Test seeding can be disabled."""
        with patch(
            "notekeeper.api.routes.notes.load_config",
            return_value=APIConfig(notes=NotesServiceConfig(seed_sample_notes=False)),
        ):
            service = get_note_service()

        assert service.get("1") is None


class TestCreateApp:
    """Test suite for create_app."""

    def test_create_app_routes(self):
        """Test the app exposes the note routes."""
        paths = {route.path for route in create_app().routes}

        assert "/health" in paths
        assert "/api/v1/notes" in paths
        assert "/api/v1/notes/{note_id:path}" in paths

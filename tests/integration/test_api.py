"""Integration tests for the HTTP API."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from revision_platform.api.dependencies import get_agent_service_dep, get_fixture_store_dep
from revision_platform.modules.agent import AgentService
from revision_platform.modules.fixtures import Chapter, IFixtureStore, JsonFixtureStore, Subject
from revision_platform.shared.config import Settings
from revision_platform.shared.exceptions import (
    ChapterNotFoundError,
    NoChaptersFoundError,
    SubjectNotFoundError,
)


class TestHealth:
    """Tests for service information routes."""

    def test_health(self, client: TestClient):
        response = client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["service"] == "Revision Platform API"
        assert body["timestamp"].endswith("Z")

    def test_root_lists_endpoints(self, client: TestClient):
        body = client.get("/").json()

        assert body["endpoints"]["aiGenerate"] == "/api/ai/generate"

    def test_request_id_header(self, client: TestClient):
        response = client.get("/api/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"

    def test_request_id_generated(self, client: TestClient):
        assert client.get("/api/health").headers["X-Request-ID"]

    def test_malformed_request_id_replaced(self, client: TestClient):
        response = client.get("/api/health", headers={"X-Request-ID": "bad id with spaces!"})

        assert response.headers["X-Request-ID"] != "bad id with spaces!"
        assert len(response.headers["X-Request-ID"]) == 36

    def test_health_polling_is_quiet(self, client: TestClient, caplog: pytest.LogCaptureFixture):
        with caplog.at_level("INFO", logger="revision_platform.api.middleware.logging"):
            client.get("/api/health")
            client.get("/api/subjects/unknown-subject")

        messages = [(r.levelname, r.getMessage()) for r in caplog.records]
        assert not any("/api/health" in message for _, message in messages)
        assert ("WARNING", "<- GET /api/subjects/unknown-subject 404") in messages

    def test_unknown_route(self, client: TestClient):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found", "path": "/api/unknown"}


class TestSubjects:
    """Tests for /api/subjects."""

    def test_list_subjects(self, client: TestClient):
        response = client.get("/api/subjects")

        assert response.status_code == 200
        body = response.json()
        assert [s["id"] for s in body] == ["physics", "chemistry", "astronomy"]
        assert body[0]["chapterCount"] == 2

    def test_get_subject(self, client: TestClient):
        response = client.get("/api/subjects/chemistry")

        assert response.status_code == 200
        assert response.json()["name"] == "Chemistry"

    def test_get_unknown_subject(self, client: TestClient):
        response = client.get("/api/subjects/unknown-subject")

        assert response.status_code == 404
        assert response.json() == {"error": "Subject not found"}

    def test_fixture_failure(self, app, tmp_path, client: TestClient):
        app.dependency_overrides[get_fixture_store_dep] = lambda: JsonFixtureStore(tmp_path / "missing")

        response = client.get("/api/subjects")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to load subjects"}


class TestChapters:
    """Tests for /api/chapters."""

    def test_list_chapters(self, client: TestClient):
        response = client.get("/api/chapters/physics")

        assert response.status_code == 200
        body = response.json()
        assert [c["id"] for c in body] == ["kinematics", "electrostatics"]
        assert all(c["subjectId"] == "physics" for c in body)

    def test_list_chapters_unknown_subject(self, client: TestClient):
        response = client.get("/api/chapters/unknown-subject")

        assert response.status_code == 404
        assert response.json() == {"error": "No chapters found for this subject"}

    def test_get_chapter(self, client: TestClient):
        response = client.get("/api/chapters/physics/kinematics")

        assert response.status_code == 200
        assert response.json()["topicCount"] == 5

    def test_chapter_of_other_subject(self, client: TestClient):
        response = client.get("/api/chapters/chemistry/kinematics")

        assert response.status_code == 404
        assert response.json() == {"error": "Chapter not found"}

    def test_fixture_failure(self, app, tmp_path, client: TestClient):
        app.dependency_overrides[get_fixture_store_dep] = lambda: JsonFixtureStore(tmp_path / "missing")

        assert client.get("/api/chapters/physics").json() == {"error": "Failed to load chapters"}
        assert client.get("/api/chapters/physics/kinematics").json() == {
            "error": "Failed to load chapter"
        }


class TestGenerate:
    """Tests for POST /api/ai/generate."""

    def test_generate_mock_revision(self, client: TestClient):
        response = client.post(
            "/api/ai/generate",
            json={"mode": "revision", "subject": "Physics", "chapter": "Kinematics"},
        )

        assert response.status_code == 200
        body = response.json()
        assert "# Kinematics - Revision Notes" in body["content"]
        assert body["metadata"]["mode"] == "revision"
        assert body["metadata"]["subject"] == "Physics"
        assert body["metadata"]["chapter"] == "Kinematics"
        assert body["metadata"]["timestamp"].endswith("Z")

    def test_generate_is_deterministic(self, client: TestClient):
        payload = {"mode": "assessment", "subject": "Physics", "chapter": "Kinematics"}

        first = client.post("/api/ai/generate", json=payload).json()["content"]
        second = client.post("/api/ai/generate", json=payload).json()["content"]

        assert first == second

    @pytest.mark.parametrize(
        "payload",
        [
            {"subject": "Physics", "chapter": "Kinematics"},
            {"mode": "revision", "chapter": "Kinematics"},
            {"mode": "revision", "subject": "", "chapter": "Kinematics"},
            {"mode": "revision", "subject": "Physics", "chapter": None},
        ],
    )
    def test_missing_fields(self, payload: dict, client: TestClient):
        response = client.post("/api/ai/generate", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: mode, subject, chapter"}

    def test_empty_body(self, client: TestClient):
        response = client.post("/api/ai/generate")

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: mode, subject, chapter"}

    def test_missing_fields_skip_agent(self, app, client: TestClient, configured_settings: Settings):
        agent_client = MagicMock()
        agent_client.detect_text = AsyncMock(return_value="never")
        app.dependency_overrides[get_agent_service_dep] = lambda: AgentService(
            settings=configured_settings, agent_client=agent_client
        )

        response = client.post("/api/ai/generate", json={"mode": "revision"})

        assert response.status_code == 400
        agent_client.detect_text.assert_not_awaited()

    def test_unknown_mode(self, client: TestClient):
        response = client.post(
            "/api/ai/generate",
            json={"mode": "poetry", "subject": "Physics", "chapter": "Kinematics"},
        )

        assert response.status_code == 400
        assert "poetry" in response.json()["error"]

    def test_malformed_body(self, client: TestClient):
        response = client.post("/api/ai/generate", json={"mode": 5, "subject": [], "chapter": {}})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"

    def test_invalid_json(self, client: TestClient):
        response = client.post(
            "/api/ai/generate",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"

    def test_uses_agent_when_configured(self, app, client: TestClient, configured_settings: Settings):
        agent_client = MagicMock()
        agent_client.detect_text = AsyncMock(return_value="Agent notes")
        app.dependency_overrides[get_agent_service_dep] = lambda: AgentService(
            settings=configured_settings, agent_client=agent_client
        )

        response = client.post(
            "/api/ai/generate",
            json={"mode": "revision", "subject": "Physics", "chapter": "Kinematics"},
        )

        assert response.json()["content"] == "Agent notes"
        prompt = agent_client.detect_text.await_args.args[0]
        assert "Request: Generate revision content for Kinematics in Physics" in prompt

    def test_agent_failure_falls_back(self, app, client: TestClient, configured_settings: Settings):
        agent_client = MagicMock()
        agent_client.detect_text = AsyncMock(side_effect=RuntimeError("quota exceeded"))
        app.dependency_overrides[get_agent_service_dep] = lambda: AgentService(
            settings=configured_settings, agent_client=agent_client
        )

        response = client.post(
            "/api/ai/generate",
            json={"mode": "chat", "subject": "Physics", "chapter": "Kinematics"},
        )

        assert response.status_code == 200
        assert response.json()["content"].startswith("Hello! I'm here to help you learn about")

    def test_service_failure(self, app, client: TestClient):
        service = MagicMock()
        service.generate = AsyncMock(side_effect=RuntimeError("unexpected"))
        app.dependency_overrides[get_agent_service_dep] = lambda: service

        response = client.post(
            "/api/ai/generate",
            json={"mode": "revision", "subject": "Physics", "chapter": "Kinematics"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate content", "message": "unexpected"}


class TestChat:
    """Tests for POST /api/ai/chat."""

    def test_chat_mock_comparison(self, client: TestClient):
        response = client.post(
            "/api/ai/chat",
            json={
                "mode": "chat",
                "subject": "Physics",
                "chapter": "Kinematics",
                "message": "What's the difference between speed and velocity?",
                "history": [
                    {"role": "assistant", "content": "Hello!", "timestamp": "2024-01-01T00:00:00Z"}
                ],
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert "Let me clarify the differences" in body["content"]
        assert body["timestamp"].endswith("Z")

    def test_chat_missing_message(self, client: TestClient):
        response = client.post(
            "/api/ai/chat",
            json={"mode": "chat", "subject": "Physics", "chapter": "Kinematics"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required fields: mode, subject, chapter, message"
        }

    def test_chat_empty_body(self, client: TestClient):
        response = client.post("/api/ai/chat")

        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required fields: mode, subject, chapter, message"
        }

    def test_chat_accepts_any_history_role(self, client: TestClient):
        response = client.post(
            "/api/ai/chat",
            json={
                "mode": "chat",
                "subject": "Physics",
                "chapter": "Kinematics",
                "message": "hi",
                "history": [{"role": "system"}, {"content": "no role at all"}],
            },
        )

        assert response.status_code == 200
        assert response.json()["content"]

    def test_chat_service_failure(self, app, client: TestClient):
        service = MagicMock()
        service.chat = AsyncMock(side_effect=RuntimeError("unexpected"))
        app.dependency_overrides[get_agent_service_dep] = lambda: service

        response = client.post(
            "/api/ai/chat",
            json={"mode": "chat", "subject": "Physics", "chapter": "Kinematics", "message": "hi"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to process message", "message": "unexpected"}


class TestAIStatus:
    """Tests for GET /api/ai/test."""

    def test_unconfigured(self, client: TestClient):
        body = client.get("/api/ai/test").json()

        assert body["message"] == "AI service is running"
        assert body["vertexAIConfigured"] is False

    def test_configured(self, app, client: TestClient, configured_settings: Settings):
        app.dependency_overrides[get_agent_service_dep] = lambda: AgentService(
            settings=configured_settings
        )

        assert client.get("/api/ai/test").json()["vertexAIConfigured"] is True


class TestUnhandledErrors:
    """Errors nothing else claims get the generic envelope."""

    def test_unhandled_exception(self, app):
        def broken_store():
            raise RuntimeError("disk on fire")

        app.dependency_overrides[get_fixture_store_dep] = broken_store

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/subjects")

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "disk on fire", "status": 500}}

    def test_method_not_allowed(self, client: TestClient):
        response = client.get("/api/ai/generate")

        assert response.status_code == 405
        assert response.json()["error"]["status"] == 405


class InMemoryFixtureStore:
    """Fixture store held in memory, without any JSON files."""

    def __init__(self, subjects: list[Subject], chapters: list[Chapter]) -> None:
        self._subjects = subjects
        self._chapters = chapters

    def list_subjects(self) -> list[Subject]:
        return list(self._subjects)

    def get_subject(self, subject_id: str) -> Subject:
        for subject in self._subjects:
            if subject.id == subject_id:
                return subject
        raise SubjectNotFoundError(subject_id)

    def list_chapters(self, subject_id: str) -> list[Chapter]:
        chapters = [c for c in self._chapters if c.subject_id == subject_id]
        if not chapters:
            raise NoChaptersFoundError(subject_id)
        return chapters

    def get_chapter(self, subject_id: str, chapter_id: str) -> Chapter:
        for chapter in self.list_chapters(subject_id):
            if chapter.id == chapter_id:
                return chapter
        raise ChapterNotFoundError(subject_id, chapter_id)


class TestAlternativeFixtureStore:
    """Routes work with any store that provides the fixture store methods."""

    @pytest.fixture
    def store(self) -> IFixtureStore:
        return InMemoryFixtureStore(
            [Subject("music", "Music", "🎵", "Theory and harmony", 1)],
            [Chapter("scales", "music", "Scales", "Major and minor", "Easy", 3)],
        )

    def test_routes_use_injected_store(self, app, client: TestClient, store: IFixtureStore):
        app.dependency_overrides[get_fixture_store_dep] = lambda: store

        assert [s["id"] for s in client.get("/api/subjects").json()] == ["music"]
        assert client.get("/api/chapters/music/scales").json()["name"] == "Scales"
        assert client.get("/api/chapters/music/chords").json() == {"error": "Chapter not found"}

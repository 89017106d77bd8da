"""Unit tests for settings."""

import pytest

from revision_platform.shared.config import DEFAULT_DATA_DIR, Settings
from revision_platform.shared.models import LearningMode


class TestSettings:
    """Tests for Settings."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch: pytest.MonkeyPatch):
        for name in (
            "GOOGLE_CLOUD_PROJECT",
            "GOOGLE_CLOUD_LOCATION",
            "VERTEX_AGENT_ID",
            "CORS_ORIGINS",
            "API_PORT",
            "DATA_DIR",
        ):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.api_port == 3001
        assert settings.google_cloud_location == "global"
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.api_base_url == "http://localhost:3001"
        assert settings.agent_configured is False

    def test_agent_configured_needs_project_and_agent(self):
        assert Settings(_env_file=None, google_cloud_project="p").agent_configured is False
        assert Settings(_env_file=None, vertex_agent_id="a").agent_configured is False
        assert Settings(
            _env_file=None, google_cloud_project="p", vertex_agent_id="a"
        ).agent_configured is True

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "my-project")
        monkeypatch.setenv("VERTEX_AGENT_ID", "my-agent")
        monkeypatch.setenv("API_PORT", "4000")

        settings = Settings(_env_file=None)

        assert settings.google_cloud_project == "my-project"
        assert settings.api_port == 4000
        assert settings.agent_configured is True

    def test_strips_quotes(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", '"quoted-project"')
        monkeypatch.setenv("GOOGLE_CLOUD_LOCATION", '"us-central1"')

        settings = Settings(_env_file=None)

        assert settings.google_cloud_project == "quoted-project"
        assert settings.google_cloud_location == "us-central1"

    def test_blank_values_count_as_missing(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", '""')
        monkeypatch.setenv("VERTEX_AGENT_ID", "agent")
        monkeypatch.setenv("GOOGLE_CLOUD_LOCATION", "")

        settings = Settings(_env_file=None)

        assert settings.google_cloud_project is None
        assert settings.google_cloud_location == "global"
        assert settings.agent_configured is False

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
        assert Settings(_env_file=None, cors_origins="").cors_origins_list == ["*"]


class TestLearningMode:
    """Tests for LearningMode parsing."""

    def test_parse(self):
        assert LearningMode.parse(" Assessment ") is LearningMode.ASSESSMENT
        assert LearningMode.parse(LearningMode.CHAT) is LearningMode.CHAT

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            LearningMode.parse("poetry")

    def test_coerce_falls_back_to_revision(self):
        assert LearningMode.coerce("poetry") is LearningMode.REVISION
        assert LearningMode.coerce("poetry", LearningMode.CHAT) is LearningMode.CHAT

    def test_label(self):
        assert LearningMode.ASSESSMENT.label == "Assessment"

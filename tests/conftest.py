"""Test configuration and fixtures."""

import json
import sys
from pathlib import Path

# Load environment variables before any imports that need them
from dotenv import load_dotenv
project_root = Path(__file__).parent.parent
load_dotenv(project_root / ".env")

# Ensure src is in path
sys.path.insert(0, str(project_root / "src"))

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

from revision_platform.modules.agent import AgentService
from revision_platform.modules.fixtures import JsonFixtureStore
from revision_platform.shared.config import Settings


SAMPLE_SUBJECTS = [
    {
        "id": "physics",
        "name": "Physics",
        "icon": "⚛️",
        "description": "Mechanics, electricity and waves",
        "chapterCount": 2,
    },
    {
        "id": "chemistry",
        "name": "Chemistry",
        "icon": "🧪",
        "description": "Atoms, bonds and reactions",
        "chapterCount": 1,
    },
    {
        "id": "astronomy",
        "name": "Astronomy",
        "icon": "🔭",
        "description": "Listed but without chapters",
        "chapterCount": 0,
    },
]

SAMPLE_CHAPTERS = [
    {
        "id": "kinematics",
        "subjectId": "physics",
        "name": "Kinematics",
        "description": "Motion in one and two dimensions",
        "difficulty": "Medium",
        "topicCount": 5,
    },
    {
        "id": "electrostatics",
        "subjectId": "physics",
        "name": "Electrostatics",
        "description": "Charges and fields",
        "difficulty": "Hard",
        "topicCount": 6,
    },
    {
        "id": "atomic-structure",
        "subjectId": "chemistry",
        "name": "Atomic Structure",
        "description": "Electrons, protons and neutrons",
        "difficulty": "Easy",
        "topicCount": 4,
    },
]


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Fixture directory with a small, known catalog."""
    (tmp_path / "subjects.json").write_text(json.dumps(SAMPLE_SUBJECTS), encoding="utf-8")
    (tmp_path / "chapters.json").write_text(json.dumps(SAMPLE_CHAPTERS), encoding="utf-8")
    return tmp_path


@pytest.fixture
def fixture_store(data_dir: Path) -> JsonFixtureStore:
    return JsonFixtureStore(data_dir=data_dir)


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings with no conversational agent, regardless of the environment."""
    return Settings(_env_file=None, google_cloud_project=None, vertex_agent_id=None)


@pytest.fixture
def configured_settings() -> Settings:
    return Settings(
        _env_file=None,
        google_cloud_project="test-project",
        vertex_agent_id="test-agent",
        google_cloud_location="global",
    )


@pytest.fixture
def mock_agent_client() -> MagicMock:
    """Mock Dialogflow agent client."""
    client = MagicMock()
    client.detect_text = AsyncMock(return_value="Agent says hello")
    return client


@pytest.fixture
def mock_agent_service(unconfigured_settings: Settings) -> AgentService:
    """Agent service that always uses mock content."""
    return AgentService(settings=unconfigured_settings)


@pytest.fixture
def app(fixture_store: JsonFixtureStore, mock_agent_service: AgentService):
    """FastAPI app wired to the sample fixtures and an unconfigured agent."""
    from revision_platform.api.dependencies import get_agent_service_dep, get_fixture_store_dep
    from revision_platform.api.main import create_app

    application = create_app()
    application.dependency_overrides[get_fixture_store_dep] = lambda: fixture_store
    application.dependency_overrides[get_agent_service_dep] = lambda: mock_agent_service
    return application


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client

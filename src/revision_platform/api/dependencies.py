"""FastAPI dependency injection for services.

Routes receive their collaborators through ``Depends()`` so tests can swap
them with ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends

from revision_platform.modules.agent import AgentService, get_agent_service
from revision_platform.modules.fixtures import IFixtureStore, get_fixture_store


def get_fixture_store_dep() -> IFixtureStore:
    """Get the fixture store."""
    return get_fixture_store()


def get_agent_service_dep() -> AgentService:
    """Get the agent service."""
    return get_agent_service()


FixtureStoreDep = Annotated[IFixtureStore, Depends(get_fixture_store_dep)]
AgentServiceDep = Annotated[AgentService, Depends(get_agent_service_dep)]

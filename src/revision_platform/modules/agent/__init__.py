"""Agent Module - Conversational agent proxy with mock fallback.

Usage:
    from revision_platform.modules.agent import get_agent_service
    service = get_agent_service()
    content = await service.generate("revision", "Physics", "Kinematics", request)
"""

from revision_platform.modules.agent.client import DialogflowAgentClient
from revision_platform.modules.agent.service import AgentService, get_agent_service

__all__ = [
    "AgentService",
    "DialogflowAgentClient",
    "get_agent_service",
]

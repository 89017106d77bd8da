"""Agent Service - Content generation with a deterministic fallback.

Callers never see agent errors: an unconfigured agent, a failed call or an
empty reply all resolve to mock content.
"""

import logging
from typing import Any, Callable, Sequence

from revision_platform.modules.agent.client import DialogflowAgentClient
from revision_platform.modules.content import (
    build_chat_message,
    build_prompt,
    mock_chat_reply,
    mock_content,
)
from revision_platform.shared.config import Settings, get_settings
from revision_platform.shared.exceptions import AgentNotConfiguredError
from revision_platform.shared.models import LearningMode

logger = logging.getLogger(__name__)


class AgentService:
    """Proxy to the conversational agent."""

    def __init__(
        self,
        settings: Settings | None = None,
        agent_client: DialogflowAgentClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._agent_client = agent_client

    @property
    def is_configured(self) -> bool:
        return self._agent_client is not None or self.settings.agent_configured

    def _get_agent_client(self) -> DialogflowAgentClient:
        if self._agent_client is None:
            if not self.settings.agent_configured:
                raise AgentNotConfiguredError()
            self._agent_client = DialogflowAgentClient(
                project_id=self.settings.google_cloud_project,
                agent_id=self.settings.vertex_agent_id,
                location=self.settings.google_cloud_location,
                language_code=self.settings.agent_language_code,
            )
        return self._agent_client

    async def _ask(self, text: str, fallback: Callable[[], str], purpose: str) -> str:
        """Send text to the agent, falling back on any failure or empty reply."""
        try:
            agent_client = self._get_agent_client()
        except AgentNotConfiguredError:
            logger.warning(f"Agent not configured, using mock {purpose} response")
            return fallback()

        try:
            logger.info(f"Calling conversational agent for {purpose}")
            reply = await agent_client.detect_text(text)
        except Exception as e:
            logger.error(f"Agent {purpose} call failed: {e}")
            logger.warning(f"Falling back to mock {purpose} response")
            return fallback()

        if not reply:
            logger.warning(f"Empty {purpose} response from agent, using mock response")
            return fallback()

        logger.info(f"Received {purpose} response from agent")
        return reply

    async def generate(
        self,
        mode: LearningMode | str,
        subject: str,
        chapter: str,
        request: str,
    ) -> str:
        """Generate study content for a subject chapter.

        Args:
            mode: Learning mode
            subject: Subject name
            chapter: Chapter name
            request: Free-text request

        Returns:
            Agent content, or the mock document for the mode
        """
        return await self._ask(
            build_prompt(mode, subject, chapter, request),
            lambda: mock_content(mode, subject, chapter),
            "content",
        )

    async def chat(
        self,
        mode: LearningMode | str,
        subject: str,
        chapter: str,
        message: str,
        history: Sequence[Any] | None = None,
    ) -> str:
        """Answer one chat message.

        ``history`` is accepted for API compatibility but each call opens a
        fresh agent session, so earlier turns are not sent.

        Returns:
            Agent reply, or the keyword-selected mock reply
        """
        return await self._ask(
            build_chat_message(mode, subject, chapter, message),
            lambda: mock_chat_reply(message, subject, chapter),
            "chat",
        )


# Singleton instance
_agent_service: AgentService | None = None


def get_agent_service() -> AgentService:
    """Get agent service singleton."""
    global _agent_service
    if _agent_service is None:
        _agent_service = AgentService()
    return _agent_service

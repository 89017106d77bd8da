"""Dialogflow CX client wrapper.

Each call opens a brand-new agent session and sends a single text turn.
"""

import logging
from typing import Any
from uuid import uuid4

from google.api_core.client_options import ClientOptions
from google.cloud import dialogflowcx_v3

from revision_platform.shared.exceptions import AgentServiceError

logger = logging.getLogger(__name__)


class DialogflowAgentClient:
    """Thin async wrapper around ``SessionsAsyncClient.detect_intent``."""

    def __init__(
        self,
        project_id: str,
        agent_id: str,
        location: str = "global",
        language_code: str = "en",
        sessions_client: Any | None = None,
    ) -> None:
        self.project_id = project_id
        self.agent_id = agent_id
        self.location = location or "global"
        self.language_code = language_code
        self._sessions_client = sessions_client

    def _get_sessions_client(self) -> Any:
        """Create the sessions client on first use.

        Regional agents must be addressed through their regional endpoint.
        """
        if self._sessions_client is None:
            client_options = None
            if self.location != "global":
                client_options = ClientOptions(
                    api_endpoint=f"{self.location}-dialogflow.googleapis.com"
                )
            self._sessions_client = dialogflowcx_v3.SessionsAsyncClient(
                client_options=client_options
            )
        return self._sessions_client

    def session_path(self, session_id: str) -> str:
        return dialogflowcx_v3.SessionsClient.session_path(
            self.project_id,
            self.location,
            self.agent_id,
            session_id,
        )

    async def detect_text(self, text: str) -> str:
        """Send one text turn in a fresh session and return the reply text.

        Args:
            text: Text to send as the user's turn

        Returns:
            Concatenated reply text (possibly empty)

        Raises:
            AgentServiceError: If the client cannot be created or the call fails
        """
        session = self.session_path(str(uuid4()))
        request = dialogflowcx_v3.DetectIntentRequest(
            session=session,
            query_input=dialogflowcx_v3.QueryInput(
                text=dialogflowcx_v3.TextInput(text=text),
                language_code=self.language_code,
            ),
        )

        try:
            client = self._get_sessions_client()
            response = await client.detect_intent(request=request)
        except Exception as e:
            raise AgentServiceError(str(e)) from e

        return self.extract_text(response)

    @staticmethod
    def extract_text(response: Any) -> str:
        """Join the text fragments of a detect-intent response.

        Fragments of one message are joined by a space; each message becomes
        its own line.
        """
        lines = []
        for message in response.query_result.response_messages:
            text = getattr(message, "text", None)
            fragments = list(getattr(text, "text", None) or [])
            if fragments:
                lines.append(" ".join(fragments) + "\n")
        return "".join(lines).strip()

"""Wizard controller - screen transitions, content loading and chat.

The controller holds no terminal code; the interactive loop in
``revision_platform.cli.commands.study`` renders its state and feeds it
user choices.
"""

import logging
from typing import Optional, Protocol, Sequence

from revision_platform.cli.state import (
    PREVIOUS_SCREEN,
    GeneratedContent,
    Message,
    ResponseDisplay,
    SessionContext,
    WizardScreen,
    resolve_screen,
)
from revision_platform.modules.content import initial_request
from revision_platform.modules.fixtures import Chapter, Subject
from revision_platform.shared.exceptions import ApiClientError
from revision_platform.shared.models import LearningMode, MessageRole

logger = logging.getLogger(__name__)

CONTENT_ERROR_TEXT = "Error loading content. Please try again."
CHAT_ERROR_TEXT = "Sorry, there was an error processing your message. Please try again."


class IRevisionApi(Protocol):
    """The subset of the API client the wizard needs."""

    def list_subjects(self) -> list[Subject]: ...

    def list_chapters(self, subject_id: str) -> list[Chapter]: ...

    def generate(
        self, mode: LearningMode, subject: str, chapter: str, request: Optional[str] = None
    ) -> str: ...

    def chat(
        self,
        mode: LearningMode,
        subject: str,
        chapter: str,
        message: str,
        history: Sequence[dict] = (),
    ) -> str: ...


class Wizard:
    """State machine behind the mode → subject → chapter → response flow."""

    def __init__(self, client: IRevisionApi) -> None:
        self.client = client
        self.context = SessionContext()
        self.screen = WizardScreen.MODE_SELECT
        self.display = ResponseDisplay.CONTENT
        self.content: Optional[GeneratedContent] = None
        self.messages: list[Message] = []
        self.sending = False
        self._loaded_key: Optional[tuple[str, str, str]] = None

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self, screen: WizardScreen) -> WizardScreen:
        """Move to a screen, honoring its entry guard.

        Leaving the response screen after a failed generation drops the
        error, so coming back to the same selection tries again.
        """
        target = resolve_screen(screen, self.context)
        if target != WizardScreen.RESPONSE_VIEW and self.content is not None and self.content.error:
            self._reset_response()
        self.screen = target
        return self.screen

    def choose_mode(self, mode: LearningMode) -> WizardScreen:
        self.context = self.context.with_mode(mode)
        return self.navigate(WizardScreen.SUBJECT_SELECT)

    def choose_subject(self, subject: Subject) -> WizardScreen:
        self.context = self.context.with_subject(subject)
        return self.navigate(WizardScreen.CHAPTER_SELECT)

    def choose_chapter(self, chapter: Chapter) -> WizardScreen:
        self.context = self.context.with_chapter(chapter)
        return self.navigate(WizardScreen.RESPONSE_VIEW)

    def back(self) -> WizardScreen:
        """Go to the previous screen, keeping the selections made so far."""
        return self.navigate(PREVIOUS_SCREEN[self.screen])

    def home(self) -> WizardScreen:
        return self.navigate(WizardScreen.MODE_SELECT)

    def new_session(self) -> WizardScreen:
        """Discard every selection and start over."""
        self.context = SessionContext()
        self._reset_response()
        return self.navigate(WizardScreen.MODE_SELECT)

    def _reset_response(self) -> None:
        self.display = ResponseDisplay.CONTENT
        self.content = None
        self.messages = []
        self.sending = False
        self._loaded_key = None

    # -------------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------------

    def load_subjects(self) -> list[Subject]:
        return self.client.list_subjects()

    def load_chapters(self) -> list[Chapter]:
        """Chapters of the selected subject."""
        if self.context.subject is None:
            return []
        return self.client.list_chapters(self.context.subject.id)

    # -------------------------------------------------------------------------
    # Response screen
    # -------------------------------------------------------------------------

    def load_content(self) -> Optional[GeneratedContent]:
        """Generate content for the current selection.

        Only the first call for a given (mode, subject, chapter) reaches the
        API; later calls return the loaded result until the screen is left.
        A failed result is kept only while the response screen is shown.
        Returns None when the selection is incomplete.
        """
        key = self.context.selection_key
        if key is None:
            return None
        if key == self._loaded_key and self.content is not None:
            return self.content

        self._reset_response()
        self._loaded_key = key

        mode = self.context.mode
        subject = self.context.subject.name
        chapter = self.context.chapter.name
        try:
            text = self.client.generate(
                mode, subject, chapter, request=initial_request(mode, subject, chapter)
            )
        except ApiClientError as e:
            logger.error(f"Error fetching AI response: {e}")
            self.content = GeneratedContent(content=CONTENT_ERROR_TEXT, error=True)
            return self.content

        self.content = GeneratedContent(content=text)
        self.messages = [Message(role=MessageRole.ASSISTANT, content=text)]
        return self.content

    def toggle_display(self) -> ResponseDisplay:
        """Switch between the content and chat views without refetching."""
        if self.display == ResponseDisplay.CONTENT:
            self.display = ResponseDisplay.CHAT
        else:
            self.display = ResponseDisplay.CONTENT
        return self.display

    def send_message(self, text: str) -> Optional[Message]:
        """Send a chat message and append the reply.

        Returns the assistant reply, or None when the text is blank, a send
        is already in progress, or the selection is incomplete.
        """
        if not text.strip() or self.sending or self.context.selection_key is None:
            return None

        history = [message.to_payload() for message in self.messages]
        self.messages.append(Message(role=MessageRole.USER, content=text))
        self.sending = True

        try:
            reply_text = self.client.chat(
                self.context.mode,
                self.context.subject.name,
                self.context.chapter.name,
                text,
                history=history,
            )
            reply = Message(role=MessageRole.ASSISTANT, content=reply_text)
        except ApiClientError as e:
            logger.error(f"Error sending message: {e}")
            reply = Message(role=MessageRole.ASSISTANT, content=CHAT_ERROR_TEXT, error=True)
        finally:
            self.sending = False

        self.messages.append(reply)
        return reply

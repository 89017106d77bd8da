"""Wizard state - immutable session selections and chat messages.

The selection is never mutated: every transition returns a new
``SessionContext`` and the wizard swaps it in wholesale.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from revision_platform.modules.fixtures import Chapter, Subject
from revision_platform.shared.datetime_utils import datetime_to_iso, utc_now
from revision_platform.shared.models import LearningMode, MessageRole


class WizardScreen(str, Enum):
    """Screens of the linear wizard, in order."""

    MODE_SELECT = "mode_select"
    SUBJECT_SELECT = "subject_select"
    CHAPTER_SELECT = "chapter_select"
    RESPONSE_VIEW = "response_view"


class ResponseDisplay(str, Enum):
    """Display sub-modes of the response screen."""

    CONTENT = "content"
    CHAT = "chat"


@dataclass(frozen=True)
class SessionContext:
    """Selections made so far in one wizard session."""

    mode: Optional[LearningMode] = None
    subject: Optional[Subject] = None
    chapter: Optional[Chapter] = None

    def with_mode(self, mode: LearningMode) -> "SessionContext":
        """Choosing a mode starts a fresh selection."""
        return SessionContext(mode=mode)

    def with_subject(self, subject: Subject) -> "SessionContext":
        """Choosing a subject clears any chapter picked for another subject."""
        return replace(self, subject=subject, chapter=None)

    def with_chapter(self, chapter: Chapter) -> "SessionContext":
        return replace(self, chapter=chapter)

    @property
    def selection_key(self) -> Optional[tuple[str, str, str]]:
        """(mode, subject id, chapter id) once all three are chosen."""
        if self.mode is None or self.subject is None or self.chapter is None:
            return None
        return (self.mode.value, self.subject.id, self.chapter.id)


def resolve_screen(screen: WizardScreen, context: SessionContext) -> WizardScreen:
    """Apply the entry guards of a screen.

    Returns the requested screen if its prerequisite is set, otherwise
    the mode selection screen.
    """
    if screen == WizardScreen.SUBJECT_SELECT and context.mode is None:
        return WizardScreen.MODE_SELECT
    if screen == WizardScreen.CHAPTER_SELECT and context.subject is None:
        return WizardScreen.MODE_SELECT
    if screen == WizardScreen.RESPONSE_VIEW and context.chapter is None:
        return WizardScreen.MODE_SELECT
    return screen


PREVIOUS_SCREEN: dict[WizardScreen, WizardScreen] = {
    WizardScreen.MODE_SELECT: WizardScreen.MODE_SELECT,
    WizardScreen.SUBJECT_SELECT: WizardScreen.MODE_SELECT,
    WizardScreen.CHAPTER_SELECT: WizardScreen.SUBJECT_SELECT,
    WizardScreen.RESPONSE_VIEW: WizardScreen.CHAPTER_SELECT,
}


@dataclass(frozen=True)
class Message:
    """One chat message shown in the response screen."""

    role: MessageRole
    content: str
    timestamp: datetime = field(default_factory=utc_now)
    error: bool = False

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the chat endpoint's ``history`` field."""
        payload: dict[str, Any] = {
            "role": self.role.value,
            "content": self.content,
            "timestamp": datetime_to_iso(self.timestamp),
        }
        if self.error:
            payload["error"] = True
        return payload


@dataclass(frozen=True)
class GeneratedContent:
    """Result of the generation call for one selection."""

    content: str
    error: bool = False

"""Fixture Module - Static subject and chapter reference data."""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class Subject:
    """A subject a student can study."""

    id: str
    name: str
    icon: str
    description: str
    chapter_count: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subject":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            icon=str(data.get("icon", "")),
            description=str(data.get("description", "")),
            chapter_count=int(data.get("chapterCount", 0)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "description": self.description,
            "chapterCount": self.chapter_count,
        }


@dataclass(frozen=True)
class Chapter:
    """A chapter belonging to exactly one subject."""

    id: str
    subject_id: str
    name: str
    description: str
    difficulty: str
    topic_count: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Chapter":
        return cls(
            id=str(data["id"]),
            subject_id=str(data["subjectId"]),
            name=str(data["name"]),
            description=str(data.get("description", "")),
            difficulty=str(data.get("difficulty", "")),
            topic_count=int(data.get("topicCount", 0)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "subjectId": self.subject_id,
            "name": self.name,
            "description": self.description,
            "difficulty": self.difficulty,
            "topicCount": self.topic_count,
        }


class IFixtureStore(Protocol):
    """Interface for the read-only fixture store.

    Every call reads the underlying data again, so updates to the files
    are picked up without a restart.
    """

    def list_subjects(self) -> list[Subject]:
        """Return every subject."""
        ...

    def get_subject(self, subject_id: str) -> Subject:
        """Return one subject.

        Raises:
            SubjectNotFoundError: If no subject has this id
        """
        ...

    def list_chapters(self, subject_id: str) -> list[Chapter]:
        """Return the chapters of a subject, in file order.

        Raises:
            NoChaptersFoundError: If the subject has no chapters
        """
        ...

    def get_chapter(self, subject_id: str, chapter_id: str) -> Chapter:
        """Return one chapter of a subject.

        Raises:
            ChapterNotFoundError: If the chapter does not exist under this subject
        """
        ...

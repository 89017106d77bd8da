"""Subject and chapter API schemas."""

from pydantic import Field

from revision_platform.modules.fixtures import Chapter, Subject
from revision_platform.shared.models import BaseSchema


class SubjectResponse(BaseSchema):
    """Subject response."""

    id: str = Field(
        ...,
        description="Subject identifier",
    )
    name: str = Field(
        ...,
        description="Display name",
    )
    icon: str = Field(
        default="",
        description="Emoji icon",
    )
    description: str = Field(
        default="",
        description="Short description",
    )
    chapter_count: int = Field(
        ...,
        alias="chapterCount",
        ge=0,
        description="Number of chapters in the subject",
    )

    @classmethod
    def from_subject(cls, subject: Subject) -> "SubjectResponse":
        return cls(
            id=subject.id,
            name=subject.name,
            icon=subject.icon,
            description=subject.description,
            chapter_count=subject.chapter_count,
        )


class ChapterResponse(BaseSchema):
    """Chapter response."""

    id: str = Field(
        ...,
        description="Chapter identifier",
    )
    subject_id: str = Field(
        ...,
        alias="subjectId",
        description="Identifier of the owning subject",
    )
    name: str = Field(
        ...,
        description="Display name",
    )
    description: str = Field(
        default="",
        description="Short description",
    )
    difficulty: str = Field(
        default="",
        description="Difficulty label (Easy, Medium, Hard)",
    )
    topic_count: int = Field(
        ...,
        alias="topicCount",
        ge=0,
        description="Number of topics in the chapter",
    )

    @classmethod
    def from_chapter(cls, chapter: Chapter) -> "ChapterResponse":
        return cls(
            id=chapter.id,
            subject_id=chapter.subject_id,
            name=chapter.name,
            description=chapter.description,
            difficulty=chapter.difficulty,
            topic_count=chapter.topic_count,
        )

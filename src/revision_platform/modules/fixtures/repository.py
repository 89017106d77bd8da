"""JSON-file backed fixture repository.

Subjects and chapters live in two flat JSON arrays. Lookups are exact id
matches and the files are re-read on every call.
"""

import json
import logging
from pathlib import Path
from typing import Any

from revision_platform.modules.fixtures.interface import Chapter, Subject
from revision_platform.shared.config import get_settings
from revision_platform.shared.exceptions import (
    ChapterNotFoundError,
    FixtureLoadError,
    NoChaptersFoundError,
    SubjectNotFoundError,
)

logger = logging.getLogger(__name__)

SUBJECTS_FILE = "subjects.json"
CHAPTERS_FILE = "chapters.json"


class JsonFixtureStore:
    """Fixture store reading ``subjects.json`` and ``chapters.json``."""

    def __init__(self, data_dir: Path | str | None = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else get_settings().data_dir

    def _read(self, filename: str) -> list[dict[str, Any]]:
        """Read one fixture file as a list of records.

        Raises:
            FixtureLoadError: If the file is missing, unreadable or not a JSON array
        """
        path = self.data_dir / filename
        try:
            records = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading fixture {path}: {e}")
            raise FixtureLoadError(str(path), str(e)) from e

        if not isinstance(records, list):
            raise FixtureLoadError(str(path), "expected a JSON array")
        return records

    def _subjects(self) -> list[Subject]:
        try:
            return [Subject.from_dict(record) for record in self._read(SUBJECTS_FILE)]
        except (KeyError, TypeError, ValueError) as e:
            raise FixtureLoadError(SUBJECTS_FILE, f"invalid subject record: {e}") from e

    def _chapters(self) -> list[Chapter]:
        try:
            return [Chapter.from_dict(record) for record in self._read(CHAPTERS_FILE)]
        except (KeyError, TypeError, ValueError) as e:
            raise FixtureLoadError(CHAPTERS_FILE, f"invalid chapter record: {e}") from e

    def list_subjects(self) -> list[Subject]:
        return self._subjects()

    def get_subject(self, subject_id: str) -> Subject:
        for subject in self._subjects():
            if subject.id == subject_id:
                return subject
        raise SubjectNotFoundError(subject_id)

    def list_chapters(self, subject_id: str) -> list[Chapter]:
        chapters = [c for c in self._chapters() if c.subject_id == subject_id]
        if not chapters:
            raise NoChaptersFoundError(subject_id)
        return chapters

    def get_chapter(self, subject_id: str, chapter_id: str) -> Chapter:
        for chapter in self._chapters():
            # A chapter id is only meaningful within its own subject
            if chapter.id == chapter_id and chapter.subject_id == subject_id:
                return chapter
        raise ChapterNotFoundError(subject_id, chapter_id)


# Singleton instance
_fixture_store: JsonFixtureStore | None = None


def get_fixture_store() -> JsonFixtureStore:
    """Get fixture store singleton."""
    global _fixture_store
    if _fixture_store is None:
        _fixture_store = JsonFixtureStore()
    return _fixture_store

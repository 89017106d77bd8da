"""Chapter API routes."""

import logging

from fastapi import APIRouter

from revision_platform.api.dependencies import FixtureStoreDep
from revision_platform.api.middleware.error_handler import APIError
from revision_platform.api.schemas.fixtures import ChapterResponse
from revision_platform.shared.exceptions import FixtureLoadError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{subject_id}",
    response_model=list[ChapterResponse],
    summary="List chapters",
    description="Get the chapters of a subject.",
    responses={404: {"description": "No chapters found for this subject"}},
)
def list_chapters(subject_id: str, store: FixtureStoreDep) -> list[ChapterResponse]:
    """List a subject's chapters.

    An unknown subject and a subject without chapters both return 404.
    """
    try:
        chapters = store.list_chapters(subject_id)
    except FixtureLoadError as e:
        logger.error(f"Error reading chapters: {e.message}")
        raise APIError("Failed to load chapters") from e

    return [ChapterResponse.from_chapter(chapter) for chapter in chapters]


@router.get(
    "/{subject_id}/{chapter_id}",
    response_model=ChapterResponse,
    summary="Get chapter",
    description="Get one chapter of a subject.",
    responses={404: {"description": "Chapter not found"}},
)
def get_chapter(subject_id: str, chapter_id: str, store: FixtureStoreDep) -> ChapterResponse:
    try:
        chapter = store.get_chapter(subject_id, chapter_id)
    except FixtureLoadError as e:
        logger.error(f"Error reading chapter: {e.message}")
        raise APIError("Failed to load chapter") from e

    return ChapterResponse.from_chapter(chapter)

"""Subject API routes."""

import logging

from fastapi import APIRouter

from revision_platform.api.dependencies import FixtureStoreDep
from revision_platform.api.middleware.error_handler import APIError
from revision_platform.api.schemas.fixtures import SubjectResponse
from revision_platform.shared.exceptions import FixtureLoadError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[SubjectResponse],
    summary="List subjects",
    description="Get every subject available for study.",
)
def list_subjects(store: FixtureStoreDep) -> list[SubjectResponse]:
    try:
        subjects = store.list_subjects()
    except FixtureLoadError as e:
        logger.error(f"Error reading subjects: {e.message}")
        raise APIError("Failed to load subjects") from e

    return [SubjectResponse.from_subject(subject) for subject in subjects]


@router.get(
    "/{subject_id}",
    response_model=SubjectResponse,
    summary="Get subject",
    description="Get a single subject by id.",
    responses={404: {"description": "Subject not found"}},
)
def get_subject(subject_id: str, store: FixtureStoreDep) -> SubjectResponse:
    """Get a subject.

    Raises:
        SubjectNotFoundError: If the id is unknown (404)
    """
    try:
        subject = store.get_subject(subject_id)
    except FixtureLoadError as e:
        logger.error(f"Error reading subject: {e.message}")
        raise APIError("Failed to load subject") from e

    return SubjectResponse.from_subject(subject)

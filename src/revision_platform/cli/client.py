"""HTTP client for the revision platform API."""

import logging
from typing import Any, Sequence

import httpx

from revision_platform.modules.fixtures import Chapter, Subject
from revision_platform.shared.config import get_settings
from revision_platform.shared.exceptions import ApiClientError
from revision_platform.shared.models import LearningMode

logger = logging.getLogger(__name__)


class ApiClient:
    """Synchronous client used by the wizard and the one-shot commands."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        settings = get_settings()
        if http_client is not None:
            self._client = http_client
            self.base_url = str(http_client.base_url).rstrip("/")
            return

        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.api_timeout_seconds,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Perform a request and return the decoded JSON body.

        Raises:
            ApiClientError: On transport failures, non-2xx responses or bad JSON
        """
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Request to {path} failed: {e}")
            raise ApiClientError(f"Could not reach {self.base_url}: {e}") from e

        if response.is_error:
            raise ApiClientError(self._error_message(response), response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise ApiClientError(f"Invalid JSON from {path}", response.status_code) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return f"HTTP {response.status_code}"

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            return str(error.get("message", f"HTTP {response.status_code}"))
        if error:
            return str(error)
        return f"HTTP {response.status_code}"

    def list_subjects(self) -> list[Subject]:
        return [Subject.from_dict(item) for item in self._request("GET", "/api/subjects")]

    def list_chapters(self, subject_id: str) -> list[Chapter]:
        return [
            Chapter.from_dict(item)
            for item in self._request("GET", f"/api/chapters/{subject_id}")
        ]

    def get_chapter(self, subject_id: str, chapter_id: str) -> Chapter:
        return Chapter.from_dict(self._request("GET", f"/api/chapters/{subject_id}/{chapter_id}"))

    def get_subject(self, subject_id: str) -> Subject:
        return Subject.from_dict(self._request("GET", f"/api/subjects/{subject_id}"))

    def generate(self, mode: LearningMode, subject: str, chapter: str, request: str | None = None) -> str:
        """Request generated content and return its text."""
        payload: dict[str, Any] = {"mode": mode.value, "subject": subject, "chapter": chapter}
        if request:
            payload["request"] = request
        return str(self._request("POST", "/api/ai/generate", json=payload)["content"])

    def chat(
        self,
        mode: LearningMode,
        subject: str,
        chapter: str,
        message: str,
        history: Sequence[dict[str, Any]] = (),
    ) -> str:
        """Send one chat message and return the reply text."""
        payload = {
            "mode": mode.value,
            "subject": subject,
            "chapter": chapter,
            "message": message,
            "history": list(history),
        }
        return str(self._request("POST", "/api/ai/chat", json=payload)["content"])


def get_api_client() -> ApiClient:
    """Create an API client from settings."""
    return ApiClient()

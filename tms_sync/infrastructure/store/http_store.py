# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""HTTP remote store.

Async REST client for the course API served by ``tms_sync.api``. Every
response is wrapped in an envelope:

    {"success": true, "data": {...}}
    {"success": false, "error": "Course with id c9 not found."}

HTTP 404 becomes NotFoundError. Any other non-2xx status, a malformed
envelope or a transport failure becomes UnavailableError. Requests are
never retried.

Example:
    store = HttpRemoteStore(
        base_url="http://localhost:3001/api/v1",
        access_token="...",
    )
    courses = await store.list_courses()
    await store.close()
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from tms_sync.core.config.settings import HttpStoreSettings
from tms_sync.infrastructure.store.base import RemoteStore
from tms_sync.infrastructure.store.exceptions import NotFoundError, UnavailableError
from tms_sync.models import (
    AssessmentStatus,
    CalendarEvent,
    Course,
    GradeStatus,
    GrantApplication,
    GrantStatus,
    JobPosting,
    LearnerProgress,
)

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    """Quote a path segment; emails carry '@' and may carry '+'."""
    return quote(value, safe="")


class HttpRemoteStore(RemoteStore):
    """RemoteStore that talks to the REST course API over httpx.

    Attributes:
        base_url: API base URL including the version prefix.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP store.

        Args:
            base_url: API base URL, e.g. ``http://localhost:3001/api/v1``.
            access_token: Optional bearer token.
            timeout: Request timeout in seconds.
            transport: Optional transport, e.g. ``httpx.ASGITransport`` in tests.
        """
        super().__init__()
        self.base_url = base_url.rstrip("/")
        headers = {"Accept": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: HttpStoreSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HttpRemoteStore":
        """Build a store from HTTP store settings."""
        token = settings.access_token.get_secret_value() if settings.access_token else None
        return cls(
            base_url=settings.base_url,
            access_token=token,
            timeout=settings.timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and unwrap the response envelope.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            json: Optional JSON body.

        Returns:
            The ``data`` member of a successful envelope.

        Raises:
            NotFoundError: On HTTP 404.
            UnavailableError: On any other failure.
        """
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error("Request %s %s failed: %s", method, path, e)
            raise UnavailableError(f"Request to {path} failed: {e}") from e

        try:
            envelope = response.json()
        except ValueError:
            envelope = None

        error_message = None
        if isinstance(envelope, dict):
            error_message = envelope.get("error")

        if response.status_code == 404:
            raise NotFoundError(error_message or f"Resource {path} not found.")

        if response.is_error:
            logger.error("Request %s %s returned %d", method, path, response.status_code)
            raise UnavailableError(
                error_message or f"Request to {path} failed",
                status_code=response.status_code,
            )

        if not isinstance(envelope, dict) or "success" not in envelope:
            raise UnavailableError(
                f"Malformed response from {path}",
                status_code=response.status_code,
            )

        if not envelope["success"]:
            raise UnavailableError(
                error_message or f"Request to {path} was not successful",
                status_code=response.status_code,
            )

        return envelope.get("data")

    # ------------------------------------------------------------------
    # Bulk reads
    # ------------------------------------------------------------------

    async def list_courses(self) -> list[Course]:
        data = await self._request("GET", "/courses")
        return [Course.model_validate(doc) for doc in data or []]

    async def list_events(self) -> list[CalendarEvent]:
        data = await self._request("GET", "/calendar-events")
        return [CalendarEvent.model_validate(doc) for doc in data or []]

    async def list_grants(self) -> list[GrantApplication]:
        data = await self._request("GET", "/grant-applications")
        return [GrantApplication.model_validate(doc) for doc in data or []]

    async def list_job_postings(self) -> list[JobPosting]:
        data = await self._request("GET", "/job-postings")
        return [JobPosting.model_validate(doc) for doc in data or []]

    async def list_learners(self) -> list[LearnerProgress]:
        data = await self._request("GET", "/learners")
        return [LearnerProgress.model_validate(doc) for doc in data or []]

    # ------------------------------------------------------------------
    # Whole-document course CRUD
    # ------------------------------------------------------------------

    async def get_course(self, course_id: str) -> Course:
        data = await self._request("GET", f"/courses/{_segment(course_id)}")
        return Course.model_validate(data)

    async def create_course(self, draft: Course) -> Course:
        data = await self._request("POST", "/courses", json=draft.to_document())
        return Course.model_validate(data)

    async def replace_course(self, course: Course) -> Course:
        data = await self._request(
            "PUT", f"/courses/{_segment(course.id)}", json=course.to_document()
        )
        return Course.model_validate(data)

    async def delete_course(self, course_id: str) -> None:
        await self._request("DELETE", f"/courses/{_segment(course_id)}")

    async def set_grant_status(self, grant_id: str, status: GrantStatus) -> GrantApplication:
        data = await self._request(
            "PATCH",
            f"/grant-applications/{_segment(grant_id)}/status",
            json={"status": status.value},
        )
        return GrantApplication.model_validate(data)

    # ------------------------------------------------------------------
    # Nested-field mutators
    # ------------------------------------------------------------------

    def _learner_path(self, course_id: str, learner_email: str) -> str:
        return f"/courses/{_segment(course_id)}/learners/{_segment(learner_email)}"

    async def toggle_bookmark(self, course_id: str, subtopic_id: str) -> Course:
        data = await self._request(
            "POST",
            f"/courses/{_segment(course_id)}/bookmarks/{_segment(subtopic_id)}/toggle",
        )
        return Course.model_validate(data)

    async def toggle_subtopic_completion(
        self, course_id: str, learner_email: str, subtopic_id: str
    ) -> Course:
        data = await self._request(
            "POST",
            f"{self._learner_path(course_id, learner_email)}"
            f"/completions/{_segment(subtopic_id)}/toggle",
        )
        return Course.model_validate(data)

    async def set_assessment_grade(
        self,
        course_id: str,
        learner_email: str,
        assessment_id: str,
        status: GradeStatus,
    ) -> Course:
        data = await self._request(
            "PUT",
            f"{self._learner_path(course_id, learner_email)}/grades/{_segment(assessment_id)}",
            json={"status": status.value},
        )
        return Course.model_validate(data)

    async def set_all_assessment_grades(
        self, course_id: str, learner_email: str, status: GradeStatus
    ) -> Course:
        data = await self._request(
            "PUT",
            f"{self._learner_path(course_id, learner_email)}/grades",
            json={"status": status.value},
        )
        return Course.model_validate(data)

    async def set_assessment_state(
        self,
        course_id: str,
        assessment_id: str,
        status: AssessmentStatus,
        access_code: str | None = None,
    ) -> Course:
        body: dict[str, Any] = {"status": status.value}
        if access_code:
            body["accessCode"] = access_code
        data = await self._request(
            "PATCH",
            f"/courses/{_segment(course_id)}/assessments/{_segment(assessment_id)}",
            json=body,
        )
        return Course.model_validate(data)

    async def record_submission(
        self,
        course_id: str,
        learner_email: str,
        assessment_id: str,
        file_name: str,
    ) -> Course:
        data = await self._request(
            "PUT",
            f"{self._learner_path(course_id, learner_email)}"
            f"/submissions/{_segment(assessment_id)}",
            json={"fileName": file_name},
        )
        return Course.model_validate(data)

    async def replace_learner_detail(
        self, course_id: str, learner_email: str, learner: LearnerProgress
    ) -> Course:
        data = await self._request(
            "PUT",
            self._learner_path(course_id, learner_email),
            json=learner.to_document(),
        )
        return Course.model_validate(data)

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Abstract base class for remote stores.

A RemoteStore is the persistence boundary the sync core talks to. Two
implementations ship with the package: a JSON-file store and an HTTP
store. The sync core's contract is identical against either.

Every operation is async and either resolves with plain data or raises
a StoreError subclass (NotFoundError or UnavailableError). Nested
mutators always return the entire updated Course, never a partial patch.
Stores do not retry.
"""

import logging
from abc import ABC, abstractmethod

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


class RemoteStore(ABC):
    """Key-addressed persistence boundary for courses and flat collections."""

    def __init__(self) -> None:
        """Initialize the store."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    async def initialize(self) -> None:
        """Prepare the backing storage. No-op unless overridden."""

    async def close(self) -> None:
        """Release held resources. No-op unless overridden."""

    # ------------------------------------------------------------------
    # Bulk reads
    # ------------------------------------------------------------------

    @abstractmethod
    async def list_courses(self) -> list[Course]:
        ...

    @abstractmethod
    async def list_events(self) -> list[CalendarEvent]:
        ...

    @abstractmethod
    async def list_grants(self) -> list[GrantApplication]:
        ...

    @abstractmethod
    async def list_job_postings(self) -> list[JobPosting]:
        ...

    @abstractmethod
    async def list_learners(self) -> list[LearnerProgress]:
        """Return the fixed learner roster used to seed the global registry."""
        ...

    # ------------------------------------------------------------------
    # Whole-document course CRUD
    # ------------------------------------------------------------------

    @abstractmethod
    async def get_course(self, course_id: str) -> Course:
        """Raises NotFoundError if the id is absent."""
        ...

    @abstractmethod
    async def create_course(self, draft: Course) -> Course:
        """Persist a new course; the store assigns its id."""
        ...

    @abstractmethod
    async def replace_course(self, course: Course) -> Course:
        """Overwrite a course by id. Raises NotFoundError if absent."""
        ...

    @abstractmethod
    async def delete_course(self, course_id: str) -> None:
        """Raises NotFoundError if the id is absent."""
        ...

    @abstractmethod
    async def set_grant_status(self, grant_id: str, status: GrantStatus) -> GrantApplication:
        ...

    # ------------------------------------------------------------------
    # Nested-field mutators, each returning the whole parent Course
    # ------------------------------------------------------------------

    @abstractmethod
    async def toggle_bookmark(self, course_id: str, subtopic_id: str) -> Course:
        ...

    @abstractmethod
    async def toggle_subtopic_completion(
        self, course_id: str, learner_email: str, subtopic_id: str
    ) -> Course:
        """Flip completion and recompute the learner's progress percentage."""
        ...

    @abstractmethod
    async def set_assessment_grade(
        self,
        course_id: str,
        learner_email: str,
        assessment_id: str,
        status: GradeStatus,
    ) -> Course:
        ...

    @abstractmethod
    async def set_all_assessment_grades(
        self, course_id: str, learner_email: str, status: GradeStatus
    ) -> Course:
        ...

    @abstractmethod
    async def set_assessment_state(
        self,
        course_id: str,
        assessment_id: str,
        status: AssessmentStatus,
        access_code: str | None = None,
    ) -> Course:
        ...

    @abstractmethod
    async def record_submission(
        self,
        course_id: str,
        learner_email: str,
        assessment_id: str,
        file_name: str,
    ) -> Course:
        """Replace any prior submission for the (learner, assessment) pair."""
        ...

    @abstractmethod
    async def replace_learner_detail(
        self, course_id: str, learner_email: str, learner: LearnerProgress
    ) -> Course:
        ...

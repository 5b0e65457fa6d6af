# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""JSON-document remote store.

Persists each collection as one JSON array under a data directory. This
is the local counterpart of the HTTP store: the sync core cannot tell
the two apart. A simulated latency can be configured so that callers
exercise the same suspend/resume path they would against a network.

Example:
    store = JsonFileStore(Path("data"), simulated_delay=0.2)
    await store.initialize()
    courses = await store.list_courses()
"""

import asyncio
import json
import uuid
from collections.abc import Callable
from pathlib import Path
from typing import Any

from tms_sync.domains.course import nested
from tms_sync.infrastructure.store.base import RemoteStore
from tms_sync.infrastructure.store.exceptions import NotFoundError, UnavailableError
from tms_sync.infrastructure.store.seeds import (
    SEED_CALENDAR_EVENTS,
    SEED_COURSES,
    SEED_GRANT_APPLICATIONS,
    SEED_JOB_POSTINGS,
    SEED_LEARNERS,
)
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

COURSES_FILE = "lms_courses.json"
EVENTS_FILE = "lms_calendar_events.json"
GRANTS_FILE = "lms_grant_applications.json"
JOBS_FILE = "lms_job_postings.json"
LEARNERS_FILE = "lms_learners.json"

_SEEDS: dict[str, list[dict[str, Any]]] = {
    COURSES_FILE: SEED_COURSES,
    EVENTS_FILE: SEED_CALENDAR_EVENTS,
    GRANTS_FILE: SEED_GRANT_APPLICATIONS,
    JOBS_FILE: SEED_JOB_POSTINGS,
    LEARNERS_FILE: SEED_LEARNERS,
}


class JsonFileStore(RemoteStore):
    """RemoteStore backed by JSON files on the local filesystem.

    Every read goes to disk so that edits made by another process are
    visible. Writes to the course collection are serialized by an
    asyncio lock held across the read-modify-write cycle.

    Attributes:
        data_dir: Directory holding one file per collection.
        simulated_delay: Seconds awaited before each call resolves.
        seed: Whether initialize() writes seed data for missing files.
    """

    def __init__(
        self,
        data_dir: Path | str,
        simulated_delay: float = 0.0,
        seed: bool = True,
    ) -> None:
        """Initialize the file store.

        Args:
            data_dir: Directory for the collection files.
            simulated_delay: Artificial latency in seconds.
            seed: Seed missing collections on initialize().
        """
        super().__init__()
        self.data_dir = Path(data_dir)
        self.simulated_delay = simulated_delay
        self.seed = seed
        self._write_lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Create the data directory and seed any missing collection."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise UnavailableError(f"Cannot create data directory {self.data_dir}: {e}") from e

        for filename, documents in _SEEDS.items():
            path = self.data_dir / filename
            if path.exists():
                continue
            self._write(filename, documents if self.seed else [])
            self.logger.info(
                "Seeded collection %s with %d documents",
                filename,
                len(documents) if self.seed else 0,
            )

    # ------------------------------------------------------------------
    # Raw collection access
    # ------------------------------------------------------------------

    async def _delay(self) -> None:
        if self.simulated_delay > 0:
            await asyncio.sleep(self.simulated_delay)

    def _read(self, filename: str) -> list[dict[str, Any]]:
        path = self.data_dir / filename
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            self.logger.error("Failed to read %s: %s", path, e)
            return []

        try:
            documents = json.loads(raw)
        except json.JSONDecodeError as e:
            self.logger.error("Corrupt collection file %s, treating as empty: %s", path, e)
            return []

        if not isinstance(documents, list):
            self.logger.error("Collection file %s does not hold a JSON array", path)
            return []
        return documents

    def _write(self, filename: str, documents: list[dict[str, Any]]) -> None:
        path = self.data_dir / filename
        tmp_path = path.with_suffix(".json.tmp")
        try:
            tmp_path.write_text(json.dumps(documents, indent=2), encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            raise UnavailableError(f"Failed to write {filename}: {e}") from e

    def _load_courses(self) -> list[Course]:
        return [Course.model_validate(doc) for doc in self._read(COURSES_FILE)]

    def _save_courses(self, courses: list[Course]) -> None:
        self._write(COURSES_FILE, [course.to_document() for course in courses])

    async def _mutate_course(
        self,
        course_id: str,
        mutate: Callable[[Course], Course],
    ) -> Course:
        """Apply ``mutate`` to one stored course and persist the result."""
        await self._delay()
        async with self._write_lock:
            courses = self._load_courses()
            for index, course in enumerate(courses):
                if course.id == course_id:
                    updated = mutate(course)
                    courses[index] = updated
                    self._save_courses(courses)
                    return updated.model_copy(deep=True)
        raise NotFoundError.course(course_id)

    # ------------------------------------------------------------------
    # Bulk reads
    # ------------------------------------------------------------------

    async def list_courses(self) -> list[Course]:
        await self._delay()
        return self._load_courses()

    async def list_events(self) -> list[CalendarEvent]:
        await self._delay()
        return [CalendarEvent.model_validate(doc) for doc in self._read(EVENTS_FILE)]

    async def list_grants(self) -> list[GrantApplication]:
        await self._delay()
        return [GrantApplication.model_validate(doc) for doc in self._read(GRANTS_FILE)]

    async def list_job_postings(self) -> list[JobPosting]:
        await self._delay()
        return [JobPosting.model_validate(doc) for doc in self._read(JOBS_FILE)]

    async def list_learners(self) -> list[LearnerProgress]:
        await self._delay()
        return [LearnerProgress.model_validate(doc) for doc in self._read(LEARNERS_FILE)]

    # ------------------------------------------------------------------
    # Whole-document course CRUD
    # ------------------------------------------------------------------

    async def get_course(self, course_id: str) -> Course:
        await self._delay()
        for course in self._load_courses():
            if course.id == course_id:
                return course
        raise NotFoundError.course(course_id)

    async def create_course(self, draft: Course) -> Course:
        await self._delay()
        created = draft.model_copy(deep=True, update={"id": f"course_{uuid.uuid4().hex}"})
        async with self._write_lock:
            courses = self._load_courses()
            courses.append(created)
            self._save_courses(courses)
        self.logger.info("Created course %s", created.id)
        return created.model_copy(deep=True)

    async def replace_course(self, course: Course) -> Course:
        return await self._mutate_course(course.id, lambda _: course.model_copy(deep=True))

    async def delete_course(self, course_id: str) -> None:
        await self._delay()
        async with self._write_lock:
            courses = self._load_courses()
            remaining = [course for course in courses if course.id != course_id]
            if len(remaining) == len(courses):
                raise NotFoundError.course(course_id)
            self._save_courses(remaining)
        self.logger.info("Deleted course %s", course_id)

    async def set_grant_status(self, grant_id: str, status: GrantStatus) -> GrantApplication:
        await self._delay()
        async with self._write_lock:
            grants = [GrantApplication.model_validate(doc) for doc in self._read(GRANTS_FILE)]
            for grant in grants:
                if grant.id == grant_id:
                    grant.status = status
                    self._write(GRANTS_FILE, [g.to_document() for g in grants])
                    return grant.model_copy(deep=True)
        raise NotFoundError.grant(grant_id)

    # ------------------------------------------------------------------
    # Nested-field mutators
    # ------------------------------------------------------------------

    async def toggle_bookmark(self, course_id: str, subtopic_id: str) -> Course:
        return await self._mutate_course(
            course_id, lambda course: nested.toggle_bookmark(course, subtopic_id)
        )

    async def toggle_subtopic_completion(
        self, course_id: str, learner_email: str, subtopic_id: str
    ) -> Course:
        return await self._mutate_course(
            course_id,
            lambda course: nested.toggle_subtopic_completion(course, learner_email, subtopic_id),
        )

    async def set_assessment_grade(
        self,
        course_id: str,
        learner_email: str,
        assessment_id: str,
        status: GradeStatus,
    ) -> Course:
        return await self._mutate_course(
            course_id,
            lambda course: nested.set_learner_grade(course, learner_email, assessment_id, status),
        )

    async def set_all_assessment_grades(
        self, course_id: str, learner_email: str, status: GradeStatus
    ) -> Course:
        return await self._mutate_course(
            course_id,
            lambda course: nested.set_all_learner_grades(course, learner_email, status),
        )

    async def set_assessment_state(
        self,
        course_id: str,
        assessment_id: str,
        status: AssessmentStatus,
        access_code: str | None = None,
    ) -> Course:
        return await self._mutate_course(
            course_id,
            lambda course: nested.set_assessment_state(course, assessment_id, status, access_code),
        )

    async def record_submission(
        self,
        course_id: str,
        learner_email: str,
        assessment_id: str,
        file_name: str,
    ) -> Course:
        return await self._mutate_course(
            course_id,
            lambda course: nested.record_submission(
                course, learner_email, assessment_id, file_name
            ),
        )

    async def replace_learner_detail(
        self, course_id: str, learner_email: str, learner: LearnerProgress
    ) -> Course:
        return await self._mutate_course(
            course_id,
            lambda course: nested.replace_learner(course, learner_email, learner),
        )

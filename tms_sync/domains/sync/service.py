# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Client-side state container and mutation surface.

LmsSyncService caches three collections (courses, calendar events, grant
applications) and mirrors the course currently open in a detail view.
Views hold a reference to the service and read its properties; they are
notified of changes through the event bus.

Every write is confirm-then-commit: the remote store is called first and
the cache is only touched with the document the store returned. A
failed call leaves every cached value as it was and re-raises the store
error. Nothing is retried.

Writes that target the same course are queued behind a per-course lock
unless ``SYNC_SERIALIZE_COURSE_WRITES`` is off, in which case whichever
response arrives last wins the cache slot.

Clearing the cache starts a new generation. Responses to calls issued
before the clear are returned to their callers but never committed, so
a load still in flight at logout cannot refill the cache.
"""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

from tms_sync.core.config.settings import SyncSettings, get_settings
from tms_sync.domains.course import nested
from tms_sync.domains.roster.updates import LearnerUpdate, apply_learner_updates
from tms_sync.infrastructure.events import EventBus, EventTypes, get_event_bus
from tms_sync.infrastructure.store.base import RemoteStore
from tms_sync.infrastructure.store.exceptions import StoreError
from tms_sync.models import (
    AssessmentStatus,
    CalendarEvent,
    Course,
    EnrollmentStatus,
    GradeStatus,
    GrantApplication,
    GrantStatus,
    JobPosting,
    LearnerProgress,
    Quiz,
)

logger = logging.getLogger(__name__)


class SyncServiceError(Exception):
    """Base exception for sync service errors."""

    pass


class CourseNotCachedError(SyncServiceError):
    """Raised when a client-side edit targets a course that is not cached."""

    def __init__(self, course_id: str) -> None:
        self.course_id = course_id
        super().__init__(f"Course with id {course_id} is not loaded.")


class LearnerNotInRegistryError(SyncServiceError):
    """Raised when enrolling an email the global registry does not know."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Learner with email {email} not found in registry.")


class LearnerNotInRosterError(SyncServiceError):
    """Raised when editing a learner who is not on the course roster."""

    def __init__(self, course_id: str, email: str) -> None:
        self.course_id = course_id
        self.email = email
        super().__init__(f"Learner with email {email} not found in course {course_id}.")


class LmsSyncService:
    """Cache of courses, events and grants kept in step with a RemoteStore.

    Attributes:
        store: The remote store every write goes through.
        event_bus: Bus on which committed changes are announced.
        serialize_course_writes: Queue writes per course id.
    """

    def __init__(
        self,
        store: RemoteStore,
        event_bus: EventBus | None = None,
        settings: SyncSettings | None = None,
        registry: list[LearnerProgress] | None = None,
    ) -> None:
        """Initialize the sync service.

        Args:
            store: Remote store implementation.
            event_bus: Event bus; the process-wide bus when omitted.
            settings: Sync settings; loaded from the environment when omitted.
            registry: Initial global learner registry.
        """
        self.store = store
        self.event_bus = event_bus or get_event_bus()
        sync_settings = settings or get_settings().sync
        self.serialize_course_writes = sync_settings.serialize_course_writes

        self._courses: list[Course] = []
        self._events: list[CalendarEvent] = []
        self._grants: list[GrantApplication] = []
        self._job_postings: list[JobPosting] = []
        self._registry: list[LearnerProgress] = [
            learner.model_copy(deep=True) for learner in registry or []
        ]
        self._selected_course: Course | None = None
        self._editing_course: Course | None = None
        self._is_loading = False
        self._course_locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}
        self._generation = 0

    # ------------------------------------------------------------------
    # Read-only views of the cache
    # ------------------------------------------------------------------

    @property
    def courses(self) -> list[Course]:
        return list(self._courses)

    @property
    def events(self) -> list[CalendarEvent]:
        return list(self._events)

    @property
    def grants(self) -> list[GrantApplication]:
        return list(self._grants)

    @property
    def job_postings(self) -> list[JobPosting]:
        return list(self._job_postings)

    @property
    def registry(self) -> list[LearnerProgress]:
        """The global learner registry; survives logout."""
        return list(self._registry)

    @property
    def selected_course(self) -> Course | None:
        return self._selected_course

    @property
    def editing_course(self) -> Course | None:
        return self._editing_course

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    def get_course(self, course_id: str) -> Course | None:
        """Return the cached course with ``course_id``, if any."""
        for course in self._courses:
            if course.id == course_id:
                return course
        return None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @contextlib.asynccontextmanager
    async def _course_lock(self, course_id: str) -> AsyncIterator[None]:
        """Hold the write lock for ``course_id``.

        A lock stays in the map only while some write holds or awaits it.
        """
        if not self.serialize_course_writes:
            yield
            return
        lock = self._course_locks.get(course_id)
        if lock is None:
            lock = asyncio.Lock()
            self._course_locks[course_id] = lock
        self._lock_users[course_id] = self._lock_users.get(course_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[course_id] -= 1
            if not self._lock_users[course_id]:
                del self._lock_users[course_id]
                del self._course_locks[course_id]

    def _is_stale(self, generation: int) -> bool:
        if generation == self._generation:
            return False
        logger.debug("Discarding response issued before the cache was cleared")
        return True

    def _require_cached(self, course_id: str) -> Course:
        course = self.get_course(course_id)
        if course is None:
            raise CourseNotCachedError(course_id)
        return course

    def _commit_course(self, course_id: str, updated: Course) -> None:
        """Replace the cache slot for ``course_id`` and the selected mirror."""
        self._courses = [updated if course.id == course_id else course for course in self._courses]
        if self._selected_course is not None and self._selected_course.id == course_id:
            self._selected_course = updated

    async def _publish(self, event_type: str, payload: dict[str, Any]) -> None:
        await self.event_bus.publish(event_type, payload, source="sync")

    async def _mutate_course(
        self,
        course_id: str,
        action: str,
        call: Callable[[], Awaitable[Course]],
    ) -> Course:
        """Run one store write for a course and commit its response.

        ``call`` runs while the course's lock is held, so any cached state
        it reads reflects every earlier write to the same course.
        """
        generation = self._generation
        async with self._course_lock(course_id):
            try:
                updated = await call()
            except StoreError as e:
                logger.warning("%s failed for course %s: %s", action, course_id, e)
                raise
            if self._is_stale(generation):
                return updated
            self._commit_course(course_id, updated)

        logger.debug("%s committed for course %s", action, course_id)
        await self._publish(EventTypes.Course.UPDATED, {"course_id": course_id, "action": action})
        return updated

    async def _replace_from_cache(
        self,
        course_id: str,
        action: str,
        build: Callable[[Course], Course],
    ) -> Course:
        """Whole-document replace of a cached course edited client-side."""

        async def call() -> Course:
            draft = build(self._require_cached(course_id))
            return await self.store.replace_course(draft)

        return await self._mutate_course(course_id, action, call)

    # ------------------------------------------------------------------
    # Bulk reads
    # ------------------------------------------------------------------

    async def refresh(self) -> None:
        """Replace all three caches from the store.

        The three reads run concurrently; the caches are swapped together
        only once all of them have succeeded.
        """
        generation = self._generation
        self._is_loading = True
        try:
            courses, events, grants = await asyncio.gather(
                self.store.list_courses(),
                self.store.list_events(),
                self.store.list_grants(),
            )
        except StoreError as e:
            logger.error("Failed to refresh cache: %s", e)
            raise
        finally:
            self._is_loading = False

        if self._is_stale(generation):
            return
        self._courses, self._events, self._grants = courses, events, grants
        if self._selected_course is not None:
            self._selected_course = self.get_course(self._selected_course.id)

        logger.info(
            "Cache refreshed: %d courses, %d events, %d grants",
            len(courses),
            len(events),
            len(grants),
        )
        await self._publish(
            EventTypes.Cache.REFRESHED,
            {"courses": len(courses), "events": len(events), "grants": len(grants)},
        )

    async def load_registry(self, force: bool = False) -> list[LearnerProgress]:
        """Load the global learner registry from the store if it is empty.

        Args:
            force: Reload even when the registry already holds learners.

        Returns:
            The registry after loading.
        """
        if self._registry and not force:
            return self.registry
        self._registry = await self.store.list_learners()
        logger.info("Loaded %d learners into registry", len(self._registry))
        return self.registry

    async def load_job_postings(self) -> list[JobPosting]:
        generation = self._generation
        job_postings = await self.store.list_job_postings()
        if self._is_stale(generation):
            return job_postings
        self._job_postings = job_postings
        return self.job_postings

    # ------------------------------------------------------------------
    # Whole-document course writes
    # ------------------------------------------------------------------

    async def add_course(self, draft: Course) -> Course:
        """Create a course remotely and append it to the cache.

        Returns:
            The created course carrying its store-assigned id.
        """
        generation = self._generation
        created = await self.store.create_course(draft)
        if self._is_stale(generation):
            return created
        self._courses = [*self._courses, created]
        logger.info("Course created: %s", created.id)
        await self._publish(EventTypes.Course.CREATED, {"course_id": created.id})
        return created

    async def update_course(self, course: Course) -> Course:
        return await self._mutate_course(
            course.id, "update_course", lambda: self.store.replace_course(course)
        )

    async def delete_course(self, course_id: str) -> None:
        """Delete a course remotely and drop it from the cache."""
        generation = self._generation
        async with self._course_lock(course_id):
            await self.store.delete_course(course_id)
            if self._is_stale(generation):
                return
            self._courses = [course for course in self._courses if course.id != course_id]
            deselected = self._selected_course is not None and self._selected_course.id == course_id
            if deselected:
                self._selected_course = None

        logger.info("Course deleted: %s", course_id)
        await self._publish(EventTypes.Course.DELETED, {"course_id": course_id})
        if deselected:
            await self._publish(EventTypes.Selection.CHANGED, {"course_id": None})

    async def add_quiz(self, course_id: str, quiz: Quiz) -> Course:
        """Attach a generated quiz to a cached course."""
        return await self._replace_from_cache(
            course_id,
            "add_quiz",
            lambda course: course.model_copy(deep=True, update={"quiz": quiz}),
        )

    async def enroll(self, course_id: str) -> Course:
        """Mark a cached course as enrolled for the current viewer."""
        return await self._replace_from_cache(
            course_id,
            "enroll",
            lambda course: course.model_copy(
                deep=True, update={"enrollment_status": EnrollmentStatus.ENROLLED}
            ),
        )

    # ------------------------------------------------------------------
    # Nested-field writes
    # ------------------------------------------------------------------

    async def toggle_bookmark(self, course_id: str, subtopic_id: str) -> Course:
        return await self._mutate_course(
            course_id,
            "toggle_bookmark",
            lambda: self.store.toggle_bookmark(course_id, subtopic_id),
        )

    async def toggle_completion(self, course_id: str, learner_email: str, subtopic_id: str) -> Course:
        """Flip a learner's completion of a subtopic.

        The store recomputes the learner's progress; the cache takes the
        store's document as is.
        """
        return await self._mutate_course(
            course_id,
            "toggle_completion",
            lambda: self.store.toggle_subtopic_completion(course_id, learner_email, subtopic_id),
        )

    async def set_grade(
        self,
        course_id: str,
        learner_email: str,
        assessment_id: str,
        status: GradeStatus,
    ) -> Course:
        return await self._mutate_course(
            course_id,
            "set_grade",
            lambda: self.store.set_assessment_grade(course_id, learner_email, assessment_id, status),
        )

    async def set_all_grades(self, course_id: str, learner_email: str, status: GradeStatus) -> Course:
        """Overwrite every grade of one learner, e.g. after an overall-status edit."""
        return await self._mutate_course(
            course_id,
            "set_all_grades",
            lambda: self.store.set_all_assessment_grades(course_id, learner_email, status),
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
            "set_assessment_state",
            lambda: self.store.set_assessment_state(course_id, assessment_id, status, access_code),
        )

    async def submit(
        self,
        course_id: str,
        learner_email: str,
        assessment_id: str,
        file_name: str,
    ) -> Course:
        """Record a submission, replacing any earlier one for the pair."""
        return await self._mutate_course(
            course_id,
            "submit",
            lambda: self.store.record_submission(course_id, learner_email, assessment_id, file_name),
        )

    async def update_learner_detail(
        self,
        course_id: str,
        learner_email: str,
        record: LearnerProgress,
    ) -> Course:
        """Replace one roster entry's whole record."""
        return await self._mutate_course(
            course_id,
            "update_learner_detail",
            lambda: self.store.replace_learner_detail(course_id, learner_email, record),
        )

    async def edit_learner(
        self,
        course_id: str,
        learner_email: str,
        *updates: LearnerUpdate,
    ) -> Course:
        """Apply typed field updates to a roster entry and save it.

        Raises:
            CourseNotCachedError: If the course is not cached.
            LearnerNotInRosterError: If the learner is not on the cached roster.
            ValidationError: If the updates leave the record invalid; the
                store is not called.
        """

        async def call() -> Course:
            course = self._require_cached(course_id)
            learner = course.learner(learner_email)
            if learner is None:
                raise LearnerNotInRosterError(course_id, learner_email)
            record = apply_learner_updates(learner, *updates)
            return await self.store.replace_learner_detail(course_id, learner_email, record)

        return await self._mutate_course(course_id, "edit_learner", call)

    # ------------------------------------------------------------------
    # Grants
    # ------------------------------------------------------------------

    async def set_grant_status(self, grant_id: str, status: GrantStatus) -> list[GrantApplication]:
        """Change a grant application's status and reload all grants.

        Status changes can have side effects on other applications, so the
        whole collection is fetched again rather than patched.

        Returns:
            The refreshed grant applications.
        """
        generation = self._generation
        await self.store.set_grant_status(grant_id, status)
        grants = await self.store.list_grants()
        if self._is_stale(generation):
            return grants
        self._grants = grants
        logger.info("Grant %s set to %s", grant_id, status.value)
        await self._publish(
            EventTypes.Grant.STATUS_CHANGED,
            {"grant_id": grant_id, "status": status.value},
        )
        return self.grants

    # ------------------------------------------------------------------
    # Global learner registry and rosters
    # ------------------------------------------------------------------

    async def add_learner_to_registry(self, profile: LearnerProgress) -> LearnerProgress:
        """Add a learner to the global registry unless the email is known.

        The check is client-side only; the store does not enforce it.
        """
        if any(learner.email == profile.email for learner in self._registry):
            logger.debug("Learner %s already in registry", profile.email)
            return profile
        self._registry = [*self._registry, profile.model_copy(deep=True)]
        await self._publish(EventTypes.Registry.LEARNER_ADDED, {"email": profile.email})
        return profile

    async def enroll_in_roster(self, course_id: str, email: str) -> Course:
        """Enroll a registry learner in a course roster.

        The roster receives a copy of the registry record; later edits to
        the roster entry never reach the registry. Enrolling someone who
        is already on the roster returns the cached course unchanged.

        Raises:
            CourseNotCachedError: If the course is not cached.
            LearnerNotInRegistryError: If the registry has no such email.
        """

        async def call() -> Course:
            course = self._require_cached(course_id)
            profile = next((entry for entry in self._registry if entry.email == email), None)
            if profile is None:
                raise LearnerNotInRegistryError(email)
            if course.learner(email) is not None:
                return course
            return await self.store.replace_course(nested.add_roster_entry(course, profile))

        return await self._mutate_course(course_id, "enroll_in_roster", call)

    async def unenroll_from_roster(self, course_id: str, email: str) -> Course:
        return await self._replace_from_cache(
            course_id,
            "unenroll_from_roster",
            lambda course: nested.remove_roster_entry(course, email),
        )

    # ------------------------------------------------------------------
    # Selection and editor draft
    # ------------------------------------------------------------------

    async def select_course(self, course_id: str | None) -> Course | None:
        """Open a cached course in the detail mirror, or close it with None."""
        self._selected_course = None if course_id is None else self._require_cached(course_id)
        await self._publish(EventTypes.Selection.CHANGED, {"course_id": course_id})
        return self._selected_course

    def begin_editing(self, course_id: str | None = None) -> Course:
        """Start an unsaved editor draft.

        The draft is a private copy of the cached course, or a blank
        course when ``course_id`` is None. It is not synced until saved.
        """
        if course_id is None:
            self._editing_course = Course()
        else:
            self._editing_course = self._require_cached(course_id).model_copy(deep=True)
        return self._editing_course

    async def save_editing_course(self) -> Course:
        """Persist the editor draft.

        A draft whose id is cached replaces that course; any other draft
        is created. The draft becomes the saved course, so editing can
        continue with the store-assigned id.

        Raises:
            SyncServiceError: If no draft is open.
        """
        draft = self._editing_course
        if draft is None:
            raise SyncServiceError("No course is being edited.")

        generation = self._generation
        if draft.id and self.get_course(draft.id) is not None:
            saved = await self.update_course(draft)
        else:
            saved = await self.add_course(draft)
        if not self._is_stale(generation):
            self._editing_course = saved.model_copy(deep=True)
        return saved

    def discard_editing_course(self) -> None:
        self._editing_course = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def clear(self) -> None:
        """Drop every cached collection and both mirrors.

        The global learner registry is kept. Writes still in flight keep
        their course locks but will not commit their responses.
        """
        self._generation += 1
        self._courses = []
        self._events = []
        self._grants = []
        self._job_postings = []
        self._selected_course = None
        self._editing_course = None
        logger.info("Cache cleared")
        await self._publish(EventTypes.Cache.CLEARED, {})

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the JSON file store."""

import json
import time
from pathlib import Path

import pytest

from tms_sync.infrastructure.store.exceptions import NotFoundError
from tms_sync.infrastructure.store.file_store import (
    COURSES_FILE,
    EVENTS_FILE,
    LEARNERS_FILE,
    JsonFileStore,
)
from tms_sync.models import AssessmentStatus, Course, GradeStatus, GrantStatus


class TestInitialize:
    """Tests for data directory setup and seeding."""

    @pytest.mark.asyncio
    async def test_seeds_missing_collections(self, tmp_path: Path) -> None:
        """Test that a fresh directory is seeded with demo data."""
        store = JsonFileStore(tmp_path / "seeded")

        await store.initialize()

        assert len(await store.list_courses()) > 0
        assert len(await store.list_learners()) > 0
        assert len(await store.list_events()) > 0
        assert len(await store.list_job_postings()) > 0

    @pytest.mark.asyncio
    async def test_existing_files_are_kept(self, tmp_path: Path) -> None:
        """Test that initialize never overwrites a collection."""
        data_dir = tmp_path / "kept"
        data_dir.mkdir()
        (data_dir / COURSES_FILE).write_text("[]", encoding="utf-8")
        store = JsonFileStore(data_dir)

        await store.initialize()

        assert await store.list_courses() == []

    @pytest.mark.asyncio
    async def test_unseeded_collections_are_empty(self, tmp_path: Path) -> None:
        """Test that seed=False writes empty collections."""
        store = JsonFileStore(tmp_path / "empty", seed=False)

        await store.initialize()

        assert json.loads((tmp_path / "empty" / LEARNERS_FILE).read_text()) == []


class TestReads:
    """Tests for bulk reads."""

    @pytest.mark.asyncio
    async def test_corrupt_file_reads_as_empty(self, file_store: JsonFileStore) -> None:
        """Test that unparseable JSON is treated as an empty collection."""
        (file_store.data_dir / EVENTS_FILE).write_text("{not json", encoding="utf-8")

        assert await file_store.list_events() == []

    @pytest.mark.asyncio
    async def test_non_array_reads_as_empty(self, file_store: JsonFileStore) -> None:
        """Test that a JSON object instead of an array is treated as empty."""
        (file_store.data_dir / COURSES_FILE).write_text('{"id": "c1"}', encoding="utf-8")

        assert await file_store.list_courses() == []

    @pytest.mark.asyncio
    async def test_documents_are_camel_case_on_disk(self, file_store: JsonFileStore) -> None:
        """Test the persisted wire form."""
        documents = json.loads((file_store.data_dir / COURSES_FILE).read_text())

        assert documents[0]["trainingHours"] == 20
        assert documents[0]["learners"][0]["assessmentGrades"][0]["assessmentId"] == "a1"

    @pytest.mark.asyncio
    async def test_get_course_not_found(self, file_store: JsonFileStore) -> None:
        """Test that an unknown id raises NotFoundError."""
        with pytest.raises(NotFoundError, match="Course with id ghost not found."):
            await file_store.get_course("ghost")


class TestCourseCrud:
    """Tests for whole-document writes."""

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, file_store: JsonFileStore) -> None:
        """Test that the store assigns a fresh id, ignoring any draft id."""
        created = await file_store.create_course(Course(id="draft", title="Cloud Basics"))

        assert created.id.startswith("course_")
        assert (await file_store.get_course(created.id)).title == "Cloud Basics"

    @pytest.mark.asyncio
    async def test_replace_course(self, file_store: JsonFileStore) -> None:
        """Test whole-document replacement."""
        course = await file_store.get_course("c2")
        course.title = "Agile Practitioner"

        await file_store.replace_course(course)

        assert (await file_store.get_course("c2")).title == "Agile Practitioner"

    @pytest.mark.asyncio
    async def test_replace_missing(self, file_store: JsonFileStore) -> None:
        """Test that replacing an unknown id raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await file_store.replace_course(Course(id="ghost"))

    @pytest.mark.asyncio
    async def test_delete_course(self, file_store: JsonFileStore) -> None:
        """Test deletion and repeated deletion."""
        await file_store.delete_course("c2")

        assert [course.id for course in await file_store.list_courses()] == ["c1"]
        with pytest.raises(NotFoundError):
            await file_store.delete_course("c2")

    @pytest.mark.asyncio
    async def test_set_grant_status(self, file_store: JsonFileStore) -> None:
        """Test that a grant status change is persisted."""
        grant = await file_store.set_grant_status("g1", GrantStatus.REJECTED)

        assert grant.status == GrantStatus.REJECTED
        assert (await file_store.list_grants())[0].status == GrantStatus.REJECTED

    @pytest.mark.asyncio
    async def test_set_unknown_grant(self, file_store: JsonFileStore) -> None:
        """Test that an unknown grant id raises NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            await file_store.set_grant_status("g9", GrantStatus.APPROVED)

        assert exc_info.value.entity == "grant"


class TestNestedMutators:
    """Tests for nested-field mutators returning the whole course."""

    @pytest.mark.asyncio
    async def test_toggle_completion_persists_progress(self, file_store: JsonFileStore) -> None:
        """Test that progress is recomputed and saved."""
        course = await file_store.toggle_subtopic_completion("c1", "bob@example.com", "st3")

        assert course.learner("bob@example.com").progress_percent == 33
        stored = await file_store.get_course("c1")
        assert stored.learner("bob@example.com").completed_subtopics == ["st3"]

    @pytest.mark.asyncio
    async def test_grade_unknown_learner(self, file_store: JsonFileStore) -> None:
        """Test that an unknown learner leaves the document unchanged."""
        before = await file_store.get_course("c1")

        with pytest.raises(NotFoundError) as exc_info:
            await file_store.set_assessment_grade(
                "c1", "nobody@example.com", "a1", GradeStatus.COMPETENT
            )

        assert exc_info.value.entity == "learner"
        assert await file_store.get_course("c1") == before

    @pytest.mark.asyncio
    async def test_mutator_on_missing_course(self, file_store: JsonFileStore) -> None:
        """Test that a nested mutator on an unknown course raises NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            await file_store.toggle_bookmark("ghost", "st1")

        assert exc_info.value.entity == "course"

    @pytest.mark.asyncio
    async def test_set_all_grades(self, file_store: JsonFileStore) -> None:
        """Test that a bulk grade edit covers every assessment."""
        course = await file_store.set_all_assessment_grades(
            "c1", "bob@example.com", GradeStatus.NOT_YET_COMPETENT
        )

        grades = course.learner("bob@example.com").assessment_grades
        assert sorted(g.assessment_id for g in grades) == ["a1", "a2"]
        assert {g.status for g in grades} == {GradeStatus.NOT_YET_COMPETENT}

    @pytest.mark.asyncio
    async def test_set_assessment_state(self, file_store: JsonFileStore) -> None:
        """Test publishing an assessment."""
        course = await file_store.set_assessment_state("c1", "a2", AssessmentStatus.PUBLISHED, "Q1")

        assert course.assessments[1].status == AssessmentStatus.PUBLISHED
        assert course.assessments[1].access_code == "Q1"

    @pytest.mark.asyncio
    async def test_record_submission(self, file_store: JsonFileStore) -> None:
        """Test that submissions are stamped and replaced per assessment."""
        await file_store.record_submission("c1", "bob@example.com", "a1", "one.pdf")
        course = await file_store.record_submission("c1", "bob@example.com", "a1", "two.pdf")

        submissions = course.learner("bob@example.com").submissions
        assert len(submissions) == 1
        assert submissions[0].file_name == "two.pdf"
        assert submissions[0].submitted_at.endswith("Z")

    @pytest.mark.asyncio
    async def test_returned_course_is_a_copy(self, file_store: JsonFileStore) -> None:
        """Test that callers cannot mutate stored state through a result."""
        course = await file_store.toggle_bookmark("c1", "st1")
        course.bookmarked_subtopics.append("st2")

        assert (await file_store.get_course("c1")).bookmarked_subtopics == ["st1"]


class TestSimulatedDelay:
    """Tests for artificial latency."""

    @pytest.mark.asyncio
    @pytest.mark.slow
    async def test_calls_are_delayed(self, tmp_path: Path) -> None:
        """Test that each call waits for the configured delay."""
        store = JsonFileStore(tmp_path / "slow", simulated_delay=0.05, seed=False)
        await store.initialize()

        started = time.monotonic()
        await store.list_courses()

        assert time.monotonic() - started >= 0.04

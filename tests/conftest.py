# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests
- Integration tests
"""

from collections.abc import Generator
from pathlib import Path

import pytest
import pytest_asyncio

from tms_sync.core.config import SyncSettings, clear_settings_cache
from tms_sync.infrastructure.events import EventBus, reset_event_bus
from tms_sync.infrastructure.store.file_store import JsonFileStore
from tms_sync.models import (
    Assessment,
    AssessmentGrade,
    AssessmentStatus,
    Course,
    GradeStatus,
    LearnerProgress,
    Subtopic,
    Topic,
)


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_singletons() -> Generator[None, None, None]:
    """Reset process-wide singletons between tests."""
    clear_settings_cache()
    reset_event_bus()
    yield
    clear_settings_cache()
    reset_event_bus()


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (in-process API)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# =============================================================================
# Document Fixtures
# =============================================================================


@pytest.fixture
def alice() -> LearnerProgress:
    """Provide the registry profile of a sample learner."""
    return LearnerProgress(
        name="Alice Tan",
        email="alice@example.com",
        tel="91234567",
        company="Acme Pte Ltd",
        dob="1985-03-14",
        nationality="Singaporean",
    )


@pytest.fixture
def bob() -> LearnerProgress:
    """Provide a second learner, already graded on one assessment."""
    return LearnerProgress(
        name="Bob Lee",
        email="bob@example.com",
        assessment_grades=[AssessmentGrade(assessment_id="a1", status=GradeStatus.COMPETENT)],
    )


@pytest.fixture
def sample_course(bob: LearnerProgress) -> Course:
    """Provide a course with three subtopics, two assessments and one learner."""
    return Course(
        id="c1",
        title="Data Analytics with Python",
        trainer="John Smith",
        training_hours=20,
        assessment_hours=4,
        topics=[
            Topic(
                id="t1",
                title="Foundations",
                subtopics=[
                    Subtopic(id="st1", title="Tabular data"),
                    Subtopic(id="st2", title="Cleaning"),
                ],
            ),
            Topic(id="t2", title="Presenting", subtopics=[Subtopic(id="st3", title="Charts")]),
        ],
        assessments=[
            Assessment(id="a1", title="Written", status=AssessmentStatus.PUBLISHED),
            Assessment(id="a2", title="Practical"),
        ],
        learners=[bob],
    )


@pytest.fixture
def empty_course() -> Course:
    """Provide a course without topics, assessments or learners."""
    return Course(id="c2", title="Agile Foundations", training_hours=20, assessment_hours=4)


@pytest.fixture
def event_bus() -> EventBus:
    """Provide a fresh event bus."""
    return EventBus()


@pytest.fixture
def sync_settings() -> SyncSettings:
    """Provide sync settings with per-course serialization on."""
    return SyncSettings(serialize_course_writes=True)


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def file_store(
    tmp_path: Path,
    sample_course: Course,
    empty_course: Course,
    alice: LearnerProgress,
) -> JsonFileStore:
    """Provide an initialized, unseeded file store holding the sample courses."""
    store = JsonFileStore(tmp_path / "data", seed=False)
    await store.initialize()
    store._save_courses([sample_course, empty_course])
    (tmp_path / "data" / "lms_learners.json").write_text(
        "[" + alice.model_dump_json(by_alias=True) + "]", encoding="utf-8"
    )
    (tmp_path / "data" / "lms_grant_applications.json").write_text(
        '[{"id": "g1", "courseId": "c1", "courseTitle": "Data Analytics with Python",'
        ' "trainer": "John Smith", "reason": "Retraining", "status": "Pending"}]',
        encoding="utf-8",
    )
    return store

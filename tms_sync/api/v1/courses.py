# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course API endpoints.

Whole-document endpoints:
- GET / - List courses
- POST / - Create a course (the store assigns its id)
- GET /{course_id} - Get one course
- PUT /{course_id} - Replace a course
- DELETE /{course_id} - Delete a course

Nested-field endpoints, each answering with the whole updated course:
- POST /{course_id}/bookmarks/{subtopic_id}/toggle
- POST /{course_id}/learners/{email}/completions/{subtopic_id}/toggle
- PUT /{course_id}/learners/{email}/grades/{assessment_id}
- PUT /{course_id}/learners/{email}/grades
- PATCH /{course_id}/assessments/{assessment_id}
- PUT /{course_id}/learners/{email}/submissions/{assessment_id}
- PUT /{course_id}/learners/{email}
"""

import logging
from typing import Any

from fastapi import APIRouter, status

from tms_sync.api.dependencies import Store, envelope
from tms_sync.models import AssessmentStatus, Course, DocumentModel, GradeStatus, LearnerProgress

logger = logging.getLogger(__name__)

router = APIRouter()


class GradeRequest(DocumentModel):
    status: GradeStatus


class AssessmentStateRequest(DocumentModel):
    status: AssessmentStatus
    access_code: str | None = None


class SubmissionRequest(DocumentModel):
    file_name: str


@router.get("")
async def list_courses(store: Store) -> dict[str, Any]:
    return envelope(await store.list_courses())


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_course(draft: Course, store: Store) -> dict[str, Any]:
    created = await store.create_course(draft)
    logger.info("Course created via API: %s", created.id)
    return envelope(created)


@router.get("/{course_id}")
async def get_course(course_id: str, store: Store) -> dict[str, Any]:
    return envelope(await store.get_course(course_id))


@router.put("/{course_id}")
async def replace_course(course_id: str, course: Course, store: Store) -> dict[str, Any]:
    """Replace a course; the path id wins over any id in the body."""
    return envelope(await store.replace_course(course.model_copy(update={"id": course_id})))


@router.delete("/{course_id}")
async def delete_course(course_id: str, store: Store) -> dict[str, Any]:
    await store.delete_course(course_id)
    return envelope(None)


@router.post("/{course_id}/bookmarks/{subtopic_id}/toggle")
async def toggle_bookmark(course_id: str, subtopic_id: str, store: Store) -> dict[str, Any]:
    return envelope(await store.toggle_bookmark(course_id, subtopic_id))


@router.post("/{course_id}/learners/{email}/completions/{subtopic_id}/toggle")
async def toggle_subtopic_completion(
    course_id: str,
    email: str,
    subtopic_id: str,
    store: Store,
) -> dict[str, Any]:
    return envelope(await store.toggle_subtopic_completion(course_id, email, subtopic_id))


@router.put("/{course_id}/learners/{email}/grades/{assessment_id}")
async def set_assessment_grade(
    course_id: str,
    email: str,
    assessment_id: str,
    request: GradeRequest,
    store: Store,
) -> dict[str, Any]:
    return envelope(
        await store.set_assessment_grade(course_id, email, assessment_id, request.status)
    )


@router.put("/{course_id}/learners/{email}/grades")
async def set_all_assessment_grades(
    course_id: str,
    email: str,
    request: GradeRequest,
    store: Store,
) -> dict[str, Any]:
    return envelope(await store.set_all_assessment_grades(course_id, email, request.status))


@router.patch("/{course_id}/assessments/{assessment_id}")
async def set_assessment_state(
    course_id: str,
    assessment_id: str,
    request: AssessmentStateRequest,
    store: Store,
) -> dict[str, Any]:
    return envelope(
        await store.set_assessment_state(
            course_id, assessment_id, request.status, request.access_code
        )
    )


@router.put("/{course_id}/learners/{email}/submissions/{assessment_id}")
async def record_submission(
    course_id: str,
    email: str,
    assessment_id: str,
    request: SubmissionRequest,
    store: Store,
) -> dict[str, Any]:
    return envelope(
        await store.record_submission(course_id, email, assessment_id, request.file_name)
    )


@router.put("/{course_id}/learners/{email}")
async def replace_learner_detail(
    course_id: str,
    email: str,
    learner: LearnerProgress,
    store: Store,
) -> dict[str, Any]:
    return envelope(await store.replace_learner_detail(course_id, email, learner))

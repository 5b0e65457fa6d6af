# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Nested-entity resolution over whole Course documents.

Every function here takes a Course, works on a deep copy, and returns the
updated copy. Inputs are never mutated, so a caller holding a cached
document can build a replacement without touching the cache.

Lookups raise NotFoundError when the learner (by email) or assessment
(by id) is absent from the course. These helpers back the file store's
nested mutators and the sync core's client-side roster edits.
"""

import math
from datetime import datetime

from tms_sync.infrastructure.store.exceptions import NotFoundError
from tms_sync.models import (
    Assessment,
    AssessmentGrade,
    AssessmentStatus,
    Course,
    GradeStatus,
    LearnerProgress,
    Submission,
)
from tms_sync.utils.datetime import format_iso, utc_now


def _index_of_learner(course: Course, email: str) -> int:
    for index, entry in enumerate(course.learners):
        if entry.email == email:
            return index
    raise NotFoundError.learner(course.id, email)


def find_learner(course: Course, email: str) -> LearnerProgress:
    """Return the roster entry for ``email``.

    Raises:
        NotFoundError: If the learner is not on the course roster.
    """
    return course.learners[_index_of_learner(course, email)]


def find_assessment(course: Course, assessment_id: str) -> Assessment:
    """Return the assessment definition with ``assessment_id``.

    Raises:
        NotFoundError: If the course defines no such assessment.
    """
    for assessment in course.assessments:
        if assessment.id == assessment_id:
            return assessment
    raise NotFoundError.assessment(course.id, assessment_id)


def toggle_membership(values: list[str], value: str) -> list[str]:
    """Remove ``value`` if present, otherwise append it. Order is kept."""
    if value in values:
        return [item for item in values if item != value]
    return [*values, value]


def count_subtopics(course: Course) -> int:
    return sum(len(topic.subtopics) for topic in course.topics)


def compute_progress(completed: int, total: int) -> int:
    """Progress percentage for ``completed`` of ``total`` subtopics.

    A course without subtopics counts as fully complete. Halves round up,
    matching the arithmetic the persisted documents were written with.
    """
    if total <= 0:
        return 100
    return math.floor(completed / total * 100 + 0.5)


def toggle_bookmark(course: Course, subtopic_id: str) -> Course:
    updated = course.model_copy(deep=True)
    updated.bookmarked_subtopics = toggle_membership(updated.bookmarked_subtopics, subtopic_id)
    return updated


def toggle_subtopic_completion(course: Course, email: str, subtopic_id: str) -> Course:
    """Flip one learner's completion of a subtopic and recompute progress."""
    updated = course.model_copy(deep=True)
    learner = find_learner(updated, email)
    learner.completed_subtopics = toggle_membership(learner.completed_subtopics, subtopic_id)
    learner.progress_percent = compute_progress(
        len(learner.completed_subtopics), count_subtopics(updated)
    )
    return updated


def set_learner_grade(
    course: Course,
    email: str,
    assessment_id: str,
    status: GradeStatus,
) -> Course:
    """Upsert one grade, keeping at most one grade per assessment id."""
    updated = course.model_copy(deep=True)
    learner = find_learner(updated, email)
    find_assessment(updated, assessment_id)

    grades: list[AssessmentGrade] = []
    found = False
    for grade in learner.assessment_grades:
        if grade.assessment_id != assessment_id:
            grades.append(grade)
        elif not found:
            grade.status = status
            grades.append(grade)
            found = True
    if not found:
        grades.append(AssessmentGrade(assessment_id=assessment_id, status=status))

    learner.assessment_grades = grades
    return updated


def set_all_learner_grades(course: Course, email: str, status: GradeStatus) -> Course:
    """Overwrite every grade of one learner with the same status.

    Assessments defined on the course that the learner has no grade for
    receive one, so the aggregate status reflects the edit. Older clients
    only overwrote the grades already recorded and left ungraded
    assessments without a grade.
    """
    updated = course.model_copy(deep=True)
    learner = find_learner(updated, email)

    seen: set[str] = set()
    grades: list[AssessmentGrade] = []
    for grade in learner.assessment_grades:
        if grade.assessment_id in seen:
            continue
        seen.add(grade.assessment_id)
        grade.status = status
        grades.append(grade)
    for assessment in updated.assessments:
        if assessment.id not in seen:
            seen.add(assessment.id)
            grades.append(AssessmentGrade(assessment_id=assessment.id, status=status))

    learner.assessment_grades = grades
    return updated


def set_assessment_state(
    course: Course,
    assessment_id: str,
    status: AssessmentStatus,
    access_code: str | None = None,
) -> Course:
    """Publish or unpublish an assessment; a blank code keeps the old one."""
    updated = course.model_copy(deep=True)
    assessment = find_assessment(updated, assessment_id)
    assessment.status = status
    if access_code:
        assessment.access_code = access_code
    return updated


def record_submission(
    course: Course,
    email: str,
    assessment_id: str,
    file_name: str,
    submitted_at: datetime | None = None,
) -> Course:
    """Record a submission, replacing any earlier one for the same pair."""
    updated = course.model_copy(deep=True)
    learner = find_learner(updated, email)
    find_assessment(updated, assessment_id)

    submission = Submission(
        assessment_id=assessment_id,
        file_name=file_name,
        submitted_at=format_iso(submitted_at or utc_now()),
    )
    learner.submissions = [
        existing for existing in learner.submissions if existing.assessment_id != assessment_id
    ]
    learner.submissions.append(submission)
    return updated


def replace_learner(course: Course, email: str, record: LearnerProgress) -> Course:
    """Swap the roster entry keyed by ``email`` for ``record``."""
    updated = course.model_copy(deep=True)
    index = _index_of_learner(updated, email)
    updated.learners[index] = record.model_copy(deep=True)
    return updated


def add_roster_entry(course: Course, record: LearnerProgress) -> Course:
    """Append a copy of ``record`` unless its email is already enrolled."""
    updated = course.model_copy(deep=True)
    if updated.learner(record.email) is None:
        updated.learners.append(record.model_copy(deep=True))
    return updated


def remove_roster_entry(course: Course, email: str) -> Course:
    updated = course.model_copy(deep=True)
    updated.learners = [entry for entry in updated.learners if entry.email != email]
    return updated

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Collapse a learner's per-assessment grades into one overall status.

This is the single rule every view uses; earlier screens carried two
slightly different orderings of it.
"""

from collections.abc import Iterable

from tms_sync.models import AssessmentGrade, GradeStatus, LearnerProgress


def aggregate_status(grades: Iterable[AssessmentGrade]) -> GradeStatus:
    """Derive the overall competency status.

    Rules, in order:
        1. No grades -> Pending.
        2. Any NYC -> NYC.
        3. Every grade C -> C.
        4. Otherwise -> Pending.
    """
    statuses = [grade.status for grade in grades]
    if not statuses:
        return GradeStatus.PENDING
    if GradeStatus.NOT_YET_COMPETENT in statuses:
        return GradeStatus.NOT_YET_COMPETENT
    if all(status == GradeStatus.COMPETENT for status in statuses):
        return GradeStatus.COMPETENT
    return GradeStatus.PENDING


def learner_overall_status(learner: LearnerProgress) -> GradeStatus:
    return aggregate_status(learner.assessment_grades)

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Learner enrollment models.

A LearnerProgress is one learner's state inside one course roster. The
global learner registry holds the same shape; enrolling copies a registry
record into a roster, it never shares it.
"""

from pydantic import Field

from tms_sync.models.common import (
    CourseSponsorship,
    DocumentModel,
    EmploymentStatus,
    Ethnicity,
    Gender,
    GradeStatus,
    Nationality,
    PaymentMode,
    PaymentStatus,
    TpgStatus,
)


class AssessmentGrade(DocumentModel):
    """Result of one learner on one assessment definition."""

    assessment_id: str
    status: GradeStatus = GradeStatus.PENDING


class Submission(DocumentModel):
    """Uploaded artifact for one (learner, assessment) pair."""

    assessment_id: str
    file_name: str
    submitted_at: str


class LearnerFees(DocumentModel):
    """Fee breakdown recorded against an enrollment."""

    total_course_fee: float = 0.0
    grant_amount: float = 0.0
    discount: float = 0.0
    skills_future_credit_claim: float = 0.0
    cash_payment: float = 0.0
    invoice_number: str = ""
    receipt_number: str = ""


class LearnerProgress(DocumentModel):
    """A learner's enrollment record within one course.

    Attributes:
        email: Roster key; unique within a course roster.
        progress_percent: Server-computed completion percentage.
        completed_subtopics: Subtopic ids the learner has completed.
        assessment_grades: At most one grade per assessment id.
        submissions: At most one submission per assessment id.
        grant_status: Funding grant state for this enrollment.
        claim_status: Funding claim state for this enrollment.
    """

    name: str
    email: str
    tel: str = ""
    company: str = ""
    progress_percent: int = 0
    quiz_score: float | None = None
    payment_status: PaymentStatus = PaymentStatus.PENDING
    assessment_grades: list[AssessmentGrade] = Field(default_factory=list)
    submissions: list[Submission] = Field(default_factory=list)
    grant_id: str | None = None
    grant_status: TpgStatus = TpgStatus.NA
    claim_id: str | None = None
    claim_status: TpgStatus = TpgStatus.NA
    gender: Gender | None = None
    dob: str | None = None
    course_sponsorship: CourseSponsorship = CourseSponsorship.NA
    ethnicity: Ethnicity | None = None
    completed_subtopics: list[str] = Field(default_factory=list)
    trainee_id: str | None = None
    enrolment_date: str | None = None
    sponsorship_type: str | None = None
    fees: LearnerFees | None = None
    employment_status: EmploymentStatus | None = None
    nationality: Nationality | None = None
    payment_mode: PaymentMode | None = None

    def grade_for(self, assessment_id: str) -> AssessmentGrade | None:
        """Return this learner's grade for an assessment, if any."""
        for grade in self.assessment_grades:
            if grade.assessment_id == assessment_id:
                return grade
        return None

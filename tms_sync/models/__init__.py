# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pydantic data model for courses, rosters and flat collections."""

from tms_sync.models.catalog import CalendarEvent, GrantApplication, JobPosting
from tms_sync.models.common import (
    AgeGroup,
    AssessmentCategory,
    AssessmentStatus,
    ClassStatus,
    CourseSponsorship,
    CourseStatus,
    CourseType,
    DocumentModel,
    EmploymentStatus,
    EnrollmentStatus,
    Ethnicity,
    Gender,
    GradeStatus,
    GrantStatus,
    ModeOfLearning,
    Nationality,
    PaymentMode,
    PaymentStatus,
    TpgStatus,
    UserRole,
)
from tms_sync.models.course import Assessment, Course, Quiz, QuizQuestion, Subtopic, Topic
from tms_sync.models.learner import AssessmentGrade, LearnerFees, LearnerProgress, Submission

__all__ = [
    # Base
    "DocumentModel",
    # Enums
    "AgeGroup",
    "AssessmentCategory",
    "AssessmentStatus",
    "ClassStatus",
    "CourseSponsorship",
    "CourseStatus",
    "CourseType",
    "EmploymentStatus",
    "EnrollmentStatus",
    "Ethnicity",
    "Gender",
    "GradeStatus",
    "GrantStatus",
    "ModeOfLearning",
    "Nationality",
    "PaymentMode",
    "PaymentStatus",
    "TpgStatus",
    "UserRole",
    # Course document
    "Course",
    "Topic",
    "Subtopic",
    "Assessment",
    "Quiz",
    "QuizQuestion",
    # Roster
    "LearnerProgress",
    "AssessmentGrade",
    "Submission",
    "LearnerFees",
    # Flat collections
    "CalendarEvent",
    "GrantApplication",
    "JobPosting",
]

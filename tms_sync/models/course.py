# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course document models.

A Course is a deep nested document: it exclusively owns its topic
outline, assessment definitions and learner roster. The remote store
always hands back the whole document, never a partial patch.
"""

from pydantic import Field

from tms_sync.models.common import (
    AssessmentCategory,
    AssessmentStatus,
    ClassStatus,
    CourseStatus,
    CourseType,
    DocumentModel,
    EnrollmentStatus,
    ModeOfLearning,
    PaymentStatus,
)
from tms_sync.models.learner import LearnerProgress


class Subtopic(DocumentModel):
    """Unit of authored content and of completion/bookmark tracking."""

    id: str
    title: str
    content: str = ""
    image_url: str | None = None
    video_url: str | None = None


class Topic(DocumentModel):
    id: str
    title: str
    subtopics: list[Subtopic] = Field(default_factory=list)


class Assessment(DocumentModel):
    """Gradeable unit definition owned by a course."""

    id: str
    title: str
    category: AssessmentCategory = AssessmentCategory.WRITTEN_EXAM
    status: AssessmentStatus = AssessmentStatus.DRAFT
    access_code: str | None = None
    questions: str | None = None
    file_url: str | None = None


class QuizQuestion(DocumentModel):
    question: str
    options: list[str] = Field(default_factory=list)
    correct_answer: str


class Quiz(DocumentModel):
    topic: str
    questions: list[QuizQuestion] = Field(default_factory=list)


class Course(DocumentModel):
    """A class offering with its outline, assessments and roster.

    Attributes:
        id: Store-assigned identity; empty for unsaved drafts.
        training_hours: Contact hours of instruction.
        assessment_hours: Hours set aside for assessment.
        learners: Ordered roster of enrollment records keyed by email.
        bookmarked_subtopics: Subtopic ids bookmarked by the viewer.
    """

    id: str = ""
    title: str = ""
    image_url: str | None = None
    course_code: str = ""
    tsc_title: str = ""
    tsc_code: str = ""
    tsc_knowledge: str = ""
    tsc_abilities: str = ""
    course_run_id: str = ""
    da_id: str | None = None
    learning_outcomes: str = ""
    trainer: str = ""
    training_hours: float = 0
    assessment_hours: float = 0
    difficulty: str = ""
    mode_of_learning: list[ModeOfLearning] = Field(default_factory=list)
    course_type: CourseType = CourseType.NON_WSQ
    enrollment_status: EnrollmentStatus = EnrollmentStatus.NOT_ENROLLED
    topics: list[Topic] = Field(default_factory=list)
    learners: list[LearnerProgress] = Field(default_factory=list)
    quiz: Quiz | None = None
    status: CourseStatus = CourseStatus.DRAFT
    course_fee: float = 0.0
    tax_percent: float = 0.0
    is_wsq_funded: bool = False
    is_skills_future_eligible: bool = False
    is_psea_eligible: bool = False
    is_mces_eligible: bool = False
    is_ibf_funded: bool = False
    is_utap_eligible: bool = False
    bookmarked_subtopics: list[str] = Field(default_factory=list)
    assessments: list[Assessment] = Field(default_factory=list)
    start_date: str = ""
    end_date: str = ""
    class_status: ClassStatus = ClassStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    learner_guide_url: str | None = None
    slides_url: str | None = None
    lesson_plan_url: str | None = None
    assessment_plan_url: str | None = None
    facilitator_guide_url: str | None = None
    trainer_slides_url: str | None = None
    is_leaderboard_enabled: bool | None = None
    certificate_url: str | None = None

    @property
    def total_hours(self) -> float:
        """Total duration shown wherever a course length is displayed."""
        return self.training_hours + self.assessment_hours

    @property
    def total_subtopics(self) -> int:
        return sum(len(topic.subtopics) for topic in self.topics)

    def learner(self, email: str) -> LearnerProgress | None:
        """Return the roster entry for an email, if enrolled."""
        for entry in self.learners:
            if entry.email == email:
                return entry
        return None

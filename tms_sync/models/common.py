# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared model base and enumerations.

Documents are exchanged with the remote store in camelCase, exactly as
the browser client persisted them. Python code uses snake_case attribute
names; the alias generator bridges the two.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Base for every persisted document and nested value.

    Unknown keys are kept so that replacing a whole document never drops
    fields written by another client version.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        use_enum_values=False,
    )

    def to_document(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON-compatible wire form."""
        return self.model_dump(mode="json", by_alias=True)


class UserRole(str, Enum):
    """Viewer role; used by views for display and authorization only."""

    LEARNER = "Learner"
    TRAINER = "Trainer"
    ADMIN = "Admin"
    DEVELOPER = "Developer"
    TRAINING_PROVIDER = "Training Provider"


class GradeStatus(str, Enum):
    """Competency result of one learner on one assessment."""

    COMPETENT = "C"
    NOT_YET_COMPETENT = "NYC"
    PENDING = "Pending"


class TpgStatus(str, Enum):
    """Funding-agency grant/claim processing state."""

    SUCCESS = "Success"
    PENDING = "Pending"
    PROCESSING = "Processing"
    FAILED = "Failed"
    NA = "N/A"


class CourseStatus(str, Enum):
    DRAFT = "Draft"
    PUBLISHED = "Published"


class AssessmentStatus(str, Enum):
    DRAFT = "Draft"
    PUBLISHED = "Published"


class ClassStatus(str, Enum):
    CONFIRMED = "Confirmed"
    PENDING = "Pending"
    CANCELLED = "Cancelled"
    RESCHEDULE = "Reschedule"


class EnrollmentStatus(str, Enum):
    ENROLLED = "enrolled"
    NOT_ENROLLED = "not-enrolled"


class PaymentStatus(str, Enum):
    PAID = "Paid"
    UNPAID = "Unpaid"
    PENDING = "Pending"
    OVERDUE = "Overdue"
    FAILED = "Failed"
    PROCESSING = "Processing"
    FULL_PAYMENT = "Full Payment"


class PaymentMode(str, Enum):
    CASH = "Cash"
    SKILLS_FUTURE_CREDIT = "SkillsFuture Credit"
    COMPANY_SPONSORSHIP = "Company Sponsorship"


class GrantStatus(str, Enum):
    """Review state of a grant application."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class ModeOfLearning(str, Enum):
    PHYSICAL = "Physical"
    VIRTUAL = "Virtual"
    HYBRID = "Hybrid"


class CourseType(str, Enum):
    WSQ = "WSQ"
    IBF = "IBF"
    NON_WSQ = "non-WSQ"


class AssessmentCategory(str, Enum):
    WRITTEN_EXAM = "Written Exam"
    ONLINE_EXAM = "Online Exam"
    PROJECT = "Project"
    ASSIGNMENTS = "Assignments"
    ORAL_INTERVIEW = "Oral Interview"
    DEMONSTRATION = "Demonstration"
    PRACTICAL_EXAM = "Practical Exam"
    ROLE_PLAY = "Role Play"
    ORAL_QUESTIONING = "Oral Questioning"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Prefer not to say"


class Ethnicity(str, Enum):
    CHINESE = "Chinese"
    MALAY = "Malay"
    INDIAN = "Indian"
    OTHERS = "Others"


class Nationality(str, Enum):
    SINGAPOREAN = "Singaporean"
    SINGAPORE_PR = "Singapore PR"
    NON_CITIZEN = "Non Citizen"


class EmploymentStatus(str, Enum):
    EMPLOYED = "Employed"
    UNEMPLOYED = "Unemployed"
    LOOKING_FOR_JOB = "Looking for Job"


class CourseSponsorship(str, Enum):
    SELF_SPONSORED = "Self-Sponsored"
    EMPLOYER_SPONSORED = "Employer-Sponsored"
    NA = "N/A"


class AgeGroup(str, Enum):
    """Analytics age buckets."""

    BELOW_20 = "Below 20"
    AGE_20_25 = "20-25"
    AGE_26_30 = "26-30"
    AGE_31_35 = "31-35"
    AGE_36_40 = "36-40"
    AGE_41_45 = "41-45"
    AGE_46_50 = "46-50"
    AGE_51_55 = "51-55"
    AGE_56_60 = "56-60"
    AGE_61_65 = "61-65"
    AGE_66_70 = "66-70"
    ABOVE_70 = "Above 70"

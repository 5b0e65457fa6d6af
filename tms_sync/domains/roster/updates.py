# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Typed learner field updates.

Admin edit forms change a handful of fields of one roster entry at a
time. Each group of related fields has its own update type; an update
only touches the fields that were explicitly set on it, so an explicit
``None`` clears an optional field while an omitted one keeps it. The
result is validated as a whole record; clearing a required field such
as the name is rejected.

The email is the roster key and cannot be changed through an update.

Example:
    updated = apply_learner_updates(
        learner,
        PaymentUpdate(payment_status=PaymentStatus.PAID),
        GrantUpdate(grant_id="G-1", grant_status=TpgStatus.SUCCESS),
    )
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from tms_sync.models import (
    CourseSponsorship,
    EmploymentStatus,
    Ethnicity,
    Gender,
    LearnerFees,
    LearnerProgress,
    Nationality,
    PaymentMode,
    PaymentStatus,
    TpgStatus,
)


def _revalidate(learner: LearnerProgress, changes: dict[str, Any]) -> LearnerProgress:
    """Build the updated record through full validation.

    Raises:
        ValidationError: If a change leaves a required field empty or mistyped.
    """
    return LearnerProgress.model_validate({**learner.model_dump(), **changes})


class _LearnerUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict[str, Any]:
        """Fields explicitly set on this update, excluding the tag."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name != "kind"
        }

    def apply(self, learner: LearnerProgress) -> LearnerProgress:
        return _revalidate(learner, self.changes())


class ContactDetailsUpdate(_LearnerUpdate):
    kind: Literal["contact"] = "contact"
    name: str | None = None
    tel: str | None = None
    company: str | None = None


class PaymentUpdate(_LearnerUpdate):
    kind: Literal["payment"] = "payment"
    payment_status: PaymentStatus | None = None
    payment_mode: PaymentMode | None = None


class GrantUpdate(_LearnerUpdate):
    """Funding-agency grant reference and processing state."""

    kind: Literal["grant"] = "grant"
    grant_id: str | None = None
    grant_status: TpgStatus | None = None


class ClaimUpdate(_LearnerUpdate):
    """Funding-agency claim reference and processing state."""

    kind: Literal["claim"] = "claim"
    claim_id: str | None = None
    claim_status: TpgStatus | None = None


class FeesUpdate(_LearnerUpdate):
    """Edit of the fee breakdown; merged into the existing breakdown."""

    kind: Literal["fees"] = "fees"
    total_course_fee: float | None = None
    grant_amount: float | None = None
    discount: float | None = None
    skills_future_credit_claim: float | None = None
    cash_payment: float | None = None
    invoice_number: str | None = None
    receipt_number: str | None = None

    def apply(self, learner: LearnerProgress) -> LearnerProgress:
        fees = learner.fees or LearnerFees()
        changes = {name: value for name, value in self.changes().items() if value is not None}
        merged = fees.model_copy(update=changes)
        return _revalidate(learner, {"fees": merged})


class DemographicsUpdate(_LearnerUpdate):
    kind: Literal["demographics"] = "demographics"
    gender: Gender | None = None
    dob: str | None = None
    ethnicity: Ethnicity | None = None
    nationality: Nationality | None = None
    employment_status: EmploymentStatus | None = None
    course_sponsorship: CourseSponsorship | None = None
    trainee_id: str | None = None


LearnerUpdate = Annotated[
    Union[
        ContactDetailsUpdate,
        PaymentUpdate,
        GrantUpdate,
        ClaimUpdate,
        FeesUpdate,
        DemographicsUpdate,
    ],
    Field(discriminator="kind"),
]


def apply_learner_updates(learner: LearnerProgress, *updates: LearnerUpdate) -> LearnerProgress:
    """Apply updates in order and return a new record.

    The input record is never modified.

    Raises:
        ValidationError: If an update clears a required field, such as
            setting the name to None.
    """
    updated = learner.model_copy(deep=True)
    for update in updates:
        updated = update.apply(updated)
    return updated

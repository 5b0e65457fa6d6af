# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course fee and funding calculator.

Computes what a learner pays for a course after GST, the SSG course-fee
grant and any capped claims against other funding schemes.

Funding is applied in a fixed order, each claim capped at what is still
outstanding after the ones before it:

1. SSG grant on the fee before GST (WSQ-funded courses only).
   50% standard, 70% for mid-career Singaporeans aged 40+ or SME staff.
2. SkillsFuture Credit.
3. PSEA.
4. UTAP.
5. IBF.

Every money figure is rounded half-up to cents.
"""

import math
from datetime import date

from pydantic import BaseModel, Field

from tms_sync.models import Course, LearnerProgress
from tms_sync.utils.datetime import age_on, parse_date, utc_today

GST_RATE = 0.09
SSG_STANDARD_RATE = 0.50
SSG_ENHANCED_RATE = 0.70
MCES_MIN_AGE = 40

_CITIZEN_NATIONALITIES = {"singaporean", "singapore citizen"}


class FundingInputs(BaseModel):
    """Amounts the learner asks to claim from each scheme."""

    discount: float = 0.0
    skills_future_credit: float = 0.0
    psea_claim: float = 0.0
    utap_claim: float = 0.0
    ibf_claim: float = 0.0


class FundingBreakdown(BaseModel):
    grant_amount: float = 0.0
    skills_future_credit: float = 0.0
    psea_claim: float = 0.0
    mces_claim: float = 0.0
    utap_claim: float = 0.0
    ibf_claim: float = 0.0

    @property
    def total(self) -> float:
        return (
            self.grant_amount
            + self.skills_future_credit
            + self.psea_claim
            + self.mces_claim
            + self.utap_claim
            + self.ibf_claim
        )


class FeeCalculationResult(BaseModel):
    gross_course_fee: float
    discount: float
    subtotal_before_gst: float
    gst_amount: float
    total_with_gst: float
    funding_breakdown: FundingBreakdown = Field(default_factory=FundingBreakdown)
    net_payable: float


def round_cents(amount: float) -> float:
    """Round half-up to two decimal places."""
    return math.floor(amount * 100 + 0.5) / 100


def is_mces_eligible(learner: LearnerProgress, today: date | None = None) -> bool:
    """Mid-Career Enhanced Subsidy: Singapore citizens aged 40 and above."""
    birth_date = parse_date(learner.dob)
    if birth_date is None or learner.nationality is None:
        return False
    if learner.nationality.value.lower() not in _CITIZEN_NATIONALITIES:
        return False
    return age_on(birth_date, today or utc_today()) >= MCES_MIN_AGE


def calculate_fees(
    course: Course,
    learner: LearnerProgress,
    funding_inputs: FundingInputs | None = None,
    is_sme_employer: bool = False,
    today: date | None = None,
) -> FeeCalculationResult:
    """Compute the fee breakdown for one learner on one course.

    Args:
        course: Course carrying the fee, tax rate and scheme eligibility flags.
        learner: Enrollment record supplying date of birth and nationality.
        funding_inputs: Requested discount and scheme claims.
        is_sme_employer: Whether the learner's employer is an SME.
        today: Reference date for the age check.

    Returns:
        Rounded fee breakdown; ``net_payable`` is never negative.
    """
    inputs = funding_inputs or FundingInputs()

    gross_course_fee = course.course_fee
    subtotal = gross_course_fee - inputs.discount
    gst_rate = course.tax_percent / 100 or GST_RATE
    gst_amount = subtotal * gst_rate
    total_with_gst = subtotal + gst_amount

    funding = FundingBreakdown()

    if course.is_wsq_funded:
        enhanced = is_mces_eligible(learner, today) or is_sme_employer
        rate = SSG_ENHANCED_RATE if enhanced else SSG_STANDARD_RATE
        funding.grant_amount = subtotal * rate
        # The MCES top-up is already part of the enhanced rate.
        funding.mces_claim = 0.0

    if course.is_skills_future_eligible and inputs.skills_future_credit:
        funding.skills_future_credit = min(
            inputs.skills_future_credit,
            total_with_gst - funding.grant_amount,
        )

    if course.is_psea_eligible and inputs.psea_claim:
        funding.psea_claim = min(
            inputs.psea_claim,
            total_with_gst - funding.grant_amount - funding.skills_future_credit,
        )

    if course.is_utap_eligible and inputs.utap_claim:
        funding.utap_claim = min(
            inputs.utap_claim,
            total_with_gst
            - funding.grant_amount
            - funding.skills_future_credit
            - funding.psea_claim,
        )

    if course.is_ibf_funded and inputs.ibf_claim:
        funding.ibf_claim = min(
            inputs.ibf_claim,
            total_with_gst
            - funding.grant_amount
            - funding.skills_future_credit
            - funding.psea_claim
            - funding.utap_claim,
        )

    net_payable = max(0.0, total_with_gst - funding.total)

    return FeeCalculationResult(
        gross_course_fee=round_cents(gross_course_fee),
        discount=round_cents(inputs.discount),
        subtotal_before_gst=round_cents(subtotal),
        gst_amount=round_cents(gst_amount),
        total_with_gst=round_cents(total_with_gst),
        funding_breakdown=FundingBreakdown(
            **{name: round_cents(value) for name, value in funding.model_dump().items()}
        ),
        net_payable=round_cents(net_payable),
    )

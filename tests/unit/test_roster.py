# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for typed learner updates and demographics."""

from datetime import date

import pytest
from pydantic import TypeAdapter, ValidationError

from tms_sync.domains.roster import (
    ClaimUpdate,
    ContactDetailsUpdate,
    DemographicsUpdate,
    FeesUpdate,
    GrantUpdate,
    LearnerUpdate,
    PaymentUpdate,
    age_group_counts,
    apply_learner_updates,
    calculate_age_group,
)
from tms_sync.models import (
    AgeGroup,
    LearnerFees,
    LearnerProgress,
    Nationality,
    PaymentMode,
    PaymentStatus,
    TpgStatus,
)


class TestApplyLearnerUpdates:
    """Tests for apply_learner_updates."""

    def test_only_set_fields_change(self, alice: LearnerProgress) -> None:
        """Test that omitted fields are kept."""
        updated = apply_learner_updates(alice, ContactDetailsUpdate(tel="80001111"))

        assert updated.tel == "80001111"
        assert updated.name == "Alice Tan"
        assert updated.company == "Acme Pte Ltd"

    def test_input_is_not_mutated(self, alice: LearnerProgress) -> None:
        """Test that a new record is returned."""
        updated = apply_learner_updates(alice, PaymentUpdate(payment_status=PaymentStatus.PAID))

        assert updated is not alice
        assert alice.payment_status == PaymentStatus.PENDING

    def test_updates_apply_in_order(self, alice: LearnerProgress) -> None:
        """Test several updates in one call, later ones winning."""
        updated = apply_learner_updates(
            alice,
            PaymentUpdate(payment_status=PaymentStatus.UNPAID, payment_mode=PaymentMode.CASH),
            GrantUpdate(grant_id="G-1", grant_status=TpgStatus.SUCCESS),
            ClaimUpdate(claim_status=TpgStatus.PROCESSING),
            PaymentUpdate(payment_status=PaymentStatus.PAID),
        )

        assert updated.payment_status == PaymentStatus.PAID
        assert updated.payment_mode == PaymentMode.CASH
        assert updated.grant_id == "G-1"
        assert updated.grant_status == TpgStatus.SUCCESS
        assert updated.claim_status == TpgStatus.PROCESSING
        assert updated.claim_id is None

    def test_explicit_none_clears(self, alice: LearnerProgress) -> None:
        """Test that an explicitly set None clears a field."""
        granted = apply_learner_updates(alice, GrantUpdate(grant_id="G-1"))

        cleared = apply_learner_updates(granted, GrantUpdate(grant_id=None))

        assert cleared.grant_id is None

    def test_required_field_cannot_be_cleared(self, alice: LearnerProgress) -> None:
        """Test that clearing the name is rejected instead of producing an invalid record."""
        with pytest.raises(ValidationError):
            apply_learner_updates(alice, ContactDetailsUpdate(name=None))

        assert alice.name == "Alice Tan"

    def test_fees_merge_into_existing(self, alice: LearnerProgress) -> None:
        """Test that a fee edit keeps the other fee fields."""
        learner = alice.model_copy(
            update={"fees": LearnerFees(total_course_fee=1308.0, invoice_number="INV-1")}
        )

        updated = apply_learner_updates(learner, FeesUpdate(cash_payment=654.0))

        assert updated.fees is not None
        assert updated.fees.total_course_fee == 1308.0
        assert updated.fees.invoice_number == "INV-1"
        assert updated.fees.cash_payment == 654.0

    def test_fees_created_when_missing(self, alice: LearnerProgress) -> None:
        """Test that a fee edit on a learner without fees creates a breakdown."""
        updated = apply_learner_updates(alice, FeesUpdate(grant_amount=600.0))

        assert updated.fees == LearnerFees(grant_amount=600.0)

    def test_demographics(self, alice: LearnerProgress) -> None:
        """Test demographic field updates."""
        updated = apply_learner_updates(
            alice,
            DemographicsUpdate(nationality=Nationality.SINGAPORE_PR, trainee_id="S1234567A"),
        )

        assert updated.nationality == Nationality.SINGAPORE_PR
        assert updated.trainee_id == "S1234567A"

    def test_email_cannot_be_updated(self) -> None:
        """Test that the roster key is not an updatable field."""
        with pytest.raises(ValidationError):
            ContactDetailsUpdate(email="other@example.com")  # type: ignore[call-arg]

    def test_tagged_union_parsing(self) -> None:
        """Test that a raw update is parsed by its kind tag."""
        adapter = TypeAdapter(LearnerUpdate)

        update = adapter.validate_python({"kind": "claim", "claim_id": "CL-9"})

        assert isinstance(update, ClaimUpdate)
        assert update.claim_id == "CL-9"


class TestCalculateAgeGroup:
    """Tests for calculate_age_group."""

    TODAY = date(2025, 6, 15)

    @pytest.mark.parametrize(
        ("dob", "expected"),
        [
            ("2010-01-01", AgeGroup.BELOW_20),
            ("2005-06-16", AgeGroup.BELOW_20),
            ("2005-06-15", AgeGroup.AGE_20_25),
            ("1999-06-15", AgeGroup.AGE_26_30),
            ("1985-03-14", AgeGroup.AGE_36_40),
            ("1984-06-15", AgeGroup.AGE_41_45),
            ("1955-06-15", AgeGroup.AGE_66_70),
            ("1954-06-14", AgeGroup.ABOVE_70),
        ],
    )
    def test_brackets(self, dob: str, expected: AgeGroup) -> None:
        """Test bracket boundaries, counting birthdays exactly."""
        assert calculate_age_group(dob, self.TODAY) == expected

    @pytest.mark.parametrize("dob", [None, ""])
    def test_missing_dob(self, dob: str | None) -> None:
        """Test that a missing date of birth falls back to Below 20."""
        assert calculate_age_group(dob, self.TODAY) == AgeGroup.BELOW_20

    def test_accepts_date(self) -> None:
        """Test that a date object is accepted."""
        assert calculate_age_group(date(1990, 1, 1), self.TODAY) == AgeGroup.AGE_31_35

    def test_age_group_counts(self, alice: LearnerProgress) -> None:
        """Test counting learners per age group."""
        young = LearnerProgress(name="Young", email="y@example.com", dob="2008-01-01")

        counts = age_group_counts([alice, young, young], self.TODAY)

        assert counts == {AgeGroup.BELOW_20: 2, AgeGroup.AGE_36_40: 1}

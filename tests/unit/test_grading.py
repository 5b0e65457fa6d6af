# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for aggregate grade derivation."""

from tms_sync.domains.course import aggregate_status, learner_overall_status
from tms_sync.models import AssessmentGrade, GradeStatus, LearnerProgress


def _grades(*pairs: tuple[str, str]) -> list[AssessmentGrade]:
    return [AssessmentGrade(assessment_id=aid, status=status) for aid, status in pairs]


class TestAggregateStatus:
    """Tests for the canonical aggregate rule."""

    def test_empty_is_pending(self) -> None:
        """Test that no grades aggregate to Pending."""
        assert aggregate_status([]) == GradeStatus.PENDING

    def test_all_competent(self) -> None:
        """Test that all-C grades aggregate to Competent."""
        assert aggregate_status(_grades(("a1", "C"), ("a2", "C"))) == GradeStatus.COMPETENT

    def test_any_nyc_wins(self) -> None:
        """Test that a single NYC overrides everything else."""
        grades = _grades(("a1", "C"), ("a2", "Pending"), ("a3", "NYC"))

        assert aggregate_status(grades) == GradeStatus.NOT_YET_COMPETENT

    def test_pending_blocks_competent(self) -> None:
        """Test that a mix of C and Pending stays Pending."""
        assert aggregate_status(_grades(("a1", "C"), ("a2", "Pending"))) == GradeStatus.PENDING

    def test_grade_lifecycle_scenario(self) -> None:
        """Test C,C then adding NYC then clearing all grades."""
        learner = LearnerProgress(
            name="Alice Tan",
            email="alice@example.com",
            assessment_grades=_grades(("a1", "C"), ("a2", "C")),
        )
        assert learner_overall_status(learner) == GradeStatus.COMPETENT

        learner.assessment_grades.append(
            AssessmentGrade(assessment_id="a3", status=GradeStatus.NOT_YET_COMPETENT)
        )
        assert learner_overall_status(learner) == GradeStatus.NOT_YET_COMPETENT

        learner.assessment_grades = []
        assert learner_overall_status(learner) == GradeStatus.PENDING

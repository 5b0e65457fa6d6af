# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Demographic helpers for roster analytics."""

from collections import Counter
from collections.abc import Iterable
from datetime import date

from tms_sync.models import AgeGroup, LearnerProgress
from tms_sync.utils.datetime import age_on, parse_date, utc_today

# Upper bound (inclusive) of each bracket above "Below 20".
_AGE_BRACKETS: list[tuple[int, AgeGroup]] = [
    (25, AgeGroup.AGE_20_25),
    (30, AgeGroup.AGE_26_30),
    (35, AgeGroup.AGE_31_35),
    (40, AgeGroup.AGE_36_40),
    (45, AgeGroup.AGE_41_45),
    (50, AgeGroup.AGE_46_50),
    (55, AgeGroup.AGE_51_55),
    (60, AgeGroup.AGE_56_60),
    (65, AgeGroup.AGE_61_65),
    (70, AgeGroup.AGE_66_70),
]


def calculate_age_group(dob: str | date | None, today: date | None = None) -> AgeGroup:
    """Bucket a date of birth into an age group.

    A missing date of birth falls back to ``Below 20``.

    Args:
        dob: Date of birth, as a date or ``YYYY-MM-DD`` string.
        today: Reference date; defaults to the current UTC date.

    Returns:
        The age group the learner falls into on ``today``.
    """
    birth_date = parse_date(dob) if isinstance(dob, str) or dob is None else dob
    if birth_date is None:
        return AgeGroup.BELOW_20

    age = age_on(birth_date, today or utc_today())
    if age < 20:
        return AgeGroup.BELOW_20
    for upper, group in _AGE_BRACKETS:
        if age <= upper:
            return group
    return AgeGroup.ABOVE_70


def age_group_counts(
    learners: Iterable[LearnerProgress],
    today: date | None = None,
) -> dict[AgeGroup, int]:
    """Count learners per age group, in bracket order, omitting empty groups."""
    counts = Counter(calculate_age_group(learner.dob, today) for learner in learners)
    return {group: counts[group] for group in AgeGroup if counts[group]}

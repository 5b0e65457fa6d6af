# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Roster domain: typed learner edits and demographics."""

from tms_sync.domains.roster.demographics import age_group_counts, calculate_age_group
from tms_sync.domains.roster.updates import (
    ClaimUpdate,
    ContactDetailsUpdate,
    DemographicsUpdate,
    FeesUpdate,
    GrantUpdate,
    LearnerUpdate,
    PaymentUpdate,
    apply_learner_updates,
)

__all__ = [
    "ClaimUpdate",
    "ContactDetailsUpdate",
    "DemographicsUpdate",
    "FeesUpdate",
    "GrantUpdate",
    "LearnerUpdate",
    "PaymentUpdate",
    "apply_learner_updates",
    "age_group_counts",
    "calculate_age_group",
]

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course domain: nested-entity resolution and grade aggregation."""

from tms_sync.domains.course.grading import aggregate_status, learner_overall_status
from tms_sync.domains.course.nested import (
    add_roster_entry,
    compute_progress,
    count_subtopics,
    find_assessment,
    find_learner,
    record_submission,
    remove_roster_entry,
    replace_learner,
    set_all_learner_grades,
    set_assessment_state,
    set_learner_grade,
    toggle_bookmark,
    toggle_membership,
    toggle_subtopic_completion,
)

__all__ = [
    "aggregate_status",
    "learner_overall_status",
    "add_roster_entry",
    "compute_progress",
    "count_subtopics",
    "find_assessment",
    "find_learner",
    "record_submission",
    "remove_roster_entry",
    "replace_learner",
    "set_all_learner_grades",
    "set_assessment_state",
    "set_learner_grade",
    "toggle_bookmark",
    "toggle_membership",
    "toggle_subtopic_completion",
]

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Flat, independently owned collections: events, grants, job postings."""

from typing import Literal

from tms_sync.models.common import DocumentModel, GrantStatus


class CalendarEvent(DocumentModel):
    id: int
    title: str
    date: str
    type: Literal["quiz", "assignment", "lecture", "event"] = "event"
    speaker: str | None = None
    event_type: str | None = None


class GrantApplication(DocumentModel):
    """A trainer's application for course funding, reviewed by an admin."""

    id: str
    course_id: str
    course_title: str = ""
    trainer: str = ""
    reason: str = ""
    status: GrantStatus = GrantStatus.PENDING


class JobPosting(DocumentModel):
    id: str
    title: str
    company: str = ""
    location: str = ""
    salary_min: float = 0
    salary_max: float = 0
    area: str = ""
    description: str = ""
    url: str = ""

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Centralized event type definitions.

Every cache change the sync core commits, and every session transition,
is announced under one of these names.
"""


class EventTypes:
    """All event types organized by domain."""

    class Course:
        """Course cache events. Payload: ``course_id``."""

        CREATED = "course.created"
        UPDATED = "course.updated"
        DELETED = "course.deleted"

    class Cache:
        """Whole-cache events."""

        REFRESHED = "cache.refreshed"
        CLEARED = "cache.cleared"

    class Grant:
        """Grant application events. Payload: ``grant_id``, ``status``."""

        STATUS_CHANGED = "grant.status_changed"

    class Registry:
        """Global learner registry events. Payload: ``email``."""

        LEARNER_ADDED = "registry.learner_added"

    class Selection:
        """Selected-course mirror events. Payload: ``course_id`` or None."""

        CHANGED = "selection.changed"

    class Session:
        """Session lifecycle events. Payload: ``role``."""

        LOGGED_IN = "session.logged_in"
        LOGGED_OUT = "session.logged_out"
        ROLE_CHANGED = "session.role_changed"


class EventPatterns:
    """Wildcard patterns for subscribing to multiple events."""

    ALL_COURSE = "course.*"
    ALL_CACHE = "cache.*"
    ALL_SESSION = "session.*"
    ALL = "*"

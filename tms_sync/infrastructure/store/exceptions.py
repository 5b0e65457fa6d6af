# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Custom exceptions for the remote store.

This module defines the exception hierarchy consumed by the sync core:
- StoreError: Base exception for all remote store errors
- NotFoundError: The targeted id, or a nested learner/assessment key, is absent
- UnavailableError: The store or the network failed

The sync core does not distinguish the two kinds; it re-raises either to
its caller. Presenting the difference is a view concern.
"""


class StoreError(Exception):
    """Base exception for all remote store errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict | None = None):
        """Initialize store error.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation with details if available."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class NotFoundError(StoreError):
    """Targeted entity or nested key does not exist.

    Attributes:
        entity: Kind of thing that was missing (course, learner, ...).
        key: The id or email that was looked up.
    """

    def __init__(
        self,
        message: str,
        entity: str | None = None,
        key: str | None = None,
        details: dict | None = None,
    ):
        """Initialize not found error.

        Args:
            message: Human-readable error description.
            entity: Kind of thing that was missing.
            key: The id or email that was looked up.
            details: Optional dictionary with additional error context.
        """
        self.entity = entity
        self.key = key
        super().__init__(message, details)

    @classmethod
    def course(cls, course_id: str) -> "NotFoundError":
        return cls(f"Course with id {course_id} not found.", entity="course", key=course_id)

    @classmethod
    def learner(cls, course_id: str, email: str) -> "NotFoundError":
        return cls(
            f"Learner with email {email} not found in course {course_id}.",
            entity="learner",
            key=email,
        )

    @classmethod
    def assessment(cls, course_id: str, assessment_id: str) -> "NotFoundError":
        return cls(
            f"Assessment with id {assessment_id} not found in course {course_id}.",
            entity="assessment",
            key=assessment_id,
        )

    @classmethod
    def grant(cls, grant_id: str) -> "NotFoundError":
        return cls(
            f"Grant application with id {grant_id} not found.",
            entity="grant",
            key=grant_id,
        )


class UnavailableError(StoreError):
    """Store or transport failure.

    Attributes:
        status_code: HTTP status code when the failure came from a response.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict | None = None,
    ):
        """Initialize unavailable error.

        Args:
            message: Human-readable error description.
            status_code: HTTP status code from API response.
            details: Optional dictionary with additional error context.
        """
        self.status_code = status_code
        super().__init__(message, details)

    def __str__(self) -> str:
        """Return string representation with status code."""
        base = self.message
        if self.status_code:
            base = f"[{self.status_code}] {base}"
        if self.details:
            base = f"{base} - Details: {self.details}"
        return base

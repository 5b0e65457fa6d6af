# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Sync domain: the client-side cache and its mutation surface."""

from tms_sync.domains.sync.service import (
    CourseNotCachedError,
    LearnerNotInRegistryError,
    LearnerNotInRosterError,
    LmsSyncService,
    SyncServiceError,
)

__all__ = [
    "LmsSyncService",
    "SyncServiceError",
    "CourseNotCachedError",
    "LearnerNotInRegistryError",
    "LearnerNotInRosterError",
]

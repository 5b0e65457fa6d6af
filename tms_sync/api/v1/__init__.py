# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API v1 routes package.

Modules:
    courses: Course documents and their nested-field mutators.
    collections: Calendar events, grant applications, job postings, learners.
"""

from fastapi import APIRouter

from tms_sync.api.v1 import collections, courses

# Create the main v1 router
router = APIRouter(prefix="/api/v1")

# Include domain routers
router.include_router(courses.router, prefix="/courses", tags=["Courses"])
router.include_router(collections.router, tags=["Collections"])

__all__ = ["router"]

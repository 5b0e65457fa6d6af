# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Flat collection endpoints.

- GET /calendar-events - List calendar events
- GET /grant-applications - List grant applications
- PATCH /grant-applications/{grant_id}/status - Review a grant application
- GET /job-postings - List job postings
- GET /learners - List the global learner registry seed
"""

import logging
from typing import Any

from fastapi import APIRouter

from tms_sync.api.dependencies import Store, envelope
from tms_sync.models import DocumentModel, GrantStatus

logger = logging.getLogger(__name__)

router = APIRouter()


class GrantStatusRequest(DocumentModel):
    status: GrantStatus


@router.get("/calendar-events")
async def list_calendar_events(store: Store) -> dict[str, Any]:
    return envelope(await store.list_events())


@router.get("/grant-applications")
async def list_grant_applications(store: Store) -> dict[str, Any]:
    return envelope(await store.list_grants())


@router.patch("/grant-applications/{grant_id}/status")
async def set_grant_status(
    grant_id: str,
    request: GrantStatusRequest,
    store: Store,
) -> dict[str, Any]:
    grant = await store.set_grant_status(grant_id, request.status)
    logger.info("Grant %s set to %s via API", grant_id, request.status.value)
    return envelope(grant)


@router.get("/job-postings")
async def list_job_postings(store: Store) -> dict[str, Any]:
    return envelope(await store.list_job_postings())


@router.get("/learners")
async def list_learners(store: Store) -> dict[str, Any]:
    return envelope(await store.list_learners())

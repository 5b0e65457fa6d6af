# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain services layer for the sync core.

Domains:
    course: Nested-entity resolution and aggregate grading.
    roster: Typed learner field updates and demographics helpers.
    fees: Course fee and funding calculator.
    sync: Client-side cache and mutation surface (LmsSyncService).
    session: Login, logout and role lifecycle (SessionService).
"""

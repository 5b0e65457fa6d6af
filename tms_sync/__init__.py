# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Client-side state synchronization core for a training management system.

The package keeps an in-memory cache of courses, calendar events and grant
applications consistent with an authoritative remote store, and resolves
nested edits (grades, submissions, roster entries) by whole-document
replacement.
"""

__version__ = "1.0.0"

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Session domain: login, logout and role lifecycle."""

from tms_sync.domains.session.service import SessionService, SessionState

__all__ = ["SessionService", "SessionState"]

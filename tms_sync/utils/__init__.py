# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers.

This package contains cross-cutting utilities:
- logging: stdlib records rendered by structlog
- datetime: Timezone-aware datetime operations
"""

from tms_sync.utils.datetime import (
    age_on,
    ensure_utc,
    format_iso,
    parse_date,
    parse_iso,
    utc_now,
    utc_today,
)
from tms_sync.utils.logging import bind_context, clear_context, setup_logging

__all__ = [
    # Logging
    "setup_logging",
    "bind_context",
    "clear_context",
    # Datetime
    "utc_now",
    "utc_today",
    "ensure_utc",
    "format_iso",
    "parse_iso",
    "parse_date",
    "age_on",
]

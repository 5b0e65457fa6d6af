# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for the sync core.

Example:
    >>> from tms_sync.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from tms_sync.core.config.settings import (
    APISettings,
    CORSSettings,
    HttpStoreSettings,
    Settings,
    StoreSettings,
    SyncSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Subsettings
    "StoreSettings",
    "HttpStoreSettings",
    "SyncSettings",
    "CORSSettings",
    "APISettings",
]

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API layer.

This module provides the FastAPI application that serves the remote
store contract over HTTP, the server side of HttpRemoteStore.
"""

from tms_sync.api.app import create_app

__all__ = ["create_app"]

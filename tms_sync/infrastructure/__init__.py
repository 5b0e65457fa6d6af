# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Infrastructure layer.

This package contains:
- Remote stores (JSON files, HTTP API)
- The in-process event bus used to notify views of cache changes
"""

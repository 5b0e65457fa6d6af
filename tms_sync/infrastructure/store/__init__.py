# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Remote store package.

Exposes the RemoteStore contract and its error taxonomy. Implementations
live in their own modules and are chosen by configuration:

    from tms_sync.infrastructure.store.factory import create_store

    store = create_store(get_settings())
    await store.initialize()

Modules:
    base: RemoteStore abstract base class.
    exceptions: StoreError, NotFoundError, UnavailableError.
    file_store: JSON-document store on the local filesystem.
    http_store: REST client store built on httpx.
    seeds: Built-in seed documents for an empty file store.
    factory: Backend selection from Settings.
"""

from tms_sync.infrastructure.store.base import RemoteStore
from tms_sync.infrastructure.store.exceptions import (
    NotFoundError,
    StoreError,
    UnavailableError,
)

__all__ = [
    "RemoteStore",
    "StoreError",
    "NotFoundError",
    "UnavailableError",
]

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Remote store factory.

Selects the RemoteStore implementation from configuration so that the
sync core and the API never name a concrete backend.
"""

import logging

from tms_sync.core.config.settings import Settings
from tms_sync.infrastructure.store.base import RemoteStore
from tms_sync.infrastructure.store.file_store import JsonFileStore
from tms_sync.infrastructure.store.http_store import HttpRemoteStore

logger = logging.getLogger(__name__)


def create_store(settings: Settings) -> RemoteStore:
    """Create the configured remote store.

    Args:
        settings: Application settings.

    Returns:
        An uninitialized RemoteStore; call ``initialize()`` before use.
    """
    if settings.store.backend == "http":
        logger.info("Using HTTP remote store at %s", settings.http_store.base_url)
        return HttpRemoteStore.from_settings(settings.http_store)

    logger.info("Using JSON file store in %s", settings.store.data_dir)
    return JsonFileStore(
        data_dir=settings.store.data_dir,
        simulated_delay=settings.store.simulated_delay,
        seed=settings.store.seed_on_init,
    )

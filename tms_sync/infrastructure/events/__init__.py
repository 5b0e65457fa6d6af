# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Event infrastructure module.

Components:
- EventBus: In-memory pub/sub with pattern matching
- EventTypes: Centralized event type constants

Quick Start:
    from tms_sync.infrastructure.events import get_event_bus, EventTypes

    event_bus = get_event_bus()
    event_bus.subscribe(EventTypes.Course.UPDATED, my_handler)
"""

from tms_sync.infrastructure.events.bus import (
    EventBus,
    EventData,
    EventHandler,
    get_event_bus,
    reset_event_bus,
)
from tms_sync.infrastructure.events.types import EventPatterns, EventTypes

__all__ = [
    # Event Bus
    "EventBus",
    "EventData",
    "EventHandler",
    "get_event_bus",
    "reset_event_bus",
    # Event Types
    "EventTypes",
    "EventPatterns",
]

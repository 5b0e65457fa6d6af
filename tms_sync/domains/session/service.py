# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Session lifecycle: login, logout and role switching.

A session moves between two states, LoggedOut and LoggedIn. Logging in
loads the caches; logging out drops them along with every piece of
session-scoped state (selection, editor draft, chat). Credentials are
verified elsewhere; this service trusts the role it is given.

The role can change without a new login. It is used for display and
authorization by views only; the sync core never checks it.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from enum import Enum

from tms_sync.domains.sync.service import LmsSyncService
from tms_sync.infrastructure.events import EventBus, EventTypes, get_event_bus
from tms_sync.models import UserRole
from tms_sync.utils.logging import bind_context, clear_context

logger = logging.getLogger(__name__)

DEFAULT_POINTS = 150

ResetHook = Callable[[], Awaitable[None] | None]


class SessionState(str, Enum):
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


class SessionService:
    """Owns the session state machine around one LmsSyncService.

    Attributes:
        sync: The sync core whose caches belong to this session.
        state: Current session state.
        role: Current viewer role.
        points: Gamification points earned in this session.
        is_chat_open: Whether the assistant chat panel is open.
    """

    def __init__(
        self,
        sync: LmsSyncService,
        event_bus: EventBus | None = None,
        initial_points: int = DEFAULT_POINTS,
    ) -> None:
        """Initialize the session service.

        Args:
            sync: Sync core to refresh and clear.
            event_bus: Event bus; the process-wide bus when omitted.
            initial_points: Points a fresh session starts with.
        """
        self.sync = sync
        self.event_bus = event_bus or get_event_bus()
        self.state = SessionState.LOGGED_OUT
        self.role = UserRole.LEARNER
        self.points = initial_points
        self.is_chat_open = False
        self._reset_hooks: list[ResetHook] = []

    @property
    def is_logged_in(self) -> bool:
        return self.state == SessionState.LOGGED_IN

    def register_reset_hook(self, hook: ResetHook) -> None:
        """Register a callback that clears session-scoped state on logout.

        Hooks may be plain or async callables, e.g. a chat history reset.
        """
        self._reset_hooks.append(hook)

    async def login(self, role: UserRole) -> None:
        """Enter the LoggedIn state and load the caches.

        The global learner registry is loaded once, the first time it is
        found empty. Store errors from the initial load propagate; the
        session stays logged in so the caller can retry ``sync.refresh()``.
        """
        self.role = role
        self.state = SessionState.LOGGED_IN
        bind_context(role=role.value)
        logger.info("Logged in as %s", role.value)
        await self.event_bus.publish(
            EventTypes.Session.LOGGED_IN, {"role": role.value}, source="session"
        )

        await self.sync.load_registry()
        await self.sync.refresh()

    async def logout(self) -> None:
        """Enter the LoggedOut state and drop all session-scoped state.

        The caches are cleared even when a reset hook raises; the hook's
        error then propagates and no logged-out event is published.
        """
        self.state = SessionState.LOGGED_OUT
        self.role = UserRole.LEARNER
        self.is_chat_open = False

        try:
            for hook in self._reset_hooks:
                result = hook()
                if inspect.isawaitable(result):
                    await result
        finally:
            await self.sync.clear()
            clear_context()

        logger.info("Logged out")
        await self.event_bus.publish(EventTypes.Session.LOGGED_OUT, {}, source="session")

    async def set_role(self, role: UserRole) -> None:
        """Switch the viewer role without logging in again."""
        self.role = role
        bind_context(role=role.value)
        await self.event_bus.publish(
            EventTypes.Session.ROLE_CHANGED, {"role": role.value}, source="session"
        )

    def add_points(self, points: int) -> int:
        self.points += points
        return self.points

    def toggle_chat(self) -> bool:
        self.is_chat_open = not self.is_chat_open
        return self.is_chat_open

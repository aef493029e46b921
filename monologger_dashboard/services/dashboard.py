"""
Dashboard Controller - runs fetch cycles and publishes load state.

One controller backs one dashboard. Starting a new cycle cancels the one in
flight, and the reducer drops late results, so an older cycle can never
replace the state of a newer one.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from .builder import build_view_model
from .errors import DashboardDataUnavailable
from .fetcher import DashboardFetcher
from .formatting import DateFormatter, format_display_date
from .state import (
    Activated,
    LoadEvent,
    LoadFailed,
    LoadState,
    Loaded,
    UNAVAILABLE_MESSAGE,
    initial_state,
    reduce,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[LoadState], None]


class DashboardController:
    """Owns the load state of one dashboard."""

    def __init__(
        self,
        fetcher: DashboardFetcher,
        format_date: DateFormatter = format_display_date,
    ):
        self.fetcher = fetcher
        self.format_date = format_date
        self._state = initial_state()
        self._cycle = 0
        self._task: Optional[asyncio.Task] = None
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> LoadState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call listener with every new state.

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def activate(self) -> asyncio.Task:
        """Start a new fetch cycle, superseding any cycle in flight.

        Must be called from a running event loop.
        """
        if self._task is not None and not self._task.done():
            logger.info(f"Cancelling fetch cycle {self._cycle}, superseded by a new one")
            self._task.cancel()

        self._cycle += 1
        cycle = self._cycle
        self._task = asyncio.create_task(self._run_cycle(cycle))
        self._dispatch(Activated(cycle=cycle))
        return self._task

    async def refresh(self) -> LoadState:
        """Start a new fetch cycle and wait for it to settle.

        If another activation supersedes this one while it runs, the state
        returned is whatever that newer activation has published so far.
        """
        task = self.activate()
        await asyncio.wait([task])
        return self._state

    async def close(self):
        """Cancel the cycle in flight, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            await asyncio.wait([self._task])
        self._task = None

    def _dispatch(self, event: LoadEvent):
        new_state = reduce(self._state, event)
        if new_state is self._state:
            logger.debug(f"Ignoring stale event {type(event).__name__} for cycle {event.cycle}")
            return

        self._state = new_state
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception:
                logger.exception(f"Dashboard state listener {listener!r} failed")

    async def _run_cycle(self, cycle: int):
        logger.info(f"Fetch cycle {cycle} started")
        try:
            raw = await self.fetcher.fetch()
            view_model = build_view_model(raw, self.format_date)
        except DashboardDataUnavailable as e:
            logger.warning(f"Fetch cycle {cycle} failed: {e}")
            self._dispatch(LoadFailed(cycle=cycle, reason=UNAVAILABLE_MESSAGE))
            return
        except Exception:
            logger.exception(f"Unexpected error in fetch cycle {cycle}")
            self._dispatch(LoadFailed(cycle=cycle, reason=UNAVAILABLE_MESSAGE))
            return

        logger.info(
            f"Fetch cycle {cycle} loaded {len(view_model.users)} users, "
            f"{len(view_model.activity)} days, {len(view_model.top_users)} top users"
        )
        self._dispatch(Loaded(cycle=cycle, view_model=view_model))

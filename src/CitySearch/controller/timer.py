"""Debounce timer bridging the state machine to wall-clock time."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from CitySearch.core.state import DelayElapsed, SearchEvent
from CitySearch.utils.log import log

DEFAULT_DELAY_SECONDS = 0.3


class DebounceTimer:
    """One-shot timer that posts ``DelayElapsed`` for the latest query.

    Holds at most one pending handle: scheduling again cancels the previous
    one. A firing that slips through anyway is harmless because the state
    machine ignores ``DelayElapsed`` for any query but the live one.
    """

    def __init__(self, post: Callable[[SearchEvent], None], *, delay: float = DEFAULT_DELAY_SECONDS) -> None:
        """Initialize the timer.

        Args:
            post: Callback that enqueues an event into the controller.
            delay: Debounce window in seconds.
        """
        self.delay = delay
        self._post = post
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, query: str) -> None:
        """Start the debounce window for ``query``, superseding any pending one.

        Must be called from a running event loop.
        """
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, query)
        log.debug("Debounce scheduled: query=%r delay=%.3fs", query, self.delay)

    def cancel(self) -> None:
        """Cancel the pending handle, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, query: str) -> None:
        self._handle = None
        self._post(DelayElapsed(query=query))

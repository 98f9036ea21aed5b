"""Debounce-and-reconcile search controller.

Owns the single live ``SearchState`` and applies events to it strictly one at
a time, in posting order. Side effects run after each accepted transition:

- entering ``Delay`` schedules the debounce timer,
- entering ``Fetching`` starts one dispatcher task,
- every accepted transition is shown to the display buffer, then observers.

Timer firings and fetch completions re-enter only through ``post``, so
events produced while an event is being applied are queued, never nested.
"""

from __future__ import annotations

import asyncio
from collections import deque
from collections.abc import Callable

from CitySearch.controller.dispatcher import DEFAULT_TIMEOUT_SECONDS, FetchFunc, RequestDispatcher
from CitySearch.controller.display import DisplayBuffer
from CitySearch.controller.timer import DEFAULT_DELAY_SECONDS, DebounceTimer
from CitySearch.core.state import (
    INITIAL_STATE,
    Delay,
    Fetching,
    QueryChanged,
    SearchEvent,
    SearchState,
    is_settled,
    normalize,
    transition,
)
from CitySearch.utils.log import log

StateObserver = Callable[[SearchState, DisplayBuffer], None]


class SearchController:
    """Turn a stream of raw query edits into one consistent result set."""

    def __init__(
        self,
        fetch: FetchFunc,
        *,
        debounce: float = DEFAULT_DELAY_SECONDS,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        display: DisplayBuffer | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            fetch: Blocking callable returning result items for a query.
            debounce: Debounce window in seconds.
            timeout: Fetch timeout in seconds.
            display: Display buffer to update; a fresh one when None.
        """
        self.display = display if display is not None else DisplayBuffer()
        self._state: SearchState = INITIAL_STATE
        self._queue: deque[SearchEvent] = deque()
        self._draining = False
        self._observers: list[StateObserver] = []
        self._timer = DebounceTimer(self.post, delay=debounce)
        self._dispatcher = RequestDispatcher(fetch, timeout=timeout)
        self._tasks: set[asyncio.Task[None]] = set()
        self._settled = asyncio.Event()
        self._settled.set()

    @property
    def state(self) -> SearchState:
        return self._state

    def subscribe(self, observer: StateObserver) -> None:
        """Register a callback run after every accepted transition."""
        self._observers.append(observer)

    def set_query(self, raw: str) -> None:
        """Accept the current raw content of the input field."""
        self.post(QueryChanged(query=normalize(raw)))

    def post(self, event: SearchEvent) -> None:
        """Enqueue an event and drain the queue unless already draining.

        If applying an event raises, events still queued behind it are
        discarded and the error propagates to the caller.
        """
        self._queue.append(event)
        if self._draining:
            return
        self._draining = True
        try:
            while self._queue:
                self._apply(self._queue.popleft())
        except Exception:
            if self._queue:
                log.warning("Discarding %d queued search event(s) after error", len(self._queue))
                self._queue.clear()
            raise
        finally:
            self._draining = False

    async def wait_settled(self) -> SearchState:
        """Wait until the live state is ``Done`` or ``Failed`` and return it."""
        await self._settled.wait()
        return self._state

    async def aclose(self) -> None:
        """Cancel the pending timer and any dispatcher tasks still waiting."""
        self._timer.cancel()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def _apply(self, event: SearchEvent) -> None:
        previous = self._state
        state = transition(previous, event)
        if state is previous:
            if not isinstance(event, QueryChanged):
                log.debug("Dropped stale %s: query=%r live=%r", type(event).__name__, event.query, previous.query)
            return

        self._state = state
        log.debug("Search state: %s -> %s query=%r", type(previous).__name__, type(state).__name__, state.query)

        if is_settled(state):
            self._timer.cancel()
            self._settled.set()
        else:
            self._settled.clear()

        if isinstance(state, Delay):
            self._timer.schedule(state.query)
        elif isinstance(state, Fetching):
            self._start_fetch(state.query)

        self.display.observe(state)
        for observer in list(self._observers):
            observer(state, self.display)

    def _start_fetch(self, query: str) -> None:
        task = asyncio.get_running_loop().create_task(self._fetch(query))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _fetch(self, query: str) -> None:
        event = await self._dispatcher.dispatch(query)
        self.post(event)

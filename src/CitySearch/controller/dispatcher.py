"""Request dispatcher racing one outbound search against a hard timeout."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any, Sequence

from CitySearch.core.state import FetchFailed, FetchSucceeded
from CitySearch.utils.log import log

DEFAULT_TIMEOUT_SECONDS = 5.0

FetchFunc = Callable[[str], Sequence[Any]]


class RequestDispatcher:
    """Run a blocking fetch off the event loop and turn its outcome into an event.

    The fetch runs in a worker thread. Whichever finishes first wins: the
    fetch or the timeout. On timeout the worker is left to finish on its own
    and its eventual result is dropped here; the state machine would ignore it
    anyway since the live state is no longer ``Fetching`` for that query.
    """

    def __init__(self, fetch: FetchFunc, *, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        """Initialize the dispatcher.

        Args:
            fetch: Blocking callable returning result items for a query.
            timeout: Upper bound in seconds on how long to wait for ``fetch``.
        """
        self.timeout = timeout
        self._fetch = fetch

    async def dispatch(self, query: str) -> FetchSucceeded | FetchFailed:
        """Fetch results for ``query``.

        Never raises for fetch errors: timeouts and exceptions both become
        ``FetchFailed``.

        Args:
            query: Non-empty normalized query.

        Returns:
            The event to post into the state machine.
        """
        log.debug("Dispatching request: query=%r timeout=%.3fs", query, self.timeout)
        task = asyncio.ensure_future(asyncio.to_thread(self._fetch, query))
        done, _ = await asyncio.wait({task}, timeout=self.timeout)

        if task not in done:
            task.add_done_callback(_discard_late_result)
            log.warning("Search request timed out: query=%r timeout=%.1fs", query, self.timeout)
            return FetchFailed(query=query, reason="timeout")

        try:
            results = task.result()
        except Exception as error:  # noqa: BLE001 - every failure becomes FetchFailed
            log.warning("Search request failed: query=%r error=%s", query, error)
            return FetchFailed(query=query, reason=str(error) or type(error).__name__)

        log.debug("Search request completed: query=%r count=%d", query, len(results))
        return FetchSucceeded(query=query, results=results)


def _discard_late_result(task: asyncio.Future[Any]) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        log.debug("Late search request failed after timeout: %s", error)
    else:
        log.debug("Late search response discarded after timeout")

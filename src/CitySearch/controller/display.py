"""Display buffer observed by the rendering layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from CitySearch.core.state import Done, Failed, SearchState


@dataclass(slots=True)
class DisplayBuffer:
    """Last materialized result set plus the service-unavailable flag.

    Results change only when the machine reaches ``Done``; ``Delay``,
    ``Fetching`` and ``Failed`` keep the previous results on screen.

    Attributes:
        results: Items currently shown.
        query: Query that produced ``results``.
        failed: True exactly while the live state is ``Failed``.
    """

    results: Sequence[Any] = ()
    query: str = ""
    failed: bool = False

    def observe(self, state: SearchState) -> None:
        """Update from a new live state.

        Args:
            state: State the machine just entered.
        """
        self.failed = isinstance(state, Failed)
        if isinstance(state, Done):
            self.results = tuple(state.results)
            self.query = state.query

"""Search states, events and the reconciliation transition function.

The state machine is the single authority on which query is live. Every event
carries the query it was produced for; an event whose query does not match the
live state's query is stale and leaves the state unchanged. This is what keeps
late timer firings and late network completions from surfacing.

Transitions::

    QueryChanged(q)       any          -> same state if q == state.query
                                          Done(q, ()) if q == ""
                                          Delay(q) otherwise
    DelayElapsed(q)       Delay(q)     -> Fetching(q)
    FetchSucceeded(q, r)  Fetching(q)  -> Done(q, r)
    FetchFailed(q)        Fetching(q)  -> Failed(q)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Union


@dataclass(frozen=True, slots=True)
class Delay:
    """A debounce window is pending for ``query``."""

    query: str


@dataclass(frozen=True, slots=True)
class Fetching:
    """A network request for ``query`` is outstanding."""

    query: str


@dataclass(frozen=True, slots=True)
class Done:
    """The authoritative result set for ``query``."""

    query: str
    results: Sequence[Any] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", tuple(self.results))


@dataclass(frozen=True, slots=True)
class Failed:
    """The request for ``query`` failed or timed out."""

    query: str


SearchState = Union[Delay, Fetching, Done, Failed]


@dataclass(frozen=True, slots=True)
class QueryChanged:
    query: str


@dataclass(frozen=True, slots=True)
class DelayElapsed:
    query: str


@dataclass(frozen=True, slots=True)
class FetchSucceeded:
    query: str
    results: Sequence[Any] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", tuple(self.results))


@dataclass(frozen=True, slots=True)
class FetchFailed:
    query: str
    reason: str = ""


SearchEvent = Union[QueryChanged, DelayElapsed, FetchSucceeded, FetchFailed]

INITIAL_STATE: SearchState = Done(query="", results=())


def normalize(raw: str) -> str:
    """Normalize raw input text into a query.

    Only surrounding whitespace is removed. Case folding and diacritics are
    left to the remote service.

    Args:
        raw: Raw text from the input surface.

    Returns:
        Normalized query string, possibly empty.
    """
    return raw.strip()


def transition(state: SearchState, event: SearchEvent) -> SearchState:
    """Apply one event to a state.

    Pure and total: never raises for a well-typed state/event pair and never
    performs I/O.

    Args:
        state: Current live state.
        event: Event to apply.

    Returns:
        The next state. The very same ``state`` object is returned when the
        event is a no-op (identical query or stale event).
    """
    if isinstance(event, QueryChanged):
        if event.query == state.query:
            return state
        if not event.query:
            return Done(query="", results=())
        return Delay(query=event.query)

    if event.query != state.query:
        return state

    if isinstance(event, DelayElapsed) and isinstance(state, Delay):
        return Fetching(query=state.query)

    if isinstance(event, FetchSucceeded) and isinstance(state, Fetching):
        return Done(query=state.query, results=event.results)

    if isinstance(event, FetchFailed) and isinstance(state, Fetching):
        return Failed(query=state.query)

    return state


def is_settled(state: SearchState) -> bool:
    """Return whether no timer or request is pending for the live query."""
    return isinstance(state, (Done, Failed))

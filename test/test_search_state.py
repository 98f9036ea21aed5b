"""Tests for the reconciliation state machine."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from CitySearch.core.state import (
    INITIAL_STATE,
    Delay,
    DelayElapsed,
    Done,
    Failed,
    FetchFailed,
    FetchSucceeded,
    Fetching,
    QueryChanged,
    is_settled,
    normalize,
    transition,
)


def _run(state, *events):
    for event in events:
        state = transition(state, event)
    return state


class TestNormalize(unittest.TestCase):
    def test_strips_surrounding_whitespace_only(self) -> None:
        self.assertEqual(normalize("  São Paulo \t\n"), "São Paulo")
        self.assertEqual(normalize("paris texas"), "paris texas")
        self.assertEqual(normalize("   "), "")


class TestTransition(unittest.TestCase):
    def test_initial_state_is_empty_done(self) -> None:
        self.assertEqual(INITIAL_STATE, Done(query="", results=()))

    def test_same_query_returns_same_object_for_every_state(self) -> None:
        states = [
            Delay("tokyo"),
            Fetching("tokyo"),
            Done("tokyo", ("r1",)),
            Failed("tokyo"),
            Done("", ()),
        ]
        for state in states:
            with self.subTest(state=state):
                self.assertIs(transition(state, QueryChanged(state.query)), state)

    def test_empty_query_short_circuits_to_done(self) -> None:
        for state in (Delay("a"), Fetching("a"), Done("a", ("x",)), Failed("a")):
            with self.subTest(state=state):
                self.assertEqual(transition(state, QueryChanged("")), Done("", ()))

    def test_new_query_always_enters_delay_first(self) -> None:
        for state in (INITIAL_STATE, Delay("a"), Fetching("a"), Done("a", ("x",)), Failed("a")):
            with self.subTest(state=state):
                self.assertEqual(transition(state, QueryChanged("b")), Delay("b"))

    def test_happy_path(self) -> None:
        state = _run(
            INITIAL_STATE,
            QueryChanged("Tokyo"),
            DelayElapsed("Tokyo"),
            FetchSucceeded("Tokyo", ["tokyo-1", "tokyo-2"]),
        )
        self.assertEqual(state, Done("Tokyo", ("tokyo-1", "tokyo-2")))

    def test_fetch_failure_enters_failed(self) -> None:
        state = _run(INITIAL_STATE, QueryChanged("Tokyo"), DelayElapsed("Tokyo"), FetchFailed("Tokyo", "timeout"))
        self.assertEqual(state, Failed("Tokyo"))

    def test_stale_timer_is_ignored(self) -> None:
        state = _run(Delay("a"), QueryChanged("b"), DelayElapsed("a"))
        self.assertEqual(state, Delay("b"))

        state = _run(Delay("a"), QueryChanged("b"), DelayElapsed("b"), DelayElapsed("a"))
        self.assertEqual(state, Fetching("b"))

    def test_stale_fetch_success_is_ignored(self) -> None:
        state = _run(Fetching("a"), QueryChanged("b"), FetchSucceeded("a", ["a-result"]))
        self.assertEqual(state, Delay("b"))

        state = _run(
            Fetching("a"),
            QueryChanged("b"),
            DelayElapsed("b"),
            FetchSucceeded("a", ["a-result"]),
        )
        self.assertEqual(state, Fetching("b"))

        state = _run(
            Fetching("a"),
            QueryChanged("b"),
            DelayElapsed("b"),
            FetchSucceeded("b", ["b-result"]),
            FetchSucceeded("a", ["a-result"]),
        )
        self.assertEqual(state, Done("b", ("b-result",)))

    def test_stale_fetch_failure_is_ignored(self) -> None:
        state = _run(Fetching("a"), QueryChanged("b"), DelayElapsed("b"), FetchFailed("a"))
        self.assertEqual(state, Fetching("b"))

    def test_events_for_live_query_in_wrong_phase_are_ignored(self) -> None:
        delay = Delay("a")
        self.assertIs(transition(delay, FetchSucceeded("a", ["x"])), delay)
        self.assertIs(transition(delay, FetchFailed("a")), delay)

        fetching = Fetching("a")
        self.assertIs(transition(fetching, DelayElapsed("a")), fetching)

        done = Done("a", ("x",))
        self.assertIs(transition(done, FetchSucceeded("a", ["y"])), done)
        self.assertIs(transition(done, DelayElapsed("a")), done)

        failed = Failed("a")
        self.assertIs(transition(failed, FetchSucceeded("a", ["y"])), failed)

    def test_late_success_after_failure_does_not_resurrect(self) -> None:
        state = _run(Fetching("a"), FetchFailed("a", "timeout"), FetchSucceeded("a", ["late"]))
        self.assertEqual(state, Failed("a"))

    def test_retyping_after_failure_restarts_pipeline(self) -> None:
        state = _run(Failed("a"), QueryChanged("ab"), QueryChanged("a"))
        self.assertEqual(state, Delay("a"))

    def test_results_are_frozen_tuples(self) -> None:
        results = ["x"]
        state = transition(Fetching("a"), FetchSucceeded("a", results))
        results.append("y")
        self.assertEqual(state.results, ("x",))

    def test_is_settled(self) -> None:
        self.assertTrue(is_settled(Done("a")))
        self.assertTrue(is_settled(Failed("a")))
        self.assertFalse(is_settled(Delay("a")))
        self.assertFalse(is_settled(Fetching("a")))


if __name__ == "__main__":
    unittest.main()

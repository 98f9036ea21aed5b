"""Integration tests against a running city search service.

Skipped unless ``CITYSEARCH_API_URL`` points at a live service, e.g.:

    CITYSEARCH_API_URL=http://localhost:3000 python -m unittest test/pipeline/test_http_integration.py
"""

from __future__ import annotations

import asyncio
import os
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT / "src"))

from CitySearch.controller import SearchController
from CitySearch.core.state import Done
from CitySearch.services.search import CitySearchService
from CitySearch.sources.api.client import CityApiClient
from CitySearch.sources.api.source import CityApiSource

API_URL = os.getenv("CITYSEARCH_API_URL", "").strip()


def _service() -> CitySearchService:
    return CitySearchService(source=CityApiSource(client=CityApiClient(API_URL, timeout=30.0)))


@unittest.skipUnless(API_URL, "CITYSEARCH_API_URL not set")
class TestCitySearchService(unittest.TestCase):
    def setUp(self) -> None:
        self.service = _service()
        self.addCleanup(self.service.close)

    def test_simple_search(self) -> None:
        response = self.service.search_city("Tokyo", max_items=3)

        self.assertEqual(len(response.items), 3)
        first = response.items[0]
        self.assertEqual(first.matched_name, "Tokyo")
        self.assertEqual(first.name, "Tokyo")
        self.assertEqual(first.country, "Japan")

    def test_search_with_admin_unit(self) -> None:
        first = self.service.search_city("paris texas").items[0]

        self.assertEqual(first.name, "Paris")
        self.assertEqual(first.admin_unit, "Texas")
        self.assertEqual(first.country, "United States")

    def test_search_pages_consistency(self) -> None:
        page1 = self.service.search_city("reykjavik", start_index=1, max_items=2)
        page2 = self.service.search_city("reykjavik", start_index=3, max_items=4)
        page12 = self.service.search_city("reykjavik", start_index=1, max_items=6)

        self.assertNotEqual(page1.items[0].country, "Iceland")
        self.assertEqual(list(page1.items) + list(page2.items), list(page12.items))

    def test_climate_search_pages_consistency(self) -> None:
        page1 = self.service.search_climate(16709, start_index=2, max_items=3)
        page2 = self.service.search_climate(16709, start_index=5, max_items=1)
        page12 = self.service.search_climate(16709, start_index=2, max_items=4)

        self.assertNotEqual(page1.items[0].id, 16709)
        self.assertEqual(list(page1.items) + list(page2.items), list(page12.items))

    def test_climate_reference_city_comes_first(self) -> None:
        response = self.service.search_climate(14823, max_items=2)

        first = response.items[0]
        self.assertEqual(first.id, 14823)
        self.assertEqual(first.distance_km, 0)
        self.assertEqual(first.similarity_percent, 100)
        self.assertEqual(first.city.name, "Munich")


@unittest.skipUnless(API_URL, "CITYSEARCH_API_URL not set")
class TestControllerAgainstService(unittest.IsolatedAsyncioTestCase):
    async def test_typing_settles_on_last_query(self) -> None:
        service = _service()
        self.addCleanup(service.close)
        controller = SearchController(service.fetch_city_items, debounce=0.3, timeout=5.0)

        for text in ("T", "To", "Tok", "Tokyo"):
            controller.set_query(text)
        state = await asyncio.wait_for(controller.wait_settled(), 10.0)

        self.assertIsInstance(state, Done)
        self.assertEqual(state.query, "Tokyo")
        self.assertEqual(controller.display.results[0].name, "Tokyo")


if __name__ == "__main__":
    unittest.main()

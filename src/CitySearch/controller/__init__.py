"""Debounced search controller.

The pure state machine lives in ``CitySearch.core.state``; this package adds
the timer, the dispatcher and the display buffer around it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from CitySearch.controller.controller import SearchController, StateObserver
from CitySearch.controller.dispatcher import RequestDispatcher
from CitySearch.controller.display import DisplayBuffer
from CitySearch.controller.timer import DebounceTimer

if TYPE_CHECKING:
    from CitySearch.config import AppConfig
    from CitySearch.services.search import CitySearchService


def create_search_controller(config: AppConfig, service: CitySearchService) -> SearchController:
    """Create a controller fetching city hits through ``service``.

    Args:
        config: Application configuration with debounce/timeout settings.
        service: Search service used for every settled query.

    Returns:
        Configured SearchController instance.
    """
    return SearchController(
        service.fetch_city_items,
        debounce=config.controller.debounce_ms / 1000,
        timeout=config.controller.timeout_ms / 1000,
    )


__all__ = [
    "DebounceTimer",
    "DisplayBuffer",
    "RequestDispatcher",
    "SearchController",
    "StateObserver",
    "create_search_controller",
]

"""Search service layer for CitySearch.

Provides abstraction over the remote city search service and a factory
function for component creation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from CitySearch.services.search import CitySearchService, CitySource

if TYPE_CHECKING:
    from CitySearch.config import AppConfig


def create_search_service(config: AppConfig) -> CitySearchService:
    """Create a search service talking to the configured endpoint.

    Args:
        config: Application configuration containing API settings.

    Returns:
        Configured CitySearchService instance.
    """
    from CitySearch.sources.api.client import CityApiClient
    from CitySearch.sources.api.source import CityApiSource

    client = CityApiClient(
        config.api.base_url,
        timeout=config.controller.timeout_ms / 1000,
    )
    return CitySearchService(
        source=CityApiSource(client=client),
        max_items=config.api.max_items,
        climate_max_items=config.api.climate_max_items,
    )


__all__ = [
    "CitySearchService",
    "CitySource",
    "create_search_service",
]

"""Search service layer for city and climate lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from CitySearch.core.models import (
    CityItem,
    CityRequest,
    CityResponse,
    CitySearchRequest,
    CitySearchResponse,
    ClimateSearchRequest,
    ClimateSearchResponse,
)
from CitySearch.utils.log import log


class CitySource(Protocol):
    """Protocol for the remote city search service."""

    name: str

    def search_city(self, request: CitySearchRequest) -> CitySearchResponse:
        """Search cities by name."""
        raise NotImplementedError

    def search_climate(self, request: ClimateSearchRequest) -> ClimateSearchResponse:
        """Search cities by climate similarity."""
        raise NotImplementedError

    def close(self) -> None:
        """Close resources held by source."""
        raise NotImplementedError


@dataclass(slots=True)
class CitySearchService:
    """Application service in front of the city search source.

    Attributes:
        source: Remote service adapter.
        max_items: Page size used by ``fetch_city_items``.
        climate_max_items: Default page size for climate searches.
    """

    source: CitySource
    max_items: int = 10
    climate_max_items: int = 100

    def search_city(
        self,
        query: str,
        *,
        start_index: Optional[int] = None,
        max_items: Optional[int] = None,
    ) -> CitySearchResponse:
        """Search cities by name.

        Args:
            query: City name query.
            start_index: Offset of the first item, passed through unmodified.
            max_items: Page size, passed through unmodified.

        Returns:
            Parsed city search response.
        """
        response = self.source.search_city(
            CitySearchRequest(query=query, start_index=start_index, max_items=max_items)
        )
        log.debug(
            "searchCity completed: query=%r count=%d elapsed_ms=%.0f cache_hit_rate=%.1f%%",
            query,
            len(response.items),
            response.elapsed_ms,
            response.cache_hit_rate_percent,
        )
        return response

    def search_climate(
        self,
        city_id: int,
        *,
        start_index: Optional[int] = None,
        max_items: Optional[int] = None,
    ) -> ClimateSearchResponse:
        """Search cities with a climate similar to ``city_id``.

        Args:
            city_id: Reference city identifier.
            start_index: Offset of the first item, passed through unmodified.
            max_items: Page size; ``climate_max_items`` when None.

        Returns:
            Parsed climate search response.
        """
        response = self.source.search_climate(
            ClimateSearchRequest(
                city_id=city_id,
                start_index=start_index,
                max_items=max_items if max_items is not None else self.climate_max_items,
            )
        )
        log.debug(
            "searchClimate completed: city_id=%d count=%d elapsed_ms=%.0f",
            city_id,
            len(response.items),
            response.elapsed_ms,
        )
        return response

    def send(self, request: CityRequest) -> CityResponse:
        """Send a parsed request.

        City paging values pass through unchanged. A climate request without
        ``max_items`` is sent with ``climate_max_items``.
        """
        if isinstance(request, CitySearchRequest):
            return self.search_city(request.query, start_index=request.start_index, max_items=request.max_items)
        return self.search_climate(request.city_id, start_index=request.start_index, max_items=request.max_items)

    def fetch_city_items(self, query: str) -> Sequence[CityItem]:
        """Fetch the first page of city hits for the interactive controller."""
        return self.search_city(query, max_items=self.max_items).items

    def close(self) -> None:
        """Close the source and release external resources."""
        try:
            self.source.close()
        except Exception as error:  # noqa: BLE001 - close failure must be isolated
            log.warning("Search source close failed: source=%s error=%s", self.source.name, error)

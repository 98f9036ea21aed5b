"""City search service source adapter."""

from __future__ import annotations

from dataclasses import dataclass

from CitySearch.core.models import (
    CitySearchRequest,
    CitySearchResponse,
    ClimateSearchRequest,
    ClimateSearchResponse,
)
from CitySearch.sources.api.client import CityApiClient
from CitySearch.sources.api.parser import parse_city_search_response, parse_climate_search_response
from CitySearch.sources.api.query import compile_request


@dataclass(slots=True)
class CityApiSource:
    """Service-backed adapter that returns parsed response models."""

    client: CityApiClient
    name: str = "city-api"

    def search_city(self, request: CitySearchRequest) -> CitySearchResponse:
        """Run a city-name search.

        Args:
            request: City search request; paging values are passed through.

        Returns:
            Parsed city search response.
        """
        payload = self.client.post(compile_request(request))
        return parse_city_search_response(payload)

    def search_climate(self, request: ClimateSearchRequest) -> ClimateSearchResponse:
        """Run a climate similarity search.

        Args:
            request: Climate search request; paging values are passed through.

        Returns:
            Parsed climate search response.
        """
        payload = self.client.post(compile_request(request))
        return parse_climate_search_response(payload)

    def close(self) -> None:
        """Close resources held by the source adapter.
        """
        self.client.close()

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence, Union

MONTHS_PER_YEAR = 12


@dataclass(frozen=True, slots=True)
class CitySearchRequest:
    """Search cities by name.

    Attributes:
        query: Free-text city name, optionally followed by admin unit or country.
        start_index: Offset of the first returned item; service default when None.
        max_items: Page size; service default when None.
    """

    query: str
    start_index: Optional[int] = None
    max_items: Optional[int] = None

    command = "searchCity"


@dataclass(frozen=True, slots=True)
class ClimateSearchRequest:
    """Search cities whose climate is similar to a reference city.

    Attributes:
        city_id: Identifier of the reference city.
        start_index: Offset of the first returned item; service default when None.
        max_items: Page size; service default when None.
    """

    city_id: int
    start_index: Optional[int] = None
    max_items: Optional[int] = None

    command = "searchClimate"


CityRequest = Union[CitySearchRequest, ClimateSearchRequest]


@dataclass(frozen=True, slots=True)
class CityItem:
    """One city-name search hit.

    Attributes:
        id: City identifier, usable as ``ClimateSearchRequest.city_id``.
        score: Match score assigned by the service.
        matched_name: The alternate name that matched the query.
        name: Primary city name.
        population: Population count.
        admin_unit: First-level administrative unit if known.
        country: Country name.
    """

    id: int
    score: float
    matched_name: str
    name: str
    population: int
    admin_unit: Optional[str]
    country: str


@dataclass(frozen=True, slots=True)
class CityClimate:
    """Twelve-month climate record, January first."""

    humidity_monthly: Sequence[Optional[float]]
    ppt_monthly: Sequence[float]
    srad_monthly: Sequence[float]
    tmax_monthly: Sequence[float]
    tmin_monthly: Sequence[float]
    ws_monthly: Sequence[float]


@dataclass(frozen=True, slots=True)
class City:
    """Full city record as returned by climate search.

    Attributes:
        names: Known names, primary name first.
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
        admin_unit: First-level administrative unit if known.
        country: Country name.
        population: Population count.
        elevation: Elevation in meters if known.
        region: Region/timezone label.
        modification_date: Date the source record was last modified.
        climate: Monthly climate record.
    """

    names: Sequence[str]
    latitude: float
    longitude: float
    admin_unit: Optional[str]
    country: str
    population: int
    elevation: Optional[int]
    region: str
    modification_date: date
    climate: CityClimate

    @property
    def name(self) -> str:
        return self.names[0] if self.names else ""


@dataclass(frozen=True, slots=True)
class ClimateItem:
    """One climate similarity hit."""

    id: int
    city: City
    distance_km: float
    similarity_percent: float


@dataclass(frozen=True, slots=True)
class CitySearchResponse:
    items: Sequence[CityItem]
    elapsed_ms: float
    cache_hit_rate_percent: float

    command = "searchCity"


@dataclass(frozen=True, slots=True)
class ClimateSearchResponse:
    items: Sequence[ClimateItem]
    elapsed_ms: float

    command = "searchClimate"


CityResponse = Union[CitySearchResponse, ClimateSearchResponse]
ResultItem = Union[CityItem, ClimateItem]

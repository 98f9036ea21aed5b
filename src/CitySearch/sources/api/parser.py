"""City search service payload parser."""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Sequence

from dateutil import parser as dt_parser

from CitySearch.core.models import (
    MONTHS_PER_YEAR,
    City,
    CityClimate,
    CityItem,
    CitySearchResponse,
    ClimateItem,
    ClimateSearchResponse,
)
from CitySearch.sources.api.errors import ApiResponseError


def parse_city_search_response(payload: Mapping[str, Any]) -> CitySearchResponse:
    """Parse a ``searchCity`` response payload.

    Raises:
        ApiResponseError: If the payload shape is invalid.
    """
    _expect_command(payload, CitySearchResponse.command)
    return CitySearchResponse(
        items=tuple(parse_city_item(item) for item in _items(payload)),
        elapsed_ms=_number(payload, "elapsedMs"),
        cache_hit_rate_percent=_number(payload, "cacheHitRatePercent"),
    )


def parse_climate_search_response(payload: Mapping[str, Any]) -> ClimateSearchResponse:
    """Parse a ``searchClimate`` response payload.

    Raises:
        ApiResponseError: If the payload shape is invalid.
    """
    _expect_command(payload, ClimateSearchResponse.command)
    return ClimateSearchResponse(
        items=tuple(parse_climate_item(item) for item in _items(payload)),
        elapsed_ms=_number(payload, "elapsedMs"),
    )


def parse_city_item(item: Any) -> CityItem:
    """Parse one ``CityItem`` mapping."""
    item = _mapping(item, "CityItem")
    return CityItem(
        id=_int(item, "id"),
        score=_number(item, "score"),
        matched_name=_str(item, "matchedName"),
        name=_str(item, "name"),
        population=_int(item, "population"),
        admin_unit=_optional_str(item, "adminUnit"),
        country=_str(item, "country"),
    )


def parse_climate_item(item: Any) -> ClimateItem:
    """Parse one ``ClimateItem`` mapping."""
    item = _mapping(item, "ClimateItem")
    return ClimateItem(
        id=_int(item, "id"),
        city=parse_city(item.get("city")),
        distance_km=_number(item, "distanceKm"),
        similarity_percent=_number(item, "similarityPercent"),
    )


def parse_city(raw: Any) -> City:
    """Parse a full city record."""
    raw = _mapping(raw, "City")
    names = raw.get("names")
    if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
        raise ApiResponseError("City.names must be a list of strings")

    elevation = raw.get("elevation")
    if elevation is not None:
        elevation = _int(raw, "elevation")

    return City(
        names=tuple(names),
        latitude=_number(raw, "latitude"),
        longitude=_number(raw, "longitude"),
        admin_unit=_optional_str(raw, "adminUnit"),
        country=_str(raw, "country"),
        population=_int(raw, "population"),
        elevation=elevation,
        region=_str(raw, "region"),
        modification_date=_date(raw, "modificationDate"),
        climate=parse_climate(raw.get("climate")),
    )


def parse_climate(raw: Any) -> CityClimate:
    """Parse a twelve-month climate record."""
    raw = _mapping(raw, "CityClimate")
    return CityClimate(
        humidity_monthly=_monthly(raw, "humidityMonthly", nullable=True),
        ppt_monthly=_monthly(raw, "pptMonthly"),
        srad_monthly=_monthly(raw, "sradMonthly"),
        tmax_monthly=_monthly(raw, "tmaxMonthly"),
        tmin_monthly=_monthly(raw, "tminMonthly"),
        ws_monthly=_monthly(raw, "wsMonthly"),
    )


def _expect_command(payload: Mapping[str, Any], command: str) -> None:
    actual = payload.get("command")
    if actual != command:
        raise ApiResponseError(f"Expected command {command!r} in response, got {actual!r}")


def _items(payload: Mapping[str, Any]) -> Sequence[Any]:
    items = payload.get("items")
    if not isinstance(items, list):
        raise ApiResponseError("Response items must be a list")
    return items


def _mapping(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ApiResponseError(f"{name} must be an object")
    return value


def _number(raw: Mapping[str, Any], key: str) -> float:
    value = raw.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ApiResponseError(f"{key} must be a number")
    return float(value)


def _int(raw: Mapping[str, Any], key: str) -> int:
    value = raw.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ApiResponseError(f"{key} must be an integer")
    return value


def _str(raw: Mapping[str, Any], key: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise ApiResponseError(f"{key} must be a string")
    return value


def _optional_str(raw: Mapping[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is not None and not isinstance(value, str):
        raise ApiResponseError(f"{key} must be a string or null")
    return value


def _date(raw: Mapping[str, Any], key: str) -> date:
    value = _str(raw, key)
    try:
        return dt_parser.isoparse(value).date()
    except (ValueError, OverflowError) as error:
        raise ApiResponseError(f"{key} is not an ISO date: {value!r}") from error


def _monthly(raw: Mapping[str, Any], key: str, *, nullable: bool = False) -> tuple[Any, ...]:
    values = raw.get(key)
    if not isinstance(values, list) or len(values) != MONTHS_PER_YEAR:
        raise ApiResponseError(f"{key} must be a list of {MONTHS_PER_YEAR} numbers")
    out: list[float | None] = []
    for value in values:
        if value is None and nullable:
            out.append(None)
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ApiResponseError(f"{key} must be a list of {MONTHS_PER_YEAR} numbers")
        out.append(float(value))
    return tuple(out)

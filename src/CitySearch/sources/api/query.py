"""Build wire payloads for city search requests."""

from __future__ import annotations

import json
from typing import Any, Mapping

from CitySearch.core.models import CityRequest, CitySearchRequest, ClimateSearchRequest


def compile_request(request: CityRequest) -> dict[str, Any]:
    """Compile a request model into its JSON payload.

    ``startIndex``/``maxItems`` are passed through unmodified when set and
    omitted otherwise, so the service applies its own defaults.

    Args:
        request: City or climate search request.

    Returns:
        JSON-serializable payload.

    Raises:
        ValueError: If the city id or paging values are negative.
    """
    payload: dict[str, Any] = {"command": request.command}
    if isinstance(request, CitySearchRequest):
        payload["query"] = request.query
    else:
        payload["cityId"] = _non_negative(request.city_id, "cityId")

    if request.start_index is not None:
        payload["startIndex"] = _non_negative(request.start_index, "startIndex")
    if request.max_items is not None:
        payload["maxItems"] = _non_negative(request.max_items, "maxItems")
    return payload


def parse_request(text: str) -> CityRequest:
    """Parse a request typed by a user.

    Brace-free input is a simple command: plain unsigned digits mean a climate search
    for that city id, anything else is a city-name search. Input containing
    braces must be a full JSON request object.

    Args:
        text: Raw request text.

    Returns:
        Parsed request model.

    Raises:
        ValueError: If the input is empty or the JSON request is invalid.
    """
    stripped = text.strip()
    if not stripped:
        raise ValueError("Request must not be empty")

    if "{" not in stripped and "}" not in stripped:
        if stripped.isascii() and stripped.isdigit():
            return ClimateSearchRequest(city_id=int(stripped))
        return CitySearchRequest(query=stripped)

    try:
        raw = json.loads(stripped)
    except json.JSONDecodeError as error:
        raise ValueError(f"Invalid JSON request: {error}") from error
    return request_from_mapping(raw)


def request_from_mapping(raw: Any) -> CityRequest:
    """Convert a decoded JSON request object into a request model.

    Raises:
        ValueError: If the command is unknown or fields have the wrong type.
    """
    if not isinstance(raw, Mapping):
        raise ValueError("Request must be a JSON object")

    command = raw.get("command")
    start_index = _optional_index(raw.get("startIndex"), "startIndex")
    max_items = _optional_index(raw.get("maxItems"), "maxItems")

    if command == CitySearchRequest.command:
        query = raw.get("query")
        if not isinstance(query, str):
            raise ValueError("searchCity.query must be a string")
        return CitySearchRequest(query=query, start_index=start_index, max_items=max_items)

    if command == ClimateSearchRequest.command:
        city_id = raw.get("cityId")
        if isinstance(city_id, bool) or not isinstance(city_id, int):
            raise ValueError("searchClimate.cityId must be an integer")
        _non_negative(city_id, "cityId")
        return ClimateSearchRequest(city_id=city_id, start_index=start_index, max_items=max_items)

    raise ValueError(f"Unknown command: {command!r}")


def _optional_index(value: Any, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer")
    return _non_negative(value, key)


def _non_negative(value: int, key: str) -> int:
    if value < 0:
        raise ValueError(f"{key} must not be negative")
    return value

"""JSON output renderers.

Renders response models back into the service's camelCase wire format and
provides JsonOutputWriter, which prints one JSON document per write.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

import click

from CitySearch.controller.display import DisplayBuffer
from CitySearch.core.models import (
    City,
    CityItem,
    CityResponse,
    CitySearchResponse,
    ClimateItem,
)
from CitySearch.renderers.base import OutputWriter


def render_city_item(item: CityItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "score": item.score,
        "matchedName": item.matched_name,
        "name": item.name,
        "population": item.population,
        "adminUnit": item.admin_unit,
        "country": item.country,
    }


def render_city(city: City) -> dict[str, Any]:
    climate = city.climate
    return {
        "names": list(city.names),
        "latitude": city.latitude,
        "longitude": city.longitude,
        "adminUnit": city.admin_unit,
        "country": city.country,
        "population": city.population,
        "elevation": city.elevation,
        "region": city.region,
        "modificationDate": city.modification_date.isoformat(),
        "climate": {
            "humidityMonthly": list(climate.humidity_monthly),
            "pptMonthly": list(climate.ppt_monthly),
            "sradMonthly": list(climate.srad_monthly),
            "tmaxMonthly": list(climate.tmax_monthly),
            "tminMonthly": list(climate.tmin_monthly),
            "wsMonthly": list(climate.ws_monthly),
        },
    }


def render_climate_item(item: ClimateItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "city": render_city(item.city),
        "distanceKm": item.distance_km,
        "similarityPercent": item.similarity_percent,
    }


def render_items(items: Iterable[Any]) -> list[dict[str, Any]]:
    """Render result items into JSON-serializable dicts.

    Args:
        items: City or climate hits.

    Returns:
        A list of dicts in wire format.
    """
    out: list[dict[str, Any]] = []
    for item in items:
        if isinstance(item, ClimateItem):
            out.append(render_climate_item(item))
        else:
            out.append(render_city_item(item))
    return out


def render_json(response: CityResponse) -> dict[str, Any]:
    """Render a response model into its wire format."""
    data: dict[str, Any] = {
        "command": response.command,
        "items": render_items(response.items),
        "elapsedMs": response.elapsed_ms,
    }
    if isinstance(response, CitySearchResponse):
        data["cacheHitRatePercent"] = response.cache_hit_rate_percent
    return data


def render_display_json(display: DisplayBuffer) -> dict[str, Any]:
    """Render the display buffer with its failure indicator."""
    return {
        "query": display.query,
        "failed": display.failed,
        "items": render_items(display.results),
    }


class JsonOutputWriter(OutputWriter):
    """Print results to stdout as JSON, one document per write."""

    def __init__(self, *, indent: int | None = None) -> None:
        self.indent = indent

    def write_response(self, response: CityResponse) -> None:
        click.echo(json.dumps(render_json(response), ensure_ascii=False, indent=self.indent))

    def write_display(self, display: DisplayBuffer) -> None:
        click.echo(json.dumps(render_display_json(display), ensure_ascii=False, indent=self.indent))

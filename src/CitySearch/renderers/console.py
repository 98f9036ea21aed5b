"""Console text output renderers.

Renders city and climate hits into human-friendly text and provides the
ConsoleOutputWriter implementation for command output.
"""

from __future__ import annotations

from typing import Any, Iterable

from CitySearch.controller.display import DisplayBuffer
from CitySearch.core.models import CityItem, CityResponse, CitySearchResponse, ClimateItem
from CitySearch.renderers.base import OutputWriter
from CitySearch.utils.log import log

UNAVAILABLE_MESSAGE = "Service unavailable"


def format_city_line(item: CityItem) -> str:
    """Format one city hit as ``name, admin unit, country``."""
    parts = [item.name, item.admin_unit or "", item.country]
    return ", ".join(part for part in parts if part)


def format_climate_line(item: ClimateItem) -> str:
    """Format one climate hit with similarity and distance."""
    city = item.city
    place = ", ".join(part for part in (city.name, city.admin_unit or "", city.country) if part)
    return f"{place} (id={item.id}) similarity={item.similarity_percent:.1f}% distance={item.distance_km:.0f} km"


def format_item(item: Any) -> str:
    if isinstance(item, CityItem):
        return format_city_line(item)
    if isinstance(item, ClimateItem):
        return format_climate_line(item)
    return str(item)


def render_text(items: Iterable[Any]) -> str:
    """Render result items into a numbered text block.

    Args:
        items: City or climate hits.

    Returns:
        A formatted string ready to be printed, or an empty string.
    """
    lines = [f"{idx}. {format_item(item)}" for idx, item in enumerate(items, start=1)]
    return "\n".join(lines) + "\n" if lines else ""


def render_display_text(display: DisplayBuffer) -> str:
    """Render the display buffer, prefixed by the failure indicator if set."""
    lines: list[str] = []
    if display.failed:
        lines.append(f"[{UNAVAILABLE_MESSAGE}]")
    body = render_text(display.results)
    if body:
        lines.extend(body.splitlines())
    elif display.query:
        lines.append(f"No results for {display.query!r}")
    return "\n".join(lines) + "\n" if lines else ""


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_response(self, response: CityResponse) -> None:
        """Write a one-shot response to console."""
        log.info("Fetched %d items in %.0f ms", len(response.items), response.elapsed_ms)
        if isinstance(response, CitySearchResponse):
            log.debug("Cache hit rate: %.1f%%", response.cache_hit_rate_percent)
        for line in render_text(response.items).splitlines():
            log.info(line)

    def write_display(self, display: DisplayBuffer) -> None:
        """Write the display buffer to console."""
        for line in render_display_text(display).splitlines():
            log.info(line)

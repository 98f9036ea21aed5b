"""API domain configuration: service endpoint and page sizes."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from CitySearch.config.common import (
    expect_int,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)

API_URL_ENV = "CITYSEARCH_API_URL"


@dataclass(frozen=True, slots=True)
class ApiConfig:
    """Remote city search service settings.

    Attributes:
        base_url: Service endpoint; every request is POSTed here.
        max_items: Page size requested for interactive city searches.
        climate_max_items: Default page size for climate searches.
    """

    base_url: str
    max_items: int
    climate_max_items: int


def load_api(raw: Mapping[str, Any]) -> ApiConfig:
    """Load API domain config from raw mapping.

    ``CITYSEARCH_API_URL`` in the environment overrides ``api.base_url``.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "api", required=True)
    base_url = expect_str(get_required_value(section, "base_url", "api.base_url"), "api.base_url")
    env_url = os.getenv(API_URL_ENV, "").strip()
    return ApiConfig(
        base_url=(env_url or base_url).strip(),
        max_items=expect_int(get_optional_value(section, "max_items", 10), "api.max_items"),
        climate_max_items=expect_int(
            get_optional_value(section, "climate_max_items", 100),
            "api.climate_max_items",
        ),
    )


def check_api(config: ApiConfig) -> None:
    """Validate API domain constraints.

    Raises:
        ValueError: If values violate API constraints.
    """
    if not config.base_url.startswith(("http://", "https://")):
        raise ValueError("api.base_url must start with http:// or https://")
    if config.max_items <= 0:
        raise ValueError("api.max_items must be positive")
    if config.climate_max_items <= 0:
        raise ValueError("api.climate_max_items must be positive")

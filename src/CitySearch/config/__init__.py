from __future__ import annotations

"""Public configuration API for CitySearch."""

from CitySearch.config.api import ApiConfig
from CitySearch.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from CitySearch.config.controller import ControllerConfig
from CitySearch.config.output import OutputConfig
from CitySearch.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "ApiConfig",
    "ControllerConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]

"""Controller domain configuration: debounce window and fetch timeout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from CitySearch.config.common import expect_positive_int, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class ControllerConfig:
    """Timing settings for the interactive search controller."""

    debounce_ms: int
    timeout_ms: int


def load_controller(raw: Mapping[str, Any]) -> ControllerConfig:
    """Load controller domain config from raw mapping.

    The section is optional; missing keys fall back to 300 ms / 5000 ms.
    """
    section = get_section(raw, "controller", required=False)
    return ControllerConfig(
        debounce_ms=expect_positive_int(get_optional_value(section, "debounce_ms", 300), "controller.debounce_ms"),
        timeout_ms=expect_positive_int(get_optional_value(section, "timeout_ms", 5000), "controller.timeout_ms"),
    )


def check_controller(config: ControllerConfig) -> None:
    """Validate controller domain constraints.

    Raises:
        ValueError: If the debounce window does not fit inside the timeout.
    """
    if config.debounce_ms >= config.timeout_ms:
        raise ValueError("controller.debounce_ms must be smaller than controller.timeout_ms")

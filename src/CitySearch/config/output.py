"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from CitySearch.config.common import expect_str, get_optional_value, get_section

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    format: str


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping."""
    section = get_section(raw, "output", required=False)
    return OutputConfig(
        format=expect_str(get_optional_value(section, "format", "console"), "output.format").strip().lower(),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints."""
    if config.format not in _ALLOWED_FORMATS:
        raise ValueError(f"output.format must be one of {sorted(_ALLOWED_FORMATS)}")

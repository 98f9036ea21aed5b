"""Output renderers for command results.

Provides the OutputWriter abstraction and implementations for console text
and JSON, plus a factory that picks one based on configuration.
"""

from __future__ import annotations

from CitySearch.config import AppConfig
from CitySearch.renderers.base import OutputWriter
from CitySearch.renderers.console import ConsoleOutputWriter, render_display_text, render_text
from CitySearch.renderers.json import JsonOutputWriter, render_display_json, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        OutputWriter instance for the configured format.
    """
    if config.output.format == "json":
        return JsonOutputWriter()
    if config.output.format == "console":
        return ConsoleOutputWriter()
    raise ValueError(f"Unsupported output format: {config.output.format}")


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonOutputWriter",
    "render_display_json",
    "render_display_text",
    "render_json",
    "render_text",
    "create_output_writer",
]

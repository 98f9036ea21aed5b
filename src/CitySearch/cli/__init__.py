"""CLI package for CitySearch command orchestration.

This package contains the modular CLI components, factored into separate
modules for better maintainability and testability.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from CitySearch.cli.runner import CommandRunner
from CitySearch.cli.ui import cli


def main() -> None:
    """Run CitySearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()

"""Base classes for output writers.

Separates command control flow from output logic for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from CitySearch.controller.display import DisplayBuffer
from CitySearch.core.models import CityResponse


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_response(self, response: CityResponse) -> None:
        """Write the result of a one-shot request.

        Args:
            response: Parsed city or climate search response.
        """

    @abstractmethod
    def write_display(self, display: DisplayBuffer) -> None:
        """Write the current display buffer of the interactive controller.

        Args:
            display: Display buffer after a visible change.
        """

"""Command implementations for CitySearch CLI.

Encapsulates business logic for commands, separated from CLI parameter
handling and output formatting.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Protocol, TextIO

from CitySearch.config import AppConfig
from CitySearch.controller import DisplayBuffer, create_search_controller
from CitySearch.core.models import CityRequest
from CitySearch.core.state import SearchState
from CitySearch.renderers import OutputWriter
from CitySearch.services.search import CitySearchService
from CitySearch.utils.log import log


class Command(Protocol):
    def execute(self) -> None:
        """Run the command."""
        raise NotImplementedError


@dataclass(slots=True)
class RequestCommand:
    """Send one request and write its response.

    Used by the ``search``, ``climate`` and ``request`` CLI commands.
    """

    service: CitySearchService
    output_writer: OutputWriter
    request: CityRequest

    def execute(self) -> None:
        """Execute the request; API errors propagate to the runner."""
        log.debug("Sending request: %s", self.request)
        response = self.service.send(self.request)
        self.output_writer.write_response(response)


@dataclass(slots=True)
class InteractiveCommand:
    """Feed lines from a text stream into the debounced search controller.

    Each line is the full current content of the input field, so piping
    ``T``, ``To``, ``Tok``, ``Tokyo`` simulates fast typing. The display is
    written whenever its visible content changes. At end of input the command
    waits for the live query to settle.
    """

    config: AppConfig
    service: CitySearchService
    output_writer: OutputWriter
    stream: TextIO
    _last_snapshot: tuple[Any, ...] | None = field(default=None, init=False)

    def execute(self) -> None:
        """Run the input loop on a fresh event loop."""
        asyncio.run(self._run())

    async def _run(self) -> None:
        controller = create_search_controller(self.config, self.service)
        self._last_snapshot = _snapshot(controller.display)
        controller.subscribe(self._on_state)
        try:
            while True:
                line = await asyncio.to_thread(self.stream.readline)
                if not line:
                    break
                controller.set_query(line)
            state = await controller.wait_settled()
            log.debug("Input closed; final state=%s query=%r", type(state).__name__, state.query)
        finally:
            await controller.aclose()

    def _on_state(self, state: SearchState, display: DisplayBuffer) -> None:
        del state
        snapshot = _snapshot(display)
        if snapshot == self._last_snapshot:
            return
        self._last_snapshot = snapshot
        self.output_writer.write_display(display)


def _snapshot(display: DisplayBuffer) -> tuple[Any, ...]:
    return (display.query, display.failed, tuple(display.results))

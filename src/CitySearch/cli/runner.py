"""Command runner for coordinating CLI execution.

Manages component lifecycle, resource cleanup, logging configuration,
and error handling for command execution.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

import click

from CitySearch.cli.commands import Command, InteractiveCommand, RequestCommand
from CitySearch.config import AppConfig
from CitySearch.core.models import CityRequest
from CitySearch.renderers import OutputWriter, create_output_writer
from CitySearch.services import CitySearchService, create_search_service
from CitySearch.utils.log import configure_logging, log

CommandBuilder = Callable[[CitySearchService, OutputWriter], Command]


class CommandRunner:
    """Orchestrates command execution with proper resource management.

    Handles logging configuration, component creation, service cleanup,
    and error handling for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_request(self, action: str, request: CityRequest) -> None:
        """Execute a one-shot request command.

        Args:
            action: The CLI command name (e.g., 'search').
            request: Request to send.

        Raises:
            click.Abort: When the request fails.
        """
        self._run(
            action,
            lambda service, writer: RequestCommand(service=service, output_writer=writer, request=request),
        )

    def run_interactive(self, action: str, stream: TextIO) -> None:
        """Execute the interactive debounced search over ``stream``.

        Raises:
            click.Abort: When the command fails outside the controller.
        """
        self._run(
            action,
            lambda service, writer: InteractiveCommand(
                config=self.config,
                service=service,
                output_writer=writer,
                stream=stream,
            ),
        )

    def _run(self, action: str, build: CommandBuilder) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        service = create_search_service(self.config)
        try:
            output_writer = create_output_writer(self.config)
            command = build(service, output_writer)
            command.execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action.capitalize(), e)
            raise click.Abort from e
        finally:
            service.close()

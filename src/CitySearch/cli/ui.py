"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from CitySearch.cli.runner import CommandRunner
from CitySearch.config import load_config
from CitySearch.core.models import CitySearchRequest, ClimateSearchRequest
from CitySearch.sources.api.query import parse_request


def _paging_options(func):
    func = click.option(
        "--max-items",
        type=click.IntRange(min=0),
        default=None,
        help="Page size; service default when omitted.",
    )(func)
    func = click.option(
        "--start-index",
        type=click.IntRange(min=0),
        default=None,
        help="Offset of the first item; service default when omitted.",
    )(func)
    return func


@click.group(help="CitySearch: look up cities by name or by similar climate.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    ctx.obj = load_config(config_path)


@cli.command("search")
@click.argument("query")
@_paging_options
@click.pass_context
def search_cmd(ctx: click.Context, query: str, start_index: int | None, max_items: int | None) -> None:
    """Search cities by name once, without debouncing."""
    request = CitySearchRequest(query=query.strip(), start_index=start_index, max_items=max_items)
    CommandRunner(ctx.obj).run_request(ctx.command.name, request)


@cli.command("climate")
@click.argument("city_id", type=int)
@_paging_options
@click.pass_context
def climate_cmd(ctx: click.Context, city_id: int, start_index: int | None, max_items: int | None) -> None:
    """Search cities whose climate is similar to CITY_ID."""
    request = ClimateSearchRequest(city_id=city_id, start_index=start_index, max_items=max_items)
    CommandRunner(ctx.obj).run_request(ctx.command.name, request)


@cli.command("request")
@click.argument("text")
@click.pass_context
def request_cmd(ctx: click.Context, text: str) -> None:
    """Send a simple command or a JSON request.

    A plain integer searches by climate, other plain text searches by name,
    and text with braces must be a JSON request object.
    """
    try:
        request = parse_request(text)
    except ValueError as error:
        raise click.BadParameter(str(error), param_hint="TEXT") from error
    CommandRunner(ctx.obj).run_request(ctx.command.name, request)


@cli.command("interactive")
@click.pass_context
def interactive_cmd(ctx: click.Context) -> None:
    """Read query edits from stdin, one full input value per line.

    Queries are debounced: only the value that stays unchanged for the
    configured window is sent, and late responses for older values are
    discarded.
    """
    CommandRunner(ctx.obj).run_interactive(ctx.command.name, click.get_text_stream("stdin"))

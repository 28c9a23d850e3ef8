"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to the command runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from ContentSearch.cli.runner import CommandRunner
from ContentSearch.config import load_config_with_defaults
from ContentSearch.core.models import ChannelSearchParams, ClientAppsSearchParams, ContentSearchParams
from ContentSearch.renderers import render_collection, render_suggestions

DEFAULT_CONFIG = Path("config/default.yml")


def _parse_sort(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> dict[str, str] | None:
    """Parse repeated ``field:direction`` options into an ordered mapping."""
    del ctx, param
    if not value:
        return None
    sort_by: dict[str, str] = {}
    for item in value:
        field, sep, direction = item.partition(":")
        field = field.strip()
        if not field:
            raise click.BadParameter(f"missing field name in {item!r}")
        sort_by[field] = direction.strip() if sep else "asc"
    return sort_by


_sort_option = click.option(
    "--sort",
    "sort_by",
    multiple=True,
    callback=_parse_sort,
    help="Sort criterion as field:asc|desc. Repeat for several criteria.",
)
_page_option = click.option("--page", default=None, help="1-based page number.")
_limit_option = click.option("--limit", default=None, help="Page size.")
_start_option = click.option("--start-date", default=None, help="Inclusive lower date bound (ISO-8601).")
_end_option = click.option("--end-date", default=None, help="Inclusive upper date bound (ISO-8601).")


@click.group(help="ContentSearch: query content and channel indexes from the terminal.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG,
    show_default=True,
    help="Path to YAML config file, merged over the defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.
    """
    load_dotenv()

    default_path = DEFAULT_CONFIG if DEFAULT_CONFIG.exists() else config_path
    ctx.obj = CommandRunner(load_config_with_defaults(config_path, default_path=default_path))


@cli.command("contents")
@click.option("--term", default=None, help="Free text.")
@click.option("--category", default=None, help="Category filter.")
@click.option("--country", default=None, help="Country code for availability filtering.")
@_start_option
@_end_option
@click.option("--content-id", default=None, help="Exact content id.")
@click.option("--content-type", "content_types", multiple=True, help="Accepted content type. Repeatable.")
@click.option("--rating", "ratings", multiple=True, help="Accepted rating value. Repeatable.")
@_sort_option
@_page_option
@_limit_option
@click.pass_context
def contents_cmd(
    ctx: click.Context,
    term: str | None,
    category: str | None,
    country: str | None,
    start_date: str | None,
    end_date: str | None,
    content_id: str | None,
    content_types: tuple[str, ...],
    ratings: tuple[str, ...],
    sort_by: dict[str, str] | None,
    page: str | None,
    limit: str | None,
) -> None:
    """Search the content index and print the page as JSON."""
    params = ContentSearchParams(
        term=term,
        category=category,
        country=country,
        start_date=start_date,
        end_date=end_date,
        content_id=content_id,
        content_type=list(content_types) or None,
        ratings=list(ratings) or None,
        sort_by=sort_by,
        page=page,
        limit=limit,
    )
    runner: CommandRunner = ctx.obj
    runner.run_search(ctx.command.name, lambda service: render_collection(service.fetch_contents(params)))


@cli.command("channels")
@click.option("--term", default=None, help="Free text matched against channel and transmission titles.")
@_sort_option
@_start_option
@_end_option
@_page_option
@_limit_option
@click.pass_context
def channels_cmd(
    ctx: click.Context,
    term: str | None,
    sort_by: dict[str, str] | None,
    start_date: str | None,
    end_date: str | None,
    page: str | None,
    limit: str | None,
) -> None:
    """Search the channel index and print the page as JSON."""
    params = ChannelSearchParams(
        term=term,
        sort_by=sort_by,
        start_date=start_date,
        end_date=end_date,
        page=page,
        limit=limit,
    )
    runner: CommandRunner = ctx.obj
    runner.run_search(ctx.command.name, lambda service: render_collection(service.fetch_channels(params)))


@cli.command("suggest")
@click.argument("text")
@click.option("--field", "property_name", default="title", show_default=True, help="Property to complete.")
@click.pass_context
def suggest_cmd(ctx: click.Context, text: str, property_name: str) -> None:
    """Print completion suggestions for TEXT as a JSON list."""
    runner: CommandRunner = ctx.obj
    runner.run_search(ctx.command.name, lambda service: render_suggestions(service.suggest(text, property_name)))


@cli.command("client-apps")
@click.argument("term")
@click.option("--page", type=int, default=None, help="1-based page number.")
@click.option("--limit", type=int, default=None, help="Page size.")
@click.pass_context
def client_apps_cmd(ctx: click.Context, term: str, page: int | None, limit: int | None) -> None:
    """Run the boosted client-apps content search for TERM."""
    params = ClientAppsSearchParams(term=term, page=page, limit=limit)
    runner: CommandRunner = ctx.obj
    runner.run_client_apps(ctx.command.name, lambda service: render_collection(service.fetch_contents(params)))

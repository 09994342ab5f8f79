"""Command line interface: serve the API or drive a running server."""

import json
from typing import Any

import click

from idspace.client import ApiError, ItemsClient
from idspace.config import settings
from idspace.services.items.pagination import PAGE_LIMIT


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data))


def _client(ctx: click.Context) -> ItemsClient:
    """Client stored on the context, created on first use."""
    obj: dict[str, Any] = ctx.ensure_object(dict)
    if "client" not in obj:
        obj["client"] = ctx.with_resource(ItemsClient(obj.get("api_url")))
    client: ItemsClient = obj["client"]
    return client


def _call(ctx: click.Context, func: Any, *args: Any, **kwargs: Any) -> Any:
    try:
        return func(_client(ctx), *args, **kwargs)
    except ApiError as e:
        details = {k: v for k, v in e.body.items() if k != "message"}
        suffix = f" {json.dumps(details)}" if details else ""
        raise click.ClickException(f"{e.status_code} {e.message}{suffix}") from e


page_options = [
    click.option("--limit", type=int, default=PAGE_LIMIT, show_default=True, help="Page size (capped by server)."),
    click.option("--offset", type=int, default=0, show_default=True),
    click.option("--search", default="", help="Substring to match against ids."),
]


def with_page_options(func: Any) -> Any:
    for option in reversed(page_options):
        func = option(func)
    return func


@click.group()
@click.option("--api-url", default=None, help=f"API base URL [default: {settings.api_url}]")
@click.pass_context
def cli(ctx: click.Context, api_url: str | None) -> None:
    """Select and order ids from a virtual id space."""
    obj: dict[str, Any] = ctx.ensure_object(dict)
    if api_url:
        obj["api_url"] = api_url


@cli.command()
@click.option("--host", default=settings.host, show_default=True)
@click.option("--port", type=int, default=settings.port, show_default=True)
@click.option("--reload", is_flag=True, help="Reload on code changes (development).")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    from idspace.logging import setup_logging

    setup_logging()
    uvicorn.run("idspace.main:app", host=host, port=port, reload=reload, log_config=None)


@cli.command()
@with_page_options
@click.pass_context
def unselected(ctx: click.Context, limit: int, offset: int, search: str) -> None:
    """Print a page of unselected ids."""
    page = _call(ctx, ItemsClient.list_unselected, limit=limit, offset=offset, search=search)
    _echo_json({"items": page.items, "hasMore": page.has_more})


@cli.command()
@with_page_options
@click.pass_context
def selected(ctx: click.Context, limit: int, offset: int, search: str) -> None:
    """Print a page of selected ids."""
    page = _call(ctx, ItemsClient.list_selected, limit=limit, offset=offset, search=search)
    _echo_json({"items": page.items, "hasMore": page.has_more})


@cli.command()
@click.argument("ids", nargs=-1, type=int, required=True)
@click.pass_context
def add(ctx: click.Context, ids: tuple[int, ...]) -> None:
    """Add new ids to the id space."""
    _echo_json({"added": _call(ctx, ItemsClient.add, list(ids))})


@cli.command()
@click.argument("ids", nargs=-1, type=int, required=True)
@click.pass_context
def select(ctx: click.Context, ids: tuple[int, ...]) -> None:
    """Append ids to the selection."""
    selected_ids, added = _call(ctx, ItemsClient.select, list(ids))
    _echo_json({"selected": selected_ids, "added": added})


@cli.command()
@click.argument("ids", nargs=-1, type=int, required=True)
@click.pass_context
def unselect(ctx: click.Context, ids: tuple[int, ...]) -> None:
    """Remove ids from the selection."""
    _echo_json({"selected": _call(ctx, ItemsClient.unselect, list(ids))})


@cli.command()
@click.argument("ids", nargs=-1, type=int, required=True)
@click.option("--offset", type=int, default=0, show_default=True, help="Window start in the filtered selection.")
@click.option("--search", default="", help="Search filter the window is relative to.")
@click.pass_context
def reorder(ctx: click.Context, ids: tuple[int, ...], offset: int, search: str) -> None:
    """Give a window of the filtered selection a new order."""
    _echo_json({"selected": _call(ctx, ItemsClient.reorder, list(ids), offset=offset, search=search)})

"""
CLI command: fetch

Fetches oEmbed responses for one or more URLs.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

import click

from oembed_resolver.errors import OEmbedError
from oembed_resolver.models import Response
from oembed_resolver.plugins.cli import load_schema
from oembed_resolver.schema import Schema
from oembed_resolver.settings import settings as default_settings
from oembed_resolver.transport import RequestsTransport

# Configure module-level logger
logger = logging.getLogger("oembed_resolver.cli.fetch")

Outcome = Tuple[str, Optional[Response], Optional[str]]


def _fetch_one(schema: Schema, transport: RequestsTransport, url: str) -> Outcome:
    try:
        response = schema.fetch(transport, url)
    except OEmbedError as e:
        return url, None, str(e)
    if response is None:
        return url, None, "no provider supports this URL"
    return url, response, None


def _echo_response(url: str, response: Response, as_json: bool) -> None:
    if as_json:
        click.echo(response.to_json())
        return

    click.echo(f"✓ {url}")
    click.echo(f"  type:     {response.type}")
    for field in ("title", "author_name", "provider_name"):
        value = getattr(response, field)
        if value is not None:
            click.echo(f"  {field + ':':<9} {value}")
    variant = response.response_type
    if getattr(variant, "url", None):
        click.echo(f"  url:      {variant.url}")
    if getattr(variant, "width", None) and getattr(variant, "height", None):
        click.echo(f"  size:     {variant.width}x{variant.height}")


@click.command("fetch")
@click.argument("urls", nargs=-1, required=True)
@click.option("--parallel/--sequential", default=True, help="Fetch URLs in parallel")
@click.option("--json", "as_json", is_flag=True, help="Print raw oEmbed JSON")
@click.pass_context
def cli(ctx: click.Context, urls: Tuple[str, ...], parallel: bool, as_json: bool) -> None:
    """
    Fetch oEmbed responses for the given URLS.
    """
    settings = (ctx.find_root().obj or {}).get("settings", default_settings)
    schema = load_schema(ctx)

    with RequestsTransport.from_settings(settings) as transport:
        if parallel and len(urls) > 1:
            with ThreadPoolExecutor(max_workers=settings.max_workers) as ex:
                outcomes: List[Outcome] = list(
                    ex.map(lambda u: _fetch_one(schema, transport, u), urls)
                )
        else:
            outcomes = [_fetch_one(schema, transport, u) for u in urls]

    failures = 0
    for url, response, error in outcomes:
        if response is not None:
            _echo_response(url, response, as_json)
        else:
            failures += 1
            logger.error("Failed to fetch %s: %s", url, error)
            click.echo(f"✗ {url}: {error}", err=True)

    if failures:
        ctx.exit(1)

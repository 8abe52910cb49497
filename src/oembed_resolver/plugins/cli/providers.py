"""
CLI command: providers

Lists the provider catalog and refreshes it from the public list.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from oembed_resolver.errors import OEmbedError
from oembed_resolver.plugins.cli import load_schema
from oembed_resolver.schema import Schema
from oembed_resolver.settings import settings as default_settings
from oembed_resolver.transport import RequestsTransport

# Configure module-level logger
logger = logging.getLogger("oembed_resolver.cli.providers")


@click.group("providers")
def cli():
    """
    Provider catalog commands.
    """
    pass


@cli.command("list")
@click.option(
    "--search", default=None, help="Only show providers whose name contains TEXT"
)
@click.pass_context
def list_providers(ctx: click.Context, search: Optional[str]) -> None:
    """
    List providers in catalog order.
    """
    schema = load_schema(ctx)
    shown = 0
    for provider in schema:
        if search and search.lower() not in provider.name.lower():
            continue
        schemes = sum(len(e.schemes or ()) for e in provider.endpoints)
        click.echo(
            f"  - {provider.name} "
            f"({len(provider.endpoints)} endpoint(s), {schemes} scheme(s))"
        )
        shown += 1

    click.echo(f"\n{shown} of {len(schema)} providers")


@cli.command("update")
@click.option(
    "--url", default=None, help="Catalog URL (defaults to the oembed.com list)"
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="File to write the catalog to",
)
@click.pass_context
def update_providers(ctx: click.Context, url: Optional[str], output: Path) -> None:
    """
    Download the latest provider catalog and save it to OUTPUT.
    """
    settings = (ctx.find_root().obj or {}).get("settings", default_settings)
    url = url or settings.providers_url

    try:
        with RequestsTransport.from_settings(settings) as transport:
            schema = Schema.fetch_from_url(transport, url)
    except OEmbedError as e:
        logger.error("Catalog update failed: %s", e)
        raise click.ClickException(str(e))

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(schema.dump_json() + "\n", encoding="utf-8")
    click.echo(f"Saved {len(schema)} providers to {output}")

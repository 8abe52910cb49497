"""
CLI command: match

Shows which provider endpoint serves a URL.
"""

import logging

import click

from oembed_resolver.plugins.cli import load_schema

# Configure module-level logger
logger = logging.getLogger("oembed_resolver.cli.match")


@click.command("match")
@click.argument("url", type=click.STRING)
@click.pass_context
def cli(ctx: click.Context, url: str) -> None:
    """
    Find the provider endpoint whose scheme matches URL.
    """
    schema = load_schema(ctx)
    matched = schema.match_endpoint(url)

    if matched is None:
        logger.info("No provider supports %s", url)
        click.echo(f"No provider supports {url}")
        ctx.exit(1)

    click.echo(f"Provider: {matched.provider.name} ({matched.provider.url})")
    click.echo(f"Endpoint: {matched.endpoint.url}")
    click.echo(f"Scheme:   {matched.matched_scheme}")

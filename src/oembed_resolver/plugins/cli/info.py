"""
CLI command: info

Displays the package version and the size of the active provider catalog.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

import click

from oembed_resolver.plugins.cli import load_schema

# Configure module-level logger
logger = logging.getLogger("oembed_resolver.cli.info")


@click.command("info")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """
    Show package metadata and catalog statistics.
    """
    # Retrieve package version, fallback if not installed
    try:
        pkg_version = version("oembed-resolver")
        logger.debug("Retrieved package version: %s", pkg_version)
    except PackageNotFoundError:
        pkg_version = "0.0.0-dev"
        logger.warning(
            "Package 'oembed-resolver' not found; using development version placeholder."
        )

    click.echo(f"oembed-resolver version: {pkg_version}")

    schema = load_schema(ctx)
    endpoints = sum(len(p.endpoints) for p in schema)
    click.echo(f"\nProviders: {len(schema)}")
    click.echo(f"Endpoints: {endpoints}")

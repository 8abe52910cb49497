"""
CLI command: config

Configuration management commands.
"""

import logging

import click

from oembed_resolver.settings import Settings

# Configure module-level logger
logger = logging.getLogger("oembed_resolver.cli.config")


@click.group("config")
def cli():
    """
    Configuration management commands.
    """
    pass


@cli.command("show")
def show_config():
    """
    Show current configuration.
    """
    settings = Settings()

    click.echo("oembed-resolver Configuration")
    click.echo("=" * 30)
    click.echo(f"Providers URL: {settings.providers_url}")
    click.echo(f"Catalog Path: {settings.catalog_path or '(bundled)'}")
    click.echo(f"Request Timeout: {settings.request_timeout}")
    click.echo(f"User Agent: {settings.user_agent}")
    click.echo(f"Max Workers: {settings.max_workers}")
    click.echo(f"Log Level: {settings.log_level}")

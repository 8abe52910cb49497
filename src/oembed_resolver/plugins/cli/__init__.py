"""
Plugin commands for the oembed CLI.

Shared helpers live here; every other module in this package that defines
a top-level ``cli`` click command is registered automatically.
"""

import click

from oembed_resolver.errors import CatalogError, OEmbedError
from oembed_resolver.schema import Schema


def load_schema(ctx: click.Context) -> Schema:
    """
    Build the schema selected on the command line or in settings.
    """
    obj = ctx.find_root().obj or {}
    catalog = obj.get("catalog")
    try:
        if catalog:
            return Schema.from_file(catalog)
        return Schema.load_included()
    except (FileNotFoundError, OEmbedError, CatalogError) as e:
        raise click.ClickException(str(e))

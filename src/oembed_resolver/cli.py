"""
Core oembed CLI: dynamically loads commands from plugins/cli.
"""

import importlib
import logging
import pathlib
import pkgutil

import click

from oembed_resolver.plugins import cli as cli_plugins
from oembed_resolver.settings import Settings

# Logging configuration
logger = logging.getLogger("oembed_resolver")
handler = logging.StreamHandler()
formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
handler.setFormatter(formatter)
logger.addHandler(handler)

# Load global settings
settings = Settings()
logger.setLevel(getattr(logging, settings.log_level.upper()))


@click.group()
@click.option("--log-level", default=settings.log_level, help="Set logging level")
@click.option(
    "--catalog",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
    default=None,
    help="Provider catalog file (JSON or YAML) to use instead of the bundled one",
)
@click.pass_context
def main(ctx, log_level, catalog):
    """
    oEmbed provider lookup and response fetching.
    """
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level
    ctx.obj["catalog"] = catalog or settings.catalog_path
    ctx.obj["settings"] = settings

    # Update logging level
    logger.setLevel(getattr(logging, log_level.upper()))


def load_commands():
    """
    Register the subcommands shipped in oembed_resolver.plugins.cli.

    Every module there exposing a click command named ``cli`` becomes a
    subcommand of ``oembed``. A plugin that fails to import is logged and
    skipped, so the remaining commands stay usable.
    """
    prefix = f"{cli_plugins.__name__}."
    for plugin in pkgutil.iter_modules(cli_plugins.__path__, prefix):
        try:
            module = importlib.import_module(plugin.name)
        except Exception as e:
            logger.error("Skipping plugin %s: %s", plugin.name, e)
            continue

        command = getattr(module, "cli", None)
        if isinstance(command, click.Command):
            main.add_command(command)


# Load all plugin commands
load_commands()

if __name__ == "__main__":
    main()

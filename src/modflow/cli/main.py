"""modflow CLI main entry point with global options."""

import click

from .. import __version__
from ..config import configure_logging, resolve_settings
from ..context import ModFlowContext


@click.group()
@click.version_option(__version__, prog_name="modflow")
@click.option(
    "--log-file", type=click.Path(), help="Log file (overrides $MODFLOW_LOG_FILE)"
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (overrides $MODFLOW_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx, log_file, log_level):
    """modflow - cursor-anchored mods for JavaScript and TypeScript."""
    ctx.ensure_object(ModFlowContext)

    # Resolve settings once for all subcommands
    settings = resolve_settings(log_file=log_file, log_level=log_level)
    configure_logging(settings)
    ctx.obj.settings = settings


# Register commands at module level so tests can import cli with commands attached
from .commands.apply import apply
from .commands.list_mods import list_mods
from .commands.serve import serve

cli.add_command(apply)
cli.add_command(list_mods)
cli.add_command(serve)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

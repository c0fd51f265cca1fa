"""List-mods command - print the registered mod names."""

import json

import click

from ...engine import list_mods as engine_list_mods


@click.command("list-mods")
def list_mods():
    """Print the available mods as JSON: {"mods": [...]}."""
    click.echo(json.dumps(engine_list_mods().model_dump()))

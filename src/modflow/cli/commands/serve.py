"""Serve command - answer NDJSON requests on stdin/stdout."""

import sys

import click

from ...context import pass_context
from ...server import ModFlowServer


@click.command()
@pass_context
def serve(ctx):
    """Run the request loop until stdin closes.

    Each input line is a JSON request, each output line the JSON response:

        {"id": 1, "method": "list_mods"}
        {"id": 2, "method": "move_left",
         "params": {"source": "f(a, b)", "cursor": {"line": 0, "column": 5}}}
    """
    ModFlowServer(ctx.settings).serve(sys.stdin, sys.stdout)

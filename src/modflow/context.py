"""modflow context for passing state between CLI commands."""

from typing import Optional

import click

from .config import Settings


class ModFlowContext:
    def __init__(self):
        self.settings: Optional[Settings] = None


pass_context = click.make_pass_decorator(ModFlowContext, ensure=True)

"""Apply command - run one mod against a file."""

import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from ...context import pass_context
from ...engine import apply_mod
from ...errors import DEBUG
from ...models import ModFailure, NodeDescriptor, Position
from ...parser import LANGUAGE_VARIANTS, detect_variant


@click.command()
@click.argument("mod")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--line", type=int, help="Cursor line (0-based)")
@click.option("--column", type=int, help="Cursor column (0-based)")
@click.option("--node", "node_json", help="Captured node descriptor as JSON")
@click.option(
    "--lang",
    "language",
    type=click.Choice(LANGUAGE_VARIANTS),
    help="Language variant (default: from file extension)",
)
@click.option("--write", is_flag=True, help="Write the edited source back to FILE")
@pass_context
def apply(ctx, mod, file, line, column, node_json, language, write):
    """Apply MOD to FILE at a cursor or a captured node.

    Prints the result as JSON. Failures are printed as {"code", "message"}
    and exit with status 1; debug output is printed as plain text.

    Examples:
        modflow apply move_left app.ts --line 3 --column 12
        modflow apply delete_function app.js --line 0 --column 2 --write
        modflow apply delete_closest_tag view.tsx --node '{"range": ..., "text": ..., "type": ...}'
    """
    if node_json:
        try:
            anchor = NodeDescriptor.model_validate_json(node_json)
        except ValidationError as e:
            raise click.BadParameter(str(e), param_hint="--node") from e
    elif line is not None and column is not None:
        anchor = Position(line=line, column=column)
    else:
        raise click.UsageError("Give either --line and --column, or --node")

    if language is None:
        language = detect_variant(str(file))

    source = file.read_text(encoding="utf-8")
    result = apply_mod(mod, source, language, anchor)

    if isinstance(result, ModFailure):
        if result.code == DEBUG:
            click.echo(result.message)
            sys.exit(0)
        click.echo(json.dumps(result.model_dump()))
        sys.exit(1)

    if write and result.source is not None:
        file.write_text(result.source, encoding="utf-8")

    # Only the edit itself is printed, not the full sources
    output = result.model_dump(exclude_none=True, exclude={"original_source", "source"})
    click.echo(json.dumps(output))

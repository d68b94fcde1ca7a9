"""Steps command - inspect the step catalog."""

import click

from ...context import pass_context
from ...errors import CatalogError
from ..helpers import emit, fail


@click.command()
@click.argument("name", required=False)
@click.option("--indent", type=int, default=2, help="JSON indent (0 for compact)")
@pass_context
def steps(ctx, name, indent):
    """List known steps, or show the argument schema of NAME.

    Examples:
        pipedit --steps steps.json steps
        pipedit --steps steps.json steps sh
    """
    try:
        directory = ctx.load_catalog()
    except CatalogError as e:
        fail(str(e))

    if name is None:
        for step_name in directory.names():
            click.echo(step_name)
        return

    schema = directory.lookup(name)
    if schema is None:
        fail(f"Unknown step: {name}")
    emit(schema.model_dump(by_alias=True), indent)

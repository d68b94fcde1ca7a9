"""Decode command - pipeline JSON to editor tree."""

import click

from ...context import pass_context
from ...convert import decode_pipeline
from ...errors import CatalogError, ConversionError
from ..helpers import emit, fail, load_document


@click.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--indent", type=int, default=2, help="JSON indent (0 for compact)")
@pass_context
def decode(ctx, source, indent):
    """Decode a pipeline JSON document into the editor tree.

    Examples:
        pipedit decode pipeline.json
        cat pipeline.json | pipedit decode
        pipedit --steps steps.json decode pipeline.json
    """
    document = load_document(source)
    try:
        tree = decode_pipeline(document, ctx.load_catalog())
    except (CatalogError, ConversionError) as e:
        fail(str(e))
    emit(tree.model_dump(mode="json", by_alias=True), indent)

"""Encode command - editor tree to pipeline JSON."""

import click
from pydantic import ValidationError as ModelError

from ...context import pass_context
from ...convert import encode_pipeline
from ...errors import CatalogError, ConversionError
from ...models import Pipeline
from ..helpers import emit, fail, load_document


@click.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--indent", type=int, default=2, help="JSON indent (0 for compact)")
@pass_context
def encode(ctx, source, indent):
    """Encode an editor tree (as printed by decode) back to pipeline JSON.

    Examples:
        pipedit encode tree.json
        pipedit decode pipeline.json | pipedit encode
    """
    data = load_document(source)
    try:
        tree = Pipeline.model_validate(data)
    except ModelError as e:
        fail(f"Invalid editor tree: {e}")
    try:
        document = encode_pipeline(tree, ctx.load_catalog())
    except (CatalogError, ConversionError) as e:
        fail(str(e))
    emit(document, indent)

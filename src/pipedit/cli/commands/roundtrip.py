"""Roundtrip command - decode then encode a pipeline."""

import click

from ...context import pass_context
from ...convert import decode_pipeline, encode_pipeline
from ...errors import CatalogError, ConversionError
from ..helpers import emit, fail, load_document


@click.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--indent", type=int, default=2, help="JSON indent (0 for compact)")
@click.option(
    "--check",
    is_flag=True,
    help="Exit 1 if the re-encoded document differs from the input",
)
@pass_context
def roundtrip(ctx, source, indent, check):
    """Decode a pipeline and encode it again.

    The output is what the editor would save without any edits. With
    --check, differences from the input are reported as an error.

    Examples:
        pipedit roundtrip pipeline.json
        pipedit roundtrip --check pipeline.json
    """
    document = load_document(source)
    try:
        directory = ctx.load_catalog()
        result = encode_pipeline(decode_pipeline(document, directory), directory)
    except (CatalogError, ConversionError) as e:
        fail(str(e))
    emit(result, indent)
    if check and result != document:
        fail("re-encoded pipeline differs from the input")

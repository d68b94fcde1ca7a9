"""pipedit CLI main entry point with global options."""

import click

from ..context import PipeditContext
from .helpers import configure_logging


@click.group()
@click.option(
    "--steps",
    type=click.Path(dir_okay=False),
    help="Step catalog JSON (overrides $PIPEDIT_STEPS)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug details to stderr")
@click.pass_context
def cli(ctx, steps, verbose):
    """pipedit - convert pipeline JSON to and from the editor tree."""
    ctx.ensure_object(PipeditContext)
    configure_logging(verbose)
    ctx.obj.steps_path = steps


# Register commands at module level so tests can import cli with commands attached
from .commands.decode import decode  # noqa: E402
from .commands.encode import encode  # noqa: E402
from .commands.roundtrip import roundtrip  # noqa: E402
from .commands.steps import steps  # noqa: E402

cli.add_command(decode)
cli.add_command(encode)
cli.add_command(roundtrip)
cli.add_command(steps)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

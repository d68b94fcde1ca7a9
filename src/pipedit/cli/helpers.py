"""Shared helpers for CLI commands."""

import json
import logging
import sys
from typing import Any, IO, NoReturn

import click

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; debug detail only with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    logging.getLogger("pipedit").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )


def fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def load_document(stream: IO[str]) -> Any:
    """Parse JSON from an open file (or stdin)."""
    try:
        return json.load(stream)
    except json.JSONDecodeError as e:
        fail(f"Invalid JSON in {getattr(stream, 'name', '<stdin>')}: {e}")


def emit(data: Any, indent: int) -> None:
    click.echo(json.dumps(data, indent=indent or None, ensure_ascii=False))

"""Command line interface for pipedit.

``cli`` and ``main`` resolve on first access so that importing
``pipedit.cli`` (or running ``python -m pipedit.cli.main``) does not load
the command modules twice.
"""

__all__ = ["cli", "main"]


def __getattr__(name):
    if name not in __all__:
        raise AttributeError(name)
    from importlib import import_module

    entry = import_module(".main", __name__)
    return getattr(entry, name)

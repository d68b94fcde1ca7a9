"""pipedit context for passing state between commands."""

from typing import Optional

import click

from . import catalog
from .catalog import StepCatalog


class PipeditContext:
    def __init__(self):
        self.steps_path: Optional[str] = None
        self.catalog: Optional[StepCatalog] = None

    def load_catalog(self) -> StepCatalog:
        """Load the step catalog once per invocation.

        Resolution order is ``--steps``, ``$PIPEDIT_STEPS``, then a catalog
        file in the working directory; with none of those every step is
        treated as unknown.
        """
        if self.catalog is None:
            self.catalog = catalog.use(self.steps_path)
        return self.catalog


pass_context = click.make_pass_decorator(PipeditContext, ensure=True)

"""Step schema directory backed by step metadata."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Protocol, Tuple

from pydantic import ValidationError as ModelError

from pipedit.errors import CatalogError
from pipedit.models import StepMetadata, StepSchema

logger = logging.getLogger(__name__)

__all__ = ["SchemaDirectory", "StepCatalog"]


class SchemaDirectory(Protocol):
    def lookup(self, step_name: str) -> Optional[StepSchema]: ...


class StepCatalog:
    """Read-only map of step name to argument schema.

    ``lookup`` returns None for steps the catalog does not know; callers
    treat those as pass-through data.
    """

    def __init__(self, schemas: Optional[Mapping[str, StepSchema]] = None):
        self._schemas: Dict[str, StepSchema] = dict(schemas or {})

    def lookup(self, step_name: str) -> Optional[StepSchema]:
        return self._schemas.get(step_name)

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._schemas))

    def __contains__(self, step_name: object) -> bool:
        return step_name in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def __repr__(self) -> str:
        return f"StepCatalog({len(self._schemas)} steps)"

    @classmethod
    def from_metadata(cls, entries: Iterable[Any]) -> StepCatalog:
        """Build from the engine's step metadata list.

        Entries that are not step metadata are skipped.
        """

        schemas: Dict[str, StepSchema] = {}
        for index, raw in enumerate(entries):
            try:
                meta = StepMetadata.model_validate(raw)
            except ModelError as e:
                logger.warning(
                    "Skipping step metadata entry %d: %s",
                    index,
                    e.errors()[0]["msg"],
                )
                continue
            schemas[meta.function_name] = meta.to_schema()
        return cls(schemas)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> StepCatalog:
        """Build from ``{stepName: {parameterOrder, positionalParameter}}``."""

        schemas: Dict[str, StepSchema] = {}
        for name, raw in mapping.items():
            try:
                schemas[name] = StepSchema.model_validate(raw)
            except ModelError as e:
                logger.warning(
                    "Skipping step schema %r: %s", name, e.errors()[0]["msg"]
                )
        return cls(schemas)

    @classmethod
    def from_data(cls, data: Any) -> StepCatalog:
        """Build from parsed catalog JSON of either supported shape."""

        if isinstance(data, list):
            return cls.from_metadata(data)
        if isinstance(data, dict):
            return cls.from_mapping(data)
        raise CatalogError(
            f"Step catalog must be a list or an object, got {type(data).__name__}"
        )

"""Editor tree: the UI-facing shape of a pipeline."""

from __future__ import annotations

import itertools
from typing import Any, Dict, Iterator, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .cells import literal, parse_cell

_ids = itertools.count(1)


def next_id() -> int:
    """Return a process-unique node id."""

    return next(_ids)


def default_agent() -> Any:
    return literal("any").model_dump(by_alias=True)


class StepNode(BaseModel):
    """A step call; container steps own nested ``children``."""

    id: int = Field(default_factory=next_id)
    name: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)
    is_container: bool = False
    children: List[StepNode] = Field(default_factory=list)
    unknown: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("data", mode="before")
    @classmethod
    def cells(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {key: parse_cell(value) for key, value in v.items()}
        return v


class StageNode(BaseModel):
    """A stage: either a run of ``steps`` or a set of parallel ``children``."""

    id: int = Field(default_factory=next_id)
    name: Optional[str] = None
    steps: List[StepNode] = Field(default_factory=list)
    children: List[StageNode] = Field(default_factory=list)
    unknown: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_parallel(self) -> bool:
        return bool(self.children)


Node = Union["Pipeline", StageNode, StepNode]


class Pipeline(BaseModel):
    """Root of the editor tree."""

    id: int = Field(default_factory=next_id)
    agent: Any = Field(default_factory=default_agent)
    stages: List[StageNode] = Field(default_factory=list)
    unknown: Dict[str, Any] = Field(default_factory=dict)

    def walk(self) -> Iterator[Node]:
        """Yield every node depth-first, the pipeline itself first."""

        yield self
        for stage in self.stages:
            yield from _walk_stage(stage)

    def find_node(self, node_id: int) -> Optional[Node]:
        """Get a node by id, or None if not found."""

        return next((node for node in self.walk() if node.id == node_id), None)


def _walk_stage(stage: StageNode) -> Iterator[Node]:
    yield stage
    for step in stage.steps:
        yield from _walk_step(step)
    for child in stage.children:
        yield from _walk_stage(child)


def _walk_step(step: StepNode) -> Iterator[Node]:
    yield step
    for child in step.children:
        yield from _walk_step(child)


__all__ = ["Node", "Pipeline", "StageNode", "StepNode", "next_id"]

"""Editor tree → pipeline JSON."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from pipedit import catalog
from pipedit.catalog import SchemaDirectory
from pipedit.errors import ValidationError
from pipedit.models import Pipeline, StageNode, StepNode

from .binder import encode_arguments

DEFAULT_BRANCH = "default"

__all__ = ["DEFAULT_BRANCH", "encode_pipeline", "encode_stage", "encode_step", "encode_steps"]


def _splice(out: Dict[str, Any], unknown: Dict[str, Any]) -> Dict[str, Any]:
    """Restore captured unknown keys; keys already emitted win."""

    for key, value in unknown.items():
        if key not in out:
            out[key] = copy.deepcopy(value)
    return out


def _require_name(node: Any, what: str, path: str) -> str:
    if not isinstance(node.name, str) or not node.name:
        raise ValidationError(f"{what} has no name", path)
    return node.name


def encode_pipeline(
    pipeline: Pipeline, directory: Optional[SchemaDirectory] = None
) -> Dict[str, Any]:
    """Encode an editor tree as a ``{"pipeline": {...}}`` document."""

    path = "pipeline"
    if directory is None:
        directory = catalog.current()
    if pipeline.agent is None:
        raise ValidationError("pipeline has no agent", path)

    out = {
        "agent": copy.deepcopy(pipeline.agent),
        "stages": [
            _encode_stage(stage, directory, f"{path}.stages[{i}]")
            for i, stage in enumerate(pipeline.stages)
        ],
    }
    return {"pipeline": _splice(out, pipeline.unknown)}


def encode_stage(
    node: StageNode,
    directory: Optional[SchemaDirectory] = None,
    path: str = "stage",
) -> Dict[str, Any]:
    """Encode one stage.

    A stage with children is written in the ``parallel`` notation; a stage
    with steps becomes a single ``default`` branch.
    """

    if directory is None:
        directory = catalog.current()
    return _encode_stage(node, directory, path)


def _encode_stage(node: StageNode, directory: SchemaDirectory, path: str) -> Dict[str, Any]:
    name = _require_name(node, "stage", path)
    if node.children and node.steps:
        raise ValidationError("stage has both steps and child stages", path)

    out: Dict[str, Any] = {"name": name}
    if node.children:
        out["parallel"] = [
            _encode_stage(child, directory, f"{path}.children[{i}]")
            for i, child in enumerate(node.children)
        ]
    else:
        out["branches"] = [
            {
                "name": DEFAULT_BRANCH,
                "steps": _encode_steps(node.steps, directory, f"{path}.steps"),
            }
        ]
    return _splice(out, node.unknown)


def encode_step(
    node: StepNode,
    directory: Optional[SchemaDirectory] = None,
    path: str = "step",
) -> Dict[str, Any]:
    """Encode one step and its nested children."""

    if directory is None:
        directory = catalog.current()
    return _encode_step(node, directory, path)


def _encode_step(node: StepNode, directory: SchemaDirectory, path: str) -> Dict[str, Any]:
    name = _require_name(node, "step", path)
    out: Dict[str, Any] = {
        "name": name,
        "arguments": encode_arguments(directory.lookup(name), node.data, path),
    }
    if node.children:
        out["children"] = _encode_steps(node.children, directory, f"{path}.children")
    return _splice(out, node.unknown)


def _encode_steps(
    nodes: List[StepNode], directory: SchemaDirectory, path: str
) -> List[Dict[str, Any]]:
    return [_encode_step(node, directory, f"{path}[{i}]") for i, node in enumerate(nodes)]


def encode_steps(
    nodes: List[StepNode],
    directory: Optional[SchemaDirectory] = None,
    path: str = "steps",
) -> List[Dict[str, Any]]:
    """Encode a bare list of steps, e.g. for copying a snippet."""

    if directory is None:
        directory = catalog.current()
    return _encode_steps(nodes, directory, path)

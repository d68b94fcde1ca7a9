"""Pipeline JSON → editor tree."""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional

from pipedit import catalog
from pipedit.catalog import SchemaDirectory
from pipedit.errors import MalformedPipeline, MalformedStage
from pipedit.models import Pipeline, StageNode, StepNode

from .binder import decode_arguments

logger = logging.getLogger(__name__)

PIPELINE_KEYS = frozenset({"agent", "stages"})
STAGE_KEYS = frozenset({"name", "branches", "parallel"})
STEP_KEYS = frozenset({"name", "arguments", "children"})

__all__ = ["decode_pipeline", "decode_stage", "decode_step", "decode_steps"]


def _unknown(raw: Dict[str, Any], known: frozenset) -> Dict[str, Any]:
    return {key: copy.deepcopy(value) for key, value in raw.items() if key not in known}


def _require_object(raw: Any, what: str, path: str) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise MalformedPipeline(f"{what} must be an object", path)
    return raw


def _list(raw: Dict[str, Any], key: str, path: str) -> List[Any]:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedPipeline(f"'{key}' must be a list", path)
    return value


def _name(raw: Dict[str, Any], what: str, path: str, error: type) -> str:
    name = raw.get("name")
    if name is None or name == "":
        raise error(f"{what} has no name", path)
    if not isinstance(name, str):
        raise MalformedPipeline("'name' must be a string", path)
    return name


def decode_pipeline(
    document: Any, directory: Optional[SchemaDirectory] = None
) -> Pipeline:
    """Decode a ``{"pipeline": {...}}`` document into an editor tree.

    Keys of the pipeline object other than ``agent`` and ``stages`` are
    kept in the tree's ``unknown`` bag. A missing agent defaults to
    ``any``.
    """

    path = "pipeline"
    if not isinstance(document, dict) or not isinstance(document.get(path), dict):
        raise MalformedPipeline("document has no 'pipeline' object", path)
    raw = document[path]
    if directory is None:
        directory = catalog.current()

    stages = [
        _decode_stage(stage, directory, f"{path}.stages[{i}]")
        for i, stage in enumerate(_list(raw, "stages", path))
    ]
    fields: Dict[str, Any] = {"stages": stages, "unknown": _unknown(raw, PIPELINE_KEYS)}
    if raw.get("agent") is not None:
        fields["agent"] = copy.deepcopy(raw["agent"])
    return Pipeline(**fields)


def decode_stage(
    raw: Any,
    directory: Optional[SchemaDirectory] = None,
    path: str = "stage",
) -> StageNode:
    """Decode one stage.

    ``parallel`` stages and stages with several ``branches`` both decode
    to a stage whose ``children`` are the parallel sub-stages; a stage with
    a single branch decodes to a plain run of ``steps``.
    """

    if directory is None:
        directory = catalog.current()
    return _decode_stage(raw, directory, path)


def _decode_stage(raw: Any, directory: SchemaDirectory, path: str) -> StageNode:
    raw = _require_object(raw, "stage", path)
    has_branches = raw.get("branches") is not None
    has_parallel = raw.get("parallel") is not None
    if has_branches and has_parallel:
        raise MalformedStage("stage has both 'branches' and 'parallel'", path)
    if not has_branches and not has_parallel:
        raise MalformedStage("stage has neither 'branches' nor 'parallel'", path)

    stage = StageNode(
        name=_name(raw, "stage", path, MalformedStage),
        unknown=_unknown(raw, STAGE_KEYS),
    )

    if has_parallel:
        stage.children = [
            _decode_stage(child, directory, f"{path}.parallel[{i}]")
            for i, child in enumerate(_list(raw, "parallel", path))
        ]
        return stage

    branches = _list(raw, "branches", path)
    if len(branches) == 1:
        stage.steps = _decode_branch(branches[0], directory, f"{path}.branches[0]")
    else:
        # Legacy parallel notation: each branch becomes a child stage.
        for i, branch in enumerate(branches):
            branch_path = f"{path}.branches[{i}]"
            stage.children.append(
                StageNode(
                    name=_name(
                        _require_object(branch, "branch", branch_path),
                        "branch",
                        branch_path,
                        MalformedStage,
                    ),
                    steps=_decode_branch(branch, directory, branch_path),
                )
            )
    return stage


def _decode_branch(raw: Any, directory: SchemaDirectory, path: str) -> List[StepNode]:
    raw = _require_object(raw, "branch", path)
    return [
        _decode_step(step, directory, f"{path}.steps[{i}]")
        for i, step in enumerate(_list(raw, "steps", path))
    ]


def decode_step(
    raw: Any,
    directory: Optional[SchemaDirectory] = None,
    path: str = "step",
) -> StepNode:
    """Decode one step and its nested children."""

    if directory is None:
        directory = catalog.current()
    return _decode_step(raw, directory, path)


def _decode_step(raw: Any, directory: SchemaDirectory, path: str) -> StepNode:
    raw = _require_object(raw, "step", path)
    name = _name(raw, "step", path, MalformedPipeline)
    schema = directory.lookup(name)
    if schema is None:
        logger.debug("No schema for step %r at %s; passing arguments through", name, path)

    data = decode_arguments(schema, raw.get("arguments"), path)
    children = [
        _decode_step(child, directory, f"{path}.children[{i}]")
        for i, child in enumerate(_list(raw, "children", path))
    ]
    return StepNode(
        name=name,
        data=data,
        is_container=bool(children),
        children=children,
        unknown=_unknown(raw, STEP_KEYS),
    )


def decode_steps(
    raw: Any,
    directory: Optional[SchemaDirectory] = None,
    path: str = "steps",
) -> List[StepNode]:
    """Decode a bare list of steps, e.g. a copied snippet."""

    if directory is None:
        directory = catalog.current()
    if not isinstance(raw, list):
        raise MalformedPipeline("steps must be a list", path)
    return [_decode_step(step, directory, f"{path}[{i}]") for i, step in enumerate(raw)]

"""Pydantic models for pipelines, editor trees and step schemas."""

from .cells import ValueCell, dump_cell, expression, literal, parse_cell
from .schema import StepMetadata, StepParameter, StepSchema
from .tree import Pipeline, StageNode, StepNode

__all__ = [
    "Pipeline",
    "StageNode",
    "StepMetadata",
    "StepNode",
    "StepParameter",
    "StepSchema",
    "ValueCell",
    "dump_cell",
    "expression",
    "literal",
    "parse_cell",
]

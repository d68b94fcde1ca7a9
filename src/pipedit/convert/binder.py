"""Argument binding between JSON step arguments and named parameter data.

The JSON grammar lets a step take its arguments either as a single value
cell or as a list of ``{key, value}`` pairs, and a step with exactly one
required parameter may omit that parameter's name. Binding resolves the
unnamed form against the step's schema:

====================  ==============================  ==========================
arguments             schema with positional param    no schema / no positional
====================  ==============================  ==========================
``cell``              ``{positional: cell}``          ``{UNNAMED: cell}``
``[cell]``            ``{positional: cell}``          ``{UNNAMED_LISTED: cell}``
``[{key, value}..]``  ``{key: value, ...}``           ``{key: value, ...}``
====================  ==============================  ==========================

Encoding inverts the table, preferring the compact single-cell form for a
step whose only argument is its positional parameter.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pipedit.errors import MalformedArguments, ValidationError
from pipedit.models import StepSchema, dump_cell, parse_cell
from pipedit.models.cells import is_cell_object

UNNAMED = "$unnamed"
UNNAMED_LISTED = "$unnamed[]"
UNNAMED_SLOTS = (UNNAMED, UNNAMED_LISTED)

_SINGLE = "single"
_LIST = "list"
_UNNAMED_SLOT = {_SINGLE: UNNAMED, _LIST: UNNAMED_LISTED}


def is_named(arg: Any) -> bool:
    """Check if a list element is a ``{key, value}`` pair rather than a cell."""

    return (
        isinstance(arg, dict)
        and isinstance(arg.get("key"), str)
        and "value" in arg
        and not is_cell_object(arg)
    )


def _unnamed(schema: Optional[StepSchema], shape: str, cell: Any) -> Dict[str, Any]:
    positional = schema.positional_parameter if schema else None
    return {positional or _UNNAMED_SLOT[shape]: parse_cell(cell)}


def decode_arguments(
    schema: Optional[StepSchema],
    arguments: Any,
    path: Optional[str] = None,
) -> Dict[str, Any]:
    """Bind JSON ``arguments`` to a parameter-name → cell map."""

    if arguments is None:
        return {}
    if not isinstance(arguments, list):
        return _unnamed(schema, _SINGLE, arguments)

    unnamed = [arg for arg in arguments if not is_named(arg)]
    if not unnamed:
        data: Dict[str, Any] = {}
        for arg in arguments:
            key = arg["key"]
            if key in data:
                raise MalformedArguments(f"duplicate argument {key!r}", path)
            data[key] = parse_cell(arg["value"])
        return data

    if len(arguments) == 1:
        return _unnamed(schema, _LIST, arguments[0])
    if len(unnamed) < len(arguments):
        raise MalformedArguments("mixes named and unnamed arguments", path)
    raise MalformedArguments(
        f"has {len(unnamed)} unnamed arguments; only a single one is allowed",
        path,
    )


def _ordered_keys(schema: Optional[StepSchema], data: Dict[str, Any]) -> List[str]:
    if schema is None:
        return list(data)
    ordered = [name for name in schema.parameter_order if name in data]
    ordered.extend(name for name in data if name not in schema.parameter_order)
    return ordered


def encode_arguments(
    schema: Optional[StepSchema],
    data: Dict[str, Any],
    path: Optional[str] = None,
) -> Any:
    """Inverse of :func:`decode_arguments`."""

    if len(data) == 1:
        (key,) = data
        positional = schema.positional_parameter if schema else None
        if key == UNNAMED or (positional is not None and key == positional):
            return dump_cell(data[key])
        if key == UNNAMED_LISTED:
            return [dump_cell(data[key])]
    elif any(slot in data for slot in UNNAMED_SLOTS):
        raise ValidationError(
            "unnamed argument cannot be combined with named arguments", path
        )

    return [
        {"key": key, "value": dump_cell(data[key])}
        for key in _ordered_keys(schema, data)
    ]


__all__ = [
    "UNNAMED",
    "UNNAMED_LISTED",
    "UNNAMED_SLOTS",
    "decode_arguments",
    "encode_arguments",
    "is_named",
]

"""Value cells: the tagged literal-or-expression values of step arguments."""

from __future__ import annotations

import copy
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_serializer, model_validator


class ValueCell(BaseModel):
    """Literal (``isLiteral: true``) or deferred expression value.

    Unrecognised keys on the JSON object are kept as extras so the cell
    dumps back to what it was read from, in the key order it was read in.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    is_literal: bool = Field(alias="isLiteral")
    value: Any = None

    _key_order: Optional[Tuple[str, ...]] = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(cls, data: Any, handler):
        cell = handler(data)
        if isinstance(data, dict) and isinstance(cell, ValueCell):
            order = tuple(data)
            dumped = tuple(cell.model_dump(by_alias=True))
            # Only a non-canonical order is recorded.
            if order != dumped and set(order) == set(dumped):
                cell._key_order = order
        return cell

    @model_serializer(mode="wrap")
    def _dump_in_source_order(self, handler):
        dumped = handler(self)
        if self._key_order is None or not isinstance(dumped, dict):
            return dumped
        if set(self._key_order) != set(dumped):
            return dumped
        ordered = {key: dumped[key] for key in self._key_order}
        ordered.update(dumped)
        return ordered

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ValueCell):
            return NotImplemented
        return self.model_dump(by_alias=True) == other.model_dump(by_alias=True)


def literal(value: Any) -> ValueCell:
    """Build a literal cell."""

    return ValueCell(is_literal=True, value=value)


def expression(value: Any) -> ValueCell:
    """Build a non-literal (expression) cell."""

    return ValueCell(is_literal=False, value=value)


def is_cell_object(raw: Any) -> bool:
    return (
        isinstance(raw, dict)
        and isinstance(raw.get("isLiteral"), bool)
        and "value" in raw
    )


def parse_cell(raw: Any) -> Any:
    """Turn a JSON value into a cell.

    ``{isLiteral, value}`` objects become :class:`ValueCell`; anything else
    is an opaque expression and is returned as a deep copy.
    """

    if isinstance(raw, ValueCell):
        return raw
    if is_cell_object(raw):
        return ValueCell.model_validate(copy.deepcopy(raw))
    return copy.deepcopy(raw)


def dump_cell(cell: Any) -> Any:
    """Inverse of :func:`parse_cell`."""

    if isinstance(cell, ValueCell):
        return cell.model_dump(by_alias=True)
    return copy.deepcopy(cell)


__all__ = [
    "ValueCell",
    "dump_cell",
    "expression",
    "is_cell_object",
    "literal",
    "parse_cell",
]

"""Step argument schemas and the step metadata they are derived from."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StepSchema(BaseModel):
    """Argument schema of one step."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    parameter_order: List[str] = Field(default_factory=list, alias="parameterOrder")
    positional_parameter: Optional[str] = Field(
        default=None, alias="positionalParameter"
    )


class StepParameter(BaseModel):
    """Parameter entry of the engine's step metadata."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str
    is_required: bool = Field(default=False, alias="isRequired")


class StepMetadata(BaseModel):
    """Step entry of the engine's step metadata catalog."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    function_name: str = Field(alias="functionName")
    display_name: Optional[str] = Field(default=None, alias="displayName")
    parameters: List[StepParameter] = Field(default_factory=list)
    is_block_container: bool = Field(default=False, alias="isBlockContainer")

    def to_schema(self) -> StepSchema:
        """Derive the argument schema.

        The positional parameter is the sole required parameter; steps with
        zero or several required parameters have none.
        """

        required = [p.name for p in self.parameters if p.is_required]
        return StepSchema(
            parameter_order=[p.name for p in self.parameters],
            positional_parameter=required[0] if len(required) == 1 else None,
        )


__all__ = ["StepMetadata", "StepParameter", "StepSchema"]

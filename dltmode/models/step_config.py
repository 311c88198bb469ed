"""Step configuration model for pipeline definitions."""

import re
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dltmode.core.capabilities import parse_capability
from dltmode.models.step import TransformationStep

TABLE_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class StepConfig(BaseModel):
    """
    A single transformation step in a pipeline definition.

    Allows flexible step-specific fields beyond the known ones.
    """

    model_config = ConfigDict(extra="allow")

    name: str = Field(description="Step (target table) name, unique within the pipeline")
    capabilities: List[str] = Field(
        default_factory=list,
        description="Capabilities the step requires (e.g., 'type_cast', 'join')",
    )
    comment: Optional[str] = Field(default=None, description="Table comment")
    source: Optional[str] = Field(
        default=None, description="Upstream table or path the step reads from"
    )
    options: dict[str, Any] = Field(
        default_factory=dict, description="Free-form options used when scaffolding"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Step names become table names and scaffold file names."""
        if not TABLE_NAME_PATTERN.fullmatch(v):
            raise ValueError(
                f"step name '{v}' must start with a letter or underscore "
                "and contain only letters, digits and underscores"
            )
        return v

    @field_validator("capabilities")
    @classmethod
    def validate_capabilities(cls, v):
        """Reject names outside the capability vocabulary, keep the slugs."""
        return [parse_capability(name).value for name in v]

    def to_step(self) -> TransformationStep:
        """Build the TransformationStep described by this config."""
        return TransformationStep(capabilities=self.capabilities, name=self.name)

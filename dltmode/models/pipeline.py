"""Pipeline definition model combining all configuration components."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from dltmode.models.settings import PipelineSettings
from dltmode.models.step_config import StepConfig


class PipelineDefinition(BaseModel):
    """Complete definition of a Delta Live Tables pipeline to plan."""

    name: str = Field(description="Pipeline name (required)")
    extends: Optional[str] = Field(
        default=None, description="Path to parent definition file for inheritance"
    )
    description: Optional[str] = Field(default=None, description="Free-text description")
    settings: PipelineSettings = Field(
        default_factory=PipelineSettings, description="Planning settings"
    )
    steps: List[StepConfig] = Field(
        default_factory=list, description="Transformation steps, in pipeline order"
    )

    @field_validator("steps")
    @classmethod
    def validate_unique_names(cls, v):
        """Step names must be unique within a pipeline."""
        seen = set()
        duplicates = []
        for step in v:
            if step.name in seen:
                duplicates.append(step.name)
            seen.add(step.name)
        if duplicates:
            raise ValueError(f"duplicate step names: {', '.join(sorted(set(duplicates)))}")
        return v

    def get_step(self, name: str) -> StepConfig | None:
        for step in self.steps:
            if step.name == name:
                return step
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "PipelineDefinition":
        """Create PipelineDefinition from dictionary (after inheritance resolution)."""
        return cls(**data)

    @classmethod
    def from_yaml(
        cls, path: str, cli_vars: dict[str, str] | None = None
    ) -> "PipelineDefinition":
        """
        Load pipeline definition from YAML file with inheritance resolution.

        Args:
            path: Path to pipeline YAML file
            cli_vars: Variables passed via CLI (e.g., --vars key=value)

        Returns:
            Fully resolved PipelineDefinition instance
        """
        from dltmode.models.loader import load_pipeline

        return load_pipeline(path, cli_vars)

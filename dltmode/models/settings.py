"""Pipeline settings model for pipeline definitions."""

from typing import Literal

from pydantic import BaseModel, Field


class PipelineSettings(BaseModel):
    """Settings controlling how a pipeline is planned and scaffolded."""

    allow_imperative: bool = Field(
        default=True,
        description="Allow steps that need a Python extension. When false, planning fails on any such step.",
    )
    default_language: Literal["sql", "python"] = Field(
        default="sql",
        description="Language used to scaffold declarative steps",
    )

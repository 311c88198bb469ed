"""Models module for pipeline definitions."""

from dltmode.models.step import ExecutionMode, TransformationStep, Verdict
from dltmode.models.settings import PipelineSettings
from dltmode.models.step_config import StepConfig
from dltmode.models.pipeline import PipelineDefinition
from dltmode.models.loader import load_pipeline

__all__ = [
    "ExecutionMode",
    "TransformationStep",
    "Verdict",
    "PipelineSettings",
    "StepConfig",
    "PipelineDefinition",
    "load_pipeline",
]

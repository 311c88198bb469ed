"""Core module for dltmode package."""

from dltmode.core.capabilities import (
    DECLARATIVE_SAFE,
    IMPERATIVE_ONLY,
    IMPERATIVE_PRIORITY,
    Capability,
    parse_capabilities,
    parse_capability,
)
from dltmode.core.exceptions import (
    CapabilityError,
    DltModeError,
    InvalidStepError,
    PipelineError,
    PlanError,
    RenderError,
)
from dltmode.core.evaluator import classify
from dltmode.core.metrics import PlanMetrics
from dltmode.core.planner import PipelinePlan, StepPlan, plan_pipeline

__all__ = [
    "Capability",
    "DECLARATIVE_SAFE",
    "IMPERATIVE_ONLY",
    "IMPERATIVE_PRIORITY",
    "parse_capability",
    "parse_capabilities",
    "classify",
    "plan_pipeline",
    "PipelinePlan",
    "StepPlan",
    "PlanMetrics",
    "DltModeError",
    "InvalidStepError",
    "CapabilityError",
    "PipelineError",
    "PlanError",
    "RenderError",
]

"""dltmode - SQL or Python for Delta Live Tables steps.

Classifies pipeline transformation steps by the capabilities they need and
tells whether a declarative SQL query is enough or a Python extension is
required.
"""

__version__ = "0.1.0"

# Core classification
from dltmode.core.capabilities import Capability
from dltmode.core.evaluator import classify

# Exceptions
from dltmode.core.exceptions import (
    CapabilityError,
    DltModeError,
    InvalidStepError,
    PipelineError,
    PlanError,
    RenderError,
)
from dltmode.core.planner import PipelinePlan, StepPlan

# Models
from dltmode.models.pipeline import PipelineDefinition
from dltmode.models.step import ExecutionMode, TransformationStep, Verdict

# Public API
from dltmode.api import from_yaml, plan, plan_from_yaml

__all__ = [
    # Version
    "__version__",
    # Public API
    "classify",
    "from_yaml",
    "plan",
    "plan_from_yaml",
    # Models
    "Capability",
    "ExecutionMode",
    "TransformationStep",
    "Verdict",
    "PipelineDefinition",
    "PipelinePlan",
    "StepPlan",
    # Exceptions
    "DltModeError",
    "InvalidStepError",
    "CapabilityError",
    "PipelineError",
    "PlanError",
    "RenderError",
]

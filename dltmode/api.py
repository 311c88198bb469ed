"""Public Python API for dltmode package.

This module provides the main entry points for classifying steps and
planning pipeline definitions.
"""

from dltmode.core.planner import PipelinePlan, plan_pipeline
from dltmode.models.loader import load_pipeline
from dltmode.models.pipeline import PipelineDefinition


def from_yaml(path: str, cli_vars: dict[str, str] | None = None) -> PipelineDefinition:
    """Load a pipeline definition from a YAML file.

    Resolves inheritance via the `extends` field and renders templates.

    Args:
        path: Path to pipeline YAML file
        cli_vars: Values for ``{{ var('KEY') }}`` templates

    Returns:
        Fully resolved PipelineDefinition instance

    Raises:
        PipelineError: If file not found, invalid YAML, validation fails, or cycle detected

    Example:
        >>> definition = from_yaml("examples/pipelines/taxi_trips.yaml")
        >>> print(definition.name)
        taxi_trips
    """
    return load_pipeline(path, cli_vars=cli_vars)


def plan(definition: PipelineDefinition) -> PipelinePlan:
    """Classify every step of a pipeline definition.

    Args:
        definition: Pipeline definition to plan

    Returns:
        PipelinePlan with one verdict per step

    Raises:
        InvalidStepError: If a step lists no capabilities
        PlanError: If the definition disallows imperative steps but needs one

    Example:
        >>> from dltmode import from_yaml, plan
        >>> result = plan(from_yaml("examples/pipelines/taxi_trips.yaml"))
        >>> result.language
        'python'
    """
    return plan_pipeline(definition)


def plan_from_yaml(
    path: str, cli_vars: dict[str, str] | None = None
) -> PipelinePlan:
    """Load and plan a pipeline definition from a YAML file.

    Convenience function that combines `from_yaml()` and `plan()`.
    """
    return plan(from_yaml(path, cli_vars=cli_vars))

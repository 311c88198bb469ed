"""Planner classifying every step of a pipeline definition."""

import logging
from dataclasses import dataclass, field
from typing import Any

from dltmode.core.evaluator import classify
from dltmode.core.exceptions import InvalidStepError, PlanError
from dltmode.core.metrics import PlanMetrics
from dltmode.models.pipeline import PipelineDefinition
from dltmode.models.step import TransformationStep, Verdict
from dltmode.models.step_config import StepConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepPlan:
    """Verdict for one step of a pipeline, alongside its configuration."""

    config: StepConfig
    step: TransformationStep
    verdict: Verdict

    @property
    def name(self) -> str:
        return self.config.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "capabilities": sorted(c.value for c in self.step.capabilities),
            **self.verdict.to_dict(),
        }


@dataclass
class PipelinePlan:
    """Per-step verdicts for a whole pipeline."""

    definition: PipelineDefinition
    steps: list[StepPlan] = field(default_factory=list)
    metrics: PlanMetrics | None = None

    @property
    def pipeline_name(self) -> str:
        return self.definition.name

    @property
    def imperative_steps(self) -> list[str]:
        return [s.name for s in self.steps if s.verdict.requires_imperative]

    @property
    def requires_imperative(self) -> bool:
        return any(s.verdict.requires_imperative for s in self.steps)

    @property
    def language(self) -> str:
        """Language the pipeline as a whole needs (python if any step does)."""
        return "python" if self.requires_imperative else "sql"

    def to_dict(self) -> dict[str, Any]:
        return {
            "pipeline": self.pipeline_name,
            "language": self.language,
            "requires_imperative": self.requires_imperative,
            "imperative_steps": self.imperative_steps,
            "steps": [s.to_dict() for s in self.steps],
            "metrics": self.metrics.to_dict() if self.metrics else None,
        }


def plan_pipeline(definition: PipelineDefinition) -> PipelinePlan:
    """Classify every step of a pipeline definition in order.

    Args:
        definition: Pipeline definition to plan

    Returns:
        PipelinePlan holding one StepPlan per step

    Raises:
        InvalidStepError: If a step lists no capabilities
        PlanError: If imperative steps are present but disallowed by settings
    """
    extra = {"pipeline_name": definition.name}
    logger.info(
        "Planning pipeline",
        extra={**extra, "context": {"steps": len(definition.steps)}},
    )

    metrics = PlanMetrics(pipeline_name=definition.name)
    plan = PipelinePlan(definition=definition, metrics=metrics)

    for step_index, config in enumerate(definition.steps):
        plan.steps.append(_plan_step(config, step_index, metrics, extra))

    metrics.finish()

    if plan.requires_imperative and not definition.settings.allow_imperative:
        offending = {
            s.name: s.verdict.forcing_capability.value
            for s in plan.steps
            if s.verdict.requires_imperative
        }
        error = PlanError(
            "Pipeline requires imperative steps but settings disallow them",
            context={
                "pipeline": definition.name,
                "steps": ", ".join(f"{k}:{v}" for k, v in offending.items()),
            },
        )
        logger.error(str(error), extra=extra)
        raise error

    logger.info(
        "Planning completed",
        extra={
            **extra,
            "context": {
                "language": plan.language,
                "declarative": metrics.declarative_steps,
                "imperative": metrics.imperative_steps,
            },
        },
    )
    return plan


def _plan_step(
    config: StepConfig,
    step_index: int,
    metrics: PlanMetrics,
    extra: dict[str, Any],
) -> StepPlan:
    step = config.to_step()
    try:
        verdict = classify(step)
    except InvalidStepError as e:
        logger.error(
            "Step has no capabilities",
            extra={**extra, "step_name": config.name},
            exc_info=True,
        )
        raise InvalidStepError(
            f"Step '{config.name}' has no capabilities to classify",
            context={"step_name": config.name, "step_index": step_index},
        ) from e

    metrics.record_verdict(verdict)
    logger.debug(
        "Step classified",
        extra={
            **extra,
            "step_name": config.name,
            "context": {"mode": verdict.mode.value},
        },
    )
    return StepPlan(config=config, step=step, verdict=verdict)

"""Render scaffolds for every step of a pipeline plan."""

from dataclasses import dataclass

from dltmode.core.planner import PipelinePlan, StepPlan
from dltmode.scaffold.registry import get_renderer


@dataclass(frozen=True)
class RenderedStep:
    """Scaffold source produced for one step."""

    step_name: str
    language: str
    filename: str
    source: str


def render_step(step_plan: StepPlan, language: str) -> RenderedStep:
    """Render one step in a language.

    Imperative steps are always rendered in Python.
    """
    if step_plan.verdict.requires_imperative:
        language = "python"
    renderer = get_renderer(language)
    return RenderedStep(
        step_name=step_plan.name,
        language=language,
        filename=f"{step_plan.name}.{renderer.extension}",
        source=renderer.render(step_plan),
    )


def render_plan(plan: PipelinePlan, language: str | None = None) -> list[RenderedStep]:
    """Render every step of a plan.

    Args:
        plan: Planned pipeline
        language: Language for declarative steps; defaults to the pipeline's
            ``settings.default_language``

    Returns:
        One RenderedStep per step, in pipeline order

    Raises:
        RenderError: If the language has no registered renderer
    """
    language = language or plan.definition.settings.default_language
    return [render_step(step_plan, language) for step_plan in plan.steps]

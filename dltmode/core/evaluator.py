"""Rule evaluator deciding the execution mode of a transformation step."""

import logging

from dltmode.core.capabilities import IMPERATIVE_PRIORITY
from dltmode.core.exceptions import InvalidStepError
from dltmode.models.step import ExecutionMode, TransformationStep, Verdict

logger = logging.getLogger(__name__)


def classify(step: TransformationStep) -> Verdict:
    """Decide whether a step fits a declarative query.

    A step needs an imperative extension as soon as it requires any
    imperative-only capability. When several are present the forcing
    capability is the first one in ``IMPERATIVE_PRIORITY``.

    Args:
        step: The step to classify.

    Returns:
        A fresh Verdict for the step.

    Raises:
        InvalidStepError: If the step requires no capabilities.
    """
    if not step.capabilities:
        raise InvalidStepError(
            "Transformation step has no capabilities to classify",
            context={"step_name": step.name} if step.name else None,
        )

    for capability in IMPERATIVE_PRIORITY:
        if capability in step.capabilities:
            logger.debug(
                "Step requires imperative extension",
                extra={"context": {"forcing_capability": capability.value}},
            )
            return Verdict(
                mode=ExecutionMode.IMPERATIVE_REQUIRED,
                forcing_capability=capability,
            )

    return Verdict(mode=ExecutionMode.DECLARATIVE_SUFFICIENT)

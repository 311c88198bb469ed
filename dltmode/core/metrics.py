"""Metrics collection for pipeline planning."""

import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Optional

from dltmode.models.step import Verdict


@dataclass
class PlanMetrics:
    """Collects metrics while a pipeline is being planned."""

    pipeline_name: str
    start_time: float = field(default_factory=time.time)
    end_time: Optional[float] = None

    steps_evaluated: int = 0
    declarative_steps: int = 0
    imperative_steps: int = 0
    execution_time: float = 0.0

    forcing_capabilities: Counter = field(default_factory=Counter)

    def record_verdict(self, verdict: Verdict) -> None:
        """Record the verdict of one evaluated step.

        Args:
            verdict: Verdict produced for the step
        """
        self.steps_evaluated += 1
        if verdict.requires_imperative:
            self.imperative_steps += 1
            self.forcing_capabilities[verdict.forcing_capability.value] += 1
        else:
            self.declarative_steps += 1

    def finish(self) -> None:
        """Mark planning as finished and calculate elapsed time."""
        self.end_time = time.time()
        self.execution_time = self.end_time - self.start_time

    def to_dict(self) -> dict[str, Any]:
        """Export metrics as dictionary."""
        return {
            "pipeline_name": self.pipeline_name,
            "execution_time": self.execution_time,
            "steps_evaluated": self.steps_evaluated,
            "declarative_steps": self.declarative_steps,
            "imperative_steps": self.imperative_steps,
            "forcing_capabilities": dict(self.forcing_capabilities),
        }

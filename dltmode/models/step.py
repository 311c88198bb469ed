"""Transformation step and verdict models."""

from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dltmode.core.capabilities import Capability, parse_capabilities


class ExecutionMode(str, Enum):
    """Engine a step needs to be evaluated by."""

    DECLARATIVE_SUFFICIENT = "declarative-sufficient"  # Plain DLT SQL
    IMPERATIVE_REQUIRED = "imperative-required"  # Python extension


class TransformationStep(BaseModel):
    """One unit of pipeline logic, described by the capabilities it needs.

    Steps compare and hash by their capability set only; ``name`` is carried
    for reporting.
    """

    model_config = ConfigDict(frozen=True)

    capabilities: frozenset[Capability] = Field(
        default_factory=frozenset, description="Capabilities the step requires"
    )
    name: Optional[str] = Field(
        default=None, description="Optional step name used in messages"
    )

    @field_validator("capabilities", mode="before")
    @classmethod
    def parse_names(cls, v):
        """Accept capability slugs and labels as well as enum members."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = [v]
        elif not isinstance(v, Iterable):
            raise ValueError(f"capabilities must be a collection of names, got {type(v).__name__}")
        return parse_capabilities(v)

    @classmethod
    def of(cls, *capabilities: str | Capability, name: str | None = None) -> "TransformationStep":
        """Build a step from capability names."""
        return cls(capabilities=frozenset(parse_capabilities(capabilities)), name=name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransformationStep):
            return NotImplemented
        return self.capabilities == other.capabilities

    def __hash__(self) -> int:
        return hash(self.capabilities)


class Verdict(BaseModel):
    """Outcome of classifying a single step."""

    model_config = ConfigDict(frozen=True)

    mode: ExecutionMode = Field(description="Execution mode the step needs")
    forcing_capability: Optional[Capability] = Field(
        default=None,
        description="Capability that forced an imperative verdict",
    )

    @property
    def requires_imperative(self) -> bool:
        return self.mode is ExecutionMode.IMPERATIVE_REQUIRED

    @property
    def language(self) -> str:
        """DLT language the step should be written in."""
        return "python" if self.requires_imperative else "sql"

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.value,
            "forcing_capability": (
                self.forcing_capability.value if self.forcing_capability else None
            ),
            "language": self.language,
        }

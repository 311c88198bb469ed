"""Capability vocabulary for pipeline transformation steps.

A capability names something a step needs from the engine that evaluates it.
Declarative-safe capabilities are covered by Delta Live Tables SQL; any
imperative-only capability means the step needs a Python extension.
"""

from enum import Enum
from typing import Iterable

from dltmode.core.exceptions import CapabilityError


class Capability(str, Enum):
    """Named requirement of a transformation step."""

    SCHEMA_ON_READ_INGESTION = "schema_on_read_ingestion"
    TYPE_CAST = "type_cast"
    STRING_FUNCTION = "string_function"
    CONSTRAINT_CHECK = "constraint_check"
    AGGREGATION = "aggregation"
    JOIN = "join"
    STREAMING_READ = "streaming_read"
    EXTERNAL_MODEL_INFERENCE = "external_model_inference"
    EXTERNAL_API_CALL = "external_api_call"
    CUSTOM_BINARY_PARSING = "custom_binary_parsing"
    DYNAMIC_GENERATION = "dynamic_generation"
    ARBITRARY_UDF = "arbitrary_udf"

    @property
    def label(self) -> str:
        return CAPABILITY_LABELS[self]

    @property
    def imperative_only(self) -> bool:
        return self in IMPERATIVE_ONLY


CAPABILITY_LABELS: dict[Capability, str] = {
    Capability.SCHEMA_ON_READ_INGESTION: "schema-on-read ingestion",
    Capability.TYPE_CAST: "type cast",
    Capability.STRING_FUNCTION: "string function",
    Capability.CONSTRAINT_CHECK: "constraint check",
    Capability.AGGREGATION: "aggregation",
    Capability.JOIN: "join",
    Capability.STREAMING_READ: "streaming read",
    Capability.EXTERNAL_MODEL_INFERENCE: "external model inference",
    Capability.EXTERNAL_API_CALL: "external API call",
    Capability.CUSTOM_BINARY_PARSING: "custom binary format parsing",
    Capability.DYNAMIC_GENERATION: "dynamic generation from config",
    Capability.ARBITRARY_UDF: "arbitrary user-defined function",
}

# Highest priority first; the first one present forces the verdict.
IMPERATIVE_PRIORITY: tuple[Capability, ...] = (
    Capability.EXTERNAL_MODEL_INFERENCE,
    Capability.EXTERNAL_API_CALL,
    Capability.CUSTOM_BINARY_PARSING,
    Capability.DYNAMIC_GENERATION,
    Capability.ARBITRARY_UDF,
)

IMPERATIVE_ONLY: frozenset[Capability] = frozenset(IMPERATIVE_PRIORITY)

DECLARATIVE_SAFE: frozenset[Capability] = frozenset(
    c for c in Capability if c not in IMPERATIVE_ONLY
)


def _normalize(name: str) -> str:
    return "_".join(name.strip().lower().replace("-", " ").split())


_LOOKUP: dict[str, Capability] = {}
for _capability in Capability:
    _LOOKUP[_capability.value] = _capability
    _LOOKUP[_normalize(_capability.label)] = _capability


def parse_capability(name: str | Capability) -> Capability:
    """Resolve a capability from its slug or label.

    Matching is case-insensitive and treats hyphens, spaces and underscores
    alike, so ``"Type Cast"``, ``"type-cast"`` and ``"type_cast"`` all resolve
    to :attr:`Capability.TYPE_CAST`.

    Raises:
        CapabilityError: If the name is not part of the vocabulary.
    """
    if isinstance(name, Capability):
        return name
    if not isinstance(name, str):
        raise CapabilityError(
            "Capability names must be strings",
            context={"value": repr(name)},
        )
    capability = _LOOKUP.get(_normalize(name))
    if capability is None:
        available = ", ".join(c.value for c in Capability)
        raise CapabilityError(
            f"Unknown capability: '{name}'",
            context={"capability": name, "available": available},
        )
    return capability


def parse_capabilities(names: Iterable[str | Capability]) -> frozenset[Capability]:
    """Resolve a collection of capability names into a frozenset."""
    return frozenset(parse_capability(name) for name in names)

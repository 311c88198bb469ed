"""Tests for TransformationStep and Verdict models."""

import pytest
from pydantic import ValidationError

from dltmode.core.capabilities import Capability
from dltmode.core.evaluator import classify
from dltmode.core.exceptions import CapabilityError, InvalidStepError
from dltmode.models.step import ExecutionMode, TransformationStep, Verdict


class TestTransformationStep:
    """Tests for TransformationStep."""

    def test_accepts_names_and_labels(self):
        step = TransformationStep(capabilities=["type cast", "join"])
        assert step.capabilities == frozenset({Capability.TYPE_CAST, Capability.JOIN})

    def test_single_string_capability(self):
        step = TransformationStep(capabilities="aggregation")
        assert step.capabilities == frozenset({Capability.AGGREGATION})

    def test_default_is_empty(self):
        assert TransformationStep().capabilities == frozenset()

    def test_none_is_empty(self):
        step = TransformationStep(capabilities=None)
        assert step.capabilities == frozenset()
        with pytest.raises(InvalidStepError):
            classify(step)

    def test_non_collection_rejected(self):
        with pytest.raises(ValidationError):
            TransformationStep(capabilities=5)

    def test_unknown_capability_raises(self):
        with pytest.raises(CapabilityError):
            TransformationStep.of("quantum_join")

    def test_is_immutable(self):
        step = TransformationStep.of("join")
        with pytest.raises(ValidationError):
            step.capabilities = frozenset()

    def test_equality_ignores_name(self):
        a = TransformationStep.of("join", "type_cast", name="a")
        b = TransformationStep.of("type_cast", "join", name="b")
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1


class TestVerdict:
    """Tests for Verdict."""

    def test_declarative_defaults(self):
        verdict = Verdict(mode=ExecutionMode.DECLARATIVE_SUFFICIENT)
        assert verdict.forcing_capability is None
        assert not verdict.requires_imperative
        assert verdict.to_dict() == {
            "mode": "declarative-sufficient",
            "forcing_capability": None,
            "language": "sql",
        }

    def test_imperative_to_dict(self):
        verdict = Verdict(
            mode=ExecutionMode.IMPERATIVE_REQUIRED,
            forcing_capability=Capability.EXTERNAL_API_CALL,
        )
        assert verdict.to_dict()["forcing_capability"] == "external_api_call"
        assert verdict.to_dict()["language"] == "python"

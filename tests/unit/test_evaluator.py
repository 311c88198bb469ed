"""Tests for the rule evaluator."""

import itertools

import pytest

from dltmode.core.capabilities import (
    DECLARATIVE_SAFE,
    IMPERATIVE_ONLY,
    IMPERATIVE_PRIORITY,
    Capability,
)
from dltmode.core.evaluator import classify
from dltmode.core.exceptions import DltModeError, InvalidStepError
from dltmode.models.step import ExecutionMode, TransformationStep


class TestScenarios:
    """Concrete classification scenarios."""

    def test_cast_and_string_function_is_declarative(self):
        verdict = classify(TransformationStep.of("type_cast", "string_function"))
        assert verdict.mode is ExecutionMode.DECLARATIVE_SUFFICIENT
        assert verdict.forcing_capability is None
        assert verdict.language == "sql"

    def test_aggregation_join_constraint_is_declarative(self):
        verdict = classify(
            TransformationStep.of("aggregation", "join", "constraint_check")
        )
        assert verdict.mode is ExecutionMode.DECLARATIVE_SUFFICIENT

    def test_model_inference_is_imperative(self):
        verdict = classify(TransformationStep.of("external_model_inference"))
        assert verdict.mode is ExecutionMode.IMPERATIVE_REQUIRED
        assert verdict.forcing_capability is Capability.EXTERNAL_MODEL_INFERENCE
        assert verdict.language == "python"

    def test_api_call_outranks_binary_parsing(self):
        verdict = classify(
            TransformationStep.of(
                "type_cast", "custom_binary_parsing", "external_api_call"
            )
        )
        assert verdict.mode is ExecutionMode.IMPERATIVE_REQUIRED
        assert verdict.forcing_capability is Capability.EXTERNAL_API_CALL

    def test_empty_step_raises_every_time(self):
        step = TransformationStep()
        for _ in range(3):
            with pytest.raises(InvalidStepError):
                classify(step)

    def test_invalid_step_error_is_dltmode_error(self):
        with pytest.raises(DltModeError):
            classify(TransformationStep(capabilities=[]))


class TestProperties:
    """Exhaustive checks over the capability vocabulary."""

    def test_declarative_subsets_are_declarative(self):
        safe = sorted(DECLARATIVE_SAFE, key=lambda c: c.value)
        for size in range(1, len(safe) + 1):
            for combo in itertools.combinations(safe, size):
                verdict = classify(TransformationStep(capabilities=frozenset(combo)))
                assert verdict.mode is ExecutionMode.DECLARATIVE_SUFFICIENT

    def test_highest_priority_imperative_capability_is_reported(self):
        imperative = list(IMPERATIVE_PRIORITY)
        for size in range(1, len(imperative) + 1):
            for combo in itertools.combinations(imperative, size):
                capabilities = frozenset(combo) | {Capability.JOIN}
                verdict = classify(TransformationStep(capabilities=capabilities))
                expected = next(c for c in IMPERATIVE_PRIORITY if c in capabilities)
                assert verdict.requires_imperative
                assert verdict.forcing_capability is expected

    @pytest.mark.parametrize("capability", sorted(IMPERATIVE_ONLY, key=lambda c: c.value))
    def test_single_imperative_capability_forces_itself(self, capability):
        verdict = classify(TransformationStep(capabilities={capability}))
        assert verdict.forcing_capability is capability

    def test_classify_is_idempotent(self):
        step = TransformationStep.of("join", "arbitrary_udf", "dynamic_generation")
        assert classify(step) == classify(step)
        assert classify(step).forcing_capability is Capability.DYNAMIC_GENERATION

    def test_classify_does_not_mutate_step(self):
        step = TransformationStep.of("join", "external_api_call")
        before = step.capabilities
        classify(step)
        assert step.capabilities == before

"""Tests for the capability vocabulary."""

import pytest

from dltmode.core.capabilities import (
    DECLARATIVE_SAFE,
    IMPERATIVE_ONLY,
    IMPERATIVE_PRIORITY,
    Capability,
    parse_capabilities,
    parse_capability,
)
from dltmode.core.exceptions import CapabilityError


class TestVocabulary:
    """Tests for capability classes."""

    def test_classes_partition_vocabulary(self):
        assert DECLARATIVE_SAFE | IMPERATIVE_ONLY == frozenset(Capability)
        assert not DECLARATIVE_SAFE & IMPERATIVE_ONLY

    def test_priority_order(self):
        assert IMPERATIVE_PRIORITY == (
            Capability.EXTERNAL_MODEL_INFERENCE,
            Capability.EXTERNAL_API_CALL,
            Capability.CUSTOM_BINARY_PARSING,
            Capability.DYNAMIC_GENERATION,
            Capability.ARBITRARY_UDF,
        )

    def test_imperative_only_property(self):
        assert Capability.EXTERNAL_API_CALL.imperative_only
        assert not Capability.JOIN.imperative_only

    def test_every_capability_has_label(self):
        for capability in Capability:
            assert capability.label


class TestParseCapability:
    """Tests for parse_capability."""

    @pytest.mark.parametrize(
        "name",
        ["type_cast", "type cast", "Type-Cast", "  TYPE CAST  ", Capability.TYPE_CAST],
    )
    def test_name_variants(self, name):
        assert parse_capability(name) is Capability.TYPE_CAST

    def test_label_with_extra_words(self):
        assert (
            parse_capability("custom binary format parsing")
            is Capability.CUSTOM_BINARY_PARSING
        )
        assert parse_capability("schema-on-read ingestion") is Capability.SCHEMA_ON_READ_INGESTION

    def test_unknown_name_raises(self):
        with pytest.raises(CapabilityError) as exc_info:
            parse_capability("teleportation")
        assert "teleportation" in str(exc_info.value)
        assert "available" in exc_info.value.context

    def test_non_string_raises(self):
        with pytest.raises(CapabilityError):
            parse_capability(42)

    def test_parse_capabilities_deduplicates(self):
        result = parse_capabilities(["join", "JOIN", "aggregation"])
        assert result == frozenset({Capability.JOIN, Capability.AGGREGATION})

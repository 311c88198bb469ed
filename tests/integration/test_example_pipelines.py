"""Integration tests planning the example pipeline definitions."""

import pytest

from dltmode import PlanError, from_yaml, plan_from_yaml
from dltmode.core.capabilities import Capability
from dltmode.scaffold import render_plan


@pytest.mark.integration
class TestExamplePipelines:
    """Integration tests over examples/pipelines."""

    def test_taxi_trips(self, examples_dir, monkeypatch):
        monkeypatch.setenv("FARE_MODEL_STAGE", "Production")
        plan = plan_from_yaml(str(examples_dir / "taxi_trips.yaml"))
        assert [s.name for s in plan.steps] == [
            "bronze_trips",
            "silver_trips",
            "gold_daily_trips",
            "scored_trips",
        ]
        assert plan.imperative_steps == ["scored_trips"]
        assert plan.steps[-1].verdict.forcing_capability is Capability.EXTERNAL_MODEL_INFERENCE

        rendered = {r.step_name: r for r in render_plan(plan)}
        assert rendered["bronze_trips"].language == "sql"
        assert "cloud_files('/mnt/landing/taxi_trips', 'parquet')" in rendered["bronze_trips"].source
        assert "models:/fare_model/Production" in rendered["scored_trips"].source

    def test_sql_only(self, examples_dir):
        plan = plan_from_yaml(str(examples_dir / "sql_only.yaml"))
        assert plan.language == "sql"
        assert plan.definition.get_step("gold_zone_totals").comment == "Totals per zone for sql_only"

    def test_api_enrichment_disallowed(self, examples_dir):
        with pytest.raises(PlanError) as exc_info:
            plan_from_yaml(str(examples_dir / "api_enrichment.yaml"))
        assert "enriched_trips:external_api_call" in str(exc_info.value)

    def test_delete_steps(self, examples_dir):
        definition = from_yaml(str(examples_dir / "delete_steps.yaml"))
        assert definition.steps == []
        assert definition.settings.default_language == "sql"

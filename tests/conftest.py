"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path

import pytest
import yaml

EXAMPLES_DIR = Path(__file__).parent.parent / "examples" / "pipelines"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def pipeline_dir(temp_dir):
    """Create a pipelines subdirectory in temp_dir."""
    pipelines_dir = temp_dir / "pipelines"
    pipelines_dir.mkdir()
    return pipelines_dir


@pytest.fixture
def write_pipeline(pipeline_dir):
    """Write a pipeline definition dict as YAML and return its path."""

    def _write(filename: str, definition: dict) -> Path:
        path = pipeline_dir / filename
        path.write_text(yaml.safe_dump(definition, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def examples_dir():
    """Directory holding the example pipeline definitions."""
    return EXAMPLES_DIR


@pytest.fixture
def mixed_definition():
    """Definition with one declarative and one imperative step."""
    return {
        "name": "mixed",
        "steps": [
            {
                "name": "silver_orders",
                "capabilities": ["type_cast", "constraint_check"],
                "source": "bronze_orders",
            },
            {
                "name": "scored_orders",
                "capabilities": ["external_model_inference", "join"],
                "source": "silver_orders",
                "options": {"model_uri": "models:/churn/Production"},
            },
        ],
    }

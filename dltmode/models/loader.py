"""Pipeline definition loader.

A definition file may extend another one. Files are read parent-first,
merged, stripped of their ``delete`` paths, then templates are rendered
over the merged result and the outcome is validated.
"""

from pathlib import Path
from typing import Any

import yaml

from dltmode.core.exceptions import DltModeError, PipelineError
from dltmode.models.merger import apply_delete_semantics, merge_definitions
from dltmode.models.pipeline import PipelineDefinition
from dltmode.models.templates import contains_template, render_templates


def load_pipeline(
    path: str, cli_vars: dict[str, str] | None = None
) -> PipelineDefinition:
    """
    Load a pipeline definition from YAML with inheritance resolution.

    Args:
        path: Path to pipeline YAML file
        cli_vars: Variables passed via CLI (e.g., --vars key=value)

    Returns:
        Fully resolved PipelineDefinition instance

    Raises:
        PipelineError: If a file is missing or malformed, the ``extends``
            chain loops, structural fields are templated, or validation fails
        CapabilityError: If a step names a capability outside the vocabulary
    """
    definition = _DefinitionReader().read(Path(path))
    definition = render_templates(definition, cli_vars)

    try:
        return PipelineDefinition.from_dict(definition)
    except DltModeError:
        raise
    except Exception as e:
        raise PipelineError(
            f"Pipeline validation failed: {e}", context={"path": str(path)}
        ) from e


class _DefinitionReader:
    """Reads one definition file and, recursively, the files it extends."""

    def __init__(self):
        self.chain: list[Path] = []

    def read(self, path: Path) -> dict[str, Any]:
        path = path.resolve()
        if path in self.chain:
            loop = " -> ".join(p.name for p in [*self.chain, path])
            raise PipelineError(
                f"Cycle detected in pipeline inheritance: {loop}",
                context={"path": str(path)},
            )

        self.chain.append(path)
        try:
            definition = self._parse(path)
            _reject_structural_templates(definition, path)

            extends = definition.get("extends")
            if extends:
                parent = self.read(self._parent_path(extends, path))
                definition = merge_definitions(parent, definition)

            delete_paths = definition.pop("delete", None) or []
            if delete_paths:
                definition = apply_delete_semantics(definition, delete_paths)
        finally:
            self.chain.pop()

        return definition

    def _parse(self, path: Path) -> dict[str, Any]:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise PipelineError(
                f"Pipeline file not found: {path}", context=self._context(path)
            ) from None

        try:
            definition = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise PipelineError(
                f"Invalid YAML in pipeline file: {e}", context=self._context(path)
            ) from e

        if not isinstance(definition, dict):
            raise PipelineError(
                "Pipeline file must contain a YAML dictionary",
                context=self._context(path),
            )
        return definition

    def _parent_path(self, extends: Any, path: Path) -> Path:
        if not isinstance(extends, str):
            raise PipelineError(
                "'extends' must be a file path", context=self._context(path)
            )
        parent = path.parent / extends
        if not parent.exists():
            raise PipelineError(
                f"Parent pipeline not found: {extends}",
                context={**self._context(path), "extends": extends},
            )
        return parent

    def _context(self, path: Path) -> dict[str, str]:
        context = {"path": str(path)}
        if len(self.chain) > 1:
            context["extended_by"] = " <- ".join(p.name for p in reversed(self.chain[:-1]))
        return context


def _reject_structural_templates(definition: dict[str, Any], path: Path) -> None:
    """Step names, capabilities and ``extends`` must be literal: they are read before templates are rendered."""
    offending = []
    if contains_template(definition.get("extends")):
        offending.append("extends")

    steps = definition.get("steps")
    if isinstance(steps, list):
        for i, step in enumerate(steps):
            if not isinstance(step, dict):
                continue
            if contains_template(step.get("name")):
                offending.append(f"steps[{i}].name")
            capabilities = step.get("capabilities")
            if isinstance(capabilities, list):
                offending += [
                    f"steps[{i}].capabilities[{j}]"
                    for j, name in enumerate(capabilities)
                    if contains_template(name)
                ]

    if offending:
        raise PipelineError(
            "Templates are not allowed in step names, capabilities or extends",
            context={"path": str(path), "fields": ", ".join(offending)},
        )

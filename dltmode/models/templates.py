"""Template expressions in pipeline definition values.

Three expressions are understood inside ``{{ ... }}``:

- ``env_var('KEY')``: environment variable
- ``var('KEY')``: variable passed with ``--vars KEY=value``
- ``pipeline.name``: name of the pipeline being loaded

Errors name the location of the offending value, e.g.
``steps[1].options.model_uri``.
"""

import os
import re
from typing import Any, Callable, Mapping

from dltmode.core.exceptions import PipelineError

TEMPLATE_PATTERN = re.compile(r"\{\{\s*(.+?)\s*\}\}")
_CALL_PATTERN = re.compile(r"(\w+)\(\s*(['\"])(.+?)\2\s*\)")


def contains_template(value: Any) -> bool:
    """Return True if a string value holds a template expression."""
    return isinstance(value, str) and TEMPLATE_PATTERN.search(value) is not None


class TemplateRenderer:
    """Resolves template expressions against one pipeline's variables."""

    def __init__(
        self,
        pipeline_name: str,
        cli_vars: Mapping[str, str] | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self.cli_vars = dict(cli_vars or {})
        self.environ = os.environ if environ is None else environ
        self.attributes = {"pipeline.name": pipeline_name}
        self.functions: dict[str, Callable[[str], str]] = {
            "env_var": self._env_var,
            "var": self._cli_var,
        }

    def render(self, value: Any, location: str = "") -> Any:
        """Render every string found in a (nested) value."""
        if isinstance(value, dict):
            return {
                key: self.render(item, f"{location}.{key}" if location else str(key))
                for key, item in value.items()
            }
        if isinstance(value, list):
            return [self.render(item, f"{location}[{i}]") for i, item in enumerate(value)]
        if isinstance(value, str):
            return TEMPLATE_PATTERN.sub(
                lambda match: self.resolve(match.group(1), location), value
            )
        return value

    def resolve(self, expr: str, location: str = "") -> str:
        """Evaluate a single expression (without the braces)."""
        call = _CALL_PATTERN.fullmatch(expr)
        if call:
            func = self.functions.get(call.group(1))
            if func is None:
                raise PipelineError(
                    f"Unknown function: {call.group(1)}",
                    context={"expression": expr, "location": location},
                )
            try:
                return func(call.group(3))
            except PipelineError as e:
                e.context.setdefault("location", location)
                raise

        if expr in self.attributes:
            return str(self.attributes[expr])

        raise PipelineError(
            f"Template rendering failed: {expr}",
            context={
                "expression": expr,
                "location": location,
                "available": ", ".join(sorted([*self.attributes, *self.functions])),
            },
        )

    def _env_var(self, key: str) -> str:
        value = self.environ.get(key)
        if value is None:
            raise PipelineError(
                f"Environment variable '{key}' not found",
                context={"key": key},
            )
        return value

    def _cli_var(self, key: str) -> str:
        if key not in self.cli_vars:
            raise PipelineError(
                f"CLI variable '{key}' not provided",
                context={"key": key, "available": list(self.cli_vars.keys())},
            )
        return self.cli_vars[key]


def render_templates(
    definition: dict[str, Any], cli_vars: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Render all template expressions in a merged definition."""
    renderer = TemplateRenderer(definition.get("name", ""), cli_vars)
    return renderer.render(definition)

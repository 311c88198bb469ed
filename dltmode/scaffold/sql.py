"""SQL scaffold renderer for declarative steps."""

from dltmode.core.capabilities import Capability
from dltmode.core.exceptions import RenderError
from dltmode.scaffold.registry import register_renderer


@register_renderer("sql")
class SqlRenderer:
    """Renders a ``CREATE OR REFRESH LIVE TABLE`` statement."""

    extension = "sql"

    def render(self, step_plan) -> str:
        if step_plan.verdict.requires_imperative:
            raise RenderError(
                "Step cannot be expressed in SQL",
                context={
                    "step_name": step_plan.name,
                    "forcing_capability": step_plan.verdict.forcing_capability.value,
                },
            )

        capabilities = step_plan.step.capabilities
        config = step_plan.config
        streaming = (
            Capability.STREAMING_READ in capabilities
            or Capability.SCHEMA_ON_READ_INGESTION in capabilities
        )

        lines = [
            f"-- capabilities: {', '.join(sorted(c.value for c in capabilities))}",
            f"CREATE OR REFRESH {'STREAMING ' if streaming else ''}LIVE TABLE {config.name}",
        ]
        if Capability.CONSTRAINT_CHECK in capabilities:
            constraint = config.options.get("expect", "true")
            lines.append(f"  (CONSTRAINT {config.name}_valid EXPECT ({constraint}) ON VIOLATION DROP ROW)")
        if config.comment:
            lines.append(f"COMMENT {_quote(config.comment)}")
        lines.append("AS SELECT *")
        lines.append(f"FROM {self._source(config, capabilities)};")
        return "\n".join(lines) + "\n"

    def _source(self, config, capabilities) -> str:
        source = config.source or "<source>"
        if Capability.SCHEMA_ON_READ_INGESTION in capabilities:
            file_format = config.options.get("format", "json")
            return f"cloud_files({_quote(source)}, {_quote(file_format)})"
        if Capability.STREAMING_READ in capabilities:
            return f"STREAM(LIVE.{source})"
        return f"LIVE.{source}"


def _quote(text: str) -> str:
    escaped = str(text).replace("'", "''")
    return f"'{escaped}'"

"""Python scaffold renderer for DLT steps."""

from dltmode.core.capabilities import Capability
from dltmode.scaffold.registry import register_renderer


@register_renderer("python")
class PythonRenderer:
    """Renders a ``@dlt.table`` decorated function."""

    extension = "py"

    def render(self, step_plan) -> str:
        config = step_plan.config
        capabilities = step_plan.step.capabilities
        verdict = step_plan.verdict

        lines = ["import dlt"]
        if Capability.EXTERNAL_MODEL_INFERENCE in capabilities:
            lines.append("import mlflow")
        lines += ["", ""]

        if verdict.requires_imperative:
            lines.append(f"# forced by: {verdict.forcing_capability.label}")
        table_args = [f"name={config.name!r}"]
        if config.comment:
            table_args.append(f"comment={config.comment!r}")
        lines.append(f"@dlt.table({', '.join(table_args)})")
        if Capability.CONSTRAINT_CHECK in capabilities:
            constraint = config.options.get("expect", "true")
            lines.append(f"@dlt.expect_or_drop({config.name + '_valid'!r}, {constraint!r})")
        lines.append(f"def {config.name}():")
        lines.append(f"    df = {self._read(config, capabilities)}")

        if Capability.EXTERNAL_MODEL_INFERENCE in capabilities:
            lines += self._predict(config)
        else:
            lines.append("    return df")
        return "\n".join(lines) + "\n"

    def _predict(self, config) -> list[str]:
        model_uri = config.options.get("model_uri", "models:/<model>/Production")
        features = config.options.get("features")
        if features:
            features_line = f"    features = {list(features)!r}"
        else:
            features_line = "    features = df.columns  # model input columns"
        return [
            features_line,
            f"    predict = mlflow.pyfunc.spark_udf(spark, {model_uri!r})",
            '    return df.withColumn("prediction", predict(*features))',
        ]

    def _read(self, config, capabilities) -> str:
        source = config.source or "<source>"
        if Capability.SCHEMA_ON_READ_INGESTION in capabilities:
            file_format = config.options.get("format", "json")
            return (
                'spark.readStream.format("cloudFiles")'
                f'.option("cloudFiles.format", {file_format!r}).load({source!r})'
            )
        if Capability.STREAMING_READ in capabilities:
            return f"dlt.read_stream({source!r})"
        return f"dlt.read({source!r})"

"""Exception hierarchy for the dltmode package."""


class DltModeError(Exception):
    """Base exception for all dltmode errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidStepError(DltModeError):
    """Raised when a transformation step has nothing to classify."""

    pass


class CapabilityError(DltModeError):
    """Raised when a capability name is not part of the vocabulary."""

    pass


class PipelineError(DltModeError):
    """Raised when pipeline definition parsing or validation fails."""

    pass


class PlanError(DltModeError):
    """Raised when a pipeline cannot be planned under its settings."""

    pass


class RenderError(DltModeError):
    """Raised when scaffold rendering fails."""

    pass

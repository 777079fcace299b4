"""Contains results of a publish run."""

from enum import Enum


class PublishOutcome(Enum):
    """Enum for publish outcomes."""

    SKIPPED = "skipped"
    PUBLISHED = "published"
    FAILED = "failed"


class StepResult:
    """Contains the result of a single publish step."""

    def __init__(self, name: str, error: Exception | None = None) -> None:
        """Initialize the result with the step name and the error it failed with, if any."""
        self.name = name
        self.error = error

    @property
    def succeeded(self) -> bool:
        """Whether the step completed without error."""
        return self.error is None


class PublishResult:
    """Contains results of the publish workflow."""

    def __init__(self, outcome: PublishOutcome, step_results: list[StepResult] | None = None, skip_reasons: list[str] | None = None) -> None:
        """Initialize the result with the outcome, the steps that ran, and why publishing was skipped."""
        self.outcome = outcome
        self.step_results = step_results or []
        self.skip_reasons = skip_reasons or []

    @property
    def failed_step(self) -> StepResult | None:
        """The step that halted the pipeline, if any."""
        for step_result in self.step_results:
            if not step_result.succeeded:
                return step_result
        return None

"""Named publish steps and the combinator that runs them."""

import time
from collections.abc import Callable

import structlog

from github_pages_publisher.publishing.exceptions import StepFailedError
from github_pages_publisher.publishing.results import StepResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class PublishStep:
    """A named action in the publish pipeline."""

    def __init__(self, name: str, action: Callable[[], object]) -> None:
        """Initialize the step with its name and the callable that performs it."""
        self.name = name
        self.action = action

    def __repr__(self) -> str:
        """Show the step name."""
        return f"PublishStep(name={self.name!r})"


def run_steps(steps: list[PublishStep]) -> list[StepResult]:
    """Run steps in order, stopping at the first one that fails.

    A step fails when its action raises StepFailedError or OSError. Any other
    exception is a bug and propagates. Steps that already completed are not
    undone.

    Returns:
        list[StepResult]: One result per step that ran; the last one is the
        failure, if there was one.
    """
    results: list[StepResult] = []
    for step in steps:
        start_time = time.time()
        logger.info("Running publish step", step=step.name)
        try:
            step.action()
        except (StepFailedError, OSError) as exc:
            logger.error("Publish step failed", step=step.name, error=str(exc), duration=round(time.time() - start_time, 2))
            results.append(StepResult(step.name, error=exc))
            break
        logger.info("Completed publish step", step=step.name, duration=round(time.time() - start_time, 2))
        results.append(StepResult(step.name))
    return results

"""Decides whether the current build is allowed to publish documentation."""

import structlog

from github_pages_publisher.configuration.models import PublishConfig
from github_pages_publisher.utils.constants import NOT_A_PULL_REQUEST

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class GuardDecision:
    """Contains the result of evaluating the publish guard."""

    def __init__(self, reasons: list[str]) -> None:
        """Initialize the decision with the reasons the guard was not met."""
        self.reasons = reasons

    @property
    def passed(self) -> bool:
        """Whether every guard signal matched."""
        return not self.reasons


def evaluate_guard(config: PublishConfig) -> GuardDecision:
    """Compare the three build signals against their required values.

    Every comparison is an exact, case-sensitive string match. The
    pull-request signal only passes for the literal string "false".
    """
    reasons: list[str] = []
    if config.repo_slug != config.expected_repo_slug:
        reasons.append(f"repository slug '{config.repo_slug}' is not '{config.expected_repo_slug}'")
    if config.is_pull_request != NOT_A_PULL_REQUEST:
        reasons.append(f"pull request signal '{config.is_pull_request}' is not '{NOT_A_PULL_REQUEST}'")
    if config.branch != config.expected_branch:
        reasons.append(f"branch '{config.branch}' is not '{config.expected_branch}'")

    decision = GuardDecision(reasons)
    logger.debug("Evaluated publish guard", passed=decision.passed, reasons=reasons)
    return decision

"""Orchestrates the conditional documentation publish."""

from collections.abc import Callable

import structlog
import typer

from github_pages_publisher.configuration.models import PublishConfig
from github_pages_publisher.configuration.reconcile import validate_push_credentials
from github_pages_publisher.publishing.abc import PublishToolsBase
from github_pages_publisher.publishing.guard import evaluate_guard
from github_pages_publisher.publishing.redirect import write_redirect_page
from github_pages_publisher.publishing.results import PublishOutcome, PublishResult
from github_pages_publisher.publishing.steps import PublishStep, run_steps
from github_pages_publisher.utils.constants import SKIP_NOTICE, START_NOTICE, UPDATED_NOTICE
from github_pages_publisher.utils import build_push_url

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def build_publish_steps(config: PublishConfig, tools: PublishToolsBase, remote_url: str) -> list[PublishStep]:
    """Build the ordered publish pipeline: generate, stamp, ensure-importer, import, push."""
    return [
        PublishStep("generate", tools.generate_docs),
        PublishStep("stamp", lambda: write_redirect_page(config.output_dir, config.package_name)),
        PublishStep("ensure-importer", tools.install_importer),
        PublishStep("import", lambda: tools.import_directory(config.doc_dir, config.pages_branch, config.commit_message)),
        PublishStep("push", lambda: tools.push_ref(remote_url, config.pages_branch)),
    ]


def maybe_publish(config: PublishConfig, tools: PublishToolsBase, echo: Callable[[str], object] = typer.echo) -> PublishResult:
    """Publish documentation if the build signals allow it.

    When the guard is not met nothing is written and no tool runs. Otherwise
    every step runs in order and the first failure halts the rest.

    Args:
        config (PublishConfig): Build signals and publishing settings.
        tools (PublishToolsBase): The external tools to delegate to.
        echo (Callable[[str], object]): Sink for the human-readable notices.

    Raises:
        RequiredConfigurationElementError: If the guard passes but no token is configured.

    Returns:
        PublishResult: The outcome and the steps that ran.
    """
    decision = evaluate_guard(config)
    if not decision.passed:
        logger.info("Publish guard not met, skipping", reasons=decision.reasons)
        echo(SKIP_NOTICE)
        return PublishResult(PublishOutcome.SKIPPED, skip_reasons=decision.reasons)

    token = validate_push_credentials(config)
    remote_url = build_push_url(token, config.repo_slug, config.remote_host)

    echo(START_NOTICE)
    logger.info("Publishing documentation", repo=config.repo_slug, doc_dir=str(config.doc_dir), pages_branch=config.pages_branch)
    step_results = run_steps(build_publish_steps(config, tools, remote_url))
    result = PublishResult(PublishOutcome.PUBLISHED, step_results=step_results)
    if result.failed_step is not None:
        result.outcome = PublishOutcome.FAILED
        logger.error("Publishing documentation failed", step=result.failed_step.name)
        return result

    echo(UPDATED_NOTICE)
    return result
